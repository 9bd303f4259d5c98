# ContextEngine/context.py
"""
Command-line front end for the extraction engine.

Each subcommand maps onto one public operation and prints its result to
stdout. Configuration comes from the environment (see config.load_config)
and may be overridden per call with --force-markers / --targeted.

Exit status is 1 when an extraction error is raised, 0 otherwise. An empty
result (e.g. no enclosing block) prints nothing and still exits 0.
"""
from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import List, Optional

# local imports
from . import logger
from .config import TOOL_VERSION, EngineConfig, load_config, log_level_from_env
from .core import (
    ContextExtractionError,
    extract_enclosing_block_from_file,
    extract_enclosing_type,
    extract_instruction_from_file,
    extract_types_from_file,
    process_file,
    process_file_or_raw,
    render_visible,
)
from .utils import read_source, write_types_file


# ================== Subcommands ==================
def _cmd_filter(args: argparse.Namespace, config: EngineConfig) -> Optional[str]:
    return render_visible(read_source(args.file), config)


def _cmd_enclose(args: argparse.Namespace, config: EngineConfig) -> Optional[str]:
    return extract_enclosing_block_from_file(args.file, read_source(args.file), config)


def _cmd_types(args: argparse.Namespace, config: EngineConfig) -> Optional[str]:
    types = extract_types_from_file(args.file, config)
    if args.write:
        path = write_types_file(types.splitlines(), args.output_dir)
        logger.info(f"Type tokens written to {path}")
        return str(path)
    return types


def _cmd_instruction(args: argparse.Namespace, config: EngineConfig) -> Optional[str]:
    return extract_instruction_from_file(args.file, config.instruction_marker)


def _cmd_enclosing_type(args: argparse.Namespace, config: EngineConfig) -> Optional[str]:
    return extract_enclosing_type(args.file, config.instruction_marker)


def _cmd_process(args: argparse.Namespace, config: EngineConfig) -> Optional[str]:
    if args.lenient:
        return process_file_or_raw(args.file, args.basename, config)
    return process_file(args.file, args.basename, config)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="context-engine",
        description="Marker & enclosing-context extraction for prompt assembly",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Visible regions of a marker-using file
  context-engine filter Sources/Feature/ViewModel.swift

  # Prompt-ready rendering of the instruction file
  context-engine process Sources/Feature/ViewModel.swift --basename ViewModel.swift

  # Type tokens, persisted to a timestamped file
  CONTEXT_TARGETED=1 context-engine types Sources/Feature/ViewModel.swift --write
        """,
    )
    parser.add_argument("--version", action="version", version=TOOL_VERSION)
    parser.add_argument("--force-markers", action="store_true",
                        help="Treat every file as marker-using")
    parser.add_argument("--targeted", action="store_true",
                        help="Restrict type tokens to the innermost block around the instruction")
    parser.add_argument("--env-file", default=None,
                        help="Explicit .env file to load before reading the environment")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("filter", help="Print the visible regions of a file")
    p.add_argument("file", type=Path)
    p.set_defaults(handler=_cmd_filter)

    p = sub.add_parser("enclose", help="Print the block enclosing the instruction marker")
    p.add_argument("file", type=Path)
    p.set_defaults(handler=_cmd_enclose)

    p = sub.add_parser("types", help="Print sorted type tokens of a file")
    p.add_argument("file", type=Path)
    p.add_argument("--write", action="store_true",
                   help="Write tokens to a types_*.txt file and print its path")
    p.add_argument("--output-dir", type=Path, default=None,
                   help="Directory for --write (default: system temp dir)")
    p.set_defaults(handler=_cmd_types)

    p = sub.add_parser("instruction", help="Print the instruction line")
    p.add_argument("file", type=Path)
    p.set_defaults(handler=_cmd_instruction)

    p = sub.add_parser("enclosing-type", help="Print the type enclosing the instruction")
    p.add_argument("file", type=Path)
    p.set_defaults(handler=_cmd_enclosing_type)

    p = sub.add_parser("process", help="Render a file for prompt assembly")
    p.add_argument("file", type=Path)
    p.add_argument("--basename", default=None,
                   help="Basename of the instruction file; enables the enclosing context")
    p.add_argument("--lenient", action="store_true",
                   help="Fall back to raw content on extraction errors")
    p.set_defaults(handler=_cmd_process)

    return parser


# ================== Entry point ==================
def context_main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(args.env_file)
    overrides = {}
    if args.force_markers:
        overrides["force_markers"] = True
    if args.targeted:
        overrides["targeted"] = True
    if overrides:
        config = dataclasses.replace(config, **overrides)

    logger.setLevel(getattr(logging, log_level_from_env(), logging.WARNING))
    logger.debug(f"Running '{args.command}' with {config}")

    try:
        result = args.handler(args, config)
    except ContextExtractionError as exc:
        logger.error(str(exc))
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if result:
        print(result)
    return 0


__all__ = [
    "build_parser",
    "context_main",
]
