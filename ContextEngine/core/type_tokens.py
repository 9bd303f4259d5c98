# core/type_tokens.py
"""
Capitalisation-based type-token classification.

A token is a candidate type name when it is a bare capitalised identifier of
at least two characters ("MyClass"), or a single-element bracket generic
("[MyClass]", whose inner identifier is kept). The result is a sorted,
de-duplicated list used to drive downstream symbol search.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List, Optional, Set, Union

# local imports
from .. import logger
from ..config import EngineConfig
from ..constants import IMPORT_PREFIXES, INSTRUCTION_PREFIX
from ..utils import read_source
from .block_extractor import extract_inner_block
from .enclosing_extractor import extract_enclosing_block_from_file
from .language_support import identifiers_for_path
from .marker_scanner import uses_markers
from .substring_filter import filter_substring_markers

SIMPLE_TYPE_RE = re.compile(r"^[A-Z][A-Za-z0-9]+$")
BRACKET_TYPE_RE = re.compile(r"^\[([A-Z][A-Za-z0-9]+)\]$")


def _clean(content: str) -> str:
    return "".join(ch if ch.isascii() and ch.isalnum() else " " for ch in content)


def line_tokens(line: str, marker_prefix: str = INSTRUCTION_PREFIX) -> Optional[List[str]]:
    """
    Whitespace tokens of `line` after punctuation is blanked out, or None
    when the line is skipped (empty, import-style, or a plain comment).

    The instruction-marker comment is not skipped: its prefix is dropped
    and the rest of the line is scanned.
    """
    trimmed = line.strip()

    if not trimmed or trimmed.startswith(IMPORT_PREFIXES):
        return None

    if trimmed.startswith(marker_prefix):
        trimmed = trimmed[len(marker_prefix):].lstrip()
    elif trimmed.startswith("//"):
        return None

    return _clean(trimmed).split()


def classify_token(token: str) -> Optional[str]:
    """Type name carried by `token`, or None."""
    if SIMPLE_TYPE_RE.match(token):
        return token
    bracket = BRACKET_TYPE_RE.match(token)
    if bracket:
        return bracket.group(1)
    return None


def extract_type_tokens(
    lines: Iterable[str],
    marker_prefix: str = INSTRUCTION_PREFIX,
) -> List[str]:
    """Sorted, de-duplicated type tokens found across `lines`."""
    types: Set[str] = set()
    for line in lines:
        tokens = line_tokens(line, marker_prefix)
        if tokens is None:
            continue
        for token in tokens:
            name = classify_token(token)
            if name is not None:
                types.add(name)
    return sorted(types)


# ================== File-level pipeline ==================
def select_type_scope(
    file_path: Union[str, Path],
    text: str,
    config: EngineConfig,
) -> str:
    """
    Slice of `text` whose identifiers matter:
      - targeted mode: the innermost brace block around the marker;
      - marker-using file: visible regions (no placeholder), plus the
        enclosing block when the marker itself was filtered out;
      - otherwise the whole file.
    """
    if config.targeted:
        inner = extract_inner_block(text, config.instruction_marker)
        if inner is not None:
            return inner
        logger.debug("Targeted mode found no inner block, scanning the whole file")
        return text

    if config.force_markers or uses_markers(text, config.open_marker, config.close_marker):
        filtered = filter_substring_markers(
            text,
            placeholder="",
            open_marker=config.open_marker,
            close_marker=config.close_marker,
        )
        if config.instruction_marker.rstrip() not in filtered:
            enclosing = extract_enclosing_block_from_file(file_path, text, config)
            if enclosing is not None:
                filtered += "\n" + enclosing
        return filtered

    return text


def extract_types_from_file(
    file_path: Union[str, Path],
    config: Optional[EngineConfig] = None,
) -> str:
    """
    Newline-joined, sorted type tokens for one file, including the
    identifiers contributed by the file's language helper.

    Raises:
        SourceReadError if the file cannot be read.
    """
    config = config or EngineConfig()
    text = read_source(file_path)
    scope = select_type_scope(file_path, text, config)

    types = set(extract_type_tokens(scope.splitlines(), config.instruction_marker.rstrip()))
    types.update(identifiers_for_path(file_path, scope))

    logger.debug(f"Collected {len(types)} type tokens from {file_path}")
    return "\n".join(sorted(types))


__all__ = [
    "SIMPLE_TYPE_RE",
    "BRACKET_TYPE_RE",
    "line_tokens",
    "classify_token",
    "extract_type_tokens",
    "select_type_scope",
    "extract_types_from_file",
]
