# ContextEngine/config.py
"""
Runtime configuration for the extraction engine.

Every mode switch is an explicit field on EngineConfig and is threaded into the
calls that need it. The environment (and an optional .env file) is read only
once, by load_config(), at the CLI boundary.
"""
from __future__ import annotations

from dataclasses import dataclass
from os import getenv
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

# local imports
from .constants import (
    OPEN_MARKER,
    CLOSE_MARKER,
    INSTRUCTION_MARKER,
    DEFAULT_PLACEHOLDER,
)

TOOL_VERSION = "context-engine-1.0.0"

# Environment variable names understood by load_config().
ENV_FORCE_MARKERS = "CONTEXT_FORCE_MARKERS"
ENV_TARGETED = "CONTEXT_TARGETED"
ENV_PLACEHOLDER = "CONTEXT_PLACEHOLDER"
ENV_LOG_LEVEL = "CONTEXT_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class EngineConfig:
    """
    Explicit knobs for one extraction request.

    Attributes:
        force_markers:      Treat every file as marker-using, even without
                            a "// v" / "// ^" pair.
        targeted:           Restrict type-token extraction to the innermost
                            brace block around the instruction marker.
        placeholder:        Text substituted for omitted spans.
        open_marker:        Visible-region open token (trimmed-line equality).
        close_marker:       Visible-region close token (trimmed-line equality).
        instruction_marker: Substring identifying the instruction line.
    """
    force_markers: bool = False
    targeted: bool = False
    placeholder: str = DEFAULT_PLACEHOLDER
    open_marker: str = OPEN_MARKER
    close_marker: str = CLOSE_MARKER
    instruction_marker: str = INSTRUCTION_MARKER


def _env_flag(name: str) -> bool:
    return (getenv(name) or "").strip().lower() in _TRUTHY


def load_config(dotenv_path: Optional[Union[str, Path]] = None) -> EngineConfig:
    """
    Build an EngineConfig from the process environment.

    A .env file (cwd, or `dotenv_path` when given) is loaded first; values
    already present in the environment win over the file.
    """
    load_dotenv(dotenv_path=dotenv_path)

    return EngineConfig(
        force_markers=_env_flag(ENV_FORCE_MARKERS),
        targeted=_env_flag(ENV_TARGETED),
        placeholder=getenv(ENV_PLACEHOLDER, DEFAULT_PLACEHOLDER),
    )


def log_level_from_env() -> str:
    """Log level name requested via CONTEXT_LOG_LEVEL (default WARNING)."""
    return (getenv(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).strip().upper()


__all__ = [
    "TOOL_VERSION",
    "EngineConfig",
    "load_config",
    "log_level_from_env",
]
