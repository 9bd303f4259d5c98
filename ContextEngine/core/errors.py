# core/errors.py
"""Exceptions raised by the engine. Expected "no result" cases return None instead."""

from __future__ import annotations

from pathlib import Path
from typing import Union


class ContextExtractionError(Exception):
    """Base class for errors surfaced to callers of the engine."""


class SourceReadError(ContextExtractionError):
    """A source file could not be read or decoded as UTF-8."""

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Error reading file {self.path}: {reason}")


class InstructionNotFoundError(ContextExtractionError):
    """The file holds no instruction-marker line."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        super().__init__(f"No valid TODO instruction found in {self.path}")


__all__ = [
    "ContextExtractionError",
    "SourceReadError",
    "InstructionNotFoundError",
]
