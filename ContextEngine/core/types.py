# core/types.py
"""
Core type definitions for the extraction engine.

This module centralizes the small value objects passed between:
- marker_scanner.py      (visible regions, instruction line)
- candidate_matchers.py  (candidate kinds)
- block_extractor.py     (extracted blocks)
- enclosing_extractor.py (backward search + parser hand-off)

All of them are immutable and live for a single extraction request.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

# local imports
from ..utils import line_byte_offset, split_lines


# ================== Source text ==================
@dataclass(frozen=True)
class SourceText:
    """
    Immutable, line-oriented view of one file's content.

    Attributes:
        text:  Full file content as read.
        lines: Content split on newlines only (no terminators, no trailing CR).
    """
    text: str
    lines: Tuple[str, ...]

    @classmethod
    def from_text(cls, text: str) -> "SourceText":
        return cls(text=text, lines=tuple(split_lines(text)))

    def byte_offset(self, index: int) -> int:
        """UTF-8 byte offset of the start of line `index` in `text`."""
        # Raw pieces keep any "\r", so the count matches the parsed bytes.
        return line_byte_offset(self.text.split("\n"), index)

    def __len__(self) -> int:
        return len(self.lines)


# ================== Marker scan ==================
@dataclass(frozen=True)
class VisibleRegion:
    """Half-open interval [open_line, close_line) of one marker-delimited block."""
    open_line: int
    close_line: int

    def contains(self, index: int) -> bool:
        return self.open_line <= index < self.close_line


@dataclass(frozen=True)
class MarkerScan:
    """
    Result of a single line-oriented scan over a file.

    Attributes:
        regions:     Matched visible regions, in source order.
        open_lines:  Indices of every open-marker line.
        close_lines: Indices of every close-marker line.
        marker_line: Index of the first instruction-marker line, if any.
    """
    regions: List[VisibleRegion] = field(default_factory=list)
    open_lines: List[int] = field(default_factory=list)
    close_lines: List[int] = field(default_factory=list)
    marker_line: Optional[int] = None

    @property
    def uses_markers(self) -> bool:
        return bool(self.open_lines) and bool(self.close_lines)


# ================== Candidates & blocks ==================
class CandidateKind(Enum):
    """Which dialect pattern flagged a line as a block opener."""
    TYPED_FUNCTION = "typed_function"
    COMPUTED_PROPERTY = "computed_property"
    JS_ASSIGNMENT = "js_assignment"
    JS_FUNCTION = "js_function"
    MESSAGE_HANDLER = "message_handler"
    MESSAGE_METHOD = "message_method"
    SPLIT_MESSAGE_METHOD = "split_message_method"


@dataclass(frozen=True)
class Candidate:
    """A line believed to open the enclosing block (kind is informational)."""
    line_index: int
    kind: CandidateKind


@dataclass(frozen=True)
class ExtractedBlock:
    """
    Contiguous inclusive line range [start, end] and its joined text.

    `closed` is False when end-of-file was reached before the brace
    balance returned to zero.
    """
    start: int
    end: int
    text: str
    closed: bool


__all__ = [
    "SourceText",
    "VisibleRegion",
    "MarkerScan",
    "CandidateKind",
    "Candidate",
    "ExtractedBlock",
]
