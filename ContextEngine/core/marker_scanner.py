# core/marker_scanner.py
"""
Line-oriented marker scanning and marker-depth classification.

Two kinds of markers are recognised:
- visible-region markers: a line that, once trimmed, equals exactly the open
  token ("// v") or the close token ("// ^");
- the instruction marker: a plain substring ("// TODO: - ") that may appear
  anywhere in a line, e.g. inline after code.

Depth counting increments on every open line and decrements on every close
line, floored at zero, so a stray close marker is a no-op.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Union

# local imports
from ..constants import OPEN_MARKER, CLOSE_MARKER, INSTRUCTION_MARKER
from ..utils import read_source, split_lines
from .errors import InstructionNotFoundError
from .types import MarkerScan, VisibleRegion


def is_open_marker(line: str, open_marker: str = OPEN_MARKER) -> bool:
    return line.strip() == open_marker


def is_close_marker(line: str, close_marker: str = CLOSE_MARKER) -> bool:
    return line.strip() == close_marker


def find_marker_line(
    lines: Sequence[str],
    marker: str = INSTRUCTION_MARKER,
) -> Optional[int]:
    """Index of the first line containing `marker`, or None."""
    for index, line in enumerate(lines):
        if marker in line:
            return index
    return None


def uses_markers(
    text: str,
    open_marker: str = OPEN_MARKER,
    close_marker: str = CLOSE_MARKER,
) -> bool:
    """True iff at least one open and one close marker line occur, in any order."""
    lines = split_lines(text)
    has_open = any(is_open_marker(line, open_marker) for line in lines)
    has_close = any(is_close_marker(line, close_marker) for line in lines)
    return has_open and has_close


def scan_markers(
    text: str,
    open_marker: str = OPEN_MARKER,
    close_marker: str = CLOSE_MARKER,
    instruction_marker: str = INSTRUCTION_MARKER,
) -> MarkerScan:
    """
    Single pass over `text` collecting marker lines, visible regions and the
    instruction-marker line.

    Regions are paired by depth: a close marker closes the outermost open
    region only when depth returns to zero, so nested opens are folded into
    the enclosing region. Unmatched opens produce no region.
    """
    open_lines: List[int] = []
    close_lines: List[int] = []
    regions: List[VisibleRegion] = []
    marker_line: Optional[int] = None

    depth = 0
    region_start = 0

    for index, line in enumerate(split_lines(text)):
        if is_open_marker(line, open_marker):
            open_lines.append(index)
            if depth == 0:
                region_start = index
            depth += 1
        elif is_close_marker(line, close_marker):
            close_lines.append(index)
            if depth > 0:
                depth -= 1
                if depth == 0:
                    regions.append(VisibleRegion(open_line=region_start, close_line=index))
        elif marker_line is None and instruction_marker in line:
            marker_line = index

    return MarkerScan(
        regions=regions,
        open_lines=open_lines,
        close_lines=close_lines,
        marker_line=marker_line,
    )


# ================== Marker-depth classification ==================
def marker_depth(
    lines: Sequence[str],
    index: int,
    open_marker: str = OPEN_MARKER,
    close_marker: str = CLOSE_MARKER,
) -> int:
    """
    Visible-region depth after processing lines 0..index inclusive.
    Never negative.
    """
    depth = 0
    for line in lines[: index + 1]:
        if is_open_marker(line, open_marker):
            depth += 1
        elif is_close_marker(line, close_marker) and depth > 0:
            depth -= 1
    return depth


def is_inside_markers(
    lines: Sequence[str],
    index: int,
    open_marker: str = OPEN_MARKER,
    close_marker: str = CLOSE_MARKER,
) -> bool:
    """True iff line `index` sits inside an open visible region."""
    return marker_depth(lines, index, open_marker, close_marker) > 0


# ================== Instruction content ==================
def extract_instruction(text: str, marker: str = INSTRUCTION_MARKER) -> Optional[str]:
    """The first instruction-marker line with leading whitespace removed."""
    lines = split_lines(text)
    index = find_marker_line(lines, marker)
    if index is None:
        return None
    return lines[index].lstrip()


def extract_instruction_from_file(
    file_path: Union[str, Path],
    marker: str = INSTRUCTION_MARKER,
) -> str:
    """
    Read `file_path` and return its instruction line.

    Raises:
        SourceReadError if the file cannot be read.
        InstructionNotFoundError if no line carries the marker.
    """
    instruction = extract_instruction(read_source(file_path), marker)
    if instruction is None:
        raise InstructionNotFoundError(file_path)
    return instruction


__all__ = [
    "is_open_marker",
    "is_close_marker",
    "find_marker_line",
    "uses_markers",
    "scan_markers",
    "marker_depth",
    "is_inside_markers",
    "extract_instruction",
    "extract_instruction_from_file",
]
