# core/block_extractor.py
"""
Brace-balance block extraction.

Counting is purely lexical: every "{" and "}" glyph counts, including the
ones inside strings and comments.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from .types import ExtractedBlock


def extract_block(lines: Sequence[str], start: int) -> Optional[ExtractedBlock]:
    """
    Grow a block forward from line `start` until its braces balance.

    Lines before the first "{" are accumulated without touching the
    balance. From the line holding the first "{" on, balance moves by
    opens - closes per line (never below zero) and extraction stops right
    after the line that brings it back to zero. Reaching end-of-file first
    yields the unterminated block with closed=False.

    Returns None only when `start` is out of range.
    """
    if start < 0 or start >= len(lines):
        return None

    collected: List[str] = []
    balance = 0
    seen_open = False

    for index in range(start, len(lines)):
        line = lines[index]
        collected.append(line)

        opens = line.count("{")
        if not seen_open:
            if opens == 0:
                continue
            seen_open = True

        balance = max(0, balance + opens - line.count("}"))
        if balance == 0:
            return ExtractedBlock(
                start=start,
                end=index,
                text="\n".join(collected),
                closed=True,
            )

    return ExtractedBlock(
        start=start,
        end=len(lines) - 1,
        text="\n".join(collected),
        closed=False,
    )


def extract_inner_block(text: str, marker: str) -> Optional[str]:
    """
    Body of the innermost brace pair enclosing the first `marker` occurrence,
    without the braces themselves.

    Returns None when the marker is absent, no "{" is open at the marker,
    or the matching "}" never arrives.
    """
    position = text.find(marker)
    if position == -1:
        return None

    # Innermost "{" still open at the marker.
    stack: List[int] = []
    for index, ch in enumerate(text[:position]):
        if ch == "{":
            stack.append(index)
        elif ch == "}" and stack:
            stack.pop()

    if not stack:
        return None
    open_brace = stack[-1]

    depth = 1
    for index in range(open_brace + 1, len(text)):
        ch = text[index]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[open_brace + 1 : index]
    return None


__all__ = [
    "extract_block",
    "extract_inner_block",
]
