# core/substring_filter.py
"""
Visible-region filtering.

Only lines strictly inside a "// v" ... "// ^" region are kept. Every
non-empty omitted span is replaced by one placeholder block; spans that are
separated only by marker lines (or by an empty region) collapse into a single
placeholder. A file that ends outside a region after omitted lines, or right
after a close marker, gets a trailing placeholder to signal truncation.
"""

from __future__ import annotations

from typing import List, Optional

# local imports
from .. import logger
from ..config import EngineConfig
from ..constants import OPEN_MARKER, CLOSE_MARKER, DEFAULT_PLACEHOLDER
from .marker_scanner import is_open_marker, is_close_marker, uses_markers


def _placeholder_block(placeholder: str) -> str:
    return f"\n\n{placeholder}\n\n"


def filter_substring_markers(
    text: str,
    placeholder: str = DEFAULT_PLACEHOLDER,
    open_marker: str = OPEN_MARKER,
    close_marker: str = CLOSE_MARKER,
) -> str:
    """
    Return `text` reduced to its visible regions.

    Args:
        text:         Full file content.
        placeholder:  Stand-in for omitted code (rendered on its own line,
                      surrounded by blank lines).
        open_marker:  Trimmed-line token opening a region.
        close_marker: Trimmed-line token closing a region.

    Returns:
        Visible lines, each terminated by "\\n", with placeholder blocks
        where code was omitted.
    """
    output: List[str] = []
    depth = 0
    omitted = 0
    last_was_closing = False

    for line in text.splitlines():
        if is_open_marker(line, open_marker):
            depth += 1
            last_was_closing = False
            continue

        if is_close_marker(line, close_marker):
            if depth > 0:
                depth -= 1
            last_was_closing = depth == 0
            continue

        last_was_closing = False

        if depth == 0:
            omitted += 1
            continue

        # Pending omitted span is flushed lazily so empty regions never
        # separate two placeholders.
        if omitted > 0:
            output.append(_placeholder_block(placeholder))
            omitted = 0
        output.append(line + "\n")

    if depth == 0 and (omitted > 0 or last_was_closing):
        output.append(_placeholder_block(placeholder))

    return "".join(output)


def render_visible(text: str, config: Optional[EngineConfig] = None) -> str:
    """
    Apply filter_substring_markers() only to marker-using content.

    Content without a marker pair is returned unchanged unless
    `config.force_markers` is set, so running this over its own output is
    a no-op.
    """
    config = config or EngineConfig()

    if not (config.force_markers or uses_markers(text, config.open_marker, config.close_marker)):
        return text

    logger.debug("Filtering visible regions")
    return filter_substring_markers(
        text,
        placeholder=config.placeholder,
        open_marker=config.open_marker,
        close_marker=config.close_marker,
    )


__all__ = [
    "filter_substring_markers",
    "render_visible",
]
