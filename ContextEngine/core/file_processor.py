# core/file_processor.py
"""
Per-file rendering for prompt assembly.

process_file() turns one source file into the text that goes into a prompt:
  - marker-using files are reduced to their visible regions, with omitted
    spans collapsed to the placeholder;
  - the instruction file (matched by basename) additionally gets the block
    enclosing the instruction marker appended under a fixed header.

process_file_or_raw() is the lenient variant used while assembling many
files: extraction errors are logged and the raw content is used instead.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

# local imports
from .. import logger
from ..config import EngineConfig
from ..constants import ENCLOSING_CONTEXT_HEADER
from ..utils import read_source
from .enclosing_extractor import extract_enclosing_block_from_file
from .errors import ContextExtractionError
from .marker_scanner import uses_markers
from .substring_filter import render_visible


def _markers_active(text: str, config: EngineConfig) -> bool:
    return config.force_markers or uses_markers(text, config.open_marker, config.close_marker)


def process_text(
    file_path: Union[str, Path],
    text: str,
    expected_basename: Optional[str] = None,
    config: Optional[EngineConfig] = None,
) -> str:
    """
    Render already-loaded `text` as if it had been read from `file_path`.

    The enclosing context is appended only when markers are active for the
    file, `expected_basename` equals the file's basename, and an enclosing
    block exists outside every visible region.
    """
    config = config or EngineConfig()
    rendered = render_visible(text, config)

    if expected_basename is None or not _markers_active(text, config):
        return rendered

    if Path(file_path).name != expected_basename:
        return rendered

    context = extract_enclosing_block_from_file(file_path, text, config)
    if context is None:
        logger.debug(f"No enclosing context appended for {file_path}")
        return rendered

    return rendered + ENCLOSING_CONTEXT_HEADER + context


def process_file(
    file_path: Union[str, Path],
    expected_basename: Optional[str] = None,
    config: Optional[EngineConfig] = None,
) -> str:
    """
    Read and render one file.

    Args:
        file_path:         File to render.
        expected_basename: Basename of the instruction file; context is only
                           appended to the file whose basename matches.
        config:            Marker tokens and mode switches.

    Raises:
        SourceReadError if the file cannot be read.
    """
    text = read_source(file_path)
    return process_text(file_path, text, expected_basename, config)


def process_file_or_raw(
    file_path: Union[str, Path],
    expected_basename: Optional[str] = None,
    config: Optional[EngineConfig] = None,
) -> str:
    """
    process_file(), but never raises ContextExtractionError.

    On failure the raw file content is returned; an unreadable file yields
    an empty string.
    """
    try:
        return process_file(file_path, expected_basename, config)
    except ContextExtractionError as exc:
        logger.error(f"Error processing file {file_path}: {exc}. Using raw content.")

    try:
        return read_source(file_path)
    except ContextExtractionError as exc:
        logger.error(f"Raw content unavailable for {file_path}: {exc}")
        return ""


__all__ = [
    "process_text",
    "process_file",
    "process_file_or_raw",
]
