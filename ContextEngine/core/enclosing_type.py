# core/enclosing_type.py
"""
Name of the type that "encloses" the instruction marker.

Policy: the last class/struct/enum declared before the marker, in source
order. This is deliberately not strict lexical nesting; a type declared and
closed just above the marker still wins over an outer one.

Resolution order:
  1) tree-sitter (Swift files),
  2) regex scan over the lines above the marker line,
  3) the file's stem.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional, Union

# local imports
from .. import logger
from ..constants import INSTRUCTION_MARKER
from ..utils import read_source
from .enclosing_extractor import language_for_path
from .structural_parser import get_structural_parser

TYPE_DECL_RE = re.compile(r"(class|struct|enum)\s+(\w+)")


def last_type_by_regex(text: str, marker_prefix: str) -> Optional[str]:
    """Last `class|struct|enum Name` seen on the lines before the marker line."""
    last: Optional[str] = None
    for line in text.splitlines():
        if marker_prefix in line:
            break
        match = TYPE_DECL_RE.search(line)
        if match:
            last = match.group(2)
    return last


def find_enclosing_type(
    text: str,
    language: Optional[str] = None,
    marker: str = INSTRUCTION_MARKER,
) -> Optional[str]:
    """Parser first, regex second; None when neither finds a type."""
    position = text.find(marker)
    if position == -1:
        cutoff = len(text.encode("utf-8"))
    else:
        cutoff = len(text[:position].encode("utf-8"))

    parser = get_structural_parser(language)
    if parser is not None:
        found = parser.last_type_before(text, cutoff)
        if found:
            return found
        logger.debug("Structural parser found no type before the marker")

    return last_type_by_regex(text, marker.rstrip())


def extract_enclosing_type(
    file_path: Union[str, Path],
    marker: str = INSTRUCTION_MARKER,
) -> str:
    """
    Enclosing type name for the instruction marker in `file_path`, or the
    file stem when no type declaration precedes it.

    Raises:
        SourceReadError if the file cannot be read.
    """
    text = read_source(file_path)
    found = find_enclosing_type(text, language_for_path(file_path), marker)
    if found:
        return found
    return Path(file_path).stem


__all__ = [
    "TYPE_DECL_RE",
    "last_type_by_regex",
    "find_enclosing_type",
    "extract_enclosing_type",
]
