# core/structural_parser/__init__.py
"""
Language-agnostic structural parser interface and factory.

A StructuralParser answers two questions about one file's text:
  - which declaration most tightly encloses a byte offset, and
  - which type was declared last before a cutoff offset.

Both answers are best-effort. Any failure (no grammar for the dialect,
grammar/ABI mismatch, parse failure, nothing found) is reported as None so
the caller can fall back to the line heuristics.

Concrete implementations live in language-specific modules, e.g.:
- core/structural_parser/swift_structural_parser.py
"""

from __future__ import annotations

from typing import Optional, Protocol

# local imports
from ... import logger


class StructuralParser(Protocol):
    """
    Protocol for language-specific structural parsers.

    Implementations must be stateless between calls.
    """

    def enclosing_declaration(self, text: str, offset: int) -> Optional[str]:
        """
        Full source lines of the smallest declaration node whose byte span
        contains `offset`, or None.
        """
        ...

    def last_type_before(self, text: str, cutoff: int) -> Optional[str]:
        """
        Name of the last type declaration (in source order) starting at or
        before `cutoff`, or None.
        """
        ...


def get_structural_parser(language: Optional[str]) -> Optional[StructuralParser]:
    """
    Factory for language-specific StructuralParser implementations.

    Currently supported:
        - "swift" (case-insensitive)

    Args:
        language: Language tag (e.g., "swift", "Swift"), or None.

    Returns:
        A StructuralParser, or None when the language has no grammar or
        the grammar cannot be loaded.
    """
    if not language:
        return None

    lang_norm = language.strip().lower()

    # Lazy import; grammar loads only on first use.
    if lang_norm == "swift":
        try:
            from .swift_structural_parser import SwiftStructuralParser

            return SwiftStructuralParser()
        except (ImportError, ValueError, TypeError, OSError) as exc:
            logger.warning(f"Swift grammar unavailable, using heuristics: {exc}")
            return None

    logger.debug(f"No structural parser for language: {language!r}")
    return None


__all__ = [
    "StructuralParser",
    "get_structural_parser",
]
