# core/language_support.py
"""
Per-language identifier helpers, keyed by file suffix.

These widen the type-token set so that downstream symbol search also picks up
declared types and free helper functions referenced from the instruction file.
Objective-C has no helper; its files rely on the type-token classifier alone.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

# ================== Swift ==================
_SWIFT_DECL_RE = re.compile(r"\b(?:class|struct|enum|protocol|typealias)\s+([A-Z][A-Za-z0-9_]*)")
_SWIFT_CALL_RE = re.compile(r"\b([A-Za-z_][A-Za-z0-9_]*)\s*\(")
_SWIFT_RESERVED = frozenset({
    "if", "for", "while", "switch", "guard", "return", "catch", "throw", "init", "deinit",
})

# ================== JavaScript ==================
_JS_CALL_RE = re.compile(r"\b([A-Za-z_][A-Za-z0-9_]*)\s*\(")
_JS_CLASS_RE = re.compile(r"\b(?:new\s+)?([A-Z][A-Za-z0-9_]*)\s*\(")
_JS_RESERVED = frozenset({
    "if", "for", "while", "switch", "catch", "function", "return",
    "class", "new", "await", "async", "const", "let", "var",
})


def _add(out: List[str], ident: str) -> None:
    if ident not in out:
        out.append(ident)


def swift_identifiers(source: str) -> List[str]:
    """Declared type names, then lower-case call-site identifiers."""
    out: List[str] = []
    for match in _SWIFT_DECL_RE.finditer(source):
        _add(out, match.group(1))
    for match in _SWIFT_CALL_RE.finditer(source):
        ident = match.group(1)
        if ident not in _SWIFT_RESERVED and ident[0].islower():
            _add(out, ident)
    return out


def javascript_identifiers(source: str) -> List[str]:
    """Lower-case call-site identifiers, then capitalised constructor calls."""
    out: List[str] = []
    for match in _JS_CALL_RE.finditer(source):
        ident = match.group(1)
        if ident not in _JS_RESERVED and ident[0].islower():
            _add(out, ident)
    for match in _JS_CLASS_RE.finditer(source):
        _add(out, match.group(1))
    return out


IDENTIFIER_EXTRACTORS: Dict[str, Callable[[str], List[str]]] = {
    ".swift": swift_identifiers,
    ".js": javascript_identifiers,
    ".jsx": javascript_identifiers,
    ".mjs": javascript_identifiers,
    ".cjs": javascript_identifiers,
}


def identifiers_for_path(path: Union[str, Path], source: str) -> List[str]:
    """Identifiers from the helper registered for `path`'s suffix (may be empty)."""
    extractor: Optional[Callable[[str], List[str]]] = IDENTIFIER_EXTRACTORS.get(Path(path).suffix.lower())
    if extractor is None:
        return []
    return extractor(source)


__all__ = [
    "swift_identifiers",
    "javascript_identifiers",
    "IDENTIFIER_EXTRACTORS",
    "identifiers_for_path",
]
