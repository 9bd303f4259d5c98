# core/candidate_matchers.py
"""
Per-dialect recognizers for lines that plausibly open an enclosing block.

Each matcher is an independent predicate; a line qualifies when any of them
matches. Adding a dialect means appending one entry to CANDIDATE_MATCHERS,
the brace-balance and marker logic never look at the kind.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from .types import CandidateKind

# ================== Patterns ==================

# func name<T>(params) [async] [throws] [-> Type] [where ...] {
TYPED_FUNCTION_RE = re.compile(
    r"^\s*(?:@\w+(?:\([^)]*\))?\s+)*"
    r"(?:(?:public|private|internal|fileprivate|open)\s+)?"
    r"(?:(?:static|class|override|final|mutating|nonmutating)\s+)*"
    r"func\s+\w+(?:<[^>]+>)?\s*\([^)]*\)[^{]*\{"
)

# var name: Type {   (no initializer on the line)
COMPUTED_PROPERTY_RE = re.compile(
    r"^\s*(?:(?:public|private|internal|fileprivate|open)\s+)?"
    r"(?:(?:static|class|override|final|lazy)\s+)*"
    r"var\s+\w+\s*:\s*[^={]+\{\s*(?://.*)?$"
)

# name = function(params) {
JS_ASSIGNMENT_RE = re.compile(
    r"^\s*(?:(?:const|var|let)\s+)?[\w$.]+\s*=\s*(?:async\s+)?function\s*\w*\s*\([^)]*\)\s*\{"
)

# [async] function name(params) {
JS_FUNCTION_RE = re.compile(
    r"^\s*(?:export\s+)?(?:async\s+)?function(?:\s*\*\s*|\s+)[\w$]+\s*\([^)]*\)\s*\{"
)

# Namespace.Method("selector" | Identifier, [async] (params) => {
MESSAGE_HANDLER_RE = re.compile(
    r"^\s*[A-Za-z_$][\w$]*(?:\.[A-Za-z_$][\w$]*)+\s*\(\s*"
    r"(?:\"[^\"]+\"|'[^']+'|[A-Za-z_$][\w$.]*)\s*,\s*"
    r"(?:async\s+)?\([^)]*\)\s*=>\s*\{"
)

# -/+ (ReturnType)selector[:(Type)arg label:(Type)arg ...]
_MESSAGE_SIGNATURE = (
    r"^\s*[-+]\s*\([^)]*\)\s*[A-Za-z_]\w*"
    r"(?:\s*:\s*\([^)]*\)\s*[A-Za-z_]\w*)?"
    r"(?:\s+[A-Za-z_]\w*\s*:\s*\([^)]*\)\s*[A-Za-z_]\w*)*"
)
MESSAGE_METHOD_RE = re.compile(_MESSAGE_SIGNATURE + r"\s*\{")
SPLIT_MESSAGE_SIGNATURE_RE = re.compile(_MESSAGE_SIGNATURE + r"\s*$")

CANDIDATE_MATCHERS: List[Tuple[CandidateKind, "re.Pattern[str]"]] = [
    (CandidateKind.TYPED_FUNCTION, TYPED_FUNCTION_RE),
    (CandidateKind.COMPUTED_PROPERTY, COMPUTED_PROPERTY_RE),
    (CandidateKind.JS_ASSIGNMENT, JS_ASSIGNMENT_RE),
    (CandidateKind.JS_FUNCTION, JS_FUNCTION_RE),
    (CandidateKind.MESSAGE_HANDLER, MESSAGE_HANDLER_RE),
    (CandidateKind.MESSAGE_METHOD, MESSAGE_METHOD_RE),
]


# ================== Public API ==================
def match_candidate(line: str) -> Optional[CandidateKind]:
    """Kind of the first matcher accepting `line`, or None."""
    for kind, pattern in CANDIDATE_MATCHERS:
        if pattern.match(line):
            return kind
    return None


def is_candidate_line(line: str) -> bool:
    return match_candidate(line) is not None


def is_split_method_signature(line: str) -> bool:
    """
    True for a message-passing method signature that carries no "{" on the
    same line (the brace is expected alone on the next line).
    """
    return "{" not in line and SPLIT_MESSAGE_SIGNATURE_RE.match(line) is not None


__all__ = [
    "TYPED_FUNCTION_RE",
    "COMPUTED_PROPERTY_RE",
    "JS_ASSIGNMENT_RE",
    "JS_FUNCTION_RE",
    "MESSAGE_HANDLER_RE",
    "MESSAGE_METHOD_RE",
    "CANDIDATE_MATCHERS",
    "match_candidate",
    "is_candidate_line",
    "is_split_method_signature",
]
