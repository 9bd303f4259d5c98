from .markers import (
    OPEN_MARKER,
    CLOSE_MARKER,
    INSTRUCTION_MARKER,
    INSTRUCTION_PREFIX,
    DEFAULT_PLACEHOLDER,
    ENCLOSING_CONTEXT_HEADER,
    IMPORT_PREFIXES,
    STRUCTURAL_LANGUAGES,
)

__all__ = [
    "OPEN_MARKER",
    "CLOSE_MARKER",
    "INSTRUCTION_MARKER",
    "INSTRUCTION_PREFIX",
    "DEFAULT_PLACEHOLDER",
    "ENCLOSING_CONTEXT_HEADER",
    "IMPORT_PREFIXES",
    "STRUCTURAL_LANGUAGES",
]
