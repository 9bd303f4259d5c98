# ContextEngine/constants/markers.py

# Visible-region markers: a line that, once trimmed, equals one of these.
OPEN_MARKER = "// v"
CLOSE_MARKER = "// ^"

# Instruction marker, searched as a plain substring anywhere in a line.
INSTRUCTION_MARKER = "// TODO: - "

# Same marker without the trailing space; used as a comment prefix.
INSTRUCTION_PREFIX = "// TODO: -"

# Default text standing in for omitted source spans.
DEFAULT_PLACEHOLDER = "// ..."

# Header placed in front of an appended enclosing block.
ENCLOSING_CONTEXT_HEADER = "\n\n// Enclosing function context:\n"

# Lines starting with one of these are never scanned for type tokens.
IMPORT_PREFIXES = ("import ", "#import", "#include", "@import")

# File suffixes for which a tree-sitter grammar is wired up.
STRUCTURAL_LANGUAGES = {
    ".swift": "swift",
}
