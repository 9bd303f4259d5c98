# ContextEngine/__init__.py
"""
Entry point package for the marker & enclosing-context extraction engine.

Sub-packages:
- constants/ : marker tokens and placeholder defaults
- core/      : scanner, filter, matchers, block extraction, type tokens
- utils/     : small text/file helpers shared across core modules
"""
import logging

# Custom formatter to create block-style logs
class BlockFormatter(logging.Formatter):
    def format(self, record) -> str:
        # Header WITHOUT the message
        header = super().format(record)  # uses fmt without %(message)s
        msg = record.getMessage()
        return f"===== {header}:{msg} ====="


# package-level logger (for everything under ContextEngine.*)
logger = logging.getLogger(__name__)
logger.setLevel(logging.WARNING)
logger.propagate = False  # prevent duplicate root logging

if not logger.handlers:
    handler = logging.StreamHandler()

    # NOTE: no %(message)s here - message is handled by BlockFormatter body
    fmt = "%(asctime)s - %(name)s:%(levelname)s"
    handler.setFormatter(BlockFormatter(fmt))

    logger.addHandler(handler)

# ========= package exports =========
from .config import EngineConfig, load_config
from .core import (
    ContextExtractionError,
    SourceReadError,
    InstructionNotFoundError,
    scan_markers,
    uses_markers,
    is_inside_markers,
    filter_substring_markers,
    render_visible,
    extract_enclosing_block,
    extract_enclosing_type,
    extract_type_tokens,
    extract_types_from_file,
    process_file,
    process_file_or_raw,
)

__all__ = [
    "logger",
    "EngineConfig",
    "load_config",
    "ContextExtractionError",
    "SourceReadError",
    "InstructionNotFoundError",
    "scan_markers",
    "uses_markers",
    "is_inside_markers",
    "filter_substring_markers",
    "render_visible",
    "extract_enclosing_block",
    "extract_enclosing_type",
    "extract_type_tokens",
    "extract_types_from_file",
    "process_file",
    "process_file_or_raw",
]
