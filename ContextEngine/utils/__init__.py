# ContextEngine/utils/__init__.py
from .generic_utils import (
    read_source,
    split_lines,
    line_byte_offset,
    utc_timestamped_filename,
    write_types_file,
)

__all__ = [
    "read_source",
    "split_lines",
    "line_byte_offset",
    "utc_timestamped_filename",
    "write_types_file",
]
