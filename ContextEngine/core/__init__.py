# core/__init__.py
from .errors import (
    ContextExtractionError,
    SourceReadError,
    InstructionNotFoundError,
)
from .types import (
    SourceText,
    VisibleRegion,
    MarkerScan,
    CandidateKind,
    Candidate,
    ExtractedBlock,
)
from .marker_scanner import (
    scan_markers,
    uses_markers,
    find_marker_line,
    marker_depth,
    is_inside_markers,
    extract_instruction,
    extract_instruction_from_file,
)
from .substring_filter import (
    filter_substring_markers,
    render_visible,
)
from .candidate_matchers import (
    match_candidate,
    is_candidate_line,
    is_split_method_signature,
)
from .block_extractor import (
    extract_block,
    extract_inner_block,
)
from .structural_parser import (
    StructuralParser,
    get_structural_parser,
)
from .enclosing_extractor import (
    language_for_path,
    find_candidate,
    extract_enclosing_block,
    extract_enclosing_block_from_file,
)
from .language_support import identifiers_for_path
from .type_tokens import (
    extract_type_tokens,
    extract_types_from_file,
)
from .enclosing_type import (
    find_enclosing_type,
    extract_enclosing_type,
)
from .file_processor import (
    process_text,
    process_file,
    process_file_or_raw,
)

__all__ = [
    "ContextExtractionError",
    "SourceReadError",
    "InstructionNotFoundError",
    "SourceText",
    "VisibleRegion",
    "MarkerScan",
    "CandidateKind",
    "Candidate",
    "ExtractedBlock",
    "scan_markers",
    "uses_markers",
    "find_marker_line",
    "marker_depth",
    "is_inside_markers",
    "extract_instruction",
    "extract_instruction_from_file",
    "filter_substring_markers",
    "render_visible",
    "match_candidate",
    "is_candidate_line",
    "is_split_method_signature",
    "extract_block",
    "extract_inner_block",
    "StructuralParser",
    "get_structural_parser",
    "language_for_path",
    "find_candidate",
    "extract_enclosing_block",
    "extract_enclosing_block_from_file",
    "identifiers_for_path",
    "extract_type_tokens",
    "extract_types_from_file",
    "find_enclosing_type",
    "extract_enclosing_type",
    "process_text",
    "process_file",
    "process_file_or_raw",
]
