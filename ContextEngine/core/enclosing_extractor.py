# core/enclosing_extractor.py
"""
Enclosing-context extraction around the instruction marker.

Given one file's text, returns the smallest function / method / computed
property / handler block around the first instruction-marker line.

Key properties:
- Uses a tree-sitter-backed StructuralParser first when the dialect has one.
- Fallback: scan backward from the marker with the candidate-line matchers,
  then grow the block forward until braces balance.
- Nothing is extracted when the marker already sits inside a visible region;
  that region is treated as sufficient context.
- Every "not applicable" outcome is None, never an exception.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

# local imports
from .. import logger
from ..config import EngineConfig
from ..constants import STRUCTURAL_LANGUAGES
from .block_extractor import extract_block
from .candidate_matchers import match_candidate, is_split_method_signature
from .marker_scanner import find_marker_line, is_inside_markers
from .structural_parser import get_structural_parser
from .types import Candidate, CandidateKind, ExtractedBlock, SourceText


def language_for_path(path: Union[str, Path, None]) -> Optional[str]:
    """Language tag with a structural grammar for `path`'s suffix, if any."""
    if path is None:
        return None
    return STRUCTURAL_LANGUAGES.get(Path(path).suffix.lower())


# ================== Backward candidate search ==================
def find_candidate(lines: Sequence[str], marker_line: int) -> Optional[Candidate]:
    """
    Nearest candidate opener strictly above `marker_line`.

    Every line of the window is checked and later matches overwrite
    earlier ones, so the line closest to the marker wins. A split
    message-passing signature counts when the very next line, still above
    the marker, is exactly "{".
    """
    candidate: Optional[Candidate] = None

    for index in range(min(marker_line, len(lines))):
        line = lines[index]

        kind = match_candidate(line)
        if kind is not None:
            candidate = Candidate(line_index=index, kind=kind)
            continue

        if (
            is_split_method_signature(line)
            and index + 1 < marker_line
            and lines[index + 1].strip() == "{"
        ):
            candidate = Candidate(line_index=index, kind=CandidateKind.SPLIT_MESSAGE_METHOD)

    return candidate


def extract_block_before_marker(
    lines: Sequence[str],
    marker_line: int,
) -> Optional[ExtractedBlock]:
    """Heuristic path: nearest candidate above the marker, grown by brace balance."""
    candidate = find_candidate(lines, marker_line)
    if candidate is None:
        logger.debug("No candidate declaration above the instruction marker")
        return None

    logger.debug(f"Candidate {candidate.kind.value} at line {candidate.line_index + 1}")
    return extract_block(lines, candidate.line_index)


# ================== Public API ==================
def extract_enclosing_block(
    text: str,
    config: Optional[EngineConfig] = None,
    language: Optional[str] = None,
) -> Optional[str]:
    """
    Text of the block enclosing the instruction marker in `text`.

    Args:
        text:     Full file content.
        config:   Marker tokens; defaults to EngineConfig().
        language: Dialect tag used to pick a structural parser ("swift").
                  Without one only the heuristics run.

    Returns:
        The block text, or None when there is no marker, the marker is
        inside a visible region, or no enclosing declaration is found.
    """
    config = config or EngineConfig()
    source = SourceText.from_text(text)

    marker_line = find_marker_line(source.lines, config.instruction_marker)
    if marker_line is None:
        return None

    if is_inside_markers(source.lines, marker_line, config.open_marker, config.close_marker):
        logger.debug("Instruction marker already inside a visible region")
        return None

    parser = get_structural_parser(language)
    if parser is not None:
        offset = source.byte_offset(marker_line)
        declaration = parser.enclosing_declaration(source.text, offset)
        if declaration is not None:
            return declaration
        logger.debug("Structural parser found no enclosing declaration, falling back")

    block = extract_block_before_marker(source.lines, marker_line)
    if block is None:
        return None
    if not block.closed:
        logger.info(f"Enclosing block starting at line {block.start + 1} is unterminated")
    return block.text


def extract_enclosing_block_from_file(
    file_path: Union[str, Path],
    text: str,
    config: Optional[EngineConfig] = None,
) -> Optional[str]:
    """extract_enclosing_block() with the dialect inferred from the file suffix."""
    return extract_enclosing_block(text, config, language=language_for_path(file_path))


__all__ = [
    "language_for_path",
    "find_candidate",
    "extract_block_before_marker",
    "extract_enclosing_block",
    "extract_enclosing_block_from_file",
]
