# ContextEngine/utils/generic_utils.py
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

# local imports
from ..core.errors import SourceReadError


def read_source(path: Union[str, Path]) -> str:
    """
    Read a whole source file as UTF-8.

    This is the only place the engine touches the disk for input; any
    failure is re-raised as SourceReadError so callers can decide whether
    to fall back to raw content.
    """
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(path, str(exc)) from exc


def split_lines(text: str) -> List[str]:
    r"""
    Split on "\n" only, dropping one trailing "\r" per line.

    Unlike str.splitlines(), form feeds, "\x85" and "\u2028" stay inside
    their line, so indices agree with tree-sitter rows and byte offsets.
    A final newline does not open an extra empty line.
    """
    if not text:
        return []
    pieces = text.split("\n")
    if text.endswith("\n"):
        pieces.pop()
    return [piece[:-1] if piece.endswith("\r") else piece for piece in pieces]


def line_byte_offset(lines: Sequence[str], index: int) -> int:
    """
    Byte offset of the first character of line `index` in the UTF-8 text
    the lines were split from: sum of (encoded length + 1) over the
    preceding lines. Indices past the end are clamped.
    """
    index = max(0, min(index, len(lines)))
    return sum(len(line.encode("utf-8")) + 1 for line in lines[:index])


def utc_timestamped_filename(base: str, ext: str = "txt") -> str:
    """
    Generate a UTC-based timestamped filename like:
        <base>_20251112T205501Z.<ext>
    """
    ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    return f"{base}_{ts}.{ext}"


def write_types_file(
    tokens: Iterable[str],
    directory: Optional[Union[str, Path]] = None,
) -> Path:
    """
    Persist newline-joined type tokens and return the file path.

    Without `directory`, a fresh file is created in the system temp dir.
    """
    content = "\n".join(tokens)

    if directory is not None:
        output_dir = Path(directory)
        output_dir.mkdir(parents=True, exist_ok=True)
        path = output_dir / utc_timestamped_filename("types")
        path.write_text(content, encoding="utf-8")
        return path

    with tempfile.NamedTemporaryFile(
        "w", encoding="utf-8", prefix="types_", suffix=".txt", delete=False
    ) as handle:
        handle.write(content)
    return Path(handle.name)
