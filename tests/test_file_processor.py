# tests/test_file_processor.py
from dataclasses import replace

import pytest

# local imports
from ContextEngine.core import ContextExtractionError, SourceReadError, process_file, process_file_or_raw
from ContextEngine.core import file_processor

HEADER = "\n\n// Enclosing function context:\n"
PLACEHOLDER_BLOCK = "\n\n// ...\n\n"

MARKED = (
    "Some preamble text\n"
    "func myFunction() {\n"
    "let x = 10;\n"
    "}\n"
    "Other text\n"
    "// v\n"
    "ignored text\n"
    "// ^\n"
    "Trailing text\n"
    "// TODO: - Do something"
)


def test_no_markers_returns_raw_content(write_source, config):
    raw = "fn main() {\n    println!(\"Hello, world!\");\n}\n"
    path = write_source("main.rs", raw)
    assert process_file(path, "main.rs", config) == raw


def test_markers_and_matching_basename_append_context(write_source, config):
    path = write_source("Snippet.txt", MARKED)
    expected = (
        "\n\n// ...\n\nignored text\n\n\n// ...\n\n"
        + HEADER
        + "func myFunction() {\nlet x = 10;\n}"
    )
    assert process_file(path, "Snippet.txt", config) == expected


def test_other_basename_gets_filtered_content_only(write_source, config):
    path = write_source("Snippet.txt", MARKED)
    assert process_file(path, "Other.txt", config) == "\n\n// ...\n\nignored text\n\n\n// ...\n\n"
    assert process_file(path, None, config) == "\n\n// ...\n\nignored text\n\n\n// ...\n\n"


def test_marker_inside_region_appends_nothing(write_source, config):
    path = write_source("Inside.txt", "func a() {\n// v\n// TODO: - z\n// ^\n}\n")
    assert process_file(path, "Inside.txt", config) == PLACEHOLDER_BLOCK + "// TODO: - z\n" + PLACEHOLDER_BLOCK


def test_force_markers_applies_to_marker_free_file(write_source, config):
    path = write_source("Forced.txt", "func a() {\n  // TODO: - x\n}\n")
    forced = replace(config, force_markers=True)
    assert process_file(path, "Forced.txt", forced) == (
        PLACEHOLDER_BLOCK + HEADER + "func a() {\n  // TODO: - x\n}"
    )


def test_custom_placeholder(write_source, config):
    path = write_source("Custom.txt", "a\n// v\nb\n// ^\n")
    assert process_file(path, None, replace(config, placeholder="/* … */")) == "\n\n/* … */\n\nb\n\n\n/* … */\n\n"


def test_process_file_unreadable(tmp_path, config):
    with pytest.raises(SourceReadError):
        process_file(tmp_path / "missing.swift", None, config)


def test_lenient_returns_empty_for_unreadable(tmp_path, config):
    assert process_file_or_raw(tmp_path / "missing.swift", None, config) == ""

    binary = tmp_path / "blob.swift"
    binary.write_bytes(b"\xff\xfe\x00bad")
    assert process_file_or_raw(binary, None, config) == ""


def test_lenient_falls_back_to_raw_content(write_source, config, monkeypatch):
    path = write_source("Raw.txt", "a\n// v\nb\n// ^\n")

    def _fail(*args, **kwargs):
        raise ContextExtractionError("simulated failure")

    monkeypatch.setattr(file_processor, "process_file", _fail)
    assert process_file_or_raw(path, None, config) == "a\n// v\nb\n// ^\n"
