# tests/test_marker_scanner.py
import pytest

# local imports
from ContextEngine.core import (
    InstructionNotFoundError,
    SourceReadError,
    VisibleRegion,
    extract_instruction,
    extract_instruction_from_file,
    find_marker_line,
    is_inside_markers,
    marker_depth,
    scan_markers,
    uses_markers,
)


# ---------- uses_markers ----------

def test_uses_markers_requires_both_kinds():
    assert uses_markers("a\n// v\nb\n// ^\n")
    assert not uses_markers("a\n// v\nb\n")
    assert not uses_markers("a\n// ^\nb\n")
    assert not uses_markers("plain text")


def test_uses_markers_ignores_order_and_surrounding_whitespace():
    assert uses_markers("   // ^\ncode\n\t// v  ")


def test_marker_lines_need_exact_trimmed_match():
    assert not uses_markers("// v extra\n// ^")
    assert not uses_markers("x = 1 // v\n// ^")


# ---------- scan_markers ----------

def test_scan_collects_regions_and_instruction_line():
    text = "a\n// v\nb\n// ^\nc\n  // TODO: - do it"
    scan = scan_markers(text)

    assert scan.regions == [VisibleRegion(open_line=1, close_line=3)]
    assert scan.open_lines == [1]
    assert scan.close_lines == [3]
    assert scan.marker_line == 5
    assert scan.uses_markers


def test_scan_folds_nested_regions_into_outer():
    scan = scan_markers("// v\n// v\nx\n// ^\n// ^")
    assert scan.regions == [VisibleRegion(open_line=0, close_line=4)]


def test_scan_unmatched_open_produces_no_region():
    scan = scan_markers("// v\nx\ny")
    assert scan.regions == []
    assert not scan.uses_markers


def test_visible_region_is_half_open():
    region = VisibleRegion(open_line=2, close_line=5)
    assert region.contains(2)
    assert region.contains(4)
    assert not region.contains(5)
    assert not region.contains(1)


# ---------- depth ----------

def test_depth_never_negative_with_excess_closes():
    lines = ["// ^", "// ^", "// ^", "// v", "x", "// ^", "// ^"]
    for index in range(len(lines)):
        assert marker_depth(lines, index) >= 0
    assert marker_depth(lines, 1) == 0
    assert marker_depth(lines, 4) == 1
    assert marker_depth(lines, 6) == 0


def test_marker_after_closed_region_is_outside():
    lines = "// v\nfunc f() {\n  x()\n}\n// ^\n// TODO: - y".splitlines()
    marker = find_marker_line(lines)
    assert marker == 5
    assert marker_depth(lines, marker) == 0
    assert not is_inside_markers(lines, marker)


def test_marker_inside_region_is_inside():
    lines = "// v\n// TODO: - z\n// ^".splitlines()
    assert marker_depth(lines, 1) == 1
    assert is_inside_markers(lines, 1)


# ---------- instruction ----------

def test_extract_instruction_strips_leading_whitespace():
    text = "\n// Some comment\n    // TODO: - Fix the bug\n// Another comment"
    assert extract_instruction(text) == "// TODO: - Fix the bug"


def test_extract_instruction_returns_first_match():
    text = "// TODO: - first\n// TODO: - second"
    assert extract_instruction(text) == "// TODO: - first"


def test_extract_instruction_matches_inline_marker():
    assert extract_instruction("let x = 1 // TODO: - rename") == "let x = 1 // TODO: - rename"


def test_extract_instruction_absent():
    assert extract_instruction("// TODO: without dash\n// TODO:- tight") is None


def test_extract_instruction_from_file_errors(write_source, tmp_path):
    path = write_source("NoTodo.swift", "struct A {}\n")
    with pytest.raises(InstructionNotFoundError):
        extract_instruction_from_file(path)

    with pytest.raises(SourceReadError):
        extract_instruction_from_file(tmp_path / "missing.swift")


def test_extract_instruction_from_file(write_source):
    path = write_source("Todo.js", "function a() {\n  // TODO: - add retry\n}\n")
    assert extract_instruction_from_file(path) == "// TODO: - add retry"
