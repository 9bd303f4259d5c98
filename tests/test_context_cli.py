# tests/test_context_cli.py
from pathlib import Path

import pytest

# local imports
from ContextEngine.context import context_main

MARKED = "head\n// v\nfunc f() {\n  x()\n}\n// ^\n// TODO: - y\n"


@pytest.fixture(autouse=True)
def _env(clean_env, tmp_path):
    clean_env.chdir(tmp_path)


def test_filter_prints_visible_regions(write_source, capsys):
    path = write_source("A.txt", MARKED)
    assert context_main(["filter", str(path)]) == 0
    out = capsys.readouterr().out
    assert "func f() {\n  x()\n}\n" in out
    assert "head" not in out


def test_enclose(write_source, capsys):
    path = write_source("A.txt", MARKED)
    assert context_main(["enclose", str(path)]) == 0
    assert capsys.readouterr().out == "func f() {\n  x()\n}\n"


def test_instruction(write_source, capsys):
    path = write_source("A.txt", MARKED)
    assert context_main(["instruction", str(path)]) == 0
    assert capsys.readouterr().out == "// TODO: - y\n"


def test_instruction_missing_exits_with_error(write_source, capsys):
    path = write_source("B.txt", "nothing here\n")
    assert context_main(["instruction", str(path)]) == 1
    assert "No valid TODO instruction found" in capsys.readouterr().err


def test_unreadable_file_exits_with_error(tmp_path, capsys):
    assert context_main(["filter", str(tmp_path / "missing.txt")]) == 1
    assert "Error reading file" in capsys.readouterr().err


def test_types_written_to_directory(write_source, tmp_path, capsys):
    path = write_source("C.txt", "let a: Alpha = Beta()\n")
    out_dir = tmp_path / "types"
    assert context_main(["types", str(path), "--write", "--output-dir", str(out_dir)]) == 0

    written = capsys.readouterr().out.strip()
    assert written.startswith(str(out_dir))
    assert Path(written).read_text(encoding="utf-8") == "Alpha\nBeta"


def test_process_with_basename(write_source, capsys):
    path = write_source("A.txt", MARKED)
    assert context_main(["process", str(path), "--basename", "A.txt"]) == 0
    assert capsys.readouterr().out.endswith("// Enclosing function context:\nfunc f() {\n  x()\n}\n")


def test_force_markers_flag(write_source, capsys):
    path = write_source("D.txt", "plain\n")
    assert context_main(["--force-markers", "filter", str(path)]) == 0
    assert capsys.readouterr().out == "\n\n// ...\n\n\n"


def test_enclosing_type(write_source, capsys):
    path = write_source("E.txt", "struct Box {\n  func f() {\n    // TODO: - y\n  }\n}\n")
    assert context_main(["enclosing-type", str(path)]) == 0
    assert capsys.readouterr().out == "Box\n"
