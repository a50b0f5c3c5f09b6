import io
import subprocess
import sys
from pathlib import Path

import pytest

from sqlindent import __version__
from sqlindent.__main__ import main


def _project_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _run_main(monkeypatch, argv: list[str], stdin: str = "") -> int:
    monkeypatch.setattr(sys, "stdin", io.StringIO(stdin))
    return main(argv)


def test_stdin_basic(monkeypatch, capsys) -> None:
    ret = _run_main(monkeypatch, [], "select velocity, color from rockets")
    assert ret == 0
    assert capsys.readouterr().out == "SELECT\n    velocity,\n    color\nFROM\n    rockets\n"


def test_stdin_dash(monkeypatch, capsys) -> None:
    assert _run_main(monkeypatch, ["-"], "select 1") == 0
    assert capsys.readouterr().out == "SELECT\n    1\n"


def test_output_has_exactly_one_trailing_newline(monkeypatch, capsys) -> None:
    assert _run_main(monkeypatch, [], "select 1;\n\n\n") == 0
    out = capsys.readouterr().out
    assert out.endswith(";\n")
    assert not out.endswith("\n\n")


def test_lowercase_flag(monkeypatch, capsys) -> None:
    assert _run_main(monkeypatch, ["--lowercase"], "SELECT id FROM users") == 0
    assert capsys.readouterr().out == "select\n    id\nfrom\n    users\n"


def test_style_aligned(monkeypatch, capsys) -> None:
    assert _run_main(monkeypatch, ["--style", "aligned"], "select id, name from users") == 0
    assert capsys.readouterr().out == "SELECT id\n       , name\n  FROM users\n"


def test_style_dataops(monkeypatch, capsys) -> None:
    assert _run_main(monkeypatch, ["--style", "dataops"], "select velocity, color from rockets") == 0
    assert capsys.readouterr().out == "SELECT\n    velocity\n    , color\nFROM\n    rockets\n"


def test_streamline_defaults_to_lowercase(monkeypatch, capsys) -> None:
    assert _run_main(monkeypatch, ["--style", "streamline"], "select wingspan from dragons") == 0
    assert capsys.readouterr().out == "select\n  wingspan\nfrom\n  dragons\n"


def test_streamline_uppercase_flag(monkeypatch, capsys) -> None:
    assert _run_main(monkeypatch, ["--style", "streamline", "--uppercase"], "select wingspan from dragons") == 0
    assert capsys.readouterr().out == "SELECT\n  wingspan\nFROM\n  dragons\n"


def test_aligned_lowercase(monkeypatch, capsys) -> None:
    sql = "select altitude from volcanoes where dormant = true"
    assert _run_main(monkeypatch, ["--style", "aligned", "--lowercase"], sql) == 0
    assert capsys.readouterr().out == "select altitude\n  from volcanoes\n where dormant = true\n"


def test_invalid_style(monkeypatch, capsys) -> None:
    assert _run_main(monkeypatch, ["--style", "foobar"], "select 1") == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "failed: unsupported style 'foobar'" in captured.err


@pytest.mark.parametrize("text", ["", "   \n\t  "])
def test_blank_input_is_an_error(monkeypatch, capsys, text: str) -> None:
    assert _run_main(monkeypatch, [], text) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error: no SQL input provided" in captured.err


def test_casing_flags_are_exclusive(monkeypatch) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _run_main(monkeypatch, ["--uppercase", "--lowercase"], "select 1")
    assert excinfo.value.code == 2


def test_version(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_stdin_check(monkeypatch) -> None:
    assert _run_main(monkeypatch, ["--check"], "SELECT\n    1\n") == 0
    assert _run_main(monkeypatch, ["--check"], "select 1") == 1


def test_stdin_in_place_is_rejected(monkeypatch, capsys) -> None:
    assert _run_main(monkeypatch, ["--in-place"], "select 1") == 1
    assert "--in-place" in capsys.readouterr().err


def test_check_and_in_place_are_exclusive(tmp_path: Path, capsys) -> None:
    path = tmp_path / "q.sql"
    path.write_text("select 1", encoding="utf-8")
    assert main([str(path), "--check", "--in-place"]) == 1
    assert "mutually exclusive" in capsys.readouterr().err


def test_format_file_to_stdout(tmp_path: Path, capsys) -> None:
    path = tmp_path / "q.sql"
    path.write_text("select 1", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "SELECT\n    1\n"
    assert path.read_text(encoding="utf-8") == "select 1"


def test_check_then_in_place(tmp_path: Path, capsys) -> None:
    path = tmp_path / "q.sql"
    path.write_text("select a, b from t", encoding="utf-8")

    assert main([str(path), "--check"]) == 1
    assert f"needs format: {path}" in capsys.readouterr().out

    assert main([str(path), "--in-place"]) == 0
    assert f"ok: wrote {path}" in capsys.readouterr().out
    assert path.read_text(encoding="utf-8") == "SELECT\n    a,\n    b\nFROM\n    t\n"
    assert not path.with_suffix(".sql.tmp").exists()

    assert main([str(path), "--check"]) == 0


def test_directory_requires_check_or_in_place(tmp_path: Path, capsys) -> None:
    (tmp_path / "a.sql").write_text("select 1", encoding="utf-8")
    assert main([str(tmp_path)]) == 1
    assert "--check or --in-place" in capsys.readouterr().err


def test_directory_in_place_with_style(tmp_path: Path, capsys) -> None:
    nested = tmp_path / "nested"
    nested.mkdir()
    (tmp_path / "a.sql").write_text("select a, b from t", encoding="utf-8")
    (nested / "b.sql").write_text("select c from u", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("select untouched", encoding="utf-8")
    (tmp_path / "empty.sql").write_text("", encoding="utf-8")

    assert main([str(tmp_path), "--in-place", "--style", "aligned"]) == 0
    assert (tmp_path / "a.sql").read_text(encoding="utf-8") == "SELECT a\n       , b\n  FROM t\n"
    assert (nested / "b.sql").read_text(encoding="utf-8") == "SELECT c\n  FROM u\n"
    assert (tmp_path / "notes.txt").read_text(encoding="utf-8") == "select untouched"
    assert (tmp_path / "empty.sql").read_text(encoding="utf-8") == ""

    assert main([str(tmp_path), "--check", "--style", "aligned"]) == 0


def test_empty_directory(tmp_path: Path, capsys) -> None:
    assert main([str(tmp_path), "--check"]) == 0
    assert "no .sql files found" in capsys.readouterr().out


def test_missing_file(tmp_path: Path, capsys) -> None:
    missing = tmp_path / "missing.sql"
    assert main([str(missing)]) == 1
    err = capsys.readouterr().err
    assert err.startswith("error: ")
    assert str(missing) in err


def test_module_entry_point() -> None:
    result = subprocess.run(
        [sys.executable, "-m", "sqlindent", "--style", "aligned"],
        cwd=_project_root(),
        input="select a, b, c from t",
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert result.stdout == "SELECT a\n       , b\n       , c\n  FROM t\n"


def test_module_entry_point_blank_input() -> None:
    result = subprocess.run(
        [sys.executable, "-m", "sqlindent"],
        cwd=_project_root(),
        input="  \n",
        capture_output=True,
        text=True,
    )
    assert result.returncode == 1
    assert "no SQL input provided" in result.stderr
