import io

import pytest

from cloji.__main__ import main


@pytest.fixture
def script_file(tmp_path):
    def _write(source):
        path = tmp_path / "script.clj"
        path.write_text(source, encoding="utf-8")
        return str(path)
    return _write


def test_runs_file(script_file, capsys):
    assert main([script_file('(print "hi" (+ 1 2))')]) == 0
    assert capsys.readouterr().out == "hi 3\n"


def test_print_result(script_file, capsys):
    assert main([script_file("(def a 20) (+ a 1)"), "--print-result"]) == 0
    assert capsys.readouterr().out == "21\n"


def test_print_result_skips_undefined(script_file, capsys):
    assert main([script_file("(## nothing)"), "--print-result"]) == 0
    assert capsys.readouterr().out == ""


def test_runtime_error_reports_trace(script_file, capsys):
    assert main([script_file("(def a 1)\n(missing a)")]) == 1
    err = capsys.readouterr().err
    assert "UndefinedVariableError: missing is not defined" in err
    assert "at missing (2)" in err


def test_syntax_error(script_file, capsys):
    assert main([script_file("(a b")]) == 1
    assert capsys.readouterr().err.startswith("SyntaxError: Unmatched opening bracket")


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.clj")]) == 1
    assert "Error reading file" in capsys.readouterr().err


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(* 6 7)"))
    assert main(["-", "--print-result"]) == 0
    assert capsys.readouterr().out == "42\n"
