"""Tests for the console front end."""

import io

import pytest

import main
from calculator import MathEngine


def test_session_shows_results():
    assert list(main.run_session(["2+3×4", "10÷4"])) == ["14", "2.5"]


def test_session_keeps_display_on_error():
    lines = ["2+3", "2+", "1÷0", "2a+3", "7×6"]
    assert list(main.run_session(lines)) == ["5", "5", "5", "5", "42"]


def test_session_before_any_result_shows_zero():
    assert list(main.run_session(["×4"])) == ["0"]


def test_session_skips_blank_lines_and_stops_on_exit():
    lines = ["1+1\n", "   \n", "exit\n", "9×9\n"]
    assert list(main.run_session(lines)) == ["2"]


def test_session_reports_errors_when_enabled(capsys):
    list(main.run_session(["1÷0"], {"show_errors": True}))
    assert "Calculator Error 3003: Division by Zero" in capsys.readouterr().out


def test_session_is_quiet_by_default(capsys):
    list(main.run_session(["1÷0"]))
    assert capsys.readouterr().out == ""


def test_check_files_exist_passes_in_project():
    main.check_files_exist()


def test_check_files_exist_exits_on_missing_files(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(main, "PROJECT_ROOT", tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        main.check_files_exist()
    assert excinfo.value.code == 1
    assert "MathEngine.py" in capsys.readouterr().out


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2+3×4\n5-3-1\nquit\n"))
    main.main()
    out = capsys.readouterr().out.splitlines()
    assert out[-2:] == ["14", "1"]
    assert MathEngine.debug is False
