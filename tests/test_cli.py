import io
import logging
from pathlib import Path

import pytest

from lox import cli


#a clean file scans and exits 0 with one token per line
def test_run_file_success(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = tmp_path / "ok.lox"
    script.write_text("var x = 1;\n")
    assert cli.main([str(script)]) == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines() == [
        "VAR var nil",
        "IDENTIFIER x nil",
        "EQUAL = nil",
        "NUMBER 1 1.0",
        "SEMICOLON ; nil",
        "EOF  nil",
    ]
    assert captured.err == ""


#any diagnostic during a file scan means exit 65
def test_run_file_with_lexical_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = tmp_path / "bad.lox"
    script.write_text("print 1;\n@\n")
    assert cli.main([str(script)]) == 65
    captured = capsys.readouterr()
    assert "[line 2] Error: Unexpected character '@'." in captured.err
    assert "PRINT print nil" in captured.out


#an unreadable script is reported without a traceback
def test_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main([str(tmp_path / "nope.lox")]) == 66
    assert "cannot read" in capsys.readouterr().err


#too many arguments is a usage error before any scanning
def test_too_many_arguments(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["one.lox", "two.lox"]) == 64
    captured = capsys.readouterr()
    assert "usage: lox" in captured.err
    assert captured.out == ""


#each REPL line gets a fresh scan and a reset error flag
def test_prompt_scans_each_line() -> None:
    stdin = io.StringIO('1 + 2\n"open\nnil\n')
    out = io.StringIO()
    err = io.StringIO()
    assert cli.run_prompt(stdin=stdin, out=out, err=err) == 0

    lines = out.getvalue().split("> ")
    assert lines[1].splitlines() == ["NUMBER 1 1.0", "PLUS + nil", "NUMBER 2 2.0", "EOF  nil"]
    assert lines[2].splitlines() == ["EOF  nil"]
    assert lines[3].splitlines() == ["NIL nil nil", "EOF  nil"]
    assert err.getvalue().splitlines() == ["[line 1] Error: Unterminated string."]


#end of input at the first prompt ends the session with status 0
def test_prompt_exits_cleanly_on_empty_input() -> None:
    out = io.StringIO()
    assert cli.run_prompt(prompt="lox> ", stdin=io.StringIO(""), out=out, err=io.StringIO()) == 0
    assert out.getvalue() == "lox> \n"


#no script argument starts the prompt on stdin
def test_main_without_arguments_reads_stdin(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("and\n"))
    assert cli.main([]) == 0
    assert "AND and nil" in capsys.readouterr().out


#bytes the default encoding cannot decode are scanned as bad characters, not a crash
def test_run_file_with_undecodable_bytes(tmp_path: Path) -> None:
    script = tmp_path / "binary.lox"
    script.write_bytes(b"print 1;\n\xff\xfe\n")
    out = io.StringIO()
    err = io.StringIO()
    assert cli.run_file(script, out=out, err=err) == 65
    assert "PRINT print nil" in out.getvalue().splitlines()
    errors = err.getvalue().splitlines()
    assert errors
    assert all(line.startswith("[line 2] Error: Unexpected character") for line in errors)


#logging is only configured when asked for with -v
def test_main_leaves_logging_alone_without_verbose(tmp_path: Path) -> None:
    script = tmp_path / "quiet.lox"
    script.write_text("1;\n")
    root = logging.getLogger()
    before = list(root.handlers)
    assert cli.main([str(script)]) == 0
    assert root.handlers == before
