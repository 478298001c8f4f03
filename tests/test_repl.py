"""Tests for the interactive console and the command-line entry point."""

from __future__ import annotations

import io

import pytest

import parsecond.const as const
from parsecond.general import posint
from parsecond.grammars import calculator, semicolon_list
from parsecond.repl import TOO_DEEP, ReplOptions, build_arg_parser, create_parser_repl, main


def run_repl(parser, lines: str, options: ReplOptions) -> str:
    stdout = io.StringIO()
    create_parser_repl(parser, options, stdin=io.StringIO(lines), stdout=stdout)
    return stdout.getvalue()


class TestCreateParserRepl:
    def test_prints_values_and_errors(self) -> None:
        output = run_repl(posint, "12\n12x\n", ReplOptions(name="int", color=False))
        assert output.startswith("Parsecond REPL - int\nint> ")
        assert "12\nint> " in output
        assert "Error: Expect end of input, got 'x'.\nint> " in output

    def test_without_name(self) -> None:
        output = run_repl(posint, "", ReplOptions(color=False))
        assert output == "Parsecond REPL\n> \n"

    def test_leftover_input_allowed(self) -> None:
        output = run_repl(posint, "12x\n", ReplOptions(require_end_of_input=False, color=False))
        assert "12\n" in output
        assert "Error" not in output

    def test_colored_errors(self) -> None:
        output = run_repl(posint, "x\n", ReplOptions())
        assert f"{const.RED}Error: Parse failed.{const.RESET}" in output

    def test_continues_after_overflow(self) -> None:
        output = run_repl(calculator, "(7 / 2) ^ 1000\n1 + 1\n", ReplOptions(name="calc", color=False))
        assert "calc> Error: Result too large.\ncalc> 2\n" in output

    def test_continues_after_deep_nesting(self) -> None:
        deep = "(" * 5000 + "1" + ")" * 5000
        output = run_repl(calculator, f"{deep}\n1 + 1\n", ReplOptions(name="calc", color=False))
        assert f"calc> Error: {TOO_DEEP}\ncalc> 2\n" in output

    def test_prints_long_list(self) -> None:
        line = "; ".join(["a"] * 2000)
        output = run_repl(semicolon_list, line + "\n", ReplOptions(color=False))
        assert "(" * 1999 + "'a' ; 'a')" in output
        assert "Error" not in output

    def test_strips_line_endings(self) -> None:
        output = run_repl(posint, "7\r\n", ReplOptions(color=False))
        assert "7\n" in output
        assert "Error" not in output


class TestMain:
    def test_runs_grammar(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("1 + 2 * 3\n"))
        assert main(["calc", "--no-color"]) == 0
        out = capsys.readouterr().out
        assert "Parsecond REPL - calc" in out
        assert "calc> 7\n" in out

    def test_shell_grammar(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("echo hi\nnope\n"))
        assert main(["shell", "--no-color"]) == 0
        out = capsys.readouterr().out
        assert "shell> hi\n" in out
        assert "Error: Command 'nope' not found." in out

    def test_rejects_unknown_grammar(self) -> None:
        with pytest.raises(SystemExit):
            build_arg_parser().parse_args(["cobol"])

    def test_options(self) -> None:
        args = build_arg_parser().parse_args(["list", "--no-end", "-v"])
        assert args.grammar == "list"
        assert args.no_end
        assert args.verbose
