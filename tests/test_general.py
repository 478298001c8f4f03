"""Tests for the general purpose parsers."""

from __future__ import annotations

import pytest

from parsecond import Err, run_parser
from parsecond.general import (
    angles,
    braces,
    brackets,
    decimal,
    digits,
    integer,
    parens,
    posint,
    quoted,
    spaced,
    white,
    word,
)


def value(parser, src: str):
    outcome = run_parser(parser, src)
    assert outcome, f"Expected success, got {outcome!r}"
    return outcome.val.val


class TestWhitespace:
    def test_white(self) -> None:
        assert value(white, "\tx") == "\t"
        assert run_parser(white, "x") == Err(None)

    def test_spaced(self) -> None:
        outcome = run_parser(spaced(posint), " \n 42 \t;")
        assert outcome.val.val == 42
        assert outcome.val.pos.rest == ";"


class TestDelimiters:
    @pytest.mark.parametrize(
        ("wrapper", "src"),
        [(parens, "(1)"), (brackets, "[1]"), (braces, "{1}"), (angles, "<1>")],
    )
    def test_wraps(self, wrapper, src: str) -> None:
        assert value(wrapper(posint), src) == 1

    def test_unclosed(self) -> None:
        assert run_parser(parens(posint), "(1") == Err(None)


class TestNumbers:
    def test_digits(self) -> None:
        assert value(digits, "0123x") == "0123"
        assert run_parser(digits, "x") == Err(None)

    def test_integer(self) -> None:
        assert value(integer, "42") == 42
        assert value(integer, "-42") == -42
        assert value(integer, "+42") == 42
        assert run_parser(integer, "-") == Err(None)

    @pytest.mark.parametrize(
        ("src", "expected"),
        [("1.5", 1.5), (".5", 0.5), ("-2", -2), ("-0.25", -0.25), ("3", 3)],
    )
    def test_decimal(self, src: str, expected: float) -> None:
        assert value(decimal, src) == expected

    def test_decimal_without_fraction_digits(self) -> None:
        outcome = run_parser(decimal, "3.")
        assert outcome.val.val == 3
        assert outcome.val.pos.rest == "."


class TestWords:
    def test_word(self) -> None:
        assert value(word, "hello world") == "hello"
        assert run_parser(word, " x") == Err(None)

    def test_quoted(self) -> None:
        assert value(quoted, '"a b"c') == "a b"
        assert value(quoted, '""') == ""
        assert run_parser(quoted, '"open') == Err(None)
