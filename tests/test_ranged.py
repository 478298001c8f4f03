"""Tests for Range and range tracking."""

from __future__ import annotations

from parsecond import Err, Parsed, Position, Range, Ranged, char, many, ranged, run_parser, string


class TestRanged:
    def test_adds_consumed_span(self) -> None:
        outcome = run_parser(ranged(string("bc")), "abcd", starting_pos=1)
        assert outcome.val == Parsed(Ranged("bc", Range("abcd", 1, 3)), Position("abcd", 3))
        assert outcome.val.val.range.text == "bc"

    def test_zero_width_span(self) -> None:
        outcome = run_parser(ranged(many(char("x"))), "abc")
        assert outcome.val.val == Ranged([], Range("abc", 0, 0))

    def test_failure_unchanged(self) -> None:
        assert run_parser(ranged(string("x")), "abc") == Err(None)


class TestRange:
    def test_between(self) -> None:
        assert Range.between(Position("abcdef", 1), Position("abcdef", 4)) == Range("abcdef", 1, 4)

    def test_start_and_end_of(self) -> None:
        span = Range("abcdef", 1, 4)
        assert span.start_of() == Range("abcdef", 1, 1)
        assert span.end_of() == Range("abcdef", 4, 4)

    def test_outer_and_inner(self) -> None:
        first = Range("(abc)", 0, 1)
        last = Range("(abc)", 4, 5)
        assert Range.outer(first, last) == Range("(abc)", 0, 5)
        assert Range.inner(first, last).text == "abc"

    def test_empty(self) -> None:
        empty = Range.empty()
        assert empty.start > empty.end
        assert empty.text == ""

    def test_repr(self) -> None:
        assert repr(Range("abc", 0, 2)) == "<Range 0..2>"
