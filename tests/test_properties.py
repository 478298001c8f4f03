"""Property-based tests for the combinator algebra."""

from __future__ import annotations

from hypothesis import given, strategies as st

from parsecond import (
    Err,
    Position,
    alternative,
    char,
    ended,
    many,
    ranged,
    run_parser,
    satisfy,
    sequence,
    some,
    string,
)
from parsecond.grammars import calculator

text = st.text(alphabet="ab \n", max_size=30)


class TestPrimitiveProperties:
    @given(src=text)
    def test_satisfy_consumes_one_matching_char(self, src: str) -> None:
        outcome = run_parser(satisfy(str.isalpha), src)
        if src and src[0].isalpha():
            assert outcome.val.val == src[0]
            assert outcome.val.pos.pos == 1
        else:
            assert outcome == Err(None)

    @given(src=text, prefix=st.text(alphabet="ab", min_size=1, max_size=3))
    def test_string_matches_exact_prefix(self, src: str, prefix: str) -> None:
        outcome = run_parser(string(prefix), src)
        assert bool(outcome) == src.startswith(prefix)


class TestRepetitionProperties:
    @given(src=text)
    def test_many_never_fails(self, src: str) -> None:
        assert run_parser(many(char("a")), src)

    @given(src=text)
    def test_some_agrees_with_many(self, src: str) -> None:
        some_outcome = run_parser(some(char("a")), src)
        many_outcome = run_parser(many(char("a")), src)
        if some_outcome:
            assert some_outcome == many_outcome
        else:
            assert many_outcome.val.val == []


class TestCompositionProperties:
    @given(src=text)
    def test_sequence_threads_position(self, src: str) -> None:
        outcome = run_parser(sequence(many(char("a")), many(char("b"))), src)
        a_run, b_run = outcome.val.val
        assert outcome.val.pos.pos == len(a_run) + len(b_run)
        assert src.startswith("".join(a_run) + "".join(b_run))

    @given(src=text)
    def test_alternative_is_left_biased(self, src: str) -> None:
        first = run_parser(many(char("a")), src)
        assert run_parser(alternative(many(char("a")), string("ab")), src) == first

    @given(src=text)
    def test_ranged_text_is_consumed_input(self, src: str) -> None:
        outcome = run_parser(ranged(many(satisfy(lambda ch: ch != "\n"))), src)
        parsed_range = outcome.val.val.range
        assert parsed_range.text == "".join(outcome.val.val.val)
        assert parsed_range.end == outcome.val.pos.pos

    @given(src=text, offset=st.integers(min_value=0, max_value=5))
    def test_positions_are_not_mutated(self, src: str, offset: int) -> None:
        pos = Position.start(src)
        advanced = pos.advance(min(offset, len(src)))
        assert pos.pos == 0
        assert advanced.src is pos.src


@st.composite
def arithmetic(draw, depth: int = 0) -> str:
    """A random expression over `+`, `-` and `*` that is also valid Python."""
    if depth >= 3 or draw(st.booleans()):
        return str(draw(st.integers(min_value=0, max_value=50)))
    lhs = draw(arithmetic(depth + 1))
    rhs = draw(arithmetic(depth + 1))
    op = draw(st.sampled_from(["+", "-", "*"]))
    if draw(st.booleans()):
        return f"({lhs} {op} {rhs})"
    return f"{lhs}{op}{rhs}"


class TestCalculatorProperties:
    @given(src=arithmetic())
    def test_agrees_with_python(self, src: str) -> None:
        assert run_parser(ended(calculator), src).val.val == eval(src)
