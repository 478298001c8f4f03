"""
The implementations of the outcome algebra, the position state and the combinators.
"""

from __future__ import annotations
from typing import Any, Callable, ClassVar, Final, Generic, Literal, NamedTuple, NoReturn, Protocol, Self, TypeVar

from collections.abc import Sequence
from dataclasses import dataclass
import enum
import logging
import re

logger = logging.getLogger(__name__)


_T = TypeVar("_T")
_U = TypeVar("_U")
_E = TypeVar("_E")
_F = TypeVar("_F")
_T_co = TypeVar("_T_co", covariant=True)
_E_co = TypeVar("_E_co", covariant=True)



class Ok(Generic[_T]):
    """
    The success variant of an outcome.

    ```
    outcome = run_parser(parser, "abc")
    if outcome:
        value, pos = outcome.val    # `outcome` is an `Ok`
    else:
        outcome.err                 # `outcome` is an `Err`
    ```
    """
    __slots__ = ("val",)

    def __init__(self, val: _T) -> None:
        self.val: Final[_T] = val

    @property
    def is_ok(self) -> Literal[True]:
        return True

    @property
    def is_err(self) -> Literal[False]:
        return False

    def map(self, f: Callable[[_T], _U]) -> Ok[_U]:
        """Transforms the success value."""
        return Ok(f(self.val))

    def bind(self, f: Callable[[_T], Outcome[_U, _E]]) -> Outcome[_U, _E]:
        """Threads the success value into a function producing the next outcome."""
        return f(self.val)

    def map_err(self, f: Callable[[Any], Any]) -> Self:
        return self

    def bind_err(self, f: Callable[[Any], Any]) -> Self:
        return self

    def unwrap(self) -> _T:
        return self.val

    def unwrap_or(self, default: object) -> _T:
        return self.val

    def __bool__(self) -> Literal[True]:
        return True

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Ok) and self.val == other.val

    __hash__ = None # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Ok({self.val!r})"

class Err(Generic[_E]):
    """
    The failure variant of an outcome.

    Most parsers fail with `None`, the empty marker. Parsers that have to explain why they stopped fail with a tagged record. (`ExpectEnd`, `ExpectTerminator`)
    """
    __slots__ = ("err",)

    def __init__(self, err: _E) -> None:
        self.err: Final[_E] = err

    @property
    def is_ok(self) -> Literal[False]:
        return False

    @property
    def is_err(self) -> Literal[True]:
        return True

    def map(self, f: Callable[[Any], Any]) -> Self:
        return self

    def bind(self, f: Callable[[Any], Any]) -> Self:
        return self

    def map_err(self, f: Callable[[_E], _F]) -> Err[_F]:
        """Transforms the failure payload."""
        return Err(f(self.err))

    def bind_err(self, f: Callable[[_E], Outcome[_T, _F]]) -> Outcome[_T, _F]:
        """Recovers from the failure with a function producing the next outcome."""
        return f(self.err)

    def unwrap(self) -> NoReturn:
        """Raises a `ParseError` describing the failure."""
        raise ParseError(describe_err(self.err))

    def unwrap_or(self, default: _T) -> _T:
        return default

    def __bool__(self) -> Literal[False]:
        return False

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Err) and self.err == other.err

    __hash__ = None # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Err({self.err!r})"

Outcome = Ok[_T] | Err[_E]



@dataclass(frozen=True, slots=True, repr=False)
class Position:
    """
    An immutable snapshot of how far a parse has reached.

    Advancing returns a new snapshot. Earlier snapshots stay valid, which is what backtracking relies on.
    """
    src: str
    """The string that's being parsed."""
    pos: int
    """The absolute offset."""

    @classmethod
    def start(cls, src: str, starting_pos: int = 0) -> Position:
        if not 0 <= starting_pos <= len(src):
            raise ValueError(f"Starting position {starting_pos} is outside of the input.")
        return cls(src, starting_pos)

    @property
    def rest(self) -> str:
        """The remaining input. Always `src[pos:]`."""
        return self.src[self.pos:]

    @property
    def is_eof(self) -> bool:
        return self.pos >= len(self.src)

    def advance(self, amount: int) -> Position:
        """Returns a snapshot moved forward by the specified amount of characters."""
        return Position(self.src, self.pos + amount)

    def line_col(self) -> tuple[int, int]:
        """1-based line and column of the offset."""
        pos = min(self.pos, len(self.src))
        line = self.src.count("\n", 0, pos) + 1
        column = pos - self.src.rfind("\n", 0, pos) # works when rfind returns -1 too
        return (line, column)

    def __repr__(self) -> str:
        rest = self.rest
        if len(rest) > 20:
            rest = rest[:20] + "..."
        return f"<Position {self.pos} {rest!r}>"

class Parsed(NamedTuple, Generic[_T]):
    """The value carried by every parser success: the produced value, and the position after it."""
    val: _T
    pos: Position

class Parser(Protocol[_T_co, _E_co]):
    """
    A protocol for parsers.

    Any callable that takes a `Position` and returns an `Outcome` of `Parsed` qualifies. There is no base class to inherit from.
    """
    def __call__(self, pos: Position, /) -> Ok[Parsed[_T_co]] | Err[_E_co]: ...

ParserLike = Parser[Any, Any] | str | re.Pattern
"""Accepted by every combinator in place of a parser. Strings become `string()` parsers, compiled patterns become `pattern()` parsers."""

def to_parser(parser: ParserLike) -> Parser[Any, Any]:
    if isinstance(parser, str):
        return string(parser)
    elif isinstance(parser, re.Pattern):
        return pattern(parser)
    elif callable(parser):
        return parser
    else:
        raise TypeError(f"Expected a parser, a string or a compiled pattern, got {type(parser).__name__}.")

def to_parsers(parsers: Sequence[ParserLike]) -> tuple[Parser[Any, Any], ...]:
    return tuple(to_parser(parser) for parser in parsers)



class ErrKind(enum.Enum):
    """Stable discriminants of the tagged errors."""
    EXPECT_END = "ExpectEnd"
    EXPECT_TERMINATOR = "ExpectTerminator"

@dataclass(frozen=True)
class ExpectEnd:
    """Input remained where the end of input was expected."""
    kind: ClassVar[ErrKind] = ErrKind.EXPECT_END
    rest: str
    """The unconsumed remainder."""
    pos: int

@dataclass(frozen=True)
class ExpectTerminator:
    """The input ran out before the terminator of an `until()` scan matched."""
    kind: ClassVar[ErrKind] = ErrKind.EXPECT_TERMINATOR
    content: str
    """Everything that was scanned."""
    pos: int
    """Where the scan started."""

TaggedErr = ExpectEnd | ExpectTerminator

_ERR_TYPES: Final[dict[ErrKind, type[ExpectEnd] | type[ExpectTerminator]]] = {
    ErrKind.EXPECT_END: ExpectEnd,
    ErrKind.EXPECT_TERMINATOR: ExpectTerminator,
}

def parse_err(kind: ErrKind | str, **fields: Any) -> TaggedErr:
    """
    Builds the tagged error of the given kind.

    `kind` can be an `ErrKind` or its value:
    ```
    parse_err("ExpectEnd", rest="b", pos=3)
    ```
    """
    return _ERR_TYPES[ErrKind(kind)](**fields)

def is_err(kind: ErrKind | str, err: object) -> bool:
    """Whether `err` is a tagged error of the given kind. Works with any payload, including the empty marker."""
    return getattr(err, "kind", None) is ErrKind(kind)

def describe_err(err: object) -> str:
    """A human readable message for a failure payload."""
    if err is None:
        return "Parse failed."
    elif isinstance(err, ExpectEnd):
        return f"Expect end of input, got '{err.rest}'."
    elif isinstance(err, ExpectTerminator):
        return f"Expect terminator, scanned '{err.content}'."
    else:
        return str(err)

class ParseError(Exception):
    """
    The exception that's raised when a failed outcome is unwrapped.

    Parsers themselves never raise it. Failures are returned as `Err` values.
    """

    def __init__(self, msg: str, src: str | None = None, pos: int | None = None) -> None:
        """
        `msg`: The reason for the failure.
        `src`: The string that was being parsed, if known.
        `pos`: The position of the failure, if known. A positioned note is added when both `src` and `pos` are given.
        """
        super().__init__(msg)
        self.src: str | None = src
        self.pos: int | None = pos
        if src is not None and pos is not None:
            self.append_pos_note(src, pos)

    def append_pos_note(self, src: str, pos: int, msg: str | None = None) -> Self:
        note: list[str] = [] if msg is None else [msg]

        line, column = Position(src, pos).line_col()
        note.append(f"At position {min(pos, len(src))} (line {line}, column {column})")

        lines = src.splitlines()
        if len(lines) > line-1:
            line_str = lines[line-1]
            if len(line_str) >= column-1:
                if column <= 20:
                    note.append(f"{line_str[:40]}\n{' '*(column-1)}^")
                else:
                    note.append(f"{line_str[(column-20):(column+20)]}\n{' '*19}^")
        self.add_note("\n".join(note))
        return self



class _Marker(enum.Enum):
    SKIPPED = "SKIPPED"

    def __repr__(self) -> str:
        return self.value

SKIPPED: Final = _Marker.SKIPPED
"""The value of `skip()` parsers. Dropped by `filtered_sequence()`."""



# primitives

def satisfy(pred: Callable[[str], bool]) -> Parser[str, None]:
    """
    Matches a single character if `pred` holds on it.

    Fails at the end of input.
    """
    def inner(pos: Position) -> Outcome[Parsed[str], None]:
        if pos.is_eof:
            return Err(None)
        ch = pos.src[pos.pos]
        if pred(ch):
            return Ok(Parsed(ch, pos.advance(1)))
        return Err(None)
    return inner

any_char: Final[Parser[str, None]] = satisfy(lambda ch: True)

def char(value: str) -> Parser[str, None]:
    if len(value) != 1:
        raise ValueError(f"Expected a single character, got {value!r}.")
    return satisfy(lambda ch: ch == value)

def one_of(chars: str) -> Parser[str, None]:
    return satisfy(lambda ch: ch in chars)

def none_of(chars: str) -> Parser[str, None]:
    return satisfy(lambda ch: ch not in chars)

def char_match(regex: str | re.Pattern, flags: int | re.RegexFlag = 0) -> Parser[str, None]:
    """Matches a single character that the regex matches."""
    compiled = re.compile(regex, flags)
    return satisfy(lambda ch: compiled.search(ch) is not None)

def string(value: str) -> Parser[str, None]:
    """
    Matches the given string. Case sensitive.

    Never consumes a prefix on failure.
    """
    def inner(pos: Position) -> Outcome[Parsed[str], None]:
        if pos.src.startswith(value, pos.pos):
            return Ok(Parsed(value, pos.advance(len(value))))
        return Err(None)
    return inner

def string_anycase(value: str) -> Parser[str, None]:
    """
    Matches the given string. Non case sensitive.

    The value is the matched text, as it appears in the input.
    """
    lowered = value.lower()
    def inner(pos: Position) -> Outcome[Parsed[str], None]:
        matched = pos.src[pos.pos:pos.pos+len(value)]
        if len(matched) == len(value) and matched.lower() == lowered:
            return Ok(Parsed(matched, pos.advance(len(value))))
        return Err(None)
    return inner

def pattern(regex: str | re.Pattern, flags: int | re.RegexFlag = 0) -> Parser[str, None]:
    """
    Matches the regex, anchored at the current position.

    The value is the matched text.
    """
    compiled = re.compile(regex, flags)
    def inner(pos: Position) -> Outcome[Parsed[str], None]:
        m = compiled.match(pos.src, pos.pos)
        if m is None:
            return Err(None)
        return Ok(Parsed(m.group(0), Position(pos.src, m.end())))
    return inner

def pure(val: _T) -> Parser[_T, Any]:
    """Succeeds with `val` without consuming anything."""
    return lambda pos: Ok(Parsed(val, pos))

def fail(err: _E) -> Parser[Any, _E]:
    """Fails with `err` without consuming anything."""
    return lambda pos: Err(err)

def result(outcome: Outcome[_T, _E]) -> Parser[_T, _E]:
    """Lifts an outcome into a parser that consumes nothing."""
    return lambda pos: outcome.map(lambda val: Parsed(val, pos))



# transformation and binding

def fmap(parser: ParserLike, f: Callable[[Any], _U]) -> Parser[_U, Any]:
    """Transforms the value of a successful parse."""
    parser = to_parser(parser)
    return lambda pos: parser(pos).map(lambda parsed: Parsed(f(parsed.val), parsed.pos))

def map_err(parser: ParserLike, f: Callable[[Any], _F]) -> Parser[Any, _F]:
    """Transforms the failure payload."""
    parser = to_parser(parser)
    return lambda pos: parser(pos).map_err(f)

def map_pos(parser: ParserLike, f: Callable[[Position], Position]) -> Parser[Any, Any]:
    """Transforms the position left by a successful parse."""
    parser = to_parser(parser)
    return lambda pos: parser(pos).map(lambda parsed: Parsed(parsed.val, f(parsed.pos)))

def join(parser: ParserLike) -> Parser[str, Any]:
    """Concatenates a parsed sequence of strings."""
    return fmap(parser, "".join)

def bind(parser: ParserLike, f: Callable[[Any], ParserLike]) -> Parser[Any, Any]:
    """
    Runs the parser, then runs the parser that `f` returns for its value, from where the first one stopped.

    Used for grammars where what comes next depends on what was parsed.
    """
    parser = to_parser(parser)
    return lambda pos: parser(pos).bind(lambda parsed: to_parser(f(parsed.val))(parsed.pos))

def bind_err(parser: ParserLike, f: Callable[[Any], ParserLike]) -> Parser[Any, Any]:
    """On failure, runs the parser that `f` returns for the failure payload, from the original position."""
    parser = to_parser(parser)
    return lambda pos: parser(pos).bind_err(lambda err: to_parser(f(err))(pos))

def bind_parsed(parser: ParserLike, f: Callable[[Parsed[Any]], ParserLike]) -> Parser[Any, Any]:
    """Like `bind()`, but `f` receives both the value and the position."""
    parser = to_parser(parser)
    return lambda pos: parser(pos).bind(lambda parsed: to_parser(f(parsed))(parsed.pos))

def guard(parser: ParserLike, pred: Callable[[Any], bool]) -> Parser[Any, Any]:
    """Fails with the empty marker if `pred` doesn't hold on the value."""
    parser = to_parser(parser)
    def inner(pos: Position) -> Outcome[Parsed[Any], Any]:
        outcome = parser(pos)
        if outcome and not pred(outcome.val.val):
            return Err(None)
        return outcome
    return inner

def not_empty(parser: ParserLike) -> Parser[Any, Any]:
    """Fails with the empty marker if the value is empty."""
    return guard(parser, bool)



# sequencing, choice, repetition

def sequence(*parsers: ParserLike) -> Parser[tuple[Any, ...], Any]:
    """
    All the given parsers must match in sequence for the parser to succeed.

    The value is the tuple of their values. The first failure is returned as-is.
    """
    if len(parsers) <= 0:
        raise ValueError("At least one parser required.")
    new_parsers = to_parsers(parsers)
    def inner(pos: Position) -> Outcome[Parsed[tuple[Any, ...]], Any]:
        vals: list[Any] = []
        for parser in new_parsers:
            outcome = parser(pos)
            if not outcome:
                return outcome
            val, pos = outcome.val
            vals.append(val)
        return Ok(Parsed(tuple(vals), pos))
    return inner

def filtered_sequence(*parsers: ParserLike) -> Parser[tuple[Any, ...], Any]:
    """`sequence()`, without the values of `skip()` parsers."""
    return fmap(sequence(*parsers), lambda vals: tuple(val for val in vals if val is not SKIPPED))

def alternative(*parsers: ParserLike) -> Parser[Any, None]:
    """
    Attempts to match the parsers in order, each from the same starting position, until one matches.

    If none match, fails with the empty marker. The individual failures are discarded.
    """
    if len(parsers) <= 0:
        raise ValueError("At least one parser required.")
    new_parsers = to_parsers(parsers)
    def inner(pos: Position) -> Outcome[Parsed[Any], None]:
        for parser in new_parsers:
            if (outcome := parser(pos)):
                return outcome
        return Err(None)
    return inner

def many(parser: ParserLike) -> Parser[list[Any], Any]:
    """
    Repeatedly matches the parser until it fails. Never fails.

    The parser must consume input whenever it succeeds, otherwise this never stops.
    """
    parser = to_parser(parser)
    def inner(pos: Position) -> Outcome[Parsed[list[Any]], Any]:
        vals: list[Any] = []
        while (outcome := parser(pos)):
            val, pos = outcome.val
            vals.append(val)
        return Ok(Parsed(vals, pos))
    return inner

def some(parser: ParserLike) -> Parser[list[Any], Any]:
    """
    Repeatedly matches the parser until it fails. Succeeds if at least one iteration matches.

    If the first iteration fails, its failure is returned.
    """
    parser = to_parser(parser)
    def inner(pos: Position) -> Outcome[Parsed[list[Any]], Any]:
        outcome = parser(pos)
        if not outcome:
            return outcome
        val, pos = outcome.val
        vals: list[Any] = [val]
        while (outcome := parser(pos)):
            val, pos = outcome.val
            vals.append(val)
        return Ok(Parsed(vals, pos))
    return inner

def optional(parser: ParserLike) -> Parser[Any, Any]:
    """Succeeds with the parser's value, or with `None` without consuming anything if it fails."""
    parser = to_parser(parser)
    return lambda pos: parser(pos).bind_err(lambda err: Ok(Parsed(None, pos)))

def separated_by1(base: ParserLike, separator: ParserLike) -> Parser[list[Any], Any]:
    """
    One or more `base` values, separated by `separator`.

    A trailing separator is not consumed.
    """
    base = to_parser(base)
    return fmap(
        sequence(base, many(right(separator, base))),
        lambda vals: [vals[0], *vals[1]],
    )

def separated_by(base: ParserLike, separator: ParserLike) -> Parser[list[Any], Any]:
    """
    Zero or more `base` values, separated by `separator`.

    A trailing separator is not consumed.
    """
    parser = separated_by1(base, separator)
    return lambda pos: parser(pos).bind_err(lambda err: Ok(Parsed([], pos)))

def skip(parser: ParserLike) -> Parser[Literal[_Marker.SKIPPED], Any]:
    """Replaces the value with `SKIPPED`."""
    return fmap(parser, lambda val: SKIPPED)

def left(parser: ParserLike, other: ParserLike) -> Parser[Any, Any]:
    """Both must match in sequence. Keeps the value of the first one."""
    return fmap(sequence(parser, other), lambda vals: vals[0])

def right(parser: ParserLike, other: ParserLike) -> Parser[Any, Any]:
    """Both must match in sequence. Keeps the value of the second one."""
    return fmap(sequence(parser, other), lambda vals: vals[1])

def head(parser: ParserLike) -> Parser[Any, Any]:
    """Keeps the first item of a sequence value."""
    return fmap(parser, lambda vals: vals[0])

def delimited_by(start: ParserLike, end: ParserLike) -> Callable[[ParserLike], Parser[Any, Any]]:
    """
    Returns a function that wraps parsers between `start` and `end`, keeping the wrapped parser's value.

    ```
    parens = delimited_by("(", ")")
    parens(integer)
    ```
    """
    start = to_parser(start)
    end = to_parser(end)
    return lambda parser: fmap(sequence(start, parser, end), lambda vals: vals[1])

def lazy(builder: Callable[[], ParserLike]) -> Parser[Any, Any]:
    """
    Defers building the parser until it's first run.

    Needed for grammars that refer to themselves:
    ```
    expr = lazy(lambda: alternative(integer, parens(expr)))
    ```
    """
    built: Parser[Any, Any] | None = None
    def inner(pos: Position) -> Outcome[Parsed[Any], Any]:
        nonlocal built
        if built is None:
            built = to_parser(builder())
        return built(pos)
    return inner



# lookahead and scanning

def followed_by(parser: ParserLike, follower: ParserLike) -> Parser[Any, Any]:
    """
    Matches the parser only if `follower` matches after it.

    `follower` is not consumed. If it fails, its failure is returned. Use `left(parser, follower)` to consume it too.
    ```
    run_parser(followed_by("abc", spaced("->")), "abc -> def")    # position stays before " -> def"
    run_parser(left("abc", spaced("->")), "abc -> def")           # position moves to "def"
    ```
    """
    parser = to_parser(parser)
    follower = to_parser(follower)
    def inner(pos: Position) -> Outcome[Parsed[Any], Any]:
        outcome = parser(pos)
        if not outcome:
            return outcome
        if not (check := follower(outcome.val.pos)):
            return check
        return outcome
    return inner

def not_followed_by(parser: ParserLike, follower: ParserLike) -> Parser[Any, Any]:
    """
    Matches the parser only if `follower` doesn't match after it.

    Otherwise fails with the empty marker.
    """
    parser = to_parser(parser)
    follower = to_parser(follower)
    def inner(pos: Position) -> Outcome[Parsed[Any], Any]:
        outcome = parser(pos)
        if not outcome:
            return outcome
        if follower(outcome.val.pos):
            return Err(None)
        return outcome
    return inner

def until(terminator: ParserLike) -> Parser[tuple[str, Any], ExpectTerminator]:
    """
    Scans forward one character at a time until `terminator` matches, trying it at the end of input too.

    The value is `(scanned, terminator_value)`. The position is left at the start of the terminator, so it's not consumed.

    Fails with `ExpectTerminator` if the input runs out first.
    """
    terminator = to_parser(terminator)
    def inner(pos: Position) -> Outcome[Parsed[tuple[str, Any]], ExpectTerminator]:
        scan = pos
        while True:
            if (outcome := terminator(scan)):
                return Ok(Parsed((pos.src[pos.pos:scan.pos], outcome.val.val), scan))
            if scan.is_eof:
                return Err(ExpectTerminator(pos.src[pos.pos:scan.pos], pos.pos))
            scan = scan.advance(1)
    return inner

def end_of_input(pos: Position) -> Outcome[Parsed[None], ExpectEnd]:
    """A pre-defined parser (not a factory). Succeeds with `None` if no input remains, fails with `ExpectEnd` otherwise."""
    if pos.is_eof:
        return Ok(Parsed(None, pos))
    return Err(ExpectEnd(pos.rest, pos.pos))

def ended(parser: ParserLike) -> Parser[Any, Any]:
    """The parser must consume all of the remaining input."""
    return left(parser, end_of_input)



# ranges

@dataclass(frozen=True)
class Range:
    """A span of the input, from `start` (inclusive) to `end` (exclusive)."""
    src: str
    start: int
    end: int

    @classmethod
    def between(cls, before: Position, after: Position) -> Range:
        return cls(before.src, before.pos, after.pos)

    @classmethod
    def empty(cls) -> Range:
        """A range that covers nothing. Its start is after its end."""
        return cls("", 1, 0)

    @classmethod
    def outer(cls, first: Range, last: Range) -> Range:
        """From the start of `first` to the end of `last`."""
        return cls(first.src, first.start, last.end)

    @classmethod
    def inner(cls, first: Range, last: Range) -> Range:
        """From the end of `first` to the start of `last`."""
        return cls(first.src, first.end, last.start)

    def start_of(self) -> Range:
        return Range(self.src, self.start, self.start)

    def end_of(self) -> Range:
        return Range(self.src, self.end, self.end)

    @property
    def text(self) -> str:
        return self.src[self.start:self.end]

    def __repr__(self) -> str:
        return f"<Range {self.start}..{self.end}>"

class Ranged(NamedTuple, Generic[_T]):
    val: _T
    range: Range

def ranged(parser: ParserLike) -> Parser[Ranged[Any], Any]:
    """Pairs the value with the range of input the parser consumed. Doesn't change anything else."""
    parser = to_parser(parser)
    return lambda pos: parser(pos).map(lambda parsed: Parsed(Ranged(parsed.val, Range.between(pos, parsed.pos)), parsed.pos))



# running

def run_parser(parser: ParserLike, src: str, starting_pos: int = 0) -> Outcome[Parsed[Any], Any]:
    """
    Runs the parser on a fresh position.

    ```
    outcome = run_parser(ended(digits), "123")
    if outcome:
        value, pos = outcome.val
    else:
        describe_err(outcome.err)
    ```
    """
    outcome = to_parser(parser)(Position.start(src, starting_pos))
    if logger.isEnabledFor(logging.DEBUG):
        if outcome:
            logger.debug("Parsed %d characters, stopped at %d", len(src) - starting_pos, outcome.val.pos.pos)
        else:
            logger.debug("Parse of %d characters failed: %r", len(src) - starting_pos, outcome.err)
    return outcome

def parse(parser: ParserLike, src: str) -> Any:
    """
    Runs the parser and returns its value.

    Raises a `ParseError` on failure, positioned when the failure payload carries a position.
    """
    outcome = run_parser(parser, src)
    if not outcome:
        raise ParseError(describe_err(outcome.err), src, getattr(outcome.err, "pos", None))
    return outcome.val.val



seq = sequence
alt = alternative
opt = optional
ignore = skip
success = pure
regex = pattern
eoi = end_of_input
