"""
General purpose parsers, built only from the combinators in `parsecond.main`.

They also serve as examples of composing parsers.
"""

from __future__ import annotations
from typing import Any

from parsecond.main import (
    Parser,
    ParserLike,
    alternative,
    delimited_by,
    fmap,
    join,
    many,
    none_of,
    one_of,
    optional,
    satisfy,
    sequence,
    some,
)
import parsecond.const as const

# whitespace and delimiters

white = one_of(const.WHITESPACES)
"""A single whitespace character."""

spaced = delimited_by(many(white), many(white))
"""Wraps a parser so that it tolerates surrounding whitespace."""

parens = delimited_by("(", ")")
brackets = delimited_by("[", "]")
braces = delimited_by("{", "}")
angles = delimited_by("<", ">")

# numbers

digit = one_of(const.DECIMAL)
digits = join(some(digit))

posint = fmap(digits, int)
"""A non-negative decimal integer."""

def signed(parser: ParserLike) -> Parser[Any, Any]:
    """Allows an optional `+` or `-` before a number parser. `-` negates the value."""
    return fmap(
        sequence(optional(one_of(const.SIGNS)), parser),
        lambda vals: -vals[1] if vals[0] == "-" else vals[1],
    )

integer = signed(posint)

decimal = signed(alternative(
    fmap(
        sequence(optional(digits), ".", digits),
        lambda vals: float(f"{vals[0] or 0}.{vals[2]}"),
    ),
    posint,
))
"""
A decimal number. `1.5`, `.5`, `-2`

Numbers without a fractional part are `int`s.
"""

# words

word = join(some(satisfy(lambda ch: not ch.isspace())))
"""A run of non-whitespace characters."""

quoted = delimited_by('"', '"')(join(many(none_of('"'))))
"""A double quoted string, without escapes. The value excludes the quotes."""
