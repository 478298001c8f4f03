"""
Precedence climbing for binary operators.

Each precedence level is a `binary_operator()` whose operands are the next, tighter level:
```
atom = alternative(posint, parens(spaced(expr)))
power = binary_operator(["^"], "right", atom)
term = binary_operator(["*", "/"], "left", power)
expr = binary_operator(["+", "-"], "left", term)
```
"""

from __future__ import annotations
from typing import Any, Callable, Generic, Literal, TypeVar

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from functools import reduce

import parsecond.const as const
from parsecond.main import (
    Parser,
    ParserLike,
    alternative,
    bind,
    fmap,
    lazy,
    many,
    not_followed_by,
    one_of,
    pure,
    sequence,
    string,
    to_parser,
)
from parsecond.general import spaced

_T = TypeVar("_T")

Associativity = Literal["left", "right"]


@dataclass(frozen=True)
class BinaryOp(Generic[_T]):
    """A binary operation. The operands are either leaf values or other operations."""
    op: str
    lhs: _T | BinaryOp[_T]
    rhs: _T | BinaryOp[_T]

    def __repr__(self) -> str:
        # left-associative chains can be thousands of levels deep
        parts: list[str] = []
        stack: list[tuple[Any, bool]] = [(self, False)]
        while stack:
            item, is_text = stack.pop()
            if is_text:
                parts.append(item)
            elif isinstance(item, BinaryOp):
                stack.extend([(")", True), (item.rhs, False), (f" {item.op} ", True), (item.lhs, False), ("(", True)])
            else:
                parts.append(repr(item))
        return "".join(parts)


def operator_symbol(ops: Sequence[str], operator_chars: str = const.OPERATOR_CHARS) -> Parser[str, None]:
    """
    Matches any of the operator symbols, with surrounding whitespace.

    Longer symbols are tried first. A symbol followed by one of `operator_chars` doesn't match, so `+` doesn't match the start of `+=`.
    """
    if len(ops) <= 0:
        raise ValueError("At least one operator required.")
    ordered = sorted(ops, key=len, reverse=True)
    follower = one_of(operator_chars)
    return spaced(alternative(*(not_followed_by(string(op), follower) for op in ordered)))


def binary_operator(
    ops: Sequence[str],
    associativity: Associativity,
    base: ParserLike,
    *,
    symbol: ParserLike | None = None,
    operator_chars: str = const.OPERATOR_CHARS,
) -> Parser[Any, Any]:
    """
    Parses `base` operands joined by any of the operators, into a tree of `BinaryOp`s.

    `"left"`: `1 - 2 - 3` is `((1 - 2) - 3)`. Folded in a single pass.
    `"right"`: `2 ^ 3 ^ 2` is `(2 ^ (3 ^ 2))`. Recursive, so the call depth grows with the number of operators.

    `symbol`: Replaces the default operator matcher. (`operator_symbol(ops, operator_chars)`)
    """
    if associativity not in ("left", "right"):
        raise ValueError("associativity must be 'left' or 'right'")
    base = to_parser(base)
    op = to_parser(symbol) if symbol is not None else operator_symbol(ops, operator_chars)

    if associativity == "left":
        return fmap(
            sequence(base, many(sequence(op, base))),
            lambda vals: reduce(lambda lhs, pair: BinaryOp(pair[0], lhs, pair[1]), vals[1], vals[0]),
        )

    def continue_chain(lhs: Any) -> Parser[Any, Any]:
        return alternative(
            fmap(sequence(op, chain), lambda vals: BinaryOp(vals[0], lhs, vals[1])),
            pure(lhs),
        )
    chain = lazy(lambda: bind(base, continue_chain))
    return chain


def evaluate(tree: Any, operators: Mapping[str, Callable[[Any, Any], Any]]) -> Any:
    """
    Folds a tree of `BinaryOp`s, using `operators` to apply each symbol.

    Leaf values are returned as-is. Walks the tree with an explicit stack, so deep trees don't hit the recursion limit.
    """
    values: list[Any] = []
    stack: list[tuple[Any, bool]] = [(tree, False)]
    while stack:
        node, operands_done = stack.pop()
        if not isinstance(node, BinaryOp):
            values.append(node)
        elif operands_done:
            rhs = values.pop()
            lhs = values.pop()
            values.append(operators[node.op](lhs, rhs))
        else:
            if node.op not in operators:
                raise ValueError(f"No function for operator {node.op!r}.")
            stack.append((node, True))
            stack.append((node.rhs, False))
            stack.append((node.lhs, False))
    return values[0]
