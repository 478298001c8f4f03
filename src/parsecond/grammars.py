"""
Worked example grammars, used by the `parsecond` console.

- `calculator`: arithmetic expressions, evaluated.
- `semicolon_list`: items separated by `;` and `;+`, as a tree.
- `shell_command()`: a hierarchical command shell, where the command decides how its arguments are parsed.
"""

from __future__ import annotations
from typing import Any, Callable, Final

from dataclasses import dataclass, field
from functools import reduce
import operator

from parsecond.main import (
    Err,
    Ok,
    Outcome,
    Parser,
    alternative,
    bind,
    end_of_input,
    fail,
    fmap,
    head,
    join,
    lazy,
    pure,
    result,
    right,
    satisfy,
    separated_by,
    separated_by1,
    some,
    until,
)
from parsecond.general import parens, posint, quoted, spaced, white, word
from parsecond.expr import BinaryOp, binary_operator, evaluate

# arithmetic

ARITHMETIC_OPERATORS: Final[dict[str, Callable[[Any, Any], Any]]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "^": operator.pow,
    "**": operator.pow,
}

arithmetic_expr: Parser[int | BinaryOp[int], Any] = lazy(lambda: _additive)
"""An arithmetic expression tree over non-negative integers. `^` and `**` are right associative."""

_atom = alternative(posint, parens(spaced(arithmetic_expr)))
_power = binary_operator(["^", "**"], "right", _atom)
_term = binary_operator(["*", "/"], "left", _power)
_additive = binary_operator(["+", "-"], "left", _term)

def evaluate_arithmetic(tree: int | BinaryOp[int]) -> Outcome[int | float, str]:
    """Evaluates an arithmetic tree. Division by zero and float overflow are failures, not exceptions."""
    try:
        return Ok(evaluate(tree, ARITHMETIC_OPERATORS))
    except ZeroDivisionError:
        return Err("Division by zero.")
    except OverflowError:
        return Err("Result too large.")

calculator: Parser[int | float, Any] = bind(arithmetic_expr, lambda tree: result(evaluate_arithmetic(tree)))

# semicolon delimited list

_list_item = fmap(head(until(alternative(";+", ";", end_of_input))), str.strip)

semicolon_list: Parser[str | BinaryOp[str], Any] = binary_operator([";+", ";"], "left", _list_item, operator_chars="")
"""
Items separated by `;` or `;+`, as a left leaning tree.

`a; b;+ c` is `(('a' ; 'b') ;+ 'c')`
"""

# command shell

@dataclass
class Command:
    action: Callable[..., str]
    children: dict[str, Command] = field(default_factory=dict)
    description: str | None = None

def find_command(root: Command, path: list[str]) -> Command | None:
    return reduce(lambda cmd, name: None if cmd is None else cmd.children.get(name), path, root)

def default_commands() -> Command:
    """The command tree of the console's `shell` grammar."""
    def help_action(path_str: str = "", *rest: str) -> str:
        cmd = find_command(root, path_str.split(".")) if path_str else root
        if cmd is None:
            return f"Command '{path_str}' not found."
        children = "".join(f"\n * {name}" for name in cmd.children)
        return f"{path_str or '[root]'}: {cmd.description or '[no description]'}{children}"

    root = Command(
        action=lambda *args: "root",
        children={
            "help": Command(help_action, description="Get help of a command."),
            "echo": Command(lambda *args: " ".join(args), description="Echo text."),
            "foo": Command(lambda *args: "foo", children={
                "bar": Command(lambda *args: "bar"),
            }),
        },
    )
    return root

command_path = separated_by1(join(some(satisfy(lambda ch: ch != "." and not ch.isspace()))), ".")
"""A dotted command path. `foo.bar`"""

arguments = alternative(
    right(some(white), separated_by(alternative(quoted, word), some(white))),
    pure(()),
)

def shell_command(root: Command) -> Parser[str, Any]:
    """
    A command path, then its arguments, evaluated to the command's output.

    Fails with a message string when the path doesn't name a command.
    """
    def select(path: list[str]) -> Parser[str, Any]:
        cmd = find_command(root, path)
        if cmd is None:
            return fail(f"Command '{'.'.join(path)}' not found.")
        return fmap(arguments, lambda args: cmd.action(*args))
    return spaced(bind(command_path, select))
