"""
Interactive console for trying out parsers line by line.

```
$ parsecond calc
Parsecond REPL - calc
calc> 1 + 2 * 3
7
```
"""

from __future__ import annotations
from typing import Any, Callable, Final, TextIO

from dataclasses import dataclass
import argparse
import logging
import sys

import parsecond.const as const
from parsecond.main import Err, ParserLike, describe_err, ended, run_parser
from parsecond.grammars import calculator, default_commands, semicolon_list, shell_command

logger = logging.getLogger(__name__)

TOO_DEEP: Final[str] = "Input nested too deeply."
"""Printed instead of a value when a line exceeds the recursion limit."""


@dataclass
class ReplOptions:
    require_end_of_input: bool = True
    """Wrap the parser in `ended()`, so that leftover input is an error."""
    name: str = ""
    """Shown in the banner and the prompt."""
    color: bool = True
    """Print errors in red."""


def create_parser_repl(
    parser: ParserLike,
    options: ReplOptions | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """
    Feeds every line of `stdin` to the parser and prints the value, or the error.

    A line that nests deeper than the recursion limit allows is reported as an error, and the session continues.

    Returns when `stdin` runs out.
    """
    options = ReplOptions() if options is None else options
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    if options.require_end_of_input:
        parser = ended(parser)

    def prompt() -> None:
        stdout.write(f"{options.name}> ")
        stdout.flush()

    print("Parsecond REPL" + (f" - {options.name}" if options.name else ""), file=stdout)
    prompt()
    for line in stdin:
        line = line.rstrip("\r\n")
        logger.debug("Read line: %r", line)
        try:
            outcome = run_parser(parser, line)
            text = str(outcome.val.val) if outcome else None
        except RecursionError:
            logger.debug("Recursion limit reached on a %d character line", len(line))
            outcome = Err(TOO_DEEP)
        if outcome:
            print(text, file=stdout)
        else:
            msg = "Error: " + describe_err(outcome.err)
            print(f"{const.RED}{msg}{const.RESET}" if options.color else msg, file=stdout)
        prompt()
    print(file=stdout)


GRAMMARS: Final[dict[str, Callable[[], ParserLike]]] = {
    "calc": lambda: calculator,
    "list": lambda: semicolon_list,
    "shell": lambda: shell_command(default_commands()),
}


def build_arg_parser() -> argparse.ArgumentParser:
    arg_parser = argparse.ArgumentParser(prog="parsecond", description="Try out the example grammars interactively.")
    arg_parser.add_argument("grammar", choices=sorted(GRAMMARS), help="The grammar to run.")
    arg_parser.add_argument("--no-end", action="store_true", help="Allow leftover input after a successful parse.")
    arg_parser.add_argument("--no-color", action="store_true", help="Print errors without colors.")
    arg_parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    return arg_parser


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    options = ReplOptions(
        require_end_of_input=not args.no_end,
        name=args.grammar,
        color=not args.no_color,
    )
    try:
        create_parser_repl(GRAMMARS[args.grammar](), options)
    except KeyboardInterrupt:
        print()
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
