"""
Parser combinators with typed failures instead of exceptions.

See the objects for more explanations.

See the `parsecond.general` module for general purpose parsers you can use as examples, and `parsecond.expr` for binary operator precedence.

Defining parsers:
```
from parsecond import *
from parsecond.general import spaced, posint

pair = sequence(posint, spaced(","), posint)
point = fmap(delimited_by("(", ")")(pair), lambda vals: (vals[0], vals[2]))
```

Using parsers:
```
outcome = run_parser(point, "(1, 2)")

if outcome:
    value, pos = outcome.val    # `outcome` is an `Ok`
else:
    outcome.err                 # `outcome` is an `Err`
```

A parser is any callable that takes a `Position` and returns `Ok(Parsed(value, position))` or `Err(error)`.
"""

import parsecond.const as const
import parsecond.main
from parsecond.main import (
    Ok,
    Err,
    Outcome,
    Position,
    Parsed,
    Parser,
    ParserLike,
    to_parser,
    ErrKind,
    ExpectEnd,
    ExpectTerminator,
    parse_err,
    is_err,
    describe_err,
    ParseError,
    SKIPPED,
    satisfy,
    any_char,
    char,
    one_of,
    none_of,
    char_match,
    string,
    string_anycase,
    pattern,
    regex,
    pure,
    success,
    fail,
    result,
    fmap,
    map_err,
    map_pos,
    join,
    bind,
    bind_err,
    bind_parsed,
    guard,
    not_empty,
    sequence,
    seq,
    filtered_sequence,
    alternative,
    alt,
    many,
    some,
    optional,
    opt,
    separated_by,
    separated_by1,
    skip,
    ignore,
    left,
    right,
    head,
    delimited_by,
    lazy,
    followed_by,
    not_followed_by,
    until,
    end_of_input,
    eoi,
    ended,
    Range,
    Ranged,
    ranged,
    run_parser,
    parse,
)
import parsecond.general as general
import parsecond.expr as expr
