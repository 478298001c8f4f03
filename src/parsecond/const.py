"""
General use constants.
"""

from __future__ import annotations
from typing import Final

WHITESPACES: Final[str] = " \t\r\n"
DECIMAL: Final[str] = "0123456789"
SIGNS: Final[str] = "+-"
OPERATOR_CHARS: Final[str] = "+-*/%^<>=!&|~"
"""Characters that can continue an operator symbol. A symbol followed by one of these is not matched on its own."""

RED: Final[str] = "\x1b[31m"
RESET: Final[str] = "\x1b[0m"
