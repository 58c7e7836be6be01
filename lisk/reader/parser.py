"""
  Lisk Reader: tokenizer and recursive-descent parser

- Parentheses are always tokens of their own; everything else is split on whitespace.
- There are no strings, comments or reader macros.
- Emits Python primitives plus the special-form nodes from lisk.types.forms:

    - nil -> Nil
    - #t / #f -> True / False
    - integers in the signed 64-bit range -> int, other numerals -> float
    - anything else -> Symbol
    - lists -> tuple (or a special-form node when the head is a keyword)
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Optional

from lisk import SExpression
from lisk.builtins import INT_MAX, INT_MIN
from lisk.errors import LiskParseError
from lisk.reader.forms import classify
from lisk.types.nil import Nil
from lisk.types.symbol import Symbol

logger = logging.getLogger(__name__)

INT_RE = re.compile(r"[+-]?[0-9]+")
FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+(?=[eE]))(?:[eE][+-]?[0-9]+)?")

CONSTANTS: dict[str, SExpression] = {
    "nil": Nil,
    "#t": True,
    "#f": False,
}


def tokenize(source: str) -> list[str]:
    """Split program text into tokens; never fails."""
    return source.replace("(", " ( ").replace(")", " ) ").split()


def parse_atom(token: str) -> SExpression:
    """Convert a single non-parenthesis token into an atom."""
    if token in CONSTANTS:
        return CONSTANTS[token]
    if INT_RE.fullmatch(token):
        try:
            value = int(token)
        except ValueError:
            # more digits than int() accepts; read it as a float instead
            value = None
        if value is not None and INT_MIN <= value <= INT_MAX:
            return value
        return _parse_float(token)
    if FLOAT_RE.fullmatch(token):
        return _parse_float(token)
    return Symbol(token)


def _parse_float(token: str) -> SExpression:
    try:
        return float(token)
    except (ValueError, OverflowError):
        return Symbol(token)


class TokenStream:
    def __init__(self, tokens: Iterable[str]):
        self.tokens = iter(tokens)
        self.buffer: list[str] = []

    def peek(self) -> Optional[str]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[str]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def parse_expr(self) -> SExpression:
        token = self.advance()
        if token is None:
            raise LiskParseError("Unexpected end of input")

        if token == ")":
            raise LiskParseError("Unexpected ')'")

        if token == "(":
            items = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise LiskParseError("Unmatched '(': list is not terminated")
                if nxt == ")":
                    self.advance()
                    break
                items.append(self.parse_expr())
            return classify(tuple(items))

        return parse_atom(token)


def parse_program(source: str) -> SExpression:
    """Parse the first expression of `source`; trailing tokens are ignored."""
    tokens = tokenize(source)
    if not tokens:
        raise LiskParseError("Empty program")
    expr = TokenStream(tokens).parse_expr()
    logger.debug("parsed %r", expr)
    return expr
