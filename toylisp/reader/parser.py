"""
  toylisp Reader: lexer and parser

- Streaming, lazy tokenizing; parsing yields one top-level expression at a time
- Emits Python primitives rather than cons cells:

    - lists    -> Python list
    - symbols  -> Symbol
    - integers -> int
    - decimals -> float
    - true / false -> bool

Every token carries its character offset so syntax errors can point at the
offending input.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from toylisp import SExpression
from toylisp.errors import ToySyntaxError
from toylisp.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<atom>[^\s();]+)"  # anything else up to a delimiter
)

SYMBOL_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*\Z")
INTEGER_RE = re.compile(r"-?[0-9]+\Z")
FLOAT_RE = re.compile(r"-?[0-9]+\.[0-9]+\Z")

BOOLEANS: dict[str, bool] = {
    "true": True,
    "false": False,
}

Token = tuple[str, str, int]


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, offset) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        kind = m.lastgroup
        if kind != "comment":
            yield kind, m.group(kind), pos
        pos = m.end()


def parse_atom(text: str, pos: int) -> SExpression:
    """Convert an atom token to a number, boolean or Symbol."""
    if text in BOOLEANS:
        return BOOLEANS[text]
    if INTEGER_RE.match(text):
        return int(text)
    if FLOAT_RE.match(text):
        return float(text)
    if SYMBOL_RE.match(text):
        return Symbol(text)
    raise ToySyntaxError(f"Invalid atom {text!r}", pos)


class TokenStream:
    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> tuple[Optional[str], Optional[str], Optional[int]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str], Optional[int]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None, None))

    def parse_expr(self) -> SExpression:
        """Parse the next expression, or return None at end of input."""
        tok_type, tok_val, pos = self.peek()
        if tok_type is None:
            return None

        if tok_type == "atom":
            self.advance()
            return parse_atom(tok_val, pos)

        if tok_type == "rparen":
            raise ToySyntaxError("Unexpected ')'", pos)

        # List
        self.advance()
        items = []
        while True:
            next_type, _, _ = self.peek()
            if next_type is None:
                raise ToySyntaxError("Unmatched '('", pos)
            if next_type == "rparen":
                self.advance()
                return items
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(source: str) -> list[SExpression]:
    """Read every top-level expression in `source`.

    Raises ToySyntaxError for unbalanced parentheses, invalid atoms, or input
    that holds no expression at all.
    """
    exprs = list(TokenStream(lex(source)).parse_all())
    if not exprs:
        raise ToySyntaxError("Empty input", 0)
    return exprs


def read_one(source: str) -> SExpression:
    """Read exactly one top-level expression."""
    exprs = read(source)
    if len(exprs) > 1:
        raise ToySyntaxError("Expected a single expression", None)
    return exprs[0]
