"""
  Ember Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits Ember values directly; there is no separate syntax tree:

    - ()          -> Nil
    - lists       -> chains of Pair ending in Nil
    - symbols     -> Symbol
    - strings     -> str
    - integers    -> int
    - 'form       -> (quote form)

Comments run from ';' to end of line and never reach the parser.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from ember import SExpression
from ember.types.errors import EmberSyntaxError, line_and_column
from ember.types.nil import Nil
from ember.types.pair import Pair, from_list
from ember.types.symbol import Symbol

Token = tuple[str, str, int]

TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # quote shorthand
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<open_string>")'  # a quote that never closes
    r"|(?P<symbol>[^\s()'\";]+)"  # fallback: symbols and numbers
    r")",
    re.DOTALL,
)

INTEGER_RE = re.compile(r"-?[0-9]+")
NUMBER_START_RE = re.compile(r"-?[0-9]")

STRING_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    '"': '"',
    "\\": "\\",
}

QUOTE = Symbol("quote")


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, offset) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        match = TOKEN_RE.match(source, pos)
        if not match:
            # Only trailing whitespace is left
            break
        kind = next(nm for nm in TOKEN_RE.groupindex if match.group(nm) is not None)
        start = match.start(1)
        pos = match.end()
        if kind == "comment":
            continue
        if kind == "open_string":
            line, col = line_and_column(source, start)
            raise EmberSyntaxError("Unterminated string", line, col)
        yield kind, match.group(kind), start


def _unescape(raw: str, source: str, offset: int) -> str:
    """Decode the body of a string token (without its surrounding quotes)."""
    if "\\" not in raw:
        return raw
    out = []
    i = 0
    while i < len(raw):
        ch = raw[i]
        if ch == "\\":
            nxt = raw[i + 1]
            if nxt not in STRING_ESCAPES:
                line, col = line_and_column(source, offset + 1 + i)
                raise EmberSyntaxError(f"Unknown string escape '\\{nxt}'", line, col)
            out.append(STRING_ESCAPES[nxt])
            i += 2
        else:
            out.append(ch)
            i += 1
    return "".join(out)


class TokenStream:
    def __init__(self, token_iter: Iterator[Token], source: str = ""):
        self.tokens = iter(token_iter)
        self.source = source
        self.buffer: list[Token] = []

    def peek(self) -> tuple[Optional[str], Optional[str], int]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None, len(self.source)
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str], int]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None, len(self.source)))

    def error(self, message: str, offset: int) -> EmberSyntaxError:
        line, col = line_and_column(self.source, offset)
        return EmberSyntaxError(message, line, col)

    def parse_expr(self) -> SExpression:
        tok_type, tok_val, offset = self.advance()
        if tok_type is None:
            raise self.error("Unexpected end of input", offset)

        if tok_type == "symbol":
            if INTEGER_RE.fullmatch(tok_val):
                try:
                    return int(tok_val)
                except ValueError:
                    # Host int/str digit limit (sys.set_int_max_str_digits)
                    raise self.error(f"Integer literal too long ({len(tok_val)} characters)", offset) from None
            if NUMBER_START_RE.match(tok_val):
                raise self.error(f"Malformed number '{tok_val}'", offset)
            return Symbol(tok_val)

        if tok_type == "string":
            return _unescape(tok_val[1:-1], self.source, offset)

        # 'x reads as (quote x)
        if tok_type == "quote":
            if self.peek()[0] is None:
                raise self.error("Expected a form after quote", offset)
            return Pair(QUOTE, Pair(self.parse_expr(), Nil))

        if tok_type == "lparen":
            items = []
            while True:
                next_type = self.peek()[0]
                if next_type == "rparen":
                    self.advance()
                    break
                if next_type is None:
                    raise self.error("Unmatched '('", offset)
                items.append(self.parse_expr())
            return from_list(items)

        if tok_type == "rparen":
            raise self.error("Unexpected ')'", offset)

        raise self.error(f"Unknown token: {tok_type} {tok_val}", offset)

    def parse_all(self) -> Iterator[SExpression]:
        for _, expr in self.parse_all_with_offsets():
            yield expr

    def parse_all_with_offsets(self) -> Iterator[tuple[int, SExpression]]:
        while True:
            tok_type, _, offset = self.peek()
            if tok_type is None:
                break
            try:
                expr = self.parse_expr()
            except RecursionError:
                raise self.error("Form nested too deeply to read", offset) from None
            yield offset, expr


def read_forms(source: str) -> Iterator[tuple[int, SExpression]]:
    """Lazily yield (offset, form) for each top-level form in `source`."""
    return TokenStream(lex(source), source).parse_all_with_offsets()


def read_all(source: str) -> list[SExpression]:
    """Read every top-level form in `source`.

    Pure: performs no evaluation. Raises EmberSyntaxError on unbalanced
    parentheses, unterminated strings, malformed numeric literals, or
    nesting deeper than the host stack allows.
    """
    return list(TokenStream(lex(source), source).parse_all())
