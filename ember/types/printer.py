"""Textual rendering of values.

Two modes, differing only in how strings are shown:
- display (used by `print`): strings appear without quotes.
- source (used by repr and the driver): strings are quoted and escaped, so
  the text reads back to an equal value.
"""

from __future__ import annotations

from io import StringIO

from ember import LispValue
from ember.types.nil import Nil
from ember.types.pair import Pair
from ember.types.symbol import Symbol

_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t"}


def escape_string(s: str) -> str:
    return '"' + "".join(_ESCAPES.get(ch, ch) for ch in s) + '"'


def _write(buffer: StringIO, value: LispValue, quote_strings: bool) -> None:
    if value is Nil:
        buffer.write("()")
    elif value is True:
        buffer.write("t")
    elif value is False:
        buffer.write("f")
    elif isinstance(value, str):
        buffer.write(escape_string(value) if quote_strings else value)
    elif isinstance(value, Symbol):
        buffer.write(value.id)
    elif isinstance(value, Pair):
        buffer.write("(")
        _write(buffer, value.head, quote_strings)
        rest = value.tail
        while isinstance(rest, Pair):
            buffer.write(" ")
            _write(buffer, rest.head, quote_strings)
            rest = rest.tail
        if rest is not Nil:
            buffer.write(" . ")
            _write(buffer, rest, quote_strings)
        buffer.write(")")
    else:
        # int, Closure, Builtin
        buffer.write(str(value))


def to_display(value: LispValue) -> str:
    with StringIO() as buffer:
        _write(buffer, value, quote_strings=False)
        return buffer.getvalue()


def to_source(value: LispValue) -> str:
    with StringIO() as buffer:
        _write(buffer, value, quote_strings=True)
        return buffer.getvalue()
