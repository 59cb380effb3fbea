"""Immutable cons cells and proper-list helpers.

A list is a chain of Pair cells terminated by Nil. Cells are never mutated
after construction, so lists may freely share tails: `(cdr xs)` hands back
the very chain `xs` points into.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from ember import LispValue
from ember.types.errors import EmberTypeError
from ember.types.nil import Nil, NilType
from ember.types.symbol import Symbol


class Pair:
    __slots__ = ("head", "tail")

    def __init__(self, head: LispValue, tail: LispValue):
        object.__setattr__(self, "head", head)
        object.__setattr__(self, "tail", tail)

    def __setattr__(self, name, value):
        raise AttributeError("Pair is immutable")

    def __delattr__(self, name):
        raise AttributeError("Pair is immutable")

    def __eq__(self, other: object) -> bool:
        return values_equal(self, other)

    __hash__ = None

    def __iter__(self) -> Iterator[LispValue]:
        return iter_list(self)

    def __repr__(self) -> str:
        from ember.types.printer import to_source
        return to_source(self)


def from_list(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a chain of Pairs from a Python iterable, ending in `tail`."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def iter_list(value: LispValue) -> Iterator[LispValue]:
    """Yield the elements of a proper list; raise on an improper tail."""
    while isinstance(value, Pair):
        yield value.head
        value = value.tail
    if value is not Nil:
        raise EmberTypeError(f"Expected a proper list, found tail {value!r}")


def to_list(value: LispValue) -> list[LispValue]:
    return list(iter_list(value))


def is_proper_list(value: LispValue) -> bool:
    while isinstance(value, Pair):
        value = value.tail
    return value is Nil


def values_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality over the Value variant.

    Integers by value, strings by content, symbols by name, lists element-wise.
    Booleans are not integers here, and procedures compare by identity.
    """
    while True:
        if a is b:
            return True
        if isinstance(a, Pair) and isinstance(b, Pair):
            if not values_equal(a.head, b.head):
                return False
            # Walk the spine iteratively so long lists do not consume stack
            a, b = a.tail, b.tail
            continue
        if isinstance(a, (Pair, NilType)) or isinstance(b, (Pair, NilType)):
            return False
        if type(a) is not type(b):
            return False
        if isinstance(a, (int, str)):
            return a == b
        if isinstance(a, Symbol):
            return a.id == b.id
        return False
