from __future__ import annotations

from typing import Callable

from ember import LispValue
from ember.types.environment import Environment

PrimitiveFn = Callable[[Environment, list[LispValue]], LispValue]


class Builtin:
    """A named primitive implemented in Python.

    The wrapped function receives the calling environment and the list of
    already-evaluated arguments, in the same (env, args) convention every
    primitive in ember.builtin follows.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"
