"""Closure representation for Ember."""

from __future__ import annotations

from io import StringIO

from ember import SExpression, LispValue
from ember.types.environment import Environment
from ember.types.symbol import Symbol


class Closure:
    """A first-class procedure: parameters, body, and the captured environment."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol], body: SExpression, env: Environment):
        self.params: list[Symbol] = params
        self.body: SExpression = body
        # Shared with every other closure created from the same chain
        self.env: Environment = env

    def __str__(self) -> str:
        from ember.types.printer import to_source
        with StringIO() as buffer:
            buffer.write("(fn (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(") ")
            buffer.write(to_source(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def bind(self, args: list[LispValue]) -> Environment:
        """Bind argument values to this closure's parameters in a fresh frame."""
        return self.env.extend(self.params, args)
