"""Built-in functions for the Ember runtime environment.

This module defines the primitive operations exposed to Lisp code (pair
construction and access, structural equality, integer arithmetic and
printing) and the registration helper that installs them, together with
the boolean constants t and f, into a global environment.
"""
from __future__ import annotations

import sys
from typing import Protocol

from ember import LispValue
from ember.types.builtin import Builtin
from ember.types.environment import Environment
from ember.types.errors import EmberArityError, EmberTypeError
from ember.types.pair import Pair, values_equal
from ember.types.printer import to_display, to_source
from ember.types.symbol import Symbol, TRUE, FALSE


class OutputSink(Protocol):
    def write(self, text: str) -> object: ...


def _expect_arity(name: str, args: list[LispValue], count: int) -> None:
    if len(args) != count:
        raise EmberArityError(
            f"{name} requires exactly {count} argument{'s' if count != 1 else ''}, got {len(args)}"
        )


def _expect_integers(name: str, args: list[LispValue]) -> None:
    for a in args:
        # bool is an int subclass but is not an Integer here
        if not isinstance(a, int) or isinstance(a, bool):
            raise EmberTypeError(f"All arguments to {name} must be integers, got {to_source(a)}")


# -------------------------------
# Pairs
# -------------------------------
def cons(env: Environment, args: list[LispValue]) -> Pair:
    """(cons a b) -> a new Pair; b is shared, not copied."""
    _expect_arity("cons", args, 2)
    head, tail = args
    return Pair(head, tail)


def car(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the head of a pair; the empty list has no head."""
    _expect_arity("car", args, 1)
    xs = args[0]
    if not isinstance(xs, Pair):
        raise EmberTypeError(f"car expects a pair, got {to_source(xs)}")
    return xs.head


def cdr(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the tail of a pair; the empty list has no tail."""
    _expect_arity("cdr", args, 1)
    xs = args[0]
    if not isinstance(xs, Pair):
        raise EmberTypeError(f"cdr expects a pair, got {to_source(xs)}")
    return xs.tail


# -------------------------------
# Equality
# -------------------------------
def equals(env: Environment, args: list[LispValue]) -> Symbol:
    """Return t if the two arguments are structurally equal, else f."""
    _expect_arity("=", args, 2)
    return TRUE if values_equal(args[0], args[1]) else FALSE


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> int:
    """Return the integer sum of all arguments; (+) is 0."""
    _expect_integers("+", args)
    return sum(args)


def sub(env: Environment, args: list[LispValue]) -> int:
    """Subtract all subsequent integers from the first; unary negation for one arg."""
    if not args:
        raise EmberArityError("- requires at least 1 argument")
    _expect_integers("-", args)
    if len(args) == 1:
        return -args[0]
    result = args[0]
    for x in args[1:]:
        result -= x
    return result


# -------------------------------
# Output
# -------------------------------
def make_print(output: OutputSink) -> Builtin:
    """Build the print primitive bound to a particular output sink."""

    def print_builtin(env: Environment, args: list[LispValue]) -> LispValue:
        """Write the display form of the value and a newline; return the value."""
        _expect_arity("print", args, 1)
        value = args[0]
        output.write(to_display(value) + "\n")
        return value

    return Builtin("print", print_builtin)


PRIMITIVES = {
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "=": equals,
    "+": add,
    "-": sub,
}


def register(env: Environment, output: OutputSink | None = None) -> None:
    """Register all builtin functions and constants into the given environment.

    `output` receives everything `print` writes; it defaults to sys.stdout,
    resolved at call time so redirection (and pytest's capsys) is honoured.
    """
    if output is None:
        output = _StdoutSink()
    env.update({Symbol(name): Builtin(name, fn) for name, fn in PRIMITIVES.items()})
    env.define(Symbol("print"), make_print(output))
    env.define(TRUE, TRUE)
    env.define(FALSE, FALSE)


class _StdoutSink:
    def write(self, text: str) -> object:
        return sys.stdout.write(text)
