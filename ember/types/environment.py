"""Runtime environment for Ember.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Frames form a tree rooted at the single
global frame: closures keep a reference to the frame they were created in,
and applying a closure pushes one new frame for its parameters. `let` always
writes to the root, whatever frame it is evaluated from.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Optional

from ember import LispValue
from ember.types.errors import EmberArityError, EmberInvalidSymbol, EmberUnboundSymbol
from ember.types.symbol import Symbol

logger = logging.getLogger("ember.environment")


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    @property
    def root(self) -> Environment:
        """The global frame this chain is rooted at."""
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        Raises EmberInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise EmberInvalidSymbol(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value

    def bind_global(self, name: Symbol, value: LispValue) -> None:
        """Insert or overwrite `name` in the outermost frame of this chain."""
        root = self.root
        if logger.isEnabledFor(logging.DEBUG):
            verb = "rebind" if name in root.vars else "bind"
            logger.debug("%s global %s", verb, name)
        root.define(name, value)

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises EmberUnboundSymbol if no frame in the chain binds it.
        """
        env: Optional[Environment] = self
        while env is not None:
            try:
                return env.vars[name]
            except KeyError:
                env = env.outer
        raise EmberUnboundSymbol(f"Cannot lookup unbound symbol {name}")

    def extend(self, params: list[Symbol], args: list[LispValue]) -> Environment:
        """Return a new frame ahead of this one binding params to args in order.

        Raises EmberArityError when the counts differ.
        """
        if len(params) != len(args):
            raise EmberArityError(
                f"Expected {len(params)} argument{'s' if len(params) != 1 else ''}, got {len(args)}"
            )
        frame = Environment(outer=self)
        for param, arg in zip(params, args):
            frame.define(param, arg)
        return frame

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging; the global frame is elided."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env: Optional[Environment] = self
            while env is not None:
                if env.outer is None:
                    chain.append(f"<global {len(env.vars)} bindings>")
                else:
                    env_buf = StringIO()
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
