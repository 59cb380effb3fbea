from __future__ import annotations

import logging
import sys

from ember import LispValue
from ember.config import get_recursion_limit
from ember.reader.parser import read_forms
from ember.types.environment import Environment
from ember.types.errors import EmberError, line_and_column
from ember.types.nil import Nil
from ember.types.printer import to_source
from ember.builtin.env_builtin import OutputSink, register
from ember.evaluation.evaluator import evaluate


class Interpreter:
    """
    Orchestrates reading and evaluating Ember code.
    Maintains one global Environment across calls, so bindings made by one
    `eval`/`run` are visible to the next.
    """

    def __init__(
        self,
        output: OutputSink | None = None,
        *,
        recursion_limit: int | None = None,
    ):
        self._logger = logging.getLogger("ember.interpreter")
        self.env: Environment = Environment()
        register(self.env, output)
        self.recursion_limit = recursion_limit or get_recursion_limit()

    def _prepare_host(self) -> None:
        # Raise the host recursion limit, never lower it
        if sys.getrecursionlimit() < self.recursion_limit:
            self._logger.debug("Raising recursion limit to %d", self.recursion_limit)
            sys.setrecursionlimit(self.recursion_limit)
        # Integer literals and printed integers may have any number of digits
        if hasattr(sys, "set_int_max_str_digits") and sys.get_int_max_str_digits() != 0:
            self._logger.debug("Lifting the int/str digit limit")
            sys.set_int_max_str_digits(0)

    def run(self, code: str) -> list[LispValue]:
        """Evaluate each top-level form in order and return all results.

        The first error stops the run; it is re-raised carrying the failing
        form and, for runtime errors, the form's source position.
        """
        self._prepare_host()
        results: list[LispValue] = []
        # Read everything first: a syntax error anywhere means nothing runs
        forms = list(read_forms(code))
        for offset, expr in forms:
            if self._logger.isEnabledFor(logging.DEBUG):
                self._logger.debug("eval %s", to_source(expr))
            try:
                results.append(evaluate(expr, self.env))
            except EmberError as e:
                e.form = expr
                if e.line is None:
                    e.line, e.column = line_and_column(code, offset)
                raise
        return results

    def eval(self, code: str) -> LispValue:
        """Evaluate `code` and return the value of its last form (Nil if none)."""
        results = self.run(code)
        if not results:
            return Nil
        return results[-1]
