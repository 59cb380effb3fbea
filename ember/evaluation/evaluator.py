"""Core evaluator for the Ember interpreter.

A plain recursive-descent walk: atoms evaluate to themselves, symbols are
looked up, and lists dispatch to a special form or to procedure application.
Evaluation depth is bounded by the host stack; `evaluate` converts
exhaustion into EmberRecursionError.
"""

from __future__ import annotations

from ember import SExpression, LispValue
from ember.types.environment import Environment
from ember.types.errors import EmberRecursionError
from ember.types.pair import Pair, iter_list
from ember.types.symbol import Symbol
from ember.evaluation.apply import apply
from ember.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env`, guarding against host stack exhaustion."""
    try:
        return evaluate0(expr, env)
    except RecursionError:
        raise EmberRecursionError(
            "Maximum evaluation depth exceeded (raise EMBER_RECURSION_LIMIT)"
        ) from None


def evaluate0(expr: SExpression, env: Environment) -> LispValue:
    """Core evaluator: one recursive step, no stack guard."""
    if isinstance(expr, Symbol):
        return env.lookup(expr)

    if isinstance(expr, Pair):
        head = expr.head
        tail_args = list(iter_list(expr.tail))

        # --- Special forms handling ---
        if isinstance(head, Symbol):
            form = SPECIAL_FORMS.get(head)
            if form is not None:
                return form(tail_args, env, evaluate0)

        fn = evaluate0(head, env)
        args = [evaluate0(arg, env) for arg in tail_args]
        return apply(fn, args, env, evaluate0)

    # --- Atoms return as-is: Nil, booleans, integers, strings, procedures ---
    return expr
