"""Application engine for Ember.

Centralizes procedure application so the evaluator and any primitive that
calls back into user code share one set of rules:
- Closures: the body runs in a new frame pushed ahead of the closure's
  captured environment; Environment.extend enforces the exact arity.
- Builtins: invoked with the calling environment and the argument list.
"""

from ember import LispValue, EvaluatorFn
from ember.types.builtin import Builtin
from ember.types.closure import Closure
from ember.types.environment import Environment
from ember.types.errors import EmberNotCallable
from ember.types.printer import to_source


def apply_closure(fn: Closure, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    return evaluate_fn(fn.body, fn.bind(args))


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Closure or a Builtin; anything else is not callable."""
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    if isinstance(head, Builtin):
        return head(env, args)
    raise EmberNotCallable(f"Cannot apply non-procedure {to_source(head)}")
