from ember import EvaluatorFn
from ember import SExpression, LispValue
from ember.types.errors import EmberArityError
from ember.types.environment import Environment


def eval_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(eval x): evaluate x, then evaluate the resulting value as code."""
    if len(tail) != 1:
        raise EmberArityError("eval expects exactly one argument")
    expr_to_eval = evaluate_fn(tail[0], env)
    return evaluate_fn(expr_to_eval, env)
