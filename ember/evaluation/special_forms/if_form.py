from ember import EvaluatorFn
from ember import SExpression, LispValue
from ember.types.errors import EmberArityError
from ember.types.nil import Nil
from ember.types.symbol import FALSE
from ember.types.environment import Environment


def is_true(value: LispValue) -> bool:
    # Only the symbol f, the empty list and Python False are false
    return not (value is Nil or value is False or value == FALSE)


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise EmberArityError("if requires exactly 3 arguments: (if cond then else)")

    cond = evaluate_fn(tail[0], env)
    if is_true(cond):
        return evaluate_fn(tail[1], env)
    return evaluate_fn(tail[2], env)
