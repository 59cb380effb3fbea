from ember import EvaluatorFn
from ember import SExpression, LispValue
from ember.types.errors import EmberArityError
from ember.types.environment import Environment
from ember.evaluation.special_forms.fn_form import make_closure
from ember.evaluation.special_forms.let_form import binding_name


def letfn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(letfn name params body) is shorthand for (let name (fn params body))."""
    if len(tail) != 3:
        raise EmberArityError("letfn requires exactly 3 arguments: (letfn name params body)")
    name = binding_name(tail[0], "letfn")
    closure = make_closure(tail[1], tail[2], env)
    env.bind_global(name, closure)
    return closure
