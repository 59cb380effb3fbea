from ember import EvaluatorFn
from ember import SExpression, LispValue
from ember.types.errors import EmberArityError, EmberInvalidSymbol
from ember.types.environment import Environment
from ember.types.symbol import Symbol
from ember.evaluation.special_forms.quote_form import strip_quote


def binding_name(arg: SExpression, form: str) -> Symbol:
    name = strip_quote(arg)
    if not isinstance(name, Symbol):
        raise EmberInvalidSymbol(f"{form} name must be a symbol, got {name!r}")
    return name


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let name value)
    Always binds in the global frame, even from inside a procedure body.
    Returns the bound value.
    """
    if len(tail) != 2:
        raise EmberArityError("let requires exactly 2 arguments: (let name value)")

    name = binding_name(tail[0], "let")
    value = evaluate_fn(tail[1], env)
    env.bind_global(name, value)
    return value
