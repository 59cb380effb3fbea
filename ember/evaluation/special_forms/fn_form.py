from ember import EvaluatorFn
from ember import SExpression, LispValue
from ember.types.closure import Closure
from ember.types.errors import EmberArityError, EmberInvalidSymbol
from ember.types.environment import Environment
from ember.types.pair import is_proper_list, to_list
from ember.types.symbol import Symbol
from ember.evaluation.special_forms.quote_form import strip_quote


def make_closure(params_arg: SExpression, body_arg: SExpression, env: Environment) -> Closure:
    """Build a Closure from literal (possibly quoted) parameter and body operands."""
    params = strip_quote(params_arg)
    if not is_proper_list(params):
        raise EmberInvalidSymbol(f"fn parameters must be a list of symbols, got {params!r}")
    formals = to_list(params)
    seen: set[Symbol] = set()
    for p in formals:
        if not isinstance(p, Symbol):
            raise EmberInvalidSymbol(f"fn parameter must be a symbol, got {p!r}")
        if p in seen:
            raise EmberInvalidSymbol(f"Duplicate fn parameter {p}")
        seen.add(p)
    return Closure(formals, strip_quote(body_arg), env)


def fn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(fn params body): neither operand is evaluated; captures `env`."""
    if len(tail) != 2:
        raise EmberArityError("fn requires exactly 2 arguments: (fn params body)")
    return make_closure(tail[0], tail[1], env)
