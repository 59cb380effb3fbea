from ember import EvaluatorFn
from ember import SExpression, LispValue
from ember.types.errors import EmberArityError
from ember.types.environment import Environment
from ember.types.nil import Nil
from ember.types.pair import Pair
from ember.types.symbol import Symbol

QUOTE = Symbol("quote")


def quote_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(quote x) returns x unevaluated."""
    if len(tail) != 1:
        raise EmberArityError("quote expects exactly one argument")
    return tail[0]


def strip_quote(arg: SExpression) -> SExpression:
    """Return X for an argument written (quote X); otherwise the argument itself.

    Used by forms whose operands are taken literally, so that both
    (fn '(a) 'a) and (fn (a) a) describe the same closure.
    """
    if (
        isinstance(arg, Pair)
        and arg.head == QUOTE
        and isinstance(arg.tail, Pair)
        and arg.tail.tail is Nil
    ):
        return arg.tail.head
    return arg
