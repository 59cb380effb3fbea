import pytest

from ember.evaluation.evaluator import evaluate
from ember.reader.parser import read_all
from ember.types.builtin import Builtin
from ember.types.closure import Closure
from ember.types.errors import (
    EmberArityError,
    EmberInvalidSymbol,
    EmberNotCallable,
    EmberTypeError,
    EmberUnboundSymbol,
)
from ember.types.nil import Nil
from ember.types.pair import Pair, from_list
from ember.types.symbol import Symbol, TRUE, FALSE


def run(source, env):
    result = Nil
    for form in read_all(source):
        result = evaluate(form, env)
    return result


# -----------------------------------------------------
# Atoms and symbols
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    assert evaluate(1, env) == 1
    assert evaluate("hello", env) == "hello"
    assert evaluate(Nil, env) is Nil
    assert evaluate(True, env) is True
    assert evaluate(False, env) is False


def test_symbol_lookup(env):
    env.define(Symbol("x"), 42)
    assert evaluate(Symbol("x"), env) == 42
    assert evaluate(Symbol("t"), env) == TRUE
    assert evaluate(Symbol("f"), env) == FALSE


def test_unbound_symbol(env):
    with pytest.raises(EmberUnboundSymbol):
        evaluate(Symbol("nope"), env)


def test_unbound_operator(env):
    with pytest.raises(EmberUnboundSymbol):
        run("(foo 1)", env)


# -----------------------------------------------------
# Application
# -----------------------------------------------------

def test_builtin_application(env):
    assert run("(+ 1 2)", env) == 3
    assert isinstance(evaluate(Symbol("+"), env), Builtin)


def test_arguments_evaluated_left_to_right(env, out):
    run("(+ (print 1) (print 2) (print 3))", env)
    assert out.getvalue() == "1\n2\n3\n"


def test_closure_application(env):
    assert run("(let 'x (fn '(a) 'a)) (x 9)", env) == 9


def test_operator_position_may_be_an_expression(env):
    assert run("((fn '(a b) '(- a b)) 10 3)", env) == 7


def test_closure_captures_creation_environment(env):
    run("(let 'adder (fn '(a) '(fn '(b) '(+ a b))))", env)
    assert run("((adder 3) 4)", env) == 7
    # a is a parameter, never a global
    assert Symbol("a") not in env.vars


def test_parameters_do_not_leak(env):
    run("(let 'id (fn '(v) 'v)) (id 1)", env)
    with pytest.raises(EmberUnboundSymbol):
        run("v", env)


@pytest.mark.parametrize("source", ["(1 2)", '("s")', "('(a) 1)", "(t)"])
def test_not_callable(env, source):
    with pytest.raises(EmberNotCallable):
        run(source, env)


@pytest.mark.parametrize("source", ["(id)", "(id 1 2)"])
def test_closure_arity_mismatch(env, source):
    run("(let 'id (fn '(v) 'v))", env)
    with pytest.raises(EmberArityError):
        run(source, env)


def test_improper_call_form(env):
    with pytest.raises(EmberTypeError):
        evaluate(Pair(Symbol("+"), 1), env)


# -----------------------------------------------------
# Globals and recursion
# -----------------------------------------------------

def test_global_read_at_call_time(env):
    run("(let 'x 5) (let 'get (fn '() 'x))", env)
    assert run("(get)", env) == 5
    run("(let 'x 6)", env)
    assert run("(get)", env) == 6


def test_let_inside_body_mutates_global(env):
    run("(let 'setter (fn '(v) '(let 'y v)))", env)
    assert run("(setter 7)", env) == 7
    assert env.lookup(Symbol("y")) == 7
    assert run("y", env) == 7


def test_let_returns_bound_value(env):
    assert run("(let 'x (+ 1 1))", env) == 2


def test_let_may_shadow_a_builtin(env):
    run("(let '+ -)", env)
    assert run("(+ 5 3)", env) == 2


def test_self_reference_through_global(env):
    run(
        "(let 'count (fn '(n) '(eval (if (= n 0) ''done '(count (- n 1))))))",
        env,
    )
    assert run("(count 50)", env) == Symbol("done")


def test_fn_value_prints_as_source(env):
    closure = run("(fn '(a b) '(+ a b))", env)
    assert isinstance(closure, Closure)
    assert str(closure) == "(fn (a b) (+ a b))"


def test_invalid_param_list(env):
    with pytest.raises(EmberInvalidSymbol):
        run("(fn '(1) 'x)", env)
    with pytest.raises(EmberInvalidSymbol):
        run("(fn '(a a) 'a)", env)


def test_procedures_self_evaluate_inside_data(env):
    plus = env.lookup(Symbol("+"))
    assert evaluate(from_list([plus, 1, 2]), env) == 3
