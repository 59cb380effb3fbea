# Core type aliases for Ember's data model.
# Parsed code and runtime data share one representation (homoiconic):
# int, str, bool, Symbol, Nil, Pair, Closure and Builtin. There is no
# separate AST; lists are chains of immutable Pair cells ending in Nil.
#
# Naming guidance:
# - SExpression: Use in reader and special-form code to denote syntactic forms.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: passed into special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
