# Core type aliases for the pymal data model.
# Values map onto plain Python types where one fits (int, str, bool) and onto
# small immutable classes where the language needs a distinct variant
# (Symbol, List, Vector, HashMap, Nil, Function, Closure).
#
# Naming guidance:
# - SExpression: Use in reader code to denote syntactic forms (code-as-data).
# - MalValue:    Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; forms and values share one representation.

from typing import Any, Callable

# Runtime value alias
MalValue = Any
# Forms alias (forms are values)
SExpression = MalValue

# Evaluator function type passed into special forms
EvaluatorFn = Callable[..., MalValue]

__version__ = "0.4.0"
