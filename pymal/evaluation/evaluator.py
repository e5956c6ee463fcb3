"""Core evaluator for the pymal interpreter.

`evaluate` classifies a form by variant, resolves symbols through the
environment passed in, and for a non-empty list evaluates the head and
dispatches once on its SpecialForm tag. Scopes are plain arguments: a
special form or closure call that needs a new scope builds a child
Environment and passes it down, so nothing has to be restored afterwards,
whether the call returns or raises.

There is no tail-call elimination; deep recursion in user code grows the
Python stack and ends in RecursionError.
"""

from __future__ import annotations

from pymal import SExpression, MalValue
from pymal.errors import MalTypeError
from pymal.types.environment import Environment
from pymal.types.function import Closure, Function, SpecialForm
from pymal.types.nil import NilType
from pymal.types.symbol import Symbol
from pymal.types.values import HashMap, List, Vector, type_name
from pymal.evaluation.apply import apply


def evaluate(expr: SExpression, env: Environment) -> MalValue:
    """Evaluate `expr` in `env` and return its value."""
    match expr:
        case Symbol() if expr.is_keyword:
            return expr
        case Symbol():
            return env.get(expr)
        case Vector():
            return Vector(evaluate(e, env) for e in expr)
        case HashMap():
            return HashMap(evaluate(e, env) for e in expr)
        case List() if not expr:
            return expr
        case List():
            return evaluate_call(expr, env)
        case int() | str() | NilType() | Function() | Closure():
            # bool is an int subclass, so booleans land here too
            return expr
        case _:
            raise MalTypeError(f"cannot evaluate {expr!r}")


def evaluate_call(expr: List, env: Environment) -> MalValue:
    """Evaluate a non-empty list: special form or function application."""
    head_form, *tail = expr
    head = evaluate(head_form, env)

    match head:
        case Function(special_form=SpecialForm.NONE) | Closure():
            args = [evaluate(arg, env) for arg in tail]
            return apply(head, args, env, evaluate)
        case Function(
            special_form=SpecialForm.DEF
            | SpecialForm.LET
            | SpecialForm.IF
            | SpecialForm.DO
            | SpecialForm.FN
        ):
            return head.fn(tail, env, evaluate)
        case _:
            raise MalTypeError(f"expected a function but got {type_name(head)}")
