"""Function values: native primitives, special forms and closures."""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable

from pymal import MalValue, SExpression
from pymal.types.environment import Environment
from pymal.types.symbol import Symbol


class SpecialForm(Enum):
    """Evaluation rule attached to a Function value.

    Every tag other than NONE means the function receives its argument forms
    unevaluated together with the calling environment.
    """

    NONE = auto()
    DEF = auto()
    LET = auto()
    IF = auto()
    DO = auto()
    FN = auto()


NativeFn = Callable[[Environment, list[MalValue]], MalValue]


class Function:
    """A function implemented in Python.

    Primitives are called as ``fn(env, args)`` with evaluated arguments.
    For special forms `fn` is the form handler, called by the evaluator as
    ``fn(tail, env, evaluate_fn)``.
    """

    __slots__ = ("name", "fn", "special_form")

    def __init__(
        self,
        name: str,
        fn: Callable[..., MalValue],
        special_form: SpecialForm = SpecialForm.NONE,
    ):
        self.name = name
        self.fn = fn
        self.special_form = special_form

    @property
    def is_special_form(self) -> bool:
        return self.special_form is not SpecialForm.NONE

    def __call__(self, env: Environment, args: list[MalValue]) -> MalValue:
        return self.fn(env, args)

    def __repr__(self) -> str:
        if self.is_special_form:
            return f"<special form {self.name}>"
        return f"<function {self.name}>"


class Closure:
    """A function created by ``fn*``: parameters, body forms and the
    environment that was active where it was created."""

    __slots__ = ("params", "body", "env")

    # Closures are never special forms
    special_form = SpecialForm.NONE

    def __init__(
        self,
        params: tuple[Symbol, ...],
        body: tuple[SExpression, ...],
        env: Environment,
    ):
        self.params = params
        self.body = body
        self.env = env

    def __repr__(self) -> str:
        formals = " ".join(str(p) for p in self.params)
        return f"<closure ({formals})>"
