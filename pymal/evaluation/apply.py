"""Application engine for pymal.

Applies an already-evaluated function head to already-evaluated arguments:
- Closures get a fresh environment parented to the environment they were
  created in, with parameters bound by `bind_arguments`, and their body forms
  are evaluated in order.
- Native functions are called with the calling environment and the argument
  list, and do their own arity and type checking.
"""

from __future__ import annotations

from pymal import MalValue, EvaluatorFn
from pymal.errors import MalTypeError
from pymal.types.bind import bind_arguments
from pymal.types.environment import Environment
from pymal.types.function import Closure, Function
from pymal.types.nil import Nil
from pymal.types.values import type_name


def apply_closure(
    fn: Closure,
    args: list[MalValue],
    evaluate_fn: EvaluatorFn,
) -> MalValue:
    """Evaluate the body of `fn` with `args` bound to its parameters."""
    call_env = bind_arguments(fn.params, args, fn.env)
    result: MalValue = Nil
    for form in fn.body:
        result = evaluate_fn(form, call_env)
    return result


def apply(
    head: Function | Closure | object,
    args: list[MalValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> MalValue:
    """Apply either a Closure or a native Function.

    Special-form Functions are never applied here: they need their argument
    forms unevaluated and are dispatched by the evaluator.
    """
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    elif isinstance(head, Function) and head.is_special_form:
        raise MalTypeError(f"cannot apply special form {head.name} to evaluated arguments")
    elif isinstance(head, Function):
        return head(env, args)
    else:
        raise MalTypeError(f"expected a function but got {type_name(head)}")
