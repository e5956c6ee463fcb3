from __future__ import annotations

from typing import Sequence

from pymal import MalValue
from pymal.errors import MalArityError, MalInvalidSymbol
from pymal.types.environment import Environment
from pymal.types.nil import Nil
from pymal.types.symbol import Symbol
from pymal.types.values import List

REST_MARKER = Symbol("&")


def check_params(params: Sequence[MalValue]) -> tuple[Symbol, ...]:
    """Validate an ``fn*`` parameter list and return it as a tuple.

    Every element must be a Symbol, and ``&`` must be followed by exactly
    one name.
    """
    for param in params:
        if not isinstance(param, Symbol):
            raise MalInvalidSymbol(
                f"fn* parameters must be symbols, got {param!r}"
            )
    if REST_MARKER in params:
        rest_index = list(params).index(REST_MARKER)
        if len(params) - rest_index != 2:
            raise MalArityError("'&' must be followed by exactly one parameter name")
    return tuple(params)


def bind_arguments(
    params: Sequence[Symbol],
    supplied_args: Sequence[MalValue],
    closure_env: Environment,
) -> Environment:
    """
    Bind call arguments to a closure's parameters.

    Supports:
    - Positional parameters, filled one to one. Parameters without a
      supplied argument are bound to nil; surplus arguments are ignored.
    - ``&`` followed by one name, which is bound to a List of all remaining
      arguments (empty when there are none).

    Returns a new Environment whose outer is `closure_env`.
    """
    local_env = Environment(outer=closure_env)
    for index, param in enumerate(params):
        if param == REST_MARKER:
            local_env.set(params[index + 1], List(supplied_args[index:]))
            break
        if index < len(supplied_args):
            local_env.set(param, supplied_args[index])
        else:
            local_env.set(param, Nil)
    return local_env
