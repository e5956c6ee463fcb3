from pymal import EvaluatorFn
from pymal import SExpression, MalValue
from pymal.errors import MalArityError, MalTypeError
from pymal.types.bind import check_params
from pymal.types.environment import Environment
from pymal.types.function import Closure
from pymal.types.values import is_sequential, type_name


def fn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> MalValue:
    """
    (fn* (params...) body...)
    Builds a Closure over `env`, the environment active here, not the one a
    later call happens in. The body is kept unevaluated.
    """
    if not tail:
        raise MalArityError("wrong number of arguments for fn*: expected a parameter list")

    params, *body = tail
    if not is_sequential(params):
        raise MalTypeError(
            f"expected a list or vector of parameters for fn*, but got {type_name(params)}"
        )

    return Closure(check_params(params), tuple(body), env)
