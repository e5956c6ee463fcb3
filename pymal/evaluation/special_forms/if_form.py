from pymal import EvaluatorFn
from pymal import SExpression, MalValue
from pymal.errors import MalArityError
from pymal.types.environment import Environment
from pymal.types.nil import Nil
from pymal.types.values import is_truthy


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> MalValue:
    if len(tail) not in (2, 3):
        raise MalArityError(
            f"wrong number of arguments for if: expected 2 or 3 but got {len(tail)}"
        )

    cond = evaluate_fn(tail[0], env)
    # Only false and nil are falsey; 0, "" and () are true
    if is_truthy(cond):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
