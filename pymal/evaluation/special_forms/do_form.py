from pymal import EvaluatorFn
from pymal import SExpression, MalValue
from pymal.types.environment import Environment
from pymal.types.nil import Nil


def do_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> MalValue:
    result: MalValue = Nil
    for e in tail:
        result = evaluate_fn(e, env)
    return result
