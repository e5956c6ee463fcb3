from pymal import EvaluatorFn
from pymal import SExpression, MalValue
from pymal.errors import MalArityError, MalInvalidSymbol
from pymal.types.environment import Environment
from pymal.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> MalValue:
    """
    (def! name value)
    The name is taken literally; the value is evaluated and bound in `env`.
    Returns the bound value.
    """
    if len(tail) != 2:
        raise MalArityError(
            f"wrong number of arguments for def!: expected 2 but got {len(tail)}"
        )

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise MalInvalidSymbol(f"def! expects a symbol as its first argument, got {name!r}")
    value = evaluate_fn(val_expr, env)
    return env.set(name, value)
