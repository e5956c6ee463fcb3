from pymal import EvaluatorFn
from pymal import SExpression, MalValue
from pymal.errors import MalArityError, MalInvalidSymbol, MalTypeError
from pymal.types.environment import Environment
from pymal.types.symbol import Symbol
from pymal.types.values import is_sequential, type_name
from pymal.evaluation.special_forms.do_form import do_form


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> MalValue:
    """
    (let* (name1 expr1 name2 expr2 ...) body...)
    Bindings are made one after another in a fresh child of `env`, so each
    expression sees the names bound before it. The body runs in that child
    scope and the value of its last form is returned (nil for no body).
    """
    if not tail:
        raise MalArityError("wrong number of arguments for let*: expected bindings")

    bindings, *body = tail
    if not is_sequential(bindings):
        raise MalTypeError(
            f"expected a list or vector of bindings for let*, but got {type_name(bindings)}"
        )
    if len(bindings) % 2 != 0:
        raise MalArityError(
            f"let* requires an even number of binding forms, got {len(bindings)}"
        )

    let_env = Environment(outer=env)
    for name, val_expr in zip(bindings[::2], bindings[1::2]):
        if not isinstance(name, Symbol):
            raise MalInvalidSymbol(
                f"expected a symbol in let* binding, but got {type_name(name)}"
            )
        let_env.set(name, evaluate_fn(val_expr, let_env))

    return do_form(body, let_env, evaluate_fn)
