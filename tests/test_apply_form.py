import pytest

from pymal.errors import MalTypeError
from pymal.evaluation.apply import apply, apply_closure
from pymal.evaluation.evaluator import evaluate
from pymal.reader.parser import read_str
from pymal.types.bind import bind_arguments, check_params
from pymal.types.environment import Environment
from pymal.types.nil import Nil
from pymal.types.symbol import Symbol
from pymal.types.values import List


def params(*names):
    return check_params([Symbol(n) for n in names])


def test_apply_native_function(env):
    plus = env.get(Symbol("+"))
    assert apply(plus, [1, 2, 3], env, evaluate) == 6


def test_apply_closure_uses_captured_env(env):
    closure = evaluate(read_str("(let* (k 10) (fn* (a) (+ a k)))"), env)
    other = Environment()
    assert apply(closure, [5], other, evaluate) == 15
    assert apply_closure(closure, [1], evaluate) == 11


def test_apply_rejects_special_forms_and_non_functions(env):
    with pytest.raises(MalTypeError, match="special form if"):
        apply(env.get(Symbol("if")), [True, 1], env, evaluate)
    with pytest.raises(MalTypeError, match="expected a function but got list"):
        apply(List([1]), [], env, evaluate)


def test_bind_positional_and_missing():
    outer = Environment()
    local = bind_arguments(params("a", "b"), [1], outer)
    assert local.outer is outer
    assert local.get(Symbol("a")) == 1
    assert local.get(Symbol("b")) is Nil


def test_bind_ignores_surplus_arguments():
    local = bind_arguments(params("a"), [1, 2, 3], Environment())
    assert local.vars == {Symbol("a"): 1}


def test_bind_rest():
    local = bind_arguments(params("a", "&", "rest"), [1, 2, 3], Environment())
    assert local.get(Symbol("rest")) == List([2, 3])
    assert type(local.get(Symbol("rest"))) is List
    assert Symbol("&") not in local.vars


def test_bind_rest_with_missing_positional():
    local = bind_arguments(params("a", "b", "&", "rest"), [1], Environment())
    assert local.get(Symbol("b")) is Nil
    assert local.get(Symbol("rest")) == List()


def test_bind_does_not_touch_closure_env():
    outer = Environment()
    outer.set(Symbol("a"), "outer")
    bind_arguments(params("a"), ["inner"], outer)
    assert outer.get(Symbol("a")) == "outer"
