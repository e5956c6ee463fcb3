import pytest

from pymal.errors import MalArityError, MalTypeError, MalZeroDivisionError
from pymal.evaluation.evaluator import evaluate
from pymal.reader.parser import read_all
from pymal.types.values import List, Vector


def run(env, source):
    result = None
    for expr in read_all(source):
        result = evaluate(expr, env)
    return result


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(- (+ 10 5) (* 2 3))", 9),
        ("(* 1 2 3 4 5 6)", 720),
        ("(+ -1 5 -3)", 1),
        ("(- -10 -5)", -5),
        ("(- 5)", -5),
        ("(-)", 0),
        ("(* -2 3)", -6),
        ("(/ -12 3)", -4),
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -3),
        ("(/ 7 -2)", -3),
        ("(/ 100 2 5)", 10),
        ("(/ 1)", 1),
        ("(/ 5)", 0),
        ("(/ 0 5)", 0),
        ("(+)", 0),
        ("(*)", 1),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
        ("(/ (* (+ 8 2) 5) (- 20 10))", 5),
    ]
)
def test_arithmetic(env, source, expected):
    assert run(env, source) == expected


@pytest.mark.parametrize(
    "source,error,message",
    [
        ('(+ 1 "a")', MalTypeError, "expected a number but got string"),
        ("(- 1 nil)", MalTypeError, "expected a number but got nil"),
        ("(* 2 true)", MalTypeError, "expected a number but got boolean"),
        ("(/ 4 (list))", MalTypeError, "expected a number but got list"),
        ("(/)", MalArityError, "wrong number of arguments"),
        ("(/ 1 0)", MalZeroDivisionError, "division by zero"),
        ("(/ 8 2 0)", MalZeroDivisionError, "division by zero"),
        ("(/ 0)", MalZeroDivisionError, "division by zero"),
        ("(<)", MalArityError, "wrong number of arguments"),
        ('(< 1 "2")', MalTypeError, "expected a number"),
    ]
)
def test_arithmetic_errors(env, source, error, message):
    with pytest.raises(error, match=message):
        run(env, source)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(< 1 2 3)", True),
        ("(< 1 3 2)", False),
        ("(<= 1 1 2)", True),
        ("(> 3 2 1)", True),
        ("(> 3 3)", False),
        ("(>= 3 3 1)", True),
        ("(< 5)", True),
    ]
)
def test_comparisons(env, source, expected):
    assert run(env, source) is expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1)", True),
        ("(= 1 2)", False),
        ("(= 1 1 1)", True),
        ("(= 1 1 2)", False),
        ("(= 1)", True),
        ("(= (list 1 2) [1 2])", True),
        ('(= "a" "a")', True),
        ("(= nil false)", False),
        ("(= 1 true)", False),
        ("(= {:a 1} {:a 1})", True),
        ("(= :a :a)", True),
    ]
)
def test_equality_builtin(env, source, expected):
    assert run(env, source) is expected


def test_equality_arity(env):
    with pytest.raises(MalArityError):
        run(env, "(=)")


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(list? (list))", True),
        ("(list? [1])", False),
        ("(list? (list) (list 1))", True),
        ("(list? (list) 1)", False),
        ("(empty? (list))", True),
        ("(empty? [])", True),
        ("(empty? [1])", False),
        ("(count (list 1 2 3))", 3),
        ("(count [1 2])", 2),
        ("(count nil)", 0),
        ("(count (list))", 0),
    ]
)
def test_list_builtins(env, source, expected):
    assert run(env, source) == expected


@pytest.mark.parametrize(
    "source,error",
    [
        ("(count 1)", MalTypeError),
        ("(count)", MalArityError),
        ("(count (list) (list))", MalArityError),
        ("(empty? 1)", MalTypeError),
        ("(empty?)", MalArityError),
        ("(list?)", MalArityError),
    ]
)
def test_list_builtin_errors(env, source, error):
    with pytest.raises(error):
        run(env, source)


def test_list_builds_list(env):
    result = run(env, "(list 1 (+ 1 1) [3])")
    assert type(result) is List
    assert result == List([1, 2, Vector([3])])
