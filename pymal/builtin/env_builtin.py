"""Built-in functions for the pymal runtime environment.

This module defines integer arithmetic, comparison, list helpers, equality,
printing, and the registration routine that installs them (together with
the special forms) into a root environment.
"""
from __future__ import annotations

from typing import Callable

from pymal import MalValue
from pymal.errors import MalArityError, MalTypeError, MalZeroDivisionError
from pymal.evaluation.special_forms import special_form_functions
from pymal.printer import pr_join
from pymal.types.environment import Environment
from pymal.types.function import Function
from pymal.types.nil import Nil
from pymal.types.symbol import Symbol
from pymal.types.values import List, Vector, equals, is_sequential, type_name

Primitive = Callable[[Environment, list[MalValue]], MalValue]


def _numbers(name: str, expr: list[MalValue]) -> list[int]:
    """Check every argument is a number (booleans are not numbers)."""
    for x in expr:
        if type(x) is not int:
            raise MalTypeError(f"{name} expected a number but got {type_name(x)}")
    return expr


def _truncating_div(n: int, d: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(n) // abs(d)
    return q if (n < 0) == (d < 0) else -q


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[MalValue]) -> int:
    """Return the sum of all arguments; (+) is 0."""
    return sum(_numbers("+", expr))


def sub(env: Environment, expr: list[MalValue]) -> int:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    nums = _numbers("-", expr)
    if not nums:
        return 0
    if len(nums) == 1:
        return -nums[0]
    result = nums[0]
    for x in nums[1:]:
        result -= x
    return result


def mul(env: Environment, expr: list[MalValue]) -> int:
    """Return the product of all arguments; (*) is 1."""
    result = 1
    for x in _numbers("*", expr):
        result *= x
    return result


def div(env: Environment, expr: list[MalValue]) -> int:
    """Divide left-to-right truncating toward zero; one arg gives the reciprocal."""
    if not expr:
        raise MalArityError("wrong number of arguments for /: expected at least 1 but got 0")
    nums = _numbers("/", expr)
    if len(nums) == 1:
        nums = [1, *nums]
    result = nums[0]
    for x in nums[1:]:
        if x == 0:
            raise MalZeroDivisionError("division by zero")
        result = _truncating_div(result, x)
    return result


def _comparison(name: str, op: Callable[[int, int], bool]) -> Primitive:
    """Chainable numeric comparison: true if op holds for every adjacent pair."""
    def compare(env: Environment, expr: list[MalValue]) -> bool:
        if not expr:
            raise MalArityError(f"wrong number of arguments for {name}: expected at least 1 but got 0")
        nums = _numbers(name, expr)
        return all(op(a, b) for a, b in zip(nums, nums[1:]))
    compare.__name__ = name
    return compare


lt = _comparison("<", lambda a, b: a < b)
lte = _comparison("<=", lambda a, b: a <= b)
gt = _comparison(">", lambda a, b: a > b)
gte = _comparison(">=", lambda a, b: a >= b)


# -------------------------------
# Lists and equality
# -------------------------------
def make_list(env: Environment, expr: list[MalValue]) -> List:
    return List(expr)


def _predicate(name: str, test: Callable[[MalValue], bool]) -> Primitive:
    """Predicate over one or more values: true only if every value passes."""
    def predicate(env: Environment, expr: list[MalValue]) -> bool:
        if not expr:
            raise MalArityError(f"wrong number of arguments for {name}: expected at least 1 but got 0")
        return all(test(x) for x in expr)
    predicate.__name__ = name
    return predicate


def _is_empty(value: MalValue) -> bool:
    if not is_sequential(value):
        raise MalTypeError(f"empty? expected a list or vector but got {type_name(value)}")
    return len(value) == 0


is_list = _predicate("list?", lambda x: isinstance(x, List))
is_empty = _predicate("empty?", _is_empty)


def count(env: Environment, expr: list[MalValue]) -> int:
    """Number of elements in a list or vector; (count nil) is 0."""
    if len(expr) != 1:
        raise MalArityError(f"wrong number of arguments for count: expected 1 but got {len(expr)}")
    xs = expr[0]
    if xs is Nil:
        return 0
    if isinstance(xs, (List, Vector)):
        return len(xs)
    raise MalTypeError(f"count expected a list or vector but got {type_name(xs)}")


def equal(env: Environment, expr: list[MalValue]) -> bool:
    """True if every argument equals the first."""
    if not expr:
        raise MalArityError("wrong number of arguments for =: expected at least 1 but got 0")
    first = expr[0]
    return all(equals(first, other) for other in expr[1:])


# -------------------------------
# Strings and printing
# -------------------------------
def pr_str(env: Environment, expr: list[MalValue]) -> str:
    """Readable forms of all arguments, joined by spaces."""
    return pr_join(expr, readably=True)


def str_(env: Environment, expr: list[MalValue]) -> str:
    """Display forms of all arguments, concatenated."""
    return pr_join(expr, readably=False, sep="")


def prn(env: Environment, expr: list[MalValue]) -> MalValue:
    print(pr_join(expr, readably=True))
    return Nil


def println(env: Environment, expr: list[MalValue]) -> MalValue:
    print(pr_join(expr, readably=False))
    return Nil


BUILTINS: dict[str, Primitive] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "list": make_list,
    "list?": is_list,
    "empty?": is_empty,
    "count": count,
    "=": equal,
    "pr-str": pr_str,
    "str": str_,
    "prn": prn,
    "println": println,
}


def register(env: Environment) -> Environment:
    """Install the special forms and primitives into `env`."""
    for name, form in special_form_functions().items():
        env.set(Symbol(name), form)
    for name, fn in BUILTINS.items():
        env.set(Symbol(name), Function(name, fn))
    return env
