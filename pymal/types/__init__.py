"""Runtime types for pymal values."""

from pymal.types.symbol import Symbol
from pymal.types.nil import Nil, NilType
from pymal.types.environment import Environment
from pymal.types.function import Closure, Function, SpecialForm
from pymal.types.values import (
    HashMap,
    List,
    Vector,
    equals,
    is_sequential,
    is_truthy,
    type_name,
)

__all__ = [
    "Closure",
    "Environment",
    "Function",
    "HashMap",
    "List",
    "Nil",
    "NilType",
    "SpecialForm",
    "Symbol",
    "Vector",
    "equals",
    "is_sequential",
    "is_truthy",
    "type_name",
]
