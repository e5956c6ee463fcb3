"""Sequence variants, structural equality and kind names for pymal values.

Lists, vectors and hash-maps are immutable tuple subclasses so that a value
built by the reader or the evaluator can never change in place. A hash-map
keeps its keys and values interleaved in insertion order.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from pymal import MalValue
from pymal.errors import MalTypeError
from pymal.types.environment import Environment
from pymal.types.function import Closure, Function
from pymal.types.nil import Nil, NilType
from pymal.types.symbol import Symbol


class List(tuple):
    """A list form or value, printed as ``(a b c)``."""

    __slots__ = ()

    def __eq__(self, other):
        return equals(self, other)

    def __ne__(self, other):
        return not equals(self, other)

    # Lists and vectors with equal elements are equal, so they hash alike
    def __hash__(self):
        return hash(tuple(self))

    def __repr__(self):
        return f"List({tuple(self)!r})"


class Vector(tuple):
    """A vector, printed as ``[a b c]``."""

    __slots__ = ()

    def __eq__(self, other):
        return equals(self, other)

    def __ne__(self, other):
        return not equals(self, other)

    def __hash__(self):
        return hash(tuple(self))

    def __repr__(self):
        return f"Vector({tuple(self)!r})"


class HashMap(tuple):
    """Alternating keys and values, printed as ``{k1 v1 k2 v2}``."""

    __slots__ = ()

    def __new__(cls, items: Iterable[MalValue] = ()):
        self = super().__new__(cls, items)
        if len(self) % 2 != 0:
            raise MalTypeError(
                f"hash-map requires an even number of forms, got {len(self)}"
            )
        return self

    def pairs(self) -> Iterator[tuple[MalValue, MalValue]]:
        it = iter(self)
        return zip(it, it)

    def __eq__(self, other):
        return equals(self, other)

    def __ne__(self, other):
        return not equals(self, other)

    def __hash__(self):
        return hash(("hash-map", *self))

    def __repr__(self):
        return f"HashMap({tuple(self)!r})"


def _equal_items(a: tuple, b: tuple) -> bool:
    return len(a) == len(b) and all(equals(x, y) for x, y in zip(a, b))


def equals(a: MalValue, b: MalValue) -> bool:
    """Structural equality between two values.

    A list equals a vector with the same elements. Hash-maps only equal
    hash-maps, compared pair by pair in insertion order. Nil and functions
    compare by identity, and a number never equals a boolean.
    """
    if a is b:
        return True
    match a:
        case List() | Vector():
            return isinstance(b, (List, Vector)) and _equal_items(a, b)
        case HashMap():
            return isinstance(b, HashMap) and _equal_items(a, b)
        case bool():
            # True and False are singletons, identity was checked above
            return False
        case int():
            return type(b) is int and a == b
        case str():
            return isinstance(b, str) and a == b
        case Symbol():
            return isinstance(b, Symbol) and a.id == b.id
        case _:
            return False


def is_truthy(value: MalValue) -> bool:
    """Everything is true except `false` and `nil`."""
    return value is not False and value is not Nil


def type_name(value: MalValue) -> str:
    """Kind name of `value` for error messages."""
    match value:
        case NilType():
            return "nil"
        case bool():
            return "boolean"
        case int():
            return "number"
        case str():
            return "string"
        case Symbol() if value.is_keyword:
            return "keyword"
        case Symbol():
            return "symbol"
        case List():
            return "list"
        case Vector():
            return "vector"
        case HashMap():
            return "hash-map"
        case Function() | Closure():
            return "function"
        case Environment():
            return "environment"
        case _:
            return type(value).__name__


def is_sequential(value: MalValue) -> bool:
    """True for lists and vectors."""
    return isinstance(value, (List, Vector))
