"""Render values as text.

`pr_str` has two modes: readably (strings quoted and escaped so the reader
can parse them back) and display (string contents emitted raw).
"""

from __future__ import annotations

from typing import Iterable

from pymal import MalValue
from pymal.types.environment import Environment
from pymal.types.function import Closure, Function
from pymal.types.nil import NilType
from pymal.types.symbol import Symbol
from pymal.types.values import HashMap, List, Vector


def escape_string(s: str) -> str:
    """Quote `s` and escape backslash, double quote and newline."""
    escaped = s.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def pr_join(values: Iterable[MalValue], readably: bool = True, sep: str = " ") -> str:
    return sep.join(pr_str(v, readably) for v in values)


def pr_str(value: MalValue, readably: bool = True) -> str:
    match value:
        case NilType():
            return "nil"
        case bool():
            return "true" if value else "false"
        case int():
            return str(value)
        case str():
            return escape_string(value) if readably else value
        case Symbol():
            return value.id
        case List():
            return f"({pr_join(value, readably)})"
        case Vector():
            return f"[{pr_join(value, readably)}]"
        case HashMap():
            return "{" + pr_join(value, readably) + "}"
        case Function() | Closure():
            return "#<function>"
        case Environment():
            return "#<environment>"
        case _:
            raise TypeError(f"cannot print {value!r}")
