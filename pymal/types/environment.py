"""Runtime environment for pymal.

The Environment stores bindings of Symbols to evaluated values and supports
nested lexical scopes via an `outer` link. A child frame never writes into
its parent: `set` always binds locally and shadows outer bindings.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from pymal import MalValue
from pymal.errors import MalInvalidSymbol, MalUnboundSymbol
from pymal.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, MalValue] = {}
        self.outer: Environment | None = outer

    def set(self, name: Symbol, value: MalValue) -> MalValue:
        """Bind `name` to `value` in this frame and return `value`.

        Raises MalInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise MalInvalidSymbol(f"cannot bind {name!r}: expected a symbol")
        self.vars[name] = value
        return value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol) -> MalValue:
        """Look up the value bound to `name` in this frame or any outer one.

        Raises MalUnboundSymbol if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise MalUnboundSymbol(f"symbol not found: '{name}'")
        return env.vars[name]

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def update(self, mapping: Mapping[Symbol, MalValue]) -> None:
        """Bulk-bind a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.set(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as frame:
                env._write_vars(frame)
                chain.append(frame.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
