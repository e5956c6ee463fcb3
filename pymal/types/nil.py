from __future__ import annotations


class NilType:
    """The type of `Nil`; there is exactly one instance."""

    __slots__ = ()
    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "nil"
    def __bool__(self): return False

    # Equal only to itself
    def __eq__(self, other):
        return other is self

    def __hash__(self):
        return hash(None)


Nil = NilType()
