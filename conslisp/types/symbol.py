from __future__ import annotations
import sys


class Symbol:
    """A plain (non-operator) bare word, compared by name."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        # Interned so equal names share one string object
        object.__setattr__(self, "name", sys.intern(name))

    def __setattr__(self, attr, value):
        raise AttributeError("Symbol is immutable")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name is other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
