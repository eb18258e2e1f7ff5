"""Immutable singly-linked list, the only compound value in conslisp.

A list is either a ``Pair`` (a head value plus a shared tail list) or the
``EMPTY`` singleton. Nodes are never mutated after construction, so many
lists may share one tail without copying.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from conslisp import LispValue


class PersistentList:
    """Common base for ``Pair`` and the empty list."""

    __slots__ = ()

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @staticmethod
    def from_iterable(items: Iterable[LispValue]) -> PersistentList:
        """Build a list holding `items` in iteration order."""
        result: PersistentList = EMPTY
        for item in reversed(list(items)):
            result = Pair(item, result)
        return result

    def cons(self, head: LispValue) -> Pair:
        """Return a new list with `head` in front; `self` becomes the shared tail."""
        return Pair(head, self)

    def is_empty(self) -> bool:
        return self is EMPTY

    def reversed(self) -> PersistentList:
        result: PersistentList = EMPTY
        for item in self:
            result = Pair(item, result)
        return result

    def __iter__(self) -> Iterator[LispValue]:
        node = self
        while isinstance(node, Pair):
            yield node.head
            node = node.tail

    def __len__(self) -> int:
        count = 0
        node = self
        while isinstance(node, Pair):
            count += 1
            node = node.tail
        return count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PersistentList):
            return NotImplemented
        a, b = self, other
        while isinstance(a, Pair) and isinstance(b, Pair):
            if a is b:
                return True
            if type(a.head) is not type(b.head) or a.head != b.head:
                return False
            a, b = a.tail, b.tail
        return a is b

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        from conslisp.debug_utils.pprint import show
        return show(self)


class Pair(PersistentList):
    __slots__ = ("head", "tail")

    def __init__(self, head: LispValue, tail: PersistentList):
        if not isinstance(tail, PersistentList):
            raise TypeError(f"Pair tail must be a PersistentList, got {tail!r}")
        object.__setattr__(self, "head", head)
        object.__setattr__(self, "tail", tail)

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"PersistentList({list(self)!r})"


class _Empty(PersistentList):
    __slots__ = ()

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "PersistentList([])"


EMPTY = _Empty()
