"""Finite sets over arbitrary hashable elements.

A Set stores its members as the keys of a dict whose values are a presence
marker. Multiplicities are not kept: appending an element that is already a
member changes nothing.
"""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

from .render import set_repr, set_string

T = TypeVar("T")

PRESENT: bool = True


# ============================================================
# Diagnostics
# ============================================================


class SetError(Exception):
    """Base error for finset."""


class ElementError(SetError, TypeError):
    """Element cannot be a set member (unhashable)."""

    def __init__(self, element: object):
        super().__init__(f"unhashable set element of type {type(element).__name__}")
        self.element = element


# ============================================================
# Set
# ============================================================


class Set(Generic[T]):
    """Unordered collection of unique elements with in-place mutation."""

    __slots__ = ("mem",)

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, elements: Iterable[T] | None = None):
        self.mem: dict[T, bool] = {}
        if elements is not None:
            for e in elements:
                self.append(e)

    def append(self, element: T) -> None:
        try:
            self.mem[element] = PRESENT
        except TypeError:
            raise ElementError(element) from None

    def remove(self, element: T) -> None:
        """Remove element; absent elements are ignored."""
        try:
            self.mem.pop(element, None)
        except TypeError:
            # unhashable values can never be members
            return

    def contains(self, element: object) -> bool:
        try:
            return element in self.mem
        except TypeError:
            return False

    def __contains__(self, element: object) -> bool:
        return self.contains(element)

    def __len__(self) -> int:
        return len(self.mem)

    def __iter__(self) -> Iterator[T]:
        return iter(self.mem)

    def __bool__(self) -> bool:
        return len(self.mem) > 0

    def elements(self) -> list[T]:
        """Snapshot of the members in iteration order."""
        return list(self.mem)

    def copy(self) -> Set[T]:
        result: Set[T] = Set()
        result.mem = dict(self.mem)
        return result

    def is_subset(self, other: Set[T]) -> bool:
        for k in self.mem:
            if k not in other.mem:
                return False
        return True

    def union(self, other: Set[T]) -> Set[T]:
        """Members of either set (or both)."""
        result = self.copy()
        for k in other.mem:
            result.mem[k] = PRESENT
        return result

    def intersection(self, other: Set[T]) -> Set[T]:
        """Members of both sets."""
        result: Set[T] = Set()
        for k in self.mem:
            if k in other.mem:
                result.mem[k] = PRESENT
        return result

    def relative_complement(self, universe: Set[T]) -> Set[T]:
        """Members of self that are not members of universe.

        This is self minus universe, not universe minus self.
        """
        result: Set[T] = Set()
        for k in self.mem:
            if k not in universe.mem:
                result.mem[k] = PRESENT
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return equals(self, other)

    def __str__(self) -> str:
        return set_string(self)

    def __repr__(self) -> str:
        return set_repr(self)


# ============================================================
# Functional API
# ============================================================


def new() -> Set:
    """Return an empty set."""
    return Set()


def append(s: Set[T], element: T) -> None:
    s.append(element)


def remove(s: Set[T], element: T) -> None:
    s.remove(element)


def equals(a: Set, b: Set) -> bool:
    """True iff a and b have exactly the same members."""
    if len(a.mem) != len(b.mem):
        return False
    # equal cardinality makes one-way inclusion sufficient
    return a.is_subset(b)


def union(a: Set[T], b: Set[T]) -> Set[T]:
    return a.union(b)


def intersection(a: Set[T], b: Set[T]) -> Set[T]:
    return a.intersection(b)


def relative_complement(a: Set[T], universe: Set[T]) -> Set[T]:
    return a.relative_complement(universe)
