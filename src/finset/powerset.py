"""Power-set generation by binary counting.

With the n members of a set fixed in a list, every integer i in [0, 2^n) is a
subset: bit k of i set means member k is included. i = 0 is the empty set and
i = 2^n - 1 is the whole set.
"""

from __future__ import annotations

from typing import Iterator, Sequence, TypeVar

from .core import PRESENT, Set, SetError

T = TypeVar("T")

# 2^20 subsets is already about a million Set objects.
DEFAULT_POWER_SET_LIMIT: int = 20


class PowerSetLimitError(SetError):
    """Refused to materialize a power set above the size cap."""

    def __init__(self, size: int, limit: int):
        super().__init__(
            f"power set of {size} elements exceeds limit of {limit} elements"
        )
        self.size = size
        self.limit = limit


def subset_at(elements: Sequence[T], index: int) -> Set[T]:
    """Build the subset of elements selected by the bits of index."""
    bound = 1 << len(elements)
    if index < 0 or index >= bound:
        raise ValueError(f"subset index {index} outside [0, {bound})")
    result: Set[T] = Set()
    k = 0
    bits = index
    while bits != 0:
        if bits & 1:
            result.mem[elements[k]] = PRESENT
        bits = bits >> 1
        k += 1
    return result


def _enumerate_subsets(elements: list[T]) -> Iterator[Set[T]]:
    for i in range(1 << len(elements)):
        yield subset_at(elements, i)


def iter_power_set(s: Set[T]) -> Iterator[Set[T]]:
    """Lazily yield all 2^n subsets of s, each exactly once.

    The members are captured when iter_power_set is called; later changes to s
    do not affect the subsets still to come.
    """
    return _enumerate_subsets(s.elements())


def power_set(s: Set[T], limit: int | None = DEFAULT_POWER_SET_LIMIT) -> list[Set[T]]:
    """Return every subset of s as a list.

    Raises PowerSetLimitError when s has more than limit elements. Pass
    limit=None to lift the cap, or use iter_power_set to avoid building the
    whole list.
    """
    if limit is not None and len(s) > limit:
        raise PowerSetLimitError(len(s), limit)
    return list(iter_power_set(s))
