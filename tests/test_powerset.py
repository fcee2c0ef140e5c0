"""Power-set generation tests."""

import pytest

from finset import (
    DEFAULT_POWER_SET_LIMIT,
    PowerSetLimitError,
    Set,
    SetError,
    equals,
    iter_power_set,
    new,
    power_set,
    subset_at,
)


def _frozen(subsets: list[Set]) -> set[frozenset]:
    return {frozenset(sub) for sub in subsets}


def test_empty_set_has_one_subset():
    subsets = power_set(new())
    assert len(subsets) == 1
    assert equals(subsets[0], new())


def test_one_element_set():
    subsets = power_set(Set([1]))
    assert _frozen(subsets) == {frozenset(), frozenset({1})}


def test_two_element_set():
    subsets = power_set(Set([1, 2]))
    assert len(subsets) == 4
    assert _frozen(subsets) == {
        frozenset(),
        frozenset({1}),
        frozenset({2}),
        frozenset({1, 2}),
    }


@pytest.mark.parametrize("n", [0, 1, 2, 3, 5, 8])
def test_cardinality(n: int):
    assert len(power_set(Set(range(n)))) == 2**n


def test_no_duplicate_subsets(mixed: Set):
    subsets = power_set(mixed)
    assert len(_frozen(subsets)) == len(subsets) == 32


def test_soundness(mixed: Set):
    for sub in power_set(mixed):
        assert sub.is_subset(mixed)


def test_completeness(mixed: Set):
    seen = new()
    for sub in power_set(mixed):
        seen = seen.union(sub)
    assert equals(seen, mixed)


def test_first_is_empty_last_is_full(mixed: Set):
    subsets = power_set(mixed)
    assert equals(subsets[0], new())
    assert equals(subsets[-1], mixed)


def test_subsets_are_standalone(mixed: Set):
    subsets = power_set(mixed)
    subsets[-1].append("z")
    subsets[0].append("y")
    assert "z" not in mixed
    assert "y" not in mixed


def test_subset_at_bits():
    elements = ["a", "b", "c"]
    assert equals(subset_at(elements, 0), new())
    assert equals(subset_at(elements, 0b001), Set(["a"]))
    assert equals(subset_at(elements, 0b101), Set(["a", "c"]))
    assert equals(subset_at(elements, 0b111), Set(elements))


def test_iter_power_set_is_lazy():
    s = Set(range(40))
    it = iter_power_set(s)
    assert equals(next(it), new())
    assert equals(next(it), Set([0]))


def test_iter_power_set_fixes_order_at_start():
    s = Set([1, 2])
    it = iter_power_set(s)
    first = next(it)
    s.append(3)
    rest = list(it)
    assert len(rest) + 1 == 4
    assert all(3 not in sub for sub in [first, *rest])


def test_limit_exceeded():
    s = Set(range(4))
    with pytest.raises(PowerSetLimitError) as exc_info:
        power_set(s, limit=3)
    assert exc_info.value.size == 4
    assert exc_info.value.limit == 3
    assert isinstance(exc_info.value, SetError)


def test_limit_boundary_allowed():
    assert len(power_set(Set(range(3)), limit=3)) == 8


def test_default_limit():
    with pytest.raises(PowerSetLimitError):
        power_set(Set(range(DEFAULT_POWER_SET_LIMIT + 1)))


def test_limit_disabled():
    assert len(power_set(Set(range(4)), limit=None)) == 16


def test_iter_power_set_captures_members_at_call():
    s = Set([1, 2])
    it = iter_power_set(s)
    s.append(3)
    subsets = list(it)
    assert len(subsets) == 4
    assert all(3 not in sub for sub in subsets)


@pytest.mark.parametrize("index", [-1, 2, 8])
def test_subset_at_out_of_range(index: int):
    with pytest.raises(ValueError, match=r"outside \[0, 2\)"):
        subset_at(["a"], index)


def test_subset_at_empty_elements():
    assert equals(subset_at([], 0), new())
    with pytest.raises(ValueError):
        subset_at([], 1)
