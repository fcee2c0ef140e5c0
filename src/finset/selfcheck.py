"""Built-in consistency checks for finset.

Each verifier returns a list of failure messages (empty = ok) instead of
stopping at the first problem. run_selfcheck replays a fixed scenario over
empty, one-element and multi-element sets with mixed int/str members.
"""

from __future__ import annotations

from typing import Sequence

from .core import Set, equals, new
from .powerset import iter_power_set, power_set
from .render import set_string


def verify_power_set(subsets: Sequence[Set], s: Set) -> list[str]:
    """Check cardinality, soundness and completeness of a power set of s."""
    failures: list[str] = []
    if len(subsets) != 1 << len(s):
        failures.append(
            f"power set has {len(subsets)} subsets, expected {1 << len(s)}"
        )
    seen: Set = new()
    for sub in subsets:
        for k in sub:
            seen.append(k)
            if k not in s:
                failures.append(f"power set member {k!r} is not in the set")
    if not equals(seen, s):
        missing = s.relative_complement(seen)
        failures.append(f"power set is missing elements {set_string(missing)}")
    return failures


def verify_set_string(text: str, s: Set) -> list[str]:
    """Check that text renders each member of s once and nothing else."""
    failures: list[str] = []
    if len(text) < 2 or not text.startswith("{") or not text.endswith("}"):
        failures.append(f"rendering {text!r} is not brace-delimited")
        return failures
    parts = [str(e) for e in s]
    for part in parts:
        if part not in text:
            failures.append(f"rendering {text!r} lacks element {part!r}")
    expected_len = 2 + sum(len(p) for p in parts) + 2 * max(len(parts) - 1, 0)
    if len(text) != expected_len:
        failures.append(f"rendering {text!r} has extraneous text")
    if not _is_joined_permutation(text[1:-1], parts):
        failures.append(
            f"rendering {text!r} is not each element once, separated by ', '"
        )
    return failures


def _is_joined_permutation(body: str, parts: list[str]) -> bool:
    """True iff body is ", ".join of some ordering of parts."""
    if not parts:
        return body == ""
    for i, part in enumerate(parts):
        if not body.startswith(part):
            continue
        rest = parts[:i] + parts[i + 1 :]
        tail = body[len(part) :]
        if not rest:
            if tail == "":
                return True
        elif tail.startswith(", ") and _is_joined_permutation(tail[2:], rest):
            return True
    return False


def _expect(failures: list[str], ok: bool, msg: str) -> None:
    if not ok:
        failures.append(msg)


def run_selfcheck() -> list[str]:
    """Run the fixture scenario and return every failure found."""
    failures: list[str] = []
    the_set: Set = new()
    other: Set = new()
    empty: Set = new()

    # empty and one-element sets
    _expect(failures, equals(the_set, other), "empty sets not equal")
    failures += verify_power_set(power_set(empty), empty)
    the_set.append(1)
    failures += verify_power_set(power_set(the_set), the_set)
    _expect(
        failures,
        equals(the_set.intersection(empty), empty),
        "intersection with empty set not empty",
    )
    _expect(
        failures,
        equals(the_set.union(empty), the_set),
        "union with empty set changed the set",
    )
    _expect(failures, not equals(the_set, other), "{1} equals empty set")
    _expect(failures, equals(the_set, the_set), "set not equal to itself")
    other.append(1)
    _expect(failures, equals(the_set, other), "one-element sets not equal")
    the_set.append(1)
    _expect(failures, equals(the_set, other), "duplicate append changed the set")
    _expect(failures, len(power_set(empty)) == 1, "empty power set size != 1")
    _expect(
        failures,
        equals(the_set.relative_complement(empty), the_set),
        "complement relative to empty set changed the set",
    )
    _expect(
        failures,
        equals(the_set.relative_complement(other), empty),
        "complement of equal one-element sets not empty",
    )
    _expect(
        failures,
        equals(empty.intersection(empty), empty),
        "intersection of empty sets not empty",
    )
    _expect(failures, equals(empty.union(empty), empty), "union of empty sets")
    _expect(
        failures,
        equals(the_set.intersection(the_set), the_set),
        "self-intersection changed the set",
    )
    _expect(
        failures,
        equals(the_set.union(the_set), the_set),
        "self-union changed the set",
    )
    other.remove(1)
    _expect(failures, equals(other, empty), "remove left the element behind")
    other.remove("k")
    _expect(failures, equals(other, empty), "remove of absent element")

    # multi-element sets
    for e in (2, 3, "a", "b"):
        the_set.append(e)
    for e in (1, 2, 3, "a", "b"):
        other.append(e)
    failures += verify_power_set(power_set(the_set), the_set)
    _expect(failures, equals(the_set, other), "multi-element sets not equal")
    other.append("c")
    _expect(failures, not equals(the_set, other), "sets differing by 'c' equal")
    for i in range(12):
        other.append(i)
    failures += verify_power_set(list(iter_power_set(other)), other)
    _expect(
        failures,
        equals(the_set.intersection(other), the_set),
        "intersection with superset is not the subset",
    )
    _expect(
        failures,
        equals(the_set.union(other), other),
        "union with superset is not the superset",
    )
    _expect(
        failures,
        equals(the_set.relative_complement(other), empty),
        "complement relative to superset not empty",
    )
    the_set.append("d")
    _expect(
        failures,
        equals(the_set.relative_complement(other), Set(["d"])),
        "complement relative to superset minus 'd' is not {d}",
    )

    failures += verify_set_string(set_string(empty), empty)
    failures += verify_set_string(set_string(the_set), the_set)
    return failures
