"""String rendering of sets."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .core import Set


def set_string(s: Set) -> str:
    """Render as {a, b, c}. Member order follows iteration order."""
    inner = ", ".join(str(e) for e in s)
    return "{" + inner + "}"


def set_repr(s: Set) -> str:
    inner = ", ".join(repr(e) for e in s)
    return f"Set([{inner}])"
