"""finset: finite sets over hashable elements, public API."""

from __future__ import annotations

from .core import (
    ElementError as ElementError,
    Set as Set,
    SetError as SetError,
    append as append,
    equals as equals,
    intersection as intersection,
    new as new,
    relative_complement as relative_complement,
    remove as remove,
    union as union,
)
from .powerset import (
    DEFAULT_POWER_SET_LIMIT as DEFAULT_POWER_SET_LIMIT,
    PowerSetLimitError as PowerSetLimitError,
    iter_power_set as iter_power_set,
    power_set as power_set,
    subset_at as subset_at,
)
from .render import set_repr as set_repr, set_string as set_string
