"""Data model for containers and the values they hold.

A *container* is an ordered, key-unique mapping.  Inputs may be any
:class:`~collections.abc.Mapping` or any other non-text iterable (viewed
as index-keyed); every operation returns a fresh ``dict`` or ``list``
and never mutates its arguments.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Union

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

Key = Union[int, str]
"""Container keys: positional indexes or names."""

Scalar = Union[bool, int, float, str, bytes]

Container = Union[Mapping[Any, Any], Iterable[Any]]

Value = Union[None, Scalar, Container]
"""Closed sum of what a container cell may hold.  ``None`` is absent."""

Absent: None = None
"""Marker emitted when a key path element cannot be resolved."""


# ---------------------------------------------------------------------------
# Index allocation
# ---------------------------------------------------------------------------

def next_index(result: Mapping[Any, Any]) -> int:
    """Return the next free sequential index for a key-less append.

    One more than the largest integer key already present, never below
    zero.  Booleans do not count as integer keys.
    """
    highest = max(
        (key for key in result if isinstance(key, int) and not isinstance(key, bool)),
        default=-1,
    )
    return max(highest + 1, 0)
