"""Capability predicates over arbitrary values.

Every function in this module is a **pure** predicate: no side
effects, no exceptions and fully deterministic.

Text (``str``, ``bytes``, ``bytearray``) is iterable, sized and
subscriptable in Python, but it is a scalar here: none of the
predicates below accept it.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence, Sized
from typing import Any

from array_toolbox.core.protocols import KeyAccessible
from array_toolbox.utils.constants import TEXT_TYPES


def is_container(value: Any) -> bool:
    """Return ``True`` for mappings and non-text sequences."""
    if isinstance(value, TEXT_TYPES):
        return False
    return isinstance(value, (Mapping, Sequence))


def is_iterable(value: Any) -> bool:
    """Return ``True`` if *value* can be looped over entry by entry."""
    return is_container(value) or (
        not isinstance(value, TEXT_TYPES) and isinstance(value, Iterable)
    )


def is_countable(value: Any) -> bool:
    """Return ``True`` if ``len(value)`` is supported."""
    return is_container(value) or (
        not isinstance(value, TEXT_TYPES) and isinstance(value, Sized)
    )


def is_array_accessible(value: Any) -> bool:
    """Return ``True`` if keys can be read like ``value["name"]``."""
    return is_container(value) or (
        not isinstance(value, TEXT_TYPES) and isinstance(value, KeyAccessible)
    )


def is_array_like(value: Any) -> bool:
    """Return ``True`` if *value* can be treated as a container.

    Mappings and sequences always qualify.  Any other object qualifies
    when it is iterable, key-accessible **and** countable at once.
    """
    return is_container(value) or (
        is_iterable(value)
        and is_array_accessible(value)
        and is_countable(value)
    )
