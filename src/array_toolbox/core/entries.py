"""Uniform ``(key, value)`` access over every supported container shape."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from loguru import logger

from array_toolbox.core.classification import is_array_accessible, is_iterable
from array_toolbox.core.models import Absent, Value
from array_toolbox.exceptions import InvalidOperandError


def iter_entries(container: Any) -> Iterator[tuple[Any, Any]]:
    """Yield ``(key, value)`` pairs of *container* in order.

    Mappings yield their items; any other iterable yields positional
    indexes.  Non-iterables yield nothing.
    """
    if isinstance(container, Mapping):
        yield from container.items()
    elif is_iterable(container):
        yield from enumerate(container)


def iter_keys(container: Any) -> Iterator[Any]:
    for key, _ in iter_entries(container):
        yield key


def iter_values(container: Any) -> Iterator[Any]:
    for _, value in iter_entries(container):
        yield value


def lookup(container: Any, key: Any) -> Value:
    """Return ``container[key]``, or ``None`` when it is not set.

    A key whose stored value is ``None`` counts as not set.  Sequences
    only resolve non-negative in-range integer keys.
    """
    if not is_array_accessible(container):
        return Absent

    if isinstance(container, Sequence) and not isinstance(container, Mapping):
        if isinstance(key, bool) or not isinstance(key, int):
            return Absent
        if 0 <= key < len(container):
            return container[key]
        return Absent

    try:
        if key not in container:
            return Absent
        return container[key]
    except (KeyError, IndexError, TypeError):
        # Unhashable or foreign keys cannot be set.
        return Absent


def require_operands(operation: str, left: Any, right: Any) -> None:
    """Raise :class:`InvalidOperandError` unless both operands iterate."""
    for side, operand in (("left", left), ("right", right)):
        if not is_iterable(operand):
            logger.debug(
                "{}() rejected {} operand of type {}",
                operation,
                side,
                type(operand).__name__,
            )
            raise InvalidOperandError(operation, side, operand)
