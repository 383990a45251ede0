"""Structural operations: recursive field projection and transpose.

Neither operation raises.  Missing keys, non-container cells and empty
inputs simply produce ``None`` placeholders or empty results.
"""

from __future__ import annotations

from typing import Any

from loguru import logger

from array_toolbox.core.classification import is_countable, is_iterable
from array_toolbox.core.entries import iter_entries, iter_values, lookup
from array_toolbox.core.models import Absent, Value


# ---------------------------------------------------------------------------
# collect
# ---------------------------------------------------------------------------

def collect(container: Any, key_path: Any) -> list[Value]:
    """Pull a (possibly nested) field out of every entry of *container*.

    *key_path* is either a single key or a sequence of keys.  With a
    sequence, the first key is applied to each entry, the next key to
    each of those results, and so on down towards the leaves.  The
    output has one item per entry of *container*, in order, with
    ``None`` wherever the path could not be followed.

    Example::

        collect(
            {
                "alice": {"pet": {"name": "MrWhiskers", "type": "cat"}},
                "ben": {"pet": {"name": "Blub", "type": "goldfish"}},
                "chris": {"pet": {"type": "none"}},
            },
            ["pet", "name"],
        )
        → ["MrWhiskers", "Blub", None]
    """
    path = _as_path(key_path)
    if path is None:
        return _project(container, key_path)
    if not path:
        return [Absent for _ in iter_entries(container)]
    return _collect_from(container, path, 0)


def _as_path(key_path: Any) -> tuple[Any, ...] | None:
    """Return *key_path* as a tuple of keys, or ``None`` for a single key."""
    if is_countable(key_path) and is_iterable(key_path):
        return tuple(iter_values(key_path))
    return None


def _collect_from(container: Any, path: tuple[Any, ...], offset: int) -> list[Value]:
    level = _project(container, path[offset])
    logger.debug(
        "collect level {} key {!r}: {} entries", offset, path[offset], len(level)
    )
    if offset + 1 < len(path):
        return _collect_from(level, path, offset + 1)
    return level


def _project(container: Any, key: Any) -> list[Value]:
    return [lookup(value, key) for value in iter_values(container)]


# ---------------------------------------------------------------------------
# rotate_array
# ---------------------------------------------------------------------------

def rotate_array(container: Any) -> dict[Any, dict[Any, Any]]:
    """Transpose a two-level container so ``out[y][x] == in[x][y]``.

    Rows may have different key sets; only cells present in the input
    appear in the output.  Non-iterable rows contribute nothing.
    """
    result: dict[Any, dict[Any, Any]] = {}
    for x, row in iter_entries(container):
        for y, value in iter_entries(row):
            result.setdefault(y, {})[x] = value
    return result
