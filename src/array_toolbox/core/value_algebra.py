"""Set algebra over container **values**.

Every function here is a pure transformation: operands are never
mutated and a fresh ``dict`` is returned.  Values are matched by
equality (``==``), so unhashable values such as nested dicts work.

Operations
----------
* ``and_values``     — left ∩ right
* ``or_values``      — left ∪ right, deduplicated by value
* ``and_not_values`` — left − right
* ``xor_values``     — values on exactly one side
"""

from __future__ import annotations

from typing import Any

from array_toolbox.core.entries import iter_entries, iter_values, require_operands
from array_toolbox.core.models import next_index


# ---------------------------------------------------------------------------
# Intersection / difference
# ---------------------------------------------------------------------------

def and_values(left: Any, right: Any) -> dict[Any, Any]:
    """Keep entries of *left* whose value also occurs in *right*.

    Keys and order come from *left*.
    """
    require_operands("and_values", left, right)
    known = list(iter_values(right))
    return {key: value for key, value in iter_entries(left) if value in known}


def and_not_values(left: Any, right: Any) -> dict[Any, Any]:
    """Keep entries of *left* whose value does **not** occur in *right*."""
    require_operands("and_not_values", left, right)
    known = list(iter_values(right))
    return {key: value for key, value in iter_entries(left) if value not in known}


# ---------------------------------------------------------------------------
# Union
# ---------------------------------------------------------------------------

def or_values(left: Any, right: Any) -> dict[Any, Any]:
    """Union by value, each distinct value emitted once.

    *left*'s entries come first (first occurrence wins).  A new value
    from *right* keeps its key when that key is still free; otherwise
    it is appended at the next sequential index.
    """
    require_operands("or_values", left, right)
    result: dict[Any, Any] = {}
    for key, value in iter_entries(left):
        if value not in result.values():
            result[key] = value
    for key, value in iter_entries(right):
        if value in result.values():
            continue
        if key in result:
            result[next_index(result)] = value
        else:
            result[key] = value
    return result


# ---------------------------------------------------------------------------
# Symmetric difference
# ---------------------------------------------------------------------------

def xor_values(left: Any, right: Any) -> dict[int, Any]:
    """Return the values present on exactly one side, re-indexed from 0.

    *left*-only values precede *right*-only values.
    """
    require_operands("xor_values", left, right)
    left = dict(iter_entries(left))
    right = dict(iter_entries(right))
    left_only = and_not_values(left, right)
    right_only = and_not_values(right, left)

    union = dict(enumerate([*left_only.values(), *right_only.values()]))
    right_only_values = list(right_only.values())
    common = [value for value in left_only.values() if value in right_only_values]
    return and_not_values(union, common)
