"""Set algebra over container **keys**.

Same four shapes as :mod:`array_toolbox.core.value_algebra`, but
membership is decided by key.  Values are carried through unchanged.
"""

from __future__ import annotations

from typing import Any

from array_toolbox.core.entries import iter_entries, iter_keys, require_operands


def and_keys(left: Any, right: Any) -> dict[Any, Any]:
    """Keep entries of *left* whose key also exists in *right*."""
    require_operands("and_keys", left, right)
    known = list(iter_keys(right))
    return {key: value for key, value in iter_entries(left) if key in known}


def and_not_keys(left: Any, right: Any) -> dict[Any, Any]:
    """Keep entries of *left* whose key does **not** exist in *right*."""
    require_operands("and_not_keys", left, right)
    known = list(iter_keys(right))
    return {key: value for key, value in iter_entries(left) if key not in known}


def or_keys(left: Any, right: Any) -> dict[Any, Any]:
    """Merge *right* over *left*; on a key collision *right*'s value wins."""
    require_operands("or_keys", left, right)
    result: dict[Any, Any] = dict(iter_entries(left))
    result.update(iter_entries(right))
    return result


def xor_keys(left: Any, right: Any) -> dict[Any, Any]:
    """Keep entries whose key exists on exactly one side."""
    require_operands("xor_keys", left, right)
    # Materialise once so one-shot iterators survive both passes.
    left = dict(iter_entries(left))
    right = dict(iter_entries(right))
    return and_not_keys(
        or_keys(left, right),  # Ab, aB, AB
        and_keys(left, right),  # AB
    )
