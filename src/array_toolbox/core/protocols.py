"""Capability protocols consulted by the classification layer.

A value's "shape" is judged purely by what it can do, never by its
concrete class.  Iteration and length are covered by the standard
:class:`collections.abc.Iterable` and :class:`collections.abc.Sized`
ABCs; key access has no stdlib equivalent, so it is declared here.
"""

from __future__ import annotations

from collections.abc import Iterable, Sized
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class KeyAccessible(Protocol):
    """Contract for values addressable as ``value[key]``.

    Satisfied structurally by ``dict``, ``list``, ``tuple`` and any
    user type implementing both methods (no explicit inheritance
    required).
    """

    def __getitem__(self, key: Any) -> Any:
        ...  # pragma: no cover

    def __contains__(self, item: Any) -> bool:
        ...  # pragma: no cover


__all__: list[str] = ["Iterable", "KeyAccessible", "Sized"]
