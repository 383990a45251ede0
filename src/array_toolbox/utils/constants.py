"""Fixed module-level knobs shared across layers."""

from __future__ import annotations

TEXT_TYPES: tuple[type, ...] = (str, bytes, bytearray)
"""Iterable, subscriptable types that are still treated as scalars."""

DEFAULT_PRETTY_WIDTH: int = 80
"""Column budget used by :func:`array_toolbox.utils.pretty.pretty`."""
