"""Human-readable rendering of containers.

Wraps :func:`rich.pretty.pretty_repr` so nested containers can be
inspected at a glance.  Returns text only; printing is left to the
caller.
"""

from __future__ import annotations

from typing import Any

from rich.pretty import pretty_repr

from array_toolbox.utils.constants import DEFAULT_PRETTY_WIDTH


def pretty(value: Any, *, max_width: int = DEFAULT_PRETTY_WIDTH) -> str:
    """Render *value* as an indented, width-limited string.

    Containers that fit in *max_width* columns stay on one line;
    larger ones are expanded one entry per line.
    """
    return pretty_repr(value, max_width=max_width)
