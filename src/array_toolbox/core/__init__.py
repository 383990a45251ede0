"""Core layer — pure container classification and algebra.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* Inputs are never mutated; every result is a freshly built container.
* Only :class:`~array_toolbox.exceptions.ArrayToolboxError` subclasses
  escape.
"""

from array_toolbox.core.classification import (
    is_array_accessible,
    is_array_like,
    is_countable,
    is_iterable,
)
from array_toolbox.core.key_algebra import and_keys, and_not_keys, or_keys, xor_keys
from array_toolbox.core.protocols import KeyAccessible
from array_toolbox.core.structure import collect, rotate_array
from array_toolbox.core.toolbox import ArrayToolbox
from array_toolbox.core.value_algebra import (
    and_not_values,
    and_values,
    or_values,
    xor_values,
)

__all__: list[str] = [
    "ArrayToolbox",
    "KeyAccessible",
    "and_keys",
    "and_not_keys",
    "and_not_values",
    "and_values",
    "collect",
    "is_array_accessible",
    "is_array_like",
    "is_countable",
    "is_iterable",
    "or_keys",
    "or_values",
    "rotate_array",
    "xor_keys",
    "xor_values",
]
