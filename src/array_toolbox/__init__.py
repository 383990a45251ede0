"""array-toolbox — set algebra and projections over nested containers.

Logging goes through loguru and is disabled for this package by
default; enable it with ``logger.enable("array_toolbox")``.
"""

from loguru import logger

from array_toolbox.core import (
    ArrayToolbox,
    and_keys,
    and_not_keys,
    and_not_values,
    and_values,
    collect,
    is_array_accessible,
    is_array_like,
    is_countable,
    is_iterable,
    or_keys,
    or_values,
    rotate_array,
    xor_keys,
    xor_values,
)
from array_toolbox.exceptions import ArrayToolboxError, InvalidOperandError
from array_toolbox.utils.pretty import pretty
from array_toolbox.version import __version__

logger.disable("array_toolbox")

__all__: list[str] = [
    "ArrayToolbox",
    "ArrayToolboxError",
    "InvalidOperandError",
    "__version__",
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
    "pretty",
    "rotate_array",
    "xor_keys",
    "xor_values",
]
