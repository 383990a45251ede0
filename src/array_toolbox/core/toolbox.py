"""The :class:`ArrayToolbox` facade.

Groups every container operation under one stateless class so callers
can depend on a single name.  All members are static methods that
delegate to the pure functions of the ``core`` layer.
"""

from __future__ import annotations

from array_toolbox.core import classification, key_algebra, structure, value_algebra


class ArrayToolbox:
    """Stateless namespace over the container operations.

    Instantiating it is unnecessary but harmless::

        ArrayToolbox.collect(owners, ["pet", "name"])
        ArrayToolbox().xor_keys(left, right)
    """

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    is_iterable = staticmethod(classification.is_iterable)
    is_countable = staticmethod(classification.is_countable)
    is_array_accessible = staticmethod(classification.is_array_accessible)
    is_array_like = staticmethod(classification.is_array_like)

    # ------------------------------------------------------------------
    # Set algebra over values
    # ------------------------------------------------------------------

    and_values = staticmethod(value_algebra.and_values)
    or_values = staticmethod(value_algebra.or_values)
    and_not_values = staticmethod(value_algebra.and_not_values)
    xor_values = staticmethod(value_algebra.xor_values)

    # ------------------------------------------------------------------
    # Set algebra over keys
    # ------------------------------------------------------------------

    and_keys = staticmethod(key_algebra.and_keys)
    or_keys = staticmethod(key_algebra.or_keys)
    and_not_keys = staticmethod(key_algebra.and_not_keys)
    xor_keys = staticmethod(key_algebra.xor_keys)

    # ------------------------------------------------------------------
    # Structural operations
    # ------------------------------------------------------------------

    collect = staticmethod(structure.collect)
    rotate_array = staticmethod(structure.rotate_array)
