"""Shared utilities — constants and presentation helpers.

Rules
-----
* No container algebra.
* No I/O.
* Importable by any layer.
"""

from array_toolbox.utils.pretty import pretty

__all__: list[str] = ["pretty"]
