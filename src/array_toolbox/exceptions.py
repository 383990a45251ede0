"""Custom exception hierarchy for array-toolbox.

Every error raised by the library inherits from
:class:`ArrayToolboxError`, so callers can guard a whole block of
container operations with a single ``except`` clause.

Hierarchy
---------
ArrayToolboxError
└── InvalidOperandError
"""

from __future__ import annotations


class ArrayToolboxError(Exception):
    """Base exception for all array-toolbox errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance for the caller."""


# --- Operand validation ----------------------------------------------------

class InvalidOperandError(ArrayToolboxError):
    """Raised when a set-algebra operand cannot be looped over."""

    def __init__(
        self,
        operation: str,
        side: str,
        operand: object,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(
            f"Can't loop over the variables given: {operation}() "
            f"{side} operand is {type(operand).__name__}",
            hint=hint if hint is not None else _iterable_hint(),
        )
        self.operation: str = operation
        self.side: str = side


def _iterable_hint() -> str:
    return "Pass a mapping, a list/tuple, or another non-text iterable."
