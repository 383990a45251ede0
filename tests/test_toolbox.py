"""Tests for the :class:`ArrayToolbox` facade (core/toolbox.py).

The facade must expose every operation as a static method that behaves
exactly like the underlying function.
"""

from __future__ import annotations

from typing import Any

import pytest

import array_toolbox
from array_toolbox import ArrayToolbox, InvalidOperandError

OPERATIONS = [
    "is_iterable",
    "is_countable",
    "is_array_accessible",
    "is_array_like",
    "and_values",
    "or_values",
    "and_not_values",
    "xor_values",
    "and_keys",
    "or_keys",
    "and_not_keys",
    "xor_keys",
    "collect",
    "rotate_array",
]


class TestFacadeSurface:
    @pytest.mark.parametrize("name", OPERATIONS)
    def test_static_method_matches_function(self, name: str) -> None:
        assert getattr(ArrayToolbox, name) is getattr(array_toolbox, name)

    @pytest.mark.parametrize("name", OPERATIONS)
    def test_callable_from_instance(self, name: str) -> None:
        assert getattr(ArrayToolbox(), name) is getattr(array_toolbox, name)


class TestFacadeBehaviour:
    def test_value_algebra(
        self, animals: dict[str, int], vehicles: dict[str, int],
    ) -> None:
        assert ArrayToolbox.and_values(animals, vehicles) == {"dog": 2, "mouse": 3}
        assert ArrayToolbox.and_not_values(animals, vehicles) == {"cat": 1}
        assert ArrayToolbox.xor_values(animals, vehicles) == {0: 1, 1: 4}

    def test_collect(self, pet_owners: dict[str, Any]) -> None:
        assert ArrayToolbox().collect(pet_owners, ["pet", "name"]) == [
            "MrWhiskers",
            "Blub",
            None,
        ]

    def test_rotate(self) -> None:
        assert ArrayToolbox.rotate_array({"ID": [1], "Name": ["Toaster"]}) == {
            0: {"ID": 1, "Name": "Toaster"},
        }

    def test_invalid_operand_propagates(self) -> None:
        with pytest.raises(InvalidOperandError):
            ArrayToolbox.xor_keys(0, {})
