"""Shared pytest fixtures and configuration for the array-toolbox test suite.

Guidelines
----------
* Every test is a pure function call — no I/O, no network.
* Inputs must be checked for mutation where an operation could touch them.
* loguru records are bridged into pytest's ``caplog`` on demand.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

import pytest
from loguru import logger


class PropagateHandler(logging.Handler):
    """Handler that propagates loguru records to standard logging."""

    def emit(self, record: logging.LogRecord) -> None:
        logging.getLogger(record.name).handle(record)


@pytest.fixture
def caplog(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """Fixture to enable caplog to capture the package's loguru logs."""
    logger.enable("array_toolbox")
    handler_id = logger.add(PropagateHandler(), format="{message}", level="DEBUG")
    caplog.set_level(logging.DEBUG)
    yield caplog
    logger.remove(handler_id)
    logger.disable("array_toolbox")


@pytest.fixture
def animals() -> dict[str, int]:
    return {"cat": 1, "dog": 2, "mouse": 3}


@pytest.fixture
def vehicles() -> dict[str, int]:
    return {"car": 2, "truck": 3, "moped": 4}


@pytest.fixture
def pet_owners() -> dict[str, Any]:
    return {
        "alice": {"pet": {"name": "MrWhiskers", "type": "cat"}},
        "ben": {"pet": {"name": "Blub", "type": "goldfish"}},
        "chris": {"pet": {"type": "none"}},
    }
