# SPDX-License-Identifier: Apache-2.0
"""configure_logging installs exactly one JSON handler."""

import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from formandfunction.logs import configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_handler_installed(restore_root_logger) -> None:
    configure_logging("debug")
    configure_logging("debug")

    root = restore_root_logger
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JsonFormatter)
    assert root.level == logging.DEBUG
    assert logging.getLogger("uvicorn.access").propagate is True
