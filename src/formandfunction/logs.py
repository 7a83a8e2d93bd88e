# SPDX-License-Identifier: Apache-2.0
"""Structured JSON logging for the service process.

Modules log through `logging.getLogger(__name__)`; only the process entrypoint
calls `configure_logging`, so importing the package never touches handlers.
"""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a single JSON stream handler on the root logger."""
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter(LOG_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level.upper())

    # uvicorn ships its own handlers; route its records through ours instead.
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uv_logger = logging.getLogger(name)
        uv_logger.handlers.clear()
        uv_logger.propagate = True
