# SPDX-License-Identifier: Apache-2.0
"""File: src/formandfunction/__init__.py
Project: Form & Function API
Description:
    Top-level package initializer for `formandfunction`.

    Responsibilities:
    - Define the public API surface (`__all__`) and lazy re-exports.
    - Expose package metadata (`__version__`, `__description__`, etc.).
    - Avoid side effects (no logging config, no network/file I/O on import).

Package layout (excerpt):
    formandfunction/
      __init__.py          <- you are here
      models.py            <- Beam record and seed catalogue
      store.py             <- lock-guarded in-memory catalogue
      clients/stock.py     <- GraphQL stock lookup
      gateway/rest.py      <- FastAPI application
      rpc/                 <- gRPC schema, servicer and stub
      main.py              <- process supervisor (REST + gRPC)
"""  # noqa: D205
from __future__ import annotations

import importlib
import importlib.metadata as _metadata
import sys
from typing import TYPE_CHECKING, Any

# -----------------------------------------------------------------------------
# Package metadata
# -----------------------------------------------------------------------------

# Must match `[project].name` in pyproject.toml for the version lookup to work.
__pkg_name__ = "formandfunction"
__service_name__ = "Form & Function API"
__description__ = "HTTP REST API for frontend + gRPC backend communication"
__license__ = "Apache-2.0"

try:
    __version__ = _metadata.version(__pkg_name__)
except _metadata.PackageNotFoundError:
    # Source checkout without an installed distribution.
    __version__ = "0.0.0-dev"

__all__ = (
    "BeamStore",
    "create_app",
    "__pkg_name__",
    "__version__",
    "get_package_info",
)

if TYPE_CHECKING:  # pragma: no cover
    from .gateway.rest import create_app
    from .store import BeamStore


_LAZY_ATTRS = {
    "BeamStore": ".store",
    "create_app": ".gateway.rest",
}


def __getattr__(name: str) -> Any:
    """Load selected attributes from submodules on first access (PEP 562)."""
    module_name = _LAZY_ATTRS.get(name)
    if module_name is None:
        raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
    obj = getattr(importlib.import_module(module_name, __name__), name)
    globals()[name] = obj
    return obj


def get_package_info() -> dict[str, str]:
    """Return package metadata, used by the `/` descriptor and `/health`.

    Example:
        >>> from formandfunction import get_package_info
        >>> get_package_info()["name"]
        'formandfunction'
    """
    return {
        "name": __pkg_name__,
        "service": __service_name__,
        "version": __version__,
        "license": __license__,
        "description": __description__,
        "python_version": sys.version.split()[0],
    }
