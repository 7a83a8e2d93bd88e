# SPDX-License-Identifier: Apache-2.0
"""File: src/formandfunction/exceptions.py

Project: Form & Function API

Description:
    Exception taxonomy shared by the catalogue store, the stock lookup client
    and both gateways. Every error carries an HTTP status and a stable,
    enumerated `error_code`; the REST and gRPC layers report the code and the
    public message only, never the underlying cause.

"""

from __future__ import annotations

import secrets
from typing import Any, Dict, Optional


class CatalogueError(Exception):
    """Base exception for all application-specific errors."""

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"
    public_message: str = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
    ) -> None:
        self.message = message or self.public_message
        super().__init__(self.message)
        if status_code is not None:
            self.status_code = status_code
        if error_code is not None:
            self.error_code = error_code
        self.error_id = f"err_{secrets.token_hex(8)}"

    def to_payload(self, source: Optional[str] = None) -> Dict[str, Any]:
        """Client-facing error body. Carries the public message, not `self.message`."""
        payload: Dict[str, Any] = {"error": self.public_message, "code": self.error_code}
        if source:
            payload["source"] = source
        return payload

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message} (ID: {self.error_id})"


class ConfigurationError(CatalogueError):
    """Raised when an environment setting is missing or invalid."""

    error_code = "CONFIGURATION_ERROR"
    public_message = "Invalid configuration"


class BeamNotFoundError(LookupError, CatalogueError):
    """Raised when no beam matches a section designation."""

    status_code = 404
    error_code = "BEAM_NOT_FOUND"
    public_message = "Beam not found"

    def __init__(self, designation: str) -> None:
        # MRO with LookupError: initialise CatalogueError explicitly.
        CatalogueError.__init__(self, f"Beam '{designation}' not found")
        self.designation = designation


class BadRequestError(CatalogueError):
    status_code = 400
    error_code = "BAD_REQUEST"
    public_message = "Bad request"


class InvalidBodyError(BadRequestError):
    error_code = "INVALID_BODY"
    public_message = "Request body could not be decoded"


class MissingParameterError(BadRequestError):
    error_code = "MISSING_PARAMETER"

    def __init__(self, parameter: str) -> None:
        self.public_message = f"{parameter} query parameter is required"
        super().__init__(self.public_message)
        self.parameter = parameter


class RouteError(CatalogueError):
    """Raised by the router itself: unknown path or method not allowed on a path."""

    _CODES = {
        404: ("ROUTE_NOT_FOUND", "Not found"),
        405: ("METHOD_NOT_ALLOWED", "Method not allowed"),
    }

    def __init__(self, status_code: int, detail: Optional[str] = None) -> None:
        error_code, self.public_message = self._CODES.get(
            status_code, ("HTTP_ERROR", detail or "HTTP error")
        )
        super().__init__(detail, status_code=status_code, error_code=error_code)


class PayloadTooLargeError(CatalogueError):
    status_code = 413
    error_code = "PAYLOAD_TOO_LARGE"
    public_message = "Request body too large"


class StockLookupError(CatalogueError):
    """Raised when the stock endpoint is unreachable, fails or returns garbage."""

    status_code = 500
    error_code = "STOCK_LOOKUP_FAILED"
    public_message = "Stock lookup failed"


class InternalError(CatalogueError):
    """Unexpected transport or serialization fault."""
