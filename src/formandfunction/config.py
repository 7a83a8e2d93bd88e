"""
Service configuration.

Port numbers are the only values the service strictly needs; host, log level
and shutdown grace are operational knobs with sensible defaults.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigurationError


class Settings(BaseModel):
    """Process settings, read from the environment by `from_env`."""
    host: str = Field("0.0.0.0", description="Interface both listeners bind to")
    http_port: int = Field(8080, ge=0, le=65535, description="REST listener port (PORT)")
    grpc_port: int = Field(9090, ge=0, le=65535, description="gRPC listener port (GRPC_PORT)")
    log_level: str = Field("INFO", description="Root log level (LOG_LEVEL)")
    shutdown_grace_sec: float = Field(30.0, ge=0, description="Bound on REST graceful shutdown")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {value!r}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Create settings from environment variables, falling back to defaults"""
        env = os.environ if environ is None else environ
        values = {
            "host": env.get("HOST") or None,
            "http_port": env.get("PORT") or None,
            "grpc_port": env.get("GRPC_PORT") or None,
            "log_level": env.get("LOG_LEVEL") or None,
            "shutdown_grace_sec": env.get("SHUTDOWN_GRACE_SEC") or None,
        }
        try:
            return cls(**{k: v for k, v in values.items() if v is not None})
        except ValidationError as e:
            raise ConfigurationError(f"Invalid environment configuration: {e}") from e
