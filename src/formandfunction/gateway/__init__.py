# SPDX-License-Identifier: Apache-2.0
"""HTTP REST front end for the beam catalogue."""

from .rest import create_app

__all__ = ["create_app"]
