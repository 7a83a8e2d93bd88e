# SPDX-License-Identifier: Apache-2.0
"""Outbound clients for third-party services."""
