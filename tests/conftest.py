# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures: fresh seeded store, mocked stock client, respx router."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
import respx

from formandfunction.clients.stock import StockLookupClient, StockStatus
from formandfunction.models import Beam
from formandfunction.store import BeamStore


@pytest.fixture
def store() -> BeamStore:
    return BeamStore.seeded()


@pytest.fixture
def stock_client() -> AsyncMock:
    client = AsyncMock(spec=StockLookupClient)
    client.check_stock.return_value = StockStatus.IN_STOCK
    return client


@pytest.fixture
def respx_mock():
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
def ub90() -> Beam:
    return Beam(
        section_designation="UB406x178x90",
        mass_per_metre=89.8,
        depth_of_section=415.0,
        width_of_section=180.0,
        thickness_web=9.5,
        thickness_flange=15.6,
        area_of_section=114.0,
    )
