# SPDX-License-Identifier: Apache-2.0
"""gRPC gateway tests.

Scope:
- Wire schema covers every Beam field, by name.
- Servicer methods called directly (no network).
- One round trip through a real grpc.aio server on an ephemeral port.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import grpc
import pytest

from formandfunction.clients.stock import StockStatus
from formandfunction.exceptions import StockLookupError
from formandfunction.models import BEAM_FIELDS, SEED_BEAMS, Beam
from formandfunction.rpc import (
    SteelBeamService,
    SteelBeamServiceStub,
    beam_to_proto,
    build_server,
    proto_to_beam,
)
from formandfunction.rpc import steelbeam_pb2 as pb2
from formandfunction.store import BeamStore


@pytest.fixture
def service(store: BeamStore, stock_client: AsyncMock) -> SteelBeamService:
    return SteelBeamService(store, stock_client)


# === Schema and mapping ===

def test_wire_schema_matches_beam_fields() -> None:
    wire_fields = {f.name for f in pb2.SteelBeam.DESCRIPTOR.fields}
    assert wire_fields == set(BEAM_FIELDS)
    assert set(pb2.STEEL_BEAM_FIELDS) == set(BEAM_FIELDS)


def test_service_descriptor_lists_all_methods() -> None:
    service_desc = pb2.DESCRIPTOR.services_by_name["SteelBeamService"]
    assert {m.name for m in service_desc.methods} == {
        "GetBeams", "GetBeam", "CreateBeam", "UpdateBeam", "DeleteBeam", "GetStockStatus",
    }


def test_beam_proto_mapping_is_lossless() -> None:
    for beam in SEED_BEAMS:
        message = beam_to_proto(beam)
        assert message.section_designation == beam.section_designation
        assert message.torsional_constant == beam.torsional_constant
        assert proto_to_beam(pb2.SteelBeam.FromString(message.SerializeToString())) == beam


# === Servicer (direct calls) ===

@pytest.mark.asyncio
async def test_get_beams(service: SteelBeamService) -> None:
    response = await service.GetBeams(pb2.GetBeamsRequest(), None)
    assert [b.section_designation for b in response.beams] == ["UB406x178x74", "UB406x178x67"]


@pytest.mark.asyncio
async def test_get_beam_found_and_not_found(service: SteelBeamService) -> None:
    found = await service.GetBeam(pb2.GetBeamRequest(section_designation="UB406x178x67"), None)
    assert found.found is True
    assert found.beam.mass_per_metre == 67.1

    missing = await service.GetBeam(pb2.GetBeamRequest(section_designation="UB0"), None)
    assert missing.found is False
    assert not missing.HasField("beam")


@pytest.mark.asyncio
async def test_create_then_get(service: SteelBeamService, store: BeamStore, ub90: Beam) -> None:
    response = await service.CreateBeam(pb2.CreateBeamRequest(beam=beam_to_proto(ub90)), None)
    assert response.success is True
    assert response.message == "Beam created successfully"
    assert store.get("UB406x178x90") == ub90


@pytest.mark.asyncio
async def test_update_beam(service: SteelBeamService, store: BeamStore) -> None:
    request = pb2.UpdateBeamRequest(
        section_designation="UB406x178x74",
        beam=pb2.SteelBeam(section_designation="UB406x178x74", notch=2.0),
    )
    response = await service.UpdateBeam(request, None)
    assert response.success is True
    assert store.get("UB406x178x74").notch == 2.0
    assert store.get("UB406x178x74").mass_per_metre == 0.0


@pytest.mark.asyncio
async def test_update_missing_is_negative_result(service: SteelBeamService, store: BeamStore) -> None:
    before = store.list_all()
    response = await service.UpdateBeam(
        pb2.UpdateBeamRequest(section_designation="UB0", beam=pb2.SteelBeam(section_designation="UB0")),
        None,
    )
    assert response.success is False
    assert response.message == "Beam not found"
    assert store.list_all() == before


@pytest.mark.asyncio
async def test_delete_beam(service: SteelBeamService, store: BeamStore) -> None:
    ok = await service.DeleteBeam(pb2.DeleteBeamRequest(section_designation="UB406x178x74"), None)
    assert ok.success is True
    assert store.count() == 1

    again = await service.DeleteBeam(pb2.DeleteBeamRequest(section_designation="UB406x178x74"), None)
    assert again.success is False


@pytest.mark.asyncio
async def test_stock_status_success(service: SteelBeamService, stock_client: AsyncMock) -> None:
    stock_client.check_stock.return_value = StockStatus.NOT_AVAILABLE
    response = await service.GetStockStatus(
        pb2.GetStockStatusRequest(product_id="P1", postcode="AB1"), None
    )
    assert response.success is True
    assert response.status == "NotAvailable"
    assert response.product_id == "P1"
    stock_client.check_stock.assert_awaited_once_with("P1", "AB1")


@pytest.mark.asyncio
async def test_stock_status_failure_is_not_a_fault(
    service: SteelBeamService, stock_client: AsyncMock
) -> None:
    stock_client.check_stock.side_effect = StockLookupError("dial tcp: i/o timeout")
    response = await service.GetStockStatus(
        pb2.GetStockStatusRequest(product_id="P1", postcode="AB1"), None
    )
    assert response.success is False
    assert response.status == ""
    assert response.message == "Stock lookup failed"


# === Real server round trip ===

@pytest.mark.asyncio
async def test_round_trip_over_grpc(store: BeamStore, stock_client: AsyncMock, ub90: Beam) -> None:
    server, port = build_server(store, stock_client, host="127.0.0.1", port=0)
    await server.start()
    try:
        async with grpc.aio.insecure_channel(f"127.0.0.1:{port}") as channel:
            stub = SteelBeamServiceStub(channel)

            listed = await stub.GetBeams(pb2.GetBeamsRequest())
            assert len(listed.beams) == 2

            created = await stub.CreateBeam(pb2.CreateBeamRequest(beam=beam_to_proto(ub90)))
            assert created.success

            fetched = await stub.GetBeam(pb2.GetBeamRequest(section_designation="UB406x178x90"))
            assert fetched.found
            assert proto_to_beam(fetched.beam) == ub90

            deleted = await stub.DeleteBeam(pb2.DeleteBeamRequest(section_designation="UB406x178x90"))
            assert deleted.success

            missing = await stub.GetBeam(pb2.GetBeamRequest(section_designation="UB406x178x90"))
            assert not missing.found
    finally:
        await server.stop(None)
