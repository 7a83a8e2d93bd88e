# SPDX-License-Identifier: Apache-2.0
"""File: src/formandfunction/rpc/service.py
Project: Form & Function API
Description:
    gRPC gateway over the shared beam store and stock lookup client, for
    backend consumers such as calculation engines.

    "Not found" and lookup failures are ordinary responses carrying
    `found=false` / `success=false` and a message; no gRPC status codes are
    raised for them. The wire <-> `Beam` mapping goes by field name.
"""

from __future__ import annotations

import logging
from typing import Tuple

import grpc

from ..clients.stock import StockLookupClient
from ..exceptions import BeamNotFoundError, StockLookupError
from ..models import BEAM_FIELDS, Beam
from ..store import BeamStore
from . import steelbeam_pb2 as pb2
from .steelbeam_pb2_grpc import SteelBeamServiceServicer, add_SteelBeamServiceServicer_to_server

logger = logging.getLogger(__name__)


def beam_to_proto(beam: Beam) -> pb2.SteelBeam:
    return pb2.SteelBeam(**{name: getattr(beam, name) for name in BEAM_FIELDS})


def proto_to_beam(message: pb2.SteelBeam) -> Beam:
    return Beam(**{name: getattr(message, name) for name in BEAM_FIELDS})


class SteelBeamService(SteelBeamServiceServicer):
    def __init__(self, store: BeamStore, stock_client: StockLookupClient) -> None:
        self.store = store
        self.stock_client = stock_client

    async def GetBeams(self, request, context):
        logger.info("gRPC GetBeams called")
        return pb2.GetBeamsResponse(beams=[beam_to_proto(b) for b in self.store.list_all()])

    async def GetBeam(self, request, context):
        logger.info(f"gRPC GetBeam called with section: {request.section_designation}")
        try:
            beam = self.store.get(request.section_designation)
        except BeamNotFoundError:
            return pb2.GetBeamResponse(found=False)
        return pb2.GetBeamResponse(beam=beam_to_proto(beam), found=True)

    async def CreateBeam(self, request, context):
        beam = proto_to_beam(request.beam)
        logger.info(f"gRPC CreateBeam called for section: {beam.section_designation}")
        created = self.store.create(beam)
        return pb2.CreateBeamResponse(
            beam=beam_to_proto(created), success=True, message="Beam created successfully"
        )

    async def UpdateBeam(self, request, context):
        logger.info(f"gRPC UpdateBeam called for section: {request.section_designation}")
        try:
            updated = self.store.replace(request.section_designation, proto_to_beam(request.beam))
        except BeamNotFoundError as e:
            return pb2.UpdateBeamResponse(success=False, message=e.public_message)
        return pb2.UpdateBeamResponse(
            beam=beam_to_proto(updated), success=True, message="Beam updated successfully"
        )

    async def DeleteBeam(self, request, context):
        logger.info(f"gRPC DeleteBeam called for section: {request.section_designation}")
        try:
            self.store.delete(request.section_designation)
        except BeamNotFoundError as e:
            return pb2.DeleteBeamResponse(success=False, message=e.public_message)
        return pb2.DeleteBeamResponse(success=True, message="Beam deleted successfully")

    async def GetStockStatus(self, request, context):
        logger.info(
            f"gRPC GetStockStatus called for product: {request.product_id}, "
            f"postcode: {request.postcode}"
        )
        try:
            status = await self.stock_client.check_stock(request.product_id, request.postcode)
        except StockLookupError as e:
            logger.error(f"gRPC GetStockStatus failed: {e}")
            return pb2.GetStockStatusResponse(
                product_id=request.product_id,
                postcode=request.postcode,
                success=False,
                message=e.public_message,
            )
        return pb2.GetStockStatusResponse(
            product_id=request.product_id,
            postcode=request.postcode,
            status=status.value,
            success=True,
            message="Stock status retrieved successfully",
        )


def build_server(
    store: BeamStore,
    stock_client: StockLookupClient,
    host: str = "0.0.0.0",
    port: int = 9090,
) -> Tuple[grpc.aio.Server, int]:
    """Create a grpc.aio server with the service registered and its port bound.

    Returns the server and the bound port (useful with port 0). Raises
    `RuntimeError` if the address cannot be bound.
    """
    server = grpc.aio.server()
    add_SteelBeamServiceServicer_to_server(SteelBeamService(store, stock_client), server)
    address = f"{host}:{port}"
    bound_port = server.add_insecure_port(address)
    if bound_port == 0:
        raise RuntimeError(f"failed to listen on {address}")
    return server, bound_port
