"""
gRPC client stub, servicer base and server registration for SteelBeamService.
"""

from __future__ import annotations

from typing import Any

import grpc

from . import steelbeam_pb2 as pb2


def _method_path(method: str) -> str:
    return f"/{pb2.FULL_SERVICE_NAME}/{method}"


class SteelBeamServiceStub:
    """Client stub; works with both `grpc.Channel` and `grpc.aio.Channel`."""

    def __init__(self, channel: Any):
        for method, (request_name, response_name) in pb2.METHODS.items():
            callable_ = channel.unary_unary(
                _method_path(method),
                request_serializer=pb2.MESSAGE_CLASSES[request_name].SerializeToString,
                response_deserializer=pb2.MESSAGE_CLASSES[response_name].FromString,
            )
            setattr(self, method, callable_)


class SteelBeamServiceServicer:
    """Base servicer; every method answers UNIMPLEMENTED until overridden."""

    async def _unimplemented(self, context: grpc.aio.ServicerContext) -> None:
        await context.abort(grpc.StatusCode.UNIMPLEMENTED, "Method not implemented!")

    async def GetBeams(self, request, context):
        await self._unimplemented(context)

    async def GetBeam(self, request, context):
        await self._unimplemented(context)

    async def CreateBeam(self, request, context):
        await self._unimplemented(context)

    async def UpdateBeam(self, request, context):
        await self._unimplemented(context)

    async def DeleteBeam(self, request, context):
        await self._unimplemented(context)

    async def GetStockStatus(self, request, context):
        await self._unimplemented(context)


def add_SteelBeamServiceServicer_to_server(servicer: SteelBeamServiceServicer, server: Any) -> None:
    handlers = {}
    for method, (request_name, response_name) in pb2.METHODS.items():
        handlers[method] = grpc.unary_unary_rpc_method_handler(
            getattr(servicer, method),
            request_deserializer=pb2.MESSAGE_CLASSES[request_name].FromString,
            response_serializer=pb2.MESSAGE_CLASSES[response_name].SerializeToString,
        )
    generic_handler = grpc.method_handlers_generic_handler(pb2.FULL_SERVICE_NAME, handlers)
    server.add_generic_rpc_handlers((generic_handler,))


__all__ = [
    "SteelBeamServiceStub",
    "SteelBeamServiceServicer",
    "add_SteelBeamServiceServicer_to_server",
]
