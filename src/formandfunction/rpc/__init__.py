# SPDX-License-Identifier: Apache-2.0
"""gRPC front end for the beam catalogue (service `steelbeam.SteelBeamService`)."""

from .service import SteelBeamService, beam_to_proto, build_server, proto_to_beam
from .steelbeam_pb2_grpc import SteelBeamServiceStub

__all__ = [
    "SteelBeamService",
    "SteelBeamServiceStub",
    "beam_to_proto",
    "build_server",
    "proto_to_beam",
]
