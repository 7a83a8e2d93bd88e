# SPDX-License-Identifier: Apache-2.0
"""
Protobuf messages for the `steelbeam` package.

The descriptor is assembled at import time from `descriptor_pb2` so the
package carries no protoc build step; `steelbeam.proto` next to this module
is the human-readable source and must stay in step with the tables below.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

PACKAGE = "steelbeam"
SERVICE_NAME = "SteelBeamService"
FULL_SERVICE_NAME = f"{PACKAGE}.{SERVICE_NAME}"

_F = descriptor_pb2.FieldDescriptorProto
_STRING = _F.TYPE_STRING
_DOUBLE = _F.TYPE_DOUBLE
_BOOL = _F.TYPE_BOOL
_MESSAGE = _F.TYPE_MESSAGE

# Wire order of SteelBeam; field numbers are position + 1.
STEEL_BEAM_FIELDS: Tuple[str, ...] = (
    "section_designation",
    "mass_per_metre",
    "depth_of_section",
    "width_of_section",
    "thickness_web",
    "thickness_flange",
    "root_radius",
    "depth_between_fillets",
    "ratios_for_local_buckling_web",
    "ratios_for_local_buckling_flange",
    "end_clearance",
    "notch",
    "dimensions_for_detailing_n",
    "surface_area_per_metre",
    "surface_area_per_tonne",
    "second_moment_of_area_axis_y",
    "second_moment_of_area_axis_z",
    "radius_of_gyration_axis_y",
    "radius_of_gyration_axis_z",
    "elastic_modulus_axis_y",
    "elastic_modulus_axis_z",
    "plastic_modulus_axis_y",
    "plastic_modulus_axis_z",
    "buckling_parameter",
    "torsional_index",
    "warping_constant",
    "torsional_constant",
    "area_of_section",
)

# (name, type, type_name or None, repeated)
_FieldSpec = Tuple[str, int, Optional[str], bool]

_MESSAGES: Dict[str, List[_FieldSpec]] = {
    "SteelBeam": [
        (name, _STRING if name == "section_designation" else _DOUBLE, None, False)
        for name in STEEL_BEAM_FIELDS
    ],
    "GetBeamsRequest": [],
    "GetBeamsResponse": [("beams", _MESSAGE, "SteelBeam", True)],
    "GetBeamRequest": [("section_designation", _STRING, None, False)],
    "GetBeamResponse": [
        ("beam", _MESSAGE, "SteelBeam", False),
        ("found", _BOOL, None, False),
    ],
    "CreateBeamRequest": [("beam", _MESSAGE, "SteelBeam", False)],
    "CreateBeamResponse": [
        ("beam", _MESSAGE, "SteelBeam", False),
        ("success", _BOOL, None, False),
        ("message", _STRING, None, False),
    ],
    "UpdateBeamRequest": [
        ("section_designation", _STRING, None, False),
        ("beam", _MESSAGE, "SteelBeam", False),
    ],
    "UpdateBeamResponse": [
        ("beam", _MESSAGE, "SteelBeam", False),
        ("success", _BOOL, None, False),
        ("message", _STRING, None, False),
    ],
    "DeleteBeamRequest": [("section_designation", _STRING, None, False)],
    "DeleteBeamResponse": [
        ("success", _BOOL, None, False),
        ("message", _STRING, None, False),
    ],
    "GetStockStatusRequest": [
        ("product_id", _STRING, None, False),
        ("postcode", _STRING, None, False),
    ],
    "GetStockStatusResponse": [
        ("product_id", _STRING, None, False),
        ("postcode", _STRING, None, False),
        ("status", _STRING, None, False),
        ("success", _BOOL, None, False),
        ("message", _STRING, None, False),
    ],
}

# method name -> (request message, response message)
METHODS: Dict[str, Tuple[str, str]] = {
    "GetBeams": ("GetBeamsRequest", "GetBeamsResponse"),
    "GetBeam": ("GetBeamRequest", "GetBeamResponse"),
    "CreateBeam": ("CreateBeamRequest", "CreateBeamResponse"),
    "UpdateBeam": ("UpdateBeamRequest", "UpdateBeamResponse"),
    "DeleteBeam": ("DeleteBeamRequest", "DeleteBeamResponse"),
    "GetStockStatus": ("GetStockStatusRequest", "GetStockStatusResponse"),
}


def _build_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="steelbeam.proto", package=PACKAGE, syntax="proto3"
    )
    for message_name, fields in _MESSAGES.items():
        message = file_proto.message_type.add(name=message_name)
        for number, (name, field_type, type_name, repeated) in enumerate(fields, start=1):
            field = message.field.add(
                name=name,
                number=number,
                type=field_type,
                label=_F.LABEL_REPEATED if repeated else _F.LABEL_OPTIONAL,
            )
            if type_name:
                field.type_name = f".{PACKAGE}.{type_name}"

    service = file_proto.service.add(name=SERVICE_NAME)
    for method_name, (request_name, response_name) in METHODS.items():
        service.method.add(
            name=method_name,
            input_type=f".{PACKAGE}.{request_name}",
            output_type=f".{PACKAGE}.{response_name}",
        )
    return file_proto


# Private pool: re-importing the module never collides with other descriptors.
_POOL = descriptor_pool.DescriptorPool()
DESCRIPTOR = _POOL.AddSerializedFile(_build_file_descriptor().SerializeToString())


def _message_class(name: str):
    return message_factory.GetMessageClass(_POOL.FindMessageTypeByName(f"{PACKAGE}.{name}"))


SteelBeam = _message_class("SteelBeam")
GetBeamsRequest = _message_class("GetBeamsRequest")
GetBeamsResponse = _message_class("GetBeamsResponse")
GetBeamRequest = _message_class("GetBeamRequest")
GetBeamResponse = _message_class("GetBeamResponse")
CreateBeamRequest = _message_class("CreateBeamRequest")
CreateBeamResponse = _message_class("CreateBeamResponse")
UpdateBeamRequest = _message_class("UpdateBeamRequest")
UpdateBeamResponse = _message_class("UpdateBeamResponse")
DeleteBeamRequest = _message_class("DeleteBeamRequest")
DeleteBeamResponse = _message_class("DeleteBeamResponse")
GetStockStatusRequest = _message_class("GetStockStatusRequest")
GetStockStatusResponse = _message_class("GetStockStatusResponse")

MESSAGE_CLASSES = {name: globals()[name] for name in _MESSAGES}

__all__ = [
    "DESCRIPTOR",
    "FULL_SERVICE_NAME",
    "METHODS",
    "MESSAGE_CLASSES",
    "STEEL_BEAM_FIELDS",
    *_MESSAGES.keys(),
]
