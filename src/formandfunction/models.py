# SPDX-License-Identifier: Apache-2.0
"""File: src/formandfunction/models.py
Project: Form & Function API
Description:
    `Beam` record (structural steel section) and the seed catalogue loaded by a
    freshly built store.

    Every numeric property defaults to 0.0 and the designation to "", so a
    partial request body decodes to a record with the missing fields zeroed.
    That is what makes PUT a full replace rather than a patch.

    Decoding is strict: a number sent as a JSON string is a decode error,
    while JSON integers are accepted for float fields.
"""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict


class Beam(BaseModel):
    """Steel beam section, keyed by `section_designation`."""

    model_config = ConfigDict(extra="ignore", strict=True)

    section_designation: str = ""
    mass_per_metre: float = 0.0
    depth_of_section: float = 0.0
    width_of_section: float = 0.0
    thickness_web: float = 0.0
    thickness_flange: float = 0.0
    root_radius: float = 0.0
    depth_between_fillets: float = 0.0
    ratios_for_local_buckling_web: float = 0.0
    ratios_for_local_buckling_flange: float = 0.0
    end_clearance: float = 0.0
    notch: float = 0.0
    dimensions_for_detailing_n: float = 0.0
    surface_area_per_metre: float = 0.0
    surface_area_per_tonne: float = 0.0
    second_moment_of_area_axis_y: float = 0.0
    second_moment_of_area_axis_z: float = 0.0
    radius_of_gyration_axis_y: float = 0.0
    radius_of_gyration_axis_z: float = 0.0
    elastic_modulus_axis_y: float = 0.0
    elastic_modulus_axis_z: float = 0.0
    plastic_modulus_axis_y: float = 0.0
    plastic_modulus_axis_z: float = 0.0
    buckling_parameter: float = 0.0
    torsional_index: float = 0.0
    warping_constant: float = 0.0
    torsional_constant: float = 0.0
    area_of_section: float = 0.0


BEAM_FIELDS: Tuple[str, ...] = tuple(Beam.model_fields)


SEED_BEAMS: Tuple[Beam, ...] = (
    Beam(
        section_designation="UB406x178x74",
        mass_per_metre=74.6,
        depth_of_section=412.8,
        width_of_section=179.5,
        thickness_web=9.3,
        thickness_flange=16.0,
        root_radius=10.2,
        depth_between_fillets=360.8,
        ratios_for_local_buckling_web=38.8,
        ratios_for_local_buckling_flange=5.61,
        end_clearance=369.0,
        notch=360.8,
        dimensions_for_detailing_n=45.0,
        surface_area_per_metre=1.17,
        surface_area_per_tonne=15.7,
        second_moment_of_area_axis_y=27400,
        second_moment_of_area_axis_z=1600,
        radius_of_gyration_axis_y=17.1,
        radius_of_gyration_axis_z=4.22,
        elastic_modulus_axis_y=1330,
        elastic_modulus_axis_z=178,
        plastic_modulus_axis_y=1500,
        plastic_modulus_axis_z=275,
        buckling_parameter=0.338,
        torsional_index=29.6,
        warping_constant=0.581,
        torsional_constant=53.8,
        area_of_section=95.0,
    ),
    Beam(
        section_designation="UB406x178x67",
        mass_per_metre=67.1,
        depth_of_section=406.4,
        width_of_section=177.9,
        thickness_web=8.6,
        thickness_flange=12.8,
        root_radius=10.2,
        depth_between_fillets=360.8,
        ratios_for_local_buckling_web=42.0,
        ratios_for_local_buckling_flange=6.95,
        end_clearance=362.6,
        notch=360.8,
        dimensions_for_detailing_n=45.0,
        surface_area_per_metre=1.15,
        surface_area_per_tonne=17.1,
        second_moment_of_area_axis_y=23500,
        second_moment_of_area_axis_z=1350,
        radius_of_gyration_axis_y=16.6,
        radius_of_gyration_axis_z=4.09,
        elastic_modulus_axis_y=1160,
        elastic_modulus_axis_z=152,
        plastic_modulus_axis_y=1300,
        plastic_modulus_axis_z=234,
        buckling_parameter=0.364,
        torsional_index=25.4,
        warping_constant=0.424,
        torsional_constant=36.4,
        area_of_section=85.5,
    ),
)
