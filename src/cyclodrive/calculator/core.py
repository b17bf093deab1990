"""
Cycloidal Drive Calculator - Core Calculations

Pure functions for drive-level figures that do not need the sampled
profile: reduction ratio, disc lobes, outer size and the kinematic pose of
the mechanism at a given input angle.

A disc with N-1 lobes rolling in N ring pins turns once backwards per N-1
input turns when the housing is fixed. With the output fixed the housing
turns forwards once per N input turns.
"""

from dataclasses import dataclass
from math import cos, sin

from ..enums import DriveConfig
from ..io.loaders import DesignParameters


@dataclass
class DriveSpecs:
    """Drive-level figures derived from the parameters."""
    reduction_ratio: int      # Input turns per output turn, negative = reversed
    disc_lobes: int           # N - 1
    max_diameter_mm: float    # Approximate housing envelope: 2R + 2r
    drive_config: DriveConfig

    @property
    def ratio_label(self) -> str:
        return f"{abs(self.reduction_ratio)}:1"

    @property
    def output_reversed(self) -> bool:
        return self.reduction_ratio < 0


@dataclass
class OrbitPose:
    """Mechanism pose for one input shaft angle (radians)."""
    input_angle: float
    disc_center_x: float
    disc_center_y: float
    disc_rotation: float
    housing_rotation: float
    output_rotation: float


def reduction_ratio(params: DesignParameters) -> int:
    """
    Signed reduction ratio for the drive configuration.

    Returns:
        -(N-1) with the housing fixed (output turns against the input),
        N with the output fixed (housing turns with the input)
    """
    N = params.pin_count
    if params.drive_config == DriveConfig.OUTPUT_FIXED:
        return N
    return -(N - 1)


def calculate_drive_specs(params: DesignParameters) -> DriveSpecs:
    """Calculate ratio, lobe count and envelope for a design."""
    return DriveSpecs(
        reduction_ratio=reduction_ratio(params),
        disc_lobes=params.pin_count - 1,
        max_diameter_mm=params.pin_circle_radius * 2 + params.pin_radius * 2,
        drive_config=params.drive_config,
    )


def orbit_pose(params: DesignParameters, input_angle: float) -> OrbitPose:
    """
    Pose of disc, housing and output for an input shaft angle.

    The disc center orbits the input axis at the eccentricity. Rotations are
    in radians, counter-clockwise positive.

    Args:
        params: Design parameters
        input_angle: Eccentric shaft angle (radians)

    Returns:
        OrbitPose for rendering or animation
    """
    E = params.eccentricity
    ratio = reduction_ratio(params)

    if params.drive_config == DriveConfig.HOUSING_FIXED:
        housing = 0.0
        disc = input_angle / ratio
        output = disc
    else:
        output = 0.0
        disc = 0.0
        housing = input_angle / ratio

    return OrbitPose(
        input_angle=input_angle,
        disc_center_x=E * cos(input_angle),
        disc_center_y=E * sin(input_angle),
        disc_rotation=disc,
        housing_rotation=housing,
        output_rotation=output,
    )
