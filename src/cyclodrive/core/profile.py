"""
Cycloidal disc profile generation.

The disc outline is the epitrochoid traced by a ring pin center in the
disc's frame, offset inward along its normal by the pin radius plus the
manufacturing clearance:

    sx = R cos t - E cos(Nt)
    sy = R sin t - E sin(Nt)

These are pure functions with no hidden state - the same parameters always
give the same point sequence.
"""

import logging
from dataclasses import dataclass
from math import cos, sin, pi, sqrt, isnan
from typing import Iterator, List, NamedTuple, Optional

from ..constants import TANGENT_EPSILON
from ..io.loaders import DesignParameters

logger = logging.getLogger(__name__)


@dataclass
class ProfilePoint:
    """A sample on the disc outline in the disc's local frame.

    Attributes:
        x, y: Position (mm)
        nx, ny: Unit inward normal, if known
        pressure_angle_deg: Pressure angle at this sample (physics only)
        curvature_radius: Net surface curvature radius (physics only)
    """
    x: float
    y: float
    nx: Optional[float] = None
    ny: Optional[float] = None
    pressure_angle_deg: Optional[float] = None
    curvature_radius: Optional[float] = None


class CurveSample(NamedTuple):
    """Pin center locus and inward unit normal at one parameter value."""
    t: float
    sx: float
    sy: float
    nx: float
    ny: float


def sample_curve(params: DesignParameters) -> Iterator[CurveSample]:
    """
    Sample the pin center locus over t in [0, 2π] at resolution+1 steps.

    Samples whose tangent magnitude is below TANGENT_EPSILON are cusps and
    are skipped, so fewer than resolution+1 samples may be produced. Since
    |tangent|² = R² + E²N² - 2REN·cos((N-1)t), this only happens when
    R == E·N exactly.

    Shared by the profile generator and the physics analysis so both see
    the same positions and normals.
    """
    N = params.pin_count
    R = params.pin_circle_radius
    E = params.eccentricity
    resolution = params.resolution

    for i in range(resolution + 1):
        t = (i / resolution) * 2 * pi

        dxdt = -R * sin(t) + E * N * sin(N * t)
        dydt = R * cos(t) - E * N * cos(N * t)
        length = sqrt(dxdt * dxdt + dydt * dydt)

        if length < TANGENT_EPSILON or isnan(length):
            logger.debug(f"Dropping degenerate sample at t={t:.6f} (|tangent|={length:.3g})")
            continue

        sx = R * cos(t) - E * cos(N * t)
        sy = R * sin(t) - E * sin(N * t)

        # Left normal of the counter-clockwise locus points into the disc
        yield CurveSample(t, sx, sy, -dydt / length, dxdt / length)


def generate_profile(
    params: DesignParameters,
    tolerance: Optional[float] = None,
) -> List[ProfilePoint]:
    """
    Generate the cycloidal disc profile.

    Args:
        params: Complete design parameters
        tolerance: Overrides params.tolerance when given. Use 0 for the
            theoretical zero-clearance curve.

    Returns:
        Profile points with unit inward normals. The first and last point
        coincide (t = 0 and t = 2π) unless one of them is a dropped cusp.
    """
    effective_tolerance = params.tolerance if tolerance is None else tolerance
    offset = params.pin_radius + effective_tolerance

    points = [
        ProfilePoint(
            x=s.sx + offset * s.nx,
            y=s.sy + offset * s.ny,
            nx=s.nx,
            ny=s.ny,
        )
        for s in sample_curve(params)
    ]

    dropped = params.resolution + 1 - len(points)
    if dropped:
        logger.debug(f"Profile has {len(points)} points ({dropped} cusp samples dropped)")

    return points


def generate_pin_points(params: DesignParameters) -> List[ProfilePoint]:
    """Centers of the stationary ring pins, starting at angle 0."""
    N = params.pin_count
    R = params.pin_circle_radius
    return [
        ProfilePoint(x=R * cos(2 * pi * i / N), y=R * sin(2 * pi * i / N))
        for i in range(N)
    ]


def generate_output_pin_points(params: DesignParameters) -> List[ProfilePoint]:
    """Centers of the output pins (and disc holes), starting at angle 0."""
    count = params.output_pin_count
    radius = params.output_pin_circle_radius
    return [
        ProfilePoint(x=radius * cos(2 * pi * i / count), y=radius * sin(2 * pi * i / count))
        for i in range(count)
    ]


def calculate_min_wall_thickness(points: List[ProfilePoint], hole_radius: float) -> float:
    """
    Smallest radial distance from the profile to the center bore.

    Args:
        points: Profile points (usually the toleranced profile)
        hole_radius: Center bore radius (mm)

    Returns:
        Minimum wall in mm, or inf for an empty profile
    """
    min_wall = float("inf")
    for p in points:
        wall = sqrt(p.x * p.x + p.y * p.y) - hole_radius
        if wall < min_wall:
            min_wall = wall
    return min_wall
