"""
Physics analysis of the cycloidal disc profile.

Evaluates, per sample of the same parametric curve the profile generator
uses, the pressure angle at the pin contact and the radius of curvature of
the machined surface. The extrema drive the manufacturability verdicts:

- max pressure angle above 45° means poor efficiency / self-locking risk
- net curvature radius <= 0 means the profile is undercut, i.e. no cutter
  of any radius can follow it

Reference:
    Chen BingKui et al., "Gear geometry of cycloid drives" (2008)
"""

import logging
from dataclasses import dataclass, field
from math import atan2, cos, sin, degrees, inf
from typing import List, Optional

from ..constants import CURVATURE_DENOMINATOR_EPSILON, PRESSURE_ANGLE_WARNING_DEG
from ..io.loaders import DesignParameters
from .profile import ProfilePoint, sample_curve

logger = logging.getLogger(__name__)


@dataclass
class PhysicsMetrics:
    """Result of the physics analysis.

    Attributes:
        min_curvature_radius: Net curvature radius (mm) of smallest
            magnitude, sign preserved. <= 0 means undercut. +inf when no
            samples were evaluated.
        max_pressure_angle: Largest pressure angle over the profile (deg)
        points: Samples enriched with pressure angle and curvature
    """
    min_curvature_radius: float
    max_pressure_angle: float
    points: List[ProfilePoint] = field(default_factory=list)

    @property
    def is_undercut(self) -> bool:
        return self.min_curvature_radius <= 0

    @property
    def max_tool_diameter_mm(self) -> Optional[float]:
        """Largest cutter that follows the profile, None when undercut."""
        if self.is_undercut:
            return None
        return self.min_curvature_radius * 2

    @property
    def pressure_angle_ok(self) -> bool:
        return self.max_pressure_angle <= PRESSURE_ANGLE_WARNING_DEG


def pressure_angle_deg(params: DesignParameters, t: float) -> float:
    """
    Pressure angle at parameter t.

    With K = E·N/R:
        α = atan2(|K·sin(Nt)|, |1 - K·cos(Nt)|)
    """
    N = params.pin_count
    K = (params.eccentricity * N) / params.pin_circle_radius
    num = K * sin(N * t)
    den = 1 - K * cos(N * t)
    return degrees(atan2(abs(num), abs(den)))


def curvature_radius(params: DesignParameters, t: float) -> float:
    """
    Radius of curvature of the pin center locus at parameter t.

    With φ = (N-1)·t:
        ρ = (R² + E²N² - 2REN·cos φ)^1.5 / (R² + E²N³ - REN(N+1)·cos φ)

    The sign follows the denominator - negative where the locus is concave.
    Returns inf at an inflection (zero denominator).
    """
    N = params.pin_count
    R = params.pin_circle_radius
    E = params.eccentricity

    phi = (N - 1) * t
    term1 = max(R * R + E * E * N * N - 2 * R * E * N * cos(phi), 0.0)
    numerator = term1 ** 1.5
    denominator = R * R + E * E * N * N * N - R * E * N * (N + 1) * cos(phi)

    if abs(denominator) < CURVATURE_DENOMINATOR_EPSILON:
        return inf
    return numerator / denominator


def calculate_physics_metrics(params: DesignParameters) -> PhysicsMetrics:
    """
    Analyze pressure angle and surface curvature over the whole profile.

    The net surface curvature is the locus curvature minus the pin radius
    (the tool offset). The minimum is selected by absolute value and keeps
    its sign, so a small positive radius and a small negative one compete
    on magnitude alone.

    With K = E*N/R >= 1 the pressure angle reaches 90 degrees at points that
    need not fall on the sample grid, so the sampled maximum is then not
    monotone in eccentricity.

    Args:
        params: Complete design parameters

    Returns:
        PhysicsMetrics with extrema and the enriched point sequence
    """
    r = params.pin_radius

    points: List[ProfilePoint] = []
    min_curvature = inf
    max_pressure = 0.0

    for s in sample_curve(params):
        pressure = pressure_angle_deg(params, s.t)
        if pressure > max_pressure:
            max_pressure = pressure

        surface_curvature = curvature_radius(params, s.t) - r
        if abs(surface_curvature) < abs(min_curvature):
            min_curvature = surface_curvature

        points.append(ProfilePoint(
            x=s.sx + r * s.nx,
            y=s.sy + r * s.ny,
            nx=s.nx,
            ny=s.ny,
            pressure_angle_deg=pressure,
            curvature_radius=surface_curvature,
        ))

    logger.debug(
        f"Physics: {len(points)} samples, max pressure angle {max_pressure:.2f}°, "
        f"min curvature {min_curvature:.4f}mm"
    )

    return PhysicsMetrics(
        min_curvature_radius=min_curvature,
        max_pressure_angle=max_pressure,
        points=points,
    )
