"""
Cyclodrive core - profile geometry, physics analysis and path assembly.

All functions are pure: they take an immutable DesignParameters and return
freshly built results.

Example:
    >>> from cyclodrive.calculator import DEFAULT_PARAMS
    >>> from cyclodrive.core import generate_profile, calculate_physics_metrics
    >>>
    >>> points = generate_profile(DEFAULT_PARAMS)
    >>> metrics = calculate_physics_metrics(DEFAULT_PARAMS)
    >>> print(f"{metrics.max_pressure_angle:.1f}°")
"""

from .profile import (
    ProfilePoint,
    CurveSample,
    sample_curve,
    generate_profile,
    generate_pin_points,
    generate_output_pin_points,
    calculate_min_wall_thickness,
)
from .physics import (
    PhysicsMetrics,
    pressure_angle_deg,
    curvature_radius,
    calculate_physics_metrics,
)
from .path import (
    PathCommand,
    DiscPath,
    output_hole_radius,
    build_disc_path,
)

__all__ = [
    # Profile
    "ProfilePoint",
    "CurveSample",
    "sample_curve",
    "generate_profile",
    "generate_pin_points",
    "generate_output_pin_points",
    "calculate_min_wall_thickness",

    # Physics
    "PhysicsMetrics",
    "pressure_angle_deg",
    "curvature_radius",
    "calculate_physics_metrics",

    # Path
    "PathCommand",
    "DiscPath",
    "output_hole_radius",
    "build_disc_path",
]
