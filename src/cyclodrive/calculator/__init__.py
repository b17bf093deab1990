"""
Cycloidal Drive Calculator - design-level calculations and quality rules.

Example:
    >>> from cyclodrive.calculator import DEFAULT_PARAMS, check_design_quality
    >>>
    >>> report = check_design_quality(DEFAULT_PARAMS.model_copy(update={"eccentricity": 3.0}))
    >>> report.warnings
    ['Eccentricity (3mm) is too high for this radius.', ...]
    >>> better = report.fixes[0].params
"""

from .core import (
    DriveSpecs,
    OrbitPose,
    reduction_ratio,
    calculate_drive_specs,
    orbit_pose,
)

from .validation import (
    Severity,
    ValidationMessage,
    GeometricFix,
    QualityReport,
    max_safe_eccentricity,
    pin_spacing,
    approx_inner_radius,
    check_design_quality,
    apply_fix,
)

from .presets import (
    DEFAULT_PARAMS,
    PRESETS,
    MANUFACTURING_PRESETS,
    list_presets,
    get_preset,
    apply_manufacturing_preset,
)

from ..enums import DriveConfig

from .output import (
    to_json,
    to_markdown,
    to_summary,
)

# Convenience import
from ..io import DesignParameters


__all__ = [
    # Enums
    "DriveConfig",

    # Parameters
    "DesignParameters",

    # Drive specs
    "DriveSpecs",
    "OrbitPose",
    "reduction_ratio",
    "calculate_drive_specs",
    "orbit_pose",

    # Quality rules
    "Severity",
    "ValidationMessage",
    "GeometricFix",
    "QualityReport",
    "max_safe_eccentricity",
    "pin_spacing",
    "approx_inner_radius",
    "check_design_quality",
    "apply_fix",

    # Presets
    "DEFAULT_PARAMS",
    "PRESETS",
    "MANUFACTURING_PRESETS",
    "list_presets",
    "get_preset",
    "apply_manufacturing_preset",

    # Output formatters
    "to_json",
    "to_markdown",
    "to_summary",
]
