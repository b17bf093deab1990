"""
Cyclodrive - cycloidal drive disc profile generator and design analyzer.

Complete cycloidal drive design flow from parameters to a CNC/laser-ready
disc outline.

Example:
    >>> from cyclodrive.calculator import DEFAULT_PARAMS, check_design_quality
    >>> from cyclodrive.core import generate_profile, calculate_physics_metrics
    >>> from cyclodrive.io.export import save_dxf
    >>>
    >>> # Analyze the standard design
    >>> metrics = calculate_physics_metrics(DEFAULT_PARAMS)
    >>> report = check_design_quality(DEFAULT_PARAMS, metrics)
    >>>
    >>> # Export the disc outline
    >>> points = generate_profile(DEFAULT_PARAMS)
    >>> save_dxf(points, DEFAULT_PARAMS, "disc.dxf")

Note: All imports are lazy-loaded for fast startup.
"""

__version__ = "1.0.0"

# Define which names come from which submodule
# All imports are lazy to minimize startup time

_ENUMS = {"DriveConfig", "FillRule"}

_CALCULATOR = {
    "DEFAULT_PARAMS",
    "PRESETS",
    "MANUFACTURING_PRESETS",
    "get_preset",
    "apply_manufacturing_preset",
    "check_design_quality",
    "apply_fix",
    "QualityReport",
    "Severity",
    "calculate_drive_specs",
    "reduction_ratio",
}

_IO = {
    "DesignParameters",
    "load_design_json",
    "save_design_json",
}

_CORE = {
    "ProfilePoint",
    "PhysicsMetrics",
    "DiscPath",
    "generate_profile",
    "generate_pin_points",
    "generate_output_pin_points",
    "calculate_physics_metrics",
    "calculate_min_wall_thickness",
    "build_disc_path",
}

# Cache for lazy-loaded modules
_modules = {}


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    global _modules

    if name in _ENUMS:
        if "enums" not in _modules:
            from . import enums
            _modules["enums"] = enums
        return getattr(_modules["enums"], name)

    if name in _CALCULATOR:
        if "calculator" not in _modules:
            from . import calculator
            _modules["calculator"] = calculator
        return getattr(_modules["calculator"], name)

    if name in _IO:
        if "io" not in _modules:
            from . import io
            _modules["io"] = io
        return getattr(_modules["io"], name)

    if name in _CORE:
        if "core" not in _modules:
            from . import core
            _modules["core"] = core
        return getattr(_modules["core"], name)

    raise AttributeError(f"module 'cyclodrive' has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",

    # Enums (lazy loaded from enums)
    "DriveConfig",
    "FillRule",

    # Calculator (lazy loaded from calculator)
    "DEFAULT_PARAMS",
    "PRESETS",
    "MANUFACTURING_PRESETS",
    "get_preset",
    "apply_manufacturing_preset",
    "check_design_quality",
    "apply_fix",
    "QualityReport",
    "Severity",
    "calculate_drive_specs",
    "reduction_ratio",

    # IO (lazy loaded from io)
    "DesignParameters",
    "load_design_json",
    "save_design_json",

    # Geometry (lazy loaded from core)
    "ProfilePoint",
    "PhysicsMetrics",
    "DiscPath",
    "generate_profile",
    "generate_pin_points",
    "generate_output_pin_points",
    "calculate_physics_metrics",
    "calculate_min_wall_thickness",
    "build_disc_path",
]
