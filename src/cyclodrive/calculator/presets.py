"""
Design and manufacturing presets.

Design presets are complete DesignParameters; manufacturing presets only
set the two clearances (profile tolerance and hole tolerance) for a process.
"""

from typing import Dict, List

from ..constants import DEFAULT_RESOLUTION
from ..enums import DriveConfig
from ..io.loaders import DesignParameters


DEFAULT_PARAMS = DesignParameters(
    pin_count=12,
    pin_circle_radius=50.0,
    pin_radius=5.0,
    eccentricity=1.5,
    hole_radius=10.0,  # Center bearing bore
    resolution=DEFAULT_RESOLUTION,
    tolerance=0.15,
    hole_tolerance=0.1,
    output_pin_count=6,
    output_pin_radius=5.0,
    output_pin_circle_radius=25.0,
    drive_config=DriveConfig.HOUSING_FIXED,
)


# name -> description and complete params
PRESETS: Dict[str, Dict] = {
    "Standard (11:1)": {
        "description": "Balanced reduction and size.",
        "params": DEFAULT_PARAMS,
    },
    "Compact NEMA 17 (9:1)": {
        "description": "Small footprint for stepper motors.",
        "params": DEFAULT_PARAMS.model_copy(update={
            "pin_count": 10,
            "pin_circle_radius": 22.0,
            "pin_radius": 3.0,
            "eccentricity": 1.0,
            "hole_radius": 5.0,
            "output_pin_count": 4,
            "output_pin_radius": 2.5,
            "output_pin_circle_radius": 12.0,
            "tolerance": 0.1,
            "hole_tolerance": 0.1,
        }),
    },
    "High Reduction (39:1)": {
        "description": "Precision movement with high torque.",
        "params": DEFAULT_PARAMS.model_copy(update={
            "pin_count": 40,
            "pin_circle_radius": 80.0,
            "pin_radius": 3.0,
            "eccentricity": 0.8,
            "hole_radius": 12.0,
            "output_pin_count": 6,
            "output_pin_radius": 5.0,
            "output_pin_circle_radius": 40.0,
            "resolution": 1440,
            "tolerance": 0.05,
            "hole_tolerance": 0.05,
        }),
    },
    "Heavy Duty (7:1)": {
        "description": "Large pins for maximum load capacity.",
        "params": DEFAULT_PARAMS.model_copy(update={
            "pin_count": 8,
            "pin_circle_radius": 100.0,
            "pin_radius": 15.0,
            "eccentricity": 4.0,
            "hole_radius": 25.0,
            "output_pin_count": 6,
            "output_pin_radius": 12.0,
            "output_pin_circle_radius": 50.0,
            "tolerance": 0.25,
            "hole_tolerance": 0.2,
        }),
    },
}


# name -> clearances (mm) for the process
MANUFACTURING_PRESETS: Dict[str, Dict[str, float]] = {
    "CNC Machining (ISO Fit)": {"tolerance": 0.025, "hole_tolerance": 0.01},
    "Bambu Lab / Prusa (High Prec)": {"tolerance": 0.08, "hole_tolerance": 0.05},
    "Standard FDM (Ender 3)": {"tolerance": 0.15, "hole_tolerance": 0.10},
    "Resin / SLA (Formlabs)": {"tolerance": 0.05, "hole_tolerance": 0.03},
    "Loose Fit (Prototyping)": {"tolerance": 0.25, "hole_tolerance": 0.20},
}


def _lookup(table: Dict, name: str, kind: str):
    # Exact name first, then a case-insensitive prefix ("heavy" -> "Heavy Duty (7:1)")
    if name in table:
        return table[name]
    name_lower = name.lower()
    matches = [key for key in table if key.lower().startswith(name_lower)]
    if len(matches) == 1:
        return table[matches[0]]
    valid = ", ".join(table.keys())
    raise ValueError(f"Unknown {kind} preset '{name}'. Valid presets: {valid}")


def list_presets() -> List[str]:
    return list(PRESETS.keys())


def get_preset(name: str) -> DesignParameters:
    """
    Get design preset by name.

    Args:
        name: Full preset name or an unambiguous case-insensitive prefix

    Returns:
        Complete DesignParameters

    Raises:
        ValueError if preset name not found
    """
    return _lookup(PRESETS, name, "design")["params"]


def apply_manufacturing_preset(params: DesignParameters, name: str) -> DesignParameters:
    """
    Return a copy of params with the clearances of a manufacturing process.

    Raises:
        ValueError if preset name not found
    """
    clearances = _lookup(MANUFACTURING_PRESETS, name, "manufacturing")
    return params.model_copy(update=dict(clearances))
