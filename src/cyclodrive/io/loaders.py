"""
JSON input/output for cycloidal drive parameters.

Loads design parameters exported by the parameter editor or saved by the
CLI. Both snake_case field names and the camelCase names used by the UI
(``pinCount``, ``pinCircleRadius``...) are accepted.

Uses Pydantic for automatic validation and enum coercion.
"""

import json
from pathlib import Path
from typing import Union, Dict, Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from ..enums import DriveConfig


class DesignParameters(BaseModel):
    """Complete, immutable cycloidal drive design.

    Every field is caller-supplied. Nothing is clamped or defaulted here:
    out-of-range values are reported by the quality rules, not rejected.
    Use ``model_copy(update={...})`` to derive an independent variant.
    """
    model_config = ConfigDict(
        frozen=True,
        extra='ignore',
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=False,
    )

    pin_count: int                   # N - stationary ring pins
    pin_circle_radius: float         # R - radius of the ring pin circle (mm)
    pin_radius: float                # r - radius of each ring pin (mm)
    eccentricity: float              # E - offset of the disc center (mm)
    hole_radius: float               # Center bearing bore (mm)
    resolution: int                  # Samples per revolution
    tolerance: float                 # Profile contraction (mm)
    hole_tolerance: float            # Bore and output hole expansion (mm)

    # Output stage
    output_pin_count: int
    output_pin_radius: float
    output_pin_circle_radius: float
    drive_config: DriveConfig

    @field_validator('drive_config', mode='before')
    @classmethod
    def coerce_drive_config(cls, v):
        if isinstance(v, str):
            normalized = v.replace('_', '').replace('-', '').lower()
            for member in DriveConfig:
                if member.value.lower() == normalized:
                    return member
        return v


def _unwrap(data: Dict[str, Any]) -> Dict[str, Any]:
    """Strip the wrappers some exports put around the parameter block."""
    for key in ('design', 'params'):
        if isinstance(data.get(key), dict):
            return data[key]
    return data


def design_to_dict(params: DesignParameters, by_alias: bool = False) -> Dict[str, Any]:
    """Convert parameters to a JSON-compatible dict (enums as values)."""
    return params.model_dump(mode='json', by_alias=by_alias)


def parse_design(data: Dict[str, Any]) -> DesignParameters:
    """
    Build DesignParameters from a parsed JSON object.

    Raises:
        ValueError: If the object holds no design parameters at all
        ValidationError: If fields are missing or have the wrong type
    """
    if not isinstance(data, dict):
        raise ValueError("Invalid design JSON - expected an object")

    data = _unwrap(data)
    if 'pin_count' not in data and 'pinCount' not in data:
        raise ValueError(
            "Invalid design JSON - must contain the drive parameters "
            "(pin_count, pin_circle_radius, ...)"
        )

    return DesignParameters.model_validate(data)


def load_design_json(filepath: Union[str, Path]) -> DesignParameters:
    """
    Load a cycloidal drive design from a JSON file.

    Args:
        filepath: Path to JSON file

    Returns:
        DesignParameters with all fields

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the JSON is malformed or holds no design
        ValidationError: If fields are missing or invalid
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Design file not found: {filepath}")

    try:
        with open(filepath, 'r') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid design JSON in {filepath}: {e}") from e

    return parse_design(data)


def save_design_json(
    params: DesignParameters,
    filepath: Union[str, Path],
    by_alias: bool = False,
) -> None:
    """
    Save a design to JSON.

    Args:
        params: Design to save
        filepath: Path to save JSON file
        by_alias: Write camelCase names for the UI instead of snake_case
    """
    from .schema import SCHEMA_VERSION

    filepath = Path(filepath)

    data = design_to_dict(params, by_alias=by_alias)
    data['schema_version'] = SCHEMA_VERSION

    with open(filepath, 'w') as f:
        json.dump(data, f, indent=2)
