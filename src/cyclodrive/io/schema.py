"""
JSON schema definition and validation for cycloidal drive parameters.

This defines the contract between the parameter editor (UI) and the
geometry engine. The schema is generated from the DesignParameters
Pydantic model; this module adds runtime validation helpers that report
problems as lists instead of raising.
"""

from typing import Dict, List

from pydantic import ValidationError

from ..constants import MIN_PIN_COUNT, MIN_RESOLUTION

from .loaders import DesignParameters

SCHEMA_VERSION = "1.0"


def get_design_schema(by_alias: bool = False) -> Dict:
    """
    Get the JSON schema for DesignParameters.

    Args:
        by_alias: Use the camelCase UI names instead of snake_case

    Returns:
        JSON schema dict (draft 2020-12)
    """
    schema = DesignParameters.model_json_schema(by_alias=by_alias)
    schema["$schema"] = "https://json-schema.org/draft/2020-12/schema"
    schema["title"] = "DesignParameters"
    schema["description"] = "Complete cycloidal drive design parameters"
    return schema


def detect_schema_version(data: Dict) -> str:
    """Detect schema version from JSON data (defaults to the oldest)."""
    explicit_version = data.get('schema_version')
    if explicit_version:
        return str(explicit_version)
    return "1.0"


def validate_json_schema(data: Dict) -> Dict:
    """
    Validate JSON data against the design schema without raising.

    Type and presence problems are errors. Values the geometry engine will
    accept but which are outside their documented range are warnings - the
    engine never clamps, so these are worth surfacing before generation.

    Args:
        data: Parsed JSON data

    Returns:
        Dict with 'valid', 'errors', 'warnings' and 'schema_version'
    """
    errors: List[str] = []
    warnings: List[str] = []
    schema_version = detect_schema_version(data)

    try:
        params = DesignParameters.model_validate(data)
    except ValidationError as e:
        for err in e.errors():
            location = ".".join(str(part) for part in err["loc"])
            errors.append(f"{location}: {err['msg']}")
        params = None

    if params is not None:
        if params.pin_count < MIN_PIN_COUNT:
            warnings.append(f"pin_count={params.pin_count} is below the minimum of {MIN_PIN_COUNT}")
        if params.resolution < MIN_RESOLUTION:
            warnings.append(f"resolution={params.resolution} is below the minimum of {MIN_RESOLUTION}")
        for name in ('pin_circle_radius', 'pin_radius'):
            if getattr(params, name) <= 0:
                warnings.append(f"{name} must be positive")
        for name in ('eccentricity', 'hole_radius', 'tolerance', 'hole_tolerance'):
            if getattr(params, name) < 0:
                warnings.append(f"{name} must not be negative")

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
        "schema_version": schema_version
    }
