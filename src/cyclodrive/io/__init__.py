"""
Cyclodrive IO - parameter model, JSON schema and loaders.

Exporters (``cyclodrive.io.export``) and packaging
(``cyclodrive.io.package``) are imported from their modules directly, since
they depend on the geometry core.

Example:
    >>> from cyclodrive.io import load_design_json, save_design_json
    >>>
    >>> params = load_design_json("design.json")
    >>> save_design_json(params, "copy.json")
"""

from .loaders import (
    DesignParameters,
    parse_design,
    design_to_dict,
    load_design_json,
    save_design_json,
)

from .schema import (
    SCHEMA_VERSION,
    get_design_schema,
    detect_schema_version,
    validate_json_schema,
)

__all__ = [
    # Parameters
    "DesignParameters",

    # Loaders
    "parse_design",
    "design_to_dict",
    "load_design_json",
    "save_design_json",

    # Schema
    "SCHEMA_VERSION",
    "get_design_schema",
    "detect_schema_version",
    "validate_json_schema",
]
