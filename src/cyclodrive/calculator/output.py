"""Output formatters for cycloidal drive designs.

Converts DesignParameters plus the optional analysis results (quality
report, physics metrics, drive specs) to JSON, Markdown and a plain text
summary.

Uses Pydantic's model_dump(mode='json') for serialization, so enums come
out as their string values.
"""

import json
from math import isfinite
from typing import Optional, TYPE_CHECKING

from ..io import DesignParameters
from ..io.schema import SCHEMA_VERSION

if TYPE_CHECKING:
    from .core import DriveSpecs
    from .validation import QualityReport
    from ..core.physics import PhysicsMetrics


def _tool_diameter_label(metrics: "PhysicsMetrics") -> str:
    """Largest cutter as text; undercut is a state, not a diameter."""
    if metrics.is_undercut:
        return "Undercut"
    if not isfinite(metrics.min_curvature_radius):
        return "N/A"
    return f"{metrics.max_tool_diameter_mm:.2f} mm"


def _json_number(value: float) -> Optional[float]:
    # JSON has no infinity
    return value if isfinite(value) else None


def to_json(
    params: DesignParameters,
    report: Optional["QualityReport"] = None,
    metrics: Optional["PhysicsMetrics"] = None,
    specs: Optional["DriveSpecs"] = None,
    indent: int = 2,
) -> str:
    """Convert a design and its analysis to a JSON string.

    Args:
        params: Design parameters
        report: Optional quality report to include
        metrics: Optional physics metrics (extrema only, no point list)
        specs: Optional drive specs
        indent: JSON indentation level (default: 2)

    Returns:
        JSON string with schema version, parameters and optional sections
    """
    data = {
        "schema_version": SCHEMA_VERSION,
        "params": params.model_dump(mode='json'),
    }

    if specs is not None:
        data["specs"] = {
            "reduction_ratio": specs.reduction_ratio,
            "disc_lobes": specs.disc_lobes,
            "max_diameter_mm": specs.max_diameter_mm,
            "drive_config": specs.drive_config.value,
        }

    if metrics is not None:
        tool = metrics.max_tool_diameter_mm
        data["physics"] = {
            "min_curvature_radius_mm": _json_number(metrics.min_curvature_radius),
            "max_pressure_angle_deg": metrics.max_pressure_angle,
            "undercut": metrics.is_undercut,
            "max_tool_diameter_mm": None if tool is None else _json_number(tool),
            "samples": len(metrics.points),
        }

    if report is not None:
        data["quality"] = {
            "valid": report.valid,
            "messages": [
                {
                    "severity": msg.severity.value,
                    "code": msg.code,
                    "message": msg.message,
                    "suggestion": msg.suggestion,
                }
                for msg in report.messages
            ],
            "fixes": [
                {
                    "label": fix.label,
                    "description": fix.description,
                    "params": fix.params.model_dump(mode='json'),
                }
                for fix in report.fixes
            ],
        }

    return json.dumps(data, indent=indent)


def to_markdown(
    params: DesignParameters,
    report: Optional["QualityReport"] = None,
    metrics: Optional["PhysicsMetrics"] = None,
    specs: Optional["DriveSpecs"] = None,
) -> str:
    """Convert a design to a markdown specification.

    Returns:
        Markdown specification string
    """
    p = params.model_dump(mode='json')

    md = "# Cycloidal Drive Design Specification\n\n"

    md += "## Overview\n\n"
    md += "| Parameter | Value |\n"
    md += "|-----------|-------|\n"
    if specs is not None:
        md += f"| Reduction Ratio | {specs.ratio_label} |\n"
        md += f"| Disc Lobes | {specs.disc_lobes} |\n"
        md += f"| Max Diameter | ~{specs.max_diameter_mm:.1f} mm |\n"
    md += f"| Drive Configuration | {p['drive_config']} |\n\n"

    md += "## Ring Pins and Disc\n\n"
    md += "| Dimension | Value |\n"
    md += "|-----------|-------|\n"
    md += f"| Pin Count (N) | {p['pin_count']} |\n"
    md += f"| Pin Circle Radius (R) | {p['pin_circle_radius']:.3f} mm |\n"
    md += f"| Pin Radius (r) | {p['pin_radius']:.3f} mm |\n"
    md += f"| Eccentricity (E) | {p['eccentricity']:.3f} mm |\n"
    md += f"| Center Hole Radius | {p['hole_radius']:.3f} mm |\n"
    md += f"| Resolution | {p['resolution']} samples |\n\n"

    md += "## Output Stage\n\n"
    md += "| Dimension | Value |\n"
    md += "|-----------|-------|\n"
    md += f"| Output Pins | {p['output_pin_count']} |\n"
    md += f"| Output Pin Radius | {p['output_pin_radius']:.3f} mm |\n"
    md += f"| Output Pin Circle Radius | {p['output_pin_circle_radius']:.3f} mm |\n\n"

    md += "## Manufacturing\n\n"
    md += "| Clearance | Value |\n"
    md += "|-----------|-------|\n"
    md += f"| Profile Tolerance | {p['tolerance']:.3f} mm |\n"
    md += f"| Hole Tolerance | {p['hole_tolerance']:.3f} mm |\n\n"

    if metrics is not None:
        md += "## Physics\n\n"
        md += "| Metric | Value |\n"
        md += "|--------|-------|\n"
        md += f"| Max Pressure Angle | {metrics.max_pressure_angle:.1f}° |\n"
        md += f"| Max Tool Diameter | {_tool_diameter_label(metrics)} |\n\n"

    if report is not None:
        md += "## Quality Check\n\n"
        if report.valid and not report.messages:
            md += "✓ No issues found\n\n"
        for msg in report.messages:
            marker = "⚠️" if msg.severity.value == "warning" else "ℹ️"
            md += f"- {marker} **{msg.code}**: {msg.message}\n"
            if msg.suggestion:
                md += f"  - {msg.suggestion}\n"
        if report.fixes:
            md += "\n### Suggested Fixes\n\n"
            for i, fix in enumerate(report.fixes, 1):
                md += f"{i}. **{fix.label}** - {fix.description}\n"
        md += "\n"

    md += "---\n"
    md += "*Generated by Cyclodrive*\n"

    return md


def to_summary(
    params: DesignParameters,
    report: Optional["QualityReport"] = None,
    metrics: Optional["PhysicsMetrics"] = None,
    specs: Optional["DriveSpecs"] = None,
) -> str:
    """Convert a design to a formatted text summary.

    Returns:
        Multi-line formatted summary string
    """
    lines = ["═══ Cycloidal Drive Design ═══"]

    if specs is not None:
        direction = "reversed" if specs.output_reversed else "same direction"
        lines.append(f"Ratio: {specs.ratio_label} ({direction})")

    lines.extend([
        f"Configuration: {params.drive_config.value}",
        "",
        "Disc:",
        f"  Pins (N):          {params.pin_count}",
        f"  Pin circle (R):    {params.pin_circle_radius:.2f} mm",
        f"  Pin radius (r):    {params.pin_radius:.2f} mm",
        f"  Eccentricity (E):  {params.eccentricity:.2f} mm",
        f"  Center hole:       {params.hole_radius:.2f} mm",
        "",
        "Output:",
        f"  Pins:              {params.output_pin_count} × r{params.output_pin_radius:.2f} mm"
        f" on R{params.output_pin_circle_radius:.2f} mm",
    ])

    if metrics is not None:
        lines.extend([
            "",
            f"Max pressure angle: {metrics.max_pressure_angle:.1f}°",
            f"Max tool diameter:  {_tool_diameter_label(metrics)}",
        ])

    if report is not None:
        lines.append("")
        if report.valid:
            lines.append("Quality: OK")
        else:
            lines.append(f"Quality: {len(report.warnings)} warning(s)")
            for warning in report.warnings:
                lines.append(f"  ⚠ {warning}")
            for i, fix in enumerate(report.fixes):
                lines.append(f"  [{i}] {fix.label}: {fix.description}")

    return "\n".join(lines)
