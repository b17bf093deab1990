"""
Cycloidal Drive Calculator - Design Quality Rules

Cheap closed-form heuristics evaluated on every parameter edit. Each rule
that fires adds a warning and, where a correction exists, one or more
complete alternative parameter sets the user can switch to.

Rules are applied independently - one failing rule never hides another.
These are advisory: nothing here rejects or clamps a design.
"""

from dataclasses import dataclass, field
from enum import Enum
from math import pi
from typing import List, Optional, TYPE_CHECKING

from ..constants import (
    ECCENTRICITY_SAFE_FACTOR,
    ECCENTRICITY_FIX_FACTOR,
    PIN_SPACING_LIMIT,
    PIN_SPACING_FIX,
    MIN_WALL_MARGIN_MM,
    HOLE_FIX_MARGIN_MM,
    MIN_HOLE_RADIUS_MM,
    PRESSURE_ANGLE_WARNING_DEG,
)
from ..io.loaders import DesignParameters

if TYPE_CHECKING:
    from ..core.physics import PhysicsMetrics


class Severity(Enum):
    """Validation message severity"""
    INFO = "info"
    WARNING = "warning"


@dataclass
class ValidationMessage:
    """A single quality finding"""
    severity: Severity
    code: str
    message: str
    suggestion: Optional[str] = None


@dataclass
class GeometricFix:
    """A corrective alternative for a design.

    ``params`` is a complete, independent DesignParameters - never a
    partial update.
    """
    label: str
    description: str
    params: DesignParameters


@dataclass
class QualityReport:
    """Complete quality check result"""
    valid: bool  # True if no warnings
    messages: List[ValidationMessage] = field(default_factory=list)
    fixes: List[GeometricFix] = field(default_factory=list)

    @property
    def warnings(self) -> List[str]:
        """Warning texts in rule order."""
        return [m.message for m in self.messages if m.severity == Severity.WARNING]

    @property
    def infos(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.INFO]

    @property
    def codes(self) -> List[str]:
        return [m.code for m in self.messages]


def max_safe_eccentricity(params: DesignParameters) -> float:
    """Largest eccentricity considered safe: R / (1.5·N)."""
    return params.pin_circle_radius / (ECCENTRICITY_SAFE_FACTOR * params.pin_count)


def pin_spacing(params: DesignParameters) -> float:
    """Arc length between neighbouring ring pins: 2πR / N."""
    return (2 * pi * params.pin_circle_radius) / params.pin_count


def approx_inner_radius(params: DesignParameters) -> float:
    """
    Conservative estimate of the disc root radius: R - N·E - r.

    Cruder than the physics analysis; evaluated on every parameter edit.
    """
    return params.pin_circle_radius - (params.pin_count * params.eccentricity) - params.pin_radius


def check_design_quality(
    params: DesignParameters,
    metrics: Optional["PhysicsMetrics"] = None,
) -> QualityReport:
    """
    Check a design against the quality rules.

    Args:
        params: Complete design parameters
        metrics: Optional physics result. When given, pressure angle and
            undercut findings are added as INFO messages; they never affect
            ``valid``.

    Returns:
        QualityReport with warnings and de-duplicated fixes
    """
    messages: List[ValidationMessage] = []
    fixes: List[GeometricFix] = []

    for rule in (_check_eccentricity, _check_pin_crowding, _check_wall_thickness):
        rule_messages, rule_fixes = rule(params)
        messages.extend(rule_messages)
        fixes.extend(rule_fixes)

    if metrics is not None:
        messages.extend(_check_physics(metrics))

    has_warnings = any(m.severity == Severity.WARNING for m in messages)

    return QualityReport(
        valid=not has_warnings,
        messages=messages,
        fixes=_unique_fixes(fixes),
    )


def apply_fix(report: QualityReport, index: int = 0) -> DesignParameters:
    """
    Return the parameter set of one proposed fix.

    Raises:
        IndexError: If the report has no fix at that index
    """
    if not 0 <= index < len(report.fixes):
        raise IndexError(f"No fix #{index} (report has {len(report.fixes)} fixes)")
    return report.fixes[index].params


def _check_eccentricity(params: DesignParameters):
    """Eccentricity large enough to make the lobes loop over themselves"""
    messages, fixes = [], []

    E = params.eccentricity
    R = params.pin_circle_radius
    N = params.pin_count

    if E > max_safe_eccentricity(params):
        safe_e = round(R / (ECCENTRICITY_FIX_FACTOR * N), 2)
        safe_r = round(E * ECCENTRICITY_FIX_FACTOR * N, 1)

        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="ECCENTRICITY_TOO_HIGH",
            message=f"Eccentricity ({E:g}mm) is too high for this radius.",
            suggestion=f"Keep eccentricity below {max_safe_eccentricity(params):.2f}mm"
        ))
        fixes.append(GeometricFix(
            label="Reduce Eccentricity",
            description=f"Lower E to {safe_e:g}mm",
            params=params.model_copy(update={"eccentricity": safe_e}),
        ))
        fixes.append(GeometricFix(
            label="Increase Radius",
            description=f"Enlarge R to {safe_r:g}mm",
            params=params.model_copy(update={"pin_circle_radius": safe_r}),
        ))

    return messages, fixes


def _check_pin_crowding(params: DesignParameters):
    """Ring pins too large to fit side by side on the pin circle"""
    messages, fixes = [], []

    spacing = pin_spacing(params)

    if params.pin_radius * 2 > spacing * PIN_SPACING_LIMIT:
        safe_pin_r = round((spacing * PIN_SPACING_FIX) / 2, 2)

        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="PINS_TOO_LARGE",
            message="Pins are too large for spacing.",
            suggestion=f"Pin spacing is {spacing:.2f}mm"
        ))
        fixes.append(GeometricFix(
            label="Shrink Pins",
            description=f"Reduce pin Ø to {safe_pin_r * 2:g}mm",
            params=params.model_copy(update={"pin_radius": safe_pin_r}),
        ))

    return messages, fixes


def _check_wall_thickness(params: DesignParameters):
    """Material left between the disc root and the center bore"""
    messages, fixes = [], []

    inner = approx_inner_radius(params)

    if inner < params.hole_radius + MIN_WALL_MARGIN_MM:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="WALL_TOO_THIN",
            message="Wall thickness is critically low.",
            suggestion=f"Approximate disc root radius is {inner:.2f}mm"
        ))

        # No fix when the root itself is inside the margin
        if inner - HOLE_FIX_MARGIN_MM > 0:
            safe_hole = round(max(MIN_HOLE_RADIUS_MM, inner - HOLE_FIX_MARGIN_MM), 1)
            fixes.append(GeometricFix(
                label="Shrink Center Hole",
                description=f"Set Hole R to {safe_hole:g}mm",
                params=params.model_copy(update={"hole_radius": safe_hole}),
            ))

    return messages, fixes


def _check_physics(metrics: "PhysicsMetrics") -> List[ValidationMessage]:
    """Findings from the physics analysis (informational only)"""
    messages = []

    if metrics.max_pressure_angle > PRESSURE_ANGLE_WARNING_DEG:
        messages.append(ValidationMessage(
            severity=Severity.INFO,
            code="PRESSURE_ANGLE_HIGH",
            message=f"Max pressure angle {metrics.max_pressure_angle:.1f}° exceeds "
                    f"{PRESSURE_ANGLE_WARNING_DEG:g}°. Expect poor efficiency and self-locking risk.",
            suggestion="Reduce eccentricity or increase pin circle radius"
        ))

    if metrics.is_undercut:
        messages.append(ValidationMessage(
            severity=Severity.INFO,
            code="PROFILE_UNDERCUT",
            message=f"Profile is undercut (net curvature radius {metrics.min_curvature_radius:.3f}mm)",
            suggestion="No cutter radius can follow the profile; reduce pin radius or eccentricity"
        ))

    return messages


def _unique_fixes(fixes: List[GeometricFix]) -> List[GeometricFix]:
    """Drop fixes that repeat an earlier (label, params) pair."""
    unique: List[GeometricFix] = []
    for fix in fixes:
        if not any(f.label == fix.label and f.params == fix.params for f in unique):
            unique.append(fix)
    return unique
