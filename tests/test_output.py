"""
Tests for JSON, Markdown and summary output.
"""

import json
import math
import pytest

from cyclodrive.calculator.core import calculate_drive_specs
from cyclodrive.calculator.output import to_json, to_markdown, to_summary
from cyclodrive.calculator.validation import QualityReport, check_design_quality
from cyclodrive.core.physics import PhysicsMetrics, calculate_physics_metrics


@pytest.fixture
def full_analysis(default_params):
    metrics = calculate_physics_metrics(default_params)
    return {
        "report": check_design_quality(default_params, metrics),
        "metrics": metrics,
        "specs": calculate_drive_specs(default_params),
    }


@pytest.fixture
def failing_analysis(high_eccentricity_params):
    return {
        "report": check_design_quality(high_eccentricity_params),
        "specs": calculate_drive_specs(high_eccentricity_params),
    }


class TestToJson:

    def test_params_only(self, default_params):
        data = json.loads(to_json(default_params))
        assert data["schema_version"] == "1.0"
        assert data["params"]["pin_count"] == 12
        assert data["params"]["drive_config"] == "housingFixed"
        assert "quality" not in data
        assert "physics" not in data

    def test_full(self, default_params, full_analysis):
        data = json.loads(to_json(default_params, **full_analysis))
        assert data["specs"]["reduction_ratio"] == -11
        assert data["specs"]["max_diameter_mm"] == pytest.approx(110.0)
        assert data["physics"]["undercut"] is True
        assert data["physics"]["max_tool_diameter_mm"] is None

    def test_empty_sections_still_rendered(self, default_params):
        metrics = PhysicsMetrics(min_curvature_radius=math.inf, max_pressure_angle=0.0)
        data = json.loads(to_json(default_params, report=QualityReport(valid=True), metrics=metrics))
        assert data["physics"]["samples"] == 0
        assert data["quality"] == {"valid": True, "messages": [], "fixes": []}
        assert data["physics"]["samples"] == 721
        assert data["quality"]["valid"] is True
        assert data["quality"]["messages"][0]["code"] == "PROFILE_UNDERCUT"
        assert data["quality"]["messages"][0]["severity"] == "info"

    def test_fixes_carry_complete_params(self, high_eccentricity_params, failing_analysis):
        data = json.loads(to_json(high_eccentricity_params, **failing_analysis))
        fix = data["quality"]["fixes"][0]
        assert fix["label"] == "Reduce Eccentricity"
        assert fix["params"]["eccentricity"] == pytest.approx(2.08)
        assert fix["params"]["pin_count"] == 12

    def test_tool_diameter(self, smooth_params):
        metrics = calculate_physics_metrics(smooth_params)
        data = json.loads(to_json(smooth_params, metrics=metrics))
        assert data["physics"]["undercut"] is False
        assert data["physics"]["max_tool_diameter_mm"] == pytest.approx(2 * metrics.min_curvature_radius)

    def test_infinite_values_become_null(self, default_params):
        metrics = PhysicsMetrics(min_curvature_radius=math.inf, max_pressure_angle=0.0)
        data = json.loads(to_json(default_params, metrics=metrics))
        assert data["physics"]["min_curvature_radius_mm"] is None
        assert data["physics"]["max_tool_diameter_mm"] is None


class TestToMarkdown:

    def test_sections(self, default_params, full_analysis):
        md = to_markdown(default_params, **full_analysis)
        assert md.startswith("# Cycloidal Drive Design Specification")
        for heading in ("## Overview", "## Ring Pins and Disc", "## Output Stage",
                        "## Manufacturing", "## Physics", "## Quality Check"):
            assert heading in md
        assert "| Reduction Ratio | 11:1 |" in md
        assert "| Max Tool Diameter | Undercut |" in md
        assert md.rstrip().endswith("*Generated by Cyclodrive*")

    def test_fixes_listed(self, high_eccentricity_params, failing_analysis):
        md = to_markdown(high_eccentricity_params, **failing_analysis)
        assert "### Suggested Fixes" in md
        assert "1. **Reduce Eccentricity** - Lower E to 2.08mm" in md

    def test_clean_report(self, heavy_duty_params):
        md = to_markdown(heavy_duty_params, report=check_design_quality(heavy_duty_params))
        assert "No issues found" in md

    def test_empty_report_and_metrics_rendered(self, default_params):
        metrics = PhysicsMetrics(min_curvature_radius=math.inf, max_pressure_angle=0.0)
        md = to_markdown(default_params, report=QualityReport(valid=True), metrics=metrics)
        assert "## Physics" in md
        assert "| Max Pressure Angle | 0.0° |" in md
        assert "## Quality Check" in md
        assert "No issues found" in md


class TestToSummary:

    def test_default(self, default_params, full_analysis):
        text = to_summary(default_params, **full_analysis)
        assert text.startswith("═══ Cycloidal Drive Design ═══")
        assert "Ratio: 11:1 (reversed)" in text
        assert "Max tool diameter:  Undercut" in text
        assert "Quality: OK" in text

    def test_warnings_and_fixes(self, high_eccentricity_params, failing_analysis):
        text = to_summary(high_eccentricity_params, **failing_analysis)
        assert "Quality: 2 warning(s)" in text
        assert "[0] Reduce Eccentricity: Lower E to 2.08mm" in text
        assert "[2] Shrink Center Hole: Set Hole R to 7mm" in text

    def test_empty_report_and_metrics_rendered(self, default_params):
        metrics = PhysicsMetrics(min_curvature_radius=math.inf, max_pressure_angle=0.0)
        text = to_summary(default_params, report=QualityReport(valid=True), metrics=metrics)
        assert "Max pressure angle: 0.0°" in text
        assert "Max tool diameter:  N/A" in text
        assert "Quality: OK" in text
