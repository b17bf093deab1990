"""
Tests for disc path assembly.
"""

import pytest

from cyclodrive.core.path import (
    PathCommand,
    DiscPath,
    _fmt,
    build_disc_path,
    output_hole_radius,
)
from cyclodrive.core.profile import generate_profile
from cyclodrive.enums import FillRule


class TestOutputHoleRadius:

    def test_clears_pin_orbit(self, default_params):
        # pin radius + eccentricity + hole tolerance
        assert output_hole_radius(default_params) == pytest.approx(6.6)


class TestBuildDiscPath:

    def test_outline_then_holes(self, default_params):
        points = generate_profile(default_params)
        path = build_disc_path(points, default_params)
        ops = [c.op for c in path.commands]

        n = len(points)
        assert ops[0] == "M"
        assert ops[1:n] == ["L"] * (n - 1)
        assert ops[n] == "Z"
        assert ops[n + 1:] == ["M", "A", "A"] * default_params.output_pin_count

    def test_even_odd_fill(self, default_params):
        path = build_disc_path(generate_profile(default_params), default_params)
        assert path.fill_rule == FillRule.EVEN_ODD

    def test_hole_centers(self, default_params):
        path = build_disc_path([], default_params)
        assert len(path.hole_centers) == 6
        assert path.hole_centers[0] == pytest.approx((25.0, 0.0))
        assert path.hole_radius_mm == pytest.approx(6.6)

    def test_empty_profile_emits_holes_only(self, default_params):
        path = build_disc_path([], default_params)
        assert "Z" not in [c.op for c in path.commands]
        assert len(path.commands) == 3 * 6

    def test_hole_svg(self, default_params):
        d = build_disc_path([], default_params).to_svg()
        assert d.startswith("M 31.6 0 A 6.6 6.6 0 1 0 18.4 0 A 6.6 6.6 0 1 0 31.6 0")


class TestSvgFormatting:

    def test_commands(self):
        path = DiscPath(commands=[
            PathCommand("M", (1.0, 2.5)),
            PathCommand("L", (-3.0, 0.125)),
            PathCommand("Z"),
        ])
        assert path.to_svg() == "M 1 2.5 L -3 0.125 Z"

    def test_fmt_keeps_integer_digits(self):
        assert _fmt(100.0, 0) == "100"
        assert _fmt(100.0, 4) == "100"

    def test_fmt_negative_zero(self):
        assert _fmt(-0.00001, 4) == "0"
