"""
Tests for DXF and SVG export.
"""

import pytest

from cyclodrive.core.path import build_disc_path
from cyclodrive.core.profile import generate_profile
from cyclodrive.io.export import save_dxf, to_dxf, to_svg_document


@pytest.fixture
def points(default_params):
    return generate_profile(default_params)


class TestDxf:

    def test_document_frame(self, points, default_params):
        dxf = to_dxf(points, default_params)
        assert dxf.startswith("0\nSECTION\n2\nENTITIES\n")
        assert dxf.endswith("0\nENDSEC\n0\nEOF\n")

    def test_closed_polyline(self, points, default_params):
        dxf = to_dxf(points, default_params)
        assert "0\nPOLYLINE\n8\nCycloidProfile\n66\n1\n70\n1\n" in dxf
        assert dxf.count("\nVERTEX\n") == len(points)
        assert "0\nSEQEND\n" in dxf

    def test_first_vertex(self, points, default_params):
        dxf = to_dxf(points, default_params)
        first = points[0]
        expected = (
            "0\nVERTEX\n8\nCycloidProfile\n"
            f"10\n{first.x:.4f}\n20\n{first.y:.4f}\n30\n0.0000\n"
        )
        assert expected in dxf

    def test_center_hole_includes_hole_tolerance(self, points, default_params):
        dxf = to_dxf(points, default_params)
        assert "0\nCIRCLE\n8\nCenterHole\n10\n0.0000\n20\n0.0000\n30\n0.0000\n" in dxf
        assert "40\n10.1000\n" in dxf

    def test_empty_profile(self, default_params):
        dxf = to_dxf([], default_params)
        assert "VERTEX" not in dxf
        assert "40\n10.1000\n" in dxf

    def test_save_dxf(self, points, default_params, tmp_path):
        path = save_dxf(points, default_params, tmp_path / "disc.dxf")
        assert path.exists()
        assert path.read_text() == to_dxf(points, default_params)


class TestSvgDocument:

    def test_document(self, points, default_params):
        svg = to_svg_document(build_disc_path(points, default_params), 60.0)
        assert svg.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert 'viewBox="-60 -60 120 120"' in svg
        assert 'fill-rule="evenodd"' in svg
        assert 'transform="scale(1,-1)"' in svg
        assert svg.rstrip().endswith("</svg>")
