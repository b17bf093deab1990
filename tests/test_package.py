"""
Tests for output package generation.
"""

import json

from cyclodrive.io.loaders import load_design_json
from cyclodrive.io.package import PackageFiles, generate_package, save_package_to_dir


class TestGeneratePackage:

    def test_all_files(self, default_params):
        files = generate_package(default_params)
        assert files.disc_dxf.endswith("0\nEOF\n")
        assert "40\n10.1000\n" in files.disc_dxf
        assert 'fill-rule="evenodd"' in files.disc_svg
        assert json.loads(files.design_json)["physics"]["samples"] == 721
        assert files.design_md.startswith("# Cycloidal Drive Design Specification")

    def test_without_svg(self, default_params):
        files = generate_package(default_params, include_svg=False)
        assert files.disc_svg is None
        assert files.disc_dxf is not None

    def test_log_callback(self, default_params):
        messages = []
        generate_package(default_params, log=messages.append)
        assert "Generating disc profile..." in messages
        assert "  721 profile points" in messages


class TestSavePackage:

    def test_writes_files(self, default_params, tmp_path):
        written = save_package_to_dir(generate_package(default_params), tmp_path / "pkg")
        assert sorted(p.name for p in written) == ["design.json", "design.md", "disc.dxf", "disc.svg"]
        assert all(p.exists() for p in written)

    def test_skips_missing(self, tmp_path):
        written = save_package_to_dir(PackageFiles(disc_dxf="0\nEOF\n"), tmp_path)
        assert [p.name for p in written] == ["disc.dxf"]

    def test_design_json_reloads(self, heavy_duty_params, tmp_path):
        save_package_to_dir(generate_package(heavy_duty_params), tmp_path)
        assert load_design_json(tmp_path / "design.json") == heavy_duty_params
