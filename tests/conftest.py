"""
Pytest configuration and shared fixtures for cyclodrive tests.
"""

import json
import pytest

from cyclodrive.calculator.presets import DEFAULT_PARAMS, get_preset
from cyclodrive.io.loaders import DesignParameters


# ─── Raw design dicts ────────────────────────────────────────────────────


def _design_dict(**overrides):
    """Standard 12-pin design in the camelCase form the parameter editor exports."""
    data = {
        "pinCount": 12,
        "pinCircleRadius": 50.0,
        "pinRadius": 5.0,
        "eccentricity": 1.5,
        "holeRadius": 10.0,
        "resolution": 720,
        "tolerance": 0.15,
        "holeTolerance": 0.1,
        "outputPinCount": 6,
        "outputPinRadius": 5.0,
        "outputPinCircleRadius": 25.0,
        "driveConfig": "housingFixed",
    }
    data.update(overrides)
    return data


@pytest.fixture
def design_dict():
    return _design_dict()


@pytest.fixture
def design_file(tmp_path):
    """Standard design written to a JSON file."""
    path = tmp_path / "design.json"
    path.write_text(json.dumps(_design_dict()))
    return path


@pytest.fixture
def high_eccentricity_file(tmp_path):
    """Design whose eccentricity triggers the eccentricity and wall rules."""
    path = tmp_path / "high_e.json"
    path.write_text(json.dumps(_design_dict(eccentricity=3.0)))
    return path


# ─── Typed params ────────────────────────────────────────────────────────


@pytest.fixture
def default_params() -> DesignParameters:
    """N=12, R=50, r=5, E=1.5, hole 10, tolerance 0.15, hole tolerance 0.1."""
    return DEFAULT_PARAMS


@pytest.fixture
def heavy_duty_params() -> DesignParameters:
    """N=8, R=100, r=15, E=4, hole 25."""
    return get_preset("Heavy Duty (7:1)")


@pytest.fixture
def high_eccentricity_params() -> DesignParameters:
    return DEFAULT_PARAMS.model_copy(update={"eccentricity": 3.0})


@pytest.fixture
def smooth_params() -> DesignParameters:
    """Small eccentricity: positive curvature everywhere, no undercut."""
    return DEFAULT_PARAMS.model_copy(update={"eccentricity": 0.2})
