"""
Tests for loading and saving design JSON.
"""

import json
import pytest
from pydantic import ValidationError

from cyclodrive.enums import DriveConfig
from cyclodrive.io import (
    DesignParameters,
    design_to_dict,
    load_design_json,
    parse_design,
    save_design_json,
)


class TestParseDesign:

    def test_camel_case_input(self, design_dict, default_params):
        assert parse_design(design_dict) == default_params

    def test_snake_case_input(self, default_params):
        data = design_to_dict(default_params)
        assert parse_design(data) == default_params

    @pytest.mark.parametrize("wrapper", ["design", "params"])
    def test_wrapped_input(self, design_dict, default_params, wrapper):
        assert parse_design({wrapper: design_dict, "schema_version": "1.0"}) == default_params

    def test_extra_fields_ignored(self, design_dict):
        design_dict["colour"] = "blue"
        params = parse_design(design_dict)
        assert not hasattr(params, "colour")

    @pytest.mark.parametrize("value", ["housingFixed", "housing_fixed", "HOUSING-FIXED"])
    def test_drive_config_spellings(self, design_dict, value):
        design_dict["driveConfig"] = value
        assert parse_design(design_dict).drive_config == DriveConfig.HOUSING_FIXED

    def test_output_fixed(self, design_dict):
        design_dict["driveConfig"] = "outputFixed"
        assert parse_design(design_dict).drive_config == DriveConfig.OUTPUT_FIXED

    def test_not_an_object(self):
        with pytest.raises(ValueError, match="expected an object"):
            parse_design([1, 2, 3])

    def test_no_design_fields(self):
        with pytest.raises(ValueError, match="must contain"):
            parse_design({"name": "not a design"})

    def test_missing_field(self, design_dict):
        del design_dict["eccentricity"]
        with pytest.raises(ValidationError):
            parse_design(design_dict)

    def test_wrong_type(self, design_dict):
        design_dict["pinCount"] = "twelve"
        with pytest.raises(ValidationError):
            parse_design(design_dict)

    def test_unknown_drive_config(self, design_dict):
        design_dict["driveConfig"] = "sideways"
        with pytest.raises(ValidationError):
            parse_design(design_dict)

    def test_out_of_range_values_accepted(self, design_dict):
        """Range problems are the quality rules' business, not the loader's."""
        design_dict["pinCount"] = 2
        design_dict["eccentricity"] = -1.0
        params = parse_design(design_dict)
        assert params.pin_count == 2


class TestDesignParameters:

    def test_frozen(self, default_params):
        with pytest.raises(ValidationError):
            default_params.pin_count = 20

    def test_model_copy_is_independent(self, default_params):
        variant = default_params.model_copy(update={"pin_count": 20})
        assert variant.pin_count == 20
        assert default_params.pin_count == 12

    def test_dict_by_alias(self, default_params):
        data = design_to_dict(default_params, by_alias=True)
        assert data["pinCircleRadius"] == 50.0
        assert data["driveConfig"] == "housingFixed"


class TestLoadSave:

    def test_load(self, design_file, default_params):
        assert load_design_json(design_file) == default_params

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_design_json(tmp_path / "missing.json")

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("not valid json {")
        with pytest.raises(ValueError, match="Invalid design JSON"):
            load_design_json(path)

    def test_save_writes_schema_version(self, default_params, tmp_path):
        path = tmp_path / "out.json"
        save_design_json(default_params, path)
        data = json.loads(path.read_text())
        assert data["schema_version"] == "1.0"
        assert data["pin_count"] == 12
        assert data["drive_config"] == "housingFixed"

    def test_save_camel_case_reloads(self, heavy_duty_params, tmp_path):
        path = tmp_path / "out.json"
        save_design_json(heavy_duty_params, path, by_alias=True)
        assert "pinCount" in json.loads(path.read_text())
        assert load_design_json(path) == heavy_duty_params
