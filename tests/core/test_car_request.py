"""
Tests for JSON car requests: schema validation, name parsing and files.
"""

import json

import pytest

from car_configurator.builder import IncompatibleOptionsError, MissingFieldsError
from car_configurator.core.models import CarModel, Color, ExteriorFeature
from car_configurator.core.schemas import ValidationError, validate_car_request
from car_configurator.core.utils import (
    car_from_request,
    load_car_request,
    save_car_request,
    serialize_car,
)


class TestValidateCarRequest:
    """Tests for validate_car_request()."""

    def test_validate_when_valid_request_then_returns_none(self, luxury_suv):
        assert validate_car_request(serialize_car(luxury_suv)) is None

    def test_validate_when_not_object_then_raises(self):
        with pytest.raises(ValidationError, match="<root>"):
            validate_car_request(["SUV"])

    def test_validate_when_unknown_key_then_raises(self):
        with pytest.raises(ValidationError, match="wheels"):
            validate_car_request({"model": "SUV", "wheels": 4})

    def test_validate_when_several_problems_then_reports_all(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_car_request({"model": 1, "engine": 2, "safety_features": "ABS"})

        err = exc_info.value
        assert len(err.errors) == 3
        assert err.errors[0].startswith("engine:")
        assert err.path == "engine"


class TestCarFromRequest:
    """Tests for car_from_request()."""

    def test_from_request_when_names_any_case_then_builds(self):
        car = car_from_request({
            "model": "sports",
            "engine": "v8",
            "transmission": "Manual",
            "color": "red",
            "exterior_features": ["sport-rims"],
        })

        assert car.model is CarModel.SPORTS
        assert car.color is Color.RED
        assert car.exterior_features == {ExteriorFeature.SPORT_RIMS}

    def test_from_request_when_unknown_feature_then_raises_with_path(self):
        with pytest.raises(ValidationError) as exc_info:
            car_from_request({
                "model": "SUV",
                "engine": "V8",
                "transmission": "AUTOMATIC",
                "interior_features": ["GPS", "HOT_TUB"],
            })

        assert exc_info.value.path == "interior_features.1"
        assert "HOT_TUB" in str(exc_info.value)

    def test_from_request_when_fields_missing_then_builder_reports_them(self):
        with pytest.raises(MissingFieldsError) as exc_info:
            car_from_request({"color": "BLUE"})

        assert exc_info.value.missing_fields == ("model", "engine", "transmission")

    def test_from_request_when_incompatible_then_raises(self):
        with pytest.raises(IncompatibleOptionsError):
            car_from_request({"model": "COMPACT", "engine": "V8", "transmission": "AUTOMATIC"})


class TestRequestFiles:
    """Tests for load_car_request() / save_car_request()."""

    def test_save_then_load_when_valid_car_then_equal(self, tmp_path, luxury_suv):
        path = tmp_path / "nested" / "suv.json"

        save_car_request(luxury_suv, path)

        assert json.loads(path.read_text(encoding="utf-8"))["model"] == "SUV"
        assert load_car_request(path) == luxury_suv

    def test_load_when_missing_file_then_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_car_request(tmp_path / "nope.json")

    def test_load_when_invalid_json_then_raises_validation_error(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValidationError, match="Invalid JSON"):
            load_car_request(path)

    def test_load_when_not_utf8_then_raises_validation_error(self, tmp_path):
        path = tmp_path / "latin.json"
        path.write_bytes(b'{"model": "\xff\xfe"}')

        with pytest.raises(ValidationError, match="not valid UTF-8"):
            load_car_request(path)

    def test_load_when_path_is_directory_then_raises_validation_error(self, tmp_path):
        with pytest.raises(ValidationError, match="Cannot read car request"):
            load_car_request(tmp_path)
