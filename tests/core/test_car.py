"""
Unit Tests for the Car Value

Immutability, equality/hashing, feature queries and the summary text.
"""

import dataclasses

import pytest

from car_configurator.builder import CarBuilder
from car_configurator.core.models.car import Car
from car_configurator.core.models.options import (
    CarModel,
    Color,
    EngineType,
    ExteriorFeature,
    InteriorFeature,
    SafetyFeature,
    TransmissionType,
)


def _sports_car(**changes):
    fields = dict(
        model=CarModel.SPORTS,
        engine=EngineType.V8,
        transmission=TransmissionType.MANUAL,
        color=Color.RED,
        interior_features={InteriorFeature.LEATHER},
        exterior_features={ExteriorFeature.SPORT_RIMS},
        safety_features={SafetyFeature.ABS, SafetyFeature.AIRBAGS},
    )
    fields.update(changes)
    return Car(**fields)


class TestCarConstruction:
    """Tests for construction and immutability."""

    def test_init_when_mutable_sets_given_then_stores_frozen_copies(self):
        interior = {InteriorFeature.LEATHER}
        car = _sports_car(interior_features=interior)

        interior.add(InteriorFeature.SOUND_SYSTEM)

        assert isinstance(car.interior_features, frozenset)
        assert car.interior_features == {InteriorFeature.LEATHER}

    def test_setattr_when_frozen_then_raises(self):
        car = _sports_car()
        with pytest.raises(dataclasses.FrozenInstanceError):
            car.color = Color.BLUE  # type: ignore[misc]

    def test_feature_set_when_mutated_then_raises_and_car_unchanged(self):
        car = _sports_car()
        with pytest.raises(AttributeError):
            car.safety_features.add(SafetyFeature.REAR_CAMERA)  # type: ignore[attr-defined]
        assert not car.has(SafetyFeature.REAR_CAMERA)

    def test_init_when_wrong_type_then_raises_type_error(self):
        with pytest.raises(TypeError, match="engine must be a EngineType"):
            _sports_car(engine="V8")

    def test_init_when_color_omitted_then_defaults_to_black(self):
        car = Car(CarModel.SEDAN, EngineType.V6, TransmissionType.AUTOMATIC)
        assert car.color is Color.BLACK
        assert car.interior_features == frozenset()


class TestCarEquality:
    """Tests for structural equality and hashing."""

    def test_eq_when_identical_fields_then_equal_with_same_hash(self):
        a = _sports_car()
        b = _sports_car(safety_features=[SafetyFeature.AIRBAGS, SafetyFeature.ABS])

        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    @pytest.mark.parametrize("changes", [
        {"color": Color.BLUE},
        {"interior_features": {InteriorFeature.SOUND_SYSTEM}},
        {"exterior_features": {ExteriorFeature.SUNROOF}},
        {"safety_features": {SafetyFeature.ABS}},
        {"engine": EngineType.V6},
        {"transmission": TransmissionType.AUTOMATIC},
        {"model": CarModel.SUV},
    ])
    def test_eq_when_one_field_differs_then_not_equal(self, changes):
        assert _sports_car() != _sports_car(**changes)


class TestCarQueries:
    """Tests for feature membership queries."""

    def test_has_when_feature_present_then_true(self, luxury_suv):
        assert luxury_suv.has(InteriorFeature.GPS)
        assert luxury_suv.has(ExteriorFeature.SUNROOF)
        assert luxury_suv.has(SafetyFeature.REAR_CAMERA)

    def test_has_when_feature_absent_then_false(self, minimal_sedan):
        assert not minimal_sedan.has(InteriorFeature.GPS)
        assert not minimal_sedan.has_exterior_feature(ExteriorFeature.STANDARD_RIMS)
        assert not minimal_sedan.has_safety_feature(SafetyFeature.ABS)

    def test_has_when_not_feature_then_raises(self, minimal_sedan):
        with pytest.raises(TypeError):
            minimal_sedan.has(Color.BLACK)

    def test_horsepower_when_v8_then_450(self, luxury_suv):
        assert luxury_suv.horsepower == 450


class TestCarSummary:
    """Tests for summary() and __str__."""

    # ─────────────────────────────────────────────────────────────────────────
    # summary()
    # ─────────────────────────────────────────────────────────────────────────

    def test_summary_when_luxury_suv_then_lists_every_section_and_feature(self, luxury_suv):
        summary = luxury_suv.summary()

        assert "Model: SUV" in summary
        assert "Color: Silver" in summary
        assert "Engine: V8 Engine (450 HP)" in summary
        assert "Transmission: Automatic Transmission" in summary
        for heading in ("Interior Features:", "Exterior Features:", "Safety Features:"):
            assert heading in summary
        for feature in (
            InteriorFeature.LEATHER, InteriorFeature.GPS, InteriorFeature.SOUND_SYSTEM,
            ExteriorFeature.SUNROOF, ExteriorFeature.SPORT_RIMS,
            SafetyFeature.ABS, SafetyFeature.AIRBAGS, SafetyFeature.REAR_CAMERA,
        ):
            assert f"  - {feature.label}" in summary

    def test_summary_when_no_features_then_sections_omitted(self, minimal_sedan):
        summary = minimal_sedan.summary()

        assert "Features" not in summary
        assert summary.splitlines()[-1] == "Transmission: Automatic Transmission"

    def test_summary_when_features_then_declaration_order(self):
        car = _sports_car(safety_features={SafetyFeature.REAR_CAMERA, SafetyFeature.ABS})

        lines = car.summary().splitlines()

        abs_line = lines.index("  - Anti-lock Braking System (ABS)")
        camera_line = lines.index("  - Rear View Camera")
        assert abs_line < camera_line

    def test_summary_when_called_twice_then_identical(self, luxury_suv):
        assert luxury_suv.summary() == luxury_suv.summary()

    # ─────────────────────────────────────────────────────────────────────────
    # __str__
    # ─────────────────────────────────────────────────────────────────────────

    def test_str_when_called_then_short_description(self, luxury_suv):
        assert str(luxury_suv) == "Silver SUV with V8 Engine and Automatic Transmission"


class TestCarSerialization:
    """Tests for to_dict() / from_dict()."""

    def test_to_dict_when_called_then_uses_member_names(self, luxury_suv):
        data = luxury_suv.to_dict()

        assert data["model"] == "SUV"
        assert data["color"] == "SILVER"
        assert data["interior_features"] == ["LEATHER", "GPS", "SOUND_SYSTEM"]

    def test_from_dict_when_output_of_to_dict_then_equal_car(self, luxury_suv):
        assert Car.from_dict(luxury_suv.to_dict()) == luxury_suv

    def test_from_dict_when_incompatible_then_builder_rejects(self):
        from car_configurator.builder import IncompatibleOptionsError

        data = CarBuilder().with_model(CarModel.SUV).with_engine(EngineType.V8) \
            .with_transmission(TransmissionType.AUTOMATIC).build().to_dict()
        data["model"] = "SEDAN"

        with pytest.raises(IncompatibleOptionsError):
            Car.from_dict(data)
