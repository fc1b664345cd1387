"""
Unit Tests for Option Enums

Labels, horsepower, declaration ordering and name parsing.
"""

import pytest

from car_configurator.core.models.options import (
    CarModel,
    Color,
    EngineType,
    ExteriorFeature,
    InteriorFeature,
    SafetyFeature,
    TransmissionType,
    parse_variant,
    sorted_variants,
)


class TestLabels:
    """Tests for display labels."""

    def test_str_when_model_then_returns_label(self):
        assert str(CarModel.SPORTS) == "Sports Car"
        assert CarModel.SUV.label == "SUV"

    def test_str_when_engine_then_includes_horsepower(self):
        assert str(EngineType.V8) == "V8 Engine (450 HP)"
        assert EngineType.V6.label == "V6 Engine"

    def test_horsepower_when_engine_then_matches_rating(self):
        assert EngineType.V6.horsepower == 300
        assert EngineType.V8.horsepower == 450

    def test_labels_when_features_then_match_catalog_names(self):
        assert InteriorFeature.SOUND_SYSTEM.label == "Premium Sound System"
        assert ExteriorFeature.SPORT_RIMS.label == "Sport Alloy Rims"
        assert SafetyFeature.ABS.label == "Anti-lock Braking System (ABS)"
        assert TransmissionType.MANUAL.label == "Manual Transmission"
        assert Color.SILVER.label == "Silver"


class TestSortedVariants:
    """Tests for declaration-order sorting."""

    def test_sorted_variants_when_unordered_set_then_declaration_order(self):
        values = {SafetyFeature.REAR_CAMERA, SafetyFeature.ABS, SafetyFeature.AIRBAGS}

        result = sorted_variants(values)

        assert result == (SafetyFeature.ABS, SafetyFeature.AIRBAGS, SafetyFeature.REAR_CAMERA)

    def test_sorted_variants_when_empty_then_empty_tuple(self):
        assert sorted_variants(frozenset()) == ()


class TestParseVariant:
    """Tests for name parsing."""

    @pytest.mark.parametrize("name", ["SPORT_RIMS", "sport_rims", " Sport-Rims ", "sport rims"])
    def test_parse_variant_when_name_variants_then_resolves(self, name):
        assert parse_variant(ExteriorFeature, name) is ExteriorFeature.SPORT_RIMS

    def test_parse_variant_when_unknown_then_raises_with_choices(self):
        with pytest.raises(ValueError, match="Unknown EngineType 'V12'.*V6, V8"):
            parse_variant(EngineType, "V12")
