"""
Module: builder.car_builder

Purpose:
    Mutable staging area for a car configuration. Setters fail fast on
    None; build() validates the whole selection and either returns an
    immutable Car or raises with every defect found.

Key Classes:
    - CarBuilder: Fluent accumulator

Dependencies:
    - core.models: Variant enums, Car
    - builder.validation: Two-phase validation

Used By:
    - builder.wizard: Staged construction
    - core.utils.serialization: Building cars from JSON requests
    - cli: Sample configuration

Thread Safety:
    A CarBuilder is single-writer. Callers must not share one instance
    between threads; no internal locking is done. The Car it produces is
    immutable and safe to share.
"""

from __future__ import annotations

import logging
from typing import Optional, Set, Type

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

from .errors import NullFieldError
from .validation import ValidationResult, validate_selection

logger = logging.getLogger(__name__)


def _require(value: object, field: str, expected: Type) -> None:
    if value is None:
        raise NullFieldError(field)
    if not isinstance(value, expected):
        raise TypeError(f"{field} must be a {expected.__name__}, got {value!r}")


class CarBuilder:
    """
    Fluent builder for valid Car instances.

    Mandatory: model, engine, transmission. Colour defaults to BLACK and
    feature groups default to empty. Adding a feature twice is a no-op.

    The builder is not consumed by build(); it can be reset() and reused.

    Example:
        >>> car = (CarBuilder()
        ...        .with_model(CarModel.SUV)
        ...        .with_engine(EngineType.V8)
        ...        .with_transmission(TransmissionType.AUTOMATIC)
        ...        .with_sunroof()
        ...        .build())
        >>> car.has(ExteriorFeature.SUNROOF)
        True
    """

    def __init__(self) -> None:
        self._model: Optional[CarModel] = None
        self._engine: Optional[EngineType] = None
        self._transmission: Optional[TransmissionType] = None
        self._color: Color = Color.BLACK
        self._interior_features: Set[InteriorFeature] = set()
        self._exterior_features: Set[ExteriorFeature] = set()
        self._safety_features: Set[SafetyFeature] = set()

    # ─────────────────────────────────────────────────────────────────────────
    # Mandatory Fields
    # ─────────────────────────────────────────────────────────────────────────

    def with_model(self, model: CarModel) -> CarBuilder:
        _require(model, "Car model", CarModel)
        self._model = model
        return self

    def with_engine(self, engine: EngineType) -> CarBuilder:
        _require(engine, "Engine type", EngineType)
        self._engine = engine
        return self

    def with_transmission(self, transmission: TransmissionType) -> CarBuilder:
        _require(transmission, "Transmission type", TransmissionType)
        self._transmission = transmission
        return self

    # ─────────────────────────────────────────────────────────────────────────
    # Optional Fields
    # ─────────────────────────────────────────────────────────────────────────

    def set_color(self, color: Color) -> CarBuilder:
        """Set the colour (defaults to BLACK if never called)."""
        _require(color, "Color", Color)
        self._color = color
        return self

    def add_interior_feature(self, feature: InteriorFeature) -> CarBuilder:
        _require(feature, "Interior feature", InteriorFeature)
        self._interior_features.add(feature)
        return self

    def add_exterior_feature(self, feature: ExteriorFeature) -> CarBuilder:
        _require(feature, "Exterior feature", ExteriorFeature)
        self._exterior_features.add(feature)
        return self

    def add_safety_feature(self, feature: SafetyFeature) -> CarBuilder:
        _require(feature, "Safety feature", SafetyFeature)
        self._safety_features.add(feature)
        return self

    def add_interior_features(self, *features: InteriorFeature) -> CarBuilder:
        """
        Add several interior features in order.

        Not transactional: if one element is None, the elements before it
        stay added and the rest are skipped.
        """
        for feature in features:
            self.add_interior_feature(feature)
        return self

    def add_exterior_features(self, *features: ExteriorFeature) -> CarBuilder:
        for feature in features:
            self.add_exterior_feature(feature)
        return self

    def add_safety_features(self, *features: SafetyFeature) -> CarBuilder:
        for feature in features:
            self.add_safety_feature(feature)
        return self

    def with_sunroof(self) -> CarBuilder:
        return self.add_exterior_feature(ExteriorFeature.SUNROOF)

    def with_rims(self, sport_rims: bool) -> CarBuilder:
        """Add sport rims if sport_rims is true, standard rims otherwise."""
        return self.add_exterior_feature(
            ExteriorFeature.SPORT_RIMS if sport_rims else ExteriorFeature.STANDARD_RIMS
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Build
    # ─────────────────────────────────────────────────────────────────────────

    def validate(self) -> ValidationResult:
        """
        Validate the staged configuration without raising.

        Returns:
            ValidationResult with missing fields or compatibility violations
        """
        return validate_selection(
            self._model,
            self._engine,
            self._transmission,
            self._interior_features,
            self._exterior_features,
            self._safety_features,
        )

    def build(self) -> Car:
        """
        Validate and freeze the configuration.

        Returns:
            New immutable Car holding copies of the feature sets

        Raises:
            MissingFieldsError: If model, engine or transmission is unset
            IncompatibleOptionsError: If any option is not allowed by the model
        """
        result = self.validate()
        if not result.is_valid:
            logger.debug(f"Rejected configuration with {len(result.messages)} problem(s)")
            result.raise_for_errors()

        car = Car(
            model=self._model,
            engine=self._engine,
            transmission=self._transmission,
            color=self._color,
            interior_features=frozenset(self._interior_features),
            exterior_features=frozenset(self._exterior_features),
            safety_features=frozenset(self._safety_features),
        )
        logger.debug(f"Built {car}")
        return car

    def reset(self) -> CarBuilder:
        """Clear all fields back to the initial state."""
        self._model = None
        self._engine = None
        self._transmission = None
        self._color = Color.BLACK
        self._interior_features.clear()
        self._exterior_features.clear()
        self._safety_features.clear()
        return self
