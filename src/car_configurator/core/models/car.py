"""
Module: car

Purpose:
    Provides the Car dataclass - the immutable, fully validated end product
    of the builder. Feature sets are frozen copies taken at construction, so
    later reuse of a CarBuilder can never change an existing Car.

Key Functions:
    - Car.has(feature): Membership query for any feature dimension
    - Car.summary(): Deterministic multi-line description
    - Car.to_dict() / Car.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - .options: Variant enums

Used By:
    - builder.car_builder.CarBuilder.build()
    - integration.report: Report generation
    - integration.orders: Order records

Design Note:
    Car does not validate compatibility itself; that happens once in
    CarBuilder.build(). Car.from_dict() therefore routes through the
    builder instead of calling the constructor directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, FrozenSet

from .options import (
    CarModel,
    Color,
    EngineType,
    ExteriorFeature,
    Feature,
    InteriorFeature,
    SafetyFeature,
    TransmissionType,
    sorted_variants,
)


@dataclass(frozen=True)
class Car:
    """
    Validated car configuration (immutable).

    Equality and hashing cover all seven fields; feature fields compare as
    sets, so insertion order never matters.

    Attributes:
        model: Car model
        engine: Engine (allowed for model)
        transmission: Transmission (allowed for model)
        color: Exterior colour
        interior_features: Frozen set of interior features
        exterior_features: Frozen set of exterior features
        safety_features: Frozen set of safety features

    Invariants:
        - Every feature and the engine/transmission are allowed for model
          (checked by CarBuilder, not re-checked here)

    Example:
        >>> car = CarBuilder().with_model(CarModel.SEDAN).with_engine(EngineType.V6) \\
        ...     .with_transmission(TransmissionType.AUTOMATIC).build()
        >>> str(car)
        'Black Sedan with V6 Engine and Automatic Transmission'
    """

    model: CarModel
    engine: EngineType
    transmission: TransmissionType
    color: Color = Color.BLACK
    interior_features: FrozenSet[InteriorFeature] = frozenset()
    exterior_features: FrozenSet[ExteriorFeature] = frozenset()
    safety_features: FrozenSet[SafetyFeature] = frozenset()

    def __post_init__(self) -> None:
        """Check field types and freeze feature collections."""
        for name, expected in (
            ("model", CarModel),
            ("engine", EngineType),
            ("transmission", TransmissionType),
            ("color", Color),
        ):
            value = getattr(self, name)
            if not isinstance(value, expected):
                raise TypeError(f"{name} must be a {expected.__name__}, got {value!r}")

        # Owned copies, never the caller's collection
        object.__setattr__(self, "interior_features", frozenset(self.interior_features))
        object.__setattr__(self, "exterior_features", frozenset(self.exterior_features))
        object.__setattr__(self, "safety_features", frozenset(self.safety_features))

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    def has_interior_feature(self, feature: InteriorFeature) -> bool:
        return feature in self.interior_features

    def has_exterior_feature(self, feature: ExteriorFeature) -> bool:
        return feature in self.exterior_features

    def has_safety_feature(self, feature: SafetyFeature) -> bool:
        return feature in self.safety_features

    def has(self, feature: Feature) -> bool:
        """
        Check whether any feature is present.

        Args:
            feature: Interior, exterior or safety feature

        Raises:
            TypeError: If feature is not a feature enum member
        """
        if isinstance(feature, InteriorFeature):
            return self.has_interior_feature(feature)
        if isinstance(feature, ExteriorFeature):
            return self.has_exterior_feature(feature)
        if isinstance(feature, SafetyFeature):
            return self.has_safety_feature(feature)
        raise TypeError(f"{feature!r} is not a feature")

    @property
    def horsepower(self) -> int:
        return self.engine.horsepower

    # ─────────────────────────────────────────────────────────────────────────
    # Display
    # ─────────────────────────────────────────────────────────────────────────

    def feature_sections(self) -> tuple[tuple[str, tuple[Feature, ...]], ...]:
        """
        Non-empty feature groups in display order.

        Returns:
            Tuple of (heading, features) pairs; empty groups are omitted and
            features are in declaration order
        """
        sections = (
            ("Interior Features", sorted_variants(self.interior_features)),
            ("Exterior Features", sorted_variants(self.exterior_features)),
            ("Safety Features", sorted_variants(self.safety_features)),
        )
        return tuple((heading, features) for heading, features in sections if features)

    def summary(self) -> str:
        """
        Multi-line human-readable summary.

        Lists model, colour, engine and transmission, then one section per
        non-empty feature group. Empty groups are left out entirely.
        """
        lines = [
            "Car Configuration Summary",
            "========================",
            f"Model: {self.model.label}",
            f"Color: {self.color.label}",
            f"Engine: {self.engine}",
            f"Transmission: {self.transmission}",
        ]
        for heading, features in self.feature_sections():
            lines.append("")
            lines.append(f"{heading}:")
            lines.extend(f"  - {feature.label}" for feature in features)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return (
            f"{self.color.label} {self.model.label} with "
            f"{self.engine.label} and {self.transmission.label}"
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to a JSON-compatible dict of enum member names.

        The output is accepted by Car.from_dict() and by the car request
        schema.
        """
        return {
            "model": self.model.name,
            "engine": self.engine.name,
            "transmission": self.transmission.name,
            "color": self.color.name,
            "interior_features": [f.name for f in sorted_variants(self.interior_features)],
            "exterior_features": [f.name for f in sorted_variants(self.exterior_features)],
            "safety_features": [f.name for f in sorted_variants(self.safety_features)],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Car:
        """
        Rebuild a Car from a dict, re-running full validation.

        Raises:
            ValidationError: If the dict does not match the request schema
            InvalidCarConfigurationError: If the options are incompatible
        """
        from car_configurator.core.utils.serialization import car_from_request
        return car_from_request(data)
