"""
Module: catalog

Purpose:
    The closed compatibility catalog: for every CarModel, the set of legal
    variants in each configurable dimension. Built once at import time and
    exposed read-only. All queries are total functions over the catalog.

Key Classes:
    - Dimension: Configurable axis (engine, transmission, feature groups)
    - ModelCompatibility: Allowed variant sets for one model

Key Functions:
    - allowed_engines() / allowed_transmissions() / allowed_*_features()
    - allowed(model, dimension): Generic form of the above
    - supports_*(): Membership tests, one per dimension
    - supports(model, value): Membership test with dimension inferred

Dependencies:
    - dataclasses (std)
    - types.MappingProxyType (std)
    - .options: Variant enums

Used By:
    - builder.validation: Compatibility check
    - core.models.options.CarModel: Convenience delegation
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Mapping, Type

from .options import (
    CarModel,
    EngineType,
    ExteriorFeature,
    InteriorFeature,
    SafetyFeature,
    TransmissionType,
    Variant,
)


class Dimension(Enum):
    """
    One configurable axis of a car, in validation order.

    Each member knows its variant enum and the wording used in messages.
    """

    ENGINE = ("engine", "Engine", EngineType)
    TRANSMISSION = ("transmission", "Transmission", TransmissionType)
    INTERIOR = ("interior", "Interior feature", InteriorFeature)
    EXTERIOR = ("exterior", "Exterior feature", ExteriorFeature)
    SAFETY = ("safety", "Safety feature", SafetyFeature)

    def __init__(self, key: str, display_name: str, variant_type: Type[Enum]) -> None:
        self.key = key
        self.display_name = display_name
        self.variant_type = variant_type

    @property
    def plural(self) -> str:
        """Noun used in "Allowed ...:" messages (engines, transmissions, features)."""
        if self in (Dimension.ENGINE, Dimension.TRANSMISSION):
            return f"{self.key}s"
        return "features"

    @classmethod
    def of(cls, value: Variant) -> Dimension:
        """
        Dimension a variant belongs to.

        Raises:
            TypeError: If value is not a configurable variant (e.g. a Color)
        """
        for dimension in cls:
            if isinstance(value, dimension.variant_type):
                return dimension
        raise TypeError(f"{value!r} is not a configurable option")


@dataclass(frozen=True)
class ModelCompatibility:
    """
    Allowed variants for one model (immutable).

    Attributes:
        engines: Legal engines
        transmissions: Legal transmissions
        interior_features: Legal interior features
        exterior_features: Legal exterior features
        safety_features: Legal safety features

    Invariants:
        - Every set is non-empty (a model with no legal engine could never
          be built)
    """

    engines: FrozenSet[EngineType]
    transmissions: FrozenSet[TransmissionType]
    interior_features: FrozenSet[InteriorFeature]
    exterior_features: FrozenSet[ExteriorFeature]
    safety_features: FrozenSet[SafetyFeature]

    def __post_init__(self) -> None:
        """Validate compatibility sets on construction."""
        for dimension in Dimension:
            if not self.for_dimension(dimension):
                raise ValueError(f"Allowed {dimension.key} set must not be empty")

    def for_dimension(self, dimension: Dimension) -> FrozenSet[Enum]:
        """Allowed set for a dimension."""
        return {
            Dimension.ENGINE: self.engines,
            Dimension.TRANSMISSION: self.transmissions,
            Dimension.INTERIOR: self.interior_features,
            Dimension.EXTERIOR: self.exterior_features,
            Dimension.SAFETY: self.safety_features,
        }[dimension]


def _all(enum_type: Type[Enum]) -> frozenset:
    return frozenset(enum_type)


CATALOG: Mapping[CarModel, ModelCompatibility] = MappingProxyType({
    CarModel.SEDAN: ModelCompatibility(
        engines=frozenset({EngineType.V6}),
        transmissions=_all(TransmissionType),
        interior_features=_all(InteriorFeature),
        exterior_features=frozenset({ExteriorFeature.STANDARD_RIMS}),
        safety_features=frozenset({SafetyFeature.ABS, SafetyFeature.AIRBAGS}),
    ),
    CarModel.SUV: ModelCompatibility(
        engines=_all(EngineType),
        transmissions=_all(TransmissionType),
        interior_features=_all(InteriorFeature),
        exterior_features=_all(ExteriorFeature),
        safety_features=_all(SafetyFeature),
    ),
    CarModel.SPORTS: ModelCompatibility(
        engines=frozenset({EngineType.V8}),
        transmissions=frozenset({TransmissionType.MANUAL}),
        interior_features=frozenset({InteriorFeature.LEATHER, InteriorFeature.SOUND_SYSTEM}),
        exterior_features=frozenset({ExteriorFeature.SPORT_RIMS, ExteriorFeature.SUNROOF}),
        safety_features=_all(SafetyFeature),
    ),
    CarModel.COMPACT: ModelCompatibility(
        engines=frozenset({EngineType.V6}),
        transmissions=frozenset({TransmissionType.AUTOMATIC}),
        interior_features=frozenset({InteriorFeature.GPS}),
        exterior_features=frozenset({ExteriorFeature.STANDARD_RIMS}),
        safety_features=frozenset({SafetyFeature.ABS, SafetyFeature.REAR_CAMERA}),
    ),
})


# ─────────────────────────────────────────────────────────────────────────────
# Allowed Sets
# ─────────────────────────────────────────────────────────────────────────────

def allowed(model: CarModel, dimension: Dimension) -> FrozenSet[Enum]:
    """
    Allowed variants of a dimension for a model.

    Args:
        model: Car model
        dimension: Configurable axis

    Returns:
        Non-empty frozenset of legal variants
    """
    return CATALOG[model].for_dimension(dimension)


def allowed_engines(model: CarModel) -> FrozenSet[EngineType]:
    return CATALOG[model].engines


def allowed_transmissions(model: CarModel) -> FrozenSet[TransmissionType]:
    return CATALOG[model].transmissions


def allowed_interior_features(model: CarModel) -> FrozenSet[InteriorFeature]:
    return CATALOG[model].interior_features


def allowed_exterior_features(model: CarModel) -> FrozenSet[ExteriorFeature]:
    return CATALOG[model].exterior_features


def allowed_safety_features(model: CarModel) -> FrozenSet[SafetyFeature]:
    return CATALOG[model].safety_features


# ─────────────────────────────────────────────────────────────────────────────
# Membership
# ─────────────────────────────────────────────────────────────────────────────

def supports_engine(model: CarModel, engine: EngineType) -> bool:
    return engine in CATALOG[model].engines


def supports_transmission(model: CarModel, transmission: TransmissionType) -> bool:
    return transmission in CATALOG[model].transmissions


def supports_interior_feature(model: CarModel, feature: InteriorFeature) -> bool:
    return feature in CATALOG[model].interior_features


def supports_exterior_feature(model: CarModel, feature: ExteriorFeature) -> bool:
    return feature in CATALOG[model].exterior_features


def supports_safety_feature(model: CarModel, feature: SafetyFeature) -> bool:
    return feature in CATALOG[model].safety_features


def supports(model: CarModel, value: Variant) -> bool:
    """
    Check whether a model allows a variant, inferring its dimension.

    Example:
        >>> supports(CarModel.SPORTS, TransmissionType.AUTOMATIC)
        False
    """
    return value in allowed(model, Dimension.of(value))
