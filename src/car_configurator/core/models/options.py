"""
Module: options

Purpose:
    Closed variant enums for every configurable dimension of a car.
    Each member carries its own display label; EngineType additionally
    carries a horsepower rating. Members are never created at runtime.

Key Classes:
    - CarModel: Top-level product line (fixes every other dimension)
    - EngineType: Engine variants with horsepower
    - TransmissionType, Color: Simple labelled variants
    - InteriorFeature, ExteriorFeature, SafetyFeature: Optional features

Key Functions:
    - sorted_variants(): Order variants by declaration order
    - parse_variant(): Look up a member by (case-insensitive) name

Dependencies:
    - enum (std)

Used By:
    - core.models.catalog: Compatibility table
    - core.models.car: Car value
    - builder.car_builder: CarBuilder
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Tuple, Type, TypeVar, Union


class _LabelledVariant(Enum):
    """Enum base whose value is the human-readable label."""

    @property
    def label(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.label


class CarModel(_LabelledVariant):
    """
    Car model (product line).

    The model decides which variants are legal in every other dimension;
    see ``core.models.catalog.CATALOG``. The ``supports*`` helpers below
    delegate to the catalog so callers can write
    ``CarModel.SEDAN.supports(EngineType.V6)``.
    """

    SEDAN = "Sedan"
    SUV = "SUV"
    SPORTS = "Sports Car"
    COMPACT = "Compact"

    def supports(self, value: "Variant") -> bool:
        from .catalog import supports
        return supports(self, value)

    @property
    def compatibility(self):
        from .catalog import CATALOG
        return CATALOG[self]


class EngineType(Enum):
    """
    Engine options.

    Attributes:
        label: Display name, e.g. "V8 Engine"
        horsepower: Power rating in HP

    Example:
        >>> str(EngineType.V8)
        'V8 Engine (450 HP)'
    """

    V6 = ("V6 Engine", 300)
    V8 = ("V8 Engine", 450)

    def __init__(self, label: str, horsepower: int) -> None:
        self.label = label
        self.horsepower = horsepower

    def __str__(self) -> str:
        return f"{self.label} ({self.horsepower} HP)"


class TransmissionType(_LabelledVariant):
    """Transmission options."""

    MANUAL = "Manual Transmission"
    AUTOMATIC = "Automatic Transmission"


class Color(_LabelledVariant):
    """Exterior colour options."""

    BLACK = "Black"
    WHITE = "White"
    SILVER = "Silver"
    RED = "Red"
    BLUE = "Blue"
    GREEN = "Green"


class InteriorFeature(_LabelledVariant):
    """Optional interior features."""

    LEATHER = "Leather Interior"
    GPS = "GPS Navigation System"
    SOUND_SYSTEM = "Premium Sound System"


class ExteriorFeature(_LabelledVariant):
    """Optional exterior features."""

    SUNROOF = "Panoramic Sunroof"
    SPORT_RIMS = "Sport Alloy Rims"
    STANDARD_RIMS = "Standard Rims"


class SafetyFeature(_LabelledVariant):
    """Optional safety features."""

    ABS = "Anti-lock Braking System (ABS)"
    AIRBAGS = "Full Airbag System"
    REAR_CAMERA = "Rear View Camera"


Feature = Union[InteriorFeature, ExteriorFeature, SafetyFeature]
Variant = Union[EngineType, TransmissionType, InteriorFeature, ExteriorFeature, SafetyFeature]

E = TypeVar("E", bound=Enum)


def sorted_variants(values: Iterable[E]) -> Tuple[E, ...]:
    """
    Order variants by their enum declaration order.

    Set iteration order is an implementation detail, so everything that is
    displayed or reported (summaries, violation messages) goes through this.

    Args:
        values: Members of a single enum

    Returns:
        Tuple sorted by declaration order

    Example:
        >>> sorted_variants({SafetyFeature.REAR_CAMERA, SafetyFeature.ABS})
        (<SafetyFeature.ABS: ...>, <SafetyFeature.REAR_CAMERA: ...>)
    """
    return tuple(sorted(values, key=lambda v: type(v)._member_names_.index(v.name)))


def parse_variant(enum_type: Type[E], name: str) -> E:
    """
    Look up an enum member by name, ignoring case and surrounding space.

    Args:
        enum_type: Enum class to search
        name: Member name such as "sport_rims" or "V8"

    Returns:
        The matching member

    Raises:
        ValueError: If no member has that name
    """
    key = name.strip().upper().replace("-", "_").replace(" ", "_")
    try:
        return enum_type[key]
    except KeyError:
        allowed = ", ".join(enum_type._member_names_)
        raise ValueError(
            f"Unknown {enum_type.__name__} {name!r} (expected one of: {allowed})"
        ) from None
