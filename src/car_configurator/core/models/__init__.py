"""
Core Models Package

Immutable domain types for car configuration.

All variant types are closed enums, the compatibility catalog is a
read-only mapping built at import time, and Car is a frozen dataclass
holding frozen feature sets. Nothing in this package mutates after
construction, so values are safe to share between threads.
"""

from .options import (
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
from .catalog import CATALOG, Dimension, ModelCompatibility, allowed, supports
from .car import Car

__all__ = [
    "CarModel",
    "Color",
    "EngineType",
    "ExteriorFeature",
    "InteriorFeature",
    "SafetyFeature",
    "TransmissionType",
    "parse_variant",
    "sorted_variants",
    "CATALOG",
    "Dimension",
    "ModelCompatibility",
    "allowed",
    "supports",
    "Car",
]
