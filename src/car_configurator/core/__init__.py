"""
Car Configurator Core Package

Shared domain models, request schema validation and serialization.
These are the single source of truth for every other subpackage.
"""

from .models import (
    Car,
    CarModel,
    Color,
    EngineType,
    ExteriorFeature,
    InteriorFeature,
    SafetyFeature,
    TransmissionType,
)

__all__ = [
    "Car",
    "CarModel",
    "Color",
    "EngineType",
    "ExteriorFeature",
    "InteriorFeature",
    "SafetyFeature",
    "TransmissionType",
]
