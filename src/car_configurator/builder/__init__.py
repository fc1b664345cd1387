"""
Module: builder

Purpose:
    Staged assembly of car configurations. CarBuilder collects selections
    and validates them against the catalog; CarConfigurationWizard enforces
    the model → engine → transmission order and offers presets.

Key Classes:
    - CarBuilder: Fluent accumulator with validating build()
    - CarConfigurationWizard: Ordered, staged construction and presets
    - InvalidCarConfigurationError: Base for all rejected configurations

Dependencies:
    - car_configurator.core.models: Variant enums, catalog, Car
"""

from .car_builder import CarBuilder
from .errors import (
    IncompatibleOptionsError,
    InvalidCarConfigurationError,
    MissingFieldsError,
    NullFieldError,
    Violation,
)
from .validation import ValidationResult
from .wizard import PRESETS, CarConfigurationWizard, WizardStepError

__all__ = [
    "CarBuilder",
    "CarConfigurationWizard",
    "PRESETS",
    "WizardStepError",
    "IncompatibleOptionsError",
    "InvalidCarConfigurationError",
    "MissingFieldsError",
    "NullFieldError",
    "Violation",
    "ValidationResult",
]
