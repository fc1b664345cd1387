"""
Module: builder.errors

Purpose:
    Exception taxonomy for rejected car configurations, plus the structured
    Violation record used for aggregated compatibility reporting.

Key Classes:
    - InvalidCarConfigurationError: Base class, carries all error messages
    - NullFieldError: A setter/adder received None
    - MissingFieldsError: Mandatory fields unset at build()
    - IncompatibleOptionsError: Options not allowed for the chosen model
    - Violation: One compatibility failure (dimension, value, model, allowed)

Used By:
    - builder.car_builder: CarBuilder
    - builder.validation: Compatibility checks
    - cli: Error reporting
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, List, Sequence

from car_configurator.core.models.catalog import Dimension
from car_configurator.core.models.options import CarModel, sorted_variants


@dataclass(frozen=True)
class Violation:
    """
    A selected option that the model does not allow.

    Attributes:
        dimension: Axis the option belongs to
        value: The offending variant
        model: Model it was checked against
        allowed: Full legal set for that dimension

    Example:
        >>> Violation(Dimension.ENGINE, EngineType.V8, CarModel.SEDAN,
        ...           frozenset({EngineType.V6})).message
        "Engine 'V8 Engine' is not supported by Sedan. Allowed engines: [V6 Engine (300 HP)]"
    """

    dimension: Dimension
    value: Enum
    model: CarModel
    allowed: FrozenSet[Enum]

    @property
    def message(self) -> str:
        allowed = ", ".join(str(v) for v in sorted_variants(self.allowed))
        return (
            f"{self.dimension.display_name} '{self.value.label}' is not supported by "
            f"{self.model.label}. Allowed {self.dimension.plural}: [{allowed}]"
        )

    def __str__(self) -> str:
        return self.message


class InvalidCarConfigurationError(ValueError):
    """
    Raised when a car configuration request is rejected.

    Attributes:
        errors: Individual problems found (one entry per defect)
    """

    def __init__(self, message: str, errors: Sequence[str] | None = None):
        super().__init__(message)
        self.errors: List[str] = list(errors) if errors else [message]


class NullFieldError(InvalidCarConfigurationError):
    """A required argument to a setter or adder was None."""

    def __init__(self, field: str):
        super().__init__(f"{field} cannot be None")
        self.field = field


class MissingFieldsError(InvalidCarConfigurationError):
    """One or more mandatory fields were never set before build()."""

    def __init__(self, missing_fields: Sequence[str]):
        self.missing_fields = tuple(missing_fields)
        super().__init__(
            f"Missing required fields: {', '.join(self.missing_fields)}. "
            "Please specify: with_model(), with_engine(), and with_transmission().",
            errors=[f"Missing field: {name}" for name in self.missing_fields],
        )


class IncompatibleOptionsError(InvalidCarConfigurationError):
    """Selected options are not allowed for the chosen model."""

    def __init__(self, violations: Sequence[Violation]):
        self.violations = tuple(violations)
        messages = [v.message for v in self.violations]
        super().__init__(
            "Invalid car configuration:\n- " + "\n- ".join(messages),
            errors=messages,
        )
