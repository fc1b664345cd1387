"""
Module: builder.validation

Purpose:
    Two-phase validation of a staged configuration. Phase one collects
    every missing mandatory field; phase two (only reached when nothing is
    missing) collects every compatibility violation. Neither phase stops at
    the first problem, so a caller can fix everything in one round-trip.

Key Functions:
    - find_missing_fields(): Phase one
    - find_violations(): Phase two
    - validate_selection(): Both phases as a ValidationResult

Key Classes:
    - ValidationResult: Missing fields and violations from one attempt

Dependencies:
    - core.models.catalog: Allowed sets
    - builder.errors: Violation, exceptions

Used By:
    - builder.car_builder.CarBuilder
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, List, Optional, Tuple

from car_configurator.core.models.catalog import Dimension, allowed
from car_configurator.core.models.options import (
    CarModel,
    EngineType,
    ExteriorFeature,
    InteriorFeature,
    SafetyFeature,
    TransmissionType,
    sorted_variants,
)

from .errors import IncompatibleOptionsError, MissingFieldsError, Violation


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating a staged configuration.

    Attributes:
        missing_fields: Unset mandatory fields, in order model, engine, transmission
        violations: Compatibility failures (empty when missing_fields is set)
    """

    missing_fields: Tuple[str, ...] = ()
    violations: Tuple[Violation, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.missing_fields and not self.violations

    @property
    def messages(self) -> List[str]:
        if self.missing_fields:
            return [f"Missing field: {name}" for name in self.missing_fields]
        return [v.message for v in self.violations]

    def raise_for_errors(self) -> None:
        """
        Raise the exception matching the first failing phase.

        Raises:
            MissingFieldsError: If any mandatory field is missing
            IncompatibleOptionsError: If any option is not allowed
        """
        if self.missing_fields:
            raise MissingFieldsError(self.missing_fields)
        if self.violations:
            raise IncompatibleOptionsError(self.violations)


def find_missing_fields(
    model: Optional[CarModel],
    engine: Optional[EngineType],
    transmission: Optional[TransmissionType],
) -> Tuple[str, ...]:
    """Names of unset mandatory fields in the fixed order model, engine, transmission."""
    return tuple(
        name
        for name, value in (("model", model), ("engine", engine), ("transmission", transmission))
        if value is None
    )


def find_violations(
    model: CarModel,
    engine: EngineType,
    transmission: TransmissionType,
    interior_features: AbstractSet[InteriorFeature],
    exterior_features: AbstractSet[ExteriorFeature],
    safety_features: AbstractSet[SafetyFeature],
) -> Tuple[Violation, ...]:
    """
    Check every selected option against the model's allowed sets.

    Order is fixed: engine, transmission, then interior, exterior and safety
    features. Features within a group are checked in declaration order so
    the resulting messages are reproducible.

    Returns:
        One Violation per unsupported option (empty if all are allowed)
    """
    selections = (
        (Dimension.ENGINE, (engine,)),
        (Dimension.TRANSMISSION, (transmission,)),
        (Dimension.INTERIOR, sorted_variants(interior_features)),
        (Dimension.EXTERIOR, sorted_variants(exterior_features)),
        (Dimension.SAFETY, sorted_variants(safety_features)),
    )

    violations: List[Violation] = []
    for dimension, values in selections:
        legal = allowed(model, dimension)
        for value in values:
            if value not in legal:
                violations.append(Violation(dimension, value, model, legal))
    return tuple(violations)


def validate_selection(
    model: Optional[CarModel],
    engine: Optional[EngineType],
    transmission: Optional[TransmissionType],
    interior_features: AbstractSet[InteriorFeature],
    exterior_features: AbstractSet[ExteriorFeature],
    safety_features: AbstractSet[SafetyFeature],
) -> ValidationResult:
    """
    Run both validation phases.

    Compatibility is only checked once all mandatory fields are present,
    so a missing model never produces confusing compatibility errors.
    """
    missing = find_missing_fields(model, engine, transmission)
    if missing:
        return ValidationResult(missing_fields=missing)

    return ValidationResult(
        violations=find_violations(
            model, engine, transmission,
            interior_features, exterior_features, safety_features,
        )
    )
