"""
Module: builder.wizard

Purpose:
    Staged construction on top of CarBuilder. The mandatory choices must be
    made in order (model → engine → transmission) before any optional
    setter or build() is reachable. Also provides the canned presets.

Key Classes:
    - CarConfigurationWizard: Entry point and presets
    - EngineStep / TransmissionStep / OptionsStep: One object per stage
    - WizardStepError: A stage was used out of sequence

Dependencies:
    - builder.car_builder: CarBuilder

Used By:
    - cli: Preset selection

Design Note:
    Each stage only exposes the next legal call. Python cannot reject an
    out-of-order call at compile time, so stages also check at runtime:
    a mandatory stage can be advanced once, and every stage belongs to one
    wizard session. Starting a new session (select_model() or a preset)
    makes all earlier stage objects stale.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

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

from .car_builder import CarBuilder

logger = logging.getLogger(__name__)


class WizardStepError(RuntimeError):
    """A wizard stage was used after it was advanced or its session ended."""


class _Step:
    """Common session bookkeeping for wizard stages."""

    def __init__(self, wizard: CarConfigurationWizard, session: int) -> None:
        self._wizard = wizard
        self._session = session
        self._advanced = False

    @property
    def _builder(self) -> CarBuilder:
        if self._session != self._wizard._session:
            raise WizardStepError(
                f"{type(self).__name__} belongs to a finished wizard session; "
                "start again with select_model()"
            )
        return self._wizard.builder

    def _advance(self) -> CarBuilder:
        builder = self._builder
        if self._advanced:
            raise WizardStepError(f"{type(self).__name__} has already been completed")
        self._advanced = True
        return builder


class EngineStep(_Step):
    """Stage 2: choose the engine."""

    def select_engine(self, engine: EngineType) -> TransmissionStep:
        builder = self._advance()
        builder.with_engine(engine)
        return TransmissionStep(self._wizard, self._session)


class TransmissionStep(_Step):
    """Stage 3: choose the transmission."""

    def select_transmission(self, transmission: TransmissionType) -> OptionsStep:
        builder = self._advance()
        builder.with_transmission(transmission)
        return OptionsStep(self._wizard, self._session)


class OptionsStep(_Step):
    """
    Final stage: optional settings in any order and multiplicity, then build().
    """

    def set_color(self, color: Color) -> OptionsStep:
        self._builder.set_color(color)
        return self

    def add_interior_feature(self, feature: InteriorFeature) -> OptionsStep:
        self._builder.add_interior_feature(feature)
        return self

    def add_exterior_feature(self, feature: ExteriorFeature) -> OptionsStep:
        self._builder.add_exterior_feature(feature)
        return self

    def add_safety_feature(self, feature: SafetyFeature) -> OptionsStep:
        self._builder.add_safety_feature(feature)
        return self

    def with_sunroof(self) -> OptionsStep:
        self._builder.with_sunroof()
        return self

    def build(self) -> Car:
        """
        Build the car.

        Raises:
            InvalidCarConfigurationError: If the options are incompatible
        """
        return self._builder.build()


class CarConfigurationWizard:
    """
    Guides step-by-step car configuration and offers presets.

    Example:
        >>> car = (CarConfigurationWizard()
        ...        .select_model(CarModel.SPORTS)
        ...        .select_engine(EngineType.V8)
        ...        .select_transmission(TransmissionType.MANUAL)
        ...        .set_color(Color.RED)
        ...        .build())
        >>> car.model
        <CarModel.SPORTS: 'Sports Car'>
    """

    def __init__(self, builder: Optional[CarBuilder] = None) -> None:
        self.builder = builder if builder is not None else CarBuilder()
        self._session = 0

    def _new_session(self) -> int:
        self._session += 1
        self.builder.reset()
        return self._session

    def select_model(self, model: CarModel) -> EngineStep:
        """Stage 1: choose the model. Starts a fresh session."""
        session = self._new_session()
        self.builder.with_model(model)
        return EngineStep(self, session)

    # ─────────────────────────────────────────────────────────────────────────
    # Presets
    # ─────────────────────────────────────────────────────────────────────────

    def build_basic_sedan(self, color: Color) -> Car:
        """Sedan, V6, automatic, ABS."""
        self._new_session()
        return (
            self.builder
            .with_model(CarModel.SEDAN)
            .with_engine(EngineType.V6)
            .with_transmission(TransmissionType.AUTOMATIC)
            .set_color(color)
            .add_safety_feature(SafetyFeature.ABS)
            .build()
        )

    def build_luxury_suv(self, color: Color) -> Car:
        """Fully-loaded SUV with every interior, safety and premium exterior option."""
        self._new_session()
        return (
            self.builder
            .with_model(CarModel.SUV)
            .with_engine(EngineType.V8)
            .with_transmission(TransmissionType.AUTOMATIC)
            .set_color(color)
            .add_interior_features(
                InteriorFeature.LEATHER, InteriorFeature.GPS, InteriorFeature.SOUND_SYSTEM
            )
            .add_exterior_feature(ExteriorFeature.SUNROOF)
            .add_exterior_feature(ExteriorFeature.SPORT_RIMS)
            .add_safety_features(
                SafetyFeature.ABS, SafetyFeature.AIRBAGS, SafetyFeature.REAR_CAMERA
            )
            .build()
        )

    def build_sports_car(self, color: Color) -> Car:
        """Sports car, V8, manual, performance options."""
        self._new_session()
        return (
            self.builder
            .with_model(CarModel.SPORTS)
            .with_engine(EngineType.V8)
            .with_transmission(TransmissionType.MANUAL)
            .set_color(color)
            .add_interior_features(InteriorFeature.LEATHER, InteriorFeature.SOUND_SYSTEM)
            .add_exterior_feature(ExteriorFeature.SPORT_RIMS)
            .add_safety_features(SafetyFeature.ABS, SafetyFeature.AIRBAGS)
            .build()
        )

    def build_preset(self, name: str, color: Color) -> Car:
        """
        Build a preset by name ("basic", "luxury" or "sports").

        Raises:
            KeyError: If the preset name is unknown
        """
        key = name.strip().lower()
        if key not in PRESETS:
            raise KeyError(f"Unknown preset {name!r} (expected one of: {', '.join(PRESETS)})")
        logger.info(f"Building {key} preset in {color.label}")
        return PRESETS[key](self, color)


PRESETS: Dict[str, Callable[[CarConfigurationWizard, Color], Car]] = {
    "basic": CarConfigurationWizard.build_basic_sedan,
    "luxury": CarConfigurationWizard.build_luxury_suv,
    "sports": CarConfigurationWizard.build_sports_car,
}
