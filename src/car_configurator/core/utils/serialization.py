"""
Serialization Utilities

Converts between Car values and JSON configuration requests.

Requests are validated against the request schema first, then every
name is resolved to its enum member and the car is assembled through
CarBuilder, so a request can never produce a Car the builder would
reject.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..models.car import Car
from ..models.options import (
    CarModel,
    Color,
    EngineType,
    ExteriorFeature,
    InteriorFeature,
    SafetyFeature,
    TransmissionType,
    parse_variant,
)
from ..schemas.validator import ValidationError, validate_car_request

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Requests
# ─────────────────────────────────────────────────────────────────────────────

def _parse(enum_type, name: str, path: str):
    try:
        return parse_variant(enum_type, name)
    except ValueError as e:
        raise ValidationError(str(e), path=path, errors=[str(e)]) from e


def car_from_request(data: dict[str, Any]) -> Car:
    """
    Build a Car from a request dict.

    Args:
        data: Request with enum member names, e.g.
            {"model": "SUV", "engine": "V8", "transmission": "AUTOMATIC"}

    Returns:
        Validated Car

    Raises:
        ValidationError: If the request shape or a name is invalid
        InvalidCarConfigurationError: If fields are missing or incompatible
    """
    from car_configurator.builder.car_builder import CarBuilder

    validate_car_request(data)

    builder = CarBuilder()
    if "model" in data:
        builder.with_model(_parse(CarModel, data["model"], "model"))
    if "engine" in data:
        builder.with_engine(_parse(EngineType, data["engine"], "engine"))
    if "transmission" in data:
        builder.with_transmission(_parse(TransmissionType, data["transmission"], "transmission"))
    if "color" in data:
        builder.set_color(_parse(Color, data["color"], "color"))

    for i, name in enumerate(data.get("interior_features", [])):
        builder.add_interior_feature(_parse(InteriorFeature, name, f"interior_features.{i}"))
    for i, name in enumerate(data.get("exterior_features", [])):
        builder.add_exterior_feature(_parse(ExteriorFeature, name, f"exterior_features.{i}"))
    for i, name in enumerate(data.get("safety_features", [])):
        builder.add_safety_feature(_parse(SafetyFeature, name, f"safety_features.{i}"))

    return builder.build()


def serialize_car(car: Car) -> dict[str, Any]:
    """
    Serialize a Car to a request dict.

    The output passes schema validation and rebuilds an equal Car.
    """
    return car.to_dict()


# ─────────────────────────────────────────────────────────────────────────────
# File I/O
# ─────────────────────────────────────────────────────────────────────────────

def load_car_request(path: Path) -> Car:
    """
    Load a JSON request file and build the car it describes.

    Args:
        path: Path to a JSON file

    Returns:
        Validated Car

    Raises:
        FileNotFoundError: If path doesn't exist
        ValidationError: If the file is unreadable, not UTF-8 JSON, or fails the schema
        InvalidCarConfigurationError: If fields are missing or incompatible
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Car request not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ValidationError(f"Car request {path} is not valid UTF-8: {e}", path="") from e
    except OSError as e:
        raise ValidationError(f"Cannot read car request {path}: {e}", path="") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON in {path}: {e}", path="") from e

    logger.debug(f"Loaded car request from {path}")
    return car_from_request(data)


def save_car_request(car: Car, path: Path) -> None:
    """
    Write a Car as a JSON request file.

    Args:
        car: Car to save
        path: Output path (parent directories are created)
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(serialize_car(car), f, indent=2)
