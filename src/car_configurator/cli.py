"""
Console front-end: build a car, place an order, render and save a document.

Usage:
    car-configurator --format html --preset luxury --color silver
    car-configurator --request my_car.json --output-dir out/
    car-configurator --list-formats
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from car_configurator import __version__
from car_configurator.builder import CarBuilder, CarConfigurationWizard, InvalidCarConfigurationError
from car_configurator.builder.wizard import PRESETS
from car_configurator.config import LOG_LEVELS, AppConfig
from car_configurator.core.models import (
    Car,
    CarModel,
    Color,
    EngineType,
    InteriorFeature,
    SafetyFeature,
    TransmissionType,
    parse_variant,
)
from car_configurator.core.schemas.validator import ValidationError
from car_configurator.core.utils.serialization import load_car_request
from car_configurator.documents import DocumentFactory, UnknownDocumentFormatError
from car_configurator.integration import CarManagementSystem, StorageError, save_document

logger = logging.getLogger(__name__)


def build_sample_car() -> Car:
    """The fully-loaded silver SUV used when no preset or request is given."""
    return (
        CarBuilder()
        .with_model(CarModel.SUV)
        .with_engine(EngineType.V8)
        .with_transmission(TransmissionType.AUTOMATIC)
        .set_color(Color.SILVER)
        .add_interior_feature(InteriorFeature.LEATHER)
        .add_interior_feature(InteriorFeature.GPS)
        .add_interior_feature(InteriorFeature.SOUND_SYSTEM)
        .with_sunroof()
        .with_rims(True)
        .add_safety_feature(SafetyFeature.ABS)
        .add_safety_feature(SafetyFeature.AIRBAGS)
        .add_safety_feature(SafetyFeature.REAR_CAMERA)
        .build()
    )


def _color(value: str) -> Color:
    try:
        return parse_variant(Color, value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="car-configurator",
        description="Configure a car and generate its configuration report.",
    )
    parser.add_argument("--format", dest="format_key", help="Document format (default: pdf)")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--preset", choices=sorted(PRESETS), help="Build a preset configuration")
    source.add_argument("--request", type=Path, help="Path to a JSON car request")
    parser.add_argument("--color", type=_color, default=Color.BLACK, help="Colour for --preset")
    parser.add_argument("--output-dir", type=Path, help="Directory for generated documents")
    parser.add_argument("--no-preview", action="store_true", help="Don't print the document preview")
    parser.add_argument("--log-level", choices=LOG_LEVELS, type=str.upper, help="Logging level")
    parser.add_argument("--list-formats", action="store_true", help="List document formats and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _resolve_config(args: argparse.Namespace) -> AppConfig:
    config = AppConfig.from_env()
    overrides = {}
    if args.output_dir is not None:
        overrides["output_dir"] = args.output_dir
    if args.format_key:
        overrides["default_format"] = args.format_key
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.no_preview:
        overrides["preview"] = False
    return replace(config, **overrides) if overrides else config


def _select_car(args: argparse.Namespace) -> Car:
    if args.preset:
        return CarConfigurationWizard().build_preset(args.preset, args.color)
    if args.request:
        return load_car_request(args.request)
    return build_sample_car()


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the console app.

    Returns:
        Process exit code (0 on success, 1 on any rejected input or write failure)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _resolve_config(args)
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(level=getattr(logging, config.log_level), format="%(message)s")

    factory = DocumentFactory.create_default()
    if args.list_formats:
        print("\n".join(factory.supported_formats))
        return 0

    system = CarManagementSystem(factory)

    try:
        car = _select_car(args)
        order = system.order_service.place_order(car)
        print(car.summary())

        document = system.generate_car_document(car, config.default_format, order)
        if config.preview:
            print("=== Document Preview ===")
            print(document.render())

        payload = system.editor.save()
        output_path = save_document(config.output_dir, document.format_key, document.title, payload)
    except InvalidCarConfigurationError as e:
        logger.error(f"Invalid car configuration: {e}")
        return 1
    except ValidationError as e:
        logger.error(f"Invalid car request: {e}")
        return 1
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1
    except UnknownDocumentFormatError as e:
        logger.error(str(e))
        return 1
    except StorageError as e:
        logger.error(str(e))
        return 1

    print(f"Document generated successfully ({len(payload)} bytes).")
    print(f"Saved to: {output_path.resolve()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
