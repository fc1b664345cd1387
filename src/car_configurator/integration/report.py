"""
Module: integration.report

Purpose:
    Turns a Car (and optionally its Order) into the plain-text report
    that documents are filled with.

Key Classes:
    - CarReportGenerator: generate_title() and generate_report()
"""

from __future__ import annotations

from typing import List, Optional

from car_configurator.core.models.car import Car

from .orders import Order

RULE = "=" * 40
SUBRULE = "-" * 40


class CarReportGenerator:
    """
    Builds report titles and bodies.

    Feature sections are only written when the car has features in that
    group; empty groups are omitted.
    """

    def generate_title(self, car: Car) -> str:
        return f"{car.model.label} Configuration Report"

    def generate_report(self, car: Car, order: Optional[Order] = None) -> str:
        lines: List[str] = [RULE, "CAR CONFIGURATION REPORT", RULE, ""]

        if order is not None:
            lines += [
                "ORDER",
                SUBRULE,
                f"Order ID: {order.id}",
                f"Created: {order.created_at.isoformat(timespec='seconds')}",
                f"Status: {order.status.value.upper()}",
                "",
            ]

        lines += [
            "VEHICLE",
            SUBRULE,
            f"Model: {car.model.label}",
            f"Color: {car.color.label}",
            "",
            "POWERTRAIN",
            SUBRULE,
            f"Engine: {car.engine.label}",
            f"Horsepower: {car.horsepower} HP",
            f"Transmission: {car.transmission.label}",
        ]

        for heading, features in car.feature_sections():
            lines += ["", heading.upper(), SUBRULE]
            lines += [f"  - {feature.label}" for feature in features]

        lines += ["", RULE]
        return "\n".join(lines)
