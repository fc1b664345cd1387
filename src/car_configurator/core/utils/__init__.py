"""
Utils Package

Serialization between Car values and JSON configuration requests.
"""

from .serialization import (
    car_from_request,
    serialize_car,
    load_car_request,
    save_car_request,
)

__all__ = [
    "car_from_request",
    "serialize_car",
    "load_car_request",
    "save_car_request",
]
