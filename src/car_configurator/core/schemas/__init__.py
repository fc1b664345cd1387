"""
Schemas Package

JSON Schema definitions and validation for car configuration requests.
"""

from .validator import ValidationError, validate_car_request

__all__ = ["ValidationError", "validate_car_request"]
