"""Shared helpers used across the car_configurator subpackages."""
