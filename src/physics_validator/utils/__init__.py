"""Utility helpers."""

from physics_validator.utils.constants import (
    EARTH_MASS,
    EARTH_RADIUS,
    GRAVITATIONAL_CONSTANT,
)
from physics_validator.utils.logging import configure_logging

__all__ = ["EARTH_MASS", "EARTH_RADIUS", "GRAVITATIONAL_CONSTANT", "configure_logging"]
