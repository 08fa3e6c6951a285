"""Closed-form two-body gravity functions and their validation suite."""

from physics_validator.mechanics import (
    escape_velocity,
    gravitational_acceleration,
    gravitational_force,
    orbital_period,
    orbital_velocity,
)
from physics_validator.utils.constants import (
    EARTH_MASS,
    EARTH_RADIUS,
    GRAVITATIONAL_CONSTANT,
    G,
)
from physics_validator.validation import ValidationReport, run_validation

__all__ = [
    "EARTH_MASS",
    "EARTH_RADIUS",
    "G",
    "GRAVITATIONAL_CONSTANT",
    "ValidationReport",
    "escape_velocity",
    "gravitational_acceleration",
    "gravitational_force",
    "orbital_period",
    "orbital_velocity",
    "run_validation",
]
