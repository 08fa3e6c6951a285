"""Closed-form two-body gravity formulas."""

from physics_validator.mechanics.two_body import (
    escape_velocity,
    gravitational_acceleration,
    gravitational_force,
    orbital_period,
    orbital_velocity,
)

__all__ = [
    "escape_velocity",
    "gravitational_acceleration",
    "gravitational_force",
    "orbital_period",
    "orbital_velocity",
]
