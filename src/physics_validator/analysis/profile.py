"""Sampling of circular-orbit quantities over an altitude grid."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from physics_validator.mechanics import (
    escape_velocity,
    gravitational_acceleration,
    orbital_period,
    orbital_velocity,
)
from physics_validator.utils.constants import EARTH_MASS, EARTH_RADIUS
from physics_validator.utils.exceptions import ConfigurationError


@dataclass(frozen=True)
class OrbitProfile:
    """Circular-orbit quantities sampled at increasing altitudes.

    Args:
        mass: Central body mass [kg].
        altitude: Altitude above the body surface [m].
        radius: Orbital radius from the center of mass [m].
        orbital_velocity: Circular orbit speed [m/s].
        orbital_period: Circular orbit period [s].
        escape_velocity: Escape speed from the orbital radius [m/s].
        gravitational_acceleration: Gravitational acceleration [m/s^2].
    """

    mass: float
    altitude: np.ndarray
    radius: np.ndarray
    orbital_velocity: np.ndarray
    orbital_period: np.ndarray
    escape_velocity: np.ndarray
    gravitational_acceleration: np.ndarray


def compute_orbit_profile(
    altitudes: Sequence[float] | np.ndarray,
    mass: float = EARTH_MASS,
    body_radius: float = EARTH_RADIUS,
) -> OrbitProfile:
    """Evaluate the two-body quantities at each altitude of a grid.

    Args:
        altitudes: Altitudes above the body surface [m].
        mass: Central body mass [kg].
        body_radius: Radius of the central body [m].

    Returns:
        Sampled :class:`OrbitProfile`.

    Raises:
        physics_validator.utils.exceptions.ConfigurationError: If no altitude
            is given or any sampled quantity is not finite.
    """
    altitude = np.asarray(altitudes, dtype=float).reshape(-1)
    if altitude.size == 0:
        msg = "altitudes must contain at least one sample"
        raise ConfigurationError(msg)

    radius = body_radius + altitude
    velocity = np.array([orbital_velocity(mass, r) for r in radius])
    period = np.array([orbital_period(mass, r) for r in radius])
    escape = np.array([escape_velocity(mass, r) for r in radius])
    accel = np.array([gravitational_acceleration(mass, r) for r in radius])

    for name, values in (
        ("orbital_velocity", velocity),
        ("orbital_period", period),
        ("escape_velocity", escape),
        ("gravitational_acceleration", accel),
    ):
        if not np.all(np.isfinite(values)):
            msg = f"{name} is not finite for every sample; check mass and radii"
            raise ConfigurationError(msg)

    return OrbitProfile(
        mass=float(mass),
        altitude=altitude,
        radius=radius,
        orbital_velocity=velocity,
        orbital_period=period,
        escape_velocity=escape,
        gravitational_acceleration=accel,
    )
