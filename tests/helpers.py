"""Shared test helpers."""

from __future__ import annotations

from physics_validator.utils.constants import EARTH_RADIUS

REAL_WORLD_TOLERANCE = 1e-2
IDENTITY_TOLERANCE = 1e-6


def earth_orbit_radius(altitude: float) -> float:
    """Convert an altitude above Earth's surface to an orbital radius.

    Args:
        altitude: Altitude above the reference radius [m].

    Returns:
        Orbital radius from Earth's center [m].
    """
    return EARTH_RADIUS + altitude