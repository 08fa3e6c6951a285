"""Closed-form circular two-body gravity quantities.

All functions are pure and evaluate the textbook expression directly. Inputs
are not validated: a zero or negative radius, distance or mass propagates as
``inf`` or ``nan`` following IEEE 754 arithmetic instead of raising. Callers
that need stricter contracts must validate inputs before calling.
"""

from __future__ import annotations

import numpy as np

from physics_validator.utils.constants import GRAVITATIONAL_CONSTANT

_G = np.float64(GRAVITATIONAL_CONSTANT)
_TWO_PI = np.float64(2.0 * np.pi)


def orbital_velocity(mass: float, radius: float) -> float:
    """Compute the speed of a circular orbit.

    Formula: ``v = sqrt(G * M / r)``.

    Args:
        mass: Mass of the central body [kg].
        radius: Orbital radius from the center of mass [m].

    Returns:
        Orbital velocity [m/s].
    """
    m = np.float64(mass)
    r = np.float64(radius)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.sqrt(_G * m / r))


def orbital_period(mass: float, radius: float) -> float:
    """Compute the period of a circular orbit.

    Formula: ``T = 2 * pi * sqrt(r^3 / (G * M))``.

    Args:
        mass: Mass of the central body [kg].
        radius: Orbital radius from the center of mass [m].

    Returns:
        Orbital period [s].
    """
    m = np.float64(mass)
    r = np.float64(radius)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        radius_cubed = r * r * r
        return float(_TWO_PI * np.sqrt(radius_cubed / (_G * m)))


def escape_velocity(mass: float, radius: float) -> float:
    """Compute the minimum speed needed to escape a body from a given distance.

    Formula: ``v_esc = sqrt(2 * G * M / r)``.

    Args:
        mass: Mass of the body [kg].
        radius: Distance from the center of mass [m].

    Returns:
        Escape velocity [m/s].
    """
    m = np.float64(mass)
    r = np.float64(radius)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.sqrt(2.0 * _G * m / r))


def gravitational_force(mass1: float, mass2: float, distance: float) -> float:
    """Compute Newton's gravitational attraction between two point masses.

    Formula: ``F = G * m1 * m2 / d^2``.

    Args:
        mass1: Mass of the first body [kg].
        mass2: Mass of the second body [kg].
        distance: Distance between the centers of mass [m].

    Returns:
        Gravitational force magnitude [N].
    """
    m1 = np.float64(mass1)
    m2 = np.float64(mass2)
    d = np.float64(distance)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(_G * m1 * m2 / (d * d))


def gravitational_acceleration(mass: float, distance: float) -> float:
    """Compute gravitational acceleration at a distance from a body.

    Formula: ``a = G * M / d^2``. Independent of the mass of the falling object.

    Args:
        mass: Mass of the attracting body [kg].
        distance: Distance from the center of mass [m].

    Returns:
        Gravitational acceleration [m/s^2].
    """
    m = np.float64(mass)
    d = np.float64(distance)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(_G * m / (d * d))
