"""Physical identities that cross-check the two-body functions."""

from __future__ import annotations

import math
from collections.abc import Callable

from physics_validator.mechanics import (
    escape_velocity,
    gravitational_acceleration,
    gravitational_force,
    orbital_period,
    orbital_velocity,
)
from physics_validator.utils.constants import GRAVITATIONAL_CONSTANT
from physics_validator.validation.reference import relative_error
from physics_validator.validation.results import IDENTITY_GROUP, CheckResult

TEST_MASS = 100.0

IdentityCheck = Callable[[float, float, float], CheckResult]


def _result(
    name: str,
    actual: float,
    expected: float,
    tolerance: float,
    unit: str = "",
) -> CheckResult:
    """Build an identity check result.

    Args:
        name: Check identifier.
        actual: Value derived from the functions under test.
        expected: Value required by the identity.
        tolerance: Maximum accepted relative error.
        unit: Unit of the compared values.

    Returns:
        Identity-group :class:`CheckResult`.
    """
    return CheckResult(
        name=name,
        group=IDENTITY_GROUP,
        actual=actual,
        expected=expected,
        relative_error=relative_error(actual, expected),
        tolerance=tolerance,
        unit=unit,
    )


def check_escape_to_orbital_ratio(mass: float, radius: float, tolerance: float) -> CheckResult:
    """Check that escape velocity is ``sqrt(2)`` times orbital velocity.

    Args:
        mass: Central body mass [kg].
        radius: Orbital radius [m].
        tolerance: Maximum accepted relative error.

    Returns:
        Check result comparing the velocity ratio with ``sqrt(2)``.
    """
    ratio = escape_velocity(mass, radius) / orbital_velocity(mass, radius)
    return _result("escape_to_orbital_velocity_ratio", ratio, math.sqrt(2.0), tolerance)


def check_force_acceleration_relation(
    mass: float,
    radius: float,
    tolerance: float,
) -> CheckResult:
    """Check Newton's second law ``F / m == a`` for a test mass.

    Args:
        mass: Central body mass [kg].
        radius: Distance from the central body [m].
        tolerance: Maximum accepted relative error.

    Returns:
        Check result comparing ``F / m`` with the gravitational acceleration.
    """
    derived = gravitational_force(mass, TEST_MASS, radius) / TEST_MASS
    return _result(
        "force_acceleration_relation",
        derived,
        gravitational_acceleration(mass, radius),
        tolerance,
        unit="m/s^2",
    )


def check_gravitational_constant_units(
    mass: float,
    radius: float,
    tolerance: float,
) -> CheckResult:
    """Check that two unit masses at unit distance attract with force ``G``.

    Args:
        mass: Unused, accepted for a uniform check signature.
        radius: Unused, accepted for a uniform check signature.
        tolerance: Maximum accepted relative error.

    Returns:
        Check result comparing ``F(1 kg, 1 kg, 1 m)`` with ``G``.
    """
    del mass, radius
    return _result(
        "gravitational_constant_units",
        gravitational_force(1.0, 1.0, 1.0),
        GRAVITATIONAL_CONSTANT,
        tolerance,
        unit="N",
    )


def check_kepler_third_law(mass: float, radius: float, tolerance: float) -> CheckResult:
    """Check ``T^2 / r^3`` is equal for two orbits around the same body.

    Args:
        mass: Central body mass [kg].
        radius: Inner orbit radius [m]. The outer orbit uses twice this radius.
        tolerance: Maximum accepted relative error.

    Returns:
        Check result comparing the inner and outer ``T^2 / r^3`` ratios.
    """
    inner_radius = radius
    outer_radius = 2.0 * radius
    inner_period = orbital_period(mass, inner_radius)
    outer_period = orbital_period(mass, outer_radius)
    inner_ratio = inner_period * inner_period / (inner_radius * inner_radius * inner_radius)
    outer_ratio = outer_period * outer_period / (outer_radius * outer_radius * outer_radius)
    return _result("kepler_third_law", inner_ratio, outer_ratio, tolerance, unit="s^2/m^3")


def check_inverse_square_law(mass: float, radius: float, tolerance: float) -> CheckResult:
    """Check that doubling the distance quarters the acceleration.

    Args:
        mass: Central body mass [kg].
        radius: Reference distance [m].
        tolerance: Maximum accepted relative error.

    Returns:
        Check result comparing ``a(r) / a(2r)`` with ``4``.
    """
    ratio = gravitational_acceleration(mass, radius) / gravitational_acceleration(
        mass, 2.0 * radius
    )
    return _result("inverse_square_law", ratio, 4.0, tolerance)


def check_circular_orbit_energy_balance(
    mass: float,
    radius: float,
    tolerance: float,
) -> CheckResult:
    """Check specific kinetic energy equals half the potential well depth.

    Args:
        mass: Central body mass [kg].
        radius: Orbital radius [m].
        tolerance: Maximum accepted relative error.

    Returns:
        Check result comparing ``0.5 * v^2`` with ``(G * M / r) / 2``.
    """
    velocity = orbital_velocity(mass, radius)
    kinetic = 0.5 * velocity * velocity
    potential = GRAVITATIONAL_CONSTANT * mass / radius
    return _result("circular_orbit_energy_balance", kinetic, potential / 2.0, tolerance, unit="J/kg")


IDENTITY_CHECKS: dict[str, IdentityCheck] = {
    "escape_to_orbital_velocity_ratio": check_escape_to_orbital_ratio,
    "force_acceleration_relation": check_force_acceleration_relation,
    "gravitational_constant_units": check_gravitational_constant_units,
    "kepler_third_law": check_kepler_third_law,
    "inverse_square_law": check_inverse_square_law,
    "circular_orbit_energy_balance": check_circular_orbit_energy_balance,
}
