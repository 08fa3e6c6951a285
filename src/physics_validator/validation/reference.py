"""Real-world reference scenarios for the two-body formulas."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from physics_validator.mechanics import (
    escape_velocity,
    gravitational_acceleration,
    gravitational_force,
    orbital_period,
    orbital_velocity,
)
from physics_validator.utils.constants import EARTH_MASS, EARTH_RADIUS, SECONDS_PER_DAY
from physics_validator.utils.exceptions import ConfigurationError

LEO_ALTITUDE = 400_000.0
GEO_ALTITUDE = 35_786_000.0
ISS_ALTITUDE = 408_000.0
MOON_DISTANCE = 384_400_000.0
HUMAN_MASS = 70.0

QUANTITY_FUNCTIONS: dict[str, Callable[..., float]] = {
    "orbital_velocity": orbital_velocity,
    "orbital_period": orbital_period,
    "escape_velocity": escape_velocity,
    "gravitational_force": gravitational_force,
    "gravitational_acceleration": gravitational_acceleration,
}


def relative_error(actual: float, expected: float) -> float:
    """Compute the relative deviation of a value from its expectation.

    Args:
        actual: Computed value.
        expected: Reference value. ``0.0`` yields ``inf`` or ``nan``.

    Returns:
        ``|actual - expected| / |expected|``.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.abs((np.float64(actual) - np.float64(expected)) / np.float64(expected)))


@dataclass(frozen=True)
class ReferenceScenario:
    """One known real-world value of a two-body quantity.

    Args:
        name: Short identifier of the scenario.
        quantity: Name of the evaluated function, a key of ``QUANTITY_FUNCTIONS``.
        arguments: Positional arguments passed to the function.
        expected: Real-world reference value.
        unit: Unit of ``expected``.
        description: Human-readable context of the reference value.
    """

    name: str
    quantity: str
    arguments: tuple[float, ...]
    expected: float
    unit: str
    description: str = ""

    def validate(self) -> None:
        """Validate that the scenario references a known quantity.

        Raises:
            physics_validator.utils.exceptions.ConfigurationError: If
                ``quantity`` does not name a two-body function.
        """
        if self.quantity not in QUANTITY_FUNCTIONS:
            msg = (
                "quantity must be one of "
                f"{tuple(QUANTITY_FUNCTIONS)}, got: {self.quantity!r}"
            )
            raise ConfigurationError(msg)

    def evaluate(self) -> float:
        """Evaluate the scenario's function on its arguments.

        Returns:
            Computed value in ``unit``.

        Raises:
            physics_validator.utils.exceptions.ConfigurationError: If the
                scenario is invalid.
        """
        self.validate()
        return QUANTITY_FUNCTIONS[self.quantity](*self.arguments)


REFERENCE_SCENARIOS: tuple[ReferenceScenario, ...] = (
    ReferenceScenario(
        name="leo_orbital_velocity",
        quantity="orbital_velocity",
        arguments=(EARTH_MASS, EARTH_RADIUS + LEO_ALTITUDE),
        expected=7670.0,
        unit="m/s",
        description="Low Earth orbit at 400 km altitude",
    ),
    ReferenceScenario(
        name="geo_orbital_period",
        quantity="orbital_period",
        arguments=(EARTH_MASS, EARTH_RADIUS + GEO_ALTITUDE),
        expected=SECONDS_PER_DAY,
        unit="s",
        description="Geostationary orbit completes one orbit per day",
    ),
    ReferenceScenario(
        name="earth_escape_velocity",
        quantity="escape_velocity",
        arguments=(EARTH_MASS, EARTH_RADIUS),
        expected=11186.0,
        unit="m/s",
        description="Escape velocity from Earth's surface",
    ),
    ReferenceScenario(
        name="human_weight",
        quantity="gravitational_force",
        arguments=(EARTH_MASS, HUMAN_MASS, EARTH_RADIUS),
        expected=686.0,
        unit="N",
        description="Weight of a 70 kg person on Earth's surface",
    ),
    ReferenceScenario(
        name="surface_gravity",
        quantity="gravitational_acceleration",
        arguments=(EARTH_MASS, EARTH_RADIUS),
        expected=9.81,
        unit="m/s^2",
        description="Gravitational acceleration on Earth's surface",
    ),
    ReferenceScenario(
        name="iss_orbital_velocity",
        quantity="orbital_velocity",
        arguments=(EARTH_MASS, EARTH_RADIUS + ISS_ALTITUDE),
        expected=7660.0,
        unit="m/s",
        description="International Space Station at 408 km altitude",
    ),
    ReferenceScenario(
        name="iss_orbital_period",
        quantity="orbital_period",
        arguments=(EARTH_MASS, EARTH_RADIUS + ISS_ALTITUDE),
        expected=5560.8,
        unit="s",
        description="International Space Station orbit of about 92.68 minutes",
    ),
    ReferenceScenario(
        name="moon_orbital_velocity",
        quantity="orbital_velocity",
        arguments=(EARTH_MASS, MOON_DISTANCE),
        expected=1022.0,
        unit="m/s",
        description="Moon at its 384,400 km mean distance",
    ),
    ReferenceScenario(
        name="moon_orbital_period",
        quantity="orbital_period",
        arguments=(EARTH_MASS, MOON_DISTANCE),
        expected=27.3 * SECONDS_PER_DAY,
        unit="s",
        description="Sidereal month of about 27.3 days",
    ),
)
