"""Validation run configuration dataclasses."""

from __future__ import annotations

import math
from dataclasses import dataclass

from physics_validator.utils.constants import EARTH_MASS, EARTH_RADIUS
from physics_validator.utils.exceptions import ConfigurationError

DEFAULT_REFERENCE_TOLERANCE = 1e-2
DEFAULT_IDENTITY_TOLERANCE = 1e-6
DEFAULT_CENTRAL_MASS = EARTH_MASS
DEFAULT_IDENTITY_RADIUS = 2.0 * EARTH_RADIUS


@dataclass(frozen=True)
class ValidationConfig:
    """Controls for one validation run.

    Args:
        reference_tolerance: Maximum relative error accepted when comparing
            against real-world reference values.
        identity_tolerance: Maximum relative error accepted for algebraic
            identity checks between functions.
        central_mass: Central body mass used by identity checks [kg].
        identity_radius: Orbital radius used by identity checks [m].
        include_references: Run the real-world reference scenarios.
        include_identities: Run the physical identity checks.
    """

    reference_tolerance: float = DEFAULT_REFERENCE_TOLERANCE
    identity_tolerance: float = DEFAULT_IDENTITY_TOLERANCE
    central_mass: float = DEFAULT_CENTRAL_MASS
    identity_radius: float = DEFAULT_IDENTITY_RADIUS
    include_references: bool = True
    include_identities: bool = True

    def validate(self) -> None:
        """Validate tolerances, identity-check inputs and enabled groups.

        Raises:
            physics_validator.utils.exceptions.ConfigurationError: If any
                value violates its bound or no check group is enabled.
        """
        if not math.isfinite(self.reference_tolerance) or self.reference_tolerance <= 0.0:
            msg = "reference_tolerance must be positive and finite"
            raise ConfigurationError(msg)
        if not math.isfinite(self.identity_tolerance) or self.identity_tolerance <= 0.0:
            msg = "identity_tolerance must be positive and finite"
            raise ConfigurationError(msg)
        if not math.isfinite(self.central_mass) or self.central_mass <= 0.0:
            msg = "central_mass must be positive and finite"
            raise ConfigurationError(msg)
        if not math.isfinite(self.identity_radius) or self.identity_radius <= 0.0:
            msg = "identity_radius must be positive and finite"
            raise ConfigurationError(msg)
        if not (self.include_references or self.include_identities):
            msg = "at least one of include_references or include_identities must be enabled"
            raise ConfigurationError(msg)


def build_validation_config(
    *,
    reference_tolerance: float = DEFAULT_REFERENCE_TOLERANCE,
    identity_tolerance: float = DEFAULT_IDENTITY_TOLERANCE,
    central_mass: float = DEFAULT_CENTRAL_MASS,
    identity_radius: float = DEFAULT_IDENTITY_RADIUS,
    include_references: bool = True,
    include_identities: bool = True,
) -> ValidationConfig:
    """Build a validated validation-run configuration.

    Args:
        reference_tolerance: Relative tolerance for reference scenarios.
        identity_tolerance: Relative tolerance for identity checks.
        central_mass: Central body mass for identity checks [kg].
        identity_radius: Orbital radius for identity checks [m].
        include_references: Run the real-world reference scenarios.
        include_identities: Run the physical identity checks.

    Returns:
        Validated :class:`ValidationConfig`.

    Raises:
        physics_validator.utils.exceptions.ConfigurationError: If the
            resulting configuration is invalid.
    """
    config = ValidationConfig(
        reference_tolerance=reference_tolerance,
        identity_tolerance=identity_tolerance,
        central_mass=central_mass,
        identity_radius=identity_radius,
        include_references=include_references,
        include_identities=include_identities,
    )
    config.validate()
    return config
