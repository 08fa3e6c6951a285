"""Compute an Earth orbit profile from LEO to beyond GEO and export plots."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from physics_validator.analysis import compute_orbit_profile, export_standard_plots
from physics_validator.utils import configure_logging


def main() -> None:
    """Sample circular-orbit quantities over altitude and export standard plots."""
    configure_logging(logging.INFO)
    logger = logging.getLogger("orbit_profile_example")

    altitudes = np.linspace(200_000.0, 40_000_000.0, 400)
    profile = compute_orbit_profile(altitudes)

    output_dir = Path(__file__).resolve().parent / "output" / "orbit_profile"
    export_standard_plots(profile, output_dir)

    logger.info(
        "Velocity: %.1f m/s at %.0f km | %.1f m/s at %.0f km",
        profile.orbital_velocity[0],
        profile.altitude[0] / 1_000.0,
        profile.orbital_velocity[-1],
        profile.altitude[-1] / 1_000.0,
    )
    logger.info(
        "Period: %.1f min at %.0f km | %.2f h at %.0f km",
        profile.orbital_period[0] / 60.0,
        profile.altitude[0] / 1_000.0,
        profile.orbital_period[-1] / 3_600.0,
        profile.altitude[-1] / 1_000.0,
    )
    logger.info("Plots written to %s", output_dir)


if __name__ == "__main__":
    main()
