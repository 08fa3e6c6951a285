"""Plot generation for orbit profiles."""

from __future__ import annotations

from pathlib import Path

import matplotlib
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from physics_validator.analysis.profile import OrbitProfile
from physics_validator.utils.constants import SECONDS_PER_MINUTE

matplotlib.use("Agg")

KM = 1_000.0


def _save_dual_format(fig: Figure, out_base: Path) -> None:
    """Write a figure to PNG and PDF with a shared base path.

    Args:
        fig: Figure object to persist.
        out_base: Output path without suffix.
    """
    out_base.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_base.with_suffix(".png"), dpi=180, bbox_inches="tight")
    fig.savefig(out_base.with_suffix(".pdf"), bbox_inches="tight")


def plot_velocity_profile(profile: OrbitProfile, out_base: Path) -> None:
    """Plot orbital and escape velocity over altitude.

    Args:
        profile: Orbit profile with velocity samples.
        out_base: Output path without suffix.
    """
    fig, ax = plt.subplots(figsize=(9, 4))
    ax.plot(profile.altitude / KM, profile.orbital_velocity / KM, lw=2.0, label="Circular orbit")
    ax.plot(profile.altitude / KM, profile.escape_velocity / KM, lw=2.0, ls="--", label="Escape")
    ax.set_xlabel("Altitude [km]")
    ax.set_ylabel("Velocity [km/s]")
    ax.set_title("Orbital and Escape Velocity")
    ax.grid(True, alpha=0.3)
    ax.legend()
    _save_dual_format(fig, out_base)
    plt.close(fig)


def plot_period_profile(profile: OrbitProfile, out_base: Path) -> None:
    """Plot circular orbit period over altitude.

    Args:
        profile: Orbit profile with period samples.
        out_base: Output path without suffix.
    """
    fig, ax = plt.subplots(figsize=(9, 4))
    ax.plot(profile.altitude / KM, profile.orbital_period / SECONDS_PER_MINUTE, lw=2.0)
    ax.set_xlabel("Altitude [km]")
    ax.set_ylabel("Period [min]")
    ax.set_title("Orbital Period")
    ax.grid(True, alpha=0.3)
    _save_dual_format(fig, out_base)
    plt.close(fig)


def plot_acceleration_profile(profile: OrbitProfile, out_base: Path) -> None:
    """Plot gravitational acceleration over altitude.

    Args:
        profile: Orbit profile with acceleration samples.
        out_base: Output path without suffix.
    """
    fig, ax = plt.subplots(figsize=(9, 4))
    ax.plot(profile.altitude / KM, profile.gravitational_acceleration, lw=2.0)
    ax.set_xlabel("Altitude [km]")
    ax.set_ylabel("Acceleration [m/s^2]")
    ax.set_title("Gravitational Acceleration")
    ax.grid(True, alpha=0.3)
    _save_dual_format(fig, out_base)
    plt.close(fig)


def export_standard_plots(profile: OrbitProfile, output_dir: str | Path) -> None:
    """Export the standard orbit-profile plots as PNG and PDF.

    Args:
        profile: Orbit profile to visualize.
        output_dir: Target directory for generated plot files.
    """
    out = Path(output_dir)
    plot_velocity_profile(profile, out / "velocity_profile")
    plot_period_profile(profile, out / "period_profile")
    plot_acceleration_profile(profile, out / "acceleration_profile")
