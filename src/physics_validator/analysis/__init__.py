"""Orbit profile analysis and export tools."""

from physics_validator.analysis.export import export_report_json
from physics_validator.analysis.plots import export_standard_plots
from physics_validator.analysis.profile import OrbitProfile, compute_orbit_profile

__all__ = [
    "OrbitProfile",
    "compute_orbit_profile",
    "export_report_json",
    "export_standard_plots",
]
