"""Reference-data and identity validation of the two-body functions."""

from physics_validator.validation.config import ValidationConfig, build_validation_config
from physics_validator.validation.identities import IDENTITY_CHECKS
from physics_validator.validation.reference import (
    REFERENCE_SCENARIOS,
    ReferenceScenario,
    relative_error,
)
from physics_validator.validation.results import CheckResult, ValidationReport
from physics_validator.validation.runner import run_validation

__all__ = [
    "CheckResult",
    "IDENTITY_CHECKS",
    "REFERENCE_SCENARIOS",
    "ReferenceScenario",
    "ValidationConfig",
    "ValidationReport",
    "build_validation_config",
    "relative_error",
    "run_validation",
]
