"""Run reference and identity checks against the two-body functions."""

from __future__ import annotations

import logging

from physics_validator.validation.config import ValidationConfig
from physics_validator.validation.identities import IDENTITY_CHECKS
from physics_validator.validation.reference import (
    REFERENCE_SCENARIOS,
    ReferenceScenario,
    relative_error,
)
from physics_validator.validation.results import REFERENCE_GROUP, CheckResult, ValidationReport

logger = logging.getLogger(__name__)


def _check_reference(scenario: ReferenceScenario, tolerance: float) -> CheckResult:
    """Evaluate one reference scenario against its real-world value.

    Args:
        scenario: Reference scenario to evaluate.
        tolerance: Maximum accepted relative error.

    Returns:
        Reference-group :class:`CheckResult`.
    """
    actual = scenario.evaluate()
    return CheckResult(
        name=scenario.name,
        group=REFERENCE_GROUP,
        actual=actual,
        expected=scenario.expected,
        relative_error=relative_error(actual, scenario.expected),
        tolerance=tolerance,
        unit=scenario.unit,
    )


def run_validation(
    config: ValidationConfig | None = None,
    scenarios: tuple[ReferenceScenario, ...] = REFERENCE_SCENARIOS,
) -> ValidationReport:
    """Run all enabled validation checks.

    Args:
        config: Validation configuration. Defaults to :class:`ValidationConfig`.
        scenarios: Reference scenarios evaluated when references are enabled.

    Returns:
        Report with one result per executed check.

    Raises:
        physics_validator.utils.exceptions.ConfigurationError: If ``config``
            or one of ``scenarios`` is invalid.
    """
    cfg = config if config is not None else ValidationConfig()
    cfg.validate()

    checks: list[CheckResult] = []
    if cfg.include_references:
        checks.extend(_check_reference(scenario, cfg.reference_tolerance) for scenario in scenarios)
    if cfg.include_identities:
        checks.extend(
            check(cfg.central_mass, cfg.identity_radius, cfg.identity_tolerance)
            for check in IDENTITY_CHECKS.values()
        )

    for check in checks:
        logger.debug(
            "%s/%s: actual=%.9g expected=%.9g rel_err=%.3e tol=%.1e passed=%s",
            check.group,
            check.name,
            check.actual,
            check.expected,
            check.relative_error,
            check.tolerance,
            check.passed,
        )

    report = ValidationReport(checks=tuple(checks))
    if report.passed:
        logger.info("All %d physics checks passed", len(report.checks))
    else:
        logger.warning(
            "%d of %d physics checks failed: %s",
            len(report.failures),
            len(report.checks),
            ", ".join(check.name for check in report.failures),
        )
    return report
