"""Unit tests for validation configuration, scenarios and the runner."""

from __future__ import annotations

import math
import unittest

from physics_validator.utils.exceptions import ConfigurationError
from physics_validator.validation import (
    IDENTITY_CHECKS,
    REFERENCE_SCENARIOS,
    ReferenceScenario,
    ValidationConfig,
    build_validation_config,
    relative_error,
    run_validation,
)
from physics_validator.validation.results import CheckResult, ValidationReport


class RelativeErrorTests(unittest.TestCase):
    """Validate relative-error semantics including degenerate references."""

    def test_relative_error_is_symmetric_in_sign(self) -> None:
        """Measure deviation magnitude relative to the expected value."""
        self.assertAlmostEqual(relative_error(110.0, 100.0), 0.1, delta=1e-12)
        self.assertAlmostEqual(relative_error(90.0, 100.0), 0.1, delta=1e-12)
        self.assertAlmostEqual(relative_error(-90.0, -100.0), 0.1, delta=1e-12)

    def test_zero_reference_gives_non_finite_error(self) -> None:
        """Return ``inf`` or ``nan`` for a zero reference value."""
        self.assertTrue(math.isinf(relative_error(1.0, 0.0)))
        self.assertTrue(math.isnan(relative_error(0.0, 0.0)))


class ValidationConfigTests(unittest.TestCase):
    """Validate configuration bounds."""

    def test_default_config_is_valid(self) -> None:
        """Accept default tolerances and Earth-based identity inputs."""
        config = build_validation_config()
        self.assertEqual(config.reference_tolerance, 1e-2)
        self.assertEqual(config.identity_tolerance, 1e-6)

    def test_invalid_values_are_rejected(self) -> None:
        """Reject non-positive or non-finite tolerances, masses and radii."""
        invalid = (
            {"reference_tolerance": 0.0},
            {"identity_tolerance": -1e-6},
            {"identity_tolerance": float("nan")},
            {"central_mass": 0.0},
            {"identity_radius": float("inf")},
            {"include_references": False, "include_identities": False},
        )
        for overrides in invalid:
            with self.subTest(overrides=overrides):
                with self.assertRaises(ConfigurationError):
                    build_validation_config(**overrides)


class ValidationRunnerTests(unittest.TestCase):
    """Validate check execution and report aggregation."""

    def test_default_run_passes_all_checks(self) -> None:
        """Pass every reference scenario and identity with default tolerances."""
        report = run_validation()
        self.assertTrue(report.passed, msg=[check.name for check in report.failures])
        self.assertEqual(len(report.checks), len(REFERENCE_SCENARIOS) + len(IDENTITY_CHECKS))
        self.assertEqual(report.failures, ())

    def test_groups_can_be_disabled(self) -> None:
        """Run only the enabled check group."""
        references = run_validation(ValidationConfig(include_identities=False))
        identities = run_validation(ValidationConfig(include_references=False))
        self.assertEqual({check.group for check in references.checks}, {"reference"})
        self.assertEqual({check.group for check in identities.checks}, {"identity"})
        self.assertEqual(len(identities.checks), len(IDENTITY_CHECKS))

    def test_tight_reference_tolerance_reports_failures(self) -> None:
        """Report reference failures as data once tolerance is below the data spread."""
        report = run_validation(
            ValidationConfig(reference_tolerance=1e-9, include_identities=False)
        )
        self.assertFalse(report.passed)
        self.assertGreater(len(report.failures), 0)

    def test_failures_are_logged_as_warning(self) -> None:
        """Emit a warning summary when checks fail."""
        with self.assertLogs("physics_validator.validation.runner", level="WARNING") as logs:
            run_validation(ValidationConfig(reference_tolerance=1e-9, include_identities=False))
        self.assertIn("checks failed", logs.output[0])

    def test_identity_checks_hold_for_other_bodies(self) -> None:
        """Hold identities for a Jupiter-mass body at Jupiter's radius."""
        report = run_validation(
            ValidationConfig(
                central_mass=1.898e27,
                identity_radius=6.9911e7,
                include_references=False,
            )
        )
        self.assertTrue(report.passed)

    def test_custom_scenario_with_unknown_quantity_raises(self) -> None:
        """Reject scenarios that reference an unknown function."""
        scenario = ReferenceScenario(
            name="bogus",
            quantity="hyperbolic_excess_velocity",
            arguments=(1.0, 1.0),
            expected=1.0,
            unit="m/s",
        )
        with self.assertRaises(ConfigurationError):
            run_validation(scenarios=(scenario,))

    def test_invalid_config_raises_before_running(self) -> None:
        """Validate the configuration passed directly to the runner."""
        with self.assertRaises(ConfigurationError):
            run_validation(ValidationConfig(reference_tolerance=-1.0))


class ReportTests(unittest.TestCase):
    """Validate check result and report semantics."""

    def test_nan_error_never_passes(self) -> None:
        """Fail checks whose relative error is ``nan``."""
        check = CheckResult(
            name="nan",
            group="reference",
            actual=float("nan"),
            expected=1.0,
            relative_error=float("nan"),
            tolerance=1.0,
        )
        self.assertFalse(check.passed)

    def test_to_dict_contains_status_and_checks(self) -> None:
        """Serialize pass status, counts and per-check entries."""
        passing = CheckResult("ok", "identity", 4.0, 4.0, 0.0, 1e-6)
        failing = CheckResult("bad", "identity", 5.0, 4.0, 0.25, 1e-6)
        payload = ValidationReport(checks=(passing, failing)).to_dict()
        self.assertFalse(payload["passed"])
        self.assertEqual(payload["check_count"], 2)
        self.assertEqual(payload["failure_count"], 1)
        self.assertEqual(payload["checks"][1]["name"], "bad")
        self.assertFalse(payload["checks"][1]["passed"])


if __name__ == "__main__":
    unittest.main()
