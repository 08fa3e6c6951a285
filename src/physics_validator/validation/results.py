"""Result containers for validation runs."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

REFERENCE_GROUP = "reference"
IDENTITY_GROUP = "identity"


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one validation check.

    Args:
        name: Check identifier.
        group: Check group, ``"reference"`` or ``"identity"``.
        actual: Value produced by the two-body functions.
        expected: Value the check compares against.
        relative_error: Relative deviation of ``actual`` from ``expected``.
        tolerance: Maximum accepted relative error.
        unit: Unit of ``actual`` and ``expected``. Empty for ratios.
    """

    name: str
    group: str
    actual: float
    expected: float
    relative_error: float
    tolerance: float
    unit: str = ""

    @property
    def passed(self) -> bool:
        """Whether the relative error lies strictly below the tolerance.

        Returns:
            ``True`` if the check passed. ``nan`` errors never pass.
        """
        return self.relative_error < self.tolerance


@dataclass(frozen=True)
class ValidationReport:
    """Collection of check results from one validation run.

    Args:
        checks: Check results in execution order.
    """

    checks: tuple[CheckResult, ...]

    @property
    def passed(self) -> bool:
        """Whether every check in the report passed.

        Returns:
            ``True`` if no check failed.
        """
        return all(check.passed for check in self.checks)

    @property
    def failures(self) -> tuple[CheckResult, ...]:
        """Checks whose relative error reached the tolerance.

        Returns:
            Failed check results in execution order.
        """
        return tuple(check for check in self.checks if not check.passed)

    def to_dict(self) -> dict[str, Any]:
        """Convert the report to a JSON-serializable mapping.

        Returns:
            Mapping with overall status, counts and per-check entries.
        """
        return {
            "passed": self.passed,
            "check_count": len(self.checks),
            "failure_count": len(self.failures),
            "checks": [{**asdict(check), "passed": check.passed} for check in self.checks],
        }
