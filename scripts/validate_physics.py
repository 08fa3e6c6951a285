"""Validate the two-body physics functions against reference data and identities."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from physics_validator.analysis import export_report_json
from physics_validator.utils import configure_logging
from physics_validator.validation import (
    ValidationReport,
    build_validation_config,
    run_validation,
)
from physics_validator.validation.config import (
    DEFAULT_IDENTITY_TOLERANCE,
    DEFAULT_REFERENCE_TOLERANCE,
)


def _format_table(report: ValidationReport) -> str:
    """Render a validation report as a Markdown table.

    Args:
        report: Validation report to render.

    Returns:
        Markdown table with one row per check.
    """
    lines = [
        "| Check | Group | Actual | Expected | Rel. Error | Tolerance | Status |",
        "| --- | --- | ---: | ---: | ---: | ---: | --- |",
    ]
    for check in report.checks:
        unit = f" {check.unit}" if check.unit else ""
        status = "pass" if check.passed else "FAIL"
        lines.append(
            f"| {check.name} | {check.group} | {check.actual:.6g}{unit} | "
            f"{check.expected:.6g}{unit} | {check.relative_error:.3e} | "
            f"{check.tolerance:.1e} | {status} |"
        )
    return "\n".join(lines)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    Args:
        argv: Optional argument list. Defaults to ``sys.argv[1:]``.

    Returns:
        Parsed command-line namespace.
    """
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--reference-tolerance", type=float, default=DEFAULT_REFERENCE_TOLERANCE)
    parser.add_argument("--identity-tolerance", type=float, default=DEFAULT_IDENTITY_TOLERANCE)
    parser.add_argument("--skip-references", action="store_true")
    parser.add_argument("--skip-identities", action="store_true")
    parser.add_argument("--output", type=Path, default=None, help="Optional JSON report path.")
    parser.add_argument("--verbose", action="store_true", help="Log every check result.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Run the validation suite and exit non-zero on any failed check.

    Args:
        argv: Optional argument list. Defaults to ``sys.argv[1:]``.
    """
    args = _parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    config = build_validation_config(
        reference_tolerance=args.reference_tolerance,
        identity_tolerance=args.identity_tolerance,
        include_references=not args.skip_references,
        include_identities=not args.skip_identities,
    )
    report = run_validation(config)
    print(_format_table(report))

    if args.output is not None:
        export_report_json(report, args.output)

    if not report.passed:
        print(f"\n{len(report.failures)} of {len(report.checks)} checks failed.")
        raise SystemExit(1)
    print(f"\nAll {len(report.checks)} checks passed.")


if __name__ == "__main__":
    main()
