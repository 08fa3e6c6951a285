"""Export helpers for validation outputs."""

from __future__ import annotations

import json
from pathlib import Path

from physics_validator.validation.results import ValidationReport


def export_report_json(report: ValidationReport, path: str | Path) -> None:
    """Persist a validation report as JSON.

    Args:
        report: Report returned by
            :func:`physics_validator.validation.runner.run_validation`.
        path: Output file path for the JSON document.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(report.to_dict(), indent=2), encoding="utf-8")
