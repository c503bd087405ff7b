"""Design report: everything the UI and the fabricator need, as plain data."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from showerkit.fabrication.deductions import GlassDeductionResult
from showerkit.hardware.selector import HardwareSelection
from showerkit.quote.model import QuoteBreakdown


def build_design_report(
    layout_errors: list[str],
    measurement_errors: list[str],
    cuts: Mapping[str, GlassDeductionResult] | None = None,
    hardware: HardwareSelection | None = None,
    quote: QuoteBreakdown | None = None,
    cut_warnings: list[str] | None = None,
) -> dict[str, Any]:
    """Build a serialisable report dict."""
    return {
        "layout_errors": layout_errors,
        "measurement_errors": measurement_errors,
        "cut_warnings": cut_warnings or [],
        "cuts": {pid: r.to_dict() for pid, r in (cuts or {}).items()},
        "hardware": hardware.to_dict() if hardware is not None else None,
        "quote": quote.to_dict() if quote is not None else None,
        "ok": len(layout_errors) == 0 and len(measurement_errors) == 0,
    }


def save_design_report(report: dict[str, Any], path: Path) -> None:
    path.write_text(json.dumps(report, indent=2, ensure_ascii=False), encoding="utf-8")
