"""Validation checks for measurements, layouts and cut sizes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from showerkit.config import MeasurementLimits
from showerkit.fabrication.deductions import GlassDeductionResult
from showerkit.layout.graph import LayoutGraph
from showerkit.layout.model import Junction

_MEASUREMENT_LABELS = {
    "width": ("Width", "mm"),
    "height": ("Height", "mm"),
    "depth": ("Depth", "mm"),
    "rake_angle": ("Rake angle", "°"),
}


@dataclass
class MeasurementCheck:
    valid: bool
    error: Optional[str] = None


def validate_measurement(
    kind: str,
    value: float,
    limits: MeasurementLimits | None = None,
) -> MeasurementCheck:
    """Check one measurement against its accepted range.

    Out-of-range values come back as an invalid check; an unknown *kind*
    is a programming error and raises ``ValueError``.
    """
    if kind not in _MEASUREMENT_LABELS:
        raise ValueError(f"Unknown measurement kind '{kind}'")
    limits = limits or MeasurementLimits()
    lo, hi = getattr(limits, kind)
    label, unit = _MEASUREMENT_LABELS[kind]

    if value < lo:
        return MeasurementCheck(False, f"{label} must be at least {lo:g}{unit}")
    if value > hi:
        return MeasurementCheck(False, f"{label} must not exceed {hi:g}{unit}")
    return MeasurementCheck(True)


def validate_measurements(opening, limits: MeasurementLimits | None = None) -> list[str]:
    """Return errors for an :class:`~showerkit.design.OpeningMeasurements`."""
    errors: list[str] = []
    values = {"width": opening.width, "height": opening.height}
    if opening.depth is not None:
        values["depth"] = opening.depth
    for kind, value in values.items():
        check = validate_measurement(kind, value, limits)
        if not check.valid:
            errors.append(check.error)
    return errors


def validate_layout(
    graph: LayoutGraph,
    junctions: Iterable[Junction] | None = None,
) -> list[str]:
    """Return a list of layout-level validation errors.

    *junctions* is the source junction list the graph was built from; any
    of them that the graph dropped (unknown panel) is reported.
    """
    errors: list[str] = []
    errors.extend(graph.validate())

    # Check that source junctions reference known panels
    panel_ids = {p.panel_id for p in graph.panels}
    for j in junctions or ():
        for ref in (j.a_panel_id, j.b_panel_id):
            if ref not in panel_ids:
                errors.append(f"Junction '{j.junction_id}' references unknown panel: {ref}")

    for p in graph.panels:
        if p.is_door:
            if p.hinge_side is None or p.handle_side is None:
                errors.append(f"Door '{p.panel_id}' needs both a hinge side and a handle side.")
            elif p.hinge_side is p.handle_side:
                errors.append(f"Door '{p.panel_id}' has hinge and handle on the same edge.")
        elif p.hinge_side is not None or p.handle_side is not None:
            errors.append(f"Fixed panel '{p.panel_id}' cannot carry a hinge or handle.")

    return errors


def validate_cut_sizes(results: Mapping[str, GlassDeductionResult]) -> list[str]:
    """Return warnings for panels whose cut glass is below the usable minimum."""
    warnings: list[str] = []
    for panel_id, result in results.items():
        for w in result.warnings:
            warnings.append(f"{panel_id}: {w}")
    return warnings
