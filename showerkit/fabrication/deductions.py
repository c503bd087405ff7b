"""Glass deductions: tight opening -> cut size.

Fixed panels
    clamps   width -3 (wall gap), height -3 (floor gap)
    channel  width -10 (wall channel); height -5 floor only, or
             -12 (6 top + 6 bottom) floor-to-ceiling
Doors
    width    hinge gap 4 + strike gap (4, or 11 with a magnetic profile)
    height   bottom clearance (10 drip rail, 16 over a threshold) + top 4

Weight is taken from the *cut* size: area_m² x thickness_mm x density factor.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional

from showerkit.config import DeductionRules
from showerkit.layout.graph import LayoutGraph
from showerkit.layout.model import MeasurementInput, MountingStyle, PanelKind

logger = logging.getLogger(__name__)

MAGNETIC_SEAL = "magnetic"


@dataclass
class GlassDeductionResult:
    """Cut size of one panel and how it was derived."""

    glass_width: float
    glass_height: float
    deduction_width: float
    deduction_height: float
    weight: float  # kg
    notes: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def undersized(self) -> bool:
        return bool(self.warnings)

    @property
    def area_m2(self) -> float:
        return (self.glass_width / 1000) * (self.glass_height / 1000)

    def to_dict(self) -> dict:
        return {
            "glass_width": self.glass_width,
            "glass_height": self.glass_height,
            "deduction_width": self.deduction_width,
            "deduction_height": self.deduction_height,
            "weight": self.weight,
            "notes": list(self.notes),
            "warnings": list(self.warnings),
        }


def glass_weight(
    width_mm: float,
    height_mm: float,
    thickness_mm: float = 10,
    density_factor: float = 2.5,
) -> float:
    """Panel weight in kg (area x thickness x density factor)."""
    area_m2 = (width_mm / 1000) * (height_mm / 1000)
    return area_m2 * thickness_mm * density_factor


def compute_deductions(
    panel_kind: PanelKind | str,
    measurement: MeasurementInput,
    rules: Optional[DeductionRules] = None,
    thickness_mm: float = 10,
) -> GlassDeductionResult:
    """Return the cut size for one panel.

    Raises
    ------
    ValueError
        If a tight dimension is not larger than its deduction.
    """
    rules = rules or DeductionRules()
    if not isinstance(panel_kind, PanelKind):
        panel_kind = PanelKind.from_str(panel_kind)
    mounting = MountingStyle(measurement.mounting_method)
    notes: list[str] = []

    if panel_kind is PanelKind.FIXED:
        if mounting is MountingStyle.CLAMPS:
            width_ded = rules.clamp_gap
            height_ded = rules.clamp_gap
            notes.append(f"Clamp Mounting: -{_mm(width_ded)}mm width (wall gap)")
            notes.append(f"Clamp Mounting: -{_mm(height_ded)}mm height (floor gap)")
        else:
            width_ded = rules.channel_wall
            notes.append(f"Channel Mounting: -{_mm(width_ded)}mm width (wall channel)")
            if measurement.ceiling_fixed:
                per_side = rules.channel_ceiling_per_side
                height_ded = per_side * 2
                notes.append(
                    f"Channel Mounting (F2C): -{_mm(height_ded)}mm height "
                    f"({_mm(per_side)}mm top + {_mm(per_side)}mm bottom)"
                )
            else:
                height_ded = rules.channel_floor
                notes.append(f"Channel Mounting: -{_mm(height_ded)}mm height (floor channel)")
    else:
        hinge_gap = rules.door_hinge_gap
        strike_gap = rules.door_strike_gap
        if (measurement.seal_type or "").lower() == MAGNETIC_SEAL:
            strike_gap = rules.door_strike_gap_magnetic
            notes.append(f"Magnetic Seal: Using {_mm(strike_gap)}mm strike gap")
        width_ded = hinge_gap + strike_gap

        bottom_gap = (
            rules.door_bottom_threshold if measurement.has_threshold else rules.door_bottom_drip
        )
        height_ded = bottom_gap + rules.door_top
        notes.append(
            f"Door Width: -{_mm(width_ded)}mm ({_mm(hinge_gap)}mm Hinge + {_mm(strike_gap)}mm Strike)"
        )
        notes.append(
            f"Door Height: -{_mm(height_ded)}mm "
            f"(Sweep/Clearance: {_mm(bottom_gap)}mm + {_mm(rules.door_top)}mm)"
        )

    if measurement.tight_width <= width_ded or measurement.tight_height <= height_ded:
        raise ValueError(
            f"Tight opening {measurement.tight_width}x{measurement.tight_height}mm "
            f"is too small for deductions {width_ded}x{height_ded}mm."
        )

    glass_w = measurement.tight_width - width_ded
    glass_h = measurement.tight_height - height_ded

    warnings: list[str] = []
    if glass_w < rules.min_glass_width:
        warnings.append(
            f"Cut width {_mm(glass_w)}mm is below the minimum usable {_mm(rules.min_glass_width)}mm."
        )
    if glass_h < rules.min_glass_height:
        warnings.append(
            f"Cut height {_mm(glass_h)}mm is below the minimum usable {_mm(rules.min_glass_height)}mm."
        )

    weight = glass_weight(glass_w, glass_h, thickness_mm, rules.density_factor)

    return GlassDeductionResult(
        glass_width=glass_w,
        glass_height=glass_h,
        deduction_width=width_ded,
        deduction_height=height_ded,
        weight=round(weight, 2),
        notes=notes,
        warnings=warnings,
    )


def compute_layout_deductions(
    graph: LayoutGraph,
    measurements: Mapping[str, MeasurementInput],
    rules: Optional[DeductionRules] = None,
    thickness_mm: float = 10,
) -> dict[str, GlassDeductionResult]:
    """Return {panel_id: GlassDeductionResult} for every measured panel."""
    results: dict[str, GlassDeductionResult] = {}
    for panel in graph.panels:
        m = measurements.get(panel.panel_id)
        if m is None:
            logger.debug("No measurement for panel %s; skipped", panel.panel_id)
            continue
        results[panel.panel_id] = compute_deductions(panel.kind, m, rules, thickness_mm)
    return results


def _mm(value: float) -> str:
    """Format a millimetre value without a trailing .0."""
    return f"{value:g}"
