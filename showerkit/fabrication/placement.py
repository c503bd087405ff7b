"""Hinge / handle placement on door glass and support-structure checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from showerkit.hardware.catalog import HandleType
from showerkit.layout.graph import LayoutGraph

HINGE_CUTOUT_HEIGHT_MM = 60
HINGE_EDGE_RATIO = 0.14
HINGE_MIN_EDGE_OFFSET_MM = 230
HINGE_MAX_EDGE_OFFSET_MM = 300
HINGE_MIN_CLEAR_GAP_MM = 400

HANDLE_EDGE_CLEARANCE_MM = 75
HANDLE_HOLE_SPACING_MM = 203  # 8"
HANDLE_HINGE_MARGIN_MM = 50
KNOB_RADIUS_MM = 25
KNOB_CENTER_TARGET_MM = 950
HANDLE_BOTTOM_TARGET_MM = 850

NARROW_FIXED_PANEL_MM = 200
WIDE_RETURN_PANEL_MM = 1200


@dataclass
class HingePlacement:
    top_offset: float     # top edge -> centre of top hinge
    bottom_offset: float  # bottom edge -> centre of bottom hinge
    clear_gap: float      # glass between the two cutouts
    warning: Optional[str] = None


@dataclass
class HandlePlacement:
    height: float  # knob centre, or bottom hole of a pull handle
    edge_clearance: float
    is_valid: bool = True
    warning: Optional[str] = None


@dataclass
class SupportCheck:
    support_panel_required: bool = False
    support_panel_reason: Optional[str] = None
    support_bar_required: bool = False
    support_bar_reason: Optional[str] = None
    support_bar_panel_id: Optional[str] = None


def hinge_placement(glass_height: float) -> HingePlacement:
    """Two-hinge placement: 14% of height from each edge, clamped to 230–300mm."""
    offset = round(glass_height * HINGE_EDGE_RATIO)
    offset = max(HINGE_MIN_EDGE_OFFSET_MM, min(HINGE_MAX_EDGE_OFFSET_MM, offset))
    clear_gap = glass_height - 2 * offset - HINGE_CUTOUT_HEIGHT_MM

    warning = None
    if clear_gap < HINGE_MIN_CLEAR_GAP_MM:
        warning = (
            f"Hinge clear gap ({clear_gap:g}mm) is less than "
            f"{HINGE_MIN_CLEAR_GAP_MM}mm minimum"
        )
    return HingePlacement(offset, offset, clear_gap, warning)


def handle_placement(
    glass_height: float,
    handle_type: HandleType | str,
    hinges: HingePlacement,
) -> HandlePlacement:
    """Place the handle and check it keeps clear of the hinge cutouts."""
    if HandleType(handle_type) is HandleType.KNOB:
        target = KNOB_CENTER_TARGET_MM
        top = target + KNOB_RADIUS_MM
    else:
        target = HANDLE_BOTTOM_TARGET_MM
        top = target + HANDLE_HOLE_SPACING_MM

    half_cutout = HINGE_CUTOUT_HEIGHT_MM / 2
    bottom_hinge_top = hinges.bottom_offset + half_cutout
    top_hinge_bottom = glass_height - hinges.top_offset - half_cutout

    if (
        target < bottom_hinge_top + HANDLE_HINGE_MARGIN_MM
        or top > top_hinge_bottom - HANDLE_HINGE_MARGIN_MM
    ):
        return HandlePlacement(
            target,
            HANDLE_EDGE_CLEARANCE_MM,
            is_valid=False,
            warning="Handle position may conflict with hinge location",
        )
    return HandlePlacement(target, HANDLE_EDGE_CLEARANCE_MM)


def check_support(
    graph: LayoutGraph,
    widths: Optional[Mapping[str, float]] = None,
) -> SupportCheck:
    """Flag narrow fixed panels beside doors and wide free-standing returns.

    *widths* maps panel ids to glass widths (e.g. the cut sizes); panels
    missing from it fall back to their own ``width_mm``.  Panels with no
    known width are skipped.  A return tied into a support panel does not
    also need a bar.
    """
    result = SupportCheck()
    panels = graph.panels
    widths = widths or {}
    known = {p.panel_id: widths.get(p.panel_id, p.width_mm) for p in panels}

    for door in (p for p in panels if p.is_door):
        for adj in panels:
            if adj.is_door or abs(adj.position_index - door.position_index) != 1:
                continue
            width = known[adj.panel_id]
            if width and width <= NARROW_FIXED_PANEL_MM:
                result.support_panel_required = True
                result.support_panel_reason = (
                    f"Narrow fixed panel {adj.panel_id} ({width:g}mm) adjacent to door"
                )
                break

    if result.support_panel_required:
        return result

    for ret in (p for p in panels if p.is_return):
        width = known[ret.panel_id]
        if width and width >= WIDE_RETURN_PANEL_MM:
            result.support_bar_required = True
            result.support_bar_reason = (
                f"Return panel {ret.panel_id} is {width:g}mm+ and free-standing"
            )
            result.support_bar_panel_id = ret.panel_id
            break
    return result
