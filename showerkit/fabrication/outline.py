"""Cut-panel outlines.

Builds a Shapely polygon (millimetres, origin at the bottom-left corner of
the cut glass) for each panel, with bottom notches removed and sloped tops
dropped on the low side, and writes them as GeoJSON for the rendering side.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from shapely.geometry import Polygon, box, mapping

from showerkit.fabrication.deductions import GlassDeductionResult
from showerkit.layout.model import Panel, Side, TopEdgeType

logger = logging.getLogger(__name__)


def panel_outline(panel: Panel, result: GlassDeductionResult) -> Polygon:
    """Return the cut outline of *panel* sized from *result*."""
    w = result.glass_width
    h = result.glass_height

    top = panel.top_edge
    if top.type is TopEdgeType.SLOPED and top.drop_mm:
        drop = min(float(top.drop_mm), h)
        left_h = h - drop if top.direction is Side.LEFT else h
        right_h = h - drop if top.direction is Side.RIGHT else h
        outline = Polygon([(0, 0), (w, 0), (w, right_h), (0, left_h)])
    else:
        outline = box(0, 0, w, h)

    notches = panel.notches
    if notches.any and notches.width_mm and notches.height_mm:
        nw, nh = float(notches.width_mm), float(notches.height_mm)
        if notches.bottom_left:
            outline = outline.difference(box(0, 0, nw, nh))
        if notches.bottom_right:
            outline = outline.difference(box(w - nw, 0, w, nh))
    return outline


def outline_area_m2(outline: Polygon) -> float:
    return outline.area / 1_000_000


def check_outline(panel: Panel, result: GlassDeductionResult) -> list[str]:
    """Return problems with notches / slope that do not fit the cut glass."""
    issues: list[str] = []
    n = panel.notches
    if n.any:
        if not n.width_mm or not n.height_mm:
            issues.append(f"Panel '{panel.panel_id}' has a notch without a size.")
        else:
            count = int(n.bottom_left) + int(n.bottom_right)
            if n.width_mm * count >= result.glass_width or n.height_mm >= result.glass_height:
                issues.append(f"Panel '{panel.panel_id}' notches do not fit the cut glass.")
    t = panel.top_edge
    if t.type is TopEdgeType.SLOPED:
        if t.direction is None or not t.drop_mm:
            issues.append(f"Panel '{panel.panel_id}' sloped top needs a direction and drop.")
        elif t.drop_mm >= result.glass_height:
            issues.append(f"Panel '{panel.panel_id}' slope drop exceeds the glass height.")
    return issues


def save_outlines_geojson(outlines: dict[str, Polygon], path: Path) -> None:
    """Save outlines as a GeoJSON FeatureCollection (units: mm)."""
    features = []
    for panel_id, poly in outlines.items():
        features.append(
            {
                "type": "Feature",
                "properties": {
                    "panel_id": panel_id,
                    "area_m2": round(outline_area_m2(poly), 4),
                },
                "geometry": mapping(poly),
            }
        )
    fc = {"type": "FeatureCollection", "features": features}
    path.write_text(json.dumps(fc, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.debug("Saved panel outlines GeoJSON → %s", path)
