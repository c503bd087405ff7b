"""Hardware selection: hinge tier, seals and the door hardware schedule.

Hinge weight uses the flat 10mm approximation (area x 25 kg/m²), not the
thickness-based formula of :mod:`showerkit.fabrication.deductions`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from showerkit.config import Config, HingeRules
from showerkit.hardware.catalog import (
    DEFAULT_CATALOG,
    HandleOption,
    HardwareCatalog,
    HingeOption,
    SealOption,
    SealType,
)
from showerkit.layout.graph import LayoutGraph
from showerkit.layout.model import DoorOpening, JunctionKind

logger = logging.getLogger(__name__)


@dataclass
class HingeSelection:
    """Chosen hinge plus whether the door actually fits its limits."""

    hinge: HingeOption
    weight_kg: float
    oversized: bool = False
    reason: str = ""
    warning: Optional[str] = None

    @property
    def brand(self):
        return self.hinge.brand


@dataclass
class HardwareSelection:
    """Door hardware schedule: hinge, handle and seals for one design."""

    hinge: HingeSelection
    hinge_count: int
    handle: HandleOption
    seals: list[SealOption] = field(default_factory=list)
    door_width_mm: float = 0.0
    door_height_mm: float = 0.0
    orientation: Optional[str] = None
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "hinge": {
                "brand": self.hinge.hinge.brand.value,
                "name": self.hinge.hinge.name,
                "tier": self.hinge.hinge.tier,
                "count": self.hinge_count,
                "weight_kg": round(self.hinge.weight_kg, 2),
                "oversized": self.hinge.oversized,
                "reason": self.hinge.reason,
            },
            "handle": {
                "type": self.handle.handle_type.value,
                "name": self.handle.name,
                "requires_cutout": self.handle.requires_cutout,
            },
            "seals": [
                {"type": s.seal_type.value, "name": s.name, "location": s.location}
                for s in self.seals
            ],
            "door_width_mm": self.door_width_mm,
            "door_height_mm": self.door_height_mm,
            "orientation": self.orientation,
            "warnings": list(self.warnings),
        }


# --------------------------------------------------------------------------- #
# Hinges
# --------------------------------------------------------------------------- #


def approximate_door_weight(
    door_width_mm: float,
    door_height_mm: float,
    weight_per_m2: float = 25.0,
) -> float:
    return (door_width_mm / 1000) * (door_height_mm / 1000) * weight_per_m2


def select_hinge(
    door_width_mm: float,
    door_height_mm: float,
    prefer_premium: bool = False,
    catalog: Optional[HardwareCatalog] = None,
    weight_per_m2: float = 25.0,
) -> HingeSelection:
    """Return the first hinge tier whose width and weight limits hold.

    When no tier qualifies, or *prefer_premium* is set, the top tier is
    returned; ``oversized`` tells the caller whether the door is really
    inside that tier's limits.
    """
    catalog = catalog or DEFAULT_CATALOG
    weight = approximate_door_weight(door_width_mm, door_height_mm, weight_per_m2)

    if not prefer_premium:
        for i, hinge in enumerate(catalog.hinge_tiers):
            if hinge.accommodates(door_width_mm, weight):
                reason = (
                    f"Standard {hinge.name} hinge sufficient"
                    if i == 0
                    else f"Door size requires {hinge.name} "
                         f"({door_width_mm:g}mm / {weight:.1f}kg exceeds lower tiers)"
                )
                logger.debug("Hinge tier %d (%s) selected", hinge.tier, hinge.name)
                return HingeSelection(hinge, weight, reason=reason)

    top = catalog.top_hinge
    if top.accommodates(door_width_mm, weight):
        return HingeSelection(top, weight, reason=f"Premium {top.name} hinge requested")

    warning = (
        f"Door {door_width_mm:g}mm / {weight:.1f}kg exceeds maximum hinge capacity "
        f"({top.max_width_mm:g}mm / {top.max_weight_kg:g}kg)"
    )
    logger.warning(warning)
    return HingeSelection(
        top,
        weight,
        oversized=True,
        reason=f"No hinge tier fits; defaulting to {top.name}",
        warning=warning,
    )


def hinge_count(door_height_mm: float, tall_door_height_mm: float = 2000) -> int:
    return 3 if door_height_mm > tall_door_height_mm else 2


def hinge_orientation(neighbor: Optional[str], angle_deg: int = 180) -> str:
    """Hinge body needed for what the door is hung from.

    *neighbor* is ``"wall"``, ``"glass"`` or ``None``.
    """
    if neighbor == "glass":
        if angle_deg == 90:
            return "90-degree"
        if angle_deg == 135:
            return "135-degree"
        return "glass-to-glass"
    return "wall-to-glass"


def door_hinge_orientation(graph: LayoutGraph) -> Optional[str]:
    """Orientation for the first door in *graph*, or ``None`` without a door.

    The door hangs from glass when a glass-to-glass junction meets its hinge
    edge; otherwise it hangs from the wall.
    """
    doors = graph.door_panels
    if not doors:
        return None
    door = doors[0]
    for j in graph.junctions_for(door.panel_id):
        if j.kind is not JunctionKind.GLASS_TO_GLASS:
            continue
        if (j.a_panel_id == door.panel_id and j.a_edge is door.hinge_side) or (
            j.b_panel_id == door.panel_id and j.b_edge is door.hinge_side
        ):
            return hinge_orientation("glass", j.angle_deg)
    return hinge_orientation("wall")


# --------------------------------------------------------------------------- #
# Seals
# --------------------------------------------------------------------------- #


def required_seals(
    door_opening: DoorOpening | str,
    hinge: HingeOption,
    catalog: Optional[HardwareCatalog] = None,
) -> list[SealOption]:
    """Seals for a door, strictly additive.

    1. bottom drip seal, always
    2. soft-fin H on the fixed panel if the door opens outward only
    3. hinge-side bubble seal if the door opens both ways
    4. hinge-side seal by brand: bubble on the premium tier, else H-seal

    A both-ways door on the premium tier gets the bubble seal twice.
    """
    catalog = catalog or DEFAULT_CATALOG
    opening = DoorOpening(door_opening)
    seals = [catalog.seal(SealType.DRIP)]
    if opening is DoorOpening.OUTWARD:
        seals.append(catalog.seal(SealType.SOFT_FIN_H))
    if opening is DoorOpening.BOTH:
        seals.append(catalog.seal(SealType.BUBBLE))
    seals.append(catalog.seal(SealType.BUBBLE if hinge.premium else SealType.H_SEAL))
    return seals


# --------------------------------------------------------------------------- #
# Whole design
# --------------------------------------------------------------------------- #


def estimate_door_size(design, rules: Optional[HingeRules] = None) -> tuple[float, float]:
    """Door (width, height) from the overall opening.

    A layout with a door takes a fixed fraction of the overall width at full
    height; anything else falls back to the default door size.
    """
    rules = rules or HingeRules()
    m = design.measurements
    if m is None or not m.width or not design.has_door:
        return rules.default_door_width, rules.default_door_height
    return m.width * rules.door_width_fraction, m.height


def select_hardware(design, config: Optional[Config] = None) -> HardwareSelection:
    """Hinge, handle and seals for *design*."""
    config = config or Config.default()
    catalog = config.catalog
    door_w, door_h = estimate_door_size(design, config.hinges)

    hinge = select_hinge(
        door_w,
        door_h,
        prefer_premium=design.wants_premium_hinge,
        catalog=catalog,
        weight_per_m2=config.hinges.weight_per_m2,
    )
    warnings: list[str] = []
    if hinge.warning:
        warnings.append(hinge.warning)

    graph = design.layout_graph()
    orientation = door_hinge_orientation(graph) if graph is not None else None

    return HardwareSelection(
        hinge=hinge,
        hinge_count=hinge_count(door_h, config.hinges.tall_door_height_mm),
        handle=catalog.handle(design.handle_type),
        seals=required_seals(design.door_opening, hinge.hinge, catalog) if design.include_seals else [],
        door_width_mm=door_w,
        door_height_mm=door_h,
        orientation=orientation,
        warnings=warnings,
    )
