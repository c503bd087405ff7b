"""Template library of predefined enclosure layouts.

Each template carries a complete panel/junction graph together with the
defaults a design session starts from (opening size, mounting, door opening
and recommended glass thickness).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from showerkit.layout.graph import LayoutGraph
from showerkit.layout.model import (
    DoorOpening,
    Junction,
    MountingStyle,
    Panel,
    PanelWallFix,
    Plane,
    Side,
    door_panel,
)


class TemplateNotFound(KeyError):
    """Raised when a template id is not in the library."""


@dataclass(frozen=True)
class DefaultMeasurements:
    width: float
    height: float
    depth: Optional[float] = None


@dataclass(frozen=True)
class ShowerTemplate:
    """A predefined layout: graph + session defaults."""

    template_id: str
    name: str
    description: str
    category: str  # "inline" | "corner" | "u-shape" | "wetroom" | "walk-in"
    panels: tuple[Panel, ...]
    junctions: tuple[Junction, ...]
    supported_door_openings: tuple[DoorOpening, ...]
    supported_mounting: tuple[MountingStyle, ...]
    default_measurements: DefaultMeasurements
    recommended_thickness: tuple[int, ...]
    tags: tuple[str, ...] = ()
    # panel_id -> fraction of its plane's opening (width for front/back,
    # depth for returns); panels left out share the remainder evenly
    width_shares: dict[str, float] = field(default_factory=dict, hash=False)

    @property
    def has_door(self) -> bool:
        return any(p.is_door for p in self.panels)

    def graph(self) -> LayoutGraph:
        return LayoutGraph.from_parts(list(self.panels), list(self.junctions))

    def split_opening(
        self,
        width: float,
        height: float,
        depth: Optional[float] = None,
    ) -> dict[str, tuple[float, float]]:
        return split_opening(self.panels, width, height, depth, self.width_shares)


def split_opening(
    panels: Iterable[Panel],
    width: float,
    height: float,
    depth: Optional[float] = None,
    shares: Optional[dict[str, float]] = None,
) -> dict[str, tuple[float, float]]:
    """Return {panel_id: (tight_width, tight_height)} for each panel.

    Front/back panels divide *width*; return panels divide *depth*
    (falling back to *width* when no depth was measured).
    """
    shares = shares or {}
    out: dict[str, tuple[float, float]] = {}
    by_plane: dict[Plane, list[Panel]] = {}
    for p in panels:
        by_plane.setdefault(p.plane, []).append(p)

    for plane, members in by_plane.items():
        span = width
        if plane in (Plane.RETURN_LEFT, Plane.RETURN_RIGHT) and depth:
            span = depth
        explicit = sum(shares.get(p.panel_id, 0.0) for p in members)
        implicit = [p for p in members if p.panel_id not in shares]
        rest = max(0.0, 1.0 - explicit) / len(implicit) if implicit else 0.0
        for p in members:
            share = shares.get(p.panel_id, rest)
            out[p.panel_id] = (round(span * share, 1), float(height))
    return out


# --------------------------------------------------------------------------- #
# Library
# --------------------------------------------------------------------------- #

_BOTH_MOUNTINGS = (MountingStyle.CHANNEL, MountingStyle.CLAMPS)
_IN_OUT = (DoorOpening.INWARD, DoorOpening.OUTWARD)


def _j(jid: str, a: str, a_edge: Side, b: str, b_edge: Side, angle: int = 180) -> Junction:
    return Junction(jid, a, a_edge, b, b_edge, angle_deg=angle)


SHOWER_TEMPLATES: tuple[ShowerTemplate, ...] = (
    # ---- Inline ----------------------------------------------------------
    ShowerTemplate(
        template_id="inline-single-door",
        name="Inline Single Door",
        description="Single hinged door with a fixed panel",
        category="inline",
        panels=(
            Panel("panel-1", plane=Plane.FRONT, position_index=1,
                  wall_fix=PanelWallFix(left=True)),
            door_panel("door-1", Plane.FRONT, 2, Side.LEFT),
        ),
        junctions=(_j("J1", "panel-1", Side.RIGHT, "door-1", Side.LEFT),),
        supported_door_openings=_IN_OUT,
        supported_mounting=_BOTH_MOUNTINGS,
        default_measurements=DefaultMeasurements(900, 2000),
        recommended_thickness=(8, 10),
        tags=("simple", "compact", "popular"),
        width_shares={"panel-1": 0.4, "door-1": 0.6},
    ),
    ShowerTemplate(
        template_id="inline-double-door",
        name="Inline Double Door",
        description="Two hinged doors opening from the centre",
        category="inline",
        panels=(
            door_panel("door-left", Plane.FRONT, 1, Side.LEFT,
                       wall_fix=PanelWallFix(left=True)),
            door_panel("door-right", Plane.FRONT, 2, Side.RIGHT,
                       wall_fix=PanelWallFix(right=True)),
        ),
        junctions=(_j("J1", "door-left", Side.RIGHT, "door-right", Side.LEFT),),
        supported_door_openings=(DoorOpening.BOTH,),
        supported_mounting=_BOTH_MOUNTINGS,
        default_measurements=DefaultMeasurements(1200, 2000),
        recommended_thickness=(8, 10),
        tags=("double", "wide", "alcove"),
    ),
    # ---- Corner ----------------------------------------------------------
    ShowerTemplate(
        template_id="corner-standard",
        name="Corner Shower",
        description="L-shaped corner enclosure with door",
        category="corner",
        panels=(
            Panel("panel-return", plane=Plane.RETURN_LEFT, position_index=1,
                  wall_fix=PanelWallFix(left=True)),
            Panel("panel-front", plane=Plane.FRONT, position_index=2),
            door_panel("door-1", Plane.FRONT, 3, Side.LEFT),
        ),
        junctions=(
            _j("J1", "panel-return", Side.RIGHT, "panel-front", Side.LEFT, 90),
            _j("J2", "panel-front", Side.RIGHT, "door-1", Side.LEFT),
        ),
        supported_door_openings=_IN_OUT,
        supported_mounting=_BOTH_MOUNTINGS,
        default_measurements=DefaultMeasurements(900, 2000, 900),
        recommended_thickness=(8, 10, 12),
        tags=("corner", "L-shaped", "compact"),
        width_shares={"panel-front": 0.3, "door-1": 0.7},
    ),
    ShowerTemplate(
        template_id="corner-neo-angle",
        name="Neo-Angle Corner",
        description="Angled corner shower with door",
        category="corner",
        panels=(
            Panel("panel-left", plane=Plane.RETURN_LEFT, position_index=1,
                  wall_fix=PanelWallFix(left=True)),
            door_panel("door-1", Plane.FRONT, 2, Side.LEFT),
            Panel("panel-right", plane=Plane.RETURN_RIGHT, position_index=3,
                  wall_fix=PanelWallFix(right=True)),
        ),
        junctions=(
            _j("J1", "panel-left", Side.RIGHT, "door-1", Side.LEFT, 135),
            _j("J2", "door-1", Side.RIGHT, "panel-right", Side.LEFT, 135),
        ),
        supported_door_openings=_IN_OUT,
        supported_mounting=_BOTH_MOUNTINGS,
        default_measurements=DefaultMeasurements(900, 2000, 900),
        recommended_thickness=(8, 10),
        tags=("corner", "angled", "space-saving"),
        width_shares={"panel-left": 0.45, "panel-right": 0.45, "door-1": 0.6},
    ),
    ShowerTemplate(
        template_id="l-left",
        name="Return Left + Door",
        description="Left return panel with a door hinged off the return",
        category="corner",
        panels=(
            Panel("P1", plane=Plane.RETURN_LEFT, position_index=1,
                  wall_fix=PanelWallFix(left=True)),
            door_panel("D1", Plane.FRONT, 2, Side.LEFT),
        ),
        junctions=(_j("J1", "P1", Side.RIGHT, "D1", Side.LEFT, 90),),
        supported_door_openings=(DoorOpening.OUTWARD, DoorOpening.BOTH),
        supported_mounting=_BOTH_MOUNTINGS,
        default_measurements=DefaultMeasurements(900, 2000, 900),
        recommended_thickness=(10,),
        tags=("corner", "L-shaped", "return", "square"),
    ),
    ShowerTemplate(
        template_id="l-right",
        name="Door + Return Right",
        description="Door hinged off a right return panel",
        category="corner",
        panels=(
            Panel("P1", plane=Plane.RETURN_RIGHT, position_index=1,
                  wall_fix=PanelWallFix(right=True)),
            door_panel("D1", Plane.FRONT, 2, Side.RIGHT),
        ),
        junctions=(_j("J1", "P1", Side.LEFT, "D1", Side.RIGHT, 90),),
        supported_door_openings=(DoorOpening.OUTWARD, DoorOpening.BOTH),
        supported_mounting=_BOTH_MOUNTINGS,
        default_measurements=DefaultMeasurements(900, 2000, 900),
        recommended_thickness=(10,),
        tags=("corner", "L-shaped", "return", "square"),
    ),
    # ---- U-shape ---------------------------------------------------------
    ShowerTemplate(
        template_id="u-shape-front-door",
        name="U-Shape with Front Door",
        description="Returns on both sides with a centre front door",
        category="u-shape",
        panels=(
            Panel("P1", plane=Plane.RETURN_LEFT, position_index=1,
                  wall_fix=PanelWallFix(left=True)),
            door_panel("D1", Plane.FRONT, 2, Side.LEFT),
            Panel("P3", plane=Plane.RETURN_RIGHT, position_index=3,
                  wall_fix=PanelWallFix(right=True)),
        ),
        junctions=(
            _j("J1", "P1", Side.RIGHT, "D1", Side.LEFT, 90),
            _j("J2", "D1", Side.RIGHT, "P3", Side.LEFT, 90),
        ),
        supported_door_openings=(DoorOpening.OUTWARD, DoorOpening.BOTH),
        supported_mounting=_BOTH_MOUNTINGS,
        default_measurements=DefaultMeasurements(1000, 2000, 900),
        recommended_thickness=(10,),
        tags=("u-shape", "three-sided", "return"),
    ),
    # ---- Walk-in / wetroom -----------------------------------------------
    ShowerTemplate(
        template_id="wetroom-single-panel",
        name="Walk-In Single Panel",
        description="Single fixed panel, no door",
        category="wetroom",
        panels=(
            Panel("panel-1", plane=Plane.FRONT, position_index=1,
                  mounting_style=MountingStyle.CLAMPS,
                  wall_fix=PanelWallFix(left=True)),
        ),
        junctions=(),
        supported_door_openings=(DoorOpening.INWARD,),  # n/a for walk-in
        supported_mounting=(MountingStyle.CLAMPS,),
        default_measurements=DefaultMeasurements(1200, 2000),
        recommended_thickness=(10, 12),
        tags=("walk-in", "wetroom", "minimalist"),
    ),
    ShowerTemplate(
        template_id="wetroom-panel-return",
        name="Walk-In with Return Panel",
        description="L-shaped walk-in with a return panel",
        category="wetroom",
        panels=(
            Panel("panel-main", plane=Plane.FRONT, position_index=1,
                  mounting_style=MountingStyle.CLAMPS,
                  wall_fix=PanelWallFix(left=True)),
            Panel("panel-return", plane=Plane.RETURN_RIGHT, position_index=2,
                  mounting_style=MountingStyle.CLAMPS),
        ),
        junctions=(_j("J1", "panel-main", Side.RIGHT, "panel-return", Side.LEFT, 90),),
        supported_door_openings=(DoorOpening.INWARD,),
        supported_mounting=(MountingStyle.CLAMPS,),
        default_measurements=DefaultMeasurements(1200, 2000, 600),
        recommended_thickness=(10, 12),
        tags=("walk-in", "wetroom", "L-shaped", "return"),
    ),
    ShowerTemplate(
        template_id="walk-in-door-panel",
        name="Walk-In with Door",
        description="Walk-in with a door for splash protection",
        category="walk-in",
        panels=(
            Panel("panel-main", plane=Plane.FRONT, position_index=1,
                  mounting_style=MountingStyle.CLAMPS,
                  wall_fix=PanelWallFix(left=True)),
            door_panel("door-1", Plane.FRONT, 2, Side.LEFT,
                       mounting_style=MountingStyle.CLAMPS),
        ),
        junctions=(_j("J1", "panel-main", Side.RIGHT, "door-1", Side.LEFT),),
        supported_door_openings=_IN_OUT,
        supported_mounting=(MountingStyle.CLAMPS,),
        default_measurements=DefaultMeasurements(1200, 2000),
        recommended_thickness=(10, 12),
        tags=("walk-in", "semi-enclosed", "flexible"),
        width_shares={"panel-main": 0.6, "door-1": 0.4},
    ),
)


# --------------------------------------------------------------------------- #
# Lookups
# --------------------------------------------------------------------------- #


def get_template(template_id: str) -> ShowerTemplate:
    for t in SHOWER_TEMPLATES:
        if t.template_id == template_id:
            return t
    raise TemplateNotFound(template_id)


def templates_by_category(category: str) -> list[ShowerTemplate]:
    return [t for t in SHOWER_TEMPLATES if t.category == category]


def templates_by_tags(tags: Iterable[str]) -> list[ShowerTemplate]:
    """Return templates carrying any of *tags*."""
    wanted = set(tags)
    return [t for t in SHOWER_TEMPLATES if wanted.intersection(t.tags)]
