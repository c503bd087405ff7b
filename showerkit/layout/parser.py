"""Free-text layout classifier.

Turns a customer's description ("L-shaped corner shower with door on the
right") into a panel/junction graph.  This is a keyword heuristic, not a
grammar: it never fails, and anything it does not recognise degrades to the
default two-panel corner layout.

Precedence
----------
1. U-shape  – "u-shaped" / "u shape", or "return" together with "both sides".
2. Corner   – everything else.  The return goes on the left only when "left"
              is mentioned without "right"; otherwise it goes on the right.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from showerkit.layout.graph import LayoutGraph
from showerkit.layout.model import (
    Junction,
    JunctionKind,
    Panel,
    PanelWallFix,
    Plane,
    Side,
    door_panel,
)

logger = logging.getLogger(__name__)

_U_SHAPE_KEYWORDS = ("u-shaped", "u shape")
_CORNER_KEYWORDS = ("corner", "l-shape", "return", "90")
_FRONT_DOOR_KEYWORDS = ("door in the middle", "middle door", "front door", "door in the front")


@dataclass
class ParsedLayout:
    """Panels and junctions inferred from *description*."""

    panels: list[Panel] = field(default_factory=list)
    junctions: list[Junction] = field(default_factory=list)
    description: str = ""
    is_default: bool = False  # no layout keyword was recognised

    def graph(self) -> LayoutGraph:
        return LayoutGraph.from_parts(self.panels, self.junctions)


def _is_u_shape(text: str) -> bool:
    if any(k in text for k in _U_SHAPE_KEYWORDS):
        return True
    return "return" in text and "both sides" in text


def parse_description(text: str) -> ParsedLayout:
    """Classify *text* into a U-shape or corner layout."""
    lower = (text or "").lower()

    if _is_u_shape(lower):
        layout = _u_shape(lower)
    else:
        layout = _corner(lower)
        layout.is_default = not any(k in lower for k in _CORNER_KEYWORDS + ("door", "left", "right"))
        if layout.is_default:
            logger.debug("No layout keywords in %r; using default corner layout", text)

    layout.description = text
    return layout


# --------------------------------------------------------------------------- #
# Fixed topologies
# --------------------------------------------------------------------------- #


def _u_shape(lower: str) -> ParsedLayout:
    front_is_door = any(k in lower for k in _FRONT_DOOR_KEYWORDS)

    left = Panel("P1", plane=Plane.RETURN_LEFT, position_index=1,
                 wall_fix=PanelWallFix(left=True))
    if front_is_door:
        front = door_panel("D1", Plane.FRONT, 2, Side.LEFT)
    else:
        front = Panel("P2", plane=Plane.FRONT, position_index=2)
    right = Panel("P3", plane=Plane.RETURN_RIGHT, position_index=3,
                  wall_fix=PanelWallFix(right=True))

    junctions = [
        Junction("J1", left.panel_id, Side.RIGHT, front.panel_id, Side.LEFT,
                 angle_deg=90, kind=JunctionKind.GLASS_TO_GLASS),
        Junction("J2", front.panel_id, Side.RIGHT, right.panel_id, Side.LEFT,
                 angle_deg=90, kind=JunctionKind.GLASS_TO_GLASS),
    ]
    logger.debug("Parsed U-shape layout (front door=%s)", front_is_door)
    return ParsedLayout(panels=[left, front, right], junctions=junctions)


def _corner(lower: str) -> ParsedLayout:
    # Right return wins when both sides are mentioned
    left_return = "left" in lower and "right" not in lower
    return_side = Side.LEFT if left_return else Side.RIGHT
    is_door = "door" in lower

    ret = Panel(
        "P1",
        plane=Plane.RETURN_LEFT if left_return else Plane.RETURN_RIGHT,
        position_index=1,
        wall_fix=PanelWallFix(left=left_return, right=not left_return),
    )
    if is_door:
        # Hinged off the return glass; handle on the free edge
        front = door_panel("D1", Plane.FRONT, 2, return_side)
    else:
        front = Panel("P2", plane=Plane.FRONT, position_index=2)

    junction = Junction(
        "J1",
        ret.panel_id,
        return_side.opposite,
        front.panel_id,
        return_side,
        angle_deg=90,
        kind=JunctionKind.GLASS_TO_GLASS,
    )
    logger.debug("Parsed corner layout (return=%s, door=%s)", return_side.value, is_door)
    return ParsedLayout(panels=[ret, front], junctions=[junction])
