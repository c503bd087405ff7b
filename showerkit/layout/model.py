"""Internal layout data model.

Panel        – a single toughened glass sheet
Junction     – physical connection between two panel edges
MeasurementInput – tight opening + mounting policy for one panel
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Optional


# --------------------------------------------------------------------------- #
# Enumerations
# --------------------------------------------------------------------------- #


class PanelKind(str, Enum):
    FIXED = "fixed"
    DOOR_HINGED = "door_hinged"

    @classmethod
    def from_str(cls, value: str) -> "PanelKind":
        normalized = value.strip().lower().replace("-", "_")
        if normalized in ("door", "hinged_door", "door_hinged"):
            return cls.DOOR_HINGED
        if normalized == "fixed":
            return cls.FIXED
        raise ValueError(f"Unknown panel kind: {value!r}")


class Plane(str, Enum):
    FRONT = "front"
    RETURN_LEFT = "return_left"
    RETURN_RIGHT = "return_right"
    BACK = "back"


# Left-to-right reading order of planes when listing panels
PLANE_ORDER: tuple[Plane, ...] = (
    Plane.RETURN_LEFT,
    Plane.BACK,
    Plane.FRONT,
    Plane.RETURN_RIGHT,
)


class MountingStyle(str, Enum):
    CHANNEL = "channel"
    CLAMPS = "clamps"

    @classmethod
    def from_str(cls, value: str) -> "MountingStyle":
        normalized = value.strip().lower()
        if normalized in ("clamp", "clamps"):
            return cls.CLAMPS
        if normalized in ("channel", "u-channel", "u_channel"):
            return cls.CHANNEL
        raise ValueError(f"Unknown mounting style: {value!r}")


class JunctionKind(str, Enum):
    GLASS_TO_GLASS = "glass_to_glass"
    WALL_TO_GLASS = "wall_to_glass"


class Side(str, Enum):
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> "Side":
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


class TopEdgeType(str, Enum):
    LEVEL = "level"
    SLOPED = "sloped"


class DoorOpening(str, Enum):
    INWARD = "inward"
    OUTWARD = "outward"
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


JUNCTION_ANGLES: tuple[int, ...] = (90, 135, 180)


# --------------------------------------------------------------------------- #
# Panel attributes
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class PanelNotches:
    """Rectangular cutouts at the bottom corners (e.g. around a tray lip)."""

    bottom_left: bool = False
    bottom_right: bool = False
    width_mm: Optional[float] = None
    height_mm: Optional[float] = None

    @property
    def any(self) -> bool:
        return self.bottom_left or self.bottom_right


@dataclass(frozen=True)
class PanelTopEdge:
    type: TopEdgeType = TopEdgeType.LEVEL
    direction: Optional[Side] = None  # side that is lower on a sloped top
    drop_mm: Optional[float] = None


@dataclass(frozen=True)
class PanelWallFix:
    left: bool = False
    right: bool = False


# --------------------------------------------------------------------------- #
# Panel
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class Panel:
    """A single glass sheet in the enclosure."""

    panel_id: str
    kind: PanelKind = PanelKind.FIXED
    plane: Plane = Plane.FRONT
    position_index: int = 1
    hinge_side: Optional[Side] = None
    handle_side: Optional[Side] = None
    notches: PanelNotches = field(default_factory=PanelNotches)
    top_edge: PanelTopEdge = field(default_factory=PanelTopEdge)
    mounting_style: MountingStyle = MountingStyle.CHANNEL
    wall_fix: PanelWallFix = field(default_factory=PanelWallFix)
    width_mm: Optional[float] = None   # tight width, when known
    height_mm: Optional[float] = None  # tight height, when known

    @property
    def is_door(self) -> bool:
        return self.kind is PanelKind.DOOR_HINGED

    @property
    def is_return(self) -> bool:
        return self.plane in (Plane.RETURN_LEFT, Plane.RETURN_RIGHT)

    def to_dict(self) -> dict:
        data = asdict(self)
        # Enums serialise as their plain values
        data["kind"] = self.kind.value
        data["plane"] = self.plane.value
        data["mounting_style"] = self.mounting_style.value
        data["hinge_side"] = self.hinge_side.value if self.hinge_side else None
        data["handle_side"] = self.handle_side.value if self.handle_side else None
        data["top_edge"]["type"] = self.top_edge.type.value
        data["top_edge"]["direction"] = (
            self.top_edge.direction.value if self.top_edge.direction else None
        )
        return data


def door_panel(
    panel_id: str,
    plane: Plane,
    position_index: int,
    hinge_side: Side,
    **kwargs,
) -> Panel:
    """Build a hinged door panel; the handle sits on the edge opposite the hinge."""
    return Panel(
        panel_id,
        kind=PanelKind.DOOR_HINGED,
        plane=plane,
        position_index=position_index,
        hinge_side=hinge_side,
        handle_side=hinge_side.opposite,
        **kwargs,
    )


# --------------------------------------------------------------------------- #
# Junction
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class Junction:
    """Physical connection between an edge of panel A and an edge of panel B."""

    junction_id: str
    a_panel_id: str
    a_edge: Side
    b_panel_id: str
    b_edge: Side
    angle_deg: int = 180
    kind: JunctionKind = JunctionKind.GLASS_TO_GLASS

    def to_dict(self) -> dict:
        return {
            "junction_id": self.junction_id,
            "a_panel_id": self.a_panel_id,
            "a_edge": self.a_edge.value,
            "b_panel_id": self.b_panel_id,
            "b_edge": self.b_edge.value,
            "angle_deg": self.angle_deg,
            "kind": self.kind.value,
        }


# --------------------------------------------------------------------------- #
# Measurement input
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class MeasurementInput:
    """Tight opening for one panel plus the policy flags that drive deductions."""

    tight_width: float            # mm
    tight_height: float           # mm
    mounting_method: MountingStyle = MountingStyle.CHANNEL
    ceiling_fixed: bool = False   # floor-to-ceiling panel
    has_threshold: bool = False
    seal_type: Optional[str] = None  # e.g. "magnetic"
