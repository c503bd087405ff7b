"""Design configuration.

A :class:`DesignConfiguration` is an immutable snapshot of everything the
customer has chosen.  The UI edits it through :meth:`DesignConfiguration.updated`
(validated named patches) or replaces the layout wholesale with
:meth:`DesignConfiguration.with_template` / :meth:`DesignConfiguration.with_layout`;
each edit yields a new object from which deductions, hardware and the quote
are derived again.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Optional

from showerkit.hardware.catalog import HandleType
from showerkit.layout.graph import LayoutGraph
from showerkit.layout.model import DoorOpening, MeasurementInput, MountingStyle
from showerkit.layout.parser import ParsedLayout
from showerkit.layout.templates import ShowerTemplate, split_opening


class GlassType(str, Enum):
    CLEAR = "clear"
    FROSTED = "frosted"
    TINTED = "tinted"


class HingePreference(str, Enum):
    AUTO = "auto"
    PREMIUM = "premium"


HARDWARE_FINISHES: tuple[str, ...] = (
    "chrome",
    "brushed-nickel",
    "matte-black",
    "gold",
    "polished-brass",
    "brushed-bronze",
    "gun-metal",
    "satin-brass",
)
GLASS_THICKNESSES: tuple[int, ...] = (8, 10, 12)
SEAL_TYPES: tuple[Optional[str], ...] = (None, "standard", "magnetic")

# option name -> enum type (coerced) or tuple of allowed values
_OPTIONS: dict[str, Any] = {
    "glass_type": GlassType,
    "glass_thickness": GLASS_THICKNESSES,
    "mounting_type": MountingStyle,
    "hardware_finish": HARDWARE_FINISHES,
    "door_opening": DoorOpening,
    "handle_type": HandleType,
    "hinge_preference": HingePreference,
    "include_seals": (True, False),
    "seal_type": SEAL_TYPES,
    "include_installation": (True, False),
    "has_threshold": (True, False),
    "ceiling_fixed": (True, False),
}


@dataclass(frozen=True)
class OpeningMeasurements:
    """Overall tight opening in mm."""

    width: float
    height: float
    depth: Optional[float] = None


@dataclass(frozen=True)
class DesignConfiguration:
    template: Optional[ShowerTemplate] = None
    layout: Optional[LayoutGraph] = field(default=None, compare=False)
    measurements: Optional[OpeningMeasurements] = None
    glass_type: GlassType = GlassType.CLEAR
    glass_thickness: int = 10
    mounting_type: MountingStyle = MountingStyle.CHANNEL
    hardware_finish: str = "chrome"
    door_opening: DoorOpening = DoorOpening.INWARD
    handle_type: HandleType = HandleType.PULL
    hinge_preference: HingePreference = HingePreference.AUTO
    include_seals: bool = True
    seal_type: Optional[str] = None
    include_installation: bool = False
    has_threshold: bool = False
    ceiling_fixed: bool = False

    @classmethod
    def default(cls) -> "DesignConfiguration":
        return cls()

    # ------------------------------------------------------------------ #
    # Patches
    # ------------------------------------------------------------------ #

    def updated(self, **changes: Any) -> "DesignConfiguration":
        """Return a copy with *changes* applied.

        Raises
        ------
        ValueError
            If an option name is not recognised or its value is not one of
            the recognised choices.
        """
        coerced: dict[str, Any] = {}
        for name, value in changes.items():
            allowed = _OPTIONS.get(name)
            if allowed is None:
                raise ValueError(f"Unknown design option '{name}'")
            if isinstance(allowed, type) and issubclass(allowed, Enum):
                try:
                    value = allowed(value)
                except ValueError as exc:
                    choices = [m.value for m in allowed]
                    raise ValueError(
                        f"Invalid {name} {value!r}; expected one of {choices}"
                    ) from exc
            elif value not in allowed:
                raise ValueError(
                    f"Invalid {name} {value!r}; expected one of {list(allowed)}"
                )
            coerced[name] = value
        return replace(self, **coerced)

    def with_template(self, template: ShowerTemplate) -> "DesignConfiguration":
        """Switch template and reset the template-driven defaults."""
        dm = template.default_measurements
        thickness = 10 if 10 in template.recommended_thickness else template.recommended_thickness[-1]
        return replace(
            self,
            template=template,
            layout=None,
            mounting_type=template.supported_mounting[0],
            door_opening=template.supported_door_openings[0],
            glass_thickness=thickness,
            measurements=OpeningMeasurements(dm.width, dm.height, dm.depth),
        )

    def with_layout(self, layout: ParsedLayout | LayoutGraph) -> "DesignConfiguration":
        """Use a layout that did not come from the template library."""
        graph = layout.graph() if isinstance(layout, ParsedLayout) else layout
        return replace(self, template=None, layout=graph)

    def with_measurements(
        self,
        width: float,
        height: float,
        depth: Optional[float] = None,
    ) -> "DesignConfiguration":
        return replace(self, measurements=OpeningMeasurements(width, height, depth))

    # ------------------------------------------------------------------ #
    # Derived views
    # ------------------------------------------------------------------ #

    def layout_graph(self) -> Optional[LayoutGraph]:
        if self.layout is not None:
            return self.layout
        if self.template is not None:
            return self.template.graph()
        return None

    @property
    def panel_count(self) -> int:
        graph = self.layout_graph()
        return len(graph) if graph is not None else 0

    @property
    def has_door(self) -> bool:
        graph = self.layout_graph()
        return bool(graph and graph.door_panels)

    @property
    def wants_premium_hinge(self) -> bool:
        return self.hinge_preference is HingePreference.PREMIUM

    def panel_measurements(self) -> dict[str, MeasurementInput]:
        """Per-panel measurement inputs derived from the overall opening."""
        graph = self.layout_graph()
        if graph is None or self.measurements is None:
            return {}
        m = self.measurements
        shares = self.template.width_shares if self.template is not None else None
        sizes = split_opening(graph.panels, m.width, m.height, m.depth, shares)
        return {
            panel_id: MeasurementInput(
                tight_width=w,
                tight_height=h,
                mounting_method=self.mounting_type,
                ceiling_fixed=self.ceiling_fixed,
                has_threshold=self.has_threshold,
                seal_type=self.seal_type,
            )
            for panel_id, (w, h) in sizes.items()
        }
