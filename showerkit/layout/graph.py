"""LayoutGraph – internal NetworkX-backed graph of panels and junctions."""

from __future__ import annotations

import logging
from typing import Iterator

import networkx as nx

from showerkit.layout.model import (
    JUNCTION_ANGLES,
    PLANE_ORDER,
    Junction,
    Panel,
)

logger = logging.getLogger(__name__)


class LayoutGraph:
    """Undirected graph where nodes are :class:`Panel` and edges are
    :class:`Junction` connections.

    The underlying NetworkX graph stores Panel objects as node attributes and
    Junction objects as edge attributes so callers can query both.
    """

    def __init__(self) -> None:
        self._g: nx.Graph = nx.Graph()

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #

    def add_panel(self, panel: Panel) -> None:
        self._g.add_node(panel.panel_id, panel=panel)

    def add_junction(self, junction: Junction) -> None:
        self._validate_node(junction.a_panel_id)
        self._validate_node(junction.b_panel_id)
        self._g.add_edge(
            junction.a_panel_id,
            junction.b_panel_id,
            junction=junction,
        )

    # ------------------------------------------------------------------ #
    # Query helpers
    # ------------------------------------------------------------------ #

    @property
    def panels(self) -> list[Panel]:
        """Panels in reading order (plane, then position index)."""
        panels = [data["panel"] for _, data in self._g.nodes(data=True)]
        return sorted(
            panels,
            key=lambda p: (PLANE_ORDER.index(p.plane), p.position_index),
        )

    @property
    def junctions(self) -> list[Junction]:
        return [data["junction"] for _, _, data in self._g.edges(data=True)]

    @property
    def door_panels(self) -> list[Panel]:
        return [p for p in self.panels if p.is_door]

    def get_panel(self, panel_id: str) -> Panel:
        return self._g.nodes[panel_id]["panel"]

    def has_panel(self, panel_id: str) -> bool:
        return panel_id in self._g.nodes

    def neighbors(self, panel_id: str) -> Iterator[str]:
        return iter(self._g.neighbors(panel_id))

    def junctions_for(self, panel_id: str) -> list[Junction]:
        return [
            data["junction"]
            for _, _, data in self._g.edges(panel_id, data=True)
        ]

    def is_connected(self) -> bool:
        if not self._g.nodes:
            return False
        return nx.is_connected(self._g)

    def __len__(self) -> int:
        return len(self._g.nodes)

    # ------------------------------------------------------------------ #
    # Validation
    # ------------------------------------------------------------------ #

    def validate(self) -> list[str]:
        """Return a list of validation error messages (empty = OK)."""
        errors: list[str] = []
        if len(self._g.nodes) == 0:
            errors.append("No panels defined.")
        for j in self.junctions:
            if j.angle_deg not in JUNCTION_ANGLES:
                errors.append(
                    f"Junction '{j.junction_id}' angle {j.angle_deg}° not in "
                    f"{list(JUNCTION_ANGLES)}."
                )
        return errors

    def _validate_node(self, panel_id: str) -> None:
        if panel_id not in self._g.nodes:
            raise ValueError(
                f"Panel '{panel_id}' referenced in junction but not defined as a node."
            )

    # ------------------------------------------------------------------ #
    # Serialisation / factory
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict:
        return {
            "panels": [p.to_dict() for p in self.panels],
            "junctions": [j.to_dict() for j in self.junctions],
        }

    @classmethod
    def from_parts(
        cls,
        panels: list[Panel],
        junctions: list[Junction],
    ) -> "LayoutGraph":
        g = cls()
        for p in panels:
            g.add_panel(p)
        for j in junctions:
            try:
                g.add_junction(j)
            except ValueError as exc:
                logger.warning("Skipping invalid junction: %s", exc)
        return g
