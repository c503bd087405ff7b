"""Hardware catalog: hinges, handles and seals.

The catalog is static data built once at start-up and handed to the
selector and the quote calculator.  Every key the layout and design model
can produce has an entry, so a failed lookup through :meth:`HardwareCatalog.hinge`
and friends means the catalog itself is broken; those raise
:class:`CatalogIntegrityError` instead of returning a fallback.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class CatalogIntegrityError(LookupError):
    """A key the domain model can produce is missing from the catalog."""


class HingeBrand(str, Enum):
    GENEVA = "geneva"
    VIENNA = "vienna"
    BELLAGIO = "bellagio"


class SealType(str, Enum):
    DRIP = "drip"
    SOFT_FIN_H = "soft_fin_h"
    H_SEAL = "h_seal"
    BUBBLE = "bubble"
    MAGNETIC = "magnetic"


class HandleType(str, Enum):
    PULL = "pull"
    KNOB = "knob"
    SPH8 = "sph8"
    NONE = "none"


# --------------------------------------------------------------------------- #
# Entries
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class HingeOption:
    brand: HingeBrand
    name: str
    tier: int
    unit_cost: float
    max_width_mm: float
    max_weight_kg: float
    premium: bool = False
    seal_family: SealType = SealType.H_SEAL

    def accommodates(self, width_mm: float, weight_kg: float) -> bool:
        return width_mm <= self.max_width_mm and weight_kg <= self.max_weight_kg


@dataclass(frozen=True)
class HandleOption:
    handle_type: HandleType
    name: str
    unit_cost: float
    requires_cutout: bool = True


@dataclass(frozen=True)
class SealOption:
    seal_type: SealType
    name: str
    unit_cost: float  # per linear metre
    location: str     # "door_bottom" | "fixed_panel" | "hinge_side" | "strike_side"


# --------------------------------------------------------------------------- #
# Default tables
# --------------------------------------------------------------------------- #

DEFAULT_HINGES: tuple[HingeOption, ...] = (
    HingeOption(HingeBrand.GENEVA, "Geneva", 1, 45.0, 800, 40),
    HingeOption(HingeBrand.VIENNA, "Vienna", 2, 55.0, 1000, 50),
    HingeOption(HingeBrand.BELLAGIO, "Bellagio", 3, 75.0, 1200, 65,
                premium=True, seal_family=SealType.BUBBLE),
)

DEFAULT_HANDLES: tuple[HandleOption, ...] = (
    HandleOption(HandleType.PULL, "Pull Handle 300mm", 58.0),
    HandleOption(HandleType.KNOB, "Shower Knob", 28.0),
    HandleOption(HandleType.SPH8, "SPH8 Ladder Pull", 65.0),
    HandleOption(HandleType.NONE, "No Handle", 0.0, requires_cutout=False),
)

DEFAULT_SEALS: tuple[SealOption, ...] = (
    SealOption(SealType.DRIP, "Bottom Drip Seal", 12.0, "door_bottom"),
    SealOption(SealType.SOFT_FIN_H, "Soft Fin H-Seal", 15.0, "fixed_panel"),
    SealOption(SealType.H_SEAL, "H-Seal", 14.0, "hinge_side"),
    SealOption(SealType.BUBBLE, "Bubble Seal", 16.0, "hinge_side"),
    SealOption(SealType.MAGNETIC, "Magnetic Seal", 22.0, "strike_side"),
)


# --------------------------------------------------------------------------- #
# Catalog
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class HardwareCatalog:
    hinges: tuple[HingeOption, ...] = DEFAULT_HINGES
    handles: tuple[HandleOption, ...] = DEFAULT_HANDLES
    seals: tuple[SealOption, ...] = DEFAULT_SEALS

    @property
    def hinge_tiers(self) -> list[HingeOption]:
        """Hinges in ascending capability order."""
        return sorted(self.hinges, key=lambda h: h.tier)

    @property
    def top_hinge(self) -> HingeOption:
        tiers = self.hinge_tiers
        if not tiers:
            raise CatalogIntegrityError("Catalog has no hinges")
        return tiers[-1]

    # ---- optional lookups --------------------------------------------- #

    def find_hinge(self, brand: HingeBrand | str) -> Optional[HingeOption]:
        return next((h for h in self.hinges if h.brand == brand), None)

    def find_handle(self, handle_type: HandleType | str) -> Optional[HandleOption]:
        return next((h for h in self.handles if h.handle_type == handle_type), None)

    def find_seal(self, seal_type: SealType | str) -> Optional[SealOption]:
        return next((s for s in self.seals if s.seal_type == seal_type), None)

    # ---- invariant-backed lookups ------------------------------------- #

    def hinge(self, brand: HingeBrand | str) -> HingeOption:
        found = self.find_hinge(brand)
        if found is None:
            raise CatalogIntegrityError(f"Hinge '{brand}' missing from catalog")
        return found

    def handle(self, handle_type: HandleType | str) -> HandleOption:
        found = self.find_handle(handle_type)
        if found is None:
            raise CatalogIntegrityError(f"Handle '{handle_type}' missing from catalog")
        return found

    def seal(self, seal_type: SealType | str) -> SealOption:
        found = self.find_seal(seal_type)
        if found is None:
            raise CatalogIntegrityError(f"Seal '{seal_type}' missing from catalog")
        return found

    # ---- loading ------------------------------------------------------ #

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HardwareCatalog":
        """Build a catalog from plain data (e.g. a YAML ``catalog`` section).

        Sections that are absent keep the default tables.
        """
        hinges = DEFAULT_HINGES
        if "hinges" in data:
            hinges = tuple(
                HingeOption(
                    brand=HingeBrand(h["brand"]),
                    name=h.get("name", str(h["brand"]).title()),
                    tier=int(h["tier"]),
                    unit_cost=float(h["unit_cost"]),
                    max_width_mm=float(h["max_width_mm"]),
                    max_weight_kg=float(h["max_weight_kg"]),
                    premium=bool(h.get("premium", False)),
                    seal_family=SealType(h.get("seal_family", SealType.H_SEAL.value)),
                )
                for h in data["hinges"]
            )
        handles = DEFAULT_HANDLES
        if "handles" in data:
            handles = tuple(
                HandleOption(
                    handle_type=HandleType(h["handle_type"]),
                    name=h.get("name", h["handle_type"]),
                    unit_cost=float(h["unit_cost"]),
                    requires_cutout=bool(h.get("requires_cutout", True)),
                )
                for h in data["handles"]
            )
        seals = DEFAULT_SEALS
        if "seals" in data:
            seals = tuple(
                SealOption(
                    seal_type=SealType(s["seal_type"]),
                    name=s.get("name", s["seal_type"]),
                    unit_cost=float(s["unit_cost"]),
                    location=s.get("location", "hinge_side"),
                )
                for s in data["seals"]
            )
        return cls(hinges=hinges, handles=handles, seals=seals)


DEFAULT_CATALOG = HardwareCatalog()
