"""Global configuration and defaults for showerkit.

All rule and price tables are built once (``Config.default()`` or
``Config.from_yaml()``) and passed explicitly into the calculators.
"""

from __future__ import annotations

import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from showerkit.hardware.catalog import DEFAULT_CATALOG, HardwareCatalog


@dataclass(frozen=True)
class DeductionRules:
    """Manufacturing clearances (mm) subtracted from the tight opening."""

    clamp_gap: float = 3
    channel_wall: float = 10
    channel_floor: float = 5
    channel_ceiling_per_side: float = 6
    door_hinge_gap: float = 4
    door_strike_gap: float = 4
    door_strike_gap_magnetic: float = 11
    door_bottom_drip: float = 10
    door_bottom_threshold: float = 16
    door_top: float = 4
    density_factor: float = 2.5  # kg per m² per mm of thickness
    min_glass_width: float = 100
    min_glass_height: float = 300


@dataclass(frozen=True)
class HingeRules:
    """Door sizing used when choosing hinges."""

    weight_per_m2: float = 25.0  # 10mm glass approximation
    tall_door_height_mm: float = 2000  # above this a door takes a third hinge
    door_width_fraction: float = 0.5   # door share of the overall opening
    default_door_width: float = 800
    default_door_height: float = 2000


def _default_glass_rates() -> dict[str, dict[int, float]]:
    return {
        "clear": {8: 150.0, 10: 180.0, 12: 220.0},
        "frosted": {8: 170.0, 10: 200.0, 12: 240.0},
        "tinted": {8: 180.0, 10: 210.0, 12: 250.0},
    }


@dataclass(frozen=True)
class PricingConfig:
    """Price tables (GBP)."""

    glass_rates: dict[str, dict[int, float]] = field(default_factory=_default_glass_rates)
    installation_rate_per_m2: float = 85.0
    mounting_rates: dict[str, float] = field(
        default_factory=lambda: {"channel": 35.0, "clamps": 45.0}
    )
    vat_rate: float = 0.20
    validity_days: int = 30
    currency: str = "GBP"

    def glass_rate(self, glass_type: str, thickness_mm: int) -> float:
        try:
            return float(self.glass_rates[glass_type][int(thickness_mm)])
        except KeyError as exc:
            raise KeyError(
                f"No glass price for type={glass_type} thickness={thickness_mm}mm"
            ) from exc


@dataclass(frozen=True)
class MeasurementLimits:
    """Accepted (min, max) ranges; mm for lengths, degrees for rake."""

    width: tuple[float, float] = (600, 3000)
    height: tuple[float, float] = (1800, 2400)
    depth: tuple[float, float] = (600, 1500)
    rake_angle: tuple[float, float] = (1, 45)


@dataclass
class Config:
    """Top-level configuration."""

    deductions: DeductionRules = field(default_factory=DeductionRules)
    hinges: HingeRules = field(default_factory=HingeRules)
    pricing: PricingConfig = field(default_factory=PricingConfig)
    limits: MeasurementLimits = field(default_factory=MeasurementLimits)
    catalog: HardwareCatalog = DEFAULT_CATALOG
    glass_thickness: int = 10
    debug_output_dir: Optional[Path] = None

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}

        ded_data = data.get("deductions", {})
        hinge_data = data.get("hinges", {})
        pricing_data = data.get("pricing", {})
        limits_data = data.get("limits", {})
        catalog_data = data.get("catalog", {})
        debug_dir = data.get("debug_output_dir")

        pricing = PricingConfig()
        if pricing_data:
            rates = pricing_data.pop("glass_rates", None)
            if rates:
                merged = _default_glass_rates()
                for glass_type, by_thickness in rates.items():
                    merged.setdefault(glass_type, {}).update(
                        {int(k): float(v) for k, v in by_thickness.items()}
                    )
                pricing_data["glass_rates"] = merged
            mounting = pricing_data.pop("mounting_rates", None)
            if mounting:
                pricing_data["mounting_rates"] = {
                    **PricingConfig().mounting_rates,
                    **{k: float(v) for k, v in mounting.items()},
                }
            pricing = PricingConfig(**pricing_data)

        limits = MeasurementLimits(
            **{k: tuple(v) for k, v in limits_data.items()}
        ) if limits_data else MeasurementLimits()

        return cls(
            deductions=DeductionRules(**ded_data) if ded_data else DeductionRules(),
            hinges=HingeRules(**hinge_data) if hinge_data else HingeRules(),
            pricing=pricing,
            limits=limits,
            catalog=HardwareCatalog.from_dict(catalog_data) if catalog_data else DEFAULT_CATALOG,
            glass_thickness=int(data.get("glass_thickness", 10)),
            debug_output_dir=Path(debug_dir) if debug_dir else None,
        )

    @classmethod
    def default(cls) -> "Config":
        return cls()
