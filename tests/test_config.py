"""Tests for YAML configuration loading."""

from pathlib import Path

import pytest

from showerkit.config import Config, DeductionRules, PricingConfig
from showerkit.design import DesignConfiguration
from showerkit.quote.calculator import generate_quote


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "showerkit.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_default():
    cfg = Config.default()
    assert cfg.deductions.channel_wall == 10
    assert cfg.pricing.glass_rate("clear", 10) == 180.0
    assert cfg.pricing.vat_rate == pytest.approx(0.20)
    assert cfg.limits.width == (600, 3000)
    assert cfg.hinges.weight_per_m2 == 25.0


def test_glass_rate_missing():
    with pytest.raises(KeyError):
        PricingConfig().glass_rate("mirrored", 10)


def test_empty_yaml_keeps_defaults(tmp_path):
    cfg = Config.from_yaml(_write(tmp_path, ""))
    assert cfg.deductions == DeductionRules()
    assert cfg.debug_output_dir is None


def test_sections_override_defaults(tmp_path):
    path = _write(
        tmp_path,
        """
deductions:
  channel_wall: 12
  min_glass_width: 150
hinges:
  tall_door_height_mm: 2100
pricing:
  vat_rate: 0.15
  glass_rates:
    clear:
      10: 190
limits:
  width: [500, 3200]
glass_thickness: 8
debug_output_dir: out/debug
""",
    )
    cfg = Config.from_yaml(path)
    assert cfg.deductions.channel_wall == 12
    assert cfg.deductions.min_glass_width == 150
    assert cfg.deductions.clamp_gap == 3
    assert cfg.hinges.tall_door_height_mm == 2100
    assert cfg.pricing.vat_rate == pytest.approx(0.15)
    assert cfg.pricing.glass_rate("clear", 10) == 190.0
    # other rates kept
    assert cfg.pricing.glass_rate("tinted", 10) == 210.0
    assert cfg.limits.width == (500, 3200)
    assert cfg.limits.height == (1800, 2400)
    assert cfg.glass_thickness == 8
    assert cfg.debug_output_dir == Path("out/debug")


def test_partial_mounting_rates_keep_defaults(tmp_path):
    cfg = Config.from_yaml(_write(tmp_path, "pricing:\n  mounting_rates:\n    channel: 40\n"))
    assert cfg.pricing.mounting_rates == {"channel": 40.0, "clamps": 45.0}

    design = DesignConfiguration.default().updated(mounting_type="clamps")
    quote = generate_quote(design, cfg)
    (mounting,) = [i for i in quote.line_items if i.description.startswith("Glass Clamps")]
    assert mounting.unit_price == 45.0


def test_catalog_section(tmp_path):
    path = _write(
        tmp_path,
        """
catalog:
  seals:
    - seal_type: drip
      name: Budget Drip
      unit_cost: 9
      location: door_bottom
""",
    )
    cfg = Config.from_yaml(path)
    assert cfg.catalog.seal("drip").name == "Budget Drip"
    assert cfg.catalog.find_seal("bubble") is None
    assert cfg.catalog.hinge("geneva").unit_cost == 45.0
