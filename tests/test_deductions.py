"""Tests for glass deductions."""

import pytest

from showerkit.config import DeductionRules
from showerkit.fabrication.deductions import (
    compute_deductions,
    compute_layout_deductions,
    glass_weight,
)
from showerkit.layout.model import MeasurementInput, MountingStyle, PanelKind
from showerkit.layout.templates import get_template


def _m(width=900, height=2000, **kwargs) -> MeasurementInput:
    return MeasurementInput(tight_width=width, tight_height=height, **kwargs)


class TestFixedPanels:
    @pytest.mark.parametrize("width,height", [(600, 1800), (901.5, 2000), (2999, 2400)])
    def test_clamps(self, width, height):
        r = compute_deductions(PanelKind.FIXED, _m(width, height, mounting_method=MountingStyle.CLAMPS))
        assert r.deduction_width == 3
        assert r.deduction_height == 3
        assert r.glass_width == width - 3
        assert r.glass_height == height - 3

    def test_channel_floor_only(self):
        r = compute_deductions(PanelKind.FIXED, _m())
        assert r.deduction_width == 10
        assert r.deduction_height == 5
        assert (r.glass_width, r.glass_height) == (890, 1995)
        assert "Channel Mounting: -10mm width (wall channel)" in r.notes

    def test_channel_floor_to_ceiling(self):
        r = compute_deductions(PanelKind.FIXED, _m(ceiling_fixed=True))
        assert r.deduction_width == 10
        assert r.deduction_height == 12
        assert any("6mm top + 6mm bottom" in n for n in r.notes)

    def test_kind_given_as_string(self):
        r = compute_deductions("fixed", _m(mounting_method="clamps"))
        assert r.deduction_width == 3


class TestDoors:
    def test_standard(self):
        r = compute_deductions(PanelKind.DOOR_HINGED, _m(700, 2000))
        assert r.deduction_width == 8
        assert r.deduction_height == 14
        assert (r.glass_width, r.glass_height) == (692, 1986)

    def test_magnetic_strike(self):
        r = compute_deductions(PanelKind.DOOR_HINGED, _m(700, 2000, seal_type="magnetic"))
        assert r.deduction_width == 15
        assert "Magnetic Seal: Using 11mm strike gap" in r.notes

    def test_threshold(self):
        r = compute_deductions(PanelKind.DOOR_HINGED, _m(700, 2000, has_threshold=True))
        assert r.deduction_height == 20

    def test_door_ignores_mounting(self):
        a = compute_deductions(PanelKind.DOOR_HINGED, _m(mounting_method=MountingStyle.CLAMPS))
        b = compute_deductions(PanelKind.DOOR_HINGED, _m(mounting_method=MountingStyle.CHANNEL))
        assert a.deduction_width == b.deduction_width
        assert a.deduction_height == b.deduction_height

    def test_alias_kind(self):
        r = compute_deductions("hinged-door", _m())
        assert r.deduction_width == 8


class TestWeight:
    def test_glass_weight(self):
        # 1m x 2m of 10mm glass
        assert glass_weight(1000, 2000, 10) == pytest.approx(50.0)

    def test_weight_from_cut_size(self):
        r = compute_deductions(PanelKind.FIXED, _m(1010, 2005))
        assert r.glass_width == 1000
        assert r.glass_height == 2000
        assert r.weight == pytest.approx(50.0)

    def test_weight_scales_with_thickness(self):
        r8 = compute_deductions(PanelKind.FIXED, _m(), thickness_mm=8)
        r12 = compute_deductions(PanelKind.FIXED, _m(), thickness_mm=12)
        assert r12.weight > r8.weight


class TestLimits:
    def test_tight_width_not_above_deduction_raises(self):
        with pytest.raises(ValueError):
            compute_deductions(PanelKind.FIXED, _m(width=10))

    def test_tight_height_not_above_deduction_raises(self):
        with pytest.raises(ValueError):
            compute_deductions(PanelKind.DOOR_HINGED, _m(height=14))

    def test_undersized_cut_flagged(self):
        r = compute_deductions(PanelKind.FIXED, _m(width=80))
        assert r.glass_width == 70
        assert r.undersized
        assert any("below the minimum" in w for w in r.warnings)

    def test_normal_cut_not_undersized(self):
        assert not compute_deductions(PanelKind.FIXED, _m()).undersized

    def test_custom_rules(self):
        rules = DeductionRules(channel_wall=12)
        r = compute_deductions(PanelKind.FIXED, _m(), rules=rules)
        assert r.deduction_width == 12


def test_layout_deductions_cover_measured_panels():
    t = get_template("inline-single-door")
    sizes = t.split_opening(1000, 2000)
    measurements = {pid: _m(w, h) for pid, (w, h) in sizes.items()}
    results = compute_layout_deductions(t.graph(), measurements)
    assert set(results) == {"panel-1", "door-1"}
    assert results["panel-1"].glass_width == pytest.approx(390.0)
    assert results["door-1"].glass_width == pytest.approx(592.0)


def test_layout_deductions_skip_unmeasured():
    t = get_template("inline-single-door")
    results = compute_layout_deductions(t.graph(), {"door-1": _m(600, 2000)})
    assert list(results) == ["door-1"]
