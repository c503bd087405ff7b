"""Tests for the immutable design configuration."""

import dataclasses

import pytest

from showerkit.design import DesignConfiguration, GlassType, OpeningMeasurements
from showerkit.hardware.catalog import HandleType
from showerkit.layout.model import DoorOpening, MountingStyle
from showerkit.layout.parser import parse_description
from showerkit.layout.templates import get_template


class TestUpdated:
    def test_returns_new_object(self):
        base = DesignConfiguration.default()
        changed = base.updated(glass_type="frosted")
        assert changed is not base
        assert changed.glass_type is GlassType.FROSTED
        assert base.glass_type is GlassType.CLEAR

    def test_coerces_enums(self):
        d = DesignConfiguration.default().updated(
            mounting_type="clamps", door_opening="both", handle_type="knob"
        )
        assert d.mounting_type is MountingStyle.CLAMPS
        assert d.door_opening is DoorOpening.BOTH
        assert d.handle_type is HandleType.KNOB

    def test_unknown_option(self):
        with pytest.raises(ValueError, match="Unknown design option"):
            DesignConfiguration.default().updated(colour="pink")

    def test_invalid_enum_value(self):
        with pytest.raises(ValueError, match="glass_type"):
            DesignConfiguration.default().updated(glass_type="stained")

    def test_invalid_choice(self):
        with pytest.raises(ValueError):
            DesignConfiguration.default().updated(glass_thickness=6)
        with pytest.raises(ValueError):
            DesignConfiguration.default().updated(hardware_finish="rainbow")

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DesignConfiguration.default().glass_type = GlassType.TINTED


class TestTemplateAndLayout:
    def test_with_template_resets_defaults(self):
        d = DesignConfiguration.default().updated(mounting_type="clamps", door_opening="both")
        d = d.with_template(get_template("corner-standard"))
        assert d.mounting_type is MountingStyle.CHANNEL
        assert d.door_opening is DoorOpening.INWARD
        assert d.glass_thickness == 10
        assert d.measurements == OpeningMeasurements(900, 2000, 900)
        assert d.panel_count == 3
        assert d.has_door

    def test_with_template_clamp_only(self):
        d = DesignConfiguration.default().with_template(get_template("wetroom-single-panel"))
        assert d.mounting_type is MountingStyle.CLAMPS
        assert not d.has_door

    def test_with_layout_replaces_template(self):
        d = DesignConfiguration.default().with_template(get_template("corner-standard"))
        d = d.with_layout(parse_description("u-shaped with a front door"))
        assert d.template is None
        assert d.panel_count == 3
        assert [p.panel_id for p in d.layout_graph().panels] == ["P1", "D1", "P3"]

    def test_default_has_no_layout(self):
        d = DesignConfiguration.default()
        assert d.layout_graph() is None
        assert d.panel_count == 0
        assert not d.has_door


class TestPanelMeasurements:
    def test_uses_template_shares(self):
        d = (
            DesignConfiguration.default()
            .with_template(get_template("inline-single-door"))
            .with_measurements(1000, 2000)
            .updated(seal_type="magnetic", has_threshold=True)
        )
        m = d.panel_measurements()
        assert m["panel-1"].tight_width == 400
        assert m["door-1"].tight_width == 600
        assert m["door-1"].seal_type == "magnetic"
        assert m["door-1"].has_threshold

    def test_return_uses_depth(self):
        d = DesignConfiguration.default().with_template(get_template("l-left"))
        d = d.with_measurements(1000, 2000, 800)
        m = d.panel_measurements()
        assert m["P1"].tight_width == 800
        assert m["D1"].tight_width == 1000

    def test_empty_without_measurements(self):
        d = DesignConfiguration.default().with_layout(parse_description("corner"))
        assert d.panel_measurements() == {}
