import pytest

from showerkit.config import MeasurementLimits
from showerkit.design import OpeningMeasurements
from showerkit.fabrication.deductions import GlassDeductionResult
from showerkit.layout.graph import LayoutGraph
from showerkit.layout.model import Junction, Panel, PanelKind, Plane, Side, door_panel
from showerkit.layout.templates import get_template
from showerkit.validate.checks import (
    validate_cut_sizes,
    validate_layout,
    validate_measurement,
    validate_measurements,
)


@pytest.mark.parametrize(
    "kind,value,valid",
    [
        ("width", 600, True),
        ("width", 599, False),
        ("width", 3001, False),
        ("height", 1800, True),
        ("height", 2500, False),
        ("depth", 1500, True),
        ("depth", 500, False),
        ("rake_angle", 45, True),
        ("rake_angle", 0, False),
    ],
)
def test_validate_measurement_ranges(kind, value, valid):
    check = validate_measurement(kind, value)
    assert check.valid is valid
    assert (check.error is None) is valid


def test_validate_measurement_messages():
    assert validate_measurement("width", 100).error == "Width must be at least 600mm"
    assert validate_measurement("height", 3000).error == "Height must not exceed 2400mm"


def test_validate_measurement_unknown_kind_raises():
    with pytest.raises(ValueError):
        validate_measurement("diagonal", 1000)


def test_validate_measurement_custom_limits():
    limits = MeasurementLimits(width=(500, 3000))
    assert validate_measurement("width", 550, limits).valid


def test_validate_measurements_collects_errors():
    errors = validate_measurements(OpeningMeasurements(400, 2600, 200))
    assert len(errors) == 3


def test_validate_measurements_ignores_missing_depth():
    assert validate_measurements(OpeningMeasurements(900, 2000)) == []


def test_validate_layout_accepts_templates():
    assert validate_layout(get_template("corner-neo-angle").graph()) == []


def test_validate_layout_empty():
    assert validate_layout(LayoutGraph()) == ["No panels defined."]


def test_validate_layout_door_sides():
    broken = Panel("D1", kind=PanelKind.DOOR_HINGED, hinge_side=Side.LEFT, handle_side=Side.LEFT)
    missing = Panel("D2", kind=PanelKind.DOOR_HINGED, position_index=2)
    errors = validate_layout(LayoutGraph.from_parts([broken, missing], []))
    assert any("same edge" in e for e in errors)
    assert any("'D2'" in e for e in errors)


def test_validate_layout_fixed_panel_with_hinge():
    errors = validate_layout(LayoutGraph.from_parts([Panel("P1", hinge_side=Side.LEFT)], []))
    assert any("Fixed panel" in e for e in errors)


def test_validate_layout_bad_angle():
    g = LayoutGraph.from_parts(
        [Panel("P1"), door_panel("D1", Plane.FRONT, 2, Side.LEFT)],
        [Junction("J1", "P1", Side.RIGHT, "D1", Side.LEFT, angle_deg=45)],
    )
    assert any("45" in e for e in validate_layout(g))


def test_validate_layout_junction_to_unknown_panel():
    junctions = [Junction("J1", "P1", Side.RIGHT, "ghost", Side.LEFT)]
    g = LayoutGraph.from_parts([Panel("P1")], junctions)
    assert g.junctions == []
    errors = validate_layout(g, junctions)
    assert "Junction 'J1' references unknown panel: ghost" in errors


def test_validate_layout_template_junctions_all_known():
    template = get_template("corner-standard")
    assert validate_layout(template.graph(), template.junctions) == []


def test_validate_cut_sizes():
    ok = GlassDeductionResult(800, 1990, 10, 10, 40.0)
    small = GlassDeductionResult(60, 1990, 10, 10, 3.0, warnings=["Cut width 60mm is below the minimum usable 100mm."])
    warnings = validate_cut_sizes({"P1": ok, "P2": small})
    assert warnings == ["P2: Cut width 60mm is below the minimum usable 100mm."]
