"""Tests for the template library."""

import pytest

from showerkit.layout.templates import (
    SHOWER_TEMPLATES,
    TemplateNotFound,
    get_template,
    split_opening,
    templates_by_category,
    templates_by_tags,
)
from showerkit.layout.model import Panel, Plane


def test_library_has_ten_templates():
    assert len(SHOWER_TEMPLATES) == 10
    ids = [t.template_id for t in SHOWER_TEMPLATES]
    assert len(set(ids)) == len(ids)


@pytest.mark.parametrize("template", SHOWER_TEMPLATES, ids=lambda t: t.template_id)
def test_junctions_reference_template_panels(template):
    panel_ids = {p.panel_id for p in template.panels}
    for j in template.junctions:
        assert j.a_panel_id in panel_ids
        assert j.b_panel_id in panel_ids


@pytest.mark.parametrize("template", SHOWER_TEMPLATES, ids=lambda t: t.template_id)
def test_graph_builds_and_validates(template):
    g = template.graph()
    assert len(g) == len(template.panels)
    assert len(g.junctions) == len(template.junctions)
    assert g.validate() == []


@pytest.mark.parametrize("template", SHOWER_TEMPLATES, ids=lambda t: t.template_id)
def test_split_covers_every_panel(template):
    dm = template.default_measurements
    sizes = template.split_opening(dm.width, dm.height, dm.depth)
    assert set(sizes) == {p.panel_id for p in template.panels}
    for w, h in sizes.values():
        assert w > 0
        assert h == dm.height


def test_get_template():
    t = get_template("corner-standard")
    assert t.category == "corner"
    assert t.has_door


def test_get_template_missing():
    with pytest.raises(TemplateNotFound):
        get_template("no-such-template")
    # still a KeyError for callers that catch that
    with pytest.raises(KeyError):
        get_template("no-such-template")


def test_templates_by_category():
    inline = templates_by_category("inline")
    assert {t.template_id for t in inline} == {"inline-single-door", "inline-double-door"}


def test_templates_by_tags_matches_any():
    found = templates_by_tags(["angled", "L-shaped"])
    ids = {t.template_id for t in found}
    assert "corner-neo-angle" in ids
    assert "wetroom-panel-return" in ids


def test_neo_angle_uses_135_degree_junctions():
    t = get_template("corner-neo-angle")
    assert {j.angle_deg for j in t.junctions} == {135}


def test_wetroom_single_panel_is_clamp_only():
    t = get_template("wetroom-single-panel")
    assert not t.has_door
    assert t.junctions == ()
    assert [m.value for m in t.supported_mounting] == ["clamps"]


class TestSplitOpening:
    def test_shares(self):
        t = get_template("inline-single-door")
        sizes = t.split_opening(1000, 2000)
        assert sizes["panel-1"] == (400.0, 2000.0)
        assert sizes["door-1"] == (600.0, 2000.0)

    def test_even_split_without_shares(self):
        panels = [
            Panel("A", plane=Plane.FRONT, position_index=1),
            Panel("B", plane=Plane.FRONT, position_index=2),
        ]
        sizes = split_opening(panels, 1200, 2000)
        assert sizes == {"A": (600.0, 2000.0), "B": (600.0, 2000.0)}

    def test_return_uses_depth(self):
        panels = [
            Panel("F", plane=Plane.FRONT),
            Panel("R", plane=Plane.RETURN_RIGHT, position_index=2),
        ]
        sizes = split_opening(panels, 1000, 2000, depth=800)
        assert sizes["F"][0] == 1000.0
        assert sizes["R"][0] == 800.0

    def test_return_falls_back_to_width(self):
        panels = [Panel("R", plane=Plane.RETURN_LEFT)]
        sizes = split_opening(panels, 900, 2000)
        assert sizes["R"][0] == 900.0
