import json
from datetime import datetime

from showerkit.design import DesignConfiguration
from showerkit.fabrication.deductions import GlassDeductionResult
from showerkit.hardware.selector import select_hardware
from showerkit.layout.templates import get_template
from showerkit.quote.calculator import generate_quote
from showerkit.validate.reports import build_design_report, save_design_report


def _design() -> DesignConfiguration:
    return DesignConfiguration.default().with_template(get_template("inline-single-door"))


def test_build_design_report_ok_flag():
    report = build_design_report([], [])
    assert report["ok"] is True
    assert report["cuts"] == {}
    assert report["hardware"] is None
    assert report["quote"] is None

    report = build_design_report(["No panels defined."], [])
    assert report["ok"] is False

    report = build_design_report([], ["Width must be at least 600mm"])
    assert report["ok"] is False


def test_cut_warnings_do_not_fail_report():
    report = build_design_report([], [], cut_warnings=["P1: narrow"])
    assert report["ok"] is True
    assert report["cut_warnings"] == ["P1: narrow"]


def test_save_design_report(tmp_path):
    design = _design()
    cuts = {"door-1": GlassDeductionResult(532, 1986, 8, 14, 26.41)}
    report = build_design_report(
        [],
        [],
        cuts,
        select_hardware(design),
        generate_quote(design, now=datetime(2024, 1, 1)),
    )
    out = tmp_path / "design_report.json"
    save_design_report(report, out)

    loaded = json.loads(out.read_text(encoding="utf-8"))
    assert loaded["ok"] is True
    assert loaded["cuts"]["door-1"]["glass_width"] == 532
    assert loaded["hardware"]["hinge"]["brand"] == "geneva"
    assert loaded["quote"]["valid_until"].startswith("2024-01-31")
