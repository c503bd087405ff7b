"""Command-line interface for showerkit.

Usage
-----
    showerkit --template corner-standard --width 1200 --height 2000
    showerkit --describe "corner shower with a door, return on the left" -o report.json
    showerkit -t inline-single-door --width 1400 --height 2000 --debug /tmp/debug/
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from showerkit.config import Config
from showerkit.design import DesignConfiguration, GlassType
from showerkit.fabrication.deductions import compute_layout_deductions
from showerkit.fabrication.outline import check_outline, panel_outline, save_outlines_geojson
from showerkit.fabrication.placement import check_support, handle_placement, hinge_placement
from showerkit.hardware.catalog import HandleType
from showerkit.hardware.selector import select_hardware
from showerkit.layout.model import DoorOpening, MountingStyle
from showerkit.layout.parser import parse_description
from showerkit.layout.templates import TemplateNotFound, get_template
from showerkit.quote.calculator import format_currency, generate_quote
from showerkit.validate.checks import validate_cut_sizes, validate_layout, validate_measurements
from showerkit.validate.reports import build_design_report, save_design_report

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s %(name)s: %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("showerkit.cli")

# used for described layouts when no size is given
_DESCRIBED_WIDTH = 1200
_DESCRIBED_HEIGHT = 2000


def _choices(enum_cls) -> click.Choice:
    return click.Choice([m.value for m in enum_cls])


@click.command()
@click.option("--template", "-t", "template_id", default=None, help="Template id from the library")
@click.option("--describe", "-d", "description", default=None, help="Free-text layout description")
@click.option("--width", type=float, default=None, help="Overall tight width (mm)")
@click.option("--height", type=float, default=None, help="Overall tight height (mm)")
@click.option("--depth", type=float, default=None, help="Return depth (mm)")
@click.option("--mounting", type=_choices(MountingStyle), default=None, help="Mounting style")
@click.option("--door-opening", type=_choices(DoorOpening), default=None, help="Door swing")
@click.option("--handle", type=_choices(HandleType), default="pull", show_default=True, help="Handle type")
@click.option("--glass-type", type=_choices(GlassType), default="clear", show_default=True, help="Glass finish")
@click.option("--premium-hinge", is_flag=True, help="Always use the premium hinge")
@click.option("--seals/--no-seals", default=True, show_default=True, help="Include seals in the quote")
@click.option("--installation", is_flag=True, help="Include installation in the quote")
@click.option("--threshold", is_flag=True, help="Door closes over a threshold")
@click.option("--ceiling-fixed", is_flag=True, help="Fixed panels run floor to ceiling")
@click.option("--magnetic", is_flag=True, help="Door closes on a magnetic strike profile")
@click.option("--config", "-c", "config_path", default=None, help="YAML configuration file")
@click.option("--output", "-o", "output_path", default=None, help="Write the design report (JSON) here")
@click.option("--debug", "debug_dir", default=None, help="Directory for debug outputs (outlines .geojson, report)")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def main(
    template_id: Optional[str],
    description: Optional[str],
    width: Optional[float],
    height: Optional[float],
    depth: Optional[float],
    mounting: Optional[str],
    door_opening: Optional[str],
    handle: str,
    glass_type: str,
    premium_hinge: bool,
    seals: bool,
    installation: bool,
    threshold: bool,
    ceiling_fixed: bool,
    magnetic: bool,
    config_path: Optional[str],
    output_path: Optional[str],
    debug_dir: Optional[str],
    verbose: bool,
) -> None:
    """Size the glass, pick the hardware and price a shower enclosure."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    # ---- Configuration ------------------------------------------------ #
    if config_path:
        cfg = Config.from_yaml(config_path)
    else:
        cfg = Config.default()
    if debug_dir:
        cfg.debug_output_dir = Path(debug_dir)
    if cfg.debug_output_dir:
        cfg.debug_output_dir.mkdir(parents=True, exist_ok=True)

    # ---- Layout ------------------------------------------------------- #
    if bool(template_id) == bool(description):
        logger.error("Give exactly one of --template or --describe")
        raise SystemExit(1)

    design = DesignConfiguration.default()
    if template_id:
        try:
            design = design.with_template(get_template(template_id))
        except TemplateNotFound:
            logger.error("Unknown template: %s", template_id)
            raise SystemExit(1)
        logger.info("Template %s: %d panels", template_id, design.panel_count)
        source_junctions = list(design.template.junctions)
    else:
        parsed = parse_description(description)
        if parsed.is_default:
            logger.warning("No layout keyword recognised; using the default corner layout")
        design = design.with_layout(parsed).with_measurements(
            _DESCRIBED_WIDTH, _DESCRIBED_HEIGHT
        )
        logger.info("Parsed layout: %d panels", design.panel_count)
        source_junctions = parsed.junctions

    m = design.measurements
    design = design.with_measurements(
        width if width is not None else m.width,
        height if height is not None else m.height,
        depth if depth is not None else m.depth,
    )

    # ---- Options ------------------------------------------------------ #
    changes = {
        "glass_type": glass_type,
        "glass_thickness": cfg.glass_thickness,
        "handle_type": handle,
        "hinge_preference": "premium" if premium_hinge else "auto",
        "include_seals": seals,
        "include_installation": installation,
        "has_threshold": threshold,
        "ceiling_fixed": ceiling_fixed,
    }
    if mounting:
        changes["mounting_type"] = mounting
    if door_opening:
        changes["door_opening"] = door_opening
    if magnetic:
        changes["seal_type"] = "magnetic"
    try:
        design = design.updated(**changes)
    except ValueError as exc:
        logger.error("%s", exc)
        raise SystemExit(1)

    # ---- Validation --------------------------------------------------- #
    graph = design.layout_graph()
    layout_errors = validate_layout(graph, source_junctions)
    measurement_errors = validate_measurements(design.measurements, cfg.limits)
    for e in layout_errors:
        logger.error("Layout error: %s", e)
    for e in measurement_errors:
        logger.error("Measurement error: %s", e)
    if layout_errors or measurement_errors:
        raise SystemExit(1)

    # ---- Cut sizes ---------------------------------------------------- #
    try:
        cuts = compute_layout_deductions(
            graph, design.panel_measurements(), cfg.deductions, design.glass_thickness
        )
    except ValueError as exc:
        logger.error("Deduction error: %s", exc)
        raise SystemExit(1)

    cut_warnings = validate_cut_sizes(cuts)
    outlines = {}
    for panel in graph.panels:
        result = cuts.get(panel.panel_id)
        if result is None:
            continue
        cut_warnings.extend(check_outline(panel, result))
        outlines[panel.panel_id] = panel_outline(panel, result)
        if panel.is_door:
            hinges = hinge_placement(result.glass_height)
            handle_at = handle_placement(result.glass_height, design.handle_type, hinges)
            for w in (hinges.warning, handle_at.warning):
                if w:
                    cut_warnings.append(f"{panel.panel_id}: {w}")
    support = check_support(graph, {pid: r.glass_width for pid, r in cuts.items()})
    for reason in (support.support_panel_reason, support.support_bar_reason):
        if reason:
            cut_warnings.append(reason)
    for w in cut_warnings:
        logger.warning("Fabrication warning: %s", w)

    # ---- Hardware + quote --------------------------------------------- #
    hardware = select_hardware(design, cfg)
    quote = generate_quote(design, cfg)

    for pid, r in cuts.items():
        click.echo(f"{pid}: {r.glass_width:g} x {r.glass_height:g} mm ({r.weight:g} kg)")
    hinge = hardware.hinge.hinge
    click.echo(f"Hinges: {hardware.hinge_count} x {hinge.name}")
    click.echo(f"Seals: {', '.join(s.name for s in hardware.seals) or 'none'}")
    for item in quote.line_items:
        click.echo(f"  {item.description}: {format_currency(item.total, quote.currency)}")
    click.echo(f"Total (inc. VAT): {format_currency(quote.total, quote.currency)}")

    report = build_design_report(
        layout_errors, measurement_errors, cuts, hardware, quote, cut_warnings
    )
    if output_path:
        save_design_report(report, Path(output_path))
        logger.info("Report written to %s", output_path)

    if cfg.debug_output_dir:
        save_outlines_geojson(outlines, cfg.debug_output_dir / "outlines.geojson")
        save_design_report(report, cfg.debug_output_dir / "design_report.json")
        logger.info("Debug outputs saved to %s", cfg.debug_output_dir)


if __name__ == "__main__":
    main()
