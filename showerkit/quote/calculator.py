"""Quote calculation for a shower design."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Optional

from showerkit.config import Config
from showerkit.hardware.selector import select_hardware
from showerkit.layout.model import MountingStyle
from showerkit.quote.model import QuoteBreakdown, QuoteCategory, QuoteLineItem

logger = logging.getLogger(__name__)

# used when the design has no measurements yet
_FALLBACK_PERIMETER_M = 4.0
_FALLBACK_SEAL_LENGTH_M = 3.0

_MOUNTING_NAMES = {
    MountingStyle.CHANNEL: "U-Channel",
    MountingStyle.CLAMPS: "Glass Clamps",
}


def glass_area_m2(design) -> float:
    """Panel count x overall width x overall height, in m².

    Every panel is priced at the full opening size; this over-estimates
    multi-panel layouts and is the area the installation charge uses too.
    """
    m = design.measurements
    if m is None or design.panel_count == 0:
        return 0.0
    return design.panel_count * (m.width / 1000) * (m.height / 1000)


def _line(
    description: str,
    quantity: float,
    unit: str,
    unit_price: float,
    category: QuoteCategory,
) -> QuoteLineItem:
    return QuoteLineItem(
        description=description,
        quantity=round(quantity, 3),
        unit=unit,
        unit_price=unit_price,
        total=round(quantity * unit_price, 2),
        category=category,
    )


def generate_quote(
    design,
    config: Optional[Config] = None,
    now: Optional[datetime] = None,
) -> QuoteBreakdown:
    """Price *design* line by line and add VAT.

    Line order: glass, hinges, handle, mounting, seals, installation.
    """
    config = config or Config.default()
    pricing = config.pricing
    now = now or datetime.now()
    m = design.measurements
    items: list[QuoteLineItem] = []

    # glass
    area = glass_area_m2(design)
    rate = pricing.glass_rate(design.glass_type.value, design.glass_thickness)
    items.append(_line(
        f"{design.glass_type.value.title()} Glass ({design.glass_thickness}mm)",
        area, "m²", rate, QuoteCategory.GLASS,
    ))

    # hinges and handle
    hardware = select_hardware(design, config)
    hinge = hardware.hinge.hinge
    items.append(_line(
        f"{hinge.name} Hinges", hardware.hinge_count, "pcs", hinge.unit_cost,
        QuoteCategory.HARDWARE,
    ))
    if hardware.handle.unit_cost > 0:
        items.append(_line(
            hardware.handle.name, 1, "pcs", hardware.handle.unit_cost,
            QuoteCategory.HARDWARE,
        ))

    # mounting: width plus both sides
    perimeter = (m.width + 2 * m.height) / 1000 if m else _FALLBACK_PERIMETER_M
    mounting_rate = pricing.mounting_rates[design.mounting_type.value]
    items.append(_line(
        f"{_MOUNTING_NAMES[design.mounting_type]} ({design.hardware_finish})",
        perimeter, "m", mounting_rate, QuoteCategory.HARDWARE,
    ))

    if design.include_seals:
        seal_length = (m.height + m.width) / 1000 if m else _FALLBACK_SEAL_LENGTH_M
        for seal in hardware.seals:
            items.append(_line(
                seal.name, seal_length, "m", seal.unit_cost, QuoteCategory.SEALS,
            ))

    if design.include_installation:
        items.append(_line(
            "Professional Installation", area, "m²", pricing.installation_rate_per_m2,
            QuoteCategory.INSTALLATION,
        ))

    subtotal = round(sum(item.total for item in items), 2)
    vat = round(subtotal * pricing.vat_rate, 2)
    total = round(subtotal * (1 + pricing.vat_rate), 2)
    logger.debug("Quote: %d items, subtotal %.2f, total %.2f", len(items), subtotal, total)

    return QuoteBreakdown(
        line_items=items,
        subtotal=subtotal,
        vat=vat,
        total=total,
        valid_until=now + timedelta(days=pricing.validity_days),
        currency=pricing.currency,
        warnings=list(hardware.warnings),
    )


def format_currency(amount: float, currency: str = "GBP") -> str:
    symbol = {"GBP": "£", "EUR": "€", "USD": "$"}.get(currency, "")
    if symbol:
        return f"{symbol}{amount:,.2f}"
    return f"{amount:,.2f} {currency}"
