"""Quote line items and the priced breakdown handed to persistence / checkout."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class QuoteCategory(str, Enum):
    GLASS = "glass"
    HARDWARE = "hardware"
    SEALS = "seals"
    INSTALLATION = "installation"
    OTHER = "other"


@dataclass
class QuoteLineItem:
    description: str
    quantity: float
    unit: str         # "m²", "pcs", "m", "set"
    unit_price: float
    total: float
    category: QuoteCategory = QuoteCategory.OTHER

    def to_dict(self) -> dict:
        return {
            "description": self.description,
            "quantity": self.quantity,
            "unit": self.unit,
            "unit_price": self.unit_price,
            "total": self.total,
            "category": self.category.value,
        }


@dataclass
class QuoteBreakdown:
    line_items: list[QuoteLineItem]
    subtotal: float
    vat: float
    total: float
    valid_until: datetime
    currency: str = "GBP"
    warnings: list[str] = field(default_factory=list)

    def items_in(self, category: QuoteCategory | str) -> list[QuoteLineItem]:
        category = QuoteCategory(category)
        return [item for item in self.line_items if item.category is category]

    def to_dict(self) -> dict:
        return {
            "line_items": [item.to_dict() for item in self.line_items],
            "subtotal": self.subtotal,
            "vat": self.vat,
            "total": self.total,
            "currency": self.currency,
            "valid_until": self.valid_until.isoformat(),
            "warnings": list(self.warnings),
        }
