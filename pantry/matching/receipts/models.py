"""Data models for parsed receipt lines, items and stores."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

LineKind = Literal["item", "subtotal", "tax", "total", "header", "unknown"]


@dataclass
class ClassifiedLine:
    """One receipt line after classification.

    ``kind == "item"`` only for lines that passed the acceptance filter.
    Rejected lines keep their extracted name/price for auditing and carry the
    rejection in ``reason``.
    """

    raw_text: str
    kind: LineKind
    item_name: str | None = None
    price: float | None = None
    quantity: int = 1
    reason: str | None = None  # skip reason; None for accepted items
    rule: str | None = None    # name of the skip rule that matched, if any

    @property
    def is_item(self) -> bool:
        return self.kind == "item"


@dataclass
class ParsedItem:
    """A receipt item accepted by the parser."""

    raw_name: str      # Original receipt line
    cleaned_name: str  # Normalized item name
    price: float
    quantity: int = 1

    def to_dict(self) -> dict:
        return {
            "rawName": self.raw_name,
            "cleanedName": self.cleaned_name,
            "price": self.price,
            "quantity": self.quantity,
        }


@dataclass
class SkippedLine:
    """A line that produced no item, with the reason why."""

    line: str
    reason: str

    def to_dict(self) -> dict:
        return {"line": self.line, "reason": self.reason}


@dataclass
class ReceiptParseResult:
    items: list[ParsedItem] = field(default_factory=list)
    skipped_lines: list[SkippedLine] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "items": [i.to_dict() for i in self.items],
            "skippedLines": [s.to_dict() for s in self.skipped_lines],
        }


@dataclass(frozen=True)
class KnownStore:
    """A store from the caller's household store list."""

    id: str
    name: str
    location: str | None = None


@dataclass(frozen=True)
class DetectedStore:
    name: str
    matched_id: str | None = None

    def to_dict(self) -> dict:
        return {"name": self.name, "matchedId": self.matched_id}
