"""Single receipt line classification and item extraction."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .models import ClassifiedLine, LineKind

DEFAULT_MIN_PRICE = 0.01
DEFAULT_MAX_PRICE = 1000.0
DEFAULT_MIN_NAME_LENGTH = 2


@dataclass(frozen=True)
class LineRule:
    """A skip pattern and the line kind it assigns."""

    name: str
    pattern: re.Pattern[str]
    kind: LineKind

    def matches(self, line: str) -> bool:
        return self.pattern.search(line) is not None


def _rule(name: str, pattern: str, kind: LineKind) -> LineRule:
    return LineRule(name, re.compile(pattern, re.IGNORECASE), kind)


# Evaluated in order, first match wins
LINE_RULES: tuple[LineRule, ...] = (
    _rule("subtotal", r"^(?:sub\s*total|subtotal)", "subtotal"),
    _rule("tax", r"^(?:sales\s*tax|tax\s*\d|state\s*tax|local\s*tax)", "tax"),
    _rule("total", r"^(?:total|grand\s*total|balance\s*due)\b", "total"),
    _rule(
        "payment",
        r"^(?:cash|credit|debit|visa|mastercard|amex|discover|change|tender|payment)\b",
        "header",
    ),
    _rule(
        "boilerplate",
        r"^(?:thank\s*you|thanks\s*for|receipt\b|store\s*#|trans\s*#|transaction\b)",
        "header",
    ),
    _rule("register", r"^(?:register\b|cashier\b|terminal\b|ref\s*#)", "header"),
    _rule("date", r"^(?:date\b|time\b|\d{1,2}[/\-]\d{1,2}[/\-]\d{2,4})", "header"),
    _rule("contact", r"^(?:tel\b|phone\b|fax\b|www\.|http|email\b)", "header"),
    _rule("savings", r"^(?:member\b|savings\b|you\s*saved|discount\b|coupon)", "header"),
    _rule("card_number", r"^(?:card\s*#|\*{4,})", "header"),
    _rule("authorization", r"^(?:approved\b|authorization\b|auth\s*#)", "header"),
    _rule("blank", r"^\s*$", "header"),
    _rule("separator", r"^[\-=_*]{3,}$", "header"),
    _rule("item_number", r"^#\d+\s*$", "header"),
)

# "$3.99", "3.99", "1,299.00" or "3.99 F" (trailing tax code) at end of line.
# Must not start inside a longer number.
PRICE_PATTERN = re.compile(
    r"(?<![\d,.])\$?\s*(\d{1,3}(?:,\d{3})+\.\d{2}|\d+\.\d{2})(?:\s*[A-Z])?$"
)

# Multi-buy with the unit price inline: "2 @ $1.99 BANANAS"
UNIT_PRICE_PATTERN = re.compile(r"(\d+)\s*[@x]\s*\$?\s*(\d+\.\d{2})", re.IGNORECASE)

QUANTITY_PATTERNS: tuple[re.Pattern[str], ...] = (
    # "2 @" / "2x" at start, with its unit price if present
    re.compile(r"^(\d+)\s*[@x]\s*(?:\$?\s*\d+\.\d{2}\s*)?", re.IGNORECASE),
    # Small number followed by a space at start (4+ digits are item codes)
    re.compile(r"^(\d{1,3})\s+"),
    # "2 @ $" anywhere
    re.compile(r"(\d+)\s*[@x]\s*\$\s*(?:\d+\.\d{2})?", re.IGNORECASE),
    # "2 @" / "2x" left at the end once the trailing price is cut off
    re.compile(r"\b(\d+)\s*[@x]$", re.IGNORECASE),
)

# Weight suffix after the item name: "2.5 lb", "12oz"
WEIGHT_PATTERN = re.compile(r"(\d+\.?\d*)\s*(lb|oz|kg|g)\s*$", re.IGNORECASE)

_EDGE_MARKERS = re.compile(r"^[\s\-_*#]+|[\s\-_*#]+$")
_ITEM_CODE = re.compile(r"^\d{4,}\s+")
_WS = re.compile(r"\s+")


def classify_line(line: str) -> LineRule | None:
    """Return the first skip rule matching *line*, or None."""
    for rule in LINE_RULES:
        if rule.matches(line):
            return rule
    return None


def clean_item_name(name: str) -> str:
    """Trim edge markers, drop a leading item code and collapse whitespace."""
    name = _EDGE_MARKERS.sub("", name)
    name = _ITEM_CODE.sub("", name)
    return _WS.sub(" ", name).strip()


def extract_quantity(text: str) -> tuple[int, str]:
    """Pull a quantity off *text*; returns (quantity, remaining text)."""
    for pattern in QUANTITY_PATTERNS:
        m = pattern.search(text)
        if m:
            quantity = int(m.group(1))
            remaining = (text[: m.start()] + " " + text[m.end():]).strip()
            return (quantity or 1, remaining)
    return (1, text)


def parse_receipt_line(
    line: str,
    min_price: float = DEFAULT_MIN_PRICE,
    max_price: float = DEFAULT_MAX_PRICE,
    min_name_length: int = DEFAULT_MIN_NAME_LENGTH,
) -> ClassifiedLine:
    """Classify one line and extract name, price and quantity from item lines.

    Never raises. Lines whose price or name fail the acceptance checks come
    back as ``unknown`` with ``reason`` set to ``invalid_price`` or
    ``name_too_short``.
    """
    trimmed = line.strip()

    rule = classify_line(trimmed)
    if rule is not None:
        return ClassifiedLine(
            raw_text=trimmed, kind=rule.kind, reason=rule.kind, rule=rule.name
        )

    quantity = 1
    price_match = PRICE_PATTERN.search(trimmed)
    if price_match:
        price = float(price_match.group(1).replace(",", ""))
        item_name = trimmed[: price_match.start()].strip()
        quantity, item_name = extract_quantity(item_name)
    else:
        unit_match = UNIT_PRICE_PATTERN.search(trimmed)
        if unit_match is None:
            return ClassifiedLine(
                raw_text=trimmed, kind="unknown", item_name=trimmed, reason="unknown"
            )
        price = float(unit_match.group(2))
        quantity = int(unit_match.group(1)) or 1
        item_name = (
            trimmed[: unit_match.start()] + " " + trimmed[unit_match.end():]
        ).strip()

    weight_match = WEIGHT_PATTERN.search(item_name)
    if weight_match:
        item_name = item_name[: weight_match.start()].strip()

    item_name = clean_item_name(item_name)

    reason: str | None = None
    if price < min_price or price > max_price:
        reason = "invalid_price"
    elif len(item_name) < min_name_length:
        reason = "name_too_short"

    return ClassifiedLine(
        raw_text=trimmed,
        kind="item" if reason is None else "unknown",
        item_name=item_name or None,
        price=price,
        quantity=quantity,
        reason=reason,
    )
