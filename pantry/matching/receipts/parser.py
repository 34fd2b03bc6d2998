"""Whole-receipt parsing into accepted items and audited skipped lines."""

from __future__ import annotations

import logging

from ..text.normalize import normalize_item_name
from .lines import (
    DEFAULT_MAX_PRICE,
    DEFAULT_MIN_NAME_LENGTH,
    DEFAULT_MIN_PRICE,
    parse_receipt_line,
)
from .models import ClassifiedLine, ParsedItem, ReceiptParseResult, SkippedLine

logger = logging.getLogger(__name__)


class ReceiptParser:
    """Parses pasted or OCR receipt text line by line."""

    def __init__(
        self,
        min_price: float = DEFAULT_MIN_PRICE,
        max_price: float = DEFAULT_MAX_PRICE,
        min_name_length: int = DEFAULT_MIN_NAME_LENGTH,
    ) -> None:
        self.min_price = min_price
        self.max_price = max_price
        self.min_name_length = min_name_length

    def parse_line(self, line: str) -> ClassifiedLine:
        return parse_receipt_line(
            line,
            min_price=self.min_price,
            max_price=self.max_price,
            min_name_length=self.min_name_length,
        )

    def parse(self, text: str | None) -> ReceiptParseResult:
        """Split *text* into lines and parse each one.

        Blank lines are ignored. Every other line ends up either in ``items``
        or in ``skipped_lines`` with a reason; malformed text degrades to an
        all-skipped result rather than an error.
        """
        result = ReceiptParseResult()
        if not text:
            return result

        for line in text.splitlines():
            if not line.strip():
                continue
            parsed = self.parse_line(line)
            if parsed.is_item:
                result.items.append(
                    ParsedItem(
                        raw_name=parsed.raw_text,
                        cleaned_name=normalize_item_name(parsed.item_name),
                        price=parsed.price,
                        quantity=parsed.quantity,
                    )
                )
            else:
                logger.debug("Skipped receipt line (%s): %s", parsed.reason, parsed.raw_text)
                result.skipped_lines.append(
                    SkippedLine(line=parsed.raw_text, reason=parsed.reason or parsed.kind)
                )

        logger.debug(
            "Parsed receipt: %d items, %d skipped lines",
            len(result.items),
            len(result.skipped_lines),
        )
        return result


DEFAULT_PARSER = ReceiptParser()


def parse_receipt(text: str | None) -> ReceiptParseResult:
    """Parse receipt text with the default price and name limits."""
    return DEFAULT_PARSER.parse(text)


def calculate_items_total(items: list[ParsedItem]) -> float:
    """Sum of price × quantity over parsed items, for checking against the printed total."""
    return round(sum(item.price * item.quantity for item in items), 2)
