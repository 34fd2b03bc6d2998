"""Receipt text parsing and store detection."""

from .lines import LINE_RULES, LineRule, classify_line, clean_item_name, parse_receipt_line
from .models import (
    ClassifiedLine,
    DetectedStore,
    KnownStore,
    ParsedItem,
    ReceiptParseResult,
    SkippedLine,
)
from .parser import ReceiptParser, calculate_items_total, parse_receipt
from .stores import STORE_PATTERNS, detect_store

__all__ = [
    "LINE_RULES",
    "LineRule",
    "classify_line",
    "clean_item_name",
    "parse_receipt_line",
    "ReceiptParser",
    "parse_receipt",
    "calculate_items_total",
    "detect_store",
    "STORE_PATTERNS",
    "ClassifiedLine",
    "ParsedItem",
    "SkippedLine",
    "ReceiptParseResult",
    "KnownStore",
    "DetectedStore",
]
