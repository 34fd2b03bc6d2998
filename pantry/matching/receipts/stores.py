"""Store detection from the receipt header."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from .models import DetectedStore, KnownStore

logger = logging.getLogger(__name__)

DEFAULT_HEADER_LINES = 15

# Common retailer name patterns → canonical name, checked in order.
# Each pattern starts at a word boundary; short names also end at one.
STORE_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (re.compile(rf"\b{pattern}", re.IGNORECASE), name)
    for pattern, name in [
        (r"walmart", "Walmart"),
        (r"target\b", "Target"),
        (r"costco\b", "Costco"),
        (r"sam'?s\s*club", "Sam's Club"),
        (r"kroger", "Kroger"),
        (r"safeway", "Safeway"),
        (r"albertson", "Albertsons"),
        (r"publix", "Publix"),
        (r"aldi\b", "Aldi"),
        (r"lidl\b", "Lidl"),
        (r"trader\s*joe", "Trader Joe's"),
        (r"whole\s*foods", "Whole Foods"),
        (r"sprouts", "Sprouts"),
        (r"h[\-\s]*e[\-\s]*b\b", "HEB"),
        (r"wegman", "Wegmans"),
        (r"harris\s*teeter", "Harris Teeter"),
        (r"food\s*lion", "Food Lion"),
        (r"giant\b", "Giant"),
        (r"stop\s*&?\s*shop", "Stop & Shop"),
        (r"meijer", "Meijer"),
        (r"winco", "WinCo"),
        (r"cvs\b", "CVS"),
        (r"walgreen", "Walgreens"),
        (r"rite\s*aid", "Rite Aid"),
        (r"dollar\s*(?:general|tree)", "Dollar Store"),
        (r"piggly\s*wiggly", "Piggly Wiggly"),
        (r"food\s*city", "Food City"),
        (r"jewel[\-\s]*osco", "Jewel-Osco"),
        (r"fresh\s*market", "Fresh Market"),
        (r"save[\-\s]*a[\-\s]*lot", "Save-A-Lot"),
    ]
)

_WELCOME_PATTERN = re.compile(r"welcome\s+to\s+([^\n]+)", re.IGNORECASE)


def _find_known(name: str, known_stores: Sequence[KnownStore]) -> str | None:
    """ID of the first known store whose name equals *name*, ignoring case."""
    target = name.lower()
    for store in known_stores:
        if store.name.lower() == target:
            return store.id
    return None


def detect_store(
    text: str | None,
    known_stores: Sequence[KnownStore] = (),
    header_lines: int = DEFAULT_HEADER_LINES,
) -> DetectedStore | None:
    """Work out which store a receipt came from using its first lines.

    Tries, in order: the caller's known store names, the built-in retailer
    patterns, then a "welcome to <name>" greeting. Returns None when nothing
    matches.
    """
    if not text:
        return None

    lines = text.splitlines()[:header_lines]
    header = " ".join(lines).lower()

    for store in known_stores:
        store_name = store.name.strip().lower()
        if store_name and store_name in header:
            logger.debug("Store matched known store %r", store.name)
            return DetectedStore(name=store.name, matched_id=store.id)

    for pattern, name in STORE_PATTERNS:
        if pattern.search(header):
            logger.debug("Store matched retailer pattern %r", name)
            return DetectedStore(name=name, matched_id=_find_known(name, known_stores))

    welcome = _WELCOME_PATTERN.search("\n".join(lines))
    if welcome:
        extracted = welcome.group(1).strip(" \t!.")
        if extracted:
            return DetectedStore(
                name=extracted, matched_id=_find_known(extracted, known_stores)
            )

    return None
