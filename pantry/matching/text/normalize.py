"""Free-text normalization: quantities, units, descriptors and abbreviations."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .lexicon import (
    DEFAULT_ABBREVIATIONS,
    DEFAULT_DESCRIPTORS,
    VULGAR_FRACTIONS,
    Lexicon,
)

# Count, weight and volume units with their common abbreviations
_UNIT_WORDS: list[str] = [
    # weight
    "g", "gram", "grams", "kg", "kilogram", "kilograms", "mg",
    "oz", "ounce", "ounces", "lb", "lbs", "pound", "pounds",
    # volume
    "ml", "milliliter", "milliliters", "millilitre", "millilitres",
    "l", "liter", "liters", "litre", "litres", "cl", "dl", "cc",
    "cup", "cups", "tbsp", "tbs", "tablespoon", "tablespoons",
    "tsp", "teaspoon", "teaspoons", "floz", "pt", "pint", "pints",
    "qt", "quart", "quarts", "gal", "gallon", "gallons",
    # count
    "ct", "count", "pk", "pack", "packs", "pkg", "pkgs", "package", "packages",
    "can", "cans", "jar", "jars", "bottle", "bottles", "bag", "bags",
    "box", "boxes", "clove", "cloves", "stalk", "stalks", "head", "heads",
    "bunch", "bunches", "sprig", "sprigs", "slice", "slices",
    "piece", "pieces", "pcs", "pinch", "pinches", "dash", "dashes",
    "stick", "sticks", "dozen", "doz", "ea", "each",
]
# Longest first so "lbs" wins over "lb" and "cups" over "cup"
_UNIT = "(?:" + "|".join(sorted(_UNIT_WORDS, key=len, reverse=True)) + ")"

_NUMBER = r"\d+(?:[.,/]\d+)?(?:\s+\d+/\d+)?"
_QUANTITY = rf"{_NUMBER}(?:\s*(?:-|to)\s*{_NUMBER})?"

_CURRENCY_RE = re.compile(r"[$€£¥]\s*\d+(?:[.,]\d+)*")
_LEADING_QTY_RE = re.compile(rf"^[○•·\-*\s]*{_QUANTITY}\s*(?:{_UNIT}\b\.?)?\s*")
_INLINE_QTY_RE = re.compile(rf"\b{_QUANTITY}\s*{_UNIT}\b\.?")
_PUNCT_RE = re.compile(r"[^\w\s]|_")
_ITEM_NAME_RE = re.compile(r"[^a-z0-9\s]")
_WS_RE = re.compile(r"\s+")


def normalize_item_name(name: str | None) -> str:
    """Light normalization used for receipt names and scoring.

    Lowercases, turns anything that is not a-z/0-9/whitespace into a space and
    collapses runs of whitespace.
    """
    if not name:
        return ""
    return _WS_RE.sub(" ", _ITEM_NAME_RE.sub(" ", name.lower())).strip()


def tokenize(text: str | None) -> set[str]:
    """Split into a set of lowercase alphanumeric words of 2+ characters."""
    if not text:
        return set()
    cleaned = _ITEM_NAME_RE.sub("", text.lower())
    return {w for w in cleaned.split() if len(w) > 1}


def replace_vulgar_fractions(text: str) -> str:
    """Swap Unicode fraction characters for their ASCII form ("½" → "1/2")."""
    for char, ascii_form in VULGAR_FRACTIONS.items():
        if char in text:
            # "1½" reads as one and a half
            text = re.sub(rf"(\d){char}", rf"\1 {ascii_form}", text)
            text = text.replace(char, ascii_form)
    return text


class Normalizer:
    """Reduces free text to a comparable canonical form.

    The abbreviation table and descriptor vocabulary are injected so they can
    be extended (e.g. from configuration) without touching the algorithm.
    """

    def __init__(
        self,
        abbreviations: Lexicon = DEFAULT_ABBREVIATIONS,
        descriptors: Iterable[str] = DEFAULT_DESCRIPTORS,
    ) -> None:
        self._abbreviations = abbreviations
        self._descriptors = frozenset(d.lower() for d in descriptors)

    @property
    def abbreviations(self) -> Lexicon:
        return self._abbreviations

    @property
    def descriptors(self) -> frozenset[str]:
        return self._descriptors

    def normalize(self, raw: str | None) -> str:
        """Strip quantities, units, currency, punctuation and descriptors.

        Repeats until nothing changes, so the result is always a fixed point:
        ``normalize(normalize(x)) == normalize(x)``.
        """
        if not raw:
            return ""
        current = raw
        while True:
            reduced = self._normalize_once(current)
            if reduced == current:
                return reduced
            current = reduced

    def _normalize_once(self, text: str) -> str:
        text = replace_vulgar_fractions(text.lower())
        text = _CURRENCY_RE.sub(" ", text)
        text = _LEADING_QTY_RE.sub("", text)
        text = _INLINE_QTY_RE.sub(" ", text)
        text = _PUNCT_RE.sub(" ", text)
        words = [w for w in text.split() if w not in self._descriptors]
        return " ".join(words)

    def expand_abbreviations(self, text: str | None) -> str:
        """Replace known abbreviations word-for-word ("mlk whl" → "milk whole")."""
        if not text:
            return ""
        return " ".join(self._abbreviations.replace_words(text.lower().split()))


DEFAULT_NORMALIZER = Normalizer()


def normalize(raw: str | None) -> str:
    """Normalize *raw* with the default tables."""
    return DEFAULT_NORMALIZER.normalize(raw)


def expand_abbreviations(text: str | None) -> str:
    """Expand receipt abbreviations with the default table."""
    return DEFAULT_NORMALIZER.expand_abbreviations(text)
