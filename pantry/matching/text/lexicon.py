"""Immutable word lookup tables: receipt abbreviations, ingredient synonyms, descriptors."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType


class Lexicon:
    """Read-only mapping from a word (or phrase) to one or more replacement tokens.

    Keys are stored lowercased. Values are tuples so a single abbreviation can
    expand to several words (``ff`` → ``("fat", "free")``).
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, str | Iterable[str]] | None = None) -> None:
        table: dict[str, tuple[str, ...]] = {}
        for key, value in (entries or {}).items():
            if isinstance(value, str):
                tokens = tuple(value.lower().split())
            else:
                tokens = tuple(t.lower() for t in value)
            if tokens:
                table[key.strip().lower()] = tokens
        self._entries = MappingProxyType(table)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"Lexicon({len(self._entries)} entries)"

    @property
    def entries(self) -> Mapping[str, tuple[str, ...]]:
        return self._entries

    def get(self, word: str) -> tuple[str, ...] | None:
        """Replacement tokens for *word*, or None if it is not in the table."""
        return self._entries.get(word)

    def lookup(self, phrase: str) -> str | None:
        """Replacement for *phrase* joined back into a single string."""
        tokens = self._entries.get(phrase)
        if tokens is None:
            return None
        return " ".join(tokens)

    def replace_words(self, words: Iterable[str]) -> list[str]:
        """Replace each known word with its tokens, keeping order and unknown words."""
        result: list[str] = []
        for word in words:
            tokens = self._entries.get(word)
            if tokens is None:
                result.append(word)
            else:
                result.extend(tokens)
        return result

    def extend(self, extra: Mapping[str, str | Iterable[str]]) -> Lexicon:
        """Return a new lexicon with *extra* entries layered over this one."""
        merged: dict[str, str | Iterable[str]] = dict(self._entries)
        merged.update(extra)
        return Lexicon(merged)


# Common receipt abbreviations mapped to full words
DEFAULT_ABBREVIATIONS = Lexicon({
    "org": "organic",
    "bnls": "boneless",
    "sklss": "skinless",
    "chkn": "chicken",
    "brst": "breast",
    "thgh": "thigh",
    "whl": "whole",
    "whlmlk": "whole milk",
    "skim": "skim",
    "ff": "fat free",
    "lf": "low fat",
    "rf": "reduced fat",
    "gal": "gallon",
    "gln": "gallon",
    "qt": "quart",
    "pt": "pint",
    "oz": "ounce",
    "lb": "pound",
    "lbs": "pounds",
    "pk": "pack",
    "ct": "count",
    "lg": "large",
    "sm": "small",
    "md": "medium",
    "med": "medium",
    "frz": "frozen",
    "frzn": "frozen",
    "frsh": "fresh",
    "grn": "green",
    "rd": "red",
    "wht": "white",
    "brn": "brown",
    "yel": "yellow",
    "veg": "vegetable",
    "vegs": "vegetables",
    "frt": "fruit",
    "jce": "juice",
    "brd": "bread",
    "cer": "cereal",
    "yog": "yogurt",
    "ygrt": "yogurt",
    "chz": "cheese",
    "chs": "cheese",
    "btr": "butter",
    "egg": "eggs",
    "mlk": "milk",
    "crm": "cream",
    "ice": "ice",
    "icrm": "ice cream",
    "cof": "coffee",
    "cffe": "coffee",
    "tea": "tea",
    "sda": "soda",
    "wtr": "water",
    "spk": "sparkling",
    "sprk": "sparkling",
    "nat": "natural",
    "ntrl": "natural",
    "prem": "premium",
    "val": "value",
    "sav": "savings",
    "dsc": "discount",
    "sel": "select",
    "chc": "choice",
    "prm": "prime",
})

# Ingredient variants → base ingredient
DEFAULT_SYNONYMS = Lexicon({
    "peppers": "pepper",
    "bell pepper": "pepper",
    "bell peppers": "pepper",
    "capsicum": "pepper",
    "sweet pepper": "pepper",
    "sweet peppers": "pepper",
    "onions": "onion",
    "shallot": "onion",
    "shallots": "onion",
    "scallion": "onion",
    "scallions": "onion",
    "green onion": "onion",
    "tomatoes": "tomato",
    "cherry tomato": "tomato",
    "roma tomato": "tomato",
    "potatoes": "potato",
    "spud": "potato",
    "spuds": "potato",
    "carrots": "carrot",
    "garlic clove": "garlic",
    "garlic cloves": "garlic",
    "chicken breast": "chicken",
    "chicken thigh": "chicken",
    "ground beef": "beef",
    "beef steak": "beef",
    "steak": "beef",
    "mushrooms": "mushroom",
    "cremini": "mushroom",
    "portobello": "mushroom",
    "eggs": "egg",
    "whole egg": "egg",
    "lemons": "lemon",
    "lemon juice": "lemon",
    "limes": "lime",
    "lime juice": "lime",
    "cilantro": "coriander",
    "coriander leaves": "coriander",
    "broth": "stock",
    "chicken stock": "stock",
    "beef stock": "stock",
    "chicken broth": "stock",
    "vegetable stock": "stock",
})

# Words dropped during normalization: size, cut, cooking state, color,
# temperature, texture, trim and manner adverbs
DEFAULT_DESCRIPTORS: frozenset[str] = frozenset({
    "large", "small", "medium", "big", "tiny", "thin", "thick",
    "chopped", "minced", "diced", "sliced", "cubed", "julienned", "shredded",
    "grated", "crushed", "mashed", "pureed", "ground", "whole", "halved",
    "quartered", "cut", "torn", "crumbled", "flaked",
    "fresh", "dried", "frozen", "canned", "raw", "cooked", "roasted", "grilled",
    "baked", "fried", "steamed", "boiled", "blanched", "sauteed", "braised",
    "organic", "ripe", "unripe", "young", "mature", "aged",
    "red", "green", "yellow", "white", "black", "brown", "purple",
    "golden", "dark", "light",
    "hot", "cold", "warm", "chilled",
    "soft", "hard", "crispy", "crunchy", "tender", "firm",
    "boneless", "skinless", "seedless", "pitted", "peeled", "trimmed",
    "finely", "roughly", "coarsely", "freshly", "lightly",
})

# Unicode vulgar fractions → ASCII, shared by the normalizer and recipe import
VULGAR_FRACTIONS: Mapping[str, str] = MappingProxyType({
    "½": "1/2",
    "⅓": "1/3",
    "⅔": "2/3",
    "¼": "1/4",
    "¾": "3/4",
    "⅛": "1/8",
    "⅜": "3/8",
    "⅝": "5/8",
    "⅞": "7/8",
})
