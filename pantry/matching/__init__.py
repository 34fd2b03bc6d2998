"""Free-text matching for household inventory: receipts, catalog items and recipes."""

from .candidates import (
    BestMatch,
    CandidateMatcher,
    CandidatePool,
    CatalogItem,
    InventoryEntry,
    MatchCandidate,
    ShoppingListEntry,
    build_candidates,
    find_all_matches,
    find_best_match,
)
from .config import MatchingConfig, load_config
from .pipeline import MatchedReceiptItem, ReceiptMatcher, ReceiptMatchResult
from .receipts import (
    DetectedStore,
    KnownStore,
    ParsedItem,
    ReceiptParser,
    ReceiptParseResult,
    SkippedLine,
    detect_store,
    parse_receipt,
)
from .recipes import (
    IngredientMatcher,
    RecipeCandidate,
    RecipeIngredient,
    RecipeMatch,
    has_ingredient,
    parse_recipe_text,
    rank_recipes,
)
from .text import Lexicon, Normalizer, blended_score, expand_abbreviations, normalize

__all__ = [
    "Lexicon",
    "Normalizer",
    "normalize",
    "expand_abbreviations",
    "blended_score",
    "ReceiptParser",
    "parse_receipt",
    "ReceiptParseResult",
    "ParsedItem",
    "SkippedLine",
    "detect_store",
    "KnownStore",
    "DetectedStore",
    "MatchCandidate",
    "BestMatch",
    "CandidatePool",
    "CandidateMatcher",
    "ShoppingListEntry",
    "InventoryEntry",
    "CatalogItem",
    "build_candidates",
    "find_best_match",
    "find_all_matches",
    "IngredientMatcher",
    "RecipeCandidate",
    "RecipeIngredient",
    "RecipeMatch",
    "has_ingredient",
    "rank_recipes",
    "parse_recipe_text",
    "ReceiptMatcher",
    "ReceiptMatchResult",
    "MatchedReceiptItem",
    "MatchingConfig",
    "load_config",
]
