"""Text normalization and similarity scoring."""

from .lexicon import (
    DEFAULT_ABBREVIATIONS,
    DEFAULT_DESCRIPTORS,
    DEFAULT_SYNONYMS,
    VULGAR_FRACTIONS,
    Lexicon,
)
from .normalize import (
    DEFAULT_NORMALIZER,
    Normalizer,
    expand_abbreviations,
    normalize,
    normalize_item_name,
    tokenize,
)
from .similarity import (
    ScoreBreakdown,
    blend,
    blended_score,
    edit_distance,
    edit_similarity,
    jaccard_similarity,
    score_breakdown,
    token_similarity,
)

__all__ = [
    "Lexicon",
    "DEFAULT_ABBREVIATIONS",
    "DEFAULT_SYNONYMS",
    "DEFAULT_DESCRIPTORS",
    "VULGAR_FRACTIONS",
    "Normalizer",
    "DEFAULT_NORMALIZER",
    "normalize",
    "expand_abbreviations",
    "normalize_item_name",
    "tokenize",
    "edit_distance",
    "edit_similarity",
    "jaccard_similarity",
    "token_similarity",
    "blend",
    "blended_score",
    "score_breakdown",
    "ScoreBreakdown",
]
