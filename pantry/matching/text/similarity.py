"""String similarity scoring: edit distance, token overlap and the blended match score."""

from __future__ import annotations

from dataclasses import dataclass

from rapidfuzz.distance import Levenshtein

from .normalize import DEFAULT_NORMALIZER, Normalizer, normalize_item_name, tokenize

# Token overlap is weighted higher because receipt names are often truncated.
# The acceptance thresholds (0.3 / 0.6) are calibrated against these weights.
EDIT_WEIGHT = 0.4
TOKEN_WEIGHT = 0.6


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance; substitution, insertion and deletion each cost 1."""
    return Levenshtein.distance(a, b)


def edit_similarity(a: str, b: str) -> float:
    """Edit distance scaled to 0.0–1.0 (1.0 = identical, including two empty strings)."""
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return 1.0 - edit_distance(a, b) / max_len


def jaccard_similarity(a: set[str], b: set[str]) -> float:
    """Intersection over union of two sets; 0.0 when both are empty."""
    union = a | b
    if not union:
        return 0.0
    return len(a & b) / len(union)


def token_similarity(a: str, b: str) -> float:
    """Jaccard similarity of the two strings' word sets.

    When neither side has any usable token the strings are compared directly:
    equal strings (two empty strings included) score 1.0, anything else 0.0.
    This keeps the empty case consistent with :func:`edit_similarity`.
    """
    tokens_a = tokenize(a)
    tokens_b = tokenize(b)
    if not tokens_a and not tokens_b:
        return 1.0 if a == b else 0.0
    return jaccard_similarity(tokens_a, tokens_b)


def blend(edit: float, token: float) -> float:
    """Combine an edit similarity and a token similarity into one score."""
    return EDIT_WEIGHT * edit + TOKEN_WEIGHT * token


@dataclass(frozen=True)
class ScoreBreakdown:
    """Every intermediate value behind a :func:`blended_score` result."""

    query: str
    name: str
    expanded_query: str
    expanded_name: str
    raw_edit: float
    raw_token: float
    expanded_edit: float
    expanded_token: float

    @property
    def raw_score(self) -> float:
        return blend(self.raw_edit, self.raw_token)

    @property
    def expanded_score(self) -> float:
        return blend(self.expanded_edit, self.expanded_token)

    @property
    def score(self) -> float:
        return max(self.raw_score, self.expanded_score)

    def summary_dict(self) -> dict:
        return {
            "query": self.query,
            "name": self.name,
            "expanded_query": self.expanded_query,
            "expanded_name": self.expanded_name,
            "raw": {
                "edit": round(self.raw_edit, 4),
                "token": round(self.raw_token, 4),
                "score": round(self.raw_score, 4),
            },
            "expanded": {
                "edit": round(self.expanded_edit, 4),
                "token": round(self.expanded_token, 4),
                "score": round(self.expanded_score, 4),
            },
            "score": round(self.score, 4),
        }


def score_breakdown(
    a: str, b: str, normalizer: Normalizer | None = None
) -> ScoreBreakdown:
    """Score *a* against *b* on the raw and abbreviation-expanded forms."""
    normalizer = normalizer or DEFAULT_NORMALIZER
    norm_a = normalize_item_name(a)
    norm_b = normalize_item_name(b)
    exp_a = normalizer.expand_abbreviations(norm_a)
    exp_b = normalizer.expand_abbreviations(norm_b)
    return ScoreBreakdown(
        query=norm_a,
        name=norm_b,
        expanded_query=exp_a,
        expanded_name=exp_b,
        raw_edit=edit_similarity(norm_a, norm_b),
        raw_token=token_similarity(norm_a, norm_b),
        expanded_edit=edit_similarity(exp_a, exp_b),
        expanded_token=token_similarity(exp_a, exp_b),
    )


def blended_score(a: str, b: str, normalizer: Normalizer | None = None) -> float:
    """Match score in 0.0–1.0 between a receipt/query string and a known name.

    ``max(blend(raw), blend(expanded))`` where each blend is
    ``0.4 * edit_similarity + 0.6 * token_similarity``.
    """
    return score_breakdown(a, b, normalizer).score
