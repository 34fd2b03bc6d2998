"""Tests for similarity scoring."""

import pytest

from pantry.matching.text.lexicon import Lexicon
from pantry.matching.text.normalize import Normalizer
from pantry.matching.text.similarity import (
    blend,
    blended_score,
    edit_distance,
    edit_similarity,
    jaccard_similarity,
    score_breakdown,
    token_similarity,
)

SAMPLES = [
    "",
    "a",
    "eggs",
    "Eggs",
    "ORG BANANAS",
    "organic bananas",
    "mlk whl gal",
    "Whole Milk",
    "chkn brst bnls",
    "2 @ $1.99",
    "Ben & Jerry's",
]


class TestEditDistance:
    def test_classic(self):
        assert edit_distance("kitten", "sitting") == 3

    def test_empty(self):
        assert edit_distance("", "abc") == 3
        assert edit_distance("", "") == 0


class TestEditSimilarity:
    def test_both_empty(self):
        assert edit_similarity("", "") == 1.0

    def test_one_empty(self):
        assert edit_similarity("abc", "") == 0.0

    def test_scaled_by_longer_string(self):
        assert edit_similarity("milk", "mlk") == pytest.approx(0.75)


class TestTokenSimilarity:
    def test_jaccard(self):
        assert jaccard_similarity({"a", "b"}, {"b", "c"}) == pytest.approx(1 / 3)

    def test_jaccard_empty(self):
        assert jaccard_similarity(set(), set()) == 0.0

    def test_partial_overlap(self):
        assert token_similarity("almond milk", "milk") == pytest.approx(0.5)

    def test_both_empty_strings(self):
        assert token_similarity("", "") == 1.0

    def test_no_tokens_equal_strings(self):
        assert token_similarity("a", "a") == 1.0

    def test_no_tokens_different_strings(self):
        assert token_similarity("a", "b") == 0.0


class TestBlend:
    def test_weights(self):
        assert blend(1.0, 0.0) == pytest.approx(0.4)
        assert blend(0.0, 1.0) == pytest.approx(0.6)
        assert blend(1.0, 1.0) == pytest.approx(1.0)


class TestBlendedScore:
    def test_abbreviation_pass_wins(self):
        assert blended_score("ORG BANANAS", "Organic Bananas") == pytest.approx(1.0)

    def test_raw_pass_value(self):
        b = score_breakdown("org bananas", "bananas")
        assert b.raw_edit == pytest.approx(1 - 4 / 11)
        assert b.raw_token == pytest.approx(0.5)
        assert b.score == pytest.approx(max(b.raw_score, b.expanded_score))

    def test_unrelated(self):
        assert blended_score("xyz", "bananas") == 0.0

    def test_custom_normalizer(self):
        normalizer = Normalizer(abbreviations=Lexicon({"bnna": "banana"}))
        assert blended_score("bnna", "banana", normalizer) == pytest.approx(1.0)
        assert blended_score("bnna", "banana") < 1.0

    def test_summary_dict(self):
        data = score_breakdown("MLK", "milk").summary_dict()
        assert data["expanded_query"] == "milk"
        assert data["raw"]["edit"] == 0.75
        assert data["raw"]["token"] == 0.0
        assert data["score"] == 1.0


class TestProperties:
    @pytest.mark.parametrize("a", SAMPLES)
    @pytest.mark.parametrize("b", SAMPLES)
    def test_symmetry(self, a, b):
        assert edit_similarity(a, b) == edit_similarity(b, a)
        assert token_similarity(a, b) == token_similarity(b, a)

    @pytest.mark.parametrize("a", SAMPLES)
    @pytest.mark.parametrize("b", SAMPLES)
    def test_range(self, a, b):
        assert 0.0 <= edit_similarity(a, b) <= 1.0
        assert 0.0 <= token_similarity(a, b) <= 1.0
        assert 0.0 <= blended_score(a, b) <= 1.0

    @pytest.mark.parametrize("a", [s for s in SAMPLES if s])
    def test_identity(self, a):
        assert edit_similarity(a, a) == 1.0
        assert blended_score(a, a) == pytest.approx(1.0)
