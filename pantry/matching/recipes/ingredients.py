"""Ingredient availability checks and recipe ranking by on-hand ingredients."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ..text.lexicon import DEFAULT_SYNONYMS, Lexicon
from ..text.normalize import DEFAULT_NORMALIZER, Normalizer
from ..text.similarity import edit_similarity
from .models import RecipeCandidate, RecipeIngredient, RecipeIngredientMatch, RecipeMatch

logger = logging.getLogger(__name__)

DEFAULT_SIMILARITY_THRESHOLD = 0.8


@dataclass(frozen=True)
class IngredientProfile:
    """Comparable forms of one ingredient string."""

    name: str               # normalized full name
    core: str               # last significant word, synonym-mapped
    terms: frozenset[str]   # full name, words, synonym hits


class IngredientMatcher:
    """Decides whether an ingredient is covered by a list of on-hand ingredients."""

    def __init__(
        self,
        normalizer: Normalizer | None = None,
        synonyms: Lexicon = DEFAULT_SYNONYMS,
        similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
    ) -> None:
        self._normalizer = normalizer or DEFAULT_NORMALIZER
        self._synonyms = synonyms
        self.similarity_threshold = similarity_threshold

    def normalize_name(self, name: str | None) -> str:
        return self._normalizer.normalize(name)

    def core_ingredient(self, name: str | None) -> str:
        """Main noun of an ingredient: its last word, resolved through synonyms."""
        return self._core_of(self.normalize_name(name))

    def _core_of(self, cleaned: str) -> str:
        if not cleaned:
            return ""
        last_word = cleaned.split()[-1]
        return (
            self._synonyms.lookup(last_word)
            or self._synonyms.lookup(cleaned)
            or last_word
        )

    def terms(self, name: str | None) -> frozenset[str]:
        return self.profile(name).terms

    def profile(self, name: str | None) -> IngredientProfile:
        cleaned = self.normalize_name(name)
        words = cleaned.split()
        terms: set[str] = set()
        if cleaned:
            terms.add(cleaned)
        terms.update(w for w in words if len(w) > 2)
        for phrase in [cleaned, *words]:
            synonym = self._synonyms.lookup(phrase)
            if synonym:
                terms.add(synonym)
        return IngredientProfile(
            name=cleaned, core=self._core_of(cleaned), terms=frozenset(terms)
        )

    def is_similar(self, a: str, b: str) -> bool:
        if a == b:
            return True
        return edit_similarity(a, b) >= self.similarity_threshold

    def profiles_match(self, a: IngredientProfile, b: IngredientProfile) -> bool:
        if len(a.core) > 2 and len(b.core) > 2 and self.is_similar(a.core, b.core):
            return True
        for term_a in a.terms:
            for term_b in b.terms:
                if term_a == term_b:
                    return True
                if len(term_a) >= 4 and len(term_b) >= 4:
                    if self.is_similar(term_a, term_b):
                        return True
                    if term_a in term_b or term_b in term_a:
                        return True
        return False

    def has_ingredient(
        self, recipe_ingredient: str, user_ingredients: Iterable[str]
    ) -> bool:
        """True if any of *user_ingredients* covers *recipe_ingredient*."""
        wanted = self.profile(recipe_ingredient)
        return any(
            self.profiles_match(wanted, self.profile(u)) for u in user_ingredients
        )

    def match_ingredients(
        self,
        ingredients: Iterable[RecipeIngredient],
        user_ingredients: Iterable[str],
    ) -> list[RecipeIngredientMatch]:
        """Flag each recipe ingredient as in stock or not."""
        on_hand = [self.profile(u) for u in user_ingredients]
        result: list[RecipeIngredientMatch] = []
        for ing in ingredients:
            wanted = self.profile(ing.name)
            in_stock = any(self.profiles_match(wanted, have) for have in on_hand)
            result.append(
                RecipeIngredientMatch(name=ing.name, measure=ing.measure, in_stock=in_stock)
            )
        return result

    def match_recipe(
        self, recipe: RecipeCandidate, user_ingredients: Iterable[str]
    ) -> RecipeMatch:
        matches = self.match_ingredients(recipe.ingredients, user_ingredients)
        matched = sum(1 for m in matches if m.in_stock)
        total = len(matches)
        return RecipeMatch(
            recipe=recipe,
            ingredients=matches,
            matched_count=matched,
            total_ingredients=total,
            match_percentage=match_percentage(matched, total),
        )

    def rank_recipes(
        self,
        recipes: Iterable[RecipeCandidate],
        user_ingredients: Sequence[str],
        limit: int | None = None,
    ) -> list[RecipeMatch]:
        """Recipes ordered by match percentage, user-authored first on ties."""
        matches = [self.match_recipe(r, user_ingredients) for r in recipes]
        matches.sort(key=lambda m: (-m.match_percentage, not m.recipe.user_authored))
        logger.debug(
            "Ranked %d recipes against %d on-hand ingredients",
            len(matches),
            len(user_ingredients),
        )
        if limit is not None:
            return matches[:limit]
        return matches


def match_percentage(matched: int, total: int) -> int:
    """Whole-number percentage, halves rounded up; 0 when there is nothing to match."""
    if total <= 0:
        return 0
    return (200 * matched + total) // (2 * total)


DEFAULT_INGREDIENT_MATCHER = IngredientMatcher()


def normalize_ingredient_name(name: str | None) -> str:
    return DEFAULT_INGREDIENT_MATCHER.normalize_name(name)


def core_ingredient(name: str | None) -> str:
    return DEFAULT_INGREDIENT_MATCHER.core_ingredient(name)


def ingredient_terms(name: str | None) -> frozenset[str]:
    return DEFAULT_INGREDIENT_MATCHER.terms(name)


def has_ingredient(recipe_ingredient: str, user_ingredients: Iterable[str]) -> bool:
    return DEFAULT_INGREDIENT_MATCHER.has_ingredient(recipe_ingredient, user_ingredients)


def match_recipe(recipe: RecipeCandidate, user_ingredients: Iterable[str]) -> RecipeMatch:
    return DEFAULT_INGREDIENT_MATCHER.match_recipe(recipe, user_ingredients)


def rank_recipes(
    recipes: Iterable[RecipeCandidate],
    user_ingredients: Sequence[str],
    limit: int | None = None,
) -> list[RecipeMatch]:
    return DEFAULT_INGREDIENT_MATCHER.rank_recipes(recipes, user_ingredients, limit)
