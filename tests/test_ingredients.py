"""Tests for ingredient matching and recipe ranking."""

import pytest

from pantry.matching.recipes.ingredients import (
    IngredientMatcher,
    core_ingredient,
    has_ingredient,
    ingredient_terms,
    match_percentage,
    match_recipe,
    normalize_ingredient_name,
    rank_recipes,
)
from pantry.matching.recipes.models import RecipeCandidate, RecipeIngredient
from pantry.matching.text.lexicon import DEFAULT_SYNONYMS


def _recipe(id, title, names, user_authored=False):
    return RecipeCandidate(
        id=id,
        title=title,
        ingredients=[RecipeIngredient(name=n) for n in names],
        user_authored=user_authored,
    )


@pytest.fixture
def recipes():
    return [
        _recipe("ext-1", "Omelette", ["2 large eggs", "1 tbsp butter", "salt"]),
        _recipe("ext-2", "Garlic Bread", ["1 loaf bread", "3 cloves garlic", "salt"]),
        _recipe(
            "usr-1",
            "Scrambled Eggs",
            ["3 eggs", "2 tbsp butter", "1 splash milk"],
            user_authored=True,
        ),
    ]


class TestCoreIngredient:
    def test_descriptor_and_quantity_stripped(self):
        assert normalize_ingredient_name("2 large eggs") == "eggs"

    def test_plural_synonym(self):
        assert core_ingredient("2 large eggs") == "egg"

    def test_phrase_synonym(self):
        assert core_ingredient("bell pepper") == "pepper"

    def test_unknown_word(self):
        assert core_ingredient("1 cup quinoa") == "quinoa"

    def test_empty(self):
        assert core_ingredient("") == ""

    def test_terms(self):
        terms = ingredient_terms("chicken breast")
        assert {"chicken breast", "chicken", "breast"} <= terms

    def test_terms_skip_short_words(self):
        assert "of" not in ingredient_terms("cup of tea")


class TestHasIngredient:
    def test_eggs(self):
        assert has_ingredient("2 large eggs", ["eggs"])

    def test_chopped_onions(self):
        assert has_ingredient("1 cup chopped onions", ["onion"])

    def test_synonym(self):
        assert has_ingredient("1 red bell pepper", ["peppers"])

    def test_substring_term(self):
        assert has_ingredient("2 cups chicken stock", ["stock"])

    def test_near_spelling(self):
        assert has_ingredient("1 tsp cinnamon", ["cinamon"])

    def test_missing(self):
        assert not has_ingredient("2 cloves garlic", ["chicken", "rice"])

    def test_no_user_ingredients(self):
        assert not has_ingredient("salt", [])

    def test_custom_synonyms(self):
        matcher = IngredientMatcher(synonyms=DEFAULT_SYNONYMS.extend({"aubergine": "eggplant"}))
        assert matcher.has_ingredient("1 aubergine", ["eggplant"])
        assert not has_ingredient("1 aubergine", ["eggplant"])


class TestMatchPercentage:
    @pytest.mark.parametrize(
        "matched, total, expected",
        [(2, 3, 67), (1, 3, 33), (1, 2, 50), (1, 8, 13), (3, 3, 100), (0, 4, 0), (0, 0, 0)],
    )
    def test_rounding(self, matched, total, expected):
        assert match_percentage(matched, total) == expected


class TestMatchRecipe:
    def test_flags(self, recipes):
        result = match_recipe(recipes[0], ["eggs", "butter"])
        assert [i.in_stock for i in result.ingredients] == [True, True, False]
        assert result.matched_count == 2
        assert result.total_ingredients == 3
        assert result.match_percentage == 67

    def test_no_ingredients(self):
        result = match_recipe(_recipe("e", "Empty", []), ["eggs"])
        assert result.match_percentage == 0
        assert result.total_ingredients == 0

    def test_to_dict(self, recipes):
        data = match_recipe(recipes[2], ["eggs"]).to_dict()
        assert data["id"] == "usr-1"
        assert data["userAuthored"] is True
        assert data["ingredients"][0] == {"name": "3 eggs", "measure": "", "inStock": True}
        assert data["matchPercentage"] == 33


class TestRankRecipes:
    def test_user_authored_first_on_ties(self, recipes):
        ranked = rank_recipes(recipes, ["eggs", "butter"])
        assert [m.recipe.id for m in ranked] == ["usr-1", "ext-1", "ext-2"]
        assert ranked[0].match_percentage == ranked[1].match_percentage == 67

    def test_sorted_by_percentage(self, recipes):
        ranked = rank_recipes(recipes, ["bread", "garlic", "salt"])
        assert ranked[0].recipe.id == "ext-2"
        assert ranked[0].match_percentage == 100

    def test_limit(self, recipes):
        assert len(rank_recipes(recipes, ["eggs"], limit=1)) == 1

    def test_empty(self):
        assert rank_recipes([], ["eggs"]) == []
