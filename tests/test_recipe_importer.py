"""Tests for free-text recipe import."""

import pytest

from pantry.matching.recipes.importer import (
    looks_like_ingredient,
    parse_ingredient_line,
    parse_recipe_text,
)

PANCAKES = """\
Classic Pancakes

Ingredients:
- 1 ½ cups all-purpose flour
- 2 tbsp sugar
- 1 cup milk (warm)
- 2 eggs
- Salt

Instructions:
1. Mix the dry ingredients.
2. Whisk in milk and eggs.
"""

SALAD = """\
Quick Salad
2 tomatoes
1 cucumber
Combine everything in a bowl and serve chilled.
"""


class TestParseIngredientLine:
    def test_quantity_unit_name(self):
        ing = parse_ingredient_line("2 cups flour")
        assert (ing.quantity, ing.unit, ing.name) == ("2", "cup", "flour")

    def test_notes(self):
        ing = parse_ingredient_line("1 cup milk (warm)")
        assert ing.name == "milk"
        assert ing.notes == "warm"

    def test_quantity_without_unit(self):
        ing = parse_ingredient_line("2 large eggs")
        assert ing.quantity == "2"
        assert ing.unit is None
        assert ing.name == "large eggs"

    def test_mixed_number_vulgar_fraction(self):
        ing = parse_ingredient_line("1 ½ cups flour")
        assert ing.quantity == "1 1/2"
        assert ing.unit == "cup"

    def test_attached_vulgar_fraction(self):
        ing = parse_ingredient_line("1½ tsp salt")
        assert ing.quantity == "1 1/2"
        assert ing.unit == "tsp"

    def test_ascii_fraction(self):
        ing = parse_ingredient_line("1/2 tsp salt")
        assert ing.quantity == "1/2"

    def test_range(self):
        ing = parse_ingredient_line("2-3 cloves garlic, minced")
        assert ing.quantity == "2-3"
        assert ing.unit == "clove"
        assert ing.name == "garlic, minced"

    def test_unit_plural_es(self):
        assert parse_ingredient_line("2 bunches cilantro").unit == "bunch"

    def test_grams_not_confused_with_g(self):
        ing = parse_ingredient_line("200 grams pasta")
        assert ing.unit == "gram"
        assert ing.name == "pasta"

    def test_unit_case_insensitive(self):
        assert parse_ingredient_line("3 TBSP. olive oil").unit == "tbsp"

    @pytest.mark.parametrize("line", ["- 2 cups flour", "* 2 cups flour", "• 2 cups flour", "1. 2 cups flour"])
    def test_bullets(self, line):
        ing = parse_ingredient_line(line)
        assert (ing.quantity, ing.unit, ing.name) == ("2", "cup", "flour")

    def test_decimal_not_treated_as_list_number(self):
        ing = parse_ingredient_line("1.5 cups water")
        assert ing.quantity == "1.5"

    def test_name_only(self):
        ing = parse_ingredient_line("Salt and pepper")
        assert ing.name == "Salt and pepper"
        assert ing.quantity is None
        assert ing.to_dict() == {"name": "Salt and pepper"}

    def test_empty(self):
        assert parse_ingredient_line("  - ") is None


class TestLooksLikeIngredient:
    @pytest.mark.parametrize("line", ["2 eggs", "½ cup sugar", "1/4 tsp salt"])
    def test_numeric(self, line):
        assert looks_like_ingredient(line)

    def test_text(self):
        assert not looks_like_ingredient("Preheat the oven")


class TestParseRecipeText:
    def test_sections(self):
        recipe = parse_recipe_text(PANCAKES)
        assert recipe.title == "Classic Pancakes"
        assert [i.name for i in recipe.ingredients] == [
            "all-purpose flour",
            "sugar",
            "milk",
            "eggs",
            "Salt",
        ]
        assert recipe.instructions == "Mix the dry ingredients.\n\nWhisk in milk and eggs."

    def test_header_variants(self):
        text = "Soup\nINGREDIENT\n1 can beans\nDirections:\nHeat the beans."
        recipe = parse_recipe_text(text)
        assert recipe.ingredients[0].unit == "can"
        assert recipe.instructions == "Heat the beans."

    def test_auto_detect(self):
        recipe = parse_recipe_text(SALAD)
        assert recipe.title == "Quick Salad"
        assert [i.name for i in recipe.ingredients] == ["tomatoes", "cucumber"]
        assert recipe.instructions == "Combine everything in a bowl and serve chilled."

    def test_untitled(self):
        recipe = parse_recipe_text("2 eggs\n1 cup milk")
        assert recipe.title == "Untitled Recipe"
        assert len(recipe.ingredients) == 2

    def test_instructions_default_to_text(self):
        text = "Toast\n2 slices bread"
        recipe = parse_recipe_text(text)
        assert recipe.instructions == text

    @pytest.mark.parametrize("text", [None, "", "\n \n"])
    def test_empty(self, text):
        recipe = parse_recipe_text(text)
        assert recipe.title == "Untitled Recipe"
        assert recipe.ingredients == []

    def test_to_dict(self):
        data = parse_recipe_text(PANCAKES).to_dict()
        assert data["title"] == "Classic Pancakes"
        assert data["ingredients"][2] == {
            "name": "milk",
            "quantity": "1",
            "unit": "cup",
            "notes": "warm",
        }
