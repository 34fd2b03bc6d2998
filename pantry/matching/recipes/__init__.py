"""Recipe ingredient matching and recipe text import."""

from .importer import looks_like_ingredient, parse_ingredient_line, parse_recipe_text
from .ingredients import (
    DEFAULT_INGREDIENT_MATCHER,
    IngredientMatcher,
    IngredientProfile,
    core_ingredient,
    has_ingredient,
    ingredient_terms,
    match_percentage,
    match_recipe,
    normalize_ingredient_name,
    rank_recipes,
)
from .models import (
    ParsedIngredient,
    ParsedRecipe,
    RecipeCandidate,
    RecipeIngredient,
    RecipeIngredientMatch,
    RecipeMatch,
)

__all__ = [
    "IngredientMatcher",
    "IngredientProfile",
    "DEFAULT_INGREDIENT_MATCHER",
    "normalize_ingredient_name",
    "core_ingredient",
    "ingredient_terms",
    "has_ingredient",
    "match_recipe",
    "rank_recipes",
    "match_percentage",
    "parse_recipe_text",
    "parse_ingredient_line",
    "looks_like_ingredient",
    "RecipeIngredient",
    "RecipeCandidate",
    "RecipeIngredientMatch",
    "RecipeMatch",
    "ParsedIngredient",
    "ParsedRecipe",
]
