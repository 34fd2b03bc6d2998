"""Data models for recipe ingredient matching and recipe text import."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class RecipeIngredient:
    name: str
    measure: str = ""


@dataclass
class RecipeCandidate:
    """A recipe to rank against what the household has on hand."""

    id: str
    title: str
    ingredients: list[RecipeIngredient] = field(default_factory=list)
    user_authored: bool = False  # False for externally sourced recipes


@dataclass
class RecipeIngredientMatch:
    name: str
    measure: str
    in_stock: bool

    def to_dict(self) -> dict:
        return {"name": self.name, "measure": self.measure, "inStock": self.in_stock}


@dataclass
class RecipeMatch:
    """A recipe annotated with per-ingredient availability."""

    recipe: RecipeCandidate
    ingredients: list[RecipeIngredientMatch] = field(default_factory=list)
    matched_count: int = 0
    total_ingredients: int = 0
    match_percentage: int = 0

    def to_dict(self) -> dict:
        return {
            "id": self.recipe.id,
            "title": self.recipe.title,
            "userAuthored": self.recipe.user_authored,
            "ingredients": [i.to_dict() for i in self.ingredients],
            "matchedCount": self.matched_count,
            "totalIngredients": self.total_ingredients,
            "matchPercentage": self.match_percentage,
        }


@dataclass
class ParsedIngredient:
    """One ingredient line from imported recipe text."""

    name: str
    quantity: str | None = None
    unit: str | None = None
    notes: str | None = None

    def to_dict(self) -> dict:
        data = {"name": self.name}
        if self.quantity is not None:
            data["quantity"] = self.quantity
        if self.unit is not None:
            data["unit"] = self.unit
        if self.notes is not None:
            data["notes"] = self.notes
        return data


@dataclass
class ParsedRecipe:
    title: str
    instructions: str
    ingredients: list[ParsedIngredient] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "ingredients": [i.to_dict() for i in self.ingredients],
            "instructions": self.instructions,
        }
