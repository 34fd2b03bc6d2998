"""Free-text recipe import: title, ingredient and instruction extraction."""

from __future__ import annotations

import re

from ..text.lexicon import VULGAR_FRACTIONS
from ..text.normalize import replace_vulgar_fractions
from .models import ParsedIngredient, ParsedRecipe

_FRACTION_CHARS = "".join(VULGAR_FRACTIONS)
_QTY_TOKEN = rf"[\d/.{_FRACTION_CHARS}]+"
_FRACTION = rf"(?:\d+/\d+|[{_FRACTION_CHARS}])"
# "2", "1.5", "1/2", "1 1/2", "1 ½", "2-3"
_QTY = rf"{_QTY_TOKEN}(?:\s+{_FRACTION})?(?:\s*-\s*{_QTY_TOKEN})?"

_UNITS = (
    r"cups?|tbsp|tablespoons?|tsp|teaspoons?|oz|ounces?|lbs?|pounds?|"
    r"g|grams?|kg|kilograms?|ml|milliliters?|l|liters?|pinch|dash|cans?|"
    r"packages?|pkgs?|cloves?|stalks?|heads?|bunch(?:es)?|sprigs?|slices?|pieces?"
)

_MEASURE_RE = re.compile(rf"^({_QTY})\s*({_UNITS})\.?\s+(.+)", re.IGNORECASE)
_QTY_ONLY_RE = re.compile(rf"^({_QTY})\s+(.+)")
_NOTES_RE = re.compile(r"^(.+?)\s*\((.+)\)$")
_BULLET_RE = re.compile(r"^(?:[\-*•]+|\d+[.)](?!\d))\s*")
_STEP_NUMBER_RE = re.compile(r"^\d+[.)]\s*")
_LOOKS_LIKE_INGREDIENT_RE = re.compile(rf"^[\d{_FRACTION_CHARS}/]+")

_INGREDIENT_HEADER_RE = re.compile(r"^ingredients?:?$", re.IGNORECASE)
_INSTRUCTION_HEADER_RE = re.compile(
    r"^(?:instructions?|directions?|method|steps?|preparation|how to make):?$",
    re.IGNORECASE,
)
_ANY_HEADER_RE = re.compile(
    r"^(?:ingredients?|instructions?|directions?|method|steps?):?$", re.IGNORECASE
)
_COOKING_VERB_RE = re.compile(
    r"\b(?:add|mix|stir|cook|bake|heat|pour|combine|whisk|fold|preheat|place|"
    r"remove|let|serve)\b",
    re.IGNORECASE,
)

UNTITLED = "Untitled Recipe"


def looks_like_ingredient(line: str) -> bool:
    """Lines starting with a number or fraction are probably ingredients."""
    return _LOOKS_LIKE_INGREDIENT_RE.match(line) is not None


def _normalize_unit(unit: str) -> str:
    unit = unit.lower()
    if unit.endswith("ches"):
        return unit[:-2]
    return re.sub(r"s$", "", unit)


def _split_notes(text: str) -> tuple[str, str | None]:
    m = _NOTES_RE.match(text)
    if m:
        return m.group(1).strip(), m.group(2).strip()
    return text.strip(), None


def parse_ingredient_line(line: str) -> ParsedIngredient | None:
    """Parse "2 cups flour (sifted)" into quantity, unit, name and notes.

    Returns None for lines that are empty once bullets are removed.
    """
    cleaned = _BULLET_RE.sub("", line.strip()).strip()
    if not cleaned:
        return None

    m = _MEASURE_RE.match(cleaned)
    if m:
        quantity, unit, rest = m.groups()
        name, notes = _split_notes(rest)
        return ParsedIngredient(
            name=name,
            quantity=replace_vulgar_fractions(quantity.strip()),
            unit=_normalize_unit(unit),
            notes=notes,
        )

    m = _QTY_ONLY_RE.match(cleaned)
    if m:
        quantity, rest = m.groups()
        name, notes = _split_notes(rest)
        return ParsedIngredient(
            name=name,
            quantity=replace_vulgar_fractions(quantity.strip()),
            notes=notes,
        )

    name, notes = _split_notes(cleaned)
    return ParsedIngredient(name=name, notes=notes)


def _strip_step_number(line: str) -> str:
    return _STEP_NUMBER_RE.sub("", line)


def parse_recipe_text(text: str | None) -> ParsedRecipe:
    """Split pasted recipe text into title, ingredients and instructions.

    Uses "Ingredients" / "Instructions" style headers when present and falls
    back to a line-shape heuristic otherwise.
    """
    text = text or ""
    lines = [l.strip() for l in text.splitlines() if l.strip()]

    title = ""
    ingredients: list[ParsedIngredient] = []
    instruction_lines: list[str] = []
    in_ingredients = False
    in_instructions = False

    for line in lines:
        if len(line) < 2:
            continue

        is_ingredient_header = _INGREDIENT_HEADER_RE.match(line) is not None
        is_instruction_header = _INSTRUCTION_HEADER_RE.match(line) is not None

        if (
            not title
            and not is_ingredient_header
            and not is_instruction_header
            and not looks_like_ingredient(line)
        ):
            title = line
            continue

        if is_ingredient_header:
            in_ingredients, in_instructions = True, False
            continue
        if is_instruction_header:
            in_ingredients, in_instructions = False, True
            continue

        if in_ingredients:
            parsed = parse_ingredient_line(line)
            if parsed:
                ingredients.append(parsed)
        elif in_instructions:
            step = _strip_step_number(line)
            if step:
                instruction_lines.append(step)

    if not ingredients and not instruction_lines:
        title, ingredients, instruction_lines = _auto_detect_sections(lines, title)

    return ParsedRecipe(
        title=title or UNTITLED,
        ingredients=ingredients,
        instructions="\n\n".join(instruction_lines) if instruction_lines else text,
    )


def _auto_detect_sections(
    lines: list[str], title: str
) -> tuple[str, list[ParsedIngredient], list[str]]:
    """Guess sections for recipes pasted without headers."""
    ingredients: list[ParsedIngredient] = []
    instructions: list[str] = []

    for line in lines:
        if line == title:
            continue
        if _ANY_HEADER_RE.match(line):
            continue

        # Ingredients usually start with a number and are short
        if looks_like_ingredient(line) and len(line) < 80:
            parsed = parse_ingredient_line(line)
            if parsed:
                ingredients.append(parsed)
                continue

        if len(line) > 50 or _COOKING_VERB_RE.search(line):
            instructions.append(_strip_step_number(line))
            continue

        if not title and not ingredients and not instructions:
            title = line
        elif ingredients and not instructions:
            parsed = parse_ingredient_line(line)
            if parsed:
                ingredients.append(parsed)
        else:
            instructions.append(line)

    return title, ingredients, instructions
