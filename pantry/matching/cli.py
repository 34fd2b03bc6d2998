"""CLI entry point for the matching pipeline."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .candidates import CatalogItem, InventoryEntry, ShoppingListEntry
from .config import MatchingConfig, load_config
from .pipeline import ReceiptMatcher
from .receipts.models import KnownStore
from .recipes.importer import parse_recipe_text
from .recipes.models import RecipeCandidate, RecipeIngredient
from .text.similarity import score_breakdown


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="pantry-match",
        description="Match receipt and recipe text against a household inventory",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="path to a configuration file (TOML)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # receipt
    receipt_parser = sub.add_parser(
        "receipt", help="parse a receipt and match its items"
    )
    receipt_parser.add_argument("file", help="receipt text file ('-' for stdin)")
    receipt_parser.add_argument(
        "--catalog",
        type=str,
        default=None,
        metavar="JSON",
        help="household data: stores, shoppingList, inventory, items",
    )
    receipt_parser.add_argument("--json", action="store_true", help="output JSON")

    # recipe
    recipe_parser = sub.add_parser("recipe", help="import a free-text recipe")
    recipe_parser.add_argument("file", help="recipe text file ('-' for stdin)")
    recipe_parser.add_argument("--json", action="store_true", help="output JSON")

    # suggest
    suggest_parser = sub.add_parser(
        "suggest", help="rank recipes by the ingredients on hand"
    )
    suggest_parser.add_argument("recipes", help="JSON file with a list of recipes")
    suggest_parser.add_argument(
        "--have", nargs="+", required=True, metavar="ING", help="ingredients on hand"
    )
    suggest_parser.add_argument("--limit", type=int, default=None)
    suggest_parser.add_argument("--json", action="store_true", help="output JSON")

    # score
    score_parser = sub.add_parser("score", help="show how two names score")
    score_parser.add_argument("query")
    score_parser.add_argument("name")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        config = load_config(args.config)
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else config.logging.level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

        match args.command:
            case "receipt":
                _cmd_receipt(config, args)
            case "recipe":
                _cmd_recipe(args)
            case "suggest":
                _cmd_suggest(config, args)
            case "score":
                _cmd_score(config, args)
    except (OSError, json.JSONDecodeError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def _load_json(path: str):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def _load_household(path: str | None) -> dict:
    """Read stores, shopping list, inventory and catalog rows from JSON."""
    if path is None:
        return {"known_stores": [], "shopping_list": [], "inventory": [], "catalog": []}

    data = _load_json(path)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object")

    return {
        "known_stores": [
            KnownStore(id=s["id"], name=s["name"], location=s.get("location"))
            for s in data.get("stores", [])
        ],
        "shopping_list": [
            ShoppingListEntry(id=e["id"], name=e.get("name"), item_id=e.get("itemId"))
            for e in data.get("shoppingList", [])
        ],
        "inventory": [
            InventoryEntry(
                id=e["id"],
                item_id=e["itemId"],
                name=e.get("name"),
                shelf_id=e.get("shelfId"),
                quantity=e.get("quantity", 0),
            )
            for e in data.get("inventory", [])
        ],
        "catalog": [
            CatalogItem(id=i["id"], name=i["name"]) for i in data.get("items", [])
        ],
    }


def _cmd_receipt(config: MatchingConfig, args) -> None:
    text = _read_text(args.file)
    try:
        household = _load_household(args.catalog)
    except KeyError as e:
        raise ValueError(f"{args.catalog}: missing field {e}") from e

    result = ReceiptMatcher(config).match_receipt(text, **household)

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return

    if result.store:
        matched = f" (id {result.store.matched_id})" if result.store.matched_id else ""
        print(f"Store: {result.store.name}{matched}")
    else:
        print("Store: unknown")

    print(f"\nItems ({len(result.items)}):")
    for entry in result.items:
        item = entry.item
        line = f"  {item.quantity} x {item.cleaned_name:<30} {item.price:>8.2f}"
        if entry.match:
            m = entry.match
            line += f"  -> {m.candidate.name} [{m.candidate.source}, {m.score:.0%} {m.confidence}]"
        print(line)
    print(f"  {'Total':<34} {result.items_total:>8.2f}")

    if result.skipped_lines:
        print(f"\nSkipped ({len(result.skipped_lines)}):")
        for s in result.skipped_lines:
            print(f"  [{s.reason}] {s.line}")


def _cmd_recipe(args) -> None:
    recipe = parse_recipe_text(_read_text(args.file))

    if args.json:
        print(json.dumps(recipe.to_dict(), ensure_ascii=False, indent=2))
        return

    print(recipe.title)
    print(f"\nIngredients ({len(recipe.ingredients)}):")
    for ing in recipe.ingredients:
        amount = " ".join(p for p in (ing.quantity, ing.unit) if p)
        notes = f" ({ing.notes})" if ing.notes else ""
        print(f"  - {amount + ' ' if amount else ''}{ing.name}{notes}")
    print("\nInstructions:")
    print(recipe.instructions)


def _cmd_suggest(config: MatchingConfig, args) -> None:
    data = _load_json(args.recipes)
    if not isinstance(data, list):
        raise ValueError(f"{args.recipes}: expected a JSON list of recipes")
    try:
        recipes = [
            RecipeCandidate(
                id=str(r["id"]),
                title=r["title"],
                ingredients=[
                    RecipeIngredient(name=i["name"], measure=i.get("measure", ""))
                    for i in r.get("ingredients", [])
                ],
                user_authored=bool(r.get("userAuthored", False)),
            )
            for r in data
        ]
    except KeyError as e:
        raise ValueError(f"{args.recipes}: missing field {e}") from e

    ranked = config.ingredient_matcher().rank_recipes(
        recipes, args.have, limit=args.limit
    )

    if args.json:
        print(json.dumps([m.to_dict() for m in ranked], ensure_ascii=False, indent=2))
        return

    if not ranked:
        print("No recipes to rank.")
        return
    for m in ranked:
        mark = " *" if m.recipe.user_authored else ""
        print(
            f"{m.match_percentage:>3}%  {m.recipe.title}{mark}"
            f"  ({m.matched_count}/{m.total_ingredients})"
        )
        missing = [i.name for i in m.ingredients if not i.in_stock]
        if missing:
            print(f"       missing: {', '.join(missing)}")


def _cmd_score(config: MatchingConfig, args) -> None:
    breakdown = score_breakdown(args.query, args.name, config.normalizer())
    matcher = config.candidate_matcher()
    data = breakdown.summary_dict()
    data["accepted"] = breakdown.score > matcher.min_score
    data["confidence"] = matcher.confidence_for(breakdown.score)
    print(json.dumps(data, ensure_ascii=False, indent=2))
