"""Shopping list builder.

Folds the ingredient lines of every planned meal into one entry per
ingredient name, scaling each line by the meal's servings multiplier
and merging quantities with the combiner.
"""

import logging
from typing import Iterable, Optional, Sequence

from ..core.text import normalize_ingredient_key
from ..parsing.quantity_format import format_quantity
from ..parsing.quantity_parser import parse_quantity
from ..schemas import (
    ShoppingEntry,
    ShoppingIngredientIn,
    ShoppingItemIn,
    ShoppingItemUpdate,
    ShoppingMealIn,
)
from .categorize import categorize_ingredient, category_rank
from .quantity_combine import SEPARATOR, combine
from .scaling import scale

logger = logging.getLogger("recetario.shopping")


def _select_line(ing: ShoppingIngredientIn, meal: ShoppingMealIn, index: int) -> tuple[str, str, str]:
    """(name, amount, unit) for the variant and alternative chosen in this meal."""
    source = ing
    if meal.alternative_selections.get(index) and ing.alternative and ing.alternative.name.strip():
        source = ing.alternative

    if meal.selected_variant == 2 and source.amount2.strip():
        return source.name, source.amount2, source.unit2 or source.unit
    return source.name, source.amount, source.unit


def _line_quantity(amount: str, unit: str, multiplier: float) -> str:
    amount = (amount or "").strip()
    if not amount:
        return ""
    if multiplier != 1:
        amount = scale(amount, multiplier)
    return f"{amount} {unit or ''}".strip()


def _double(quantity: str) -> str:
    parsed = parse_quantity(quantity)
    if parsed.amount is None or SEPARATOR in quantity:
        return f"{quantity}{SEPARATOR}{quantity}"
    return format_quantity(parsed.amount * 2, parsed.unit)


def _merge_quantity(current: str, new: str, name: str) -> str:
    if current and new:
        # identical quantities from two sources add up
        if current == new:
            return _double(current)
        return combine(current, new, name)
    return new or current or ""


def _add_unique(target: list, values: Iterable[str]):
    for value in values:
        if value not in target:
            target.append(value)


def build_shopping_list(
    meals: Sequence[ShoppingMealIn],
    category_order: Optional[Sequence[str]] = None,
) -> list[ShoppingEntry]:
    """Generate shopping entries from planned meals, sorted by aisle then name."""
    aggregated = {}  # key -> ShoppingEntry

    for meal in meals:
        for index, ing in enumerate(meal.ingredients):
            if ing.is_header:
                continue

            name, amount, unit = _select_line(ing, meal, index)
            key = normalize_ingredient_key(name)
            if not key:
                continue
            quantity = _line_quantity(amount, unit, meal.servings_multiplier)

            entry = aggregated.get(key)
            if entry is None:
                aggregated[key] = ShoppingEntry(
                    name=name.strip(),
                    quantity=quantity,
                    category=categorize_ingredient(name),
                    recipes=[meal.recipe_title],
                )
                continue

            entry.quantity = _merge_quantity(entry.quantity, quantity, name)
            _add_unique(entry.recipes, [meal.recipe_title])

    items = list(aggregated.values())
    items.sort(key=lambda e: (category_rank(e.category, category_order), e.name.lower()))
    logger.debug(f"Built shopping list with {len(items)} items from {len(meals)} meals")
    return items


def merge_into_existing(
    existing: Sequence[ShoppingItemIn],
    incoming: Sequence[ShoppingEntry],
) -> tuple[list[ShoppingItemUpdate], list[ShoppingEntry]]:
    """
    Fold new entries into the items already on the list.
    Returns (to_update, to_insert); storage is up to the caller.
    """
    existing_map = {normalize_ingredient_key(item.name): item for item in existing}

    to_update = []
    to_insert = []
    for entry in incoming:
        current = existing_map.get(normalize_ingredient_key(entry.name))
        if current is None:
            to_insert.append(entry)
            continue

        sources = list(current.recipe_sources)
        _add_unique(sources, entry.recipes)
        to_update.append(ShoppingItemUpdate(
            id=current.id,
            quantity=_merge_quantity(current.quantity or "", entry.quantity, entry.name),
            recipe_sources=sources,
        ))

    return to_update, to_insert
