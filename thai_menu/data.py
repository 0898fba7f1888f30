"""Static menu data and catalog loading."""

from __future__ import annotations

import json
import os
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Iterable

from thai_menu.config import MENU_PATH_ENV
from thai_menu.constant import DEFAULT_DISH_STORY, DISH_STORIES, MENU_CATEGORIES
from thai_menu.models import ItemOption, MenuCategory, MenuItem, OptionChoice


class CatalogLoadError(Exception):
    """Raised when menu data cannot be loaded in full."""


def _to_price(value: Any, field_name: str) -> Decimal:
    try:
        price = Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise CatalogLoadError(f"{field_name}: invalid price {value!r}") from exc
    if price < 0:
        raise CatalogLoadError(f"{field_name}: price must be non-negative, got {price}")
    return price


def _parse_option(raw: dict[str, Any], item_id: str) -> ItemOption:
    choices = tuple(
        OptionChoice(
            label=str(choice["label"]),
            price_delta=_to_price(choice.get("price_delta", "0"), f"{item_id} option choice"),
        )
        for choice in raw.get("choices", [])
    )
    return ItemOption(name=str(raw["name"]), required=bool(raw.get("required", False)), choices=choices)


def _parse_item(raw: dict[str, Any]) -> MenuItem:
    item_id = str(raw["id"])
    protein = raw.get("protein")
    calories = raw.get("calories")
    return MenuItem(
        item_id=item_id,
        name=str(raw["name"]),
        description=str(raw.get("description") or ""),
        price=_to_price(raw["price"], item_id),
        image=raw.get("image"),
        popular=bool(raw.get("popular", False)),
        spicy=bool(raw.get("spicy", False)),
        vegetarian=bool(raw.get("vegetarian", False)),
        gluten_free=bool(raw.get("gluten_free", False)),
        protein=float(protein) if protein is not None else None,
        calories=int(calories) if calories is not None else None,
        allergens=tuple(str(a) for a in raw.get("allergens") or []),
        sourcing=raw.get("sourcing"),
        options=tuple(_parse_option(option, item_id) for option in raw.get("options") or []),
    )


def parse_menu_categories(raw_categories: Iterable[dict[str, Any]]) -> list[MenuCategory]:
    """Convert raw category records into frozen categories, rejecting bad data."""
    categories: list[MenuCategory] = []
    seen_item_ids: set[str] = set()
    try:
        for raw in raw_categories:
            items = tuple(_parse_item(item) for item in raw.get("items", []))
            for item in items:
                if item.item_id in seen_item_ids:
                    raise CatalogLoadError(f"duplicate item id {item.item_id!r}")
                seen_item_ids.add(item.item_id)
            categories.append(
                MenuCategory(
                    category_id=str(raw["id"]),
                    name=str(raw["name"]),
                    description=raw.get("description"),
                    image=raw.get("image"),
                    items=items,
                )
            )
    except (KeyError, TypeError, AttributeError, ValueError) as exc:
        raise CatalogLoadError(f"malformed menu data: {exc}") from exc
    return categories


def load_menu_categories(path: str | None = None) -> list[MenuCategory]:
    """
    Load the menu as a whole or not at all.

    Resolution order:
    1. explicit ``path``
    2. the file named by THAI_COOKERY_MENU_PATH (if set)
    3. the bundled MENU_CATEGORIES
    """
    source = path or os.environ.get(MENU_PATH_ENV)
    if not source:
        return parse_menu_categories(MENU_CATEGORIES)

    try:
        raw = json.loads(Path(source).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogLoadError(f"cannot read menu file {source}: {exc}") from exc

    if isinstance(raw, dict):
        raw = raw.get("categories")
    if not isinstance(raw, list):
        raise CatalogLoadError(f"menu file {source} must contain a list of categories")
    return parse_menu_categories(raw)


def dish_story_for_item(item_id: str) -> str:
    """Get the origin story shown in an item's detail panel."""
    return DISH_STORIES.get(item_id, DEFAULT_DISH_STORY)
