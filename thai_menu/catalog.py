"""Read-only catalog accessor over loaded menu categories."""

from __future__ import annotations

import re
from typing import Iterable

from thai_menu.models import MenuCategory, MenuItem

_TOKEN_RE = re.compile(r"[a-z0-9]+")


def _tokens(text: str) -> list[str]:
    return _TOKEN_RE.findall(text.lower())


class Catalog:
    """Categories with nested items, plus flattened lookups built once."""

    def __init__(self, categories: Iterable[MenuCategory]) -> None:
        self._categories: tuple[MenuCategory, ...] = tuple(categories)
        self._items_by_id: dict[str, MenuItem] = {}
        self._category_ids_by_item: dict[str, list[str]] = {}
        for category in self._categories:
            for item in category.items:
                self._items_by_id.setdefault(item.item_id, item)
                self._category_ids_by_item.setdefault(item.item_id, []).append(category.category_id)

    def list_categories(self) -> tuple[MenuCategory, ...]:
        return self._categories

    def is_empty(self) -> bool:
        return not self._categories

    def all_items(self) -> list[MenuItem]:
        """All items across categories in catalog order, each item once."""
        return list(self._items_by_id.values())

    def get_item(self, item_id: str) -> MenuItem | None:
        return self._items_by_id.get(item_id)

    def get_category(self, category_id: str) -> MenuCategory | None:
        for category in self._categories:
            if category.category_id == category_id:
                return category
        return None

    def categories_for_item(self, item_id: str) -> list[str]:
        """Category ids containing the item, in catalog order."""
        return list(self._category_ids_by_item.get(item_id, []))

    def search(self, text: str) -> list[MenuItem]:
        """
        Broad full-text search used as a fallback data source.

        Every query token must appear in the item's name, description,
        allergens, sourcing or category name.
        """
        query_tokens = _tokens(text)
        if not query_tokens:
            return []

        matches: list[MenuItem] = []
        for item in self._items_by_id.values():
            category_names = [
                category.name for category in self._categories if category.category_id in self._category_ids_by_item[item.item_id]
            ]
            haystack = " ".join(
                [item.name, item.description, item.sourcing or "", *item.allergens, *category_names]
            ).lower()
            if all(token in haystack for token in query_tokens):
                matches.append(item)
        return matches
