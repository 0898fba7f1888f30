"""Active category / search result state for the menu screen."""

from __future__ import annotations

from dataclasses import dataclass

from thai_menu.models import MenuCategory, SearchResult


@dataclass
class MenuSelectionState:
    """
    Either a category's items or a search result is on display.

    Selecting a category leaves an active search in place; only
    ``clear_search`` returns to the category view.
    """

    active_category_id: str | None = None
    search_result: SearchResult | None = None

    @property
    def showing_search(self) -> bool:
        return self.search_result is not None

    def on_categories_loaded(self, categories: tuple[MenuCategory, ...] | list[MenuCategory]) -> None:
        """Default to the first category once, after the catalog has loaded."""
        if self.active_category_id is None and categories:
            self.active_category_id = categories[0].category_id

    def select_category(self, category_id: str) -> None:
        self.active_category_id = category_id

    def step_category(self, categories: tuple[MenuCategory, ...] | list[MenuCategory], delta: int) -> str | None:
        """Move through the carousel, wrapping at either end."""
        if not categories:
            return None
        ids = [category.category_id for category in categories]
        if self.active_category_id not in ids:
            self.active_category_id = ids[0]
        else:
            idx = ids.index(self.active_category_id)
            self.active_category_id = ids[(idx + delta) % len(ids)]
        return self.active_category_id

    def show_search_result(self, result: SearchResult) -> None:
        self.search_result = result

    def clear_search(self) -> None:
        self.search_result = None

    def active_category(
        self, categories: tuple[MenuCategory, ...] | list[MenuCategory]
    ) -> MenuCategory | None:
        for category in categories:
            if category.category_id == self.active_category_id:
                return category
        return None
