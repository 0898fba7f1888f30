"""
Test cases for the menu selection state (active category vs. search result).
"""

import pytest

from thai_menu.catalog import Catalog
from thai_menu.data import load_menu_categories
from thai_menu.search import run_search
from thai_menu.selection import MenuSelectionState


@pytest.fixture
def catalog():
    return Catalog(load_menu_categories())


@pytest.fixture
def state():
    return MenuSelectionState()


class TestDefaultCategory:
    def test_first_category_selected_after_load(self, state, catalog):
        state.on_categories_loaded(catalog.list_categories())
        assert state.active_category_id == "starters"
        assert not state.showing_search

    def test_empty_catalog_leaves_no_category(self, state):
        state.on_categories_loaded(())
        assert state.active_category_id is None
        assert state.active_category(()) is None

    def test_existing_choice_kept_on_reload(self, state, catalog):
        state.select_category("desserts")
        state.on_categories_loaded(catalog.list_categories())
        assert state.active_category_id == "desserts"


class TestSearchTransitions:
    """Search results shadow the category view until cleared."""

    def test_search_then_clear_restores_category(self, state, catalog):
        state.on_categories_loaded(catalog.list_categories())
        state.select_category("curries")
        state.show_search_result(run_search("spicy", catalog))
        assert state.showing_search
        state.clear_search()
        assert not state.showing_search
        assert state.active_category_id == "curries"

    def test_selecting_category_keeps_search_visible(self, state, catalog):
        state.show_search_result(run_search("popular", catalog))
        state.select_category("drinks")
        assert state.showing_search
        assert state.active_category_id == "drinks"

    def test_new_search_replaces_old(self, state, catalog):
        state.show_search_result(run_search("popular", catalog))
        state.show_search_result(run_search("vegan", catalog))
        assert state.search_result.title == "Vegetarian Options"


class TestStepCategory:
    def test_wraps_forward_and_back(self, state, catalog):
        categories = catalog.list_categories()
        state.on_categories_loaded(categories)
        assert state.step_category(categories, -1) == "drinks"
        assert state.step_category(categories, 1) == "starters"
        assert state.step_category(categories, 1) == "soups"

    def test_unknown_active_id_resets_to_first(self, state, catalog):
        state.select_category("gone")
        assert state.step_category(catalog.list_categories(), 1) == "starters"

    def test_empty(self, state):
        assert state.step_category((), 1) is None
