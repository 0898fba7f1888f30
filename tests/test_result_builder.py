"""
Test cases for search results built from the catalog.
"""

from decimal import Decimal

import pytest

from thai_menu.catalog import Catalog
from thai_menu.constant import CATEGORY_TRANSLATIONS_ES
from thai_menu.data import load_menu_categories, parse_menu_categories
from thai_menu.models import Intent, ItemListResult, MessageResult
from thai_menu.search import build_result, run_search, spanish_menu_message


@pytest.fixture
def catalog():
    return Catalog(load_menu_categories())


def _item(item_id, name, **extra):
    raw = {"id": item_id, "name": name, "description": extra.pop("description", ""), "price": "10.00"}
    raw.update(extra)
    return raw


@pytest.fixture
def tie_catalog():
    """Small catalog with equal protein values to check ordering among ties."""
    return Catalog(
        parse_menu_categories(
            [
                {
                    "id": "mains",
                    "name": "Mains",
                    "items": [
                        _item("a", "Alpha", protein=20),
                        _item("b", "Bravo", protein=30),
                        _item("c", "Charlie", protein=20),
                        _item("d", "Delta"),
                        _item("e", "Echo", protein=30),
                        _item("f", "Foxtrot", protein=10),
                        _item("g", "Golf", protein=20),
                    ],
                }
            ]
        )
    )


def _names(result):
    return [item.name for item in result.items]


class TestFlagFilters:
    """Popular / spicy / vegetarian / gluten-free keep flagged items in catalog order."""

    def test_popular(self, catalog):
        result = run_search("most popular", catalog)
        assert result.title == "Most Popular Dishes"
        assert _names(result) == [
            "Thai Spring Rolls",
            "Tom Yum Goong",
            "Green Curry",
            "Pad Thai",
            "Crying Tiger",
            "Mango Sticky Rice",
        ]

    def test_spicy(self, catalog):
        result = run_search("spicy", catalog)
        assert result.title == "Spicy Dishes"
        assert all(item.spicy for item in result.items)
        assert len(result.items) == 6

    def test_vegetarian(self, catalog):
        result = run_search("vegan", catalog)
        assert result.title == "Vegetarian Options"
        assert all(item.vegetarian for item in result.items)
        assert "Pad Thai" not in _names(result)

    def test_gluten_free(self, catalog):
        result = run_search("gluten", catalog)
        assert result.title == "Gluten-Free Options"
        assert all(item.gluten_free for item in result.items)
        assert "Pad See Ew" not in _names(result)


class TestHighestProtein:
    """Top five by protein, descending."""

    def test_top_five(self, catalog):
        result = run_search("highest protein", catalog)
        assert result.title == "Highest Protein Dishes"
        assert _names(result) == [
            "Whole Fried Snapper",
            "Crying Tiger",
            "Massaman Curry",
            "Basil Chicken Rice",
            "Drunken Noodles",
        ]

    def test_never_more_than_five_and_non_increasing(self, catalog):
        result = build_result(Intent.HIGHEST_PROTEIN, catalog, "protein")
        proteins = [item.protein for item in result.items]
        assert len(proteins) <= 5
        assert proteins == sorted(proteins, reverse=True)

    def test_items_without_protein_excluded(self, tie_catalog):
        result = build_result(Intent.HIGHEST_PROTEIN, tie_catalog, "protein")
        assert "Delta" not in _names(result)

    def test_ties_keep_catalog_order(self, tie_catalog):
        result = build_result(Intent.HIGHEST_PROTEIN, tie_catalog, "protein")
        assert _names(result) == ["Bravo", "Echo", "Alpha", "Charlie", "Golf"]


class TestQuickLunch:
    """Starters, soups and anything named fried rice."""

    def test_quick_lunch(self, catalog):
        result = run_search("quick lunch options", catalog)
        assert result.title == "Quick Lunch Options"
        assert _names(result) == [
            "Thai Spring Rolls",
            "Steamed Dumplings",
            "Chicken Satay",
            "Tom Yum Goong",
            "Tom Kha Gai",
            "Vegetable Clear Soup",
            "Thai Fried Rice",
            "Pineapple Fried Rice",
        ]

    def test_fried_rice_match_is_case_insensitive(self):
        catalog = Catalog(
            parse_menu_categories(
                [{"id": "specials", "name": "Specials", "items": [_item("x", "CRAB FRIED RICE"), _item("y", "Crab Cake")]}]
            )
        )
        result = build_result(Intent.QUICK_LUNCH, catalog, "quick")
        assert _names(result) == ["CRAB FRIED RICE"]


class TestGenericTextSearch:
    """Substring search over name and description."""

    def test_pad_finds_pad_thai(self, catalog):
        result = run_search("pad", catalog)
        assert result.intent == Intent.GENERIC_TEXT_SEARCH
        assert "Pad Thai" in _names(result)

    def test_case_insensitive(self, catalog):
        assert _names(run_search("PAD", catalog)) == _names(run_search("pad", catalog))

    def test_matches_description(self, catalog):
        result = run_search("tamarind", catalog)
        assert "Pad Thai" in _names(result)
        assert "Whole Fried Snapper" in _names(result)

    def test_title_uses_original_query(self, catalog):
        result = run_search("Coconut", catalog)
        assert result.title == 'Search Results for "Coconut"'
        assert result.query == "Coconut"

    def test_no_matches_is_valid_empty_result(self, catalog):
        result = run_search("pizza", catalog)
        assert isinstance(result, ItemListResult)
        assert result.items == ()


class TestLanguageSwitch:
    """'spanish' yields a message, never items."""

    def test_message_result(self, catalog):
        result = run_search("spanish", catalog)
        assert isinstance(result, MessageResult)
        assert result.title == "Spanish Menu"
        assert not hasattr(result, "items")
        assert result.translations == CATEGORY_TRANSLATIONS_ES

    def test_message_lists_every_translation(self):
        message = spanish_menu_message()
        assert message.startswith("¡Aquí está nuestro menú en español!\n\n")
        assert "Starters → Entrantes" in message
        assert "Rice Dishes → Platos de Arroz" in message
        assert len(message.splitlines()) == 2 + len(CATEGORY_TRANSLATIONS_ES)


class TestRunSearchEdgeCases:
    """Blank queries and empty catalogs."""

    @pytest.mark.parametrize("query", ["", "   "])
    def test_blank_query_returns_nothing(self, catalog, query):
        assert run_search(query, catalog) is None

    def test_empty_catalog(self):
        catalog = Catalog([])
        assert run_search("spicy", catalog).items == ()
        assert run_search("protein", catalog).items == ()

    def test_results_are_catalog_items(self, catalog):
        result = run_search("popular", catalog)
        for item in result.items:
            assert catalog.get_item(item.item_id) is item
            assert isinstance(item.price, Decimal)
