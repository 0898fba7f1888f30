"""
Test cases for menu loading and the catalog accessor.
"""

import json
from decimal import Decimal

import pytest

from thai_menu.catalog import Catalog
from thai_menu.config import MENU_PATH_ENV
from thai_menu.constant import DEFAULT_DISH_STORY
from thai_menu.data import CatalogLoadError, dish_story_for_item, load_menu_categories, parse_menu_categories


@pytest.fixture
def catalog():
    return Catalog(load_menu_categories())


@pytest.fixture
def small_menu():
    return [
        {
            "id": "mains",
            "name": "Mains",
            "items": [
                {"id": "larb", "name": "Larb Gai", "description": "Minced chicken salad", "price": "9.50", "spicy": True},
                {"id": "som-tam", "name": "Som Tam", "description": "Green papaya salad", "price": 8},
            ],
        },
        {"id": "sides", "name": "Sides", "items": [{"id": "rice", "name": "Sticky Rice", "price": "2.00"}]},
    ]


class TestLoadMenu:
    """Loading the bundled menu and external menu files."""

    def test_bundled_menu(self, monkeypatch):
        monkeypatch.delenv(MENU_PATH_ENV, raising=False)
        categories = load_menu_categories()
        assert [c.category_id for c in categories] == [
            "starters",
            "soups",
            "curries",
            "noodles",
            "rice-dishes",
            "signature-specials",
            "desserts",
            "drinks",
        ]
        assert all(category.items for category in categories)

    def test_prices_are_decimal(self, small_menu):
        categories = parse_menu_categories(small_menu)
        assert categories[0].items[0].price == Decimal("9.50")
        assert categories[0].items[1].price == Decimal("8")

    def test_missing_flags_default_false(self, small_menu):
        item = parse_menu_categories(small_menu)[0].items[1]
        assert not (item.popular or item.spicy or item.vegetarian or item.gluten_free)
        assert item.protein is None
        assert item.allergens == ()

    def test_explicit_path(self, tmp_path, small_menu):
        menu_file = tmp_path / "menu.json"
        menu_file.write_text(json.dumps(small_menu), encoding="utf-8")
        categories = load_menu_categories(str(menu_file))
        assert [c.name for c in categories] == ["Mains", "Sides"]

    def test_env_path_with_wrapped_categories(self, tmp_path, monkeypatch, small_menu):
        menu_file = tmp_path / "menu.json"
        menu_file.write_text(json.dumps({"categories": small_menu}), encoding="utf-8")
        monkeypatch.setenv(MENU_PATH_ENV, str(menu_file))
        categories = load_menu_categories()
        assert categories[1].items[0].name == "Sticky Rice"

    def test_required_option_parsed(self, catalog):
        pad_thai = catalog.get_item("pad-thai")
        assert pad_thai.has_required_options
        assert [option.name for option in pad_thai.options] == ["Protein", "Spice Level"]
        assert not catalog.get_item("pad-see-ew").has_required_options


class TestLoadFailures:
    """Bad data fails the whole load rather than producing a partial menu."""

    def test_duplicate_item_id(self, small_menu):
        small_menu[1]["items"].append({"id": "larb", "name": "Larb Again", "price": "1.00"})
        with pytest.raises(CatalogLoadError, match="duplicate"):
            parse_menu_categories(small_menu)

    def test_negative_price(self, small_menu):
        small_menu[0]["items"][0]["price"] = "-1.00"
        with pytest.raises(CatalogLoadError):
            parse_menu_categories(small_menu)

    def test_invalid_price(self, small_menu):
        small_menu[0]["items"][0]["price"] = "cheap"
        with pytest.raises(CatalogLoadError):
            parse_menu_categories(small_menu)

    def test_missing_name(self, small_menu):
        del small_menu[0]["items"][0]["name"]
        with pytest.raises(CatalogLoadError):
            parse_menu_categories(small_menu)

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogLoadError):
            load_menu_categories(str(tmp_path / "nope.json"))

    def test_invalid_json(self, tmp_path):
        menu_file = tmp_path / "menu.json"
        menu_file.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogLoadError):
            load_menu_categories(str(menu_file))

    def test_wrong_top_level_shape(self, tmp_path):
        menu_file = tmp_path / "menu.json"
        menu_file.write_text(json.dumps({"menu": []}), encoding="utf-8")
        with pytest.raises(CatalogLoadError):
            load_menu_categories(str(menu_file))


class TestCatalog:
    """Lookups and the fallback full-text search."""

    def test_all_items_in_catalog_order(self, catalog):
        items = catalog.all_items()
        assert items[0].item_id == "thai-spring-rolls"
        assert items[-1].item_id == "lemongrass-cooler"
        assert len({item.item_id for item in items}) == len(items)

    def test_get_item_and_category(self, catalog):
        assert catalog.get_item("crying-tiger").name == "Crying Tiger"
        assert catalog.get_item("unknown") is None
        assert catalog.get_category("soups").name == "Soups"
        assert catalog.get_category("unknown") is None

    def test_categories_for_item(self, catalog):
        assert catalog.categories_for_item("tom-yum-goong") == ["soups"]
        assert catalog.categories_for_item("unknown") == []

    def test_search_by_allergen(self, catalog):
        names = [item.name for item in catalog.search("peanuts")]
        assert "Chicken Satay" in names
        assert "Pad Thai" in names
        assert "Thai Iced Tea" not in names

    def test_search_by_category_name(self, catalog):
        names = [item.name for item in catalog.search("soups")]
        assert names == ["Tom Yum Goong", "Tom Kha Gai", "Vegetable Clear Soup"]

    def test_search_requires_every_token(self, catalog):
        names = [item.name for item in catalog.search("coconut mango")]
        assert names == ["Mango Sticky Rice"]

    def test_search_blank(self, catalog):
        assert catalog.search("  ") == []

    def test_empty_catalog(self):
        catalog = Catalog([])
        assert catalog.is_empty()
        assert catalog.all_items() == []
        assert catalog.search("rice") == []


class TestDishStories:
    def test_known_story(self):
        assert "three generations" in dish_story_for_item("pad-thai")

    def test_default_story(self):
        assert dish_story_for_item("lemongrass-cooler") == DEFAULT_DISH_STORY
