"""Rule-based search assistant: intent classification and result building.

A query is lower-cased and tested against ``INTENT_RULES`` in order; the
first rule whose predicate matches decides the intent, and a query no rule
matches is a plain text search. Each intent has one handler in
``RESULT_BUILDERS`` that turns the catalog into a search result.
"""

from __future__ import annotations

from typing import Callable

from thai_menu.catalog import Catalog
from thai_menu.config import QUICK_LUNCH_CATEGORY_IDS, QUICK_LUNCH_NAME_MARKER, TOP_PROTEIN_LIMIT
from thai_menu.constant import CATEGORY_TRANSLATIONS_ES, FAQ_SUGGESTIONS, SPANISH_MENU_GREETING
from thai_menu.models import Intent, ItemListResult, MenuItem, MessageResult, SearchResult

Predicate = Callable[[str], bool]
ResultBuilder = Callable[[Catalog, str], SearchResult]


def _contains_any(*needles: str) -> Predicate:
    def predicate(query_lower: str) -> bool:
        return any(needle in query_lower for needle in needles)

    return predicate


def _equals(expected: str) -> Predicate:
    def predicate(query_lower: str) -> bool:
        return query_lower.strip() == expected

    return predicate


INTENT_RULES: list[tuple[Predicate, Intent]] = [
    (_contains_any("popular", "best seller"), Intent.POPULAR),
    (_contains_any("spicy", "spiciest"), Intent.SPICY),
    (_contains_any("vegetarian", "vegan"), Intent.VEGETARIAN),
    (_contains_any("gluten"), Intent.GLUTEN_FREE),
    (_contains_any("protein", "highest protein"), Intent.HIGHEST_PROTEIN),
    (_contains_any("quick", "fast", "lunch"), Intent.QUICK_LUNCH),
    (_equals("spanish"), Intent.LANGUAGE_SWITCH),
]


def classify_intent(query: str) -> Intent | None:
    """Return the first matching intent, or None for a blank query."""
    if not query or not query.strip():
        return None
    query_lower = query.lower()
    for predicate, intent in INTENT_RULES:
        if predicate(query_lower):
            return intent
    return Intent.GENERIC_TEXT_SEARCH


def _flag_filter(title: str, intent: Intent, keep: Callable[[MenuItem], bool]) -> ResultBuilder:
    def build(catalog: Catalog, query: str) -> SearchResult:
        items = tuple(item for item in catalog.all_items() if keep(item))
        return ItemListResult(title=title, items=items, intent=intent, query=query)

    return build


def _highest_protein(catalog: Catalog, query: str) -> SearchResult:
    with_protein = [item for item in catalog.all_items() if item.protein is not None]
    # sorted() is stable, so equal protein values keep catalog order.
    ranked = sorted(with_protein, key=lambda item: item.protein, reverse=True)[:TOP_PROTEIN_LIMIT]
    return ItemListResult(
        title="Highest Protein Dishes", items=tuple(ranked), intent=Intent.HIGHEST_PROTEIN, query=query
    )


def _quick_lunch(catalog: Catalog, query: str) -> SearchResult:
    items = []
    for item in catalog.all_items():
        in_quick_category = any(
            category_id in QUICK_LUNCH_CATEGORY_IDS for category_id in catalog.categories_for_item(item.item_id)
        )
        if in_quick_category or QUICK_LUNCH_NAME_MARKER in item.name.lower():
            items.append(item)
    return ItemListResult(title="Quick Lunch Options", items=tuple(items), intent=Intent.QUICK_LUNCH, query=query)


def spanish_menu_message(translations: dict[str, str] | None = None) -> str:
    table = translations if translations is not None else CATEGORY_TRANSLATIONS_ES
    lines = [f"{english} → {spanish}" for english, spanish in table.items()]
    return f"{SPANISH_MENU_GREETING}\n\n" + "\n".join(lines)


def _language_switch(catalog: Catalog, query: str) -> SearchResult:
    return MessageResult(
        title="Spanish Menu",
        message=spanish_menu_message(),
        translations=dict(CATEGORY_TRANSLATIONS_ES),
    )


def _text_search(catalog: Catalog, query: str) -> SearchResult:
    needle = query.strip().lower()
    items = tuple(
        item for item in catalog.all_items() if needle in item.name.lower() or needle in item.description.lower()
    )
    return ItemListResult(
        title=f'Search Results for "{query.strip()}"',
        items=items,
        intent=Intent.GENERIC_TEXT_SEARCH,
        query=query,
    )


RESULT_BUILDERS: dict[Intent, ResultBuilder] = {
    Intent.POPULAR: _flag_filter("Most Popular Dishes", Intent.POPULAR, lambda item: item.popular),
    Intent.SPICY: _flag_filter("Spicy Dishes", Intent.SPICY, lambda item: item.spicy),
    Intent.VEGETARIAN: _flag_filter("Vegetarian Options", Intent.VEGETARIAN, lambda item: item.vegetarian),
    Intent.GLUTEN_FREE: _flag_filter("Gluten-Free Options", Intent.GLUTEN_FREE, lambda item: item.gluten_free),
    Intent.HIGHEST_PROTEIN: _highest_protein,
    Intent.QUICK_LUNCH: _quick_lunch,
    Intent.LANGUAGE_SWITCH: _language_switch,
    Intent.GENERIC_TEXT_SEARCH: _text_search,
}


def build_result(intent: Intent, catalog: Catalog, query: str) -> SearchResult:
    return RESULT_BUILDERS[intent](catalog, query)


def run_search(query: str, catalog: Catalog) -> SearchResult | None:
    """Classify and answer a query. Blank queries produce no result."""
    intent = classify_intent(query)
    if intent is None:
        return None
    return build_result(intent, catalog, query)


def faq_query(faq_id: str) -> str:
    """Get the canned query text for an FAQ suggestion id."""
    try:
        return FAQ_SUGGESTIONS[faq_id]
    except KeyError:
        raise ValueError(f"unknown FAQ suggestion {faq_id!r}") from None
