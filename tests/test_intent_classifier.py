"""
Test cases for the search assistant's intent classification.
Ordered keyword rules, first match wins.
"""

import pytest

from thai_menu.constant import FAQ_SUGGESTIONS
from thai_menu.models import Intent
from thai_menu.search import INTENT_RULES, classify_intent


class TestIntentTriggers:
    """Each rule fires on its trigger words."""

    @pytest.mark.parametrize(
        "query, expected",
        [
            ("What is popular here?", Intent.POPULAR),
            ("your best seller please", Intent.POPULAR),
            ("something spicy", Intent.SPICY),
            ("what is the spiciest dish", Intent.SPICY),
            ("I am vegetarian", Intent.VEGETARIAN),
            ("vegan options", Intent.VEGETARIAN),
            ("gluten free", Intent.GLUTEN_FREE),
            ("high protein meal", Intent.HIGHEST_PROTEIN),
            ("highest protein", Intent.HIGHEST_PROTEIN),
            ("something quick", Intent.QUICK_LUNCH),
            ("fast food", Intent.QUICK_LUNCH),
            ("lunch ideas", Intent.QUICK_LUNCH),
            ("spanish", Intent.LANGUAGE_SWITCH),
            ("pad thai", Intent.GENERIC_TEXT_SEARCH),
        ],
    )
    def test_trigger(self, query, expected):
        assert classify_intent(query) == expected

    def test_case_insensitive(self):
        """Triggers match regardless of case."""
        assert classify_intent("SPICY") == Intent.SPICY
        assert classify_intent("Best Seller") == Intent.POPULAR

    def test_faq_suggestions_map_to_their_intent(self):
        """Every canned FAQ question lands on the matching intent."""
        expected = {
            "popular": Intent.POPULAR,
            "spicy": Intent.SPICY,
            "vegetarian": Intent.VEGETARIAN,
            "protein": Intent.HIGHEST_PROTEIN,
            "gluten": Intent.GLUTEN_FREE,
            "quick": Intent.QUICK_LUNCH,
        }
        for faq_id, query in FAQ_SUGGESTIONS.items():
            assert classify_intent(query) == expected[faq_id]


class TestIntentPriority:
    """Earlier rules always beat later ones."""

    def test_popular_beats_spicy(self):
        assert classify_intent("popular spicy dishes") == Intent.POPULAR

    def test_spicy_beats_later_rules_regardless_of_position(self):
        """Position of the words in the query does not matter, only rule order."""
        assert classify_intent("vegan but spicy") == Intent.SPICY
        assert classify_intent("quick gluten free spicy lunch") == Intent.SPICY

    def test_vegetarian_beats_gluten(self):
        assert classify_intent("gluten-free vegetarian") == Intent.VEGETARIAN

    def test_gluten_beats_protein(self):
        assert classify_intent("protein without gluten") == Intent.GLUTEN_FREE

    def test_protein_beats_quick(self):
        assert classify_intent("quick protein lunch") == Intent.HIGHEST_PROTEIN

    def test_quick_beats_language_switch(self):
        assert classify_intent("fast spanish") == Intent.QUICK_LUNCH

    def test_deterministic(self):
        query = "popular vegan quick"
        assert {classify_intent(query) for _ in range(10)} == {Intent.POPULAR}


class TestIntentEdgeCases:
    """Blank input and the language switch."""

    @pytest.mark.parametrize("query", ["", "   ", "\t\n"])
    def test_blank_query_not_classified(self, query):
        assert classify_intent(query) is None

    def test_spanish_must_be_whole_query(self):
        """Only the bare word switches language; otherwise it is a text search."""
        assert classify_intent("  Spanish ") == Intent.LANGUAGE_SWITCH
        assert classify_intent("spanish rice") == Intent.GENERIC_TEXT_SEARCH

    def test_substring_inside_word_still_triggers(self):
        """Matching is by substring, so 'breakfast' contains 'fast'."""
        assert classify_intent("breakfast") == Intent.QUICK_LUNCH

    def test_unmatched_query_falls_through_to_text_search(self):
        """Text search is the fallback after the rules, not a rule of its own."""
        assert Intent.GENERIC_TEXT_SEARCH not in {intent for _, intent in INTENT_RULES}
        assert classify_intent("mango") == Intent.GENERIC_TEXT_SEARCH
