"""Runtime configuration defaults for the menu app."""

from __future__ import annotations

DB_PATH = "data/thai_cookery.db"
DEBUG_LOG_PATH = "/tmp/thai-cookery-debug.log"
ANALYTICS_LOG_PATH = "logs/analytics.log"

# Set to a JSON file path to replace the bundled menu.
MENU_PATH_ENV = "THAI_COOKERY_MENU_PATH"

TOP_PROTEIN_LIMIT = 5
QUICK_LUNCH_CATEGORY_IDS = frozenset({"starters", "soups"})
QUICK_LUNCH_NAME_MARKER = "fried rice"
