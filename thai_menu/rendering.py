"""Rendering helpers for item cards, detail panels and the cart."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from rich.text import Text

from thai_menu.cart import ItemCardState
from thai_menu.data import dish_story_for_item
from thai_menu.models import CartLine, MenuCategory, MenuItem

ACCENT = "#ca3f3f"


def format_price(amount: Decimal) -> str:
    return f"${amount:.2f}"


def add_button_label(item: MenuItem, quantity: int) -> str:
    return f"Add {quantity} to cart · {format_price(item.price * quantity)}"


def badge_style(badge: str) -> str:
    """Return a consistent badge style for dish flags."""
    if badge == "Popular":
        return "bold #1a1200 on #f2b705"
    if badge == "Spicy":
        return "bold #ffffff on #b23a48"
    if badge == "Vegetarian":
        return "bold #0b1f0f on #5fbf72"
    return "bold #ffffff on #2f6db5"


def item_badges(item: MenuItem) -> list[str]:
    badges = []
    if item.popular:
        badges.append("Popular")
    if item.spicy:
        badges.append("Spicy")
    if item.vegetarian:
        badges.append("Vegetarian")
    if item.gluten_free:
        badges.append("Gluten-Free")
    return badges


def format_badges(item: MenuItem) -> Text:
    text = Text()
    for idx, badge in enumerate(item_badges(item)):
        if idx > 0:
            text.append(" ")
        text.append(f" {badge} ", style=badge_style(badge))
    return text


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def estimated_carbs(calories: int | None) -> int:
    """Grams of carbohydrate, assuming 40% of calories at 4 kcal/g."""
    if not calories:
        return 30
    return _round_half_up(calories * 0.4 / 4)


def estimated_fat(calories: int | None) -> int:
    """Grams of fat, assuming 30% of calories at 9 kcal/g."""
    if not calories:
        return 15
    return _round_half_up(calories * 0.3 / 9)


def allergy_risk(allergens: Sequence[str]) -> str:
    if len(allergens) > 2:
        return "High"
    if allergens:
        return "Medium"
    return "Low"


def format_item_details(item: MenuItem) -> Text:
    """Render the expandable detail panel: story, nutrition, allergens, sourcing."""
    text = Text()
    text.append("Dish Story\n", style="bold")
    text.append(f'"{dish_story_for_item(item.item_id)}"\n\n', style="italic")

    text.append("Nutrition\n", style="bold")
    if item.protein:
        text.append(f"  Protein: {item.protein:g}g\n")
    if item.calories:
        text.append(f"  Calories: {item.calories}\n")
    text.append(f"  Carbs: {estimated_carbs(item.calories)}g\n")
    text.append(f"  Fat: {estimated_fat(item.calories)}g\n\n")

    text.append("Allergens\n", style="bold")
    if item.allergens:
        text.append("  " + ", ".join(item.allergens) + "\n")
    else:
        text.append("  No common allergens\n")
    text.append(f"  Allergy Risk: {allergy_risk(item.allergens)}\n", style="dim")

    if item.sourcing:
        text.append("\nSourcing\n", style="bold")
        text.append(f"  {item.sourcing}\n")
    return text


def format_item_card(item: MenuItem, card: ItemCardState, selected: bool) -> Text:
    """Render one item card with its local quantity and optional details."""
    text = Text()
    pointer = "➤ " if selected else "  "
    text.append(pointer)
    text.append(item.name, style="bold" if selected else "")
    text.append(f"  {format_price(item.price)}", style=f"bold {ACCENT}")

    badges = format_badges(item)
    if badges.plain:
        text.append("  ")
        text.append_text(badges)

    if item.description:
        text.append(f"\n    {item.description}", style="dim")

    text.append(f"\n    − {card.quantity} +   ")
    if item.has_required_options:
        text.append("Choose options…", style=f"italic {ACCENT}")
    else:
        text.append(add_button_label(item, card.quantity), style=ACCENT)

    if card.expanded:
        details = format_item_details(item)
        details.rstrip()
        for line in details.split("\n"):
            text.append("\n    ")
            text.append_text(line)
    return text


def format_category_carousel(categories: Sequence[MenuCategory], active_id: str | None) -> Text:
    text = Text()
    for idx, category in enumerate(categories):
        if idx > 0:
            text.append("  ")
        if category.category_id == active_id:
            text.append(f" {category.name} ", style=f"bold #ffffff on {ACCENT}")
        else:
            text.append(category.name, style="dim")
    return text


def format_cart_line(line: CartLine, selected: bool) -> Text:
    text = Text()
    text.append("➤ " if selected else "  ")
    text.append(f"{line.quantity} × {line.name}")
    text.append(f"  {format_price(line.total)}", style=f"bold {ACCENT}")
    return text
