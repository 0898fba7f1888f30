"""Cart state and the item-card add-to-cart flow."""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Callable

from thai_menu.models import CartLine, ItemOption, MenuItem, OptionChoice


class Cart:
    """
    In-memory cart keyed by item identifier.

    Adding an identifier that is already present increases its quantity;
    ``set_quantity`` overwrites it (last write wins).
    """

    def __init__(self) -> None:
        self._lines: dict[str, CartLine] = {}
        self._listeners: list[Callable[[Cart], None]] = []

    def subscribe(self, listener: Callable[[Cart], None]) -> None:
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def add_item(self, item_id: str, name: str, price: Decimal, quantity: int = 1) -> CartLine:
        if quantity < 1:
            raise ValueError("quantity must be at least 1")
        if price < 0:
            raise ValueError("price must be non-negative")

        line = self._lines.get(item_id)
        if line is None:
            line = CartLine(item_id=item_id, name=name, unit_price=price, quantity=quantity)
            self._lines[item_id] = line
        else:
            line.quantity += quantity
        self._notify()
        return line

    def set_quantity(self, item_id: str, quantity: int) -> None:
        if quantity < 1:
            raise ValueError("quantity must be at least 1")
        line = self._lines.get(item_id)
        if line is None:
            raise KeyError(item_id)
        line.quantity = quantity
        self._notify()

    def remove_item(self, item_id: str) -> None:
        if self._lines.pop(item_id, None) is not None:
            self._notify()

    def clear(self) -> None:
        if not self._lines:
            return
        self._lines.clear()
        self._notify()

    @property
    def lines(self) -> list[CartLine]:
        return list(self._lines.values())

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    @property
    def subtotal(self) -> Decimal:
        return sum((line.total for line in self._lines.values()), Decimal("0"))


@dataclass
class ItemCardState:
    """Transient per-card view state: local quantity and expanded flag."""

    quantity: int = 1
    expanded: bool = False

    def increment(self) -> None:
        self.quantity += 1

    def decrement(self) -> None:
        if self.quantity > 1:
            self.quantity -= 1

    def toggle_expanded(self) -> None:
        self.expanded = not self.expanded

    def reset_quantity(self) -> None:
        self.quantity = 1


class AddOutcome(Enum):
    ADDED = "added"
    NEEDS_OPTIONS = "needs_options"


def add_from_card(
    item: MenuItem,
    card: ItemCardState,
    cart: Cart,
    navigate_to_item: Callable[[str], None],
) -> AddOutcome:
    """
    Add the card's quantity of an item to the cart.

    Items with a required option are never added here; the user is sent
    to the item detail view to configure them instead.
    """
    if item.has_required_options:
        navigate_to_item(item.item_id)
        return AddOutcome.NEEDS_OPTIONS

    cart.add_item(item.item_id, item.name, item.price, card.quantity)
    card.reset_quantity()
    return AddOutcome.ADDED


def _slug(text: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")


def missing_required_options(item: MenuItem, selections: dict[str, OptionChoice]) -> list[ItemOption]:
    return [option for option in item.options if option.required and option.name not in selections]


def configured_line(item: MenuItem, selections: dict[str, OptionChoice]) -> tuple[str, str, Decimal]:
    """
    Build (identifier, name, unit price) for an item with chosen options.

    Raises ValueError if a required option has no choice.
    """
    missing = missing_required_options(item, selections)
    if missing:
        names = ", ".join(option.name for option in missing)
        raise ValueError(f"choose {names} for {item.name}")

    chosen = [(option, selections[option.name]) for option in item.options if option.name in selections]
    if not chosen:
        return item.item_id, item.name, item.price

    line_id = item.item_id + "".join(f"[{_slug(choice.label)}]" for _, choice in chosen)
    name = f"{item.name} ({', '.join(choice.label for _, choice in chosen)})"
    price = item.price + sum((choice.price_delta for _, choice in chosen), Decimal("0"))
    return line_id, name, price
