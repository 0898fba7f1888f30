"""Domain models for the Thai Cookery menu."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True)
class OptionChoice:
    """One selectable value of a configurable option."""

    label: str
    price_delta: Decimal = Decimal("0")


@dataclass(frozen=True)
class ItemOption:
    """A configurable option such as a protein choice."""

    name: str
    required: bool = False
    choices: tuple[OptionChoice, ...] = ()


@dataclass(frozen=True)
class MenuItem:
    """A dish as shown on an item card."""

    item_id: str
    name: str
    description: str
    price: Decimal
    image: str | None = None
    popular: bool = False
    spicy: bool = False
    vegetarian: bool = False
    gluten_free: bool = False
    protein: float | None = None
    calories: int | None = None
    allergens: tuple[str, ...] = ()
    sourcing: str | None = None
    options: tuple[ItemOption, ...] = ()

    @property
    def has_required_options(self) -> bool:
        return any(option.required for option in self.options)


@dataclass(frozen=True)
class MenuCategory:
    """A menu section; item order is display order."""

    category_id: str
    name: str
    description: str | None = None
    image: str | None = None
    items: tuple[MenuItem, ...] = ()


@dataclass
class CartLine:
    """A cart row; quantity is always at least 1."""

    item_id: str
    name: str
    unit_price: Decimal
    quantity: int = 1

    @property
    def total(self) -> Decimal:
        return self.unit_price * self.quantity


class Intent(Enum):
    POPULAR = "popular"
    SPICY = "spicy"
    VEGETARIAN = "vegetarian"
    GLUTEN_FREE = "gluten_free"
    HIGHEST_PROTEIN = "highest_protein"
    QUICK_LUNCH = "quick_lunch"
    LANGUAGE_SWITCH = "language_switch"
    GENERIC_TEXT_SEARCH = "generic_text_search"


@dataclass(frozen=True)
class ItemListResult:
    """Search outcome rendered as a product list. Empty means no matches."""

    title: str
    items: tuple[MenuItem, ...]
    intent: Intent
    query: str = ""


@dataclass(frozen=True)
class MessageResult:
    """Search outcome rendered as an assistant message, never as items."""

    title: str
    message: str
    translations: dict[str, str] = field(default_factory=dict)


SearchResult = ItemListResult | MessageResult
