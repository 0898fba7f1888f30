"""Item detail modal screen."""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container, VerticalScroll
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from thai_menu.cart import Cart, ItemCardState, configured_line, missing_required_options
from thai_menu.models import MenuItem, OptionChoice
from thai_menu.rendering import ACCENT, format_badges, format_item_details, format_price


class ItemDetailModal(ModalScreen[None]):
    """Centered modal to configure options for one item and add it to the cart."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("ctrl+c", "close", "Close"),
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("enter", "toggle_current", "Toggle"),
        ("plus", "change_quantity(1)", "More"),
        ("minus", "change_quantity(-1)", "Less"),
        ("a", "add_to_cart", "Add to cart"),
    ]

    CSS = """
    ItemDetailModal {
        align: center middle;
        background: $background 60%;
    }

    #item-dialog {
        width: 76;
        height: 90%;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #item-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #item-body {
        color: white;
    }

    #item-error {
        color: #ffb3b3;
    }

    #item-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    cursor_index = reactive(0)
    _CHOICE_KIND = "choice"
    _ADD_KIND = "add"

    def __init__(self, item: MenuItem, cart: Cart, on_change: Callable[[], None]) -> None:
        super().__init__()
        self.item = item
        self.cart = cart
        self.on_change = on_change
        self.card = ItemCardState()
        self.selections: dict[str, OptionChoice] = {}
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="item-dialog"):
            yield Static(self.item.name, id="item-title")
            with VerticalScroll():
                yield Static(id="item-body")
            yield Static(id="item-error")
            yield Static("J/K/↑/↓ move, Enter choose, +/− quantity, A add, Esc/q close", id="item-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def action_close(self) -> None:
        self.dismiss()
        self.on_change()

    def action_move_cursor(self, delta: int) -> None:
        rows = self._rows()
        self.cursor_index = (self.cursor_index + delta) % len(rows)
        self._refresh_content()

    def action_change_quantity(self, delta: int) -> None:
        if delta > 0:
            self.card.increment()
        else:
            self.card.decrement()
        self._refresh_content()

    def action_toggle_current(self) -> None:
        row_kind, row_value = self._rows()[self.cursor_index]
        if row_kind == self._ADD_KIND:
            self.action_add_to_cart()
            return

        option_name, choice = row_value
        option = next(option for option in self.item.options if option.name == option_name)
        if self.selections.get(option_name) == choice and not option.required:
            del self.selections[option_name]
        else:
            self.selections[option_name] = choice
        self.error = ""
        self._refresh_content()

    def action_add_to_cart(self) -> None:
        try:
            line_id, name, unit_price = configured_line(self.item, self.selections)
        except ValueError as exc:
            self.error = str(exc)
            self._refresh_content()
            return

        self.cart.add_item(line_id, name, unit_price, self.card.quantity)
        self.card.reset_quantity()
        self.dismiss()
        self.on_change()

    def _rows(self) -> list[tuple[str, object]]:
        rows: list[tuple[str, object]] = []
        for option in self.item.options:
            rows.extend((self._CHOICE_KIND, (option.name, choice)) for choice in option.choices)
        rows.append((self._ADD_KIND, None))
        return rows

    def _unit_price(self) -> Decimal:
        price = self.item.price
        for choice in self.selections.values():
            price += choice.price_delta
        return price

    def _refresh_content(self) -> None:
        try:
            body = self.query_one("#item-body", Static)
            error_widget = self.query_one("#item-error", Static)
        except NoMatches:
            return

        content = Text(style="white")
        content.append(format_price(self.item.price), style=f"bold {ACCENT}")
        badges = format_badges(self.item)
        if badges.plain:
            content.append("  ")
            content.append_text(badges)
        if self.item.description:
            content.append(f"\n{self.item.description}\n")
        content.append("\n")
        content.append_text(format_item_details(self.item))

        rows = self._rows()
        if self.cursor_index >= len(rows):
            self.cursor_index = len(rows) - 1

        current_option = None
        for idx, (row_kind, row_value) in enumerate(rows):
            if row_kind != self._CHOICE_KIND:
                continue
            pointer = "➤ " if idx == self.cursor_index else "  "
            option_name, choice = row_value
            if option_name != current_option:
                current_option = option_name
                option = next(option for option in self.item.options if option.name == option_name)
                label = f"{option_name} (required)" if option.required else option_name
                content.append(f"\n{label}\n", style="bold")
            else:
                content.append("\n")
            checked = "(•)" if self.selections.get(option_name) == choice else "( )"
            delta = f" +{format_price(choice.price_delta)}" if choice.price_delta else ""
            content.append(f"{pointer}{checked} {choice.label}{delta}")

        missing = missing_required_options(self.item, self.selections)
        if missing:
            content.append("\n\n  Still to choose: " + ", ".join(option.name for option in missing), style="dim")
        content.append(f"\n\n  Quantity: {self.card.quantity}")

        pointer = "➤ " if self.cursor_index == len(rows) - 1 else "  "
        total = self._unit_price() * self.card.quantity
        content.append(f"\n{pointer}")
        content.append(f"Add {self.card.quantity} to cart · {format_price(total)}", style=f"bold {ACCENT}")

        body.update(content)
        error_widget.update(self.error)
