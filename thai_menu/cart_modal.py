"""Cart view modal screen."""

from __future__ import annotations

import sqlite3

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.css.query import NoMatches
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from thai_menu.cart import Cart
from thai_menu.persistence import SavedOrder, save_order
from thai_menu.rendering import ACCENT, format_cart_line, format_price


class CartModal(ModalScreen[SavedOrder | None]):
    """Review cart lines, adjust quantities and check out."""

    CSS = """
    CartModal {
        align: center middle;
        background: $background 60%;
    }

    #cart-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #cart-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #cart-lines {
        color: white;
        margin-bottom: 1;
    }

    #cart-status {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #cart-help {
        color: #dddddd;
    }
    """

    def __init__(self, cart: Cart, db_path: str | None = None) -> None:
        super().__init__()
        self.cart = cart
        self.db_path = db_path
        self.selected_index = 0
        self.status = ""

    def compose(self) -> ComposeResult:
        with Container(id="cart-dialog"):
            yield Static("Your Cart", id="cart-title")
            yield Static(id="cart-lines")
            yield Static(id="cart-status")
            yield Static(
                "J/K move, +/− quantity, D remove, Enter checkout. Esc/q/Ctrl+C close.",
                id="cart-help",
            )

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "q", "ctrl+c"}:
            self.dismiss(None)
            event.stop()
            return

        if event.key == "enter":
            self.checkout()
            event.stop()
            return

        if event.key in {"j", "down"}:
            self._move_selection(1)
        elif event.key in {"k", "up"}:
            self._move_selection(-1)
        elif event.character == "+":
            self.change_quantity(1)
        elif event.character == "-":
            self.change_quantity(-1)
        elif event.key == "d":
            self.remove_selected()
        else:
            return
        event.stop()

    def _move_selection(self, delta: int) -> None:
        lines = self.cart.lines
        if not lines:
            return
        self.selected_index = (self.selected_index + delta) % len(lines)
        self._refresh_content()

    def change_quantity(self, delta: int) -> None:
        lines = self.cart.lines
        if not lines:
            return
        line = lines[self.selected_index]
        # Quantity floors at 1; removal is explicit.
        self.cart.set_quantity(line.item_id, max(1, line.quantity + delta))
        self.status = ""
        self._refresh_content()

    def remove_selected(self) -> None:
        lines = self.cart.lines
        if not lines:
            return
        self.cart.remove_item(lines[self.selected_index].item_id)
        self.selected_index = min(self.selected_index, max(0, len(self.cart.lines) - 1))
        self.status = ""
        self._refresh_content()

    def checkout(self) -> None:
        try:
            saved = save_order(self.cart.lines, self.db_path)
        except ValueError:
            self.status = "Your cart is empty."
            self._refresh_content()
            return
        except sqlite3.Error as exc:
            self.status = f"Checkout failed: {exc}"
            self._refresh_content()
            return

        self.cart.clear()
        self.dismiss(saved)

    def _refresh_content(self) -> None:
        try:
            lines_widget = self.query_one("#cart-lines", Static)
            status_widget = self.query_one("#cart-status", Static)
        except NoMatches:
            return

        lines = self.cart.lines
        if not lines:
            lines_widget.update("(your cart is empty)")
            status_widget.update(self.status)
            return

        if self.selected_index >= len(lines):
            self.selected_index = len(lines) - 1

        content = Text()
        for idx, line in enumerate(lines):
            if idx > 0:
                content.append("\n")
            content.append_text(format_cart_line(line, idx == self.selected_index))
        content.append("\n\nSubtotal: ", style="bold")
        content.append(format_price(self.cart.subtotal), style=f"bold {ACCENT}")
        lines_widget.update(content)
        status_widget.update(self.status)
