"""Main Textual app class."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.widgets import Header, Static

from thai_menu.analytics import AnalyticsLogger, get_analytics
from thai_menu.cart import AddOutcome, Cart, ItemCardState, add_from_card
from thai_menu.cart_modal import CartModal
from thai_menu.catalog import Catalog
from thai_menu.config import DEBUG_LOG_PATH
from thai_menu.constant import FAQ_SUGGESTIONS
from thai_menu.data import CatalogLoadError, load_menu_categories
from thai_menu.item_modal import ItemDetailModal
from thai_menu.models import ItemListResult, MenuCategory, MenuItem, MessageResult, SearchResult
from thai_menu.persistence import SavedOrder, bootstrap_schema
from thai_menu.rendering import ACCENT, format_category_carousel, format_item_card, format_price
from thai_menu.search import faq_query, run_search
from thai_menu.selection import MenuSelectionState


class ThaiCookeryApp(App):
    """A Textual app for browsing the Thai Cookery menu and building an order."""

    TITLE = "Thai Cookery"
    SUB_TITLE = "Menu"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #menu-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #side-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #carousel {
        height: auto;
        margin-bottom: 1;
    }

    #section-title {
        text-style: bold;
        background: #ca3f3f;
        color: white;
        padding: 0 1;
        height: auto;
    }

    #items {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #search-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: 4;
    }

    #assistant {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-summary {
        height: auto;
        text-style: bold;
        margin-top: 1;
    }
    """

    input_state = reactive("normal")
    selected_index = reactive(0)

    BINDINGS = [
        ("up", "move_selection(-1)", "Previous dish"),
        ("down", "move_selection(1)", "Next dish"),
        ("left", "step_category(-1)", "Previous category"),
        ("right", "step_category(1)", "Next category"),
        ("enter", "confirm", "Open / search"),
        ("backspace", "backspace_query", "Delete query char"),
        ("escape", "back", "Back"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        catalog_loader: Callable[[], list[MenuCategory]] = load_menu_categories,
        cart: Cart | None = None,
        analytics: AnalyticsLogger | None = None,
        db_path: str | None = None,
    ) -> None:
        super().__init__()
        self._catalog_loader = catalog_loader
        self.catalog: Catalog | None = None
        self.load_error: str | None = None
        self.selection = MenuSelectionState()
        self.cart = cart if cart is not None else Cart()
        self.analytics = analytics if analytics is not None else get_analytics()
        self.db_path = db_path
        self.card_states: dict[str, ItemCardState] = {}
        self.search_text = ""
        self.system_status = ""
        self.current_route = "/menu"
        self._category_selected_index = 0
        self._debug_log_path = Path(DEBUG_LOG_PATH)
        self._log_debug("app_init")

    def _log_debug(self, message: str) -> None:
        try:
            ts = datetime.now(timezone.utc).isoformat()
            self._debug_log_path.parent.mkdir(parents=True, exist_ok=True)
            with self._debug_log_path.open("a", encoding="utf-8") as fh:
                fh.write(f"{ts} {message}\n")
        except Exception:
            # Logging must never interfere with app flow.
            return

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="menu-pane"):
                yield Static(id="carousel")
                yield Static(id="section-title")
                yield Static(id="items")
            with Vertical(id="side-pane"):
                yield Static(id="search-bar")
                yield Static(id="assistant")
                yield Static(id="cart-summary")

    def on_mount(self) -> None:
        bootstrap_schema(self.db_path)
        self.cart.subscribe(lambda _cart: self._refresh_cart_summary())
        self.load_catalog()
        self.analytics.record("page_view", {"page": "menu"})
        self._refresh_all()

    # Catalog

    def load_catalog(self) -> bool:
        """Load the full catalog or enter the page-level error state."""
        try:
            categories = self._catalog_loader()
        except CatalogLoadError as exc:
            self.catalog = None
            self.load_error = str(exc)
            self._log_debug(f"catalog_load_failed error={exc!r}")
            return False

        self.catalog = Catalog(categories)
        self.load_error = None
        self.selection.on_categories_loaded(self.catalog.list_categories())
        self._log_debug(f"catalog_loaded categories={len(self.catalog.list_categories())}")
        return True

    def retry_load(self) -> None:
        self.load_catalog()
        self.selected_index = 0
        self._refresh_all()

    def _categories(self) -> tuple[MenuCategory, ...]:
        if self.catalog is None:
            return ()
        return self.catalog.list_categories()

    # Keyboard

    def _modal_open(self) -> bool:
        return isinstance(self.screen, (ItemDetailModal, CartModal))

    def on_key(self, event: Key) -> None:
        if self._modal_open():
            return

        char = event.character
        if not event.is_printable or not char or len(char) != 1:
            return

        if self.input_state == "search":
            if self.search_text or not char.isdigit() or not self._select_faq_by_number(int(char)):
                self.search_text += char
                self._refresh_search_panel()
            self._consume(event)
            return

        key = char.lower()
        if self.load_error is not None:
            if key == "r":
                self.retry_load()
                self._consume(event)
            return

        if char == "/" or key == "s":
            self.start_search()
        elif key == "j":
            self.action_move_selection(1)
        elif key == "k":
            self.action_move_selection(-1)
        elif key == "h":
            self.action_step_category(-1)
        elif key == "l":
            self.action_step_category(1)
        elif char == " ":
            self.toggle_selected_details()
        elif char == "+":
            self.change_selected_quantity(1)
        elif char == "-":
            self.change_selected_quantity(-1)
        elif key == "a":
            self.add_selected_to_cart()
        elif key == "c":
            self.navigate_to_cart()
        else:
            return
        self._consume(event)

    def _consume(self, event: Key) -> None:
        # Handled keys skip binding lookup; the active screen may have just changed.
        event.stop()
        event.prevent_default()

    def action_move_selection(self, delta: int) -> None:
        if self._modal_open() or self.input_state != "normal":
            return
        items = self.visible_items()
        if not items:
            self.selected_index = 0
            return
        self.selected_index = (self.selected_index + delta) % len(items)
        self._refresh_menu()

    def action_step_category(self, delta: int) -> None:
        if self._modal_open() or self.input_state != "normal":
            return
        category_id = self.selection.step_category(self._categories(), delta)
        if category_id is not None:
            self.select_category(category_id)

    def action_confirm(self) -> None:
        if self._modal_open():
            return
        if self.input_state == "search":
            self.submit_search(self.search_text)
            return
        item = self.selected_item()
        if item is not None:
            self.navigate_to_item(item.item_id)

    def action_backspace_query(self) -> None:
        if self._modal_open() or self.input_state != "search":
            return
        if not self.search_text:
            return
        self.search_text = self.search_text[:-1]
        self._refresh_search_panel()

    def action_back(self) -> None:
        if self._modal_open():
            return
        if self.input_state == "search":
            self.input_state = "normal"
            self.search_text = ""
            self._refresh_search_panel()
            return
        if self.selection.showing_search:
            self.clear_search()

    # Search

    def start_search(self) -> None:
        self.input_state = "search"
        self.search_text = ""
        self._refresh_search_panel()

    def submit_search(self, text: str) -> SearchResult | None:
        """Run a query; blank text is ignored and leaves the view unchanged."""
        if self.catalog is None or not text.strip():
            return None

        self.analytics.record("search", {"query": text})
        result = run_search(text, self.catalog)
        if result is None:
            return None

        if not self.selection.showing_search:
            self._category_selected_index = self.selected_index
        self.selection.show_search_result(result)
        count = len(result.items) if isinstance(result, ItemListResult) else 0
        self.analytics.record("search_results", {"title": result.title, "count": count})
        self._log_debug(f"search query={text!r} title={result.title!r} count={count}")

        self.input_state = "normal"
        self.search_text = ""
        self.selected_index = 0
        self._refresh_all()
        return result

    def select_faq(self, faq_id: str) -> SearchResult | None:
        query = faq_query(faq_id)
        self.analytics.record("faq_click", {"faq": query})
        return self.submit_search(query)

    def _select_faq_by_number(self, number: int) -> bool:
        faq_ids = list(FAQ_SUGGESTIONS)
        if not 1 <= number <= len(faq_ids):
            return False
        self.select_faq(faq_ids[number - 1])
        return True

    def clear_search(self) -> None:
        self.selection.clear_search()
        self.selected_index = self._category_selected_index
        self.analytics.record("clear_search", {})
        self._refresh_all()

    # Categories and cards

    def select_category(self, category_id: str) -> None:
        self.selection.select_category(category_id)
        self.analytics.record("category_select", {"category": category_id})
        if not self.selection.showing_search:
            self.selected_index = 0
        self._refresh_menu()

    def visible_items(self) -> list[MenuItem]:
        result = self.selection.search_result
        if isinstance(result, ItemListResult):
            return list(result.items)
        if isinstance(result, MessageResult):
            return []
        category = self.selection.active_category(self._categories())
        if category is None:
            return []
        return list(category.items)

    def selected_item(self) -> MenuItem | None:
        items = self.visible_items()
        if not (0 <= self.selected_index < len(items)):
            return None
        return items[self.selected_index]

    def card_state(self, item_id: str) -> ItemCardState:
        return self.card_states.setdefault(item_id, ItemCardState())

    def toggle_selected_details(self) -> None:
        item = self.selected_item()
        if item is None:
            return
        self.card_state(item.item_id).toggle_expanded()
        self._refresh_menu()

    def change_selected_quantity(self, delta: int) -> None:
        item = self.selected_item()
        if item is None:
            return
        card = self.card_state(item.item_id)
        if delta > 0:
            card.increment()
        else:
            card.decrement()
        self._refresh_menu()

    def add_selected_to_cart(self) -> AddOutcome | None:
        item = self.selected_item()
        if item is None:
            return None

        card = self.card_state(item.item_id)
        quantity = card.quantity
        outcome = add_from_card(item, card, self.cart, self.navigate_to_item)
        if outcome is AddOutcome.ADDED:
            self.analytics.record("add_to_cart", {"item": item.item_id, "quantity": quantity})
            self.system_status = f"Added {quantity} × {item.name} · {format_price(item.price * quantity)}"
            self._refresh_all()
        return outcome

    # Navigation

    def navigate_to_item(self, item_id: str) -> None:
        item = self.catalog.get_item(item_id) if self.catalog is not None else None
        if item is None:
            return
        self.current_route = f"/item/{item_id}"
        self.analytics.record("navigate", {"route": self.current_route})
        self.push_screen(ItemDetailModal(item, self.cart, on_change=self._on_item_closed))

    def navigate_to_cart(self) -> None:
        self.current_route = "/cart"
        self.analytics.record("navigate", {"route": self.current_route})
        self.push_screen(CartModal(self.cart, db_path=self.db_path), callback=self._on_cart_closed)

    def _on_item_closed(self) -> None:
        self.current_route = "/menu"
        self._refresh_all()

    def _on_cart_closed(self, saved: SavedOrder | None) -> None:
        self.current_route = "/menu"
        if saved is not None:
            self.system_status = f"Order placed: {saved.order_id[:8]} · {format_price(saved.total)}"
            self.analytics.record("checkout", {"order_id": saved.order_id, "lines": len(saved.lines)})
            self._log_debug(f"checkout order_id={saved.order_id} lines={len(saved.lines)}")
        self._refresh_all()

    # Rendering

    def _refresh_all(self) -> None:
        self._refresh_menu()
        self._refresh_search_panel()
        self._refresh_cart_summary()

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height // 3)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            half = rows // 2
            start = selected - half
            start = max(0, start)
            start = min(start, total - rows)

        return (start, start + rows)

    def _render_item_list(self, items: list[MenuItem], widget: Static) -> Text:
        if self.selected_index >= len(items):
            self.selected_index = 0

        start, end = self._window_bounds(len(items), self._visible_rows(widget), self.selected_index)
        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")
        for idx in range(start, end):
            if idx > start:
                lines.append("\n\n")
            item = items[idx]
            lines.append_text(format_item_card(item, self.card_state(item.item_id), idx == self.selected_index))
        if end < len(items):
            lines.append("\n⋮", style="dim")
        return lines

    def _refresh_menu(self) -> None:
        try:
            carousel = self.query_one("#carousel", Static)
            title = self.query_one("#section-title", Static)
            items_widget = self.query_one("#items", Static)
        except NoMatches:
            return

        if self.load_error is not None:
            carousel.update("")
            title.update("Failed to load menu data")
            items_widget.update("Press R to try again.")
            return

        result = self.selection.search_result
        if result is not None:
            carousel.update("")
            title.update(result.title or "Search Results")
            items_widget.update(self._render_search_result(result, items_widget))
            return

        categories = self._categories()
        carousel.update(format_category_carousel(categories, self.selection.active_category_id))
        category = self.selection.active_category(categories)
        if category is None:
            title.update("")
            items_widget.update("(no dishes available)")
            return

        heading = Text(category.name)
        if category.description:
            heading.append(f"\n{category.description}", style="italic")
        title.update(heading)
        if not category.items:
            items_widget.update("(no dishes in this category)")
            return
        items_widget.update(self._render_item_list(list(category.items), items_widget))

    def _render_search_result(self, result: SearchResult, widget: Static) -> Text:
        if isinstance(result, MessageResult):
            content = Text(result.message)
        elif result.items:
            content = self._render_item_list(list(result.items), widget)
        else:
            content = Text("No items found matching your search.", style="dim")
            related = self.catalog.search(result.query) if self.catalog is not None else []
            if related:
                content.append("\n\nYou might also like:", style="bold")
                for item in related:
                    content.append(f"\n  {item.name}  {format_price(item.price)}")
        content.append("\n\nEsc: Back to Menu", style=f"bold {ACCENT}")
        return content

    def _refresh_search_panel(self) -> None:
        try:
            bar = self.query_one("#search-bar", Static)
            assistant = self.query_one("#assistant", Static)
        except NoMatches:
            return

        if self.input_state == "normal":
            status = self.system_status or "Ready"
            bar.update(f"Press / to ask or search. C cart. Ctrl+Q quit.\n{status}")
            assistant.update(self._assistant_hint())
            return

        text = Text()
        text.append(" Ask ", style=f"bold #ffffff on {ACCENT}")
        text.append(f" {self.search_text}|")
        bar.update(text)

        suggestions = Text("Suggested searches\n", style="bold")
        for number, faq_text in enumerate(FAQ_SUGGESTIONS.values(), start=1):
            suggestions.append(f"\n  {number}. {faq_text}", style="")
        suggestions.append("\n\nEnter search, Esc cancel", style="dim")
        assistant.update(suggestions)

    def _assistant_hint(self) -> Text:
        text = Text()
        text.append("J/K/↑/↓ dish  H/L/←/→ category\n", style="dim")
        text.append("Space details  +/− quantity  A add\n", style="dim")
        text.append("Enter open dish  C cart", style="dim")
        return text

    def _refresh_cart_summary(self) -> None:
        try:
            summary = self.query_one("#cart-summary", Static)
        except NoMatches:
            return
        count = self.cart.item_count
        if count == 0:
            summary.update("Cart is empty")
            return
        noun = "item" if count == 1 else "items"
        summary.update(f"Cart: {count} {noun} · {format_price(self.cart.subtotal)}")
