"""Entry point for the Thai Cookery menu app."""

from __future__ import annotations

from thai_menu.menu_app import ThaiCookeryApp


def main() -> None:
    """Run the Textual application."""
    ThaiCookeryApp().run()


if __name__ == "__main__":
    main()
