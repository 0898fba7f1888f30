"""SQLite persistence for checked-out orders."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Iterable
from uuid import uuid4

from thai_menu.config import DB_PATH
from thai_menu.models import CartLine


@dataclass(frozen=True)
class SavedOrder:
    """Saved order metadata and copied cart lines."""

    order_id: str
    created_at: str
    total: Decimal
    lines: list[CartLine]


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _connect(db_path: str | None = None) -> sqlite3.Connection:
    db_file = Path(db_path or DB_PATH)
    db_file.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_file)
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def bootstrap_schema(db_path: str | None = None) -> None:
    """Create persistence schema if it does not already exist."""
    with _connect(db_path) as conn:
        conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS orders (
                id TEXT PRIMARY KEY,
                created_at TEXT NOT NULL,
                total TEXT NOT NULL,
                source TEXT NOT NULL DEFAULT 'menu',
                status TEXT NOT NULL
            );

            CREATE TABLE IF NOT EXISTS order_items (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                order_id TEXT NOT NULL,
                line_index INTEGER NOT NULL,
                item_id TEXT NOT NULL,
                item_name TEXT NOT NULL,
                unit_price TEXT NOT NULL,
                quantity INTEGER NOT NULL CHECK (quantity >= 1),
                FOREIGN KEY(order_id) REFERENCES orders(id) ON DELETE CASCADE
            );

            CREATE INDEX IF NOT EXISTS idx_order_items_order_id_line
                ON order_items(order_id, line_index);
            """
        )


def save_order(lines: Iterable[CartLine], db_path: str | None = None) -> SavedOrder:
    """Persist a full order and return saved order metadata."""
    copied_lines = [
        CartLine(item_id=line.item_id, name=line.name, unit_price=line.unit_price, quantity=line.quantity)
        for line in lines
    ]
    if not copied_lines:
        raise ValueError("Cannot save an empty order")

    order_id = uuid4().hex
    created_at = _utc_now_iso()
    total = sum((line.total for line in copied_lines), Decimal("0"))

    with _connect(db_path) as conn:
        with conn:
            conn.execute(
                "INSERT INTO orders (id, created_at, total, source, status) VALUES (?, ?, ?, 'menu', 'PLACED')",
                (order_id, created_at, str(total)),
            )
            for idx, line in enumerate(copied_lines):
                conn.execute(
                    """
                    INSERT INTO order_items (order_id, line_index, item_id, item_name, unit_price, quantity)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    (order_id, idx, line.item_id, line.name, str(line.unit_price), line.quantity),
                )

    return SavedOrder(order_id=order_id, created_at=created_at, total=total, lines=copied_lines)


def load_order_lines(order_id: str, db_path: str | None = None) -> list[CartLine]:
    """Read back the lines of a saved order in their original order."""
    with _connect(db_path) as conn:
        rows = conn.execute(
            """
            SELECT item_id, item_name, unit_price, quantity
            FROM order_items
            WHERE order_id = ?
            ORDER BY line_index
            """,
            (order_id,),
        ).fetchall()
    return [
        CartLine(item_id=item_id, name=name, unit_price=Decimal(unit_price), quantity=quantity)
        for item_id, name, unit_price, quantity in rows
    ]
