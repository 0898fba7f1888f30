"""
Fire-and-forget analytics events.
Appends one JSON object per event to logs/analytics.log.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from thai_menu.config import ANALYTICS_LOG_PATH


class AnalyticsLogger:
    """JSON-lines recorder for user interaction events."""

    def __init__(self, log_file: str = ANALYTICS_LOG_PATH, enabled: bool = True):
        self.log_file = log_file
        self.enabled = enabled

    def record(self, event_name: str, properties: dict[str, Any] | None = None) -> None:
        """Record an event. Never raises and never blocks the caller on failure."""
        if not self.enabled:
            return

        event = {
            "event": event_name,
            "properties": dict(properties or {}),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        try:
            path = Path(self.log_file)
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("a", encoding="utf-8") as fh:
                fh.write(json.dumps(event, default=str) + "\n")
        except Exception:
            # Analytics must never interfere with app flow.
            return


# Global analytics instance
_analytics: AnalyticsLogger | None = None


def get_analytics() -> AnalyticsLogger:
    """Get or create the global analytics instance."""
    global _analytics
    if _analytics is None:
        _analytics = AnalyticsLogger()
    return _analytics
