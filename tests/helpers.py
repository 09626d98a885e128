"""Test helper utilities for building profiles."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any


def iso_days_before(now: datetime, days: float) -> str:
    """ISO timestamp for an account created ``days`` before ``now``."""
    return (now - timedelta(days=days)).isoformat()


def comments(*texts: str) -> list[dict[str, Any]]:
    """Wrap comment texts in the scraped comment shape."""
    return [{"text": text} for text in texts]


def distinct_comments(count: int, length: int = 30) -> list[dict[str, Any]]:
    """Build ``count`` unique comments of exactly ``length`` characters."""
    return [{"text": f"comment {i:03d} ".ljust(length, "x")} for i in range(count)]
