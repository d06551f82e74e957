"""Utility helpers for reusable functionality."""

from .datetime import (
    ensure_app_timezone,
    from_unix_timestamp,
    get_app_timezone,
    now_unix_timestamp,
    to_unix_timestamp,
)

__all__ = [
    "ensure_app_timezone",
    "from_unix_timestamp",
    "get_app_timezone",
    "now_unix_timestamp",
    "to_unix_timestamp",
]
