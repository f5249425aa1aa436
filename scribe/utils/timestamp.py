"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """Current local time as a compact sortable stamp (e.g., "20261019_101500")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def today() -> str:
    """Current local date as an ISO string (e.g., "2026-10-19")."""
    return datetime.now().strftime("%Y-%m-%d")
