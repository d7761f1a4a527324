"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """Timestamp for directory names, e.g. '20251114_123456'."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def today() -> str:
    """Date for dated result directories, e.g. '2025-11-14'."""
    return datetime.now().strftime("%Y-%m-%d")
