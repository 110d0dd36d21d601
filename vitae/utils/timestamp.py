"""Timestamp formatting utilities."""

from datetime import date, datetime
from typing import Optional


def now(moment: Optional[datetime] = None) -> str:
    """
    Compact local timestamp for file and directory names.

    Examples:
        now()  # "20251114_123456"
    """
    return (moment or datetime.now()).strftime("%Y%m%d_%H%M%S")


def today(day: Optional[date] = None) -> str:
    """
    Current date in ISO format (YYYY-MM-DD).

    Examples:
        today()  # "2025-11-14"
    """
    return (day or date.today()).isoformat()
