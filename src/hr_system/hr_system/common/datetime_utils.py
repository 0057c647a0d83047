from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_optional_date(value: Optional[str], field_name: str) -> Optional[date]:
    v = str(value).strip() if value is not None else ""
    if not v:
        return None
    try:
        return parse_iso_date(v)
    except ValueError:
        raise ValidationError(f"{field_name} không hợp lệ (YYYY-MM-DD)")


def parse_optional_datetime(value: Optional[str], field_name: str) -> Optional[datetime]:
    """Accept 'YYYY-MM-DD HH:MM[:SS]' or ISO 8601 ('T' separator)."""

    v = str(value).strip() if value is not None else ""
    if not v:
        return None
    try:
        parsed = datetime.fromisoformat(v)
    except ValueError:
        raise ValidationError(f"{field_name} không hợp lệ (YYYY-MM-DD HH:MM:SS)")
    if parsed.tzinfo is not None:
        # DATETIME columns are naive local time.
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def now_local() -> datetime:
    """Current local time, truncated to seconds like MySQL DATETIME.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().replace(microsecond=0)
