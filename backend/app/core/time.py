"""Time helpers: timezone-aware UTC timestamps and the issuing year."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return a timezone-aware UTC datetime for defaults and onupdate hooks."""
    return datetime.now(UTC)


def current_year() -> int:
    """Calendar year stamped into newly issued quotation numbers."""
    return utc_now().year
