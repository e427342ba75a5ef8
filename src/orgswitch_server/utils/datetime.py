"""Datetime utilities for consistent timestamp handling."""

from datetime import datetime, timedelta, timezone


def utc_now() -> datetime:
    """Get current UTC datetime.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(timezone.utc)


def utc_after(seconds: int) -> datetime:
    """Get the UTC datetime ``seconds`` from now (negative values lie in the past)."""
    return utc_now() + timedelta(seconds=seconds)
