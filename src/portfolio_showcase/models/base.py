# ABOUTME: Shared helpers for SQLModel tables.
# ABOUTME: Provides the UTC clock used for every generated timestamp.

from datetime import UTC, datetime


def utcnow() -> datetime:
    """Return the current time in UTC."""
    return datetime.now(UTC)
