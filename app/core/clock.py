"""
Timestamp helpers for model defaults.

All stored timestamps are timezone-aware UTC.
"""

import datetime

from sqlalchemy import DateTime


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def timestamp_type() -> DateTime:
    """Column type for ``created_at`` / ``updated_at`` fields."""
    return DateTime(timezone=True)
