# src/metforecast/utils/time.py
"""Time and date handling utilities."""

from __future__ import annotations

from datetime import UTC, datetime
from zoneinfo import ZoneInfo


class TimeUtils:
    """Time-related utility functions.

    Centralized utilities for working with forecast timestamps:
    - ISO-8601 parsing with UTC normalization
    - Timezone conversions for display
    - Datetime formatting with user preferences
    """

    @staticmethod
    def parse_iso(value: str) -> datetime:
        """Parse an ISO-8601 timestamp into an aware UTC datetime.

        Naive timestamps are assumed to be UTC.

        Args:
            value: Timestamp such as ``2024-05-01T11:00:00Z``

        Returns:
            Timezone-aware datetime object in UTC

        Raises:
            ValueError: If the value is not a valid ISO-8601 timestamp
        """
        dt = datetime.fromisoformat(value)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        return dt.astimezone(UTC)

    @staticmethod
    def utc_hour(dt: datetime) -> int:
        """Hour of day of ``dt`` in UTC (naive values are taken as UTC)."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        return dt.astimezone(UTC).hour

    @staticmethod
    def to_timezone(dt: datetime, timezone_name: str) -> datetime:
        """Convert an aware datetime to the named timezone.

        Args:
            dt: Datetime to convert (naive values are taken as UTC)
            timezone_name: IANA timezone name

        Returns:
            Localized datetime object
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        return dt.astimezone(ZoneInfo(timezone_name))

    @staticmethod
    def format_datetime(dt: datetime, format_string: str) -> str:
        """Format datetime with specified format string."""
        return dt.strftime(format_string)
