"""Tests for the date helpers."""

from datetime import date, datetime, timedelta, timezone

import pytest

from src.domain.errors import ValidationError
from src.utils import date_utils


def test_parse_iso_date_returns_calendar_date():
    assert date_utils.parse_iso_date("2025-01-10", "dueDate") == date(2025, 1, 10)


@pytest.mark.parametrize(
    "raw",
    [
        "2025-1-10",
        "2025/01/10",
        "2025-02-30",
        "20250110",
        "2025-01-10T00:00",
        "\u0662\u0660\u0662\u0665-01-10",
        None,
    ],
)
def test_parse_iso_date_rejects_malformed_values(raw):
    """Only real YYYY-MM-DD dates are accepted."""
    with pytest.raises(ValidationError, match="dueDate must be YYYY-MM-DD"):
        date_utils.parse_iso_date(raw, "dueDate")


def test_to_utc_normalizes_dates_and_datetimes():
    """Dates map to UTC midnight, naive datetimes are read as UTC."""
    assert date_utils.to_utc(date(2025, 1, 15)) == datetime(
        2025, 1, 15, tzinfo=timezone.utc
    )
    assert date_utils.to_utc(datetime(2025, 1, 15, 6, 30)) == datetime(
        2025, 1, 15, 6, 30, tzinfo=timezone.utc
    )
    offset = timezone(timedelta(hours=-5))
    converted = date_utils.to_utc(datetime(2025, 1, 15, 22, 0, tzinfo=offset))
    assert converted == datetime(2025, 1, 16, 3, 0, tzinfo=timezone.utc)
    assert converted.tzinfo is timezone.utc


def test_utc_now_is_timezone_aware():
    assert date_utils.utc_now().tzinfo is timezone.utc
