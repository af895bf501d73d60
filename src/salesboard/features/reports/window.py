"""Month selector → sale-date window used by every report."""

import datetime
from typing import Union

from ...core.config import REPORT_ANCHOR_END_YEAR, REPORT_ANCHOR_START_YEAR
from ...core.exceptions import InvalidMonth


def parse_month(value: Union[int, float, str, None]) -> int:
    """Resolves a month selector to an int in [1, 12] or raises InvalidMonth."""
    if value is None or isinstance(value, bool):
        raise InvalidMonth("Month is required")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise InvalidMonth("Month is required")
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidMonth(f"Month must be a whole number, got {value!r}")
        value = int(value)
    try:
        month = int(value)
    except (TypeError, ValueError):
        raise InvalidMonth(f"Month must be a number between 1 and 12, got {value!r}")
    if not 1 <= month <= 12:
        raise InvalidMonth(f"Month must be between 1 and 12, got {month}")
    return month


def month_window(
    month: Union[int, float, str, None],
    start_year: int = REPORT_ANCHOR_START_YEAR,
    end_year: int = REPORT_ANCHOR_END_YEAR,
) -> tuple[datetime.datetime, datetime.datetime]:
    """
    Returns the half-open UTC window ``[start, end)`` for a month selector.

    The window opens on the first of ``month`` in ``start_year`` and closes on
    the first of the following month in ``end_year``, so with the default
    anchors (2021, 2022) it covers the selected month in both years. The
    bounds never depend on today's date.

    Raises:
        InvalidMonth: the selector is missing or not an integer in [1, 12].
    """
    month = parse_month(month)
    start = datetime.datetime(start_year, month, 1, tzinfo=datetime.timezone.utc)
    if month == 12:
        end = datetime.datetime(end_year + 1, 1, 1, tzinfo=datetime.timezone.utc)
    else:
        end = datetime.datetime(end_year, month + 1, 1, tzinfo=datetime.timezone.utc)
    return start, end
