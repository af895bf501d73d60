import datetime

import pytest

from salesboard.core.exceptions import InvalidMonth
from salesboard.features.reports.window import month_window, parse_month

UTC = datetime.timezone.utc


@pytest.mark.parametrize("month", range(1, 13))
def test_window_is_ordered_and_reproducible(month):
    start, end = month_window(month)
    assert start < end
    assert month_window(month) == (start, end)
    assert start.day == 1 and end.day == 1
    assert start.tzinfo is not None and end.tzinfo is not None


def test_window_spans_both_anchor_years():
    start, end = month_window(3)
    assert start == datetime.datetime(2021, 3, 1, tzinfo=UTC)
    assert end == datetime.datetime(2022, 4, 1, tzinfo=UTC)


def test_december_rolls_over_into_the_next_year():
    start, end = month_window(12)
    assert start == datetime.datetime(2021, 12, 1, tzinfo=UTC)
    assert end == datetime.datetime(2023, 1, 1, tzinfo=UTC)


def test_window_uses_configured_anchor_years():
    start, end = month_window(6, start_year=2019, end_year=2019)
    assert start == datetime.datetime(2019, 6, 1, tzinfo=UTC)
    assert end == datetime.datetime(2019, 7, 1, tzinfo=UTC)


def test_window_does_not_depend_on_today():
    start, _ = month_window(1)
    assert start.year == 2021


@pytest.mark.parametrize("value, expected", [(3, 3), ("3", 3), (" 11 ", 11), ("03", 3), (12.0, 12)])
def test_parse_month_accepts(value, expected):
    assert parse_month(value) == expected


@pytest.mark.parametrize("value", [None, "", "  ", "0", "13", -1, "march", "3.5", 3.5, True])
def test_parse_month_rejects(value):
    with pytest.raises(InvalidMonth):
        parse_month(value)
