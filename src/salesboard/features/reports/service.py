"""
Reports Service Module

Monthly sales reports over the transaction catalog: statistics, a price-range
bar chart, a category pie chart, and the three combined. Every report is
scoped to the window returned by ``month_window`` and queries the record
store only after the month selector has been validated.
"""

import asyncio
import logging
from typing import List, Optional, Union

from ..transactions.store import RecordFilter, RecordStore
from .schemas import (
    StatisticsResponse, PriceRangeCount, CategoryCount, CombinedReportResponse
)
from .window import month_window

logger = logging.getLogger(__name__)

MonthSelector = Union[int, float, str, None]

# (low, high) with low inclusive, high exclusive; None means unbounded.
PRICE_BUCKETS: List[tuple[int, Optional[int]]] = [
    (0, 101),
    (101, 201),
    (201, 301),
    (301, 401),
    (401, 501),
    (501, 601),
    (601, 701),
    (701, 801),
    (801, 901),
    (901, None),
]


def bucket_label(low: int, high: Optional[int]) -> str:
    return f"{low}-{high if high is not None else 'above'}"


def _window_filter(month: MonthSelector) -> RecordFilter:
    start, end = month_window(month)
    return RecordFilter(date_from=start, date_to=end)


async def generate_statistics_report(
    store: RecordStore, month: MonthSelector
) -> StatisticsResponse:
    """
    Generates sales statistics for one month.

    Args:
        store: The record store to query.
        month: Month selector, 1-12.

    Returns:
        StatisticsResponse with:
            - total_sale_amount: sum of prices of sold records (0 when none)
            - total_sold_items: number of sold records
            - total_not_sold_items: number of unsold records

    Raises:
        InvalidMonth: before any store call.
        StoreError: if any of the three queries fails.
    """
    start, end = month_window(month)
    sold = RecordFilter(date_from=start, date_to=end, sold=True)
    not_sold = RecordFilter(date_from=start, date_to=end, sold=False)

    total_sale_amount, total_sold_items, total_not_sold_items = await asyncio.gather(
        store.sum_matching(sold, "price"),
        store.count_matching(sold),
        store.count_matching(not_sold),
    )
    logger.debug(
        f"Statistics for {start:%Y-%m-%d}..{end:%Y-%m-%d}: amount={total_sale_amount} "
        f"sold={total_sold_items} not_sold={total_not_sold_items}"
    )
    return StatisticsResponse(
        total_sale_amount=float(total_sale_amount or 0),
        total_sold_items=total_sold_items,
        total_not_sold_items=total_not_sold_items,
    )


async def generate_barchart_report(
    store: RecordStore, month: MonthSelector
) -> List[PriceRangeCount]:
    """
    Counts the month's records (sold and unsold) per fixed price range.

    The ten counts are queried concurrently; the result always follows the
    order of PRICE_BUCKETS.
    """
    window = _window_filter(month)

    async def count_bucket(low: int, high: Optional[int]) -> PriceRangeCount:
        bucket_filter = RecordFilter(
            date_from=window.date_from, date_to=window.date_to, price_gte=low, price_lt=high
        )
        count = await store.count_matching(bucket_filter)
        return PriceRangeCount(range=bucket_label(low, high), count=count)

    return list(await asyncio.gather(*(count_bucket(low, high) for low, high in PRICE_BUCKETS)))


async def generate_piechart_report(
    store: RecordStore, month: MonthSelector
) -> List[CategoryCount]:
    """Counts the month's records (sold and unsold) per category, in store group order."""
    groups = await store.group_count(_window_filter(month), "category")
    return [CategoryCount(category=category, count=count) for category, count in groups]


async def generate_combined_report(
    store: RecordStore, month: MonthSelector
) -> CombinedReportResponse:
    """
    Runs the statistics, bar chart and pie chart reports concurrently.

    All three must succeed; the first failure propagates and no partial
    payload is returned.
    """
    # Raises InvalidMonth before any sub-report starts.
    month_window(month)
    statistics, barchart, piechart = await asyncio.gather(
        generate_statistics_report(store, month),
        generate_barchart_report(store, month),
        generate_piechart_report(store, month),
    )
    return CombinedReportResponse(statistics=statistics, barchart=barchart, piechart=piechart)
