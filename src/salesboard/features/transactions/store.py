"""
Record store adapter.

The report and search services never query the ORM directly. They describe
what they want with a ``RecordFilter`` and hand it to a ``RecordStore``, which
answers with counts, sums, grouped counts or a page of records. The production
store is backed by Tortoise ORM; tests can substitute any object with the same
four coroutines.
"""

import dataclasses
import datetime
import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Protocol, Sequence

from tortoise.exceptions import BaseORMException
from tortoise.expressions import Q
from tortoise.functions import Count, Sum

from ...core.exceptions import StoreError
from .models import Transaction

logger = logging.getLogger(__name__)

# Largest OFFSET a 64-bit SQL integer can hold.
MAX_OFFSET = 2**63 - 1


@dataclasses.dataclass(frozen=True)
class RecordFilter:
    """Conditions a record must satisfy. Unset fields do not constrain.

    Date and price ranges are half-open: ``[date_from, date_to)`` and
    ``[price_gte, price_lt)``. ``text`` matches title or description
    case-insensitively; when ``numeric`` is also set, an exact price match
    satisfies the text condition too.
    """

    date_from: Optional[datetime.datetime] = None
    date_to: Optional[datetime.datetime] = None
    sold: Optional[bool] = None
    price_gte: Optional[float] = None
    price_lt: Optional[float] = None
    text: Optional[str] = None
    numeric: Optional[float] = None


class RecordStore(Protocol):
    async def count_matching(self, record_filter: RecordFilter) -> int: ...

    async def sum_matching(self, record_filter: RecordFilter, field: str) -> float: ...

    async def group_count(
        self, record_filter: RecordFilter, group_field: str
    ) -> list[tuple[object, int]]: ...

    async def search(
        self, record_filter: RecordFilter, skip: int, limit: int
    ) -> Sequence[Transaction]: ...


def build_conditions(record_filter: RecordFilter) -> list[Q]:
    """Translates a RecordFilter into Tortoise Q objects, ANDed by the caller."""
    conditions = []
    if record_filter.date_from is not None:
        conditions.append(Q(date_of_sale__gte=record_filter.date_from))
    if record_filter.date_to is not None:
        conditions.append(Q(date_of_sale__lt=record_filter.date_to))
    if record_filter.sold is not None:
        conditions.append(Q(sold=record_filter.sold))
    if record_filter.price_gte is not None:
        conditions.append(Q(price__gte=record_filter.price_gte))
    if record_filter.price_lt is not None:
        conditions.append(Q(price__lt=record_filter.price_lt))
    if record_filter.text is not None:
        text_match = Q(title__icontains=record_filter.text) | Q(
            description__icontains=record_filter.text
        )
        if record_filter.numeric is not None:
            text_match |= Q(price=record_filter.numeric)
        conditions.append(text_match)
    return conditions


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except (BaseORMException, OSError) as e:
        logger.error(f"Record store {operation} failed: {e}", exc_info=True)
        raise StoreError(f"Record store {operation} failed") from e


class TortoiseRecordStore:
    """RecordStore backed by the ``transactions`` table."""

    def _queryset(self, record_filter: RecordFilter):
        return Transaction.filter(*build_conditions(record_filter))

    async def count_matching(self, record_filter: RecordFilter) -> int:
        with store_errors("count"):
            return await self._queryset(record_filter).count()

    async def sum_matching(self, record_filter: RecordFilter, field: str) -> float:
        with store_errors("sum"):
            rows = (
                await self._queryset(record_filter)
                .annotate(total=Sum(field))
                .values("total")
            )
        if not rows or rows[0]["total"] is None:
            return 0
        return rows[0]["total"]

    async def group_count(
        self, record_filter: RecordFilter, group_field: str
    ) -> list[tuple[object, int]]:
        with store_errors("group count"):
            rows = (
                await self._queryset(record_filter)
                .annotate(count=Count("id"))
                .group_by(group_field)
                .values(group_field, "count")
            )
        return [(row[group_field], row["count"]) for row in rows]

    async def search(
        self, record_filter: RecordFilter, skip: int, limit: int
    ) -> list[Transaction]:
        if skip > MAX_OFFSET:
            return []
        with store_errors("search"):
            return (
                await self._queryset(record_filter)
                .order_by("id")
                .offset(skip)
                .limit(limit)
            )


_record_store = TortoiseRecordStore()


def get_record_store() -> RecordStore:
    """
    FastAPI dependency returning the process-wide record store.

    The store holds no connection of its own; Tortoise connections are opened
    once in the application lifespan. Tests override this dependency.
    """
    return _record_store
