import logging
import math
from typing import Optional, Union

from ...core.config import DEFAULT_PER_PAGE, MAX_PER_PAGE
from ...core.exceptions import InvalidPage, InvalidPerPage
from .models import Transaction
from .schemas import TransactionResponse
from .store import RecordFilter, RecordStore

logger = logging.getLogger(__name__)


def to_transaction_response(transaction: Transaction) -> TransactionResponse:
    """Converts a Transaction model instance to a TransactionResponse schema."""
    return TransactionResponse(
        id=transaction.product_id,
        public_id=transaction.public_id,
        title=transaction.title,
        description=transaction.description,
        price=transaction.price,
        category=transaction.category,
        image=transaction.image,
        sold=transaction.sold,
        date_of_sale=transaction.date_of_sale,
    )


def parse_numeric_term(search: str) -> Optional[float]:
    """Returns the search term as a number, or None when it is not one.

    Blank terms, NaN and infinities are not numbers here, so a text search
    never turns into a price match.
    """
    term = search.strip()
    if not term:
        return None
    try:
        value = float(term)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def build_search_filter(search: str) -> RecordFilter:
    if not search:
        return RecordFilter()
    return RecordFilter(text=search, numeric=parse_numeric_term(search))


def _positive_int(value: Union[int, str, None], default: int, error_cls, name: str) -> int:
    if value is None or value == "":
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise error_cls(f"{name} must be an integer, got {value!r}")
    if number < 1:
        raise error_cls(f"{name} must be at least 1, got {number}")
    return number


def resolve_pagination(
    page: Union[int, str, None], per_page: Union[int, str, None]
) -> tuple[int, int]:
    """
    Validates page parameters.

    Returns:
        (skip, limit) for the store query.

    Raises:
        InvalidPage: page is not an integer >= 1.
        InvalidPerPage: per_page is not an integer >= 1.

    Page sizes above MAX_PER_PAGE are clamped to it.
    """
    page_number = _positive_int(page, 1, InvalidPage, "page")
    size = min(_positive_int(per_page, DEFAULT_PER_PAGE, InvalidPerPage, "perPage"), MAX_PER_PAGE)
    return (page_number - 1) * size, size


async def search_transactions(
    store: RecordStore,
    search: str = "",
    page: Union[int, str, None] = 1,
    per_page: Union[int, str, None] = DEFAULT_PER_PAGE,
) -> list[TransactionResponse]:
    """
    Returns one page of transactions matching a free-text query.

    A record matches when its title or description contains ``search``
    (case-insensitive), or when ``search`` is a number equal to its price.
    An empty query matches everything. Records come back in store order.

    Args:
        store: The record store to query.
        search: Free-text query.
        page: 1-indexed page number.
        per_page: Page size.

    Returns:
        At most ``per_page`` transactions.
    """
    skip, limit = resolve_pagination(page, per_page)
    record_filter = build_search_filter(search or "")
    logger.debug(f"Searching transactions: search={search!r} skip={skip} limit={limit}")
    transactions = await store.search(record_filter, skip, limit)
    return [to_transaction_response(t) for t in transactions]


async def count_search_matches(store: RecordStore, search: str = "") -> int:
    """Total number of transactions matching ``search``, ignoring pagination."""
    return await store.count_matching(build_search_filter(search or ""))
