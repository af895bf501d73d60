"""
Bulk import of the seed catalog.

The catalog is a JSON array of sale records published at a fixed URL. Each
entry is validated with TransactionSeedItem and inserted in source order, so
the auto-increment key reproduces the catalog order for pagination.
"""

import logging
from typing import Iterable, Optional

import httpx
from pydantic import TypeAdapter, ValidationError
from tortoise.transactions import in_transaction

from ...core.config import SEED_DATA_URL, SEED_REQUEST_TIMEOUT
from ...core.exceptions import SeedSourceError
from .models import Transaction
from .schemas import TransactionSeedItem
from .store import store_errors

logger = logging.getLogger(__name__)

_catalog_adapter = TypeAdapter(list[TransactionSeedItem])


async def fetch_seed_catalog(
    url: str = SEED_DATA_URL, client: Optional[httpx.AsyncClient] = None
) -> list[TransactionSeedItem]:
    """
    Downloads and validates the seed catalog.

    Args:
        url: Location of the JSON array.
        client: Optional pre-configured client (tests pass one with a mock transport).

    Raises:
        SeedSourceError: the request failed, returned a non-2xx status, or the
            body is not a list of valid records.
    """
    owns_client = client is None
    if client is None:
        client = httpx.AsyncClient(timeout=SEED_REQUEST_TIMEOUT)
    try:
        response = await client.get(url)
        response.raise_for_status()
        payload = response.json()
    except httpx.HTTPError as e:
        logger.error(f"Error fetching seed catalog from {url}: {e}")
        raise SeedSourceError(f"Error fetching data from {url}") from e
    except ValueError as e:
        logger.error(f"Seed catalog at {url} is not valid JSON: {e}")
        raise SeedSourceError(f"Seed catalog at {url} is not valid JSON") from e
    finally:
        if owns_client:
            await client.aclose()

    try:
        items = _catalog_adapter.validate_python(payload)
    except ValidationError as e:
        logger.error(f"Seed catalog at {url} failed validation: {e.error_count()} error(s)")
        raise SeedSourceError(f"Seed catalog at {url} contains invalid records") from e

    logger.info(f"Fetched {len(items)} record(s) from {url}")
    return items


async def import_transactions(
    items: Iterable[TransactionSeedItem], replace: bool = False
) -> int:
    """
    Inserts seed records in order. Returns the number of rows written.

    Existing rows are kept unless ``replace`` is set; catalog ids are not
    unique, so importing twice duplicates every record.
    """
    rows = [
        Transaction(
            product_id=item.id,
            title=item.title,
            description=item.description,
            price=item.price,
            category=item.category,
            image=item.image,
            sold=item.sold,
            date_of_sale=item.date_of_sale,
        )
        for item in items
    ]
    with store_errors("import"):
        async with in_transaction() as conn:
            if replace:
                deleted = await Transaction.all().using_db(conn).delete()
                logger.info(f"Removed {deleted} existing transaction(s)")
            if rows:
                await Transaction.bulk_create(rows, using_db=conn)
    logger.info(f"Imported {len(rows)} transaction(s)")
    return len(rows)


async def seed_database(
    url: str = SEED_DATA_URL,
    replace: bool = False,
    client: Optional[httpx.AsyncClient] = None,
) -> int:
    """Fetches the seed catalog and imports it. Returns the number of rows written."""
    items = await fetch_seed_catalog(url, client=client)
    return await import_transactions(items, replace=replace)
