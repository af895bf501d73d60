"""
Root conftest for the pytest test suite.

This file contains the main fixtures that are used across the entire test suite.

This setup uses a manual, async-native approach to database initialization
to ensure that each test runs against a fresh, isolated in-memory database,
which is the most reliable method for an async pytest environment.

Key Fixtures:
- `anyio_backend`: Specifies the asyncio backend for pytest-asyncio.
- `initialize_test_db`: (autouse) Creates a fresh DB schema for each test.
- `app_for_testing`: Provides the FastAPI application instance with its production
  lifespan disabled to allow `initialize_test_db` to manage the test DB.
- `client`: Provides a TestClient.
- `transaction_factory`: Creates Transaction rows with sensible defaults.
- `counting_store`: A RecordStore stand-in that records every call it receives.
- `failing_store`: A RecordStore stand-in whose every call raises StoreError.
"""

import datetime
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient
from tortoise import Tortoise

from salesboard.core.exceptions import StoreError
from salesboard.features.transactions.models import Transaction
from salesboard.features.transactions.store import get_record_store

# Import the app
from salesboard.main import app as actual_app


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """
    Specifies the asyncio backend for pytest-asyncio.
    """
    return "asyncio"


@pytest_asyncio.fixture(scope="function", autouse=True)
async def initialize_test_db() -> AsyncGenerator[None, None]:
    """
    Initializes the database for each test function.

    This async, autouse fixture creates a fresh in-memory database and schema
    for each test and tears it down afterwards.
    """
    test_db_config = {
        "connections": {"default": "sqlite://:memory:"},
        "apps": {
            "models": {
                "models": [
                    "salesboard.features.transactions.models",
                    "aerich.models",
                ],
                "default_connection": "default",
            }
        },
    }
    await Tortoise.init(config=test_db_config)
    await Tortoise.generate_schemas()

    yield

    await Tortoise.close_connections()


@pytest.fixture(scope="function")
def app_for_testing() -> Generator[FastAPI, Any, None]:
    """
    Provides a FastAPI application instance for testing, with its
    production lifespan manager disabled to allow the test DB fixture
    to manage the database connection.
    """
    original_lifespan = actual_app.router.lifespan_context

    @asynccontextmanager
    async def dummy_lifespan(app: FastAPI):
        yield

    actual_app.router.lifespan_context = dummy_lifespan

    yield actual_app

    # Restore the original lifespan context and any store overrides
    actual_app.router.lifespan_context = original_lifespan
    actual_app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client(app_for_testing: FastAPI) -> Generator[TestClient, Any, None]:
    """
    Provides a starlette TestClient.
    """
    with TestClient(app_for_testing) as tc:
        yield tc


def utc(year: int, month: int, day: int = 15, hour: int = 12) -> datetime.datetime:
    return datetime.datetime(year, month, day, hour, tzinfo=datetime.timezone.utc)


@pytest.fixture
def sale_date():
    """Builds UTC sale timestamps: sale_date(2021, 3) -> 2021-03-15 12:00 UTC."""
    return utc


@pytest_asyncio.fixture
async def transaction_factory():
    """A factory to create transactions. Catalog ids count up from 1."""
    counter = {"next_id": 1}

    async def _factory(
        title: str = "Sample product",
        price: float = 50.0,
        sold: bool = True,
        category: str = "electronics",
        date_of_sale: datetime.datetime | None = None,
        description: str = "A sample product",
        product_id: int | None = None,
    ) -> Transaction:
        if product_id is None:
            product_id = counter["next_id"]
            counter["next_id"] += 1
        return await Transaction.create(
            product_id=product_id,
            title=title,
            description=description,
            price=price,
            category=category,
            image=f"https://example.com/images/{product_id}.jpg",
            sold=sold,
            date_of_sale=date_of_sale or utc(2021, 3),
        )

    return _factory


class CountingStore:
    """Records every store call and answers with empty results."""

    def __init__(self):
        self.calls = []

    async def count_matching(self, record_filter):
        self.calls.append(("count_matching", record_filter))
        return 0

    async def sum_matching(self, record_filter, field):
        self.calls.append(("sum_matching", record_filter, field))
        return 0

    async def group_count(self, record_filter, group_field):
        self.calls.append(("group_count", record_filter, group_field))
        return []

    async def search(self, record_filter, skip, limit):
        self.calls.append(("search", record_filter, skip, limit))
        return []


class FailingStore:
    """Raises StoreError from every call, like an unreachable database."""

    async def count_matching(self, record_filter):
        raise StoreError("Record store count failed")

    async def sum_matching(self, record_filter, field):
        raise StoreError("Record store sum failed")

    async def group_count(self, record_filter, group_field):
        raise StoreError("Record store group count failed")

    async def search(self, record_filter, skip, limit):
        raise StoreError("Record store search failed")


@pytest.fixture
def counting_store(app_for_testing: FastAPI) -> CountingStore:
    """A CountingStore, also installed as the app's record store."""
    store = CountingStore()
    app_for_testing.dependency_overrides[get_record_store] = lambda: store
    return store


@pytest.fixture
def failing_store(app_for_testing: FastAPI) -> FailingStore:
    """A FailingStore, also installed as the app's record store."""
    store = FailingStore()
    app_for_testing.dependency_overrides[get_record_store] = lambda: store
    return store
