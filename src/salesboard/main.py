import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from tortoise import Tortoise
from tortoise.contrib.fastapi import tortoise_exception_handlers

from .core.config import TORTOISE_ORM_CONFIG
from .core.exceptions import InvalidRequest, SeedSourceError, StoreError
from .core.logging_config import configure_logging
from .features.transactions.router import router as transactions_router
from .features.reports.router import router as reports_router

configure_logging()
logger = logging.getLogger("salesboard.main")  # This logger will inherit from 'salesboard'


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Connects to the database once at startup; request handlers reuse the
    connection through the record store dependency and never reconnect.
    """
    logger.info("Starting application...")
    await Tortoise.init(config=TORTOISE_ORM_CONFIG)
    logger.info("Tortoise-ORM has been initialized.")

    yield

    await Tortoise.close_connections()
    logger.info("Tortoise-ORM connections have been closed.")


async def invalid_request_handler(request: Request, exc: InvalidRequest):
    logger.info(f"Rejected {request.url.path}: {exc.message}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.message})


async def store_error_handler(request: Request, exc: StoreError):
    # Details are already logged by the store adapter.
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": "Server error"}
    )


async def seed_source_error_handler(request: Request, exc: SeedSourceError):
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"error": exc.message})


app = FastAPI(
    title="Salesboard API",
    description="Search sale transactions and build monthly sales reports.",
    version="0.1.0",
    exception_handlers={
        **tortoise_exception_handlers(),
        InvalidRequest: invalid_request_handler,
        StoreError: store_error_handler,
        SeedSourceError: seed_source_error_handler,
    },
    lifespan=lifespan,
)


@app.get("/")
async def read_root(request: Request):
    """
    Root endpoint for the API.
    """
    client_host = request.client.host if request.client else "unknown client"
    logger.info(f"Root endpoint '/' accessed by {client_host}")
    return {"message": "Welcome to the Salesboard API!"}


# Include your routers
app.include_router(transactions_router, prefix="/api/v1")
app.include_router(reports_router, prefix="/api/v1")
