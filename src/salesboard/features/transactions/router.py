"""API routes for listing and seeding sale transactions."""
from fastapi import APIRouter, Depends, Query, Response, status
from typing import List, Annotated, Optional

from ...core.config import DEFAULT_PER_PAGE, SEED_DATA_URL
from .schemas import TransactionResponse, SeedResponse
from .store import RecordStore, get_record_store
from . import service
from .seed import seed_database

router = APIRouter(
    prefix="/transactions",
    tags=["Transactions"],
    responses={404: {"description": "Not found"}},
)


@router.get(
    "",
    response_model=List[TransactionResponse],
    summary="Search and page through transactions",
)
async def list_transactions(
    response: Response,
    store: Annotated[RecordStore, Depends(get_record_store)],
    # Plain strings so bad values surface as InvalidPage/InvalidPerPage (400)
    page: Optional[str] = Query("1", description="Page number, starting at 1"),
    per_page: Optional[str] = Query(
        str(DEFAULT_PER_PAGE), alias="perPage", description="Number of records per page"
    ),
    search: str = Query("", description="Matches title, description, or exact price"),
):
    transactions = await service.search_transactions(store, search, page, per_page)
    total = await service.count_search_matches(store, search)
    response.headers["X-Total-Count"] = str(total)
    return transactions


@router.post(
    "/initdb",
    response_model=SeedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Import the seed catalog into the database",
)
async def initialize_database(
    source_url: str = Query(SEED_DATA_URL, description="URL of the JSON seed catalog"),
    replace: bool = Query(False, description="Delete existing transactions first"),
):
    imported = await seed_database(source_url, replace=replace)
    return SeedResponse(message="Database initialized with seed data.", imported=imported)
