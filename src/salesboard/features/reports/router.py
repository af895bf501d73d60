import logging
from fastapi import APIRouter, Depends, Query
from typing import Annotated, List, Optional

from ..transactions.store import RecordStore, get_record_store
# Schemas for responses
from .schemas import (
    StatisticsResponse, PriceRangeCount, CategoryCount, CombinedReportResponse
)
# Service functions that contain the business logic
from . import service as report_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/reports",
    tags=["Reports"],
    responses={400: {"description": "Missing or invalid month"}},
)

# Left as a string so a missing or malformed month becomes InvalidMonth (400)
MonthQuery = Annotated[Optional[str], Query(description="Month of sale, 1-12")]
Store = Annotated[RecordStore, Depends(get_record_store)]


@router.get("/statistics", response_model=StatisticsResponse)
async def get_statistics_report(store: Store, month: MonthQuery = None):
    return await report_service.generate_statistics_report(store, month)

@router.get("/barchart", response_model=List[PriceRangeCount])
async def get_barchart_report(store: Store, month: MonthQuery = None):
    return await report_service.generate_barchart_report(store, month)

@router.get("/piechart", response_model=List[CategoryCount])
async def get_piechart_report(store: Store, month: MonthQuery = None):
    return await report_service.generate_piechart_report(store, month)

@router.get("/combined", response_model=CombinedReportResponse)
async def get_combined_report(store: Store, month: MonthQuery = None):
    logger.info(f"Combined report requested for month={month!r}")
    return await report_service.generate_combined_report(store, month)
