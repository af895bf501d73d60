"""Monthly Report API Schemas

Pydantic models for the monthly report endpoints:

1. Sales statistics (total amount, sold and unsold counts)
2. Price-range bar chart
3. Category pie chart
4. The combined payload of all three

Fields are snake_case in Python and camelCase on the wire."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Optional


class ReportModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# 1. Statistics
class StatisticsResponse(ReportModel):
    total_sale_amount: float
    total_sold_items: int
    total_not_sold_items: int


# 2. Bar chart
class PriceRangeCount(ReportModel):
    range: str
    count: int


# 3. Pie chart
class CategoryCount(ReportModel):
    category: Optional[str] = None
    count: int


# 4. Combined
class CombinedReportResponse(ReportModel):
    statistics: StatisticsResponse
    barchart: List[PriceRangeCount]
    piechart: List[CategoryCount]
