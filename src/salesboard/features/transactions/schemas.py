from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional
import datetime


def as_utc(value: datetime.datetime) -> datetime.datetime:
    """Normalises a timestamp to timezone-aware UTC. Naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        protected_namespaces=(),
    )


class TransactionBase(CamelModel):
    title: str = Field(..., max_length=255, description="Product title")
    description: str = Field(default="", description="Product description")
    price: float = Field(..., ge=0, description="Sale price")
    category: str = Field(..., min_length=1, max_length=100, description="Product category")
    image: Optional[str] = Field(None, max_length=1024, description="Image URL, not interpreted")
    sold: bool = Field(default=False, description="Whether the item was sold")
    date_of_sale: datetime.datetime = Field(..., description="Timestamp of the sale")


class TransactionSeedItem(TransactionBase):
    """One entry of the remote seed catalog."""

    id: int = Field(..., description="Catalog identifier, not unique")

    @field_validator("date_of_sale")
    @classmethod
    def normalise_date_of_sale(cls, value: datetime.datetime) -> datetime.datetime:
        return as_utc(value)


class TransactionResponse(TransactionBase):
    id: int = Field(..., description="Catalog identifier, not unique")
    public_id: str = Field(..., description="Unique row identifier (KSUID)")


class SeedResponse(BaseModel):
    message: str
    imported: int
