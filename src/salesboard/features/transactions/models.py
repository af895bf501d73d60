"""Data model for the sale records ("transactions") served by the reports."""

from tortoise import fields
from ...common.models import TimestampMixin, generate_ksuid


class Transaction(TimestampMixin):
    # Surrogate key. Auto-increment order is the store's natural order.
    id = fields.IntField(primary_key=True)
    public_id = fields.CharField(
        max_length=27, unique=True, default=generate_ksuid, db_index=True
    )
    # Identifier from the source catalog; repeated values are allowed.
    product_id = fields.IntField(db_index=True)
    title = fields.CharField(max_length=255)
    description = fields.TextField(default="")
    price = fields.FloatField(default=0.0, description="Sale price, never negative")
    category = fields.CharField(max_length=100, db_index=True)
    image = fields.CharField(max_length=1024, null=True)
    sold = fields.BooleanField(default=False)
    date_of_sale = fields.DatetimeField(db_index=True)

    def __str__(self):
        return f"{self.title} (#{self.product_id}, ${self.price:.2f})"

    class Meta:
        table = "transactions"
