"""Feed purchase schemas."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from farmbooks.domain.records.enums import Farm, VoucherType
from .common import CamelModel, Money, PartialUpdate


class FeedPurchaseCreate(CamelModel):
    """Schema for recording a feed voucher."""
    purchase_date: date
    month: Optional[str] = Field(default=None, min_length=3, max_length=3)
    voucher_type: VoucherType
    feed_type: str = Field(..., min_length=1, max_length=100)
    farm: Farm
    bags: int = Field(..., ge=0)
    description: Optional[str] = Field(default=None, max_length=500)
    debit: Optional[Decimal] = Field(default=None, ge=0, decimal_places=2, max_digits=15)
    credit: Optional[Decimal] = Field(default=None, ge=0, decimal_places=2, max_digits=15)
    reconciled: bool = False
    posted_to_statement: bool = False


class FeedPurchaseUpdate(PartialUpdate):
    not_nullable = (
        "purchase_date",
        "voucher_type",
        "feed_type",
        "farm",
        "bags",
        "reconciled",
        "posted_to_statement",
    )

    purchase_date: Optional[date] = None
    month: Optional[str] = Field(default=None, min_length=3, max_length=3)
    voucher_type: Optional[VoucherType] = None
    feed_type: Optional[str] = Field(default=None, min_length=1, max_length=100)
    farm: Optional[Farm] = None
    bags: Optional[int] = Field(default=None, ge=0)
    description: Optional[str] = Field(default=None, max_length=500)
    debit: Optional[Decimal] = Field(default=None, ge=0, decimal_places=2, max_digits=15)
    credit: Optional[Decimal] = Field(default=None, ge=0, decimal_places=2, max_digits=15)
    reconciled: Optional[bool] = None
    posted_to_statement: Optional[bool] = None


class FeedPurchaseResponse(CamelModel):
    id: int
    purchase_date: date
    month: Optional[str] = None
    voucher_type: VoucherType
    feed_type: str
    farm: Farm
    bags: int
    description: Optional[str] = None
    debit: Optional[Money] = None
    credit: Optional[Money] = None
    running_balance: Money
    reconciled: bool
    posted_to_statement: bool
    created_at: datetime
    updated_at: datetime


class FeedPurchaseSummary(CamelModel):
    total_debit: Money
    total_credit: Money
    total_bags: int
    current_balance: Money
