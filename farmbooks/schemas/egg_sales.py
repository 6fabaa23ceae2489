"""Egg sale schemas."""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from farmbooks.domain.records.enums import Farm
from .common import CamelModel, Money, PartialUpdate


class EggSaleCreate(CamelModel):
    """Schema for recording an egg sale."""
    sale_date: date
    month: Optional[str] = Field(default=None, min_length=3, max_length=3)
    challan_number: Optional[str] = Field(default=None, max_length=100)
    farm: Farm
    amount_received: Decimal = Field(..., gt=0, decimal_places=2, max_digits=15)
    description: str = Field(..., min_length=1, max_length=500)
    type: str = Field(default="Eggs", max_length=50)


class EggSaleUpdate(PartialUpdate):
    """Partial update; only provided fields change."""
    not_nullable = ("sale_date", "farm", "amount_received", "description", "type")

    sale_date: Optional[date] = None
    month: Optional[str] = Field(default=None, min_length=3, max_length=3)
    challan_number: Optional[str] = Field(default=None, max_length=100)
    farm: Optional[Farm] = None
    amount_received: Optional[Decimal] = Field(default=None, gt=0, decimal_places=2, max_digits=15)
    description: Optional[str] = Field(default=None, min_length=1, max_length=500)
    type: Optional[str] = Field(default=None, max_length=50)


class EggSaleResponse(CamelModel):
    id: int
    sale_date: date
    month: Optional[str] = None
    challan_number: Optional[str] = None
    farm: Farm
    amount_received: Money
    description: str
    type: str
    created_at: datetime
    updated_at: datetime


class EggSaleFarmTotal(CamelModel):
    farm: Farm
    amount_received: Money


class EggSaleSummary(CamelModel):
    """Revenue total and per-farm breakdown."""
    total_revenue: Money
    by_farm: List[EggSaleFarmTotal]
