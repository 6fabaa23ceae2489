"""Expense schemas."""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from farmbooks.domain.records.enums import Farm, ExpenseHead
from .common import CamelModel, Money, PartialUpdate


class ExpenseCreate(CamelModel):
    """Schema for creating an expense."""
    expense_date: date
    month: Optional[str] = Field(default=None, min_length=3, max_length=3)
    challan: Optional[str] = Field(default=None, max_length=100)
    trans_id: Optional[str] = Field(default=None, max_length=100)
    farm: Farm
    expense_cost: Decimal = Field(..., gt=0, decimal_places=2, max_digits=15)
    head: ExpenseHead
    notes: Optional[str] = None


class ExpenseUpdate(PartialUpdate):
    """Partial update; only provided fields change."""
    not_nullable = ("expense_date", "farm", "expense_cost", "head")

    expense_date: Optional[date] = None
    month: Optional[str] = Field(default=None, min_length=3, max_length=3)
    challan: Optional[str] = Field(default=None, max_length=100)
    trans_id: Optional[str] = Field(default=None, max_length=100)
    farm: Optional[Farm] = None
    expense_cost: Optional[Decimal] = Field(default=None, gt=0, decimal_places=2, max_digits=15)
    head: Optional[ExpenseHead] = None
    notes: Optional[str] = None


class ExpenseResponse(CamelModel):
    """Schema for expense response."""
    id: int
    expense_date: date
    month: Optional[str] = None
    challan: Optional[str] = None
    trans_id: Optional[str] = None
    farm: Farm
    expense_cost: Money
    head: ExpenseHead
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ExpenseGroupTotal(CamelModel):
    """Sum of one (farm, head) group."""
    farm: Farm
    head: ExpenseHead
    expense_cost: Money


class ExpenseSummary(CamelModel):
    """Monthly expense summary."""
    month: str  # YYYY-MM
    by_group: List[ExpenseGroupTotal]
    total: Money
