"""Reporting schemas for the income statement."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import ConfigDict, Field, model_validator

from farmbooks.domain.records.enums import Farm
from .common import CamelModel, Money

ZERO = Decimal("0")


class ReportPeriod(CamelModel):
    """
    Reporting window plus optional farm.

    A month token and a date range are alternatives; a single period never
    carries both.
    """
    month: Optional[str] = Field(default=None, min_length=3, max_length=3)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    farm: Optional[Farm] = None

    @model_validator(mode="after")
    def check_exclusive(self) -> "ReportPeriod":
        if self.month is not None and (self.start_date is not None or self.end_date is not None):
            raise ValueError("Use either a month or a date range, not both")
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValueError("startDate must not be after endDate")
        return self

    @property
    def has_range(self) -> bool:
        return self.start_date is not None or self.end_date is not None

    def label(self) -> str:
        """Human-readable period label."""
        if self.month is not None:
            return f"Month: {self.month}"
        if self.has_range:
            start = self.start_date.isoformat() if self.start_date else "earliest"
            end = self.end_date.isoformat() if self.end_date else "latest"
            return f"From {start} to {end}"
        return "All time"


# Income Statement Schemas
class CogsBreakdown(CamelModel):
    """Cost of goods sold by subcategory."""
    model_config = ConfigDict(frozen=True)

    chicken: Money = ZERO
    feed: Money = ZERO
    medicine: Money = ZERO
    vaccine: Money = ZERO
    total: Money = ZERO


class OperatingExpenseBreakdown(CamelModel):
    """Operating expenses by subcategory."""
    model_config = ConfigDict(frozen=True)

    rent: Money = ZERO
    utilities: Money = ZERO
    salaries_payments: Money = ZERO
    mess: Money = ZERO
    power_electric: Money = ZERO
    pol: Money = ZERO
    packing_material: Money = ZERO
    repair_maintenance: Money = ZERO
    office_expenses: Money = ZERO
    meeting_refreshment: Money = ZERO
    travelling_logistics: Money = ZERO
    miscellaneous: Money = ZERO
    total: Money = ZERO


class IncomeStatement(CamelModel):
    """Income statement derived from live aggregates; never stored."""
    model_config = ConfigDict(frozen=True)

    period: str
    gross_revenue: Money
    other_income: Money
    total_revenue: Money
    cogs: CogsBreakdown
    operating_expenses: OperatingExpenseBreakdown
    total_expenses: Money
    net_income: Money
    note: str  # "Profitable" or "Loss"
