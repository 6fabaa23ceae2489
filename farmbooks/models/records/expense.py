"""Expense model."""

from datetime import date
from decimal import Decimal
from sqlalchemy import String, Date, Enum, Numeric, Integer, Text, Index
from sqlalchemy.orm import mapped_column, Mapped

from farmbooks.models.base import Base, TimestampMixin
from farmbooks.domain.records.enums import Farm, ExpenseHead


class Expense(Base, TimestampMixin):
    """A cost booked against a farm under one expense head."""
    
    __tablename__ = "expenses"
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    
    expense_date: Mapped[date] = mapped_column(Date, nullable=False)
    month: Mapped[str | None] = mapped_column(String(3), nullable=True)  # "Dec", "Jan", ...
    challan: Mapped[str | None] = mapped_column(String(100), nullable=True)
    trans_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    
    farm: Mapped[Farm] = mapped_column(Enum(Farm), nullable=False)
    head: Mapped[ExpenseHead] = mapped_column(Enum(ExpenseHead), nullable=False)
    expense_cost: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    
    __table_args__ = (
        Index("idx_expenses_farm_date", "farm", "expense_date"),
        Index("idx_expenses_head", "head"),
    )
