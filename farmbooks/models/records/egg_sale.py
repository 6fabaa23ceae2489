"""Egg sale model."""

from datetime import date
from decimal import Decimal
from sqlalchemy import String, Date, Enum, Numeric, Integer, Index
from sqlalchemy.orm import mapped_column, Mapped

from farmbooks.models.base import Base, TimestampMixin
from farmbooks.domain.records.enums import Farm


class EggSale(Base, TimestampMixin):
    """Money received for an egg sale (revenue record)."""
    
    __tablename__ = "egg_sales"
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    
    sale_date: Mapped[date] = mapped_column(Date, nullable=False)
    month: Mapped[str | None] = mapped_column(String(3), nullable=True)
    challan_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    
    farm: Mapped[Farm] = mapped_column(Enum(Farm), nullable=False)
    amount_received: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    
    description: Mapped[str] = mapped_column(String(500), nullable=False)
    type: Mapped[str] = mapped_column(String(50), default="Eggs", nullable=False)
    
    __table_args__ = (
        Index("idx_egg_sales_farm_date", "farm", "sale_date"),
    )
