"""Feed purchase model."""

from datetime import date
from decimal import Decimal
from sqlalchemy import String, Date, Enum, Integer, Numeric, Boolean, Index
from sqlalchemy.orm import mapped_column, Mapped

from farmbooks.models.base import Base, TimestampMixin
from farmbooks.domain.records.enums import Farm, VoucherType


class FeedPurchase(Base, TimestampMixin):
    """Feed voucher with a best-effort running balance per farm."""
    
    __tablename__ = "feed_purchases"
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    
    purchase_date: Mapped[date] = mapped_column(Date, nullable=False)
    month: Mapped[str | None] = mapped_column(String(3), nullable=True)
    voucher_type: Mapped[VoucherType] = mapped_column(Enum(VoucherType), nullable=False)
    feed_type: Mapped[str] = mapped_column(String(100), nullable=False)
    farm: Mapped[Farm] = mapped_column(Enum(Farm), nullable=False)
    
    bags: Mapped[int] = mapped_column(Integer, nullable=False)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    
    debit: Mapped[Decimal | None] = mapped_column(Numeric(18, 2), nullable=True)
    credit: Mapped[Decimal | None] = mapped_column(Numeric(18, 2), nullable=True)
    running_balance: Mapped[Decimal] = mapped_column(Numeric(18, 2), default=0, nullable=False)
    
    reconciled: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    posted_to_statement: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    
    __table_args__ = (
        Index("idx_feed_purchases_farm_date", "farm", "purchase_date"),
    )
