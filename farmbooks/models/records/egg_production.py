"""Egg production model."""

from datetime import date
from sqlalchemy import String, Date, Enum, Integer, Text
from sqlalchemy.orm import mapped_column, Mapped

from farmbooks.models.base import Base, TimestampMixin
from farmbooks.domain.records.enums import Farm


class EggProduction(Base, TimestampMixin):
    """Daily egg count for a farm."""
    
    __tablename__ = "egg_productions"
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    
    production_date: Mapped[date] = mapped_column(Date, nullable=False)
    month: Mapped[str | None] = mapped_column(String(3), nullable=True)
    farm: Mapped[Farm] = mapped_column(Enum(Farm), nullable=False)
    
    chicken_eggs: Mapped[int] = mapped_column(Integer, nullable=False)
    total_eggs: Mapped[int | None] = mapped_column(Integer, nullable=True)
    
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
