"""Salary model."""

from decimal import Decimal
from sqlalchemy import String, Enum, Integer, Numeric, Text
from sqlalchemy.orm import mapped_column, Mapped

from farmbooks.models.base import Base, TimestampMixin
from farmbooks.domain.records.enums import Farm


class Salary(Base, TimestampMixin):
    """Monthly salary sheet row for one employee."""
    
    __tablename__ = "salaries"
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    
    month: Mapped[str] = mapped_column(String(20), nullable=False)
    employee_name: Mapped[str] = mapped_column(String(200), nullable=False)
    designation: Mapped[str] = mapped_column(String(100), nullable=False)
    farm: Mapped[Farm | None] = mapped_column(Enum(Farm), nullable=True)
    
    attendance: Mapped[int | None] = mapped_column(Integer, nullable=True)
    basic_salary: Mapped[Decimal | None] = mapped_column(Numeric(18, 2), nullable=True)
    salary_amount: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    advance: Mapped[Decimal | None] = mapped_column(Numeric(18, 2), nullable=True)
    penalty_reward: Mapped[Decimal | None] = mapped_column(Numeric(18, 2), nullable=True)
    total: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    
    remarks: Mapped[str | None] = mapped_column(Text, nullable=True)
