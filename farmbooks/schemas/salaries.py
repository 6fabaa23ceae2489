"""Salary schemas."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from farmbooks.domain.records.enums import Farm
from .common import CamelModel, Money, PartialUpdate


class SalaryCreate(CamelModel):
    """Schema for one salary sheet row."""
    month: str = Field(..., min_length=3, max_length=20)
    employee_name: str = Field(..., min_length=1, max_length=200)
    designation: str = Field(..., min_length=1, max_length=100)
    farm: Optional[Farm] = None
    attendance: Optional[int] = Field(default=None, ge=0, le=31)
    basic_salary: Optional[Decimal] = Field(default=None, ge=0, decimal_places=2, max_digits=15)
    salary_amount: Decimal = Field(..., ge=0, decimal_places=2, max_digits=15)
    advance: Optional[Decimal] = Field(default=None, ge=0, decimal_places=2, max_digits=15)
    penalty_reward: Optional[Decimal] = Field(default=None, decimal_places=2, max_digits=15)  # Negative for penalties
    total: Decimal = Field(..., ge=0, decimal_places=2, max_digits=15)
    remarks: Optional[str] = None


class SalaryUpdate(PartialUpdate):
    not_nullable = ("month", "employee_name", "designation", "salary_amount", "total")

    month: Optional[str] = Field(default=None, min_length=3, max_length=20)
    employee_name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    designation: Optional[str] = Field(default=None, min_length=1, max_length=100)
    farm: Optional[Farm] = None
    attendance: Optional[int] = Field(default=None, ge=0, le=31)
    basic_salary: Optional[Decimal] = Field(default=None, ge=0, decimal_places=2, max_digits=15)
    salary_amount: Optional[Decimal] = Field(default=None, ge=0, decimal_places=2, max_digits=15)
    advance: Optional[Decimal] = Field(default=None, ge=0, decimal_places=2, max_digits=15)
    penalty_reward: Optional[Decimal] = Field(default=None, decimal_places=2, max_digits=15)
    total: Optional[Decimal] = Field(default=None, ge=0, decimal_places=2, max_digits=15)
    remarks: Optional[str] = None


class SalaryResponse(CamelModel):
    id: int
    month: str
    employee_name: str
    designation: str
    farm: Optional[Farm] = None
    attendance: Optional[int] = None
    basic_salary: Optional[Money] = None
    salary_amount: Money
    advance: Optional[Money] = None
    penalty_reward: Optional[Money] = None
    total: Money
    remarks: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class SalaryFarmTotal(CamelModel):
    farm: Optional[Farm] = None
    total: Money
    advance: Money
    salary_amount: Money


class SalarySummary(CamelModel):
    total_paid: Money
    total_advance: Money
    total_salary_amount: Money
    by_farm: List[SalaryFarmTotal]
