"""Egg production schemas."""

from datetime import date, datetime
from typing import List, Optional

from pydantic import Field

from farmbooks.domain.records.enums import Farm
from .common import CamelModel, PartialUpdate


class EggProductionCreate(CamelModel):
    """Schema for recording a day's egg production."""
    production_date: date
    month: Optional[str] = Field(default=None, min_length=3, max_length=3)
    farm: Farm
    chicken_eggs: int = Field(..., ge=0)
    total_eggs: Optional[int] = Field(default=None, ge=0)
    notes: Optional[str] = None


class EggProductionUpdate(PartialUpdate):
    not_nullable = ("production_date", "farm", "chicken_eggs")

    production_date: Optional[date] = None
    month: Optional[str] = Field(default=None, min_length=3, max_length=3)
    farm: Optional[Farm] = None
    chicken_eggs: Optional[int] = Field(default=None, ge=0)
    total_eggs: Optional[int] = Field(default=None, ge=0)
    notes: Optional[str] = None


class EggProductionResponse(CamelModel):
    id: int
    production_date: date
    month: Optional[str] = None
    farm: Farm
    chicken_eggs: int
    total_eggs: Optional[int] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class EggProductionFarmTotal(CamelModel):
    farm: Farm
    chicken_eggs: int
    total_eggs: int


class EggProductionSummary(CamelModel):
    total_eggs: int  # Sum of chicken eggs
    by_farm: List[EggProductionFarmTotal]
