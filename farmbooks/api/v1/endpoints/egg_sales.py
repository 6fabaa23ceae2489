"""Egg sale endpoints."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from farmbooks.api.deps import get_current_user, require_admin
from farmbooks.api.responses import render
from farmbooks.db.dependencies import get_db
from farmbooks.domain.records.enums import Farm
from farmbooks.schemas.common import ApiResponse, Page
from farmbooks.schemas.egg_sales import (
    EggSaleCreate,
    EggSaleUpdate,
    EggSaleResponse,
    EggSaleSummary,
)
from farmbooks.services import egg_sale_service

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.post("", response_model=ApiResponse[EggSaleResponse], status_code=status.HTTP_201_CREATED)
def create_egg_sale(data: EggSaleCreate, response: Response, db: Session = Depends(get_db)):
    return render(egg_sale_service.create_egg_sale(db, data), response)


@router.get("", response_model=ApiResponse[Page[EggSaleResponse]])
def list_egg_sales(
    response: Response,
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=200),
    farm: Optional[Farm] = None,
    month: Optional[str] = Query(None, min_length=3, max_length=3),
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    search: Optional[str] = None,
    db: Session = Depends(get_db),
):
    result = egg_sale_service.list_egg_sales(
        db,
        page=page,
        limit=limit,
        farm=farm,
        month=month,
        start_date=start_date,
        end_date=end_date,
        search=search,
    )
    return render(result, response)


@router.get("/summary", response_model=ApiResponse[EggSaleSummary])
def egg_sale_summary(
    response: Response,
    month: Optional[str] = Query(None, min_length=3, max_length=3),
    farm: Optional[Farm] = None,
    db: Session = Depends(get_db),
):
    """Revenue total and per-farm breakdown."""
    return render(egg_sale_service.get_egg_sale_summary(db, month=month, farm=farm), response)


@router.put("/{sale_id}", response_model=ApiResponse[EggSaleResponse])
def update_egg_sale(
    sale_id: int,
    data: EggSaleUpdate,
    response: Response,
    db: Session = Depends(get_db),
):
    return render(egg_sale_service.update_egg_sale(db, sale_id, data), response)


@router.delete("/{sale_id}", response_model=ApiResponse[None], dependencies=[Depends(require_admin)])
def delete_egg_sale(sale_id: int, response: Response, db: Session = Depends(get_db)):
    return render(egg_sale_service.delete_egg_sale(db, sale_id), response)
