from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from farmbooks.api.deps import get_current_user, require_admin
from farmbooks.api.responses import render
from farmbooks.db.dependencies import get_db
from farmbooks.domain.records.enums import Farm
from farmbooks.schemas.common import ApiResponse, Page
from farmbooks.schemas.egg_production import (
    EggProductionCreate,
    EggProductionUpdate,
    EggProductionResponse,
    EggProductionSummary,
)
from farmbooks.services import egg_production_service

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.post(
    "",
    response_model=ApiResponse[EggProductionResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_egg_production(
    data: EggProductionCreate, response: Response, db: Session = Depends(get_db)
):
    """Record a day's egg count for a farm."""
    return render(egg_production_service.create_egg_production(db, data), response)


@router.get("", response_model=ApiResponse[Page[EggProductionResponse]])
def list_egg_productions(
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
    result = egg_production_service.list_egg_productions(
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


@router.get("/summary", response_model=ApiResponse[EggProductionSummary])
def egg_production_summary(
    response: Response,
    month: Optional[str] = Query(None, min_length=3, max_length=3),
    farm: Optional[Farm] = None,
    db: Session = Depends(get_db),
):
    result = egg_production_service.get_egg_production_summary(db, month=month, farm=farm)
    return render(result, response)


@router.put("/{record_id}", response_model=ApiResponse[EggProductionResponse])
def update_egg_production(
    record_id: int,
    data: EggProductionUpdate,
    response: Response,
    db: Session = Depends(get_db),
):
    return render(egg_production_service.update_egg_production(db, record_id, data), response)


@router.delete("/{record_id}", response_model=ApiResponse[None], dependencies=[Depends(require_admin)])
def delete_egg_production(record_id: int, response: Response, db: Session = Depends(get_db)):
    return render(egg_production_service.delete_egg_production(db, record_id), response)
