"""Salary sheet endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from farmbooks.api.deps import get_current_user, require_admin
from farmbooks.api.responses import render
from farmbooks.db.dependencies import get_db
from farmbooks.domain.records.enums import Farm
from farmbooks.schemas.common import ApiResponse, Page
from farmbooks.schemas.salaries import (
    SalaryCreate,
    SalaryUpdate,
    SalaryResponse,
    SalarySummary,
)
from farmbooks.services import salary_service

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.post("", response_model=ApiResponse[SalaryResponse], status_code=status.HTTP_201_CREATED)
def create_salary(data: SalaryCreate, response: Response, db: Session = Depends(get_db)):
    return render(salary_service.create_salary(db, data), response)


@router.get("", response_model=ApiResponse[Page[SalaryResponse]])
def list_salaries(
    response: Response,
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=200),
    month: Optional[str] = Query(None, max_length=20),
    farm: Optional[Farm] = None,
    search: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """List salary rows, latest month first."""
    result = salary_service.list_salaries(
        db, page=page, limit=limit, month=month, farm=farm, search=search
    )
    return render(result, response)


@router.get("/summary", response_model=ApiResponse[SalarySummary])
def salary_summary(
    response: Response,
    month: Optional[str] = Query(None, max_length=20),
    farm: Optional[Farm] = None,
    db: Session = Depends(get_db),
):
    return render(salary_service.get_salary_summary(db, month=month, farm=farm), response)


@router.put("/{salary_id}", response_model=ApiResponse[SalaryResponse])
def update_salary(
    salary_id: int,
    data: SalaryUpdate,
    response: Response,
    db: Session = Depends(get_db),
):
    return render(salary_service.update_salary(db, salary_id, data), response)


@router.delete("/{salary_id}", response_model=ApiResponse[None], dependencies=[Depends(require_admin)])
def delete_salary(salary_id: int, response: Response, db: Session = Depends(get_db)):
    return render(salary_service.delete_salary(db, salary_id), response)
