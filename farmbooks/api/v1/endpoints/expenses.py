"""Expense endpoints."""

import re
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from farmbooks.api.deps import get_current_user, require_admin
from farmbooks.api.responses import render
from farmbooks.db.dependencies import get_db
from farmbooks.domain.records.enums import Farm, ExpenseHead
from farmbooks.schemas.common import ApiResponse, Page
from farmbooks.schemas.expenses import (
    ExpenseCreate,
    ExpenseUpdate,
    ExpenseResponse,
    ExpenseSummary,
)
from farmbooks.services import expense_service

router = APIRouter(dependencies=[Depends(get_current_user)])

YEAR_MONTH = re.compile(r"^(\d{4})-(0[1-9]|1[0-2])$")


@router.post("", response_model=ApiResponse[ExpenseResponse], status_code=status.HTTP_201_CREATED)
def create_expense(data: ExpenseCreate, response: Response, db: Session = Depends(get_db)):
    return render(expense_service.create_expense(db, data), response)


@router.get("", response_model=ApiResponse[Page[ExpenseResponse]])
def list_expenses(
    response: Response,
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=200),
    farm: Optional[Farm] = None,
    head: Optional[ExpenseHead] = None,
    month: Optional[str] = Query(None, min_length=3, max_length=3),
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    search: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """List expenses, newest first."""
    result = expense_service.list_expenses(
        db,
        page=page,
        limit=limit,
        farm=farm,
        head=head,
        month=month,
        start_date=start_date,
        end_date=end_date,
        search=search,
    )
    return render(result, response)


@router.get("/summary", response_model=ApiResponse[ExpenseSummary])
def expense_summary(
    response: Response,
    month: str = Query(..., description="Calendar month as YYYY-MM"),
    db: Session = Depends(get_db),
):
    """Per farm and head totals for one calendar month."""
    match = YEAR_MONTH.match(month)
    if not match:
        raise HTTPException(status_code=400, detail="month must be in YYYY-MM format")

    year, month_number = int(match.group(1)), int(match.group(2))
    return render(expense_service.get_expense_summary(db, year, month_number), response)


@router.put("/{expense_id}", response_model=ApiResponse[ExpenseResponse])
def update_expense(
    expense_id: int,
    data: ExpenseUpdate,
    response: Response,
    db: Session = Depends(get_db),
):
    return render(expense_service.update_expense(db, expense_id, data), response)


@router.delete(
    "/{expense_id}",
    response_model=ApiResponse[None],
    dependencies=[Depends(require_admin)],
)
def delete_expense(expense_id: int, response: Response, db: Session = Depends(get_db)):
    return render(expense_service.delete_expense(db, expense_id), response)
