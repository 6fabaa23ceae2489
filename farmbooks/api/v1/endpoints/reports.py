"""Reporting API endpoints."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from pydantic import ValidationError

from farmbooks.api.deps import get_current_user
from farmbooks.api.responses import bad_request, render
from farmbooks.db.dependencies import get_record_store
from farmbooks.domain.records.enums import Farm
from farmbooks.schemas.common import ApiResponse
from farmbooks.schemas.reporting import IncomeStatement, ReportPeriod
from farmbooks.services.record_store import RecordStore
from farmbooks.services.reporting_service import get_income_statement

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("/income-statement", response_model=ApiResponse[IncomeStatement])
def income_statement(
    response: Response,
    month: Optional[str] = Query(None, description="Month token, e.g. Dec"),
    start_date: Optional[date] = Query(None, alias="startDate", description="Inclusive start date"),
    end_date: Optional[date] = Query(None, alias="endDate", description="Inclusive end date"),
    farm: Optional[Farm] = Query(None, description="Restrict to one farm"),
    store: RecordStore = Depends(get_record_store),
):
    """
    Get the income statement.

    Filter by a month token or by a date range (not both), optionally
    narrowed to one farm. With no filters the report covers all records.
    """
    try:
        period = ReportPeriod(month=month, start_date=start_date, end_date=end_date, farm=farm)
    except ValidationError as e:
        raise bad_request(e)

    return render(get_income_statement(store, period), response)
