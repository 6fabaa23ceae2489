"""Shared service helpers."""

import math
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Generic, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.orm import Query

from farmbooks.schemas.common import Page, Pagination

T = TypeVar("T")


@dataclass
class ServiceResponse(Generic[T]):
    """Outcome of a service call, rendered verbatim by the routes."""
    status_code: int
    message: str
    data: Optional[T] = None


def to_decimal(value: Any) -> Decimal:
    """Coerce an aggregate result (possibly None or float) to Decimal."""
    return Decimal(str(value or 0))


def apply_record_filters(
    query: Query,
    model: Any,
    date_column: Any,
    farm: Any = None,
    month: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> Query:
    """
    Apply the common farm / month token / inclusive date range filters.

    Args:
        query: Query to narrow
        model: Mapped class carrying ``farm`` and ``month`` columns
        date_column: The model's own date column, or None to skip range filters
    """
    if farm is not None:
        query = query.filter(model.farm == farm)
    if month is not None:
        query = query.filter(model.month == month)
    if date_column is not None:
        if start_date is not None:
            query = query.filter(date_column >= start_date)
        if end_date is not None:
            query = query.filter(date_column <= end_date)
    return query


def paginate(
    query: Query,
    page: int,
    limit: int,
    order_by: tuple,
    schema: Type[BaseModel],
) -> Page:
    """
    Run a list query one page at a time.

    Args:
        query: Filtered query
        page: 1-based page number
        limit: Page size
        order_by: Ordering clauses
        schema: Response schema each row is validated into

    Returns:
        Page of validated items with pagination totals
    """
    total = query.count()
    rows = (
        query.order_by(*order_by)
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return Page[schema](
        items=[schema.model_validate(row) for row in rows],
        pagination=Pagination(
            page=page,
            limit=limit,
            total=total,
            pages=math.ceil(total / limit),
        ),
    )
