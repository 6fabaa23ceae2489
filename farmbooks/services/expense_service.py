"""Expense record service."""

import logging
from datetime import date
from typing import Optional

from sqlalchemy import func, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from farmbooks.domain.records.enums import Farm, ExpenseHead
from farmbooks.models.records import Expense
from farmbooks.schemas.expenses import (
    ExpenseCreate,
    ExpenseUpdate,
    ExpenseResponse,
    ExpenseGroupTotal,
    ExpenseSummary,
)
from farmbooks.services.common import (
    ServiceResponse,
    apply_record_filters,
    paginate,
    to_decimal,
)

logger = logging.getLogger(__name__)


def create_expense(db: Session, data: ExpenseCreate) -> ServiceResponse:
    """Record a new expense."""
    try:
        expense = Expense(**data.model_dump())
        db.add(expense)
        db.commit()
        db.refresh(expense)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating expense: {str(e)}")
        return ServiceResponse(500, "Failed to create expense")

    logger.info(f"Created expense {expense.id} ({expense.head.value}, {expense.expense_cost})")
    return ServiceResponse(201, "Expense created successfully", ExpenseResponse.model_validate(expense))


def list_expenses(
    db: Session,
    page: int = 1,
    limit: int = 50,
    farm: Optional[Farm] = None,
    head: Optional[ExpenseHead] = None,
    month: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    search: Optional[str] = None,
) -> ServiceResponse:
    """
    List expenses newest first.

    Args:
        db: Database session
        page: 1-based page number
        limit: Page size
        farm: Exact farm match
        head: Exact expense head match
        month: Month token ("Dec")
        start_date: Inclusive lower bound on expense_date
        end_date: Inclusive upper bound on expense_date
        search: Substring over notes, challan and transaction id

    Returns:
        ServiceResponse with a Page of ExpenseResponse
    """
    query = apply_record_filters(
        db.query(Expense),
        Expense,
        Expense.expense_date,
        farm=farm,
        month=month,
        start_date=start_date,
        end_date=end_date,
    )
    if head is not None:
        query = query.filter(Expense.head == head)
    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(
                Expense.notes.ilike(pattern),
                Expense.challan.ilike(pattern),
                Expense.trans_id.ilike(pattern),
            )
        )

    try:
        result = paginate(
            query,
            page,
            limit,
            (Expense.expense_date.desc(), Expense.id.desc()),
            ExpenseResponse,
        )
    except SQLAlchemyError as e:
        logger.error(f"Error listing expenses: {str(e)}")
        return ServiceResponse(500, "Failed to fetch expenses")

    return ServiceResponse(200, "Expenses retrieved", result)


def update_expense(db: Session, expense_id: int, data: ExpenseUpdate) -> ServiceResponse:
    """Apply a partial update to an expense."""
    try:
        expense = db.query(Expense).filter(Expense.id == expense_id).first()
        if not expense:
            return ServiceResponse(404, "Expense not found")

        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(expense, field, value)

        db.commit()
        db.refresh(expense)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating expense {expense_id}: {str(e)}")
        return ServiceResponse(500, "Failed to update expense")

    logger.info(f"Updated expense {expense_id}")
    return ServiceResponse(200, "Expense updated", ExpenseResponse.model_validate(expense))


def delete_expense(db: Session, expense_id: int) -> ServiceResponse:
    """Delete an expense."""
    try:
        expense = db.query(Expense).filter(Expense.id == expense_id).first()
        if not expense:
            return ServiceResponse(404, "Expense not found")

        db.delete(expense)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting expense {expense_id}: {str(e)}")
        return ServiceResponse(500, "Failed to delete expense")

    logger.info(f"Deleted expense {expense_id}")
    return ServiceResponse(200, "Expense deleted")


def get_expense_summary(db: Session, year: int, month: int) -> ServiceResponse:
    """
    Summarize one calendar month of expenses by farm and head.

    Args:
        db: Database session
        year: Calendar year
        month: Calendar month, 1-12

    Returns:
        ServiceResponse with ExpenseSummary
    """
    start = date(year, month, 1)
    end = date(year + 1, 1, 1) if month == 12 else date(year, month + 1, 1)
    in_month = (Expense.expense_date >= start, Expense.expense_date < end)

    try:
        groups = (
            db.query(
                Expense.farm,
                Expense.head,
                func.sum(Expense.expense_cost).label("expense_cost"),
            )
            .filter(*in_month)
            .group_by(Expense.farm, Expense.head)
            .order_by(Expense.farm, Expense.head)
            .all()
        )
        total = db.query(func.sum(Expense.expense_cost)).filter(*in_month).scalar()
    except SQLAlchemyError as e:
        logger.error(f"Error summarizing expenses for {year}-{month:02d}: {str(e)}")
        return ServiceResponse(500, "Failed to generate summary")

    summary = ExpenseSummary(
        month=f"{year}-{month:02d}",
        by_group=[
            ExpenseGroupTotal(
                farm=row.farm,
                head=row.head,
                expense_cost=to_decimal(row.expense_cost),
            )
            for row in groups
        ],
        total=to_decimal(total),
    )
    return ServiceResponse(200, "Monthly expense summary", summary)
