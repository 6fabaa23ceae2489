"""Salary sheet service."""

import logging
from typing import Optional

from sqlalchemy import func, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from farmbooks.domain.records.enums import Farm
from farmbooks.models.records import Salary
from farmbooks.schemas.salaries import (
    SalaryCreate,
    SalaryUpdate,
    SalaryResponse,
    SalaryFarmTotal,
    SalarySummary,
)
from farmbooks.services.common import (
    ServiceResponse,
    apply_record_filters,
    paginate,
    to_decimal,
)

logger = logging.getLogger(__name__)


def create_salary(db: Session, data: SalaryCreate) -> ServiceResponse:
    try:
        salary = Salary(**data.model_dump())
        db.add(salary)
        db.commit()
        db.refresh(salary)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating salary record: {str(e)}")
        return ServiceResponse(500, "Failed to create salary record")

    logger.info(f"Created salary record {salary.id} for {salary.employee_name} ({salary.month})")
    return ServiceResponse(201, "Salary record created successfully", SalaryResponse.model_validate(salary))


def list_salaries(
    db: Session,
    page: int = 1,
    limit: int = 50,
    month: Optional[str] = None,
    farm: Optional[Farm] = None,
    search: Optional[str] = None,
) -> ServiceResponse:
    """List salary rows by month (desc) then employee name."""
    query = apply_record_filters(db.query(Salary), Salary, None, farm=farm, month=month)
    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(
                Salary.employee_name.ilike(pattern),
                Salary.designation.ilike(pattern),
                Salary.remarks.ilike(pattern),
            )
        )

    try:
        result = paginate(
            query,
            page,
            limit,
            (Salary.month.desc(), Salary.employee_name.asc()),
            SalaryResponse,
        )
    except SQLAlchemyError as e:
        logger.error(f"Error listing salary records: {str(e)}")
        return ServiceResponse(500, "Failed to fetch salary records")

    return ServiceResponse(200, "Salary records retrieved", result)


def update_salary(db: Session, salary_id: int, data: SalaryUpdate) -> ServiceResponse:
    try:
        salary = db.query(Salary).filter(Salary.id == salary_id).first()
        if not salary:
            return ServiceResponse(404, "Salary record not found")

        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(salary, field, value)

        db.commit()
        db.refresh(salary)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating salary record {salary_id}: {str(e)}")
        return ServiceResponse(500, "Failed to update salary record")

    return ServiceResponse(200, "Salary record updated successfully", SalaryResponse.model_validate(salary))


def delete_salary(db: Session, salary_id: int) -> ServiceResponse:
    try:
        salary = db.query(Salary).filter(Salary.id == salary_id).first()
        if not salary:
            return ServiceResponse(404, "Salary record not found")

        db.delete(salary)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting salary record {salary_id}: {str(e)}")
        return ServiceResponse(500, "Failed to delete salary record")

    logger.info(f"Deleted salary record {salary_id}")
    return ServiceResponse(200, "Salary record deleted successfully")


def get_salary_summary(
    db: Session,
    month: Optional[str] = None,
    farm: Optional[Farm] = None,
) -> ServiceResponse:
    """Paid, advance and salary totals overall and per farm."""
    sums = (
        func.sum(Salary.total).label("total"),
        func.sum(Salary.advance).label("advance"),
        func.sum(Salary.salary_amount).label("salary_amount"),
    )

    try:
        by_farm = (
            apply_record_filters(db.query(Salary.farm, *sums), Salary, None, farm=farm, month=month)
            .group_by(Salary.farm)
            .order_by(Salary.farm)
            .all()
        )
        totals = apply_record_filters(db.query(*sums), Salary, None, farm=farm, month=month).one()
    except SQLAlchemyError as e:
        logger.error(f"Error summarizing salaries: {str(e)}")
        return ServiceResponse(500, "Failed to generate summary")

    summary = SalarySummary(
        total_paid=to_decimal(totals.total),
        total_advance=to_decimal(totals.advance),
        total_salary_amount=to_decimal(totals.salary_amount),
        by_farm=[
            SalaryFarmTotal(
                farm=row.farm,
                total=to_decimal(row.total),
                advance=to_decimal(row.advance),
                salary_amount=to_decimal(row.salary_amount),
            )
            for row in by_farm
        ],
    )
    return ServiceResponse(200, "Salary summary generated", summary)
