"""Egg sale (revenue) service."""

import logging
from datetime import date
from typing import Optional

from sqlalchemy import func, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from farmbooks.domain.records.enums import Farm
from farmbooks.models.records import EggSale
from farmbooks.schemas.egg_sales import (
    EggSaleCreate,
    EggSaleUpdate,
    EggSaleResponse,
    EggSaleFarmTotal,
    EggSaleSummary,
)
from farmbooks.services.common import (
    ServiceResponse,
    apply_record_filters,
    paginate,
    to_decimal,
)

logger = logging.getLogger(__name__)


def create_egg_sale(db: Session, data: EggSaleCreate) -> ServiceResponse:
    """Record an egg sale."""
    try:
        sale = EggSale(**data.model_dump())
        db.add(sale)
        db.commit()
        db.refresh(sale)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating egg sale: {str(e)}")
        return ServiceResponse(500, "Failed to create egg sale")

    logger.info(f"Recorded egg sale {sale.id} for {sale.farm.value}: {sale.amount_received}")
    return ServiceResponse(201, "Egg sale recorded successfully", EggSaleResponse.model_validate(sale))


def list_egg_sales(
    db: Session,
    page: int = 1,
    limit: int = 50,
    farm: Optional[Farm] = None,
    month: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    search: Optional[str] = None,
) -> ServiceResponse:
    """List egg sales newest first; search matches description or challan number."""
    query = apply_record_filters(
        db.query(EggSale),
        EggSale,
        EggSale.sale_date,
        farm=farm,
        month=month,
        start_date=start_date,
        end_date=end_date,
    )
    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(
                EggSale.description.ilike(pattern),
                EggSale.challan_number.ilike(pattern),
            )
        )

    try:
        result = paginate(
            query,
            page,
            limit,
            (EggSale.sale_date.desc(), EggSale.id.desc()),
            EggSaleResponse,
        )
    except SQLAlchemyError as e:
        logger.error(f"Error listing egg sales: {str(e)}")
        return ServiceResponse(500, "Failed to fetch egg sales")

    return ServiceResponse(200, "Egg sales retrieved", result)


def update_egg_sale(db: Session, sale_id: int, data: EggSaleUpdate) -> ServiceResponse:
    try:
        sale = db.query(EggSale).filter(EggSale.id == sale_id).first()
        if not sale:
            return ServiceResponse(404, "Egg sale record not found")

        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(sale, field, value)

        db.commit()
        db.refresh(sale)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating egg sale {sale_id}: {str(e)}")
        return ServiceResponse(500, "Failed to update egg sale")

    return ServiceResponse(200, "Egg sale updated successfully", EggSaleResponse.model_validate(sale))


def delete_egg_sale(db: Session, sale_id: int) -> ServiceResponse:
    try:
        sale = db.query(EggSale).filter(EggSale.id == sale_id).first()
        if not sale:
            return ServiceResponse(404, "Egg sale record not found")

        db.delete(sale)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting egg sale {sale_id}: {str(e)}")
        return ServiceResponse(500, "Failed to delete egg sale")

    logger.info(f"Deleted egg sale {sale_id}")
    return ServiceResponse(200, "Egg sale deleted successfully")


def get_egg_sale_summary(
    db: Session,
    month: Optional[str] = None,
    farm: Optional[Farm] = None,
) -> ServiceResponse:
    """Total revenue plus per-farm totals, largest first."""
    amount = func.sum(EggSale.amount_received)

    try:
        by_farm = apply_record_filters(
            db.query(EggSale.farm, amount.label("amount_received")),
            EggSale,
            None,
            farm=farm,
            month=month,
        )
        by_farm = by_farm.group_by(EggSale.farm).order_by(amount.desc()).all()

        total = apply_record_filters(
            db.query(amount), EggSale, None, farm=farm, month=month
        ).scalar()
    except SQLAlchemyError as e:
        logger.error(f"Error summarizing egg sales: {str(e)}")
        return ServiceResponse(500, "Failed to generate summary")

    summary = EggSaleSummary(
        total_revenue=to_decimal(total),
        by_farm=[
            EggSaleFarmTotal(farm=row.farm, amount_received=to_decimal(row.amount_received))
            for row in by_farm
        ],
    )
    return ServiceResponse(200, "Egg sale summary generated", summary)
