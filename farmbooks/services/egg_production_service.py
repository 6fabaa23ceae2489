"""Egg production service."""

import logging
from datetime import date
from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from farmbooks.domain.records.enums import Farm
from farmbooks.models.records import EggProduction
from farmbooks.schemas.egg_production import (
    EggProductionCreate,
    EggProductionUpdate,
    EggProductionResponse,
    EggProductionFarmTotal,
    EggProductionSummary,
)
from farmbooks.services.common import ServiceResponse, apply_record_filters, paginate

logger = logging.getLogger(__name__)


def create_egg_production(db: Session, data: EggProductionCreate) -> ServiceResponse:
    try:
        record = EggProduction(**data.model_dump())
        db.add(record)
        db.commit()
        db.refresh(record)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error recording production: {str(e)}")
        return ServiceResponse(500, "Failed to record production")

    logger.info(f"Recorded production {record.id}: {record.chicken_eggs} eggs at {record.farm.value}")
    return ServiceResponse(201, "Egg production recorded", EggProductionResponse.model_validate(record))


def list_egg_productions(
    db: Session,
    page: int = 1,
    limit: int = 50,
    farm: Optional[Farm] = None,
    month: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    search: Optional[str] = None,
) -> ServiceResponse:
    query = apply_record_filters(
        db.query(EggProduction),
        EggProduction,
        EggProduction.production_date,
        farm=farm,
        month=month,
        start_date=start_date,
        end_date=end_date,
    )
    if search:
        query = query.filter(EggProduction.notes.ilike(f"%{search}%"))

    try:
        result = paginate(
            query,
            page,
            limit,
            (EggProduction.production_date.desc(), EggProduction.id.desc()),
            EggProductionResponse,
        )
    except SQLAlchemyError as e:
        logger.error(f"Error listing production records: {str(e)}")
        return ServiceResponse(500, "Failed to fetch production records")

    return ServiceResponse(200, "Production records retrieved", result)


def update_egg_production(
    db: Session, record_id: int, data: EggProductionUpdate
) -> ServiceResponse:
    try:
        record = db.query(EggProduction).filter(EggProduction.id == record_id).first()
        if not record:
            return ServiceResponse(404, "Egg production record not found")

        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(record, field, value)

        db.commit()
        db.refresh(record)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating production record {record_id}: {str(e)}")
        return ServiceResponse(500, "Failed to update egg production record")

    return ServiceResponse(
        200,
        "Egg production record updated successfully",
        EggProductionResponse.model_validate(record),
    )


def delete_egg_production(db: Session, record_id: int) -> ServiceResponse:
    try:
        record = db.query(EggProduction).filter(EggProduction.id == record_id).first()
        if not record:
            return ServiceResponse(404, "Egg production record not found")

        db.delete(record)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting production record {record_id}: {str(e)}")
        return ServiceResponse(500, "Failed to delete egg production record")

    logger.info(f"Deleted production record {record_id}")
    return ServiceResponse(200, "Egg production record deleted successfully")


def get_egg_production_summary(
    db: Session,
    month: Optional[str] = None,
    farm: Optional[Farm] = None,
) -> ServiceResponse:
    """
    Egg totals for a month token and/or farm.

    ``totalEggs`` counts chicken eggs; the per-farm rows carry both counts.
    """
    chicken_eggs = func.sum(EggProduction.chicken_eggs)
    total_eggs = func.sum(EggProduction.total_eggs)

    try:
        by_farm = apply_record_filters(
            db.query(
                EggProduction.farm,
                chicken_eggs.label("chicken_eggs"),
                total_eggs.label("total_eggs"),
            ),
            EggProduction,
            None,
            farm=farm,
            month=month,
        )
        by_farm = by_farm.group_by(EggProduction.farm).order_by(chicken_eggs.desc()).all()

        total = apply_record_filters(
            db.query(chicken_eggs), EggProduction, None, farm=farm, month=month
        ).scalar()
    except SQLAlchemyError as e:
        logger.error(f"Error summarizing production: {str(e)}")
        return ServiceResponse(500, "Failed to generate summary")

    summary = EggProductionSummary(
        total_eggs=int(total or 0),
        by_farm=[
            EggProductionFarmTotal(
                farm=row.farm,
                chicken_eggs=int(row.chicken_eggs or 0),
                total_eggs=int(row.total_eggs or 0),
            )
            for row in by_farm
        ],
    )
    return ServiceResponse(200, "Monthly production summary", summary)
