"""Feed purchase service with a best-effort running balance."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import func, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from farmbooks.domain.records.enums import Farm, VoucherType
from farmbooks.models.records import FeedPurchase
from farmbooks.schemas.feed_purchases import (
    FeedPurchaseCreate,
    FeedPurchaseUpdate,
    FeedPurchaseResponse,
    FeedPurchaseSummary,
)
from farmbooks.services.common import (
    ServiceResponse,
    apply_record_filters,
    paginate,
    to_decimal,
)

logger = logging.getLogger(__name__)

NEWEST_FIRST = (FeedPurchase.purchase_date.desc(), FeedPurchase.id.desc())


def apply_voucher(
    balance: Decimal,
    debit: Optional[Decimal] = None,
    credit: Optional[Decimal] = None,
) -> Decimal:
    """Debits draw the balance down, credits build it up."""
    balance = to_decimal(balance)
    if debit is not None:
        balance -= debit
    if credit is not None:
        balance += credit
    return balance


def create_feed_purchase(db: Session, data: FeedPurchaseCreate) -> ServiceResponse:
    """
    Record a feed voucher.

    The running balance continues from the newest voucher of the same farm.
    No locking is done; concurrent inserts may compute from the same base.
    """
    try:
        last_record = (
            db.query(FeedPurchase)
            .filter(FeedPurchase.farm == data.farm)
            .order_by(*NEWEST_FIRST)
            .first()
        )
        base = last_record.running_balance if last_record else Decimal("0")

        purchase = FeedPurchase(
            **data.model_dump(),
            running_balance=apply_voucher(base, data.debit, data.credit),
        )
        db.add(purchase)
        db.commit()
        db.refresh(purchase)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error recording feed purchase: {str(e)}")
        return ServiceResponse(500, "Failed to record feed purchase")

    logger.info(
        f"Recorded feed purchase {purchase.id} for {purchase.farm.value}, "
        f"balance={purchase.running_balance}"
    )
    return ServiceResponse(201, "Feed purchase recorded", FeedPurchaseResponse.model_validate(purchase))


def list_feed_purchases(
    db: Session,
    page: int = 1,
    limit: int = 50,
    farm: Optional[Farm] = None,
    month: Optional[str] = None,
    voucher_type: Optional[VoucherType] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    search: Optional[str] = None,
    reconciled: Optional[bool] = None,
) -> ServiceResponse:
    query = apply_record_filters(
        db.query(FeedPurchase),
        FeedPurchase,
        FeedPurchase.purchase_date,
        farm=farm,
        month=month,
        start_date=start_date,
        end_date=end_date,
    )
    if voucher_type is not None:
        query = query.filter(FeedPurchase.voucher_type == voucher_type)
    if reconciled is not None:
        query = query.filter(FeedPurchase.reconciled == reconciled)
    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(
                FeedPurchase.description.ilike(pattern),
                FeedPurchase.feed_type.ilike(pattern),
            )
        )

    try:
        result = paginate(query, page, limit, NEWEST_FIRST, FeedPurchaseResponse)
    except SQLAlchemyError as e:
        logger.error(f"Error listing feed purchases: {str(e)}")
        return ServiceResponse(500, "Failed to fetch feed purchases")

    return ServiceResponse(200, "Feed purchases retrieved", result)


def update_feed_purchase(
    db: Session, purchase_id: int, data: FeedPurchaseUpdate
) -> ServiceResponse:
    """
    Apply a partial update.

    The stored balance is adjusted by whichever of debit/credit the update
    carries; later vouchers are not recomputed.
    """
    try:
        purchase = db.query(FeedPurchase).filter(FeedPurchase.id == purchase_id).first()
        if not purchase:
            return ServiceResponse(404, "Feed purchase not found")

        changes = data.model_dump(exclude_unset=True)
        purchase.running_balance = apply_voucher(
            purchase.running_balance,
            changes.get("debit"),
            changes.get("credit"),
        )
        for field, value in changes.items():
            setattr(purchase, field, value)

        db.commit()
        db.refresh(purchase)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating feed purchase {purchase_id}: {str(e)}")
        return ServiceResponse(500, "Failed to update feed purchase")

    return ServiceResponse(200, "Feed purchase updated", FeedPurchaseResponse.model_validate(purchase))


def delete_feed_purchase(db: Session, purchase_id: int) -> ServiceResponse:
    try:
        purchase = db.query(FeedPurchase).filter(FeedPurchase.id == purchase_id).first()
        if not purchase:
            return ServiceResponse(404, "Feed purchase not found")

        db.delete(purchase)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting feed purchase {purchase_id}: {str(e)}")
        return ServiceResponse(500, "Failed to delete feed purchase")

    logger.info(f"Deleted feed purchase {purchase_id}")
    return ServiceResponse(200, "Feed purchase deleted")


def get_feed_purchase_summary(
    db: Session,
    month: Optional[str] = None,
    farm: Optional[Farm] = None,
) -> ServiceResponse:
    """Debit/credit/bag totals and the balance of the newest matching voucher."""
    try:
        totals = apply_record_filters(
            db.query(
                func.sum(FeedPurchase.debit).label("debit"),
                func.sum(FeedPurchase.credit).label("credit"),
                func.sum(FeedPurchase.bags).label("bags"),
            ),
            FeedPurchase,
            None,
            farm=farm,
            month=month,
        ).one()

        latest = (
            apply_record_filters(
                db.query(FeedPurchase.running_balance), FeedPurchase, None, farm=farm, month=month
            )
            .order_by(*NEWEST_FIRST)
            .first()
        )
    except SQLAlchemyError as e:
        logger.error(f"Error summarizing feed purchases: {str(e)}")
        return ServiceResponse(500, "Failed to generate summary")

    summary = FeedPurchaseSummary(
        total_debit=to_decimal(totals.debit),
        total_credit=to_decimal(totals.credit),
        total_bags=int(totals.bags or 0),
        current_balance=to_decimal(latest.running_balance if latest else None),
    )
    return ServiceResponse(200, "Feed purchase summary", summary)
