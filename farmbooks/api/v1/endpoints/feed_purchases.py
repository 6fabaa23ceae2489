"""Feed purchase endpoints."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from farmbooks.api.deps import get_current_user, require_admin
from farmbooks.api.responses import render
from farmbooks.db.dependencies import get_db
from farmbooks.domain.records.enums import Farm, VoucherType
from farmbooks.schemas.common import ApiResponse, Page
from farmbooks.schemas.feed_purchases import (
    FeedPurchaseCreate,
    FeedPurchaseUpdate,
    FeedPurchaseResponse,
    FeedPurchaseSummary,
)
from farmbooks.services import feed_purchase_service

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.post(
    "",
    response_model=ApiResponse[FeedPurchaseResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_feed_purchase(
    data: FeedPurchaseCreate, response: Response, db: Session = Depends(get_db)
):
    return render(feed_purchase_service.create_feed_purchase(db, data), response)


@router.get("", response_model=ApiResponse[Page[FeedPurchaseResponse]])
def list_feed_purchases(
    response: Response,
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=200),
    farm: Optional[Farm] = None,
    month: Optional[str] = Query(None, min_length=3, max_length=3),
    voucher_type: Optional[VoucherType] = Query(None, alias="voucherType"),
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    search: Optional[str] = None,
    reconciled: Optional[bool] = None,
    db: Session = Depends(get_db),
):
    """List feed vouchers, newest first."""
    result = feed_purchase_service.list_feed_purchases(
        db,
        page=page,
        limit=limit,
        farm=farm,
        month=month,
        voucher_type=voucher_type,
        start_date=start_date,
        end_date=end_date,
        search=search,
        reconciled=reconciled,
    )
    return render(result, response)


@router.get("/summary", response_model=ApiResponse[FeedPurchaseSummary])
def feed_purchase_summary(
    response: Response,
    month: Optional[str] = Query(None, min_length=3, max_length=3),
    farm: Optional[Farm] = None,
    db: Session = Depends(get_db),
):
    result = feed_purchase_service.get_feed_purchase_summary(db, month=month, farm=farm)
    return render(result, response)


@router.put("/{purchase_id}", response_model=ApiResponse[FeedPurchaseResponse])
def update_feed_purchase(
    purchase_id: int,
    data: FeedPurchaseUpdate,
    response: Response,
    db: Session = Depends(get_db),
):
    return render(feed_purchase_service.update_feed_purchase(db, purchase_id, data), response)


@router.delete("/{purchase_id}", response_model=ApiResponse[None], dependencies=[Depends(require_admin)])
def delete_feed_purchase(purchase_id: int, response: Response, db: Session = Depends(get_db)):
    return render(feed_purchase_service.delete_feed_purchase(db, purchase_id), response)
