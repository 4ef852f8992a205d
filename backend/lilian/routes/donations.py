from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from lilian.dependencies import get_donation_service
from lilian.models.donation import DonationRead
from lilian.services.donation_service import DonationService
from lilian.services.errors import DuplicateTransactionError, InvalidInputError
from lilian.utils.clock import to_naive_utc

router = APIRouter()


class DonationRequest(BaseModel):
    """Loose request shape; the service owns the business validation."""

    donor_name: Optional[str] = None
    email: Optional[str] = None
    amount: Optional[Decimal] = None
    transaction_id: Optional[str] = None


class DonationStatsResponse(BaseModel):
    total_amount: Decimal
    total_count: int
    one_time_count: int
    subscription_count: int
    start: Optional[datetime] = None
    end: Optional[datetime] = None


@router.post("/donations", response_model=DonationRead, status_code=201)
def create_donation(donation_data: DonationRequest, service: DonationService = Depends(get_donation_service)):
    """Record a one-time donation from the donate form"""
    try:
        return service.record_one_time(
            donation_data.donor_name,
            donation_data.email,
            donation_data.amount,
            donation_data.transaction_id,
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DuplicateTransactionError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/donations/webhook/{transaction_id}")
def payment_webhook(
    transaction_id: str,
    status: str = Query(...),
    service: DonationService = Depends(get_donation_service),
):
    """Payment provider callback. Only the status string is checked."""
    if not service.validate_payment(transaction_id, status):
        raise HTTPException(status_code=400, detail="Invalid payment data")
    return {"message": "Payment validated successfully", "transaction_id": transaction_id}


@router.get("/donations/stats", response_model=DonationStatsResponse)
def donation_stats(
    start: Optional[datetime] = Query(None),
    end: Optional[datetime] = Query(None),
    service: DonationService = Depends(get_donation_service),
):
    """Donation totals for an optional date range"""
    if start and end and end < start:
        raise HTTPException(status_code=400, detail="end must be >= start")
    stats = service.stats(to_naive_utc(start), to_naive_utc(end))
    return DonationStatsResponse(
        total_amount=stats.total_amount,
        total_count=stats.total_count,
        one_time_count=stats.one_time_count,
        subscription_count=stats.subscription_count,
        start=stats.start,
        end=stats.end,
    )


@router.get("/donations/history", response_model=List[DonationRead])
def donation_history(
    email: str = Query(..., min_length=1),
    limit: int = Query(10, ge=1, le=100),
    service: DonationService = Depends(get_donation_service),
):
    """Most recent donations for an email, newest first"""
    return service.recent_for_email(email, limit)
