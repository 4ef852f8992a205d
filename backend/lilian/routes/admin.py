from decimal import Decimal
from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from lilian.dependencies import get_donation_service, get_member_service
from lilian.models.member import MemberRead
from lilian.services.donation_service import DonationService
from lilian.services.member_service import MemberService

router = APIRouter()


class AdminStatsResponse(BaseModel):
    total_members: int
    active_subscriptions: int
    total_donations: int
    total_donation_amount: Decimal


@router.get("/admin/members", response_model=List[MemberRead])
def list_members(service: MemberService = Depends(get_member_service)):
    """List all registered members"""
    return service.list_members()


@router.get("/admin/members/recent", response_model=List[MemberRead])
def list_recent_members(service: MemberService = Depends(get_member_service)):
    """Members ordered by registration date, newest first"""
    return service.recent_members()


@router.get("/admin/stats", response_model=AdminStatsResponse)
def admin_stats(
    members: MemberService = Depends(get_member_service),
    donations: DonationService = Depends(get_donation_service),
):
    """Overview numbers for the admin dashboard (all time)"""
    return AdminStatsResponse(
        total_members=members.count_members(),
        active_subscriptions=members.count_active_subscriptions(),
        total_donations=donations.count_donations(),
        total_donation_amount=donations.total_amount(),
    )
