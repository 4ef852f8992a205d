from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from lilian.dependencies import get_member_service
from lilian.models.member import MemberCreate, MemberRead
from lilian.services.errors import DuplicateEmailError, InvalidInputError, NotFoundError
from lilian.services.member_service import MemberService

router = APIRouter()


@router.post("/members", response_model=MemberRead, status_code=201)
def register_member(member_data: MemberCreate, service: MemberService = Depends(get_member_service)):
    """Register a new member"""
    try:
        return service.register(
            full_name=member_data.full_name,
            email=str(member_data.email),
            phone=member_data.phone,
            birth_date=member_data.birth_date,
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DuplicateEmailError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/members/{member_id}", response_model=MemberRead)
def get_member(member_id: int, service: MemberService = Depends(get_member_service)):
    """Get a member by ID"""
    try:
        return service.get(member_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Member not found")


@router.put("/members/{member_id}/subscription")
def update_subscription(
    member_id: int,
    subscription_id: str = Query(..., min_length=1, max_length=255),
    plan_type: Optional[str] = Query(None, max_length=50),
    service: MemberService = Depends(get_member_service),
):
    """Attach the payment provider's subscription to a member"""
    try:
        service.attach_subscription(member_id, subscription_id, plan_type)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": "Subscription updated successfully"}
