"""FastAPI providers wiring services to the request-scoped session."""

from fastapi import Depends
from sqlmodel import Session

from lilian.database import get_session
from lilian.repositories import ContentRepository, DonationRepository, MemberRepository
from lilian.services.content_service import ContentService
from lilian.services.donation_service import DonationService
from lilian.services.image_service import get_image_ingestor
from lilian.services.member_service import MemberService


def get_member_service(session: Session = Depends(get_session)) -> MemberService:
    return MemberService(MemberRepository(session))


def get_donation_service(session: Session = Depends(get_session)) -> DonationService:
    return DonationService(DonationRepository(session))


def get_content_service(session: Session = Depends(get_session)) -> ContentService:
    return ContentService(ContentRepository(session), get_image_ingestor())
