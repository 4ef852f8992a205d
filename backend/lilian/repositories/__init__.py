from lilian.repositories.base import ContentStore, DonationStore, MemberStore
from lilian.repositories.content_repository import ContentRepository
from lilian.repositories.donation_repository import DonationRepository
from lilian.repositories.member_repository import MemberRepository

__all__ = [
    "MemberStore",
    "DonationStore",
    "ContentStore",
    "MemberRepository",
    "DonationRepository",
    "ContentRepository",
]
