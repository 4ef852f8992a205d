from lilian.models.content import Content, ContentCreate, ContentRead
from lilian.models.donation import Donation, DonationCreate, DonationRead, DonationType
from lilian.models.member import Member, MemberCreate, MemberRead

__all__ = [
    "Member",
    "MemberCreate",
    "MemberRead",
    "Donation",
    "DonationCreate",
    "DonationRead",
    "DonationType",
    "Content",
    "ContentCreate",
    "ContentRead",
]
