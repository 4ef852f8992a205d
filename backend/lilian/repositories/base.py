"""Store contracts the services depend on.

Services only see these protocols, so they can run against the SQLModel
repositories in production or against in-memory stores in tests. A store's
``add`` must enforce the uniqueness rules itself and raise the matching
conflict error (DuplicateEmailError, DuplicateTransactionError).
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Protocol, Sequence

from lilian.models.content import Content
from lilian.models.donation import Donation, DonationType
from lilian.models.member import Member


class MemberStore(Protocol):
    def add(self, member: Member) -> Member: ...

    def save(self, member: Member) -> Member: ...

    def get(self, member_id: int) -> Optional[Member]: ...

    def list_all(self) -> List[Member]: ...

    def delete(self, member_id: int) -> None: ...

    def count(self) -> int: ...

    def find_by_email(self, email: str) -> Optional[Member]: ...

    def exists_by_email(self, email: str) -> bool: ...

    def find_by_subscription_plan(self, plan: str) -> List[Member]: ...

    def find_by_subscription_id(self, subscription_id: str) -> Optional[Member]: ...

    def count_with_subscription(self) -> int: ...


class DonationStore(Protocol):
    def add(self, donation: Donation) -> Donation: ...

    def get(self, donation_id: int) -> Optional[Donation]: ...

    def list_all(self) -> List[Donation]: ...

    def delete(self, donation_id: int) -> None: ...

    def count(self) -> int: ...

    def find_by_transaction_id(self, transaction_id: str) -> Optional[Donation]: ...

    def exists_by_transaction_id(self, transaction_id: str) -> bool: ...

    def find_by_type(self, donation_type: DonationType) -> List[Donation]: ...

    def find_by_email(self, email: str) -> List[Donation]: ...

    def total_amount(self, start: Optional[datetime] = None, end: Optional[datetime] = None) -> Decimal: ...

    def count_by_type(
        self,
        donation_type: DonationType,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> int: ...

    def recent_by_email(self, email: str, limit: int) -> List[Donation]: ...


class ContentStore(Protocol):
    def add(self, content: Content) -> Content: ...

    def save(self, content: Content) -> Content: ...

    def get(self, content_id: int) -> Optional[Content]: ...

    def list_all(self) -> List[Content]: ...

    def delete(self, content_id: int) -> None: ...

    def count(self) -> int: ...

    def find_published(self) -> List[Content]: ...

    def find_by_section(self, section: str) -> List[Content]: ...

    def find_by_section_published(self, section: str) -> List[Content]: ...

    def find_latest_published(self, section: str) -> Optional[Content]: ...

    def find_published_in_sections(self, sections: Sequence[str]) -> List[Content]: ...
