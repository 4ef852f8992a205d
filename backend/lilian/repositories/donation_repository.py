from datetime import datetime
from decimal import Decimal
from typing import Callable, Dict, List, Optional

from sqlmodel import col, func, select

from lilian.models.donation import Donation, DonationType
from lilian.repositories.session_repository import SessionRepository
from lilian.services.errors import DuplicateTransactionError, ServiceError
from lilian.utils.sql import scalar_decimal, scalar_int


def _within(statement, start: Optional[datetime], end: Optional[datetime]):
    """Apply inclusive created_at bounds; a missing bound is open-ended."""
    if start is not None:
        statement = statement.where(Donation.created_at >= start)
    if end is not None:
        statement = statement.where(Donation.created_at <= end)
    return statement


class DonationRepository(SessionRepository[Donation]):
    model = Donation

    def unique_columns(self) -> Dict[str, Callable[[], ServiceError]]:
        return {"transaction_id": lambda: DuplicateTransactionError("Transaction ID already exists")}

    def find_by_transaction_id(self, transaction_id: str) -> Optional[Donation]:
        return self.session.exec(select(Donation).where(Donation.transaction_id == transaction_id)).first()

    def exists_by_transaction_id(self, transaction_id: str) -> bool:
        return self.find_by_transaction_id(transaction_id) is not None

    def find_by_type(self, donation_type: DonationType) -> List[Donation]:
        return list(self.session.exec(select(Donation).where(Donation.type == donation_type.value)).all())

    def find_by_email(self, email: str) -> List[Donation]:
        return list(self.session.exec(select(Donation).where(Donation.email == email)).all())

    def total_amount(self, start: Optional[datetime] = None, end: Optional[datetime] = None) -> Decimal:
        statement = _within(select(func.coalesce(func.sum(Donation.amount), 0)), start, end)
        return scalar_decimal(self.session.exec(statement).one())

    def count_by_type(
        self,
        donation_type: DonationType,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> int:
        statement = select(func.count()).select_from(Donation).where(Donation.type == donation_type.value)
        return scalar_int(self.session.exec(_within(statement, start, end)).one())

    def recent_by_email(self, email: str, limit: int) -> List[Donation]:
        statement = (
            select(Donation)
            .where(Donation.email == email)
            .order_by(col(Donation.created_at).desc(), col(Donation.id).desc())
            .limit(limit)
        )
        return list(self.session.exec(statement).all())
