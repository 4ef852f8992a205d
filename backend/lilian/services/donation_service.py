"""One-time donations and payment webhook checks."""

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, List, Optional

from pydantic import ValidationError

from lilian.models.donation import Donation, DonationCreate, DonationType, new_donation
from lilian.repositories.base import DonationStore
from lilian.services.errors import DuplicateTransactionError, InvalidInputError
from lilian.utils.validation import describe_validation_error

logger = logging.getLogger(__name__)

APPROVED_STATUS = "approved"


@dataclass
class DonationStats:
    total_amount: Decimal
    one_time_count: int
    subscription_count: int
    start: Optional[datetime] = None
    end: Optional[datetime] = None

    @property
    def total_count(self) -> int:
        return self.one_time_count + self.subscription_count


def _to_decimal(amount: Any) -> Optional[Decimal]:
    if amount is None or isinstance(amount, bool):
        return None
    if isinstance(amount, Decimal):
        return amount
    try:
        # str() first so floats like 0.1 keep their printed value
        return Decimal(str(amount).strip())
    except (InvalidOperation, ValueError):
        return None


class DonationService:
    def __init__(self, store: DonationStore):
        self.store = store

    def record_one_time(
        self,
        donor_name: Optional[str],
        email: Optional[str],
        amount: Any,
        transaction_id: Optional[str],
    ) -> Donation:
        """
        Persist a one-time donation reported by the payment provider.

        Raises:
            InvalidInputError: amount missing/non-positive, transaction id
                missing/blank, or another field malformed
            DuplicateTransactionError: the transaction id was already recorded
        """
        value = _to_decimal(amount)
        if value is None or not value.is_finite() or value <= 0:
            raise InvalidInputError("Amount must be positive")
        if transaction_id is None or not str(transaction_id).strip():
            raise InvalidInputError("Transaction ID is required")

        try:
            data = DonationCreate.model_validate(
                {
                    "donor_name": donor_name,
                    "email": email,
                    "amount": value,
                    "transaction_id": transaction_id,
                }
            )
        except ValidationError as e:
            raise InvalidInputError(describe_validation_error(e)) from e

        # Early exit only; the unique constraint on transaction_id is authoritative
        if self.store.exists_by_transaction_id(data.transaction_id):
            logger.warning(f"Duplicate donation submission for transaction {data.transaction_id}")
            raise DuplicateTransactionError("Transaction ID already exists")

        donation = self.store.add(new_donation(data, DonationType.ONE_TIME))
        logger.info(f"Recorded one-time donation {donation.id} ({donation.amount}) for transaction {donation.transaction_id}")
        return donation

    def validate_payment(self, transaction_id: Optional[str], status: Optional[str]) -> bool:
        """
        Check a payment webhook notification.

        Only trusts the status string: True means "proceed", not a verified
        or fraud-free payment. Nothing is persisted.
        """
        valid = status == APPROVED_STATUS and transaction_id is not None
        if valid:
            logger.info(f"Payment webhook approved for transaction {transaction_id}")
        else:
            logger.warning(f"Payment webhook rejected: transaction={transaction_id!r} status={status!r}")
        return valid

    def find_by_transaction_id(self, transaction_id: str) -> Optional[Donation]:
        return self.store.find_by_transaction_id(transaction_id)

    def recent_for_email(self, email: str, limit: int = 10) -> List[Donation]:
        return self.store.recent_by_email(email, limit)

    def count_donations(self) -> int:
        return self.store.count()

    def total_amount(self, start: Optional[datetime] = None, end: Optional[datetime] = None) -> Decimal:
        return self.store.total_amount(start, end)

    def stats(self, start: Optional[datetime] = None, end: Optional[datetime] = None) -> DonationStats:
        """Totals for an optional created_at window (missing bounds mean all time)."""
        return DonationStats(
            total_amount=self.store.total_amount(start, end),
            one_time_count=self.store.count_by_type(DonationType.ONE_TIME, start, end),
            subscription_count=self.store.count_by_type(DonationType.SUBSCRIPTION, start, end),
            start=start,
            end=end,
        )

