"""Member registration and subscription linking."""

import logging
from datetime import date
from typing import List, Optional

from pydantic import ValidationError

from lilian.models.member import Member, MemberCreate, new_member
from lilian.repositories.base import MemberStore
from lilian.services.errors import DuplicateEmailError, InvalidInputError, NotFoundError
from lilian.utils.clock import utc_now
from lilian.utils.validation import describe_validation_error

logger = logging.getLogger(__name__)


class MemberService:
    def __init__(self, store: MemberStore):
        self.store = store

    def register(
        self,
        full_name: str,
        email: str,
        phone: Optional[str] = None,
        birth_date: Optional[date] = None,
    ) -> Member:
        """
        Register a new member.

        The existence check is only an early exit; the unique constraint on
        ``member.email`` is what actually rejects a concurrent duplicate, and
        the store raises the same DuplicateEmailError for it.

        Raises:
            InvalidInputError: blank name, bad email syntax, or a field over its length limit
            DuplicateEmailError: a member with this email already exists
        """
        try:
            data = MemberCreate.model_validate(
                {"full_name": full_name, "email": email, "phone": phone, "birth_date": birth_date}
            )
        except ValidationError as e:
            raise InvalidInputError(describe_validation_error(e)) from e

        if self.store.exists_by_email(str(data.email)):
            logger.warning(f"Registration rejected, email already registered: {data.email}")
            raise DuplicateEmailError("Email is already registered")

        member = self.store.add(new_member(data))
        logger.info(f"Registered member {member.id}")
        return member

    def attach_subscription(self, member_id: int, subscription_id: str, plan_type: Optional[str] = None) -> None:
        """Link a member to an external recurring payment.

        The plan label is only overwritten when ``plan_type`` is given.
        """
        member = self.store.get(member_id)
        if member is None:
            raise NotFoundError(f"Member not found: {member_id}")

        member.subscription_id = subscription_id
        if plan_type is not None:
            member.subscription_plan = plan_type
        member.updated_at = utc_now()
        self.store.save(member)
        logger.info(f"Attached subscription to member {member_id} (plan={member.subscription_plan})")

    def find_by_email(self, email: str) -> Optional[Member]:
        return self.store.find_by_email(email)

    def find_by_id(self, member_id: int) -> Optional[Member]:
        return self.store.get(member_id)

    def get(self, member_id: int) -> Member:
        member = self.store.get(member_id)
        if member is None:
            raise NotFoundError(f"Member not found: {member_id}")
        return member

    def list_members(self) -> List[Member]:
        return self.store.list_all()

    def recent_members(self) -> List[Member]:
        """All members, newest registration first."""
        return sorted(self.store.list_all(), key=lambda m: (m.created_at, m.id or 0), reverse=True)

    def find_by_subscription_id(self, subscription_id: str) -> Optional[Member]:
        return self.store.find_by_subscription_id(subscription_id)

    def find_by_plan(self, plan: str) -> List[Member]:
        return self.store.find_by_subscription_plan(plan)

    def count_members(self) -> int:
        return self.store.count()

    def count_active_subscriptions(self) -> int:
        return self.store.count_with_subscription()
