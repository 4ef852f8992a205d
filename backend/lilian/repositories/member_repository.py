from typing import Callable, Dict, List, Optional

from sqlmodel import func, select

from lilian.models.member import Member
from lilian.repositories.session_repository import SessionRepository
from lilian.services.errors import DuplicateEmailError, ServiceError
from lilian.utils.sql import scalar_int


class MemberRepository(SessionRepository[Member]):
    model = Member

    def unique_columns(self) -> Dict[str, Callable[[], ServiceError]]:
        return {"email": lambda: DuplicateEmailError("Email is already registered")}

    def find_by_email(self, email: str) -> Optional[Member]:
        return self.session.exec(select(Member).where(Member.email == email)).first()

    def exists_by_email(self, email: str) -> bool:
        return self.find_by_email(email) is not None

    def find_by_subscription_plan(self, plan: str) -> List[Member]:
        return list(self.session.exec(select(Member).where(Member.subscription_plan == plan)).all())

    def find_by_subscription_id(self, subscription_id: str) -> Optional[Member]:
        return self.session.exec(select(Member).where(Member.subscription_id == subscription_id)).first()

    def count_with_subscription(self) -> int:
        return scalar_int(
            self.session.exec(
                select(func.count()).select_from(Member).where(Member.subscription_id.is_not(None))
            ).one()
        )
