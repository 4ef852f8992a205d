"""Shared CRUD plumbing for the SQLModel-backed stores."""

import logging
from typing import Callable, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, SQLModel, func, select

from lilian.services.errors import ServiceError
from lilian.utils.sql import scalar_int

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=SQLModel)


class SessionRepository(Generic[ModelT]):
    """Generic repository over one table, bound to a request-scoped Session.

    Every write commits immediately, so one service call maps onto one
    transaction.
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    def get(self, entity_id: int) -> Optional[ModelT]:
        return self.session.get(self.model, entity_id)

    def list_all(self) -> List[ModelT]:
        return list(self.session.exec(select(self.model)).all())

    def count(self) -> int:
        return scalar_int(self.session.exec(select(func.count()).select_from(self.model)).one())

    def delete(self, entity_id: int) -> None:
        entity = self.session.get(self.model, entity_id)
        if entity is None:
            return
        self.session.delete(entity)
        self.session.commit()

    def save(self, entity: ModelT) -> ModelT:
        self.session.add(entity)
        self._commit()
        self.session.refresh(entity)
        return entity

    def add(self, entity: ModelT) -> ModelT:
        return self.save(entity)

    def _commit(self) -> None:
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            conflict = self._conflict_error(e)
            if conflict is None:
                raise
            logger.warning(f"Unique constraint rejected {self.model.__name__} write: {e.orig}")
            raise conflict from e

    def _conflict_error(self, error: IntegrityError) -> Optional[ServiceError]:
        """Map a unique violation to a typed conflict, or None to re-raise."""
        message = str(error.orig)
        if "unique" not in message.lower() and "duplicate" not in message.lower():
            return None
        for column, factory in self.unique_columns().items():
            if column in message:
                return factory()
        return None

    def unique_columns(self) -> Dict[str, Callable[[], ServiceError]]:
        return {}
