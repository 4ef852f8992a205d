from typing import List, Optional, Sequence

from sqlmodel import col, select

from lilian.models.content import Content
from lilian.repositories.session_repository import SessionRepository


class ContentRepository(SessionRepository[Content]):
    model = Content

    def find_published(self) -> List[Content]:
        return list(self.session.exec(select(Content).where(Content.published == True)).all())  # noqa: E712

    def find_by_section(self, section: str) -> List[Content]:
        return list(self.session.exec(select(Content).where(Content.section == section)).all())

    def find_by_section_published(self, section: str) -> List[Content]:
        statement = select(Content).where(Content.section == section, Content.published == True)  # noqa: E712
        return list(self.session.exec(statement).all())

    def find_latest_published(self, section: str) -> Optional[Content]:
        statement = (
            select(Content)
            .where(Content.section == section, Content.published == True)  # noqa: E712
            .order_by(col(Content.created_at).desc(), col(Content.id).desc())
            .limit(1)
        )
        return self.session.exec(statement).first()

    def find_published_in_sections(self, sections: Sequence[str]) -> List[Content]:
        statement = select(Content).where(
            col(Content.section).in_(list(sections)),
            Content.published == True,  # noqa: E712
        )
        return list(self.session.exec(statement).all())
