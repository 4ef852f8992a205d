"""Site content: public queries, admin CRUD and image uploads."""

import logging
from typing import List, Optional

from pydantic import ValidationError

from lilian.models.content import Content, ContentBase, ContentCreate, new_content
from lilian.repositories.base import ContentStore
from lilian.services.errors import InvalidInputError, NotFoundError
from lilian.services.image_service import OUTPUT_MIME_TYPE, ImageIngestor
from lilian.utils.clock import utc_now
from lilian.utils.validation import describe_validation_error

logger = logging.getLogger(__name__)

UPCOMING_SECTIONS = ("events", "talks", "social-posts")
UPCOMING_LIMIT = 8

# Fields replaced wholesale by update(); image fields are handled separately
OVERWRITTEN_FIELDS = (
    "section",
    "title",
    "content",
    "subtitle",
    "button_text1",
    "button_url1",
    "button_text2",
    "button_url2",
    "date",
    "link",
    "published",
)


def _require_section(content: ContentBase) -> None:
    if content.section is None or not str(content.section).strip():
        raise InvalidInputError("section is required")


class ContentService:
    def __init__(self, store: ContentStore, ingestor: Optional[ImageIngestor] = None):
        self.store = store
        self.ingestor = ingestor or ImageIngestor()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_published(self) -> List[Content]:
        return self.store.find_published()

    def get_all(self) -> List[Content]:
        """Admin view: every row regardless of published flag."""
        return self.store.list_all()

    def get_by_section(self, section: str) -> List[Content]:
        return self.store.find_by_section_published(section)

    def get_single_by_section(self, section: str) -> Optional[Content]:
        """Most recent published row of a section (hero, about, ...), or None."""
        return self.store.find_latest_published(section)

    def get_by_id(self, content_id: int) -> Optional[Content]:
        return self.store.get(content_id)

    def get_upcoming(self) -> List[Content]:
        """
        Newest published events, talks and social posts, at most 8.

        The store returns the sections in no particular order, so sorting
        and truncation happen here.
        """
        rows = self.store.find_published_in_sections(UPCOMING_SECTIONS)
        rows = sorted(rows, key=lambda c: (c.created_at, c.id or 0), reverse=True)
        return rows[:UPCOMING_LIMIT]

    # ------------------------------------------------------------------
    # Admin writes
    # ------------------------------------------------------------------

    def create(self, content: ContentBase) -> Content:
        """Persist new content. Any incoming id is ignored; published defaults to True."""
        _require_section(content)
        image_data = getattr(content, "image_data", None)
        image_type = getattr(content, "image_type", None)
        created = self.store.add(new_content(content, image_data, image_type))
        logger.info(f"Created content {created.id} in section '{created.section}'")
        return created

    def create_with_image(
        self,
        section: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
        subtitle: Optional[str] = None,
        button_text1: Optional[str] = None,
        button_url1: Optional[str] = None,
        published: Optional[bool] = None,
        image_file: Optional[bytes] = None,
    ) -> Content:
        """
        Create content with an optional inline image upload.

        The image is ingested before anything is written, so a rejected
        image leaves no row behind.

        Raises:
            InvalidInputError: section missing or a field too long
            ImageTooLargeError / UnprocessableImageError: from image ingestion
        """
        try:
            fields = ContentCreate.model_validate(
                {
                    "section": section,
                    "title": title,
                    "content": content,
                    "subtitle": subtitle,
                    "button_text1": button_text1,
                    "button_url1": button_url1,
                    "published": published,
                }
            )
        except ValidationError as e:
            raise InvalidInputError(describe_validation_error(e)) from e

        image_data = None
        image_type = None
        if image_file:
            image_data = self.ingestor.ingest(image_file)
            image_type = OUTPUT_MIME_TYPE

        created = self.store.add(new_content(fields, image_data, image_type))
        logger.info(f"Created content {created.id} in section '{created.section}' (image={image_data is not None})")
        return created

    def update(self, content_id: int, content: ContentBase) -> Content:
        """
        Full-field overwrite of an existing row.

        Fields missing from ``content`` become None. The stored image is kept
        unless ``content`` carries new image bytes.

        Raises:
            NotFoundError: no row with this id
        """
        existing = self.store.get(content_id)
        if existing is None:
            raise NotFoundError("Content not found")
        _require_section(content)

        for field in OVERWRITTEN_FIELDS:
            setattr(existing, field, getattr(content, field, None))

        image_data = getattr(content, "image_data", None)
        if image_data is not None:
            existing.image_data = image_data
            existing.image_type = getattr(content, "image_type", None)

        existing.updated_at = utc_now()
        updated = self.store.save(existing)
        logger.info(f"Updated content {content_id}")
        return updated

    def delete(self, content_id: int) -> None:
        """Delete by id. Unknown ids are ignored."""
        self.store.delete(content_id)
        logger.info(f"Deleted content {content_id}")

    def process_image(self, raw: bytes) -> bytes:
        """Run an upload through ingestion without storing it."""
        return self.ingestor.ingest(raw)
