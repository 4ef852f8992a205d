"""Content model: an editable block of site content (hero, events, talks, ...)."""

from datetime import datetime
from typing import Optional

from pydantic import Base64Bytes, ConfigDict, computed_field
from sqlalchemy import DateTime, LargeBinary, Text
from sqlmodel import Field, SQLModel

from lilian.utils.clock import utc_now


class ContentBase(SQLModel):
    section: str = Field(min_length=1)  # hero|about|events|talks|social-posts|...
    subtype: Optional[str] = None  # e.g. event kind
    title: Optional[str] = Field(default=None, max_length=1000)
    content: Optional[str] = Field(default=None, sa_type=Text)
    subtitle: Optional[str] = Field(default=None, sa_type=Text)
    button_text1: Optional[str] = None
    button_url1: Optional[str] = None
    button_text2: Optional[str] = None
    button_url2: Optional[str] = None
    date: Optional[str] = None  # free text, for events and talks
    link: Optional[str] = None
    published: Optional[bool] = None


class Content(ContentBase, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    section: str = Field(index=True)
    image_data: Optional[bytes] = Field(default=None, sa_type=LargeBinary)
    image_type: Optional[str] = None  # MIME type of image_data
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)


class ContentCreate(ContentBase):
    """Admin create/update input.

    Fields left out are None; on update that clears them. ``image_data``
    (base64 in JSON) replaces the stored image only when present.
    """

    image_data: Optional[Base64Bytes] = None
    image_type: Optional[str] = None


class ContentRead(ContentBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    image_type: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    image_data: Optional[bytes] = Field(default=None, exclude=True)

    @computed_field
    @property
    def has_image(self) -> bool:
        return bool(self.image_data)


def new_content(
    data: ContentBase,
    image_data: Optional[bytes] = None,
    image_type: Optional[str] = None,
) -> Content:
    """Build an unsaved Content row from input fields.

    ``published`` defaults to True when unset; the id is always left unset.
    """
    fields = data.model_dump(include=set(ContentBase.model_fields))
    now = utc_now()
    content = Content(**fields)
    content.id = None
    if content.published is None:
        content.published = True
    content.image_data = image_data
    content.image_type = image_type if image_data is not None else None
    content.created_at = now
    content.updated_at = now
    return content
