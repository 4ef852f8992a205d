"""Member model: a registered supporter of the program."""

from datetime import date, datetime
from typing import Optional

from pydantic import ConfigDict, EmailStr, field_validator
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from lilian.utils.clock import utc_now
from lilian.utils.validation import keep_email_as_given


class Member(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    full_name: str = Field(max_length=255)
    email: str = Field(max_length=255, unique=True, index=True)
    phone: Optional[str] = Field(default=None, max_length=20)
    birth_date: Optional[date] = None
    subscription_plan: Optional[str] = Field(default=None, max_length=50)
    subscription_id: Optional[str] = Field(default=None, max_length=255, index=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)


class MemberCreate(SQLModel):
    """Registration input. Every optional field defaults to None."""

    full_name: str = Field(min_length=1, max_length=255)
    email: EmailStr = Field(max_length=255)
    phone: Optional[str] = Field(default=None, max_length=20)
    birth_date: Optional[date] = None

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v):
        if not v or not v.strip():
            raise ValueError("full_name is required")
        return v.strip()

    @field_validator("email", mode="wrap")
    @classmethod
    def email_as_given(cls, v, handler):
        return keep_email_as_given(v, handler)

    @field_validator("phone", mode="before")
    @classmethod
    def blank_phone_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class MemberRead(SQLModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    full_name: str
    email: str
    phone: Optional[str] = None
    birth_date: Optional[date] = None
    subscription_plan: Optional[str] = None
    subscription_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime


def new_member(data: MemberCreate) -> Member:
    """Build an unsaved Member from validated registration data."""
    now = utc_now()
    return Member(
        full_name=data.full_name,
        email=str(data.email),
        phone=data.phone,
        birth_date=data.birth_date,
        subscription_plan=None,
        subscription_id=None,
        created_at=now,
        updated_at=now,
    )
