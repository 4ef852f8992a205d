"""Donation model: a record of funds received from the payment provider."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import ConfigDict, EmailStr, field_validator
from sqlalchemy import DateTime, String
from sqlmodel import Column, Field, SQLModel

from lilian.utils.clock import utc_now
from lilian.utils.validation import keep_email_as_given


class DonationType(str, Enum):
    ONE_TIME = "ONE_TIME"
    SUBSCRIPTION = "SUBSCRIPTION"


class Donation(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    donor_name: Optional[str] = Field(default=None, max_length=255)
    email: Optional[str] = Field(default=None, max_length=255, index=True)
    amount: Decimal = Field(max_digits=10, decimal_places=2)
    transaction_id: str = Field(max_length=255, unique=True, index=True)
    type: DonationType = Field(sa_column=Column(String(20), nullable=False))
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)


class DonationCreate(SQLModel):
    """One-time donation input.

    ``amount`` allows at most 8 integer digits and 2 fraction digits.
    """

    donor_name: Optional[str] = Field(default=None, max_length=255)
    email: Optional[EmailStr] = Field(default=None, max_length=255)
    amount: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    transaction_id: str = Field(min_length=1, max_length=255)

    @field_validator("donor_name", "email", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("email", mode="wrap")
    @classmethod
    def email_as_given(cls, v, handler):
        return keep_email_as_given(v, handler)

    @field_validator("transaction_id")
    @classmethod
    def validate_transaction_id(cls, v):
        # Stored verbatim; it is the provider's reference
        if not v.strip():
            raise ValueError("transaction_id is required")
        return v


class DonationRead(SQLModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    donor_name: Optional[str] = None
    email: Optional[str] = None
    amount: Decimal
    transaction_id: str
    type: DonationType
    created_at: datetime
    updated_at: datetime


def new_donation(data: DonationCreate, donation_type: DonationType = DonationType.ONE_TIME) -> Donation:
    """Build an unsaved Donation; created_at and updated_at share one instant."""
    now = utc_now()
    return Donation(
        donor_name=data.donor_name,
        email=str(data.email) if data.email is not None else None,
        amount=data.amount,
        transaction_id=data.transaction_id,
        type=donation_type,
        created_at=now,
        updated_at=now,
    )
