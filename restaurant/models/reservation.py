"""
Reservation data models.
"""

import re
from typing import Optional, Dict, Any
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

from restaurant.models.order import utc_now

ISO_DATE_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}")


def date_portion(value: str) -> str:
    """
    Return the calendar date part of an ISO date or datetime string.

    Both ``T`` and space separated datetimes start with ``YYYY-MM-DD``.
    """
    return value[:10]


class ReservationDraft(BaseModel):
    """Caller-supplied fields for a new or replaced reservation."""

    model_config = ConfigDict(populate_by_name=True)

    customer_name: str = Field(..., alias="customerName", min_length=1, description="Guest name")
    phone: str = Field(..., min_length=1, description="Contact phone number")
    party_size: int = Field(..., alias="partySize", gt=0, description="Number of guests")
    date: str = Field(..., description="ISO-8601 date or datetime of the booking")
    notes: str = Field("", description="Special requests")

    @field_validator("customer_name", "phone")
    @classmethod
    def strip_required_text(cls, v: str) -> str:
        """Names and phone numbers may not be blank."""
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("date")
    @classmethod
    def date_must_be_iso(cls, v: str) -> str:
        """Keep the caller's ISO string, but reject anything unparseable."""
        if not ISO_DATE_PREFIX.match(v):
            raise ValueError("date must start with YYYY-MM-DD")
        candidate = v[:-1] + "+00:00" if v.endswith("Z") else v
        try:
            datetime.fromisoformat(candidate)
        except ValueError:
            raise ValueError(f"'{v}' is not an ISO-8601 date or datetime")
        return v


class Reservation(ReservationDraft):
    """A persisted reservation."""

    id: int = Field(..., description="Sequential reservation number")
    created_at: datetime = Field(default_factory=utc_now, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    @property
    def day(self) -> str:
        return date_portion(self.date)

    def to_summary(self) -> str:
        summary = f"Reservation #{self.id}\n"
        summary += f"Name: {self.customer_name}\n"
        summary += f"Date & Time: {self.date}\n"
        summary += f"Party Size: {self.party_size}\n"
        summary += f"Phone: {self.phone}\n"
        summary += f"Notes: {self.notes or 'None'}\n"
        return summary

    def to_dict(self) -> Dict[str, Any]:
        """Convert reservation to the dictionary stored on disk."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
