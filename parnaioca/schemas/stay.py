from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from parnaioca.models.stay import StayStatus
from parnaioca.schemas.accommodation import AccommodationSummary
from parnaioca.schemas.customer import CustomerSummary


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an offset-aware timestamp to naive UTC, as stored."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class StayCheckIn(BaseModel):
    """Schema for the check-in form"""

    customer_id: str
    accommodation_id: str
    check_in_at: Optional[datetime] = None
    notes: Optional[str] = None

    @field_validator("check_in_at")
    @classmethod
    def check_in_to_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(v)


class StayCheckOut(BaseModel):
    """Schema for the check-out action"""

    check_out_at: Optional[datetime] = None
    notes: Optional[str] = None

    @field_validator("check_out_at")
    @classmethod
    def check_out_to_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(v)


class StayCancel(BaseModel):
    reason: Optional[str] = None


class Stay(BaseModel):
    id: str
    customer_id: str
    accommodation_id: str
    check_in_at: datetime
    check_out_at: Optional[datetime] = None
    nightly_rate: Decimal
    status: StayStatus
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class StayWithDetails(Stay):
    """Stay with the customer and accommodation it references"""

    customer: CustomerSummary
    accommodation: AccommodationSummary


class ActiveStay(BaseModel):
    """Row of the active guests list"""

    id: str
    customer_name: str
    accommodation_name: str
    accommodation_number: str
    check_in_at: datetime
    check_out_at: Optional[datetime] = None
    nightly_rate: Decimal


class CheckInBoard(BaseModel):
    active_stays: List[ActiveStay] = Field(default_factory=list)
    available_accommodations: List[AccommodationSummary] = Field(
        default_factory=list
    )
    customers: List[CustomerSummary] = Field(default_factory=list)
    generated_at: datetime
