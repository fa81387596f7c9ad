from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from parnaioca.schemas.validators import not_null

NATIONAL_ID_PATTERN = r"^\d{3}\.\d{3}\.\d{3}-\d{2}$"


class CustomerBase(BaseModel):
    name: str = Field(..., min_length=2)
    birth_date: date
    national_id: str = Field(
        ..., pattern=NATIONAL_ID_PATTERN, description="Format 000.000.000-00"
    )
    email: EmailStr
    phone: str = Field(..., min_length=1)
    state: str = Field(..., min_length=2, max_length=2)
    city: str = Field(..., min_length=2)

    @field_validator("state")
    @classmethod
    def normalize_state(cls, v: str) -> str:
        return v.upper()


class CustomerCreate(CustomerBase):
    pass


class CustomerUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2)
    birth_date: Optional[date] = None
    national_id: Optional[str] = Field(None, pattern=NATIONAL_ID_PATTERN)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=1)
    state: Optional[str] = Field(None, min_length=2, max_length=2)
    city: Optional[str] = Field(None, min_length=2)

    @field_validator(
        "name", "birth_date", "national_id", "email", "phone", "state", "city"
    )
    @classmethod
    def reject_null(cls, v):
        return not_null(v)

    @field_validator("state")
    @classmethod
    def normalize_state(cls, v: Optional[str]) -> Optional[str]:
        return v.upper() if v else v


class Customer(CustomerBase):
    id: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    # Stored rows are returned as they are
    email: str

    class Config:
        from_attributes = True


class CustomerSummary(BaseModel):
    id: str
    name: str
    national_id: str
    email: str

    class Config:
        from_attributes = True
