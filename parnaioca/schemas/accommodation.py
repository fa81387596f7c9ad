from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from parnaioca.schemas.validators import not_null


class AccommodationTypeBase(BaseModel):
    name: str = Field(..., min_length=2)
    description: Optional[str] = None


class AccommodationTypeCreate(AccommodationTypeBase):
    pass


class AccommodationTypeUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def reject_null(cls, v):
        return not_null(v)


class AccommodationType(AccommodationTypeBase):
    id: str
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class AccommodationBase(BaseModel):
    name: str = Field(..., min_length=2)
    number: str = Field(..., min_length=1)
    nightly_rate: Decimal = Field(
        ge=0, description="Nightly rate must be non-negative"
    )
    max_occupancy: int = Field(ge=1, description="At least one guest")
    type_id: str
    has_minibar: bool = False
    has_parking: bool = False


class AccommodationCreate(AccommodationBase):
    pass


class AccommodationUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2)
    number: Optional[str] = Field(None, min_length=1)
    nightly_rate: Optional[Decimal] = Field(
        None, ge=0, description="Nightly rate must be non-negative"
    )
    max_occupancy: Optional[int] = Field(None, ge=1)
    type_id: Optional[str] = None
    has_minibar: Optional[bool] = None
    has_parking: Optional[bool] = None

    @field_validator(
        "name",
        "number",
        "nightly_rate",
        "max_occupancy",
        "type_id",
        "has_minibar",
        "has_parking",
    )
    @classmethod
    def reject_null(cls, v):
        return not_null(v)


class Accommodation(AccommodationBase):
    id: str
    is_active: bool
    created_at: datetime
    updated_at: datetime
    type: Optional[AccommodationType] = None

    class Config:
        from_attributes = True


class AccommodationSummary(BaseModel):
    id: str
    name: str
    number: str
    nightly_rate: Decimal

    class Config:
        from_attributes = True
