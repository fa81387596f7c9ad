from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from parnaioca.schemas.validators import not_null


class MinibarItemBase(BaseModel):
    name: str = Field(..., min_length=2)
    unit_price: Decimal = Field(ge=0, description="Price must be non-negative")


class MinibarItemCreate(MinibarItemBase):
    pass


class MinibarItemUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2)
    unit_price: Optional[Decimal] = Field(None, ge=0)

    @field_validator("name", "unit_price")
    @classmethod
    def reject_null(cls, v):
        return not_null(v)


class MinibarItem(MinibarItemBase):
    id: str
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class MinibarConsumptionCreate(BaseModel):
    item_id: str
    quantity: int = Field(1, ge=1, description="Quantity must be at least 1")


class MinibarConsumption(BaseModel):
    id: str
    stay_id: str
    item_id: str
    item_name: Optional[str] = None
    quantity: int
    unit_price: Decimal
    total: Decimal
    created_at: datetime

    class Config:
        from_attributes = True
