from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from parnaioca.schemas.occupancy import OccupancySummary
from parnaioca.schemas.stay import ActiveStay


class DashboardStats(BaseModel):
    total_customers: int = Field(..., description="Active customers", examples=[25])
    total_accommodations: int = Field(
        ..., description="Active accommodations", examples=[8]
    )
    current_occupancy: int = Field(
        ..., description="Stays currently checked in", examples=[3]
    )
    occupancy: OccupancySummary
    monthly_revenue: Decimal = Field(
        ...,
        description="Sum of nightly rates of stays created this month",
        examples=[15600.00],
    )
    active_stays: List[ActiveStay]
    generated_at: datetime


class ReportSummary(BaseModel):
    start_date: date
    end_date: date
    customers_in_period: int = Field(
        ..., description="Customers registered in the period"
    )
    active_customers: int
    inactive_customers: int
    stays_in_period: int
    revenue_in_period: Decimal
    occupancy_rate: int = Field(..., ge=0, le=100, description="Current occupancy %")


class NamedQuantity(BaseModel):
    name: str
    quantity: int


class NamedRevenue(BaseModel):
    name: str
    revenue: Decimal


class StateCount(BaseModel):
    state: str
    count: int


class MonthlyOccupancy(BaseModel):
    month: str = Field(..., description="YYYY-MM", examples=["2026-06"])
    occupancy_percentage: int = Field(..., ge=0, le=100)


class AnalyticsOverview(BaseModel):
    top_minibar_item: Optional[NamedQuantity] = None
    most_profitable_accommodation: Optional[NamedRevenue] = None
    revenue_by_type: List[NamedRevenue]
    customers_by_state: List[StateCount]
    monthly_occupancy: List[MonthlyOccupancy]
