from typing import List, Optional

from pydantic import BaseModel, Field


class AccommodationOccupancy(BaseModel):
    """Occupancy state of one accommodation at the time of the query."""

    accommodation_id: str
    accommodation_name: str
    accommodation_number: str
    occupied: bool
    occupant_name: Optional[str] = None
    stay_id: Optional[str] = None


class OccupancySummary(BaseModel):
    total: int = Field(..., ge=0, examples=[3])
    occupied: int = Field(..., ge=0, examples=[1])
    free: int = Field(..., ge=0, examples=[2])
    occupancy_percentage: int = Field(..., ge=0, le=100, examples=[33])


class ParkingOverview(BaseModel):
    """Parking spots, one per active accommodation with parking."""

    spots: List[AccommodationOccupancy]
    summary: OccupancySummary
