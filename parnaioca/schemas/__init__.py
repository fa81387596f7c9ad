from .accommodation import (
    Accommodation,
    AccommodationCreate,
    AccommodationType,
    AccommodationTypeCreate,
    AccommodationTypeUpdate,
    AccommodationUpdate,
)
from .customer import Customer, CustomerCreate, CustomerUpdate
from .minibar import (
    MinibarConsumption,
    MinibarConsumptionCreate,
    MinibarItem,
    MinibarItemCreate,
    MinibarItemUpdate,
)
from .occupancy import AccommodationOccupancy, OccupancySummary, ParkingOverview
from .stay import CheckInBoard, Stay, StayCancel, StayCheckIn, StayCheckOut
from .user import LoginRequest, SessionContext, Token, User, UserCreate

__all__ = [
    # Accommodation schemas
    "AccommodationType", "AccommodationTypeCreate", "AccommodationTypeUpdate",
    "Accommodation", "AccommodationCreate", "AccommodationUpdate",
    # Customer schemas
    "Customer", "CustomerCreate", "CustomerUpdate",
    # Minibar schemas
    "MinibarItem", "MinibarItemCreate", "MinibarItemUpdate",
    "MinibarConsumption", "MinibarConsumptionCreate",
    # Occupancy schemas
    "AccommodationOccupancy", "OccupancySummary", "ParkingOverview",
    # Stay schemas
    "Stay", "StayCheckIn", "StayCheckOut", "StayCancel", "CheckInBoard",
    # User schemas
    "User", "UserCreate", "LoginRequest", "Token", "SessionContext",
]
