from parnaioca.models.accommodation import Accommodation, AccommodationType
from parnaioca.models.base import Base
from parnaioca.models.change_log import ChangeLog, ChangeOperation
from parnaioca.models.customer import Customer
from parnaioca.models.minibar import MinibarConsumption, MinibarItem
from parnaioca.models.stay import Stay, StayStatus
from parnaioca.models.user import User, UserRole

__all__ = [
    "Base",
    "Accommodation",
    "AccommodationType",
    "ChangeLog",
    "ChangeOperation",
    "Customer",
    "MinibarConsumption",
    "MinibarItem",
    "Stay",
    "StayStatus",
    "User",
    "UserRole",
]
