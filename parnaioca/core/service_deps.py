"""
Service dependency injection utilities.

Every service is built around the request-scoped session from ``get_db``, so
endpoints declare the service they need instead of creating it themselves.
"""

from typing import Annotated, Callable, Type, TypeVar

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from parnaioca.core.database import get_db
from parnaioca.services.accommodation_service import (
    AccommodationService,
    AccommodationTypeService,
)
from parnaioca.services.admin_service import AdminService
from parnaioca.services.analytics_service import AnalyticsService
from parnaioca.services.auth_service import AuthService
from parnaioca.services.customer_service import CustomerService
from parnaioca.services.dashboard_service import DashboardService
from parnaioca.services.minibar_service import MinibarService
from parnaioca.services.parking_service import ParkingService
from parnaioca.services.report_service import ReportService
from parnaioca.services.stay_service import StayService

T = TypeVar("T")


def get_service(service_class: Type[T]) -> Callable[[AsyncSession], T]:
    """
    Generic service dependency factory.

    Args:
        service_class: The service class to instantiate

    Returns:
        A dependency function that creates service instances
    """

    def dependency(db: AsyncSession = Depends(get_db)) -> T:
        return service_class(db)

    return dependency


GetAccommodationService = Annotated[
    AccommodationService, Depends(get_service(AccommodationService))
]
GetAccommodationTypeService = Annotated[
    AccommodationTypeService, Depends(get_service(AccommodationTypeService))
]
GetAdminService = Annotated[AdminService, Depends(get_service(AdminService))]
GetAnalyticsService = Annotated[
    AnalyticsService, Depends(get_service(AnalyticsService))
]
GetAuthService = Annotated[AuthService, Depends(get_service(AuthService))]
GetCustomerService = Annotated[CustomerService, Depends(get_service(CustomerService))]
GetDashboardService = Annotated[
    DashboardService, Depends(get_service(DashboardService))
]
GetMinibarService = Annotated[MinibarService, Depends(get_service(MinibarService))]
GetParkingService = Annotated[ParkingService, Depends(get_service(ParkingService))]
GetReportService = Annotated[ReportService, Depends(get_service(ReportService))]
GetStayService = Annotated[StayService, Depends(get_service(StayService))]
