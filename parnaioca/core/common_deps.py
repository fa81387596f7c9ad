"""
Common dependencies for the inn management API.

Short aliases for endpoint signatures.
"""

from parnaioca.core.auth_deps import RequireAdminRole, RequireSession
from parnaioca.core.service_deps import (
    GetAccommodationService,
    GetAccommodationTypeService,
    GetAdminService,
    GetAnalyticsService,
    GetAuthService,
    GetCustomerService,
    GetDashboardService,
    GetMinibarService,
    GetParkingService,
    GetReportService,
    GetStayService,
)

# Session dependencies
SessionDep = RequireSession
AdminSessionDep = RequireAdminRole

# Service type aliases for cleaner endpoint signatures
AccommodationServiceDep = GetAccommodationService
AccommodationTypeServiceDep = GetAccommodationTypeService
AdminServiceDep = GetAdminService
AnalyticsServiceDep = GetAnalyticsService
AuthServiceDep = GetAuthService
CustomerServiceDep = GetCustomerService
DashboardServiceDep = GetDashboardService
MinibarServiceDep = GetMinibarService
ParkingServiceDep = GetParkingService
ReportServiceDep = GetReportService
StayServiceDep = GetStayService
