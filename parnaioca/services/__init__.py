from .accommodation_service import AccommodationService, AccommodationTypeService
from .admin_service import AdminService
from .analytics_service import AnalyticsService
from .auth_service import AuthService
from .change_log_service import ChangeLogService
from .customer_service import CustomerService
from .dashboard_service import DashboardService
from .minibar_service import MinibarService
from .parking_service import ParkingService
from .report_service import ReportService
from .stay_service import StayService

__all__ = [
    "AuthService",
    "AccommodationTypeService",
    "AccommodationService",
    "CustomerService",
    "MinibarService",
    "StayService",
    "ParkingService",
    "DashboardService",
    "ReportService",
    "AnalyticsService",
    "AdminService",
    "ChangeLogService",
]
