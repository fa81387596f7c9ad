from fastapi import APIRouter

from parnaioca.api.v1.endpoints import (
    accommodation_types,
    accommodations,
    admin,
    analytics,
    auth,
    check_in,
    customers,
    dashboard,
    minibar_items,
    parking,
    reports,
    stays,
)

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])
api_router.include_router(customers.router, prefix="/customers", tags=["customers"])
api_router.include_router(
    accommodation_types.router,
    prefix="/accommodation-types",
    tags=["accommodation-types"],
)
api_router.include_router(
    accommodations.router, prefix="/accommodations", tags=["accommodations"]
)
api_router.include_router(
    minibar_items.router, prefix="/minibar-items", tags=["minibar-items"]
)
api_router.include_router(check_in.router, prefix="/check-in", tags=["check-in"])
api_router.include_router(stays.router, prefix="/stays", tags=["stays"])
api_router.include_router(parking.router, prefix="/parking", tags=["parking"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
api_router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
