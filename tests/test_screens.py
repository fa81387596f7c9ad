from datetime import date, datetime
from decimal import Decimal

import pytest
from sqlalchemy import select

from parnaioca.core.exceptions import FeatureNotAvailableError, ValidationError
from parnaioca.models.base import utcnow
from parnaioca.models.change_log import ChangeLog, ChangeOperation
from parnaioca.models.stay import Stay, StayStatus
from parnaioca.schemas.minibar import MinibarConsumptionCreate
from parnaioca.schemas.stay import StayCancel, StayCheckIn
from parnaioca.services.admin_service import AdminService
from parnaioca.services.analytics_service import (
    AnalyticsService,
    recent_months,
    shift_month,
)
from parnaioca.services.dashboard_service import DashboardService
from parnaioca.services.parking_service import ParkingService
from parnaioca.services.report_service import ReportService
from parnaioca.services.stay_service import StayService


class TestParking:
    async def test_overview_of_seeded_data(self, db):
        overview = await ParkingService(db).get_overview()

        spots = {spot.accommodation_number: spot for spot in overview.spots}
        assert set(spots) == {"101", "102"}
        assert spots["101"].occupied is False
        assert spots["102"].occupied is True
        assert spots["102"].occupant_name == "João Silva"
        assert overview.summary.total == 2
        assert overview.summary.occupied == 1
        assert overview.summary.free == 1
        assert overview.summary.occupancy_percentage == 50

    async def test_check_in_fills_a_spot(
        self, db, customers, accommodations, staff_session
    ):
        await StayService(db).check_in(
            StayCheckIn(
                customer_id=customers["Maria Santos"].id,
                accommodation_id=accommodations["101"].id,
            ),
            staff_session,
        )

        overview = await ParkingService(db).get_overview()

        assert overview.summary.occupied == 2
        assert overview.summary.occupancy_percentage == 100


class TestDashboard:
    async def test_stats_of_seeded_data(self, db):
        stats = await DashboardService(db).get_stats()

        assert stats.total_customers == 2
        assert stats.total_accommodations == 3
        assert stats.current_occupancy == 1
        assert stats.occupancy.occupancy_percentage == 33
        assert stats.monthly_revenue == Decimal("400.00")
        names = [s.accommodation_name for s in stats.active_stays]
        assert names == ["Suíte Parnaioca"]

    async def test_cancelled_stays_earn_nothing(
        self, db, checked_in_stay, staff_session
    ):
        await StayService(db).cancel(checked_in_stay.id, StayCancel(), staff_session)

        stats = await DashboardService(db).get_stats()

        assert stats.monthly_revenue == Decimal("0.00")
        assert stats.current_occupancy == 0
        assert stats.active_stays == []

    async def test_occupancy_count_follows_active_accommodations(
        self, db, accommodations, checked_in_stay
    ):
        # A stay left on a unit that was deactivated directly in the store
        accommodations["102"].is_active = False
        await db.commit()

        stats = await DashboardService(db).get_stats()

        assert stats.total_accommodations == 2
        assert stats.occupancy.occupied == 0
        assert stats.current_occupancy == stats.occupancy.occupied
        assert stats.occupancy.occupancy_percentage == 0


class TestReports:
    async def test_default_period_is_current_month(self, db):
        report = await ReportService(db).get_summary()

        today = utcnow().date()
        assert report.start_date == today.replace(day=1)
        assert report.end_date == today
        assert report.customers_in_period == 2
        assert report.active_customers == 2
        assert report.inactive_customers == 0
        assert report.stays_in_period == 1
        assert report.revenue_in_period == Decimal("400.00")
        assert report.occupancy_rate == 33

    async def test_period_without_activity(self, db):
        report = await ReportService(db).get_summary(
            date(2020, 1, 1), date(2020, 1, 31)
        )

        assert report.customers_in_period == 0
        assert report.stays_in_period == 0
        assert report.revenue_in_period == Decimal("0.00")

    async def test_end_before_start_is_rejected(self, db):
        with pytest.raises(ValidationError):
            await ReportService(db).get_summary(date(2026, 5, 10), date(2026, 5, 1))

    async def test_pdf_is_not_available_yet(self, db):
        with pytest.raises(FeatureNotAvailableError) as exc_info:
            await ReportService(db).generate_pdf()
        assert "will be available soon" in exc_info.value.message


class TestAnalytics:
    async def test_overview_of_seeded_data(self, db):
        overview = await AnalyticsService(db).get_overview()

        assert overview.top_minibar_item is None
        assert overview.most_profitable_accommodation.name == "Suíte Parnaioca"
        assert overview.most_profitable_accommodation.revenue == Decimal("400.00")
        assert [(r.name, r.revenue) for r in overview.revenue_by_type] == [
            ("Suíte", Decimal("400.00"))
        ]
        assert [(s.state, s.count) for s in overview.customers_by_state] == [
            ("RJ", 1),
            ("SP", 1),
        ]
        assert len(overview.monthly_occupancy) == 6
        assert overview.monthly_occupancy[-1].month == utcnow().strftime("%Y-%m")
        assert overview.monthly_occupancy[-1].occupancy_percentage == 33
        assert all(m.occupancy_percentage == 0 for m in overview.monthly_occupancy[:-1])

    async def test_top_minibar_item_by_quantity(
        self, db, checked_in_stay, minibar_items, staff_session
    ):
        stays = StayService(db)
        await stays.add_minibar_consumption(
            checked_in_stay.id,
            MinibarConsumptionCreate(item_id=minibar_items["Chocolate Nestlé"].id),
            staff_session,
        )
        await stays.add_minibar_consumption(
            checked_in_stay.id,
            MinibarConsumptionCreate(
                item_id=minibar_items["Água Mineral 500ml"].id, quantity=4
            ),
            staff_session,
        )

        top = await AnalyticsService(db).get_top_minibar_item()

        assert top.name == "Água Mineral 500ml"
        assert top.quantity == 4

    async def test_monthly_occupancy_counts_overlapping_stays(
        self, db, customers, accommodations
    ):
        db.add(
            Stay(
                customer_id=customers["Maria Santos"].id,
                accommodation_id=accommodations["101"].id,
                check_in_at=datetime(2026, 3, 30, 12, 0),
                check_out_at=datetime(2026, 4, 2, 10, 0),
                nightly_rate=Decimal("350.00"),
                status=StayStatus.CHECKED_OUT,
            )
        )
        await db.commit()

        months = await AnalyticsService(db).get_monthly_occupancy(date(2026, 5, 15))

        by_month = {m.month: m.occupancy_percentage for m in months}
        assert list(by_month) == [
            "2025-12", "2026-01", "2026-02", "2026-03", "2026-04", "2026-05",
        ]
        assert by_month["2026-03"] == 33
        assert by_month["2026-04"] == 33
        assert by_month["2026-02"] == 0


def test_month_helpers():
    assert shift_month(date(2026, 1, 1), -1) == date(2025, 12, 1)
    assert shift_month(date(2026, 12, 1), 1) == date(2027, 1, 1)
    assert recent_months(date(2026, 2, 20), 3) == [
        date(2025, 12, 1),
        date(2026, 1, 1),
        date(2026, 2, 1),
    ]


class TestAdmin:
    async def test_overview(self, db):
        overview = await AdminService(db).get_overview()

        assert overview.total_users == 2
        assert overview.total_logs == 3
        assert overview.system_status == "online"
        assert overview.recent_logs[0].table_name == "stays"
        assert overview.recent_logs[0].actor_email == "admin@parnaioca.com"
        created = [log.created_at for log in overview.recent_logs]
        assert created == sorted(created, reverse=True)

    async def test_purge_removes_every_log(self, db, admin_session):
        deleted = await AdminService(db).purge_change_logs(admin_session)

        assert deleted == 3
        result = await db.execute(select(ChangeLog))
        assert result.scalars().all() == []

    async def test_recent_logs_are_limited(self, db, customers, admin_session):
        service = AdminService(db)
        for _ in range(12):
            service.change_log.record(
                admin_session,
                "customers",
                ChangeOperation.UPDATE,
                customers["João Silva"].id,
            )
        await db.commit()

        overview = await service.get_overview()

        assert overview.total_logs == 15
        assert len(overview.recent_logs) == 10

    async def test_backup_is_not_available_yet(self, db):
        with pytest.raises(FeatureNotAvailableError):
            await AdminService(db).backup()
