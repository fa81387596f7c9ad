from decimal import Decimal

import pytest

from parnaioca.core.exceptions import (
    BusinessRuleViolationError,
    ConflictError,
    ValidationError,
)
from parnaioca.schemas.accommodation import (
    AccommodationCreate,
    AccommodationTypeCreate,
    AccommodationTypeUpdate,
    AccommodationUpdate,
)
from parnaioca.schemas.stay import StayCheckOut
from parnaioca.services.accommodation_service import (
    AccommodationService,
    AccommodationTypeService,
)
from parnaioca.services.stay_service import StayService


def accommodation_form(type_id: str, **overrides) -> AccommodationCreate:
    data = {
        "name": "Chalé Aventureiro",
        "number": "201",
        "nightly_rate": Decimal("250.00"),
        "max_occupancy": 4,
        "type_id": type_id,
        "has_minibar": False,
        "has_parking": True,
    }
    data.update(overrides)
    return AccommodationCreate(**data)


@pytest.fixture
def service(db) -> AccommodationService:
    return AccommodationService(db)


@pytest.fixture
def type_service(db) -> AccommodationTypeService:
    return AccommodationTypeService(db)


async def test_create_accommodation_loads_type(service, suite_type, staff_session):
    accommodation = await service.create(
        accommodation_form(suite_type.id), staff_session
    )

    assert accommodation.is_active is True
    assert accommodation.type.name == "Suíte"
    assert accommodation.nightly_rate == Decimal("250.00")


async def test_create_rejects_unknown_type(service, staff_session):
    with pytest.raises(ValidationError):
        await service.create(accommodation_form("missing-type"), staff_session)


async def test_create_rejects_duplicate_number(service, suite_type, staff_session):
    with pytest.raises(ConflictError):
        await service.create(
            accommodation_form(suite_type.id, number="101"), staff_session
        )


async def test_update_switches_type(
    service, type_service, accommodations, staff_session
):
    chalet = await type_service.create(
        AccommodationTypeCreate(name="Chalé"), staff_session
    )

    updated = await service.update(
        accommodations["103"].id, AccommodationUpdate(type_id=chalet.id), staff_session
    )

    assert updated.type_id == chalet.id
    assert updated.type.name == "Chalé"


async def test_update_rejects_number_of_another_unit(
    service, accommodations, staff_session
):
    with pytest.raises(ConflictError):
        await service.update(
            accommodations["103"].id, AccommodationUpdate(number="101"), staff_session
        )


async def test_filters(service, accommodations, admin_session):
    with_parking = await service.get_all(has_parking=True)
    assert [a.number for a in with_parking] == ["101", "102"]

    without_parking = await service.get_all(has_parking=False)
    assert [a.number for a in without_parking] == ["103"]

    await service.toggle_status(accommodations["101"].id, admin_session)
    active = await service.get_all(active_only=True)
    assert [a.number for a in active] == ["102", "103"]

    assert [a.number for a in await service.get_all(search="lagoa")] == ["103"]


async def test_toggle_twice_restores_active_flag(
    service, accommodations, admin_session
):
    accommodation_id = accommodations["103"].id

    toggled = await service.toggle_status(accommodation_id, admin_session)
    assert toggled.is_active is False
    restored = await service.toggle_status(accommodation_id, admin_session)
    assert restored.is_active is True


async def test_occupied_accommodation_cannot_be_deactivated(
    service, db, accommodations, checked_in_stay, admin_session
):
    accommodation_id = accommodations["102"].id

    with pytest.raises(BusinessRuleViolationError) as exc_info:
        await service.toggle_status(accommodation_id, admin_session)

    assert exc_info.value.rule_name == "accommodation_occupied"
    assert (await service.get_by_id(accommodation_id)).is_active is True

    await StayService(db).check_out(checked_in_stay.id, StayCheckOut(), admin_session)
    toggled = await service.toggle_status(accommodation_id, admin_session)
    assert toggled.is_active is False


async def test_type_search_and_update(type_service, suite_type, staff_session):
    found = await type_service.get_all(search="famílias")
    assert [t.name for t in found] == ["Apartamento"]

    updated = await type_service.update(
        suite_type.id,
        AccommodationTypeUpdate(description="Vista para o mar"),
        staff_session,
    )
    assert updated.name == "Suíte"
    assert updated.description == "Vista para o mar"
