from datetime import date

import pytest
from pydantic import ValidationError as FormError
from sqlalchemy import select

from parnaioca.core.exceptions import ConflictError, EntityNotFoundError
from parnaioca.models.change_log import ChangeLog, ChangeOperation
from parnaioca.schemas.customer import CustomerCreate, CustomerUpdate
from parnaioca.services.customer_service import CustomerService


def customer_form(**overrides) -> CustomerCreate:
    data = {
        "name": "Ana Costa",
        "birth_date": date(1992, 1, 30),
        "national_id": "111.222.333-44",
        "email": "ana@email.com",
        "phone": "(24) 97777-0003",
        "state": "rj",
        "city": "Paraty",
    }
    data.update(overrides)
    return CustomerCreate(**data)


@pytest.fixture
def service(db) -> CustomerService:
    return CustomerService(db)


async def test_create_customer_is_active_and_logged(service, db, staff_session):
    customer = await service.create(customer_form(), staff_session)

    assert customer.id
    assert customer.is_active is True
    assert customer.state == "RJ"

    result = await db.execute(select(ChangeLog).where(ChangeLog.row_id == customer.id))
    entry = result.scalar_one()
    assert entry.table_name == "customers"
    assert entry.operation == ChangeOperation.INSERT
    assert entry.actor_id == staff_session.user_id
    assert entry.after["national_id"] == "111.222.333-44"


async def test_create_rejects_duplicate_national_id(service, staff_session):
    with pytest.raises(ConflictError):
        await service.create(
            customer_form(national_id="123.456.789-00"), staff_session
        )


async def test_update_rejects_national_id_of_another_customer(
    service, customers, staff_session
):
    maria = customers["Maria Santos"]
    with pytest.raises(ConflictError):
        await service.update(
            maria.id, CustomerUpdate(national_id="123.456.789-00"), staff_session
        )


async def test_update_may_keep_own_national_id(service, customers, db, staff_session):
    joao = customers["João Silva"]

    updated = await service.update(
        joao.id,
        CustomerUpdate(national_id="123.456.789-00", city="Mangaratiba"),
        staff_session,
    )

    assert updated.city == "Mangaratiba"
    result = await db.execute(
        select(ChangeLog).where(
            ChangeLog.row_id == joao.id, ChangeLog.operation == ChangeOperation.UPDATE
        )
    )
    entry = result.scalar_one()
    assert entry.before["city"] == "Angra dos Reis"
    assert entry.after["city"] == "Mangaratiba"


async def test_update_missing_customer(service, staff_session):
    with pytest.raises(EntityNotFoundError):
        await service.update("missing", CustomerUpdate(city="Paraty"), staff_session)


async def test_toggle_twice_restores_active_flag(service, customers, admin_session):
    maria = customers["Maria Santos"]

    toggled = await service.toggle_status(maria.id, admin_session)
    assert toggled.is_active is False

    restored = await service.toggle_status(maria.id, admin_session)
    assert restored.is_active is True


async def test_list_is_ordered_by_name_and_searchable(service, admin_session):
    await service.create(customer_form(name="Bruno Alves"), admin_session)

    names = [customer.name for customer in await service.get_all()]
    assert names == ["Bruno Alves", "João Silva", "Maria Santos"]

    by_name = await service.get_all(search="mar")
    assert [customer.name for customer in by_name] == ["Maria Santos"]

    by_national_id = await service.get_all(search="987.654")
    assert [customer.name for customer in by_national_id] == ["Maria Santos"]


async def test_list_active_only(service, customers, admin_session):
    await service.toggle_status(customers["João Silva"].id, admin_session)

    active = await service.get_all(active_only=True)

    assert [customer.name for customer in active] == ["Maria Santos"]


def test_update_form_rejects_explicit_null():
    with pytest.raises(FormError) as exc_info:
        CustomerUpdate(name=None, city="Paraty")

    assert [error["loc"] for error in exc_info.value.errors()] == [("name",)]
    assert CustomerUpdate(city="Paraty").model_dump(exclude_unset=True) == {
        "city": "Paraty"
    }
