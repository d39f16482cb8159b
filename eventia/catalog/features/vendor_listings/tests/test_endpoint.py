"""Tests for the vendor listing management endpoints."""

from decimal import Decimal

import pytest

from eventia.auth.dtos import Role
from eventia.catalog.features.browse.router import get_catalog_read_model
from eventia.catalog.features.vendor_listings.router import (
    VENDOR_PACKAGE_URL,
    VENDOR_PACKAGES_URL,
    VENDOR_SERVICE_URL,
    VENDOR_SERVICES_URL,
    get_catalog_write_model,
    to_changes,
)
from eventia.catalog.repository.read_models import SqlCatalogReadModel
from eventia.catalog.repository.write_models import SqlCatalogWriteModel
from eventia.catalog.schemas import ServiceUpdateRequest
from eventia.conftest import auth_headers, create_package, create_service, create_user


@pytest.fixture
def overrides(db_session):
    return {
        get_catalog_read_model: lambda: SqlCatalogReadModel(session_overwrite=db_session),
        get_catalog_write_model: lambda: SqlCatalogWriteModel(session_overwrite=db_session),
    }


@pytest.fixture
async def vendor(db_session):
    return await create_user(db_session, "vendor@example.com", Role.VENDOR)


@pytest.fixture
def headers(vendor):
    return auth_headers(Role.VENDOR, vendor.uuid)


SERVICE_BODY = {
    "title": "Garden Photography",
    "description": "Full-day coverage",
    "event_type": "Wedding",
    "service_category": "Photography",
    "price_min": 100.5,
    "price_max": 500,
    "city": "Colombo",
}


async def test_create_service(client_factory, overrides, vendor, headers):
    async with client_factory(overrides) as client:
        response = await client.post(VENDOR_SERVICES_URL, json=SERVICE_BODY, headers=headers)

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "Service created successfully"
    assert data["service"]["vendor_id"] == str(vendor.uuid)
    assert data["service"]["price_min"] == 100.5


@pytest.mark.parametrize("role", [Role.USER, Role.ADMIN])
async def test_create_service_requires_vendor(client_factory, overrides, role):
    async with client_factory(overrides) as client:
        response = await client.post(VENDOR_SERVICES_URL, json=SERVICE_BODY, headers=auth_headers(role))

    assert response.status_code == 403
    assert response.json()["code"] == "forbidden"


async def test_create_service_without_token(client_factory, overrides):
    async with client_factory(overrides) as client:
        response = await client.post(VENDOR_SERVICES_URL, json=SERVICE_BODY)

    assert response.status_code == 401


async def test_create_service_with_inverted_price_range(client_factory, overrides, headers):
    body = {**SERVICE_BODY, "price_min": 900}

    async with client_factory(overrides) as client:
        response = await client.post(VENDOR_SERVICES_URL, json=body, headers=headers)

    assert response.status_code == 400
    assert response.json()["field"] == "price_max"


@pytest.mark.parametrize("price", ["Infinity", "NaN"])
async def test_create_service_rejects_non_finite_price(client_factory, overrides, headers, price):
    async with client_factory(overrides) as client:
        response = await client.post(VENDOR_SERVICES_URL, json={**SERVICE_BODY, "price_min": price}, headers=headers)

    assert response.status_code == 422


async def test_create_service_with_price_too_large_to_store(client_factory, overrides, headers):
    body = {**SERVICE_BODY, "price_min": 1e15, "price_max": 1e15}

    async with client_factory(overrides) as client:
        response = await client.post(VENDOR_SERVICES_URL, json=body, headers=headers)

    assert response.status_code == 400
    assert response.json()["field"] == "price_min"


async def test_list_own_services_includes_inactive(client_factory, db_session, overrides, vendor, headers):
    other = await create_user(db_session, "other@example.com", Role.VENDOR)
    await create_service(db_session, vendor, "Mine", is_active=False)
    await create_service(db_session, other, "Theirs")

    async with client_factory(overrides) as client:
        response = await client.get(VENDOR_SERVICES_URL, headers=headers)

    assert response.status_code == 200
    assert [s["title"] for s in response.json()["services"]] == ["Mine"]


async def test_update_service(client_factory, db_session, overrides, vendor, headers):
    service = await create_service(db_session, vendor)

    async with client_factory(overrides) as client:
        response = await client.put(
            VENDOR_SERVICE_URL.format(service_id=service.uuid),
            json={"price_max": 650.25, "city": "Kandy"},
            headers=headers,
        )

    assert response.status_code == 200
    assert response.json()["service"]["price_max"] == 650.25
    assert response.json()["service"]["city"] == "Kandy"


async def test_update_service_of_other_vendor(client_factory, db_session, overrides, headers):
    other = await create_user(db_session, "other@example.com", Role.VENDOR)
    service = await create_service(db_session, other)

    async with client_factory(overrides) as client:
        response = await client.put(
            VENDOR_SERVICE_URL.format(service_id=service.uuid), json={"title": "Stolen"}, headers=headers
        )

    assert response.status_code == 403


async def test_delete_service(client_factory, db_session, overrides, vendor, headers):
    service = await create_service(db_session, vendor)

    async with client_factory(overrides) as client:
        response = await client.delete(VENDOR_SERVICE_URL.format(service_id=service.uuid), headers=headers)

    assert response.status_code == 200
    assert response.json() == {"message": "Service deleted successfully"}


async def test_package_lifecycle(client_factory, overrides, headers):
    body = {
        "title": "Classic Wedding",
        "description": "Photography and catering",
        "event_type": "Wedding",
        "price": 1500,
        "services": ["Photography", "Catering"],
    }

    async with client_factory(overrides) as client:
        created = await client.post(VENDOR_PACKAGES_URL, json=body, headers=headers)
        package_id = created.json()["package"]["id"]
        updated = await client.put(
            VENDOR_PACKAGE_URL.format(package_id=package_id), json={"price": 1200}, headers=headers
        )
        listed = await client.get(VENDOR_PACKAGES_URL, headers=headers)
        deleted = await client.delete(VENDOR_PACKAGE_URL.format(package_id=package_id), headers=headers)

    assert created.status_code == 201
    assert updated.json()["package"]["price"] == 1200.0
    assert [p["id"] for p in listed.json()["packages"]] == [package_id]
    assert deleted.json()["message"] == "Package deleted successfully"


async def test_create_package_without_services(client_factory, overrides, headers):
    body = {"title": "Empty", "description": "Nothing", "event_type": "Wedding", "price": 10, "services": []}

    async with client_factory(overrides) as client:
        response = await client.post(VENDOR_PACKAGES_URL, json=body, headers=headers)

    assert response.status_code == 422


async def test_delete_package_of_other_vendor(client_factory, db_session, overrides, headers):
    other = await create_user(db_session, "other@example.com", Role.VENDOR)
    package = await create_package(db_session, other)

    async with client_factory(overrides) as client:
        response = await client.delete(VENDOR_PACKAGE_URL.format(package_id=package.uuid), headers=headers)

    assert response.status_code == 403


def test_to_changes_keeps_sent_fields_and_converts_money():
    changes = to_changes(ServiceUpdateRequest(price_min=10.1, event_type="Birthday"))

    assert changes == {"price_min": Decimal("10.10"), "event_type": "Birthday"}
