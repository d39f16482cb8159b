"""Tests for the register endpoint."""

import pytest

from eventia.auth.features.register.router import REGISTER_URL, get_identity_write_model
from eventia.auth.security import authenticate
from eventia.auth.tests.inmemory_models import InMemoryIdentityStore, InMemoryIdentityWriteModel


@pytest.fixture
def store():
    return InMemoryIdentityStore()


@pytest.fixture
def overrides(store):
    return {get_identity_write_model: lambda: InMemoryIdentityWriteModel(store)}


async def test_register_user(client_factory, store, overrides):
    """A plain user is approved straight away and gets a usable token."""
    request_data = {"name": "Nimal", "email": "Nimal@Example.com", "password": "secret123"}

    async with client_factory(overrides) as client:
        response = await client.post(url=REGISTER_URL, json=request_data)

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "Registration successful"
    assert data["user"]["email"] == "nimal@example.com"
    assert data["user"]["role"] == "User"
    assert data["user"]["is_approved"] is True
    assert "hashed_password" not in data["user"]
    assert str(authenticate(data["token"]).id) == data["user"]["id"]


async def test_register_vendor_starts_unapproved(client_factory, overrides):
    request_data = {
        "name": "Lanka Lights",
        "email": "lights@example.com",
        "password": "secret123",
        "role": "Vendor",
        "business_registration": "PV-12345",
    }

    async with client_factory(overrides) as client:
        response = await client.post(url=REGISTER_URL, json=request_data)

    assert response.status_code == 201
    assert response.json()["user"]["is_approved"] is False
    assert response.json()["user"]["business_registration"] == "PV-12345"


async def test_register_vendor_without_business_registration(client_factory, overrides):
    request_data = {"name": "V", "email": "v@example.com", "password": "secret123", "role": "Vendor"}

    async with client_factory(overrides) as client:
        response = await client.post(url=REGISTER_URL, json=request_data)

    assert response.status_code == 400
    assert response.json()["field"] == "business_registration"


async def test_register_admin_is_refused(client_factory, overrides):
    request_data = {"name": "A", "email": "a@example.com", "password": "secret123", "role": "Admin"}

    async with client_factory(overrides) as client:
        response = await client.post(url=REGISTER_URL, json=request_data)

    assert response.status_code == 400
    assert response.json()["code"] == "validation_error"


async def test_register_duplicate_email(client_factory, store, overrides):
    store.add("taken@example.com")
    request_data = {"name": "T", "email": "taken@example.com", "password": "secret123"}

    async with client_factory(overrides) as client:
        response = await client.post(url=REGISTER_URL, json=request_data)

    assert response.status_code == 409
    assert response.json() == {"detail": "User already exists", "code": "conflict"}


@pytest.mark.parametrize(
    "request_data",
    [
        {"name": "N", "email": "not-an-email", "password": "secret123"},
        {"name": "N", "email": "n@example.com", "password": "123"},
        {"email": "n@example.com", "password": "secret123"},
    ],
)
async def test_register_rejects_malformed_body(client_factory, overrides, request_data):
    async with client_factory(overrides) as client:
        response = await client.post(url=REGISTER_URL, json=request_data)

    assert response.status_code == 422
