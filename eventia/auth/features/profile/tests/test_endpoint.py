"""Tests for the profile endpoints."""

import pytest

from eventia.auth.dtos import Role
from eventia.auth.features.profile.router import PROFILE_URL, get_identity_read_model
from eventia.auth.features.register.router import get_identity_write_model
from eventia.auth.tests.inmemory_models import (
    InMemoryIdentityReadModel,
    InMemoryIdentityStore,
    InMemoryIdentityWriteModel,
)
from eventia.conftest import auth_headers


@pytest.fixture
def store():
    return InMemoryIdentityStore()


@pytest.fixture
def overrides(store):
    return {
        get_identity_read_model: lambda: InMemoryIdentityReadModel(store),
        get_identity_write_model: lambda: InMemoryIdentityWriteModel(store),
    }


async def test_get_profile(client_factory, store, overrides):
    user = store.add("user@example.com", name="Kasun")

    async with client_factory(overrides) as client:
        response = await client.get(PROFILE_URL, headers=auth_headers(Role.USER, user.id))

    assert response.status_code == 200
    assert response.json()["user"]["name"] == "Kasun"


async def test_get_profile_for_each_role(client_factory, store, overrides):
    for role in Role:
        user = store.add(f"{role.value.lower()}@example.com", role=role, is_approved=True)

        async with client_factory(overrides) as client:
            response = await client.get(PROFILE_URL, headers=auth_headers(role, user.id))

        assert response.status_code == 200
        assert response.json()["user"]["role"] == role.value


async def test_get_profile_without_token(client_factory, overrides):
    async with client_factory(overrides) as client:
        response = await client.get(PROFILE_URL)

    assert response.status_code == 401
    assert response.json()["code"] == "unauthenticated"


async def test_get_profile_with_bad_token(client_factory, overrides):
    async with client_factory(overrides) as client:
        response = await client.get(PROFILE_URL, headers={"Authorization": "Bearer not.a.token"})

    assert response.status_code == 401
    assert response.json()["code"] == "invalid_credential"


async def test_get_profile_of_deleted_user(client_factory, overrides):
    async with client_factory(overrides) as client:
        response = await client.get(PROFILE_URL, headers=auth_headers(Role.USER))

    assert response.status_code == 404


async def test_update_profile(client_factory, store, overrides):
    user = store.add("user@example.com")

    async with client_factory(overrides) as client:
        response = await client.put(
            PROFILE_URL,
            json={"phone": "+94 77 123 4567", "address": "Kandy"},
            headers=auth_headers(Role.USER, user.id),
        )

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Profile updated successfully"
    assert data["user"]["phone"] == "+94 77 123 4567"
    assert store.users[user.id].address == "Kandy"


async def test_update_profile_with_nothing_to_change(client_factory, store, overrides):
    user = store.add("user@example.com")

    async with client_factory(overrides) as client:
        response = await client.put(PROFILE_URL, json={}, headers=auth_headers(Role.USER, user.id))

    assert response.status_code == 400
