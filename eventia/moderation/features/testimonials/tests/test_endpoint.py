"""Tests for the testimonial endpoints."""

from uuid import uuid4

import pytest

from eventia.auth.dtos import Role
from eventia.conftest import auth_headers
from eventia.moderation import dtos
from eventia.moderation.features.testimonials import router as testimonials
from eventia.moderation.repository.read_models import SqlModerationReadModel
from eventia.moderation.repository.write_models import SqlModerationWriteModel

PAYLOAD = {
    "customer_name": "Kasuni",
    "customer_role": "Bride",
    "event_type": "Wedding",
    "rating": 5,
    "testimonial": "Everything went perfectly.",
}


@pytest.fixture
def write_model(db_session):
    return SqlModerationWriteModel(session_overwrite=db_session)


@pytest.fixture
def overrides(db_session, write_model):
    return {
        testimonials.get_moderation_read_model: lambda: SqlModerationReadModel(session_overwrite=db_session),
        testimonials.get_moderation_write_model: lambda: write_model,
    }


async def submit(write_model, approve=False, event_type="Wedding"):
    testimonial = await write_model.submit_testimonial(
        uuid4(), dtos.TestimonialCreateDTO(**{**PAYLOAD, "event_type": event_type})
    )
    if approve:
        testimonial = await write_model.set_testimonial_approval(testimonial.id, True)
    return testimonial


# Public Tests


async def test_submit_testimonial(client_factory, overrides, user_headers):
    async with client_factory(overrides) as client:
        response = await client.post(testimonials.TESTIMONIALS_URL, json=PAYLOAD, headers=user_headers)

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "Testimonial submitted successfully and pending approval"
    assert data["testimonial"]["is_approved"] is False


async def test_submit_testimonial_requires_login(client_factory, overrides):
    async with client_factory(overrides) as client:
        response = await client.post(testimonials.TESTIMONIALS_URL, json=PAYLOAD)

    assert response.status_code == 401


@pytest.mark.parametrize("rating", [0, 6])
async def test_submit_testimonial_bad_rating(client_factory, overrides, user_headers, rating):
    async with client_factory(overrides) as client:
        response = await client.post(
            testimonials.TESTIMONIALS_URL, json={**PAYLOAD, "rating": rating}, headers=user_headers
        )

    assert response.status_code == 422


async def test_list_published_testimonials(client_factory, overrides, write_model):
    published = await submit(write_model, approve=True)
    await submit(write_model, approve=True, event_type="Birthday")
    await submit(write_model)

    async with client_factory(overrides) as client:
        everything = await client.get(testimonials.TESTIMONIALS_URL)
        weddings = await client.get(testimonials.TESTIMONIALS_URL, params={"event_type": "Wedding"})

    assert everything.status_code == 200
    assert len(everything.json()["testimonials"]) == 2
    assert [t["id"] for t in weddings.json()["testimonials"]] == [str(published.id)]


async def test_get_testimonial(client_factory, overrides, write_model):
    published = await submit(write_model, approve=True)
    pending = await submit(write_model)

    async with client_factory(overrides) as client:
        found = await client.get(testimonials.TESTIMONIAL_URL.format(testimonial_id=published.id))
        hidden = await client.get(testimonials.TESTIMONIAL_URL.format(testimonial_id=pending.id))

    assert found.json()["testimonial"]["id"] == str(published.id)
    assert hidden.status_code == 404
    assert hidden.json() == {"detail": "Testimonial not found", "code": "not_found"}


# Admin Tests


async def test_admin_lists_pending(client_factory, overrides, write_model, admin_headers):
    pending = await submit(write_model)
    await submit(write_model, approve=True)

    async with client_factory(overrides) as client:
        response = await client.get(
            testimonials.ADMIN_TESTIMONIALS_URL, params={"status": "pending"}, headers=admin_headers
        )

    assert [t["id"] for t in response.json()["testimonials"]] == [str(pending.id)]
    assert response.json()["pagination"]["total_count"] == 1


async def test_admin_approves_testimonial(client_factory, overrides, write_model, admin_headers):
    pending = await submit(write_model)

    async with client_factory(overrides) as client:
        response = await client.put(
            testimonials.ADMIN_TESTIMONIAL_APPROVE_URL.format(testimonial_id=pending.id),
            json={"approve": True},
            headers=admin_headers,
        )
        listed = await client.get(testimonials.TESTIMONIALS_URL)

    assert response.json()["message"] == "Testimonial approved"
    assert [t["id"] for t in listed.json()["testimonials"]] == [str(pending.id)]


async def test_admin_deletes_testimonial(client_factory, overrides, write_model, admin_headers):
    testimonial = await submit(write_model)

    async with client_factory(overrides) as client:
        deleted = await client.delete(
            testimonials.ADMIN_TESTIMONIAL_URL.format(testimonial_id=testimonial.id), headers=admin_headers
        )
        missing = await client.delete(
            testimonials.ADMIN_TESTIMONIAL_URL.format(testimonial_id=testimonial.id), headers=admin_headers
        )

    assert deleted.json() == {"message": "Testimonial deleted successfully"}
    assert missing.status_code == 404


@pytest.mark.parametrize("role", [Role.USER, Role.VENDOR])
async def test_moderation_requires_admin(client_factory, overrides, role):
    async with client_factory(overrides) as client:
        response = await client.get(testimonials.ADMIN_TESTIMONIALS_URL, headers=auth_headers(role))

    assert response.status_code == 403
