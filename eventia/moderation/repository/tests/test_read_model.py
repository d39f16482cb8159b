from uuid import uuid4

import pytest

from eventia.moderation import dtos
from eventia.moderation.dtos import ContactCreateDTO, ContactStatus
from eventia.moderation.repository.read_models import SqlModerationReadModel
from eventia.moderation.repository.write_models import SqlModerationWriteModel


@pytest.fixture
def read_model(db_session):
    return SqlModerationReadModel(session_overwrite=db_session)


@pytest.fixture
async def testimonials(db_session):
    write_model = SqlModerationWriteModel(session_overwrite=db_session)

    async def submit(event_type, approve):
        testimonial = await write_model.submit_testimonial(
            uuid4(),
            dtos.TestimonialCreateDTO(
                customer_name="Guest",
                customer_role="Host",
                event_type=event_type,
                rating=4,
                testimonial=f"Lovely {event_type.lower()}",
            ),
        )
        if approve:
            testimonial = await write_model.set_testimonial_approval(testimonial.id, True)
        return testimonial

    return {
        "wedding": await submit("Wedding", True),
        "birthday": await submit("Birthday", True),
        "pending": await submit("Wedding", False),
    }


async def test_published_testimonials_only_approved(read_model, testimonials):
    published = await read_model.list_published_testimonials(None, 10)

    assert {t.id for t in published} == {testimonials["wedding"].id, testimonials["birthday"].id}


async def test_published_testimonials_by_event_type(read_model, testimonials):
    published = await read_model.list_published_testimonials("wedding", 10)

    assert [t.id for t in published] == [testimonials["wedding"].id]


async def test_published_testimonials_limit(read_model, testimonials):
    assert len(await read_model.list_published_testimonials(None, 1)) == 1


async def test_get_published_testimonial(read_model, testimonials):
    assert (await read_model.get_published_testimonial(testimonials["wedding"].id)).is_approved is True
    assert await read_model.get_published_testimonial(testimonials["pending"].id) is None
    assert await read_model.get_published_testimonial(uuid4()) is None


@pytest.mark.parametrize("approved, expected", [(None, 3), (True, 2), (False, 1)])
async def test_list_testimonials(read_model, testimonials, approved, expected):
    result = await read_model.list_testimonials(approved, 1, 10)

    assert result.total_count == expected
    assert len(result.items) == expected


async def test_list_contacts(db_session, read_model):
    write_model = SqlModerationWriteModel(session_overwrite=db_session)
    venue = await write_model.create_contact(
        ContactCreateDTO(name="Amal", email="amal@example.com", subject="Venue", message="Is Kandy available?")
    )
    await write_model.create_contact(
        ContactCreateDTO(name="Dilini", email="dilini@example.com", subject="Catering", message="Menu options")
    )
    await write_model.update_contact_status(venue.id, ContactStatus.RESOLVED)

    everything = await read_model.list_contacts(None, None, 1, 10)
    new = await read_model.list_contacts(ContactStatus.NEW, None, 1, 10)
    searched = await read_model.list_contacts(None, "kandy", 1, 10)

    assert everything.total_count == 2
    assert [c.name for c in new.items] == ["Dilini"]
    assert [c.id for c in searched.items] == [venue.id]
