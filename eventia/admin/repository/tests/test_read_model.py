"""Tests for SqlAdminReadModel."""

from eventia.admin.dtos import VendorApprovalFilter
from eventia.admin.repository.read_models import SqlAdminReadModel
from eventia.auth.dtos import Role
from eventia.conftest import create_package, create_service, create_user
from eventia.moderation.dtos import ContactStatus
from eventia.moderation.repository import orm_models as moderation_orm


async def test_dashboard_counts(db_session):
    approved = await create_user(db_session, "approved@example.com", Role.VENDOR, name="Approved Vendor")
    await create_user(db_session, "pending@example.com", Role.VENDOR, is_approved=False)
    await create_user(db_session, "user1@example.com")
    await create_user(db_session, "user2@example.com")
    await create_user(db_session, "admin@example.com", Role.ADMIN)
    await create_service(db_session, approved)
    await create_package(db_session, approved)
    db_session.add_all(
        [
            moderation_orm.ContactMessage(name="A", email="a@example.com", subject="Hi", message="Hello"),
            moderation_orm.ContactMessage(
                name="B", email="b@example.com", subject="Hi", message="Hello", status=ContactStatus.RESOLVED
            ),
            moderation_orm.Testimonial(
                customer_name="C", customer_role="Bride", event_type="Wedding", rating=5, testimonial="Great"
            ),
        ]
    )
    await db_session.flush()
    read_model = SqlAdminReadModel(session_overwrite=db_session)

    dashboard = await read_model.get_dashboard()

    assert dashboard.total_users == 2
    assert dashboard.total_vendors == 2
    assert dashboard.pending_vendors == 1
    assert dashboard.approved_vendors == 1
    assert dashboard.total_services == 1
    assert dashboard.total_packages == 1
    assert dashboard.total_event_plans == 0
    assert dashboard.new_contacts == 1
    assert dashboard.pending_testimonials == 1
    assert {v.email for v in dashboard.recent_vendors} == {"approved@example.com", "pending@example.com"}


async def test_list_vendors_by_approval_and_search(db_session):
    await create_user(db_session, "lights@example.com", Role.VENDOR, name="Lanka Lights")
    await create_user(db_session, "cakes@example.com", Role.VENDOR, name="Colombo Cakes", is_approved=False)
    await create_user(db_session, "user@example.com")
    read_model = SqlAdminReadModel(session_overwrite=db_session)

    pending = await read_model.list_vendors(VendorApprovalFilter.PENDING, None, page=1, limit=20)
    approved = await read_model.list_vendors(VendorApprovalFilter.APPROVED, None, page=1, limit=20)
    searched = await read_model.list_vendors(None, "cakes", page=1, limit=20)

    assert [v.email for v in pending.items] == ["cakes@example.com"]
    assert [v.email for v in approved.items] == ["lights@example.com"]
    assert [v.name for v in searched.items] == ["Colombo Cakes"]


async def test_list_users_only_returns_users(db_session):
    await create_user(db_session, "user@example.com", name="Nimal")
    await create_user(db_session, "vendor@example.com", Role.VENDOR)
    await create_user(db_session, "admin@example.com", Role.ADMIN)
    read_model = SqlAdminReadModel(session_overwrite=db_session)

    page = await read_model.list_users(None, page=1, limit=20)

    assert [u.email for u in page.items] == ["user@example.com"]
    assert page.total_count == 1
