"""Tests for SqlCatalogReadModel."""

from decimal import Decimal
from uuid import uuid4

import pytest

from eventia.auth.dtos import Role
from eventia.catalog.dtos import ListingFilters, RecommendationCriteria
from eventia.catalog.repository.read_models import SqlCatalogReadModel
from eventia.conftest import create_package, create_service, create_user


@pytest.fixture
async def catalog(db_session):
    """Two vendors, four services and two packages spread over events, prices and places."""
    colombo = await create_user(db_session, "colombo@example.com", Role.VENDOR)
    kandy = await create_user(db_session, "kandy@example.com", Role.VENDOR)
    services = {
        "photo": await create_service(
            db_session, colombo, "Beach Photography", Decimal("100"), Decimal("500"),
            city="Colombo", district="Colombo",
        ),
        "cake": await create_service(
            db_session, colombo, "Birthday Cakes", Decimal("20"), Decimal("80"),
            event_type="Birthday", service_category="Catering", city="Negombo", district="Gampaha",
        ),
        "band": await create_service(
            db_session, kandy, "Hill Country Band", Decimal("600"), Decimal("900"),
            service_category="Music", city="Kandy", district="Kandy",
        ),
        "hidden": await create_service(db_session, kandy, "Retired Photography", is_active=False),
    }
    packages = {
        "gold": await create_package(db_session, colombo, "Gold Wedding", Decimal("1500"), city="Colombo"),
        "party": await create_package(
            db_session, kandy, "Kids Party", Decimal("250"), event_type="Birthday", district="Kandy"
        ),
    }
    return {"vendors": (colombo, kandy), "services": services, "packages": packages}


def _titles(page):
    return {item.title for item in page.items}


async def test_search_services_returns_only_active_by_default(db_session, catalog):
    read_model = SqlCatalogReadModel(session_overwrite=db_session)

    page = await read_model.search_services(ListingFilters(), page=1, limit=20)

    assert _titles(page) == {"Beach Photography", "Birthday Cakes", "Hill Country Band"}
    assert page.total_count == 3


async def test_search_services_by_event_type_is_case_insensitive(db_session, catalog):
    read_model = SqlCatalogReadModel(session_overwrite=db_session)

    page = await read_model.search_services(ListingFilters(event_type="birthday"), page=1, limit=20)

    assert _titles(page) == {"Birthday Cakes"}


async def test_search_services_by_any_of_several_categories(db_session, catalog):
    read_model = SqlCatalogReadModel(session_overwrite=db_session)

    page = await read_model.search_services(
        ListingFilters(service_categories=["music", "Catering"]), page=1, limit=20
    )

    assert _titles(page) == {"Birthday Cakes", "Hill Country Band"}


@pytest.mark.parametrize(
    ("min_price", "max_price", "expected"),
    [
        (Decimal("550"), None, {"Hill Country Band"}),
        (None, Decimal("90"), {"Birthday Cakes"}),
        # overlaps 100-500 and 20-80 but not 600-900
        (Decimal("50"), Decimal("150"), {"Beach Photography", "Birthday Cakes"}),
    ],
)
async def test_search_services_by_overlapping_price_range(db_session, catalog, min_price, max_price, expected):
    read_model = SqlCatalogReadModel(session_overwrite=db_session)

    page = await read_model.search_services(
        ListingFilters(min_price=min_price, max_price=max_price), page=1, limit=20
    )

    assert _titles(page) == expected


async def test_search_services_by_location_matches_city_or_district(db_session, catalog):
    read_model = SqlCatalogReadModel(session_overwrite=db_session)

    by_district = await read_model.search_services(ListingFilters(location="gampaha"), page=1, limit=20)
    by_city = await read_model.search_services(ListingFilters(location="Kand"), page=1, limit=20)

    assert _titles(by_district) == {"Birthday Cakes"}
    assert _titles(by_city) == {"Hill Country Band"}


async def test_search_services_free_text(db_session, catalog):
    read_model = SqlCatalogReadModel(session_overwrite=db_session)

    page = await read_model.search_services(ListingFilters(search="photo"), page=1, limit=20)

    assert _titles(page) == {"Beach Photography"}


async def test_search_services_for_vendor_includes_inactive(db_session, catalog):
    _, kandy = catalog["vendors"]
    read_model = SqlCatalogReadModel(session_overwrite=db_session)

    page = await read_model.search_services(ListingFilters(vendor_id=kandy.uuid, active=None), page=1, limit=20)

    assert _titles(page) == {"Hill Country Band", "Retired Photography"}


async def test_search_services_paginates(db_session, catalog):
    read_model = SqlCatalogReadModel(session_overwrite=db_session)

    first = await read_model.search_services(ListingFilters(), page=1, limit=2)
    second = await read_model.search_services(ListingFilters(), page=2, limit=2)

    assert len(first.items) == 2
    assert len(second.items) == 1
    assert first.total_pages == 2
    assert first.has_next and not first.has_prev
    assert second.has_prev and not second.has_next
    assert {s.id for s in first.items}.isdisjoint({s.id for s in second.items})


async def test_search_packages(db_session, catalog):
    read_model = SqlCatalogReadModel(session_overwrite=db_session)

    birthday = await read_model.search_packages(ListingFilters(event_type="Birthday"), page=1, limit=20)
    cheap = await read_model.search_packages(ListingFilters(max_price=Decimal("300")), page=1, limit=20)
    kandy = await read_model.search_packages(ListingFilters(location="kandy"), page=1, limit=20)

    assert _titles(birthday) == {"Kids Party"}
    assert _titles(cheap) == {"Kids Party"}
    assert _titles(kandy) == {"Kids Party"}


async def test_refs_carry_owner_availability_and_price(db_session, catalog):
    read_model = SqlCatalogReadModel(session_overwrite=db_session)
    hidden = catalog["services"]["hidden"]
    gold = catalog["packages"]["gold"]

    service_ref = await read_model.get_service_ref(hidden.uuid)
    package_ref = await read_model.get_package_ref(gold.uuid)

    assert service_ref.vendor_id == hidden.vendor_id
    assert service_ref.is_active is False
    assert package_ref.price == Decimal("1500")
    assert await read_model.get_service_ref(uuid4()) is None
    assert await read_model.get_package_ref(uuid4()) is None


async def test_get_service_and_package(db_session, catalog):
    read_model = SqlCatalogReadModel(session_overwrite=db_session)
    photo = catalog["services"]["photo"]
    gold = catalog["packages"]["gold"]

    service = await read_model.get_service(photo.uuid)
    package = await read_model.get_package(gold.uuid)

    assert service.title == "Beach Photography"
    assert service.price_min == Decimal("100")
    assert package.services == ["Photography", "Catering"]
    assert await read_model.get_package(uuid4()) is None


# Recommendation Tests

GALLE_WEDDING = RecommendationCriteria(event_type="wedding", budget=Decimal("1000"), guest_count=100, city="galle")


async def test_recommend_matches_event_budget_capacity_and_city(db_session):
    vendor = await create_user(db_session, "galle@example.com", Role.VENDOR)
    pending = await create_user(db_session, "pending@example.com", Role.VENDOR, is_approved=False)
    fits = {"capacity": 150, "city": "Galle Fort"}
    await create_service(db_session, vendor, "Fort Photography", Decimal("200"), Decimal("900"), **fits)
    await create_service(db_session, vendor, "Cheap Drums", Decimal("50"), Decimal("300"), **fits)
    await create_service(db_session, vendor, "Over Budget Band", Decimal("500"), Decimal("1200"), **fits)
    await create_service(db_session, vendor, "Tiny Hall", capacity=50, city="Galle")
    await create_service(db_session, vendor, "Colombo Florist", capacity=150, city="Colombo")
    await create_service(db_session, vendor, "Birthday Clown", event_type="Birthday", **fits)
    await create_service(db_session, vendor, "No Capacity Given", city="Galle")
    await create_service(db_session, vendor, "Retired Lights", is_active=False, **fits)
    await create_service(db_session, pending, "Unapproved Catering", **fits)
    await create_package(db_session, vendor, "Galle Gold", Decimal("950"), **fits)
    await create_package(db_session, vendor, "Galle Platinum", Decimal("1800"), **fits)
    await create_package(db_session, pending, "Pending Silver", Decimal("400"), **fits)
    read_model = SqlCatalogReadModel(session_overwrite=db_session)

    result = await read_model.recommend(GALLE_WEDDING)

    assert [s.title for s in result.services] == ["Cheap Drums", "Fort Photography"]
    assert [p.title for p in result.packages] == ["Galle Gold"]


async def test_recommend_caps_results(db_session):
    vendor = await create_user(db_session, "galle@example.com", Role.VENDOR)
    for i in range(4):
        await create_service(db_session, vendor, f"Photographer {i}", capacity=200, city="Galle")
    read_model = SqlCatalogReadModel(session_overwrite=db_session)

    result = await read_model.recommend(GALLE_WEDDING, limit=3)

    assert len(result.services) == 3
    assert result.packages == []
