import contextlib
from decimal import Decimal
from uuid import UUID, uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

# Every ORM module must be imported so create_all sees its tables
import eventia.cart.repository.orm_models  # noqa: F401
import eventia.catalog.repository.orm_models  # noqa: F401
import eventia.moderation.repository.orm_models  # noqa: F401
from eventia.auth.dtos import Role
from eventia.auth.security import create_access_token, hash_password
from eventia.catalog.repository.orm_models import Package, Service
from eventia.config.database import async_session_maker, engine
from eventia.main import app
from eventia.models import BaseModel
from eventia.models.user import User


@pytest.fixture(autouse=True)
async def test_db():
    """Fresh schema for every test."""
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    yield

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.drop_all)


@pytest.fixture
async def db_session() -> AsyncSession:
    async with async_session_maker() as session:
        yield session
        await session.rollback()


@pytest.fixture
def client_factory():
    """Build a client with some dependencies swapped, e.g. SQL models for in-memory ones."""

    @contextlib.asynccontextmanager
    async def factory(overrides: dict | None = None):
        app.dependency_overrides.update(overrides or {})
        try:
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as ac:
                yield ac
        finally:
            app.dependency_overrides.clear()

    return factory


@pytest.fixture
async def client(client_factory):
    async with client_factory() as ac:
        yield ac


def auth_headers(role: Role = Role.USER, user_id: UUID | None = None) -> dict[str, str]:
    token = create_access_token(user_id or uuid4(), role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_id() -> UUID:
    return uuid4()


@pytest.fixture
def user_headers(user_id) -> dict[str, str]:
    return auth_headers(Role.USER, user_id)


@pytest.fixture
def vendor_headers() -> dict[str, str]:
    return auth_headers(Role.VENDOR)


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return auth_headers(Role.ADMIN)


async def create_user(
    session: AsyncSession,
    email: str = "user@example.com",
    role: Role = Role.USER,
    password: str = "secret123",
    is_approved: bool = True,
    **kwargs,
) -> User:
    user = User(
        name=kwargs.pop("name", email.split("@")[0]),
        email=email,
        hashed_password=hash_password(password),
        role=role,
        is_approved=is_approved,
        **kwargs,
    )
    session.add(user)
    await session.flush()
    return user


async def create_service(
    session: AsyncSession,
    vendor: User,
    title: str = "Garden Photography",
    price_min: Decimal = Decimal("100.00"),
    price_max: Decimal = Decimal("500.00"),
    **kwargs,
) -> Service:
    service = Service(
        vendor_id=vendor.uuid,
        title=title,
        description=kwargs.pop("description", f"{title} by {vendor.name}"),
        event_type=kwargs.pop("event_type", "Wedding"),
        service_category=kwargs.pop("service_category", "Photography"),
        price_min=price_min,
        price_max=price_max,
        **kwargs,
    )
    session.add(service)
    await session.flush()
    return service


async def create_package(
    session: AsyncSession,
    vendor: User,
    title: str = "Full Wedding Package",
    price: Decimal = Decimal("50.00"),
    **kwargs,
) -> Package:
    package = Package(
        vendor_id=vendor.uuid,
        title=title,
        description=kwargs.pop("description", f"{title} by {vendor.name}"),
        event_type=kwargs.pop("event_type", "Wedding"),
        price=price,
        services=kwargs.pop("services", ["Photography", "Catering"]),
        **kwargs,
    )
    session.add(package)
    await session.flush()
    return package
