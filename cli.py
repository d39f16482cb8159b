"""CLI commands for Eventia administration."""

import asyncio
from decimal import Decimal
from uuid import UUID

import typer
from sqlalchemy import select

from eventia.auth.dtos import Role
from eventia.auth.security import create_access_token, hash_password
from eventia.catalog.dtos import PackageCreateDTO, ServiceCreateDTO
from eventia.catalog.repository.write_models import SqlCatalogWriteModel
from eventia.config.database import async_session_manager
from eventia.models.base import utcnow
from eventia.models.user import User

app = typer.Typer(help="CLI commands for Eventia administration")


async def _create_admin(name: str, email: str, password: str) -> User:
    """Async helper to create an admin account, or promote an existing one."""
    async with async_session_manager() as session:
        result = await session.execute(select(User).where(User.email == email.lower()))
        user = result.scalar_one_or_none()
        if user is None:
            user = User(name=name, email=email.lower())
            session.add(user)
        user.hashed_password = hash_password(password)
        user.role = Role.ADMIN
        user.is_approved = True
        user.is_active = True
        await session.flush()
        return user


@app.command()
def create_admin(
    email: str = typer.Option(..., help="Admin email address"),
    password: str = typer.Option(..., prompt=True, hide_input=True, help="Admin password"),
    name: str = typer.Option("Administrator", help="Display name"),
):
    """Create an Admin account. Admins cannot register through the API."""
    user = asyncio.run(_create_admin(name, email, password))

    typer.secho("Admin ready!", fg=typer.colors.GREEN)
    typer.secho(f"Email: {user.email}", fg=typer.colors.BLUE)
    typer.secho(f"ID: {user.uuid}", fg=typer.colors.CYAN)


async def _find_user(email: str) -> User | None:
    async with async_session_manager() as session:
        result = await session.execute(select(User).where(User.email == email.lower()))
        return result.scalar_one_or_none()


@app.command()
def issue_token(
    email: str = typer.Argument(..., help="Email of an existing user"),
    minutes: int = typer.Option(None, help="Lifetime in minutes (defaults to the configured expiry)"),
):
    """Mint a bearer token for an existing user, e.g. for manual API testing."""
    user = asyncio.run(_find_user(email))
    if user is None:
        typer.secho(f"No user with email {email}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    token = create_access_token(user.uuid, Role(user.role), expires_in=minutes * 60 if minutes else None)
    typer.secho(f"{Role(user.role).value} {user.email}", fg=typer.colors.BLUE)
    typer.echo(token)


async def _seed_catalog(vendor_email: str) -> tuple[UUID, UUID, UUID]:
    """Async helper to create an approved demo vendor with one service and one package."""
    async with async_session_manager() as session:
        result = await session.execute(select(User).where(User.email == vendor_email))
        vendor = result.scalar_one_or_none()
        if vendor is None:
            vendor = User(
                name="Demo Vendor",
                email=vendor_email,
                hashed_password=hash_password("vendor123"),
                role=Role.VENDOR,
                business_registration="DEMO-0001",
                is_approved=True,
                approved_at=utcnow(),
            )
            session.add(vendor)
            await session.flush()
        vendor_id = vendor.uuid

    write_model = SqlCatalogWriteModel()
    service = await write_model.create_service(
        vendor_id,
        ServiceCreateDTO(
            title="Garden Photography",
            description="Full-day photography coverage for outdoor ceremonies",
            event_type="Wedding",
            service_category="Photography",
            price_min=Decimal("100.00"),
            price_max=Decimal("500.00"),
            city="Colombo",
            district="Colombo",
            capacity=300,
        ),
    )
    package = await write_model.create_package(
        vendor_id,
        PackageCreateDTO(
            title="Classic Wedding Package",
            description="Photography, decoration and catering for up to 150 guests",
            event_type="Wedding",
            price=Decimal("1500.00"),
            services=["Photography", "Decoration", "Catering"],
            city="Colombo",
            district="Colombo",
            capacity=150,
        ),
    )
    return vendor_id, service.id, package.id


@app.command()
def seed_catalog(
    vendor_email: str = typer.Option("vendor@eventia.example", help="Email of the demo vendor"),
):
    """Create an approved demo vendor with a service and a package."""
    vendor_id, service_id, package_id = asyncio.run(_seed_catalog(vendor_email.lower()))

    typer.secho("Catalog seeded!", fg=typer.colors.GREEN)
    typer.secho(f"Vendor: {vendor_id} ({vendor_email})", fg=typer.colors.BLUE)
    typer.secho(f"Service: {service_id}", fg=typer.colors.CYAN)
    typer.secho(f"Package: {package_id}", fg=typer.colors.CYAN)


if __name__ == "__main__":
    app()
