"""Catalog write models - vendor listing CRUD and admin activation toggles."""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any
from uuid import UUID

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from eventia.catalog.dtos import EventType, PackageCreateDTO, PackageDTO, ServiceCreateDTO, ServiceDTO
from eventia.catalog.repository.orm_models import Package, Service
from eventia.cart.repository.orm_models import CartPackageLine, CartServiceLine
from eventia.config.database import async_session_manager
from eventia.errors import ConflictError, ForbiddenError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

SERVICE_FIELDS = (
    "title",
    "description",
    "event_type",
    "service_category",
    "price_min",
    "price_max",
    "city",
    "district",
    "capacity",
    "is_active",
)
PACKAGE_FIELDS = (
    "title",
    "description",
    "event_type",
    "price",
    "services",
    "city",
    "district",
    "capacity",
    "is_active",
)


def _check_event_type(event_type: str) -> None:
    if event_type not in {e.value for e in EventType}:
        raise ValidationError("event_type", "Invalid event type")


def _check_price_range(price_min: Decimal, price_max: Decimal) -> None:
    if price_min < 0:
        raise ValidationError("price_min", "price_min must not be negative")
    if price_min > price_max:
        raise ValidationError("price_max", "price_max must be greater than or equal to price_min")


class CatalogWriteModel(ABC):
    @abstractmethod
    async def create_service(self, vendor_id: UUID, data: ServiceCreateDTO) -> ServiceDTO:
        raise NotImplementedError

    @abstractmethod
    async def update_service(self, vendor_id: UUID, service_id: UUID, changes: dict[str, Any]) -> ServiceDTO:
        raise NotImplementedError

    @abstractmethod
    async def delete_service(self, vendor_id: UUID, service_id: UUID) -> None:
        raise NotImplementedError

    @abstractmethod
    async def create_package(self, vendor_id: UUID, data: PackageCreateDTO) -> PackageDTO:
        raise NotImplementedError

    @abstractmethod
    async def update_package(self, vendor_id: UUID, package_id: UUID, changes: dict[str, Any]) -> PackageDTO:
        raise NotImplementedError

    @abstractmethod
    async def delete_package(self, vendor_id: UUID, package_id: UUID) -> None:
        raise NotImplementedError

    @abstractmethod
    async def set_service_active(self, service_id: UUID, active: bool) -> ServiceDTO:
        raise NotImplementedError

    @abstractmethod
    async def set_package_active(self, package_id: UUID, active: bool) -> PackageDTO:
        raise NotImplementedError


class SqlCatalogWriteModel(CatalogWriteModel):
    """SQL implementation of catalog write operations.

    Vendors may only touch their own listings. Listings referenced by a cart
    line cannot be deleted, only deactivated.
    """

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def _get_service(self, session: AsyncSession, service_id: UUID) -> Service:
        result = await session.execute(select(Service).where(Service.uuid == service_id))
        service = result.scalar_one_or_none()
        if service is None:
            raise NotFoundError("Service not found")
        return service

    async def _get_package(self, session: AsyncSession, package_id: UUID) -> Package:
        result = await session.execute(select(Package).where(Package.uuid == package_id))
        package = result.scalar_one_or_none()
        if package is None:
            raise NotFoundError("Package not found")
        return package

    async def create_service(self, vendor_id: UUID, data: ServiceCreateDTO) -> ServiceDTO:
        _check_event_type(data.event_type)
        _check_price_range(data.price_min, data.price_max)

        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            service = Service(
                vendor_id=vendor_id,
                title=data.title.strip(),
                description=data.description.strip(),
                event_type=data.event_type,
                service_category=data.service_category.strip(),
                price_min=data.price_min,
                price_max=data.price_max,
                city=data.city,
                district=data.district,
                capacity=data.capacity,
                is_active=data.is_active,
            )
            session.add(service)
            await session.flush()
            logger.info("Vendor %s created service %s", vendor_id, service.uuid)
            return ServiceDTO.from_service(service)

    async def update_service(self, vendor_id: UUID, service_id: UUID, changes: dict[str, Any]) -> ServiceDTO:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            service = await self._get_service(session, service_id)
            if service.vendor_id != vendor_id:
                raise ForbiddenError("Not authorized to update this service")

            for key, value in changes.items():
                if key in SERVICE_FIELDS and value is not None:
                    setattr(service, key, value)

            _check_event_type(service.event_type)
            _check_price_range(Decimal(service.price_min), Decimal(service.price_max))
            await session.flush()
            return ServiceDTO.from_service(service)

    async def delete_service(self, vendor_id: UUID, service_id: UUID) -> None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            service = await self._get_service(session, service_id)
            if service.vendor_id != vendor_id:
                raise ForbiddenError("Not authorized to delete this service")

            referenced = await session.scalar(
                select(exists().where(CartServiceLine.service_id == service_id))
            )
            if referenced:
                raise ConflictError("Service is referenced by an event plan; deactivate it instead")

            await session.delete(service)
            logger.info("Vendor %s deleted service %s", vendor_id, service_id)

    async def create_package(self, vendor_id: UUID, data: PackageCreateDTO) -> PackageDTO:
        _check_event_type(data.event_type)
        if data.price < 0:
            raise ValidationError("price", "price must not be negative")
        if not data.services:
            raise ValidationError("services", "A package must include at least one service")

        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            package = Package(
                vendor_id=vendor_id,
                title=data.title.strip(),
                description=data.description.strip(),
                event_type=data.event_type,
                price=data.price,
                services=list(data.services),
                city=data.city,
                district=data.district,
                capacity=data.capacity,
                is_active=data.is_active,
            )
            session.add(package)
            await session.flush()
            logger.info("Vendor %s created package %s", vendor_id, package.uuid)
            return PackageDTO.from_package(package)

    async def update_package(self, vendor_id: UUID, package_id: UUID, changes: dict[str, Any]) -> PackageDTO:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            package = await self._get_package(session, package_id)
            if package.vendor_id != vendor_id:
                raise ForbiddenError("Not authorized to update this package")

            for key, value in changes.items():
                if key in PACKAGE_FIELDS and value is not None:
                    setattr(package, key, list(value) if key == "services" else value)

            _check_event_type(package.event_type)
            if Decimal(package.price) < 0:
                raise ValidationError("price", "price must not be negative")
            await session.flush()
            return PackageDTO.from_package(package)

    async def delete_package(self, vendor_id: UUID, package_id: UUID) -> None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            package = await self._get_package(session, package_id)
            if package.vendor_id != vendor_id:
                raise ForbiddenError("Not authorized to delete this package")

            referenced = await session.scalar(
                select(exists().where(CartPackageLine.package_id == package_id))
            )
            if referenced:
                raise ConflictError("Package is referenced by an event plan; deactivate it instead")

            await session.delete(package)
            logger.info("Vendor %s deleted package %s", vendor_id, package_id)

    async def set_service_active(self, service_id: UUID, active: bool) -> ServiceDTO:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            service = await self._get_service(session, service_id)
            service.is_active = active
            await session.flush()
            logger.info("Service %s %s", service_id, "activated" if active else "deactivated")
            return ServiceDTO.from_service(service)

    async def set_package_active(self, package_id: UUID, active: bool) -> PackageDTO:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            package = await self._get_package(session, package_id)
            package.is_active = active
            await session.flush()
            logger.info("Package %s %s", package_id, "activated" if active else "deactivated")
            return PackageDTO.from_package(package)
