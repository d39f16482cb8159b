import abc
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from eventia.auth.dtos import Role
from eventia.catalog.dtos import (
    ListingFilters,
    ListingRefDTO,
    PackageDTO,
    RecommendationCriteria,
    RecommendationsDTO,
    ServiceDTO,
)
from eventia.catalog.repository.orm_models import Package, Service
from eventia.config.database import async_session_manager
from eventia.models.user import User
from eventia.pagination import Page, page_offset

RECOMMENDATION_LIMIT = 10


class CatalogReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_service_ref(self, service_id: UUID) -> ListingRefDTO | None:
        """Owner and availability of a service, used to validate cart lines."""
        raise NotImplementedError

    @abc.abstractmethod
    async def get_package_ref(self, package_id: UUID) -> ListingRefDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_service(self, service_id: UUID) -> ServiceDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_package(self, package_id: UUID) -> PackageDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def search_services(self, filters: ListingFilters, page: int, limit: int) -> Page[ServiceDTO]:
        raise NotImplementedError

    @abc.abstractmethod
    async def search_packages(self, filters: ListingFilters, page: int, limit: int) -> Page[PackageDTO]:
        raise NotImplementedError

    @abc.abstractmethod
    async def recommend(self, criteria: RecommendationCriteria, limit: int = RECOMMENDATION_LIMIT) -> RecommendationsDTO:
        """Active listings from approved vendors that fit an event plan.

        A listing fits when its event type matches, it costs no more than the
        budget, it seats the guest count and its city contains the plan's city.
        Services are judged by their upper price. Cheapest first.
        """
        raise NotImplementedError


def _like(value: str) -> str:
    return f"%{value.strip()}%"


class SqlCatalogReadModel(CatalogReadModel):
    """SQL implementation of the catalog read model."""

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def get_service_ref(self, service_id: UUID) -> ListingRefDTO | None:
        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(select(Service).where(Service.uuid == service_id))
            service = result.scalar_one_or_none()
            if not service:
                return None
            return ListingRefDTO(
                id=service.uuid,
                vendor_id=service.vendor_id,
                is_active=service.is_active,
                price=service.price_min,
            )

    async def get_package_ref(self, package_id: UUID) -> ListingRefDTO | None:
        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(select(Package).where(Package.uuid == package_id))
            package = result.scalar_one_or_none()
            if not package:
                return None
            return ListingRefDTO(
                id=package.uuid,
                vendor_id=package.vendor_id,
                is_active=package.is_active,
                price=package.price,
            )

    async def get_service(self, service_id: UUID) -> ServiceDTO | None:
        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(select(Service).where(Service.uuid == service_id))
            service = result.scalar_one_or_none()
            return ServiceDTO.from_service(service) if service else None

    async def get_package(self, package_id: UUID) -> PackageDTO | None:
        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(select(Package).where(Package.uuid == package_id))
            package = result.scalar_one_or_none()
            return PackageDTO.from_package(package) if package else None

    async def search_services(self, filters: ListingFilters, page: int, limit: int) -> Page[ServiceDTO]:
        conditions = []
        if filters.event_type:
            conditions.append(Service.event_type.ilike(filters.event_type.strip()))
        if filters.service_categories:
            conditions.append(
                or_(*[Service.service_category.ilike(_like(c)) for c in filters.service_categories])
            )
        # Price filters match any service whose range overlaps the requested one
        if filters.min_price is not None:
            conditions.append(Service.price_max >= filters.min_price)
        if filters.max_price is not None:
            conditions.append(Service.price_min <= filters.max_price)
        if filters.location:
            conditions.append(
                or_(Service.city.ilike(_like(filters.location)), Service.district.ilike(_like(filters.location)))
            )
        if filters.search:
            conditions.append(
                or_(
                    Service.title.ilike(_like(filters.search)),
                    Service.description.ilike(_like(filters.search)),
                    Service.event_type.ilike(_like(filters.search)),
                    Service.service_category.ilike(_like(filters.search)),
                )
            )
        if filters.vendor_id is not None:
            conditions.append(Service.vendor_id == filters.vendor_id)
        if filters.active is not None:
            conditions.append(Service.is_active.is_(filters.active))

        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            total = await session.scalar(select(func.count()).select_from(Service).where(*conditions))
            result = await session.execute(
                select(Service)
                .where(*conditions)
                .order_by(Service.created_at.desc())
                .offset(page_offset(page, limit))
                .limit(limit)
            )
            services = result.scalars().all()
            return Page(
                items=[ServiceDTO.from_service(s) for s in services],
                page=page,
                limit=limit,
                total_count=total or 0,
            )

    async def search_packages(self, filters: ListingFilters, page: int, limit: int) -> Page[PackageDTO]:
        conditions = []
        if filters.event_type:
            conditions.append(Package.event_type.ilike(filters.event_type.strip()))
        if filters.min_price is not None:
            conditions.append(Package.price >= filters.min_price)
        if filters.max_price is not None:
            conditions.append(Package.price <= filters.max_price)
        if filters.location:
            conditions.append(
                or_(Package.city.ilike(_like(filters.location)), Package.district.ilike(_like(filters.location)))
            )
        if filters.search:
            conditions.append(
                or_(
                    Package.title.ilike(_like(filters.search)),
                    Package.description.ilike(_like(filters.search)),
                    Package.event_type.ilike(_like(filters.search)),
                )
            )
        if filters.vendor_id is not None:
            conditions.append(Package.vendor_id == filters.vendor_id)
        if filters.active is not None:
            conditions.append(Package.is_active.is_(filters.active))

        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            total = await session.scalar(select(func.count()).select_from(Package).where(*conditions))
            result = await session.execute(
                select(Package)
                .where(*conditions)
                .order_by(Package.created_at.desc())
                .offset(page_offset(page, limit))
                .limit(limit)
            )
            packages = result.scalars().all()
            return Page(
                items=[PackageDTO.from_package(p) for p in packages],
                page=page,
                limit=limit,
                total_count=total or 0,
            )

    async def recommend(self, criteria: RecommendationCriteria, limit: int = RECOMMENDATION_LIMIT) -> RecommendationsDTO:
        approved_vendors = select(User.uuid).where(User.role == Role.VENDOR, User.is_approved.is_(True))

        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            services = await session.execute(
                select(Service)
                .where(
                    Service.is_active.is_(True),
                    Service.event_type.ilike(criteria.event_type.strip()),
                    Service.price_max <= criteria.budget,
                    Service.capacity >= criteria.guest_count,
                    Service.city.ilike(_like(criteria.city)),
                    Service.vendor_id.in_(approved_vendors),
                )
                .order_by(Service.price_max, Service.created_at.desc())
                .limit(limit)
            )
            packages = await session.execute(
                select(Package)
                .where(
                    Package.is_active.is_(True),
                    Package.event_type.ilike(criteria.event_type.strip()),
                    Package.price <= criteria.budget,
                    Package.capacity >= criteria.guest_count,
                    Package.city.ilike(_like(criteria.city)),
                    Package.vendor_id.in_(approved_vendors),
                )
                .order_by(Package.price, Package.created_at.desc())
                .limit(limit)
            )
            return RecommendationsDTO(
                services=[ServiceDTO.from_service(s) for s in services.scalars().all()],
                packages=[PackageDTO.from_package(p) for p in packages.scalars().all()],
            )
