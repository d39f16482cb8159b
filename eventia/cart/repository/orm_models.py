from datetime import date
from decimal import Decimal
from uuid import UUID

from sqlalchemy import (
    Date,
    Enum,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from eventia.cart.dtos import EventPlanStatus
from eventia.config.table_names import TableNames
from eventia.models.base import Base, TimeStamp

PLANNING_ONLY = text("status = 'Planning'")


class CartServiceLine(Base, TimeStamp):
    __tablename__ = TableNames.SERVICE_LINES.value
    __table_args__ = (
        UniqueConstraint("plan_id", "service_id", "vendor_id", name="uq_cart_service_lines_plan_item"),
    )

    plan_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.EVENT_PLANS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    service_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.SERVICES.value}.uuid", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    vendor_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.USERS.value}.uuid", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)


class CartPackageLine(Base, TimeStamp):
    __tablename__ = TableNames.PACKAGE_LINES.value
    __table_args__ = (
        UniqueConstraint("plan_id", "package_id", "vendor_id", name="uq_cart_package_lines_plan_item"),
    )

    plan_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.EVENT_PLANS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    package_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.PACKAGES.value}.uuid", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    vendor_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.USERS.value}.uuid", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)


class EventPlan(Base, TimeStamp):
    __tablename__ = TableNames.EVENT_PLANS.value
    __table_args__ = (
        # At most one cart per owner
        Index(
            "uq_event_plans_owner_planning",
            "owner_id",
            unique=True,
            sqlite_where=PLANNING_ONLY,
            postgresql_where=PLANNING_ONLY,
        ),
    )

    owner_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.USERS.value}.uuid", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    status: Mapped[EventPlanStatus] = mapped_column(
        Enum(EventPlanStatus, name="event_plan_status_enum", values_callable=lambda x: [e.value for e in x]),
        default=EventPlanStatus.PLANNING,
        nullable=False,
        index=True,
    )
    event_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    budget: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    guest_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    preferred_city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    preferred_district: Mapped[str | None] = mapped_column(String(100), nullable=True)
    event_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Sum of price * quantity over both line tables, rewritten on every mutation
    total_cost: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=Decimal("0.00"), nullable=False)
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    service_lines: Mapped[list[CartServiceLine]] = relationship(
        CartServiceLine,
        cascade="all, delete-orphan",
        order_by=CartServiceLine.created_at,
        lazy="selectin",
    )
    package_lines: Mapped[list[CartPackageLine]] = relationship(
        CartPackageLine,
        cascade="all, delete-orphan",
        order_by=CartPackageLine.created_at,
        lazy="selectin",
    )

    __mapper_args__ = {"version_id_col": version}

    def recompute_total(self) -> Decimal:
        lines = [*self.service_lines, *self.package_lines]
        self.total_cost = sum((Decimal(line.price) * line.quantity for line in lines), Decimal("0.00"))
        return self.total_cost

    def __repr__(self) -> str:
        return f"<EventPlan {self.uuid} {self.status} owner={self.owner_id}>"
