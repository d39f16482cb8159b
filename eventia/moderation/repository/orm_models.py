from uuid import UUID

from sqlalchemy import Boolean, CheckConstraint, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from eventia.config.table_names import TableNames
from eventia.models.base import Base, TimeStamp
from eventia.moderation.dtos import ContactStatus

TESTIMONIAL_MAX_LENGTH = 500
CONTACT_MESSAGE_MAX_LENGTH = 1000


class Testimonial(Base, TimeStamp):
    __tablename__ = TableNames.TESTIMONIALS.value
    __table_args__ = (CheckConstraint("rating BETWEEN 1 AND 5", name="ck_testimonials_rating"),)

    # Cleared when the author account is deleted
    author_id: Mapped[UUID | None] = mapped_column(
        ForeignKey(f"{TableNames.USERS.value}.uuid", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    customer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    customer_role: Mapped[str] = mapped_column(String(255), nullable=False)
    event_type: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    testimonial: Mapped[str] = mapped_column(String(TESTIMONIAL_MAX_LENGTH), nullable=False)
    vendor_id: Mapped[UUID | None] = mapped_column(
        ForeignKey(f"{TableNames.USERS.value}.uuid", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    is_approved: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)


class ContactMessage(Base, TimeStamp):
    __tablename__ = TableNames.CONTACT_MESSAGES.value

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    subject: Mapped[str] = mapped_column(String(255), nullable=False)
    message: Mapped[str] = mapped_column(String(CONTACT_MESSAGE_MAX_LENGTH), nullable=False)
    status: Mapped[ContactStatus] = mapped_column(
        Enum(ContactStatus, name="contact_status_enum", values_callable=lambda x: [e.value for e in x]),
        default=ContactStatus.NEW,
        nullable=False,
        index=True,
    )
    admin_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
