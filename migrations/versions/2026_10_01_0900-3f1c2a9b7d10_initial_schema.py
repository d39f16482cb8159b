"""initial_schema

Revision ID: 3f1c2a9b7d10
Revises:
Create Date: 2026-10-01 09:00:00.000000

"""

import sqlalchemy as sa
import sqlalchemy_utils
from alembic import op

# revision identifiers, used by Alembic.
revision = "3f1c2a9b7d10"
down_revision = None
branch_labels = None
depends_on = None


def uuid_column(name: str, **kwargs) -> sa.Column:
    return sa.Column(name, sqlalchemy_utils.UUIDType(binary=False), **kwargs)


def timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.current_timestamp(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.current_timestamp(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        uuid_column("uuid", nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("hashed_password", sa.String(length=255), nullable=True),
        sa.Column("role", sa.Enum("User", "Vendor", "Admin", name="user_role_enum"), nullable=False),
        sa.Column("business_registration", sa.String(length=255), nullable=True),
        sa.Column("is_approved", sa.Boolean(), nullable=False),
        sa.Column("approved_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("approval_reason", sa.Text(), nullable=True),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_role", "users", ["role"])
    op.create_index("ix_users_created_at", "users", ["created_at"])

    op.create_table(
        "catalog_services",
        uuid_column("uuid", nullable=False),
        uuid_column("vendor_id", nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("event_type", sa.String(length=50), nullable=False),
        sa.Column("service_category", sa.String(length=100), nullable=False),
        sa.Column("price_min", sa.Numeric(12, 2), nullable=False),
        sa.Column("price_max", sa.Numeric(12, 2), nullable=False),
        sa.Column("city", sa.String(length=100), nullable=True),
        sa.Column("district", sa.String(length=100), nullable=True),
        sa.Column("capacity", sa.Integer(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *timestamps(),
        sa.ForeignKeyConstraint(["vendor_id"], ["users.uuid"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index("ix_catalog_services_vendor_id", "catalog_services", ["vendor_id"])
    op.create_index("ix_catalog_services_event_type", "catalog_services", ["event_type"])
    op.create_index("ix_catalog_services_service_category", "catalog_services", ["service_category"])
    op.create_index("ix_catalog_services_is_active", "catalog_services", ["is_active"])
    op.create_index("ix_catalog_services_created_at", "catalog_services", ["created_at"])

    op.create_table(
        "catalog_packages",
        uuid_column("uuid", nullable=False),
        uuid_column("vendor_id", nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("event_type", sa.String(length=50), nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("services", sa.JSON(), nullable=False),
        sa.Column("city", sa.String(length=100), nullable=True),
        sa.Column("district", sa.String(length=100), nullable=True),
        sa.Column("capacity", sa.Integer(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *timestamps(),
        sa.ForeignKeyConstraint(["vendor_id"], ["users.uuid"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index("ix_catalog_packages_vendor_id", "catalog_packages", ["vendor_id"])
    op.create_index("ix_catalog_packages_event_type", "catalog_packages", ["event_type"])
    op.create_index("ix_catalog_packages_is_active", "catalog_packages", ["is_active"])
    op.create_index("ix_catalog_packages_created_at", "catalog_packages", ["created_at"])

    op.create_table(
        "event_plans",
        uuid_column("uuid", nullable=False),
        uuid_column("owner_id", nullable=False),
        sa.Column(
            "status",
            sa.Enum("Planning", "Confirmed", "Completed", "Cancelled", name="event_plan_status_enum"),
            nullable=False,
        ),
        sa.Column("event_type", sa.String(length=50), nullable=True),
        sa.Column("budget", sa.Numeric(12, 2), nullable=True),
        sa.Column("guest_count", sa.Integer(), nullable=True),
        sa.Column("preferred_city", sa.String(length=100), nullable=True),
        sa.Column("preferred_district", sa.String(length=100), nullable=True),
        sa.Column("event_date", sa.Date(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("total_cost", sa.Numeric(12, 2), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False),
        *timestamps(),
        sa.ForeignKeyConstraint(["owner_id"], ["users.uuid"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index("ix_event_plans_owner_id", "event_plans", ["owner_id"])
    op.create_index("ix_event_plans_status", "event_plans", ["status"])
    op.create_index("ix_event_plans_created_at", "event_plans", ["created_at"])
    op.create_index(
        "uq_event_plans_owner_planning",
        "event_plans",
        ["owner_id"],
        unique=True,
        sqlite_where=sa.text("status = 'Planning'"),
        postgresql_where=sa.text("status = 'Planning'"),
    )

    op.create_table(
        "cart_service_lines",
        uuid_column("uuid", nullable=False),
        uuid_column("plan_id", nullable=False),
        uuid_column("service_id", nullable=False),
        uuid_column("vendor_id", nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *timestamps(),
        sa.ForeignKeyConstraint(["plan_id"], ["event_plans.uuid"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["service_id"], ["catalog_services.uuid"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["vendor_id"], ["users.uuid"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("uuid"),
        sa.UniqueConstraint("plan_id", "service_id", "vendor_id", name="uq_cart_service_lines_plan_item"),
    )
    op.create_index("ix_cart_service_lines_plan_id", "cart_service_lines", ["plan_id"])
    op.create_index("ix_cart_service_lines_service_id", "cart_service_lines", ["service_id"])
    op.create_index("ix_cart_service_lines_vendor_id", "cart_service_lines", ["vendor_id"])
    op.create_index("ix_cart_service_lines_created_at", "cart_service_lines", ["created_at"])

    op.create_table(
        "cart_package_lines",
        uuid_column("uuid", nullable=False),
        uuid_column("plan_id", nullable=False),
        uuid_column("package_id", nullable=False),
        uuid_column("vendor_id", nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *timestamps(),
        sa.ForeignKeyConstraint(["plan_id"], ["event_plans.uuid"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["package_id"], ["catalog_packages.uuid"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["vendor_id"], ["users.uuid"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("uuid"),
        sa.UniqueConstraint("plan_id", "package_id", "vendor_id", name="uq_cart_package_lines_plan_item"),
    )
    op.create_index("ix_cart_package_lines_plan_id", "cart_package_lines", ["plan_id"])
    op.create_index("ix_cart_package_lines_package_id", "cart_package_lines", ["package_id"])
    op.create_index("ix_cart_package_lines_vendor_id", "cart_package_lines", ["vendor_id"])
    op.create_index("ix_cart_package_lines_created_at", "cart_package_lines", ["created_at"])

    op.create_table(
        "testimonials",
        uuid_column("uuid", nullable=False),
        uuid_column("author_id", nullable=True),
        sa.Column("customer_name", sa.String(length=255), nullable=False),
        sa.Column("customer_role", sa.String(length=255), nullable=False),
        sa.Column("event_type", sa.String(length=50), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("testimonial", sa.String(length=500), nullable=False),
        uuid_column("vendor_id", nullable=True),
        sa.Column("is_approved", sa.Boolean(), nullable=False),
        *timestamps(),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="ck_testimonials_rating"),
        sa.ForeignKeyConstraint(["author_id"], ["users.uuid"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["vendor_id"], ["users.uuid"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index("ix_testimonials_author_id", "testimonials", ["author_id"])
    op.create_index("ix_testimonials_vendor_id", "testimonials", ["vendor_id"])
    op.create_index("ix_testimonials_event_type", "testimonials", ["event_type"])
    op.create_index("ix_testimonials_is_approved", "testimonials", ["is_approved"])
    op.create_index("ix_testimonials_created_at", "testimonials", ["created_at"])

    op.create_table(
        "contact_messages",
        uuid_column("uuid", nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("subject", sa.String(length=255), nullable=False),
        sa.Column("message", sa.String(length=1000), nullable=False),
        sa.Column(
            "status",
            sa.Enum("New", "In Progress", "Resolved", "Closed", name="contact_status_enum"),
            nullable=False,
        ),
        sa.Column("admin_notes", sa.Text(), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index("ix_contact_messages_status", "contact_messages", ["status"])
    op.create_index("ix_contact_messages_created_at", "contact_messages", ["created_at"])


def downgrade() -> None:
    op.drop_table("contact_messages")
    op.drop_table("testimonials")
    op.drop_table("cart_package_lines")
    op.drop_table("cart_service_lines")
    op.drop_index("uq_event_plans_owner_planning", table_name="event_plans")
    op.drop_table("event_plans")
    op.drop_table("catalog_packages")
    op.drop_table("catalog_services")
    op.drop_table("users")
    sa.Enum(name="contact_status_enum").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="event_plan_status_enum").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="user_role_enum").drop(op.get_bind(), checkfirst=True)
