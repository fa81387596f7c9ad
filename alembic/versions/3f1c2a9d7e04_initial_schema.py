"""initial_schema

Revision ID: 3f1c2a9d7e04
Revises:
Create Date: 2026-10-19 09:12:31.402118

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7e04"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

user_role = sa.Enum("ADMIN", "STAFF", name="userrole")
stay_status = sa.Enum("CHECKED_IN", "CHECKED_OUT", "CANCELLED", name="staystatus")
change_operation = sa.Enum("INSERT", "UPDATE", "DELETE", name="changeoperation")


def upgrade() -> None:
    """Create every table of the inn schema."""

    op.create_table(
        "users",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("full_name", sa.String(), nullable=False),
        sa.Column("hashed_password", sa.String(), nullable=False),
        sa.Column("role", user_role, nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "customers",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("birth_date", sa.Date(), nullable=False),
        sa.Column("national_id", sa.String(14), nullable=False, unique=True),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=False),
        sa.Column("state", sa.String(2), nullable=False),
        sa.Column("city", sa.String(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_customers_name", "customers", ["name"])

    op.create_table(
        "accommodation_types",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.Text()),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )

    op.create_table(
        "accommodations",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("number", sa.String(), nullable=False, unique=True),
        sa.Column("nightly_rate", sa.Numeric(10, 2), nullable=False),
        sa.Column("max_occupancy", sa.Integer(), nullable=False),
        sa.Column(
            "type_id",
            sa.String(36),
            sa.ForeignKey("accommodation_types.id"),
            nullable=False,
        ),
        sa.Column("has_minibar", sa.Boolean(), nullable=False),
        sa.Column("has_parking", sa.Boolean(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )

    op.create_table(
        "minibar_items",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("unit_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )

    op.create_table(
        "stays",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column(
            "customer_id", sa.String(36), sa.ForeignKey("customers.id"), nullable=False
        ),
        sa.Column(
            "accommodation_id",
            sa.String(36),
            sa.ForeignKey("accommodations.id"),
            nullable=False,
        ),
        sa.Column("check_in_at", sa.DateTime(), nullable=False),
        sa.Column("check_out_at", sa.DateTime()),
        sa.Column("nightly_rate", sa.Numeric(10, 2), nullable=False),
        sa.Column("status", stay_status, nullable=False),
        sa.Column("notes", sa.Text()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("idx_stays_status", "stays", ["status"])
    # At most one checked-in stay per accommodation
    op.create_index(
        "uq_stays_accommodation_checked_in",
        "stays",
        ["accommodation_id"],
        unique=True,
        postgresql_where=sa.text("status = 'CHECKED_IN'"),
        sqlite_where=sa.text("status = 'CHECKED_IN'"),
    )

    op.create_table(
        "minibar_consumptions",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("stay_id", sa.String(36), sa.ForeignKey("stays.id"), nullable=False),
        sa.Column(
            "item_id", sa.String(36), sa.ForeignKey("minibar_items.id"), nullable=False
        ),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("unit_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("total", sa.Numeric(10, 2), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index(
        "ix_minibar_consumptions_stay_id", "minibar_consumptions", ["stay_id"]
    )

    op.create_table(
        "change_logs",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("actor_id", sa.String(36), nullable=False),
        sa.Column("table_name", sa.String(), nullable=False),
        sa.Column("operation", change_operation, nullable=False),
        sa.Column("row_id", sa.String(36), nullable=False),
        sa.Column("before", sa.JSON()),
        sa.Column("after", sa.JSON()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_change_logs_actor_id", "change_logs", ["actor_id"])
    op.create_index("ix_change_logs_created_at", "change_logs", ["created_at"])


def downgrade() -> None:
    """Drop the inn schema."""

    op.drop_table("change_logs")
    op.drop_table("minibar_consumptions")
    op.drop_index("uq_stays_accommodation_checked_in", table_name="stays")
    op.drop_table("stays")
    op.drop_table("minibar_items")
    op.drop_table("accommodations")
    op.drop_table("accommodation_types")
    op.drop_table("customers")
    op.drop_table("users")

    bind = op.get_bind()
    change_operation.drop(bind, checkfirst=True)
    stay_status.drop(bind, checkfirst=True)
    user_role.drop(bind, checkfirst=True)
