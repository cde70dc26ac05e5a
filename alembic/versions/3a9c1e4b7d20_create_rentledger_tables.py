"""create buildings, units, tenants and bills tables

Revision ID: 3a9c1e4b7d20
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3a9c1e4b7d20"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "buildings",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("owner_id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("address", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_buildings_id", "buildings", ["id"], unique=False)
    op.create_index("ix_buildings_owner_id", "buildings", ["owner_id"], unique=False)

    op.create_table(
        "units",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("owner_id", sa.String(), nullable=False),
        sa.Column("building_id", sa.String(), nullable=False),
        sa.Column("unit_number", sa.String(), nullable=False),
        sa.Column("floor", sa.Integer(), nullable=True),
        sa.Column("rent_amount", sa.Numeric(), nullable=False, server_default="0"),
        sa.Column("status", sa.String(), nullable=False, server_default="vacant"),
        sa.ForeignKeyConstraint(["building_id"], ["buildings.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_units_id", "units", ["id"], unique=False)
    op.create_index("ix_units_owner_id", "units", ["owner_id"], unique=False)
    op.create_index("ix_units_building_id", "units", ["building_id"], unique=False)
    op.create_index("ix_units_unit_number", "units", ["unit_number"], unique=False)

    op.create_table(
        "tenants",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("owner_id", sa.String(), nullable=False),
        sa.Column("unit_id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("move_in_date", sa.Date(), nullable=False),
        sa.Column("move_out_date", sa.Date(), nullable=True),
        sa.Column("status", sa.String(), nullable=False, server_default="active"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["unit_id"], ["units.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_tenants_id", "tenants", ["id"], unique=False)
    op.create_index("ix_tenants_owner_id", "tenants", ["owner_id"], unique=False)
    op.create_index("ix_tenants_unit_id", "tenants", ["unit_id"], unique=False)
    op.create_index("ix_tenants_name", "tenants", ["name"], unique=False)
    op.create_index("ix_tenants_status", "tenants", ["status"], unique=False)

    op.create_table(
        "bills",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("owner_id", sa.String(), nullable=False),
        sa.Column("tenant_id", sa.String(), nullable=False),
        sa.Column("unit_id", sa.String(), nullable=False),
        sa.Column("billing_month", sa.Integer(), nullable=False),
        sa.Column("billing_year", sa.Integer(), nullable=False),
        sa.Column("rent_amount", sa.Numeric(), nullable=False, server_default="0"),
        sa.Column("elec_prev_reading", sa.Numeric(), nullable=False, server_default="0"),
        sa.Column("elec_curr_reading", sa.Numeric(), nullable=False, server_default="0"),
        sa.Column("elec_rate", sa.Numeric(), nullable=False, server_default="0"),
        sa.Column("water_amount", sa.Numeric(), nullable=False, server_default="0"),
        sa.Column("elec_amount", sa.Numeric(), nullable=False, server_default="0"),
        sa.Column("total_amount", sa.Numeric(), nullable=False, server_default="0"),
        sa.Column("status", sa.String(), nullable=False, server_default="unpaid"),
        sa.Column("paid_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["unit_id"], ["units.id"], ondelete="CASCADE"),
        sa.CheckConstraint("billing_month BETWEEN 1 AND 12", name="ck_bills_billing_month"),
        sa.CheckConstraint("billing_year BETWEEN 2000 AND 2100", name="ck_bills_billing_year"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_bills_id", "bills", ["id"], unique=False)
    op.create_index("ix_bills_owner_id", "bills", ["owner_id"], unique=False)
    op.create_index("ix_bills_tenant_id", "bills", ["tenant_id"], unique=False)
    op.create_index("ix_bills_unit_id", "bills", ["unit_id"], unique=False)
    op.create_index("ix_bills_billing_month", "bills", ["billing_month"], unique=False)
    op.create_index("ix_bills_billing_year", "bills", ["billing_year"], unique=False)
    op.create_index("ix_bills_status", "bills", ["status"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("bills")
    op.drop_table("tenants")
    op.drop_table("units")
    op.drop_table("buildings")
