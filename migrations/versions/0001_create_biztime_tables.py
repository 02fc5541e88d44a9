"""Create companies, invoices, industries and companies_industries tables

Revision ID: 0001
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Create companies table
    op.create_table(
        "companies",
        sa.Column("code", sa.Text(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("code", name="companies_pkey"),
    )

    # Create invoices table
    op.create_table(
        "invoices",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("comp_code", sa.Text(), nullable=False),
        sa.Column("amt", sa.Float(), nullable=False),
        sa.Column(
            "paid", sa.Boolean(), server_default=sa.text("false"), nullable=False
        ),
        sa.Column(
            "add_date",
            sa.Date(),
            server_default=sa.text("CURRENT_DATE"),
            nullable=False,
        ),
        sa.Column("paid_date", sa.Date(), nullable=True),
        sa.ForeignKeyConstraint(
            ["comp_code"],
            ["companies.code"],
            name="invoices_comp_code_fkey",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name="invoices_pkey"),
    )

    # Create industries table
    op.create_table(
        "industries",
        sa.Column("code", sa.Text(), nullable=False),
        sa.Column("industry", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("code", name="industries_pkey"),
    )

    # Create companies_industries join table
    op.create_table(
        "companies_industries",
        sa.Column("comp_code", sa.Text(), nullable=False),
        sa.Column("ind_code", sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(
            ["comp_code"],
            ["companies.code"],
            name="companies_industries_comp_code_fkey",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["ind_code"],
            ["industries.code"],
            name="companies_industries_ind_code_fkey",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint(
            "comp_code", "ind_code", name="companies_industries_pkey"
        ),
    )


def downgrade() -> None:
    op.drop_table("companies_industries")
    op.drop_table("industries")
    op.drop_table("invoices")
    op.drop_table("companies")
