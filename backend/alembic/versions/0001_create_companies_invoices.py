"""create companies and invoices

Revision ID: 0001_create_companies_invoices
Revises:
Create Date: 2026-10-19 10:12:40.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001_create_companies_invoices"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "companies",
        sa.Column("code", sa.String(50), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
    )

    op.create_table(
        "invoices",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "comp_code",
            sa.String(50),
            sa.ForeignKey("companies.code", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("amt", sa.Float(), nullable=False),
        sa.Column("paid", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("add_date", sa.Date(), nullable=False, server_default=sa.func.current_date()),
        sa.Column("paid_date", sa.Date(), nullable=True),
    )
    op.create_index("ix_invoices_comp_code", "invoices", ["comp_code"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_invoices_comp_code", table_name="invoices")
    op.drop_table("invoices")
    op.drop_table("companies")
