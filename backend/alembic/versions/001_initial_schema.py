"""Initial schema - agents and customer tables.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "agents",
        sa.Column("AGENT_CODE", sa.String(6), primary_key=True),
        sa.Column("AGENT_NAME", sa.String(40), nullable=True),
        sa.Column("WORKING_AREA", sa.String(35), nullable=True),
        sa.Column("COMMISSION", sa.Numeric(10, 2), nullable=True),
        sa.Column("PHONE_NO", sa.String(15), nullable=True),
        sa.Column("COUNTRY", sa.String(25), nullable=True),
    )

    op.create_table(
        "customer",
        sa.Column("CUST_CODE", sa.String(6), primary_key=True),
        sa.Column("CUST_NAME", sa.String(40), nullable=False),
        sa.Column("CUST_CITY", sa.String(35), nullable=True),
        sa.Column("WORKING_AREA", sa.String(35), nullable=False),
        sa.Column("CUST_COUNTRY", sa.String(20), nullable=False),
        sa.Column("GRADE", sa.String(10), nullable=True),
        sa.Column("OPENING_AMT", sa.Numeric(12, 2), nullable=False),
        sa.Column("RECEIVE_AMT", sa.Numeric(12, 2), nullable=False),
        sa.Column("PAYMENT_AMT", sa.Numeric(12, 2), nullable=False),
        sa.Column("OUTSTANDING_AMT", sa.Numeric(12, 2), nullable=False),
        sa.Column("PHONE_NO", sa.String(17), nullable=False),
        sa.Column(
            "AGENT_CODE", sa.String(6),
            sa.ForeignKey("agents.AGENT_CODE"), nullable=False,
        ),
    )


def downgrade() -> None:
    op.drop_table("customer")
    op.drop_table("agents")
