"""Create users, organizations, donations, requests and matches tables

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Initial schema. See irenet/models/ for the per-column notes.

Foreign keys are declared so the database rejects dangling references; a
rejected write reaches the client as a 500 with the driver's message.
matches has no unique constraint on donation_id or request_id.

Rollback: downgrade() drops every table (destructive).
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("user_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role", sa.String(50), nullable=False),
        sa.PrimaryKeyConstraint("user_id"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "organizations",
        sa.Column("org_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("org_name", sa.String(255), nullable=False),
        sa.Column("contact_info", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.user_id"]),
        sa.PrimaryKeyConstraint("org_id"),
    )
    op.create_index("ix_organizations_user_id", "organizations", ["user_id"])

    op.create_table(
        "donations",
        sa.Column("donation_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("donor_id", sa.Integer(), nullable=False),
        sa.Column("item_name", sa.String(255), nullable=False),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(50), nullable=False, server_default=sa.text("'available'")),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.ForeignKeyConstraint(["donor_id"], ["users.user_id"]),
        sa.PrimaryKeyConstraint("donation_id"),
    )
    op.create_index("ix_donations_donor_id", "donations", ["donor_id"])
    op.create_index("idx_donations_status", "donations", ["status"])

    op.create_table(
        "requests",
        sa.Column("request_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("org_id", sa.Integer(), nullable=False),
        sa.Column("item_name", sa.String(255), nullable=False),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(50), nullable=False, server_default=sa.text("'open'")),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.ForeignKeyConstraint(["org_id"], ["organizations.org_id"]),
        sa.PrimaryKeyConstraint("request_id"),
    )
    op.create_index("ix_requests_org_id", "requests", ["org_id"])
    op.create_index("idx_requests_status", "requests", ["status"])

    op.create_table(
        "matches",
        sa.Column("match_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("donation_id", sa.Integer(), nullable=False),
        sa.Column("request_id", sa.Integer(), nullable=False),
        sa.Column("match_date", sa.Date(), nullable=False, server_default=sa.text("CURRENT_DATE")),
        sa.ForeignKeyConstraint(["donation_id"], ["donations.donation_id"]),
        sa.ForeignKeyConstraint(["request_id"], ["requests.request_id"]),
        sa.PrimaryKeyConstraint("match_id"),
    )
    op.create_index("ix_matches_donation_id", "matches", ["donation_id"])
    op.create_index("ix_matches_request_id", "matches", ["request_id"])


def downgrade() -> None:
    """Drop every table, children first. All data is lost."""
    op.drop_index("ix_matches_request_id", table_name="matches")
    op.drop_index("ix_matches_donation_id", table_name="matches")
    op.drop_table("matches")
    op.drop_index("idx_requests_status", table_name="requests")
    op.drop_index("ix_requests_org_id", table_name="requests")
    op.drop_table("requests")
    op.drop_index("idx_donations_status", table_name="donations")
    op.drop_index("ix_donations_donor_id", table_name="donations")
    op.drop_table("donations")
    op.drop_index("ix_organizations_user_id", table_name="organizations")
    op.drop_table("organizations")
    op.drop_table("users")
