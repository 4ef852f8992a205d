"""Initial schema: member, donation, content tables

Revision ID: 001_initial
Revises:
Create Date: 2025-09-01 00:00:00.000000

"""

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "001_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "member",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=20), nullable=True),
        sa.Column("birth_date", sa.Date(), nullable=True),
        sa.Column("subscription_plan", sa.String(length=50), nullable=True),
        sa.Column("subscription_id", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_member_email", "member", ["email"], unique=True)
    op.create_index("ix_member_subscription_id", "member", ["subscription_id"])

    # Donations reference members by email value only, no foreign key
    op.create_table(
        "donation",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("donor_name", sa.String(length=255), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("amount", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("transaction_id", sa.String(length=255), nullable=False),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_donation_transaction_id", "donation", ["transaction_id"], unique=True)
    op.create_index("ix_donation_email", "donation", ["email"])

    op.create_table(
        "content",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("section", sa.String(), nullable=False),
        sa.Column("subtype", sa.String(), nullable=True),
        sa.Column("title", sa.String(length=1000), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("subtitle", sa.Text(), nullable=True),
        sa.Column("image_data", sa.LargeBinary(), nullable=True),
        sa.Column("image_type", sa.String(), nullable=True),
        sa.Column("button_text1", sa.String(), nullable=True),
        sa.Column("button_url1", sa.String(), nullable=True),
        sa.Column("button_text2", sa.String(), nullable=True),
        sa.Column("button_url2", sa.String(), nullable=True),
        sa.Column("date", sa.String(), nullable=True),
        sa.Column("link", sa.String(), nullable=True),
        sa.Column("published", sa.Boolean(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_content_section", "content", ["section"])


def downgrade() -> None:
    op.drop_index("ix_content_section", table_name="content")
    op.drop_table("content")
    op.drop_index("ix_donation_email", table_name="donation")
    op.drop_index("ix_donation_transaction_id", table_name="donation")
    op.drop_table("donation")
    op.drop_index("ix_member_subscription_id", table_name="member")
    op.drop_index("ix_member_email", table_name="member")
    op.drop_table("member")
