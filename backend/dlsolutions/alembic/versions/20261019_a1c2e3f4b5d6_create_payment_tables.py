"""create payment_methods and customer_links tables

Revision ID: a1c2e3f4b5d6
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "a1c2e3f4b5d6"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "customer_links",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("stripe_customer_id", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index(
        op.f("ix_customer_links_user_id"), "customer_links", ["user_id"], unique=True
    )

    op.create_table(
        "payment_methods",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("stripe_card_id", sa.String(255), nullable=False),
        sa.Column("card_number", sa.String(4), nullable=False),
        sa.Column("holder_name", sa.String(255), nullable=False),
        sa.Column("brand", sa.String(50), nullable=True),
        sa.Column("expiry", sa.String(5), nullable=False),
        sa.Column("is_default", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index(op.f("ix_payment_methods_user_id"), "payment_methods", ["user_id"])
    op.create_index(op.f("ix_payment_methods_created_at"), "payment_methods", ["created_at"])


def downgrade() -> None:
    op.drop_index(op.f("ix_payment_methods_created_at"), table_name="payment_methods")
    op.drop_index(op.f("ix_payment_methods_user_id"), table_name="payment_methods")
    op.drop_table("payment_methods")
    op.drop_index(op.f("ix_customer_links_user_id"), table_name="customer_links")
    op.drop_table("customer_links")
