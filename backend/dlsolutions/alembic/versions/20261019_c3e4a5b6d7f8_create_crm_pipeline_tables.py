"""create crm_deals, crm_tasks and crm_activities tables

Revision ID: c3e4a5b6d7f8
Revises: b2d3f4a5c6e7
Create Date: 2026-10-19 14:10:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "c3e4a5b6d7f8"
down_revision = "b2d3f4a5c6e7"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "crm_deals",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("owner_id", sa.String(255), nullable=False),
        sa.Column(
            "contact_id",
            sa.String(36),
            sa.ForeignKey("crm_contacts.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column("currency", sa.String(3), nullable=False, server_default="EUR"),
        sa.Column("stage", sa.String(20), nullable=False, server_default="prospect"),
        sa.Column("probability", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("expected_close_date", sa.Date(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index(op.f("ix_crm_deals_owner_id"), "crm_deals", ["owner_id"])
    op.create_index(op.f("ix_crm_deals_contact_id"), "crm_deals", ["contact_id"])
    op.create_index(op.f("ix_crm_deals_created_at"), "crm_deals", ["created_at"])

    op.create_table(
        "crm_tasks",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("created_by", sa.String(255), nullable=False),
        sa.Column("assigned_to", sa.String(255), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("priority", sa.String(20), nullable=False, server_default="medium"),
        sa.Column("status", sa.String(20), nullable=False, server_default="todo"),
        sa.Column("related_type", sa.String(20), nullable=True),
        sa.Column("related_id", sa.String(36), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index(op.f("ix_crm_tasks_assigned_to"), "crm_tasks", ["assigned_to"])
    op.create_index(op.f("ix_crm_tasks_due_date"), "crm_tasks", ["due_date"])

    op.create_table(
        "crm_activities",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("related_type", sa.String(20), nullable=False),
        sa.Column("related_id", sa.String(36), nullable=False),
        sa.Column("created_by", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index(op.f("ix_crm_activities_created_by"), "crm_activities", ["created_by"])
    op.create_index(op.f("ix_crm_activities_created_at"), "crm_activities", ["created_at"])


def downgrade() -> None:
    op.drop_index(op.f("ix_crm_activities_created_at"), table_name="crm_activities")
    op.drop_index(op.f("ix_crm_activities_created_by"), table_name="crm_activities")
    op.drop_table("crm_activities")
    op.drop_index(op.f("ix_crm_tasks_due_date"), table_name="crm_tasks")
    op.drop_index(op.f("ix_crm_tasks_assigned_to"), table_name="crm_tasks")
    op.drop_table("crm_tasks")
    op.drop_index(op.f("ix_crm_deals_created_at"), table_name="crm_deals")
    op.drop_index(op.f("ix_crm_deals_contact_id"), table_name="crm_deals")
    op.drop_index(op.f("ix_crm_deals_owner_id"), table_name="crm_deals")
    op.drop_table("crm_deals")
