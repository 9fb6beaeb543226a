"""initial schema: users, prompts, journal entries, events

Revision ID: 20261019_initial_schema
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261019_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "user",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("streak", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_entry_date", sa.Date(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_user_email", "user", ["email"], unique=True)

    op.create_table(
        "prompt",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("category", sa.String(length=64), nullable=True),
        sa.Column("scheduled_date", sa.Date(), nullable=True),
        sa.Column("is_used", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_prompt_is_used_scheduled_date", "prompt", ["is_used", "scheduled_date"])

    op.create_table(
        "journal_entry",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("user_id", sa.String(length=36), sa.ForeignKey("user.id"), nullable=False),
        sa.Column("prompt_id", sa.String(length=36), sa.ForeignKey("prompt.id"), nullable=True),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("entry_date", sa.Date(), nullable=False),
        sa.Column("word_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("mood", sa.String(length=64), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_journal_entry_user_id", "journal_entry", ["user_id"])
    op.create_index("ix_journal_entry_prompt_id", "journal_entry", ["prompt_id"])
    op.create_index("ix_journal_entry_user_entry_date", "journal_entry", ["user_id", "entry_date"])
    op.create_index("ix_journal_entry_user_mood", "journal_entry", ["user_id", "mood"])

    op.create_table(
        "event_record",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("event_type", sa.String(length=128), nullable=False),
        sa.Column("payload", sa.JSON(), nullable=False),
        sa.Column("user_id", sa.String(length=36), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_event_record_event_type", "event_record", ["event_type"])
    op.create_index("ix_event_record_user_id", "event_record", ["user_id"])
    op.create_index("ix_event_record_created_at", "event_record", ["created_at"])
    op.create_index("ix_event_record_user_created_at", "event_record", ["user_id", "created_at"])


def downgrade():
    op.drop_index("ix_event_record_user_created_at", table_name="event_record")
    op.drop_index("ix_event_record_created_at", table_name="event_record")
    op.drop_index("ix_event_record_user_id", table_name="event_record")
    op.drop_index("ix_event_record_event_type", table_name="event_record")
    op.drop_table("event_record")
    op.drop_index("ix_journal_entry_user_mood", table_name="journal_entry")
    op.drop_index("ix_journal_entry_user_entry_date", table_name="journal_entry")
    op.drop_index("ix_journal_entry_prompt_id", table_name="journal_entry")
    op.drop_index("ix_journal_entry_user_id", table_name="journal_entry")
    op.drop_table("journal_entry")
    op.drop_index("ix_prompt_is_used_scheduled_date", table_name="prompt")
    op.drop_table("prompt")
    op.drop_index("ix_user_email", table_name="user")
    op.drop_table("user")
