"""create git_snapshots table

Revision ID: 0001
Revises:
Create Date: 2026-10-18

One row per captured workspace state. created_at is epoch milliseconds.
Append-only; downgrade drops the table cleanly.
"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "git_snapshots",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("workspace_path", sa.String(1024), nullable=False),
        sa.Column("conversation_id", sa.String(64), nullable=True),
        sa.Column("head_sha", sa.String(64), nullable=False),
        sa.Column("stash_sha", sa.String(64), nullable=True),
        sa.Column("reason", sa.String(64), nullable=False, server_default="pre-agent"),
        sa.Column("has_changes", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("message_id", sa.String(64), nullable=True),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
    )
    op.create_index("ix_git_snapshots_workspace_path", "git_snapshots", ["workspace_path"])
    op.create_index("ix_git_snapshots_message_id", "git_snapshots", ["message_id"])
    op.create_index("ix_git_snapshots_created_at", "git_snapshots", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_git_snapshots_created_at", table_name="git_snapshots")
    op.drop_index("ix_git_snapshots_message_id", table_name="git_snapshots")
    op.drop_index("ix_git_snapshots_workspace_path", table_name="git_snapshots")
    op.drop_table("git_snapshots")
