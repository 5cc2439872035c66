"""
GitSnapshot — point-in-time capture of a workspace's git state.

Written by the snapshot-taking process before an agent run; read-only here.
Append-only: no UPDATE. Rows are only deleted in bulk by test setup.

created_at is epoch milliseconds (integer), the recency key for listing.
stash_sha is set only when the working tree had uncommitted changes.
"""
from sqlalchemy import BigInteger, Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from gitsnap.db.base import Base


class GitSnapshot(Base):
    __tablename__ = "git_snapshots"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    workspace_path: Mapped[str] = mapped_column(String(1024), nullable=False, index=True)
    conversation_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    head_sha: Mapped[str] = mapped_column(String(64), nullable=False)
    stash_sha: Mapped[str | None] = mapped_column(String(64), nullable=True)
    reason: Mapped[str] = mapped_column(String(64), nullable=False, default="pre-agent")
    has_changes: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    message_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    created_at: Mapped[int] = mapped_column(
        BigInteger, nullable=False, index=True,
        comment="Epoch milliseconds at capture time",
    )
