"""
Snapshot storage behind a narrow repository interface.

The query service only ever talks to a `SnapshotRepository`; the SQL
implementation is wired in by the router dependency and the in-memory
one stands in for it in tests and local tooling.

Public API
----------
SnapshotRepository                 (Protocol)
SqlSnapshotRepository(db)          -> SQLAlchemy Session backed
InMemorySnapshotRepository()       -> dict backed, no database
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gitsnap.core.errors import StorageError
from gitsnap.core.logging import logger
from gitsnap.models.git_snapshot import GitSnapshot


class SnapshotRepository(Protocol):
    def list_for_workspace(self, workspace_path: str, limit: int) -> list[GitSnapshot]:
        """Snapshots for one workspace, newest `created_at` first."""
        ...

    def latest_for_message(self, message_id: str) -> Optional[GitSnapshot]:
        ...

    def add(self, snapshot: GitSnapshot) -> GitSnapshot:
        ...

    def clear(self) -> int:
        ...


# ---------------------------------------------------------------------------
# SQLAlchemy
# ---------------------------------------------------------------------------

class SqlSnapshotRepository:
    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _guard(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(
                "snapshot storage failure",
                extra={"operation": operation},
                exc_info=exc,
            )
            raise StorageError(f"Snapshot storage failed during {operation}.") from exc

    def list_for_workspace(self, workspace_path: str, limit: int) -> list[GitSnapshot]:
        with self._guard("list_for_workspace"):
            return (
                self.db.query(GitSnapshot)
                .filter(GitSnapshot.workspace_path == workspace_path)
                .order_by(GitSnapshot.created_at.desc())
                .limit(limit)
                .all()
            )

    def latest_for_message(self, message_id: str) -> Optional[GitSnapshot]:
        with self._guard("latest_for_message"):
            return (
                self.db.query(GitSnapshot)
                .filter(GitSnapshot.message_id == message_id)
                .order_by(GitSnapshot.created_at.desc())
                .first()
            )

    def add(self, snapshot: GitSnapshot) -> GitSnapshot:
        with self._guard("add"):
            self.db.add(snapshot)
            self.db.commit()
            self.db.refresh(snapshot)
            return snapshot

    def clear(self) -> int:
        with self._guard("clear"):
            deleted = self.db.query(GitSnapshot).delete()
            self.db.commit()
            return deleted


# ---------------------------------------------------------------------------
# In-memory
# ---------------------------------------------------------------------------

class InMemorySnapshotRepository:
    def __init__(self, snapshots: Optional[list[GitSnapshot]] = None):
        self._rows: dict[str, GitSnapshot] = {}
        for snap in snapshots or []:
            self.add(snap)

    def list_for_workspace(self, workspace_path: str, limit: int) -> list[GitSnapshot]:
        rows = [s for s in self._rows.values() if s.workspace_path == workspace_path]
        rows.sort(key=lambda s: s.created_at, reverse=True)
        return rows[:limit]

    def latest_for_message(self, message_id: str) -> Optional[GitSnapshot]:
        rows = [s for s in self._rows.values() if s.message_id == message_id]
        return max(rows, key=lambda s: s.created_at, default=None)

    def add(self, snapshot: GitSnapshot) -> GitSnapshot:
        if snapshot.id in self._rows:
            raise StorageError(f"Snapshot {snapshot.id} already exists.")
        self._rows[snapshot.id] = snapshot
        return snapshot

    def clear(self) -> int:
        deleted = len(self._rows)
        self._rows.clear()
        return deleted
