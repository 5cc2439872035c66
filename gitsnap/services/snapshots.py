"""
Snapshot query service: read-only access to recorded git snapshots.
"""
from __future__ import annotations

from typing import Optional

from gitsnap.core.config import settings
from gitsnap.core.errors import MissingParameterError, SnapshotNotFoundError
from gitsnap.core.logging import logger
from gitsnap.models.git_snapshot import GitSnapshot
from gitsnap.services.snapshot_repository import SnapshotRepository


class SnapshotService:
    def __init__(self, repository: SnapshotRepository, default_limit: Optional[int] = None):
        self.repository = repository
        self.default_limit = default_limit or settings.SNAPSHOT_LIST_LIMIT

    def list_snapshots(
        self, path: Optional[str], limit: Optional[int] = None
    ) -> list[GitSnapshot]:
        """
        Snapshots recorded for `path`, newest first.

        An absent or empty path is rejected before the repository is touched.
        Snapshots sharing a created_at come back in whatever order storage yields.
        """
        if not path:
            logger.info("snapshot list rejected", extra={"reason": "missing path"})
            raise MissingParameterError("path")

        rows = self.repository.list_for_workspace(path, limit or self.default_limit)
        logger.debug(
            "snapshot list",
            extra={"workspace_path": path, "count": len(rows)},
        )
        return rows

    def snapshot_for_message(self, message_id: str) -> GitSnapshot:
        snap = self.repository.latest_for_message(message_id)
        if snap is None:
            raise SnapshotNotFoundError(message_id=message_id)
        return snap
