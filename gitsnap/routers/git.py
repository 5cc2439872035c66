"""
Git snapshots router.

GET /snapshots                          — snapshots for a workspace (newest first)
GET /snapshot/by-message/{message_id}   — latest snapshot taken for a chat message
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from gitsnap.db.base import get_db
from gitsnap.models.git_snapshot import GitSnapshot
from gitsnap.schemas.common import ErrorResponse
from gitsnap.schemas.snapshot import SnapshotListResponse, SnapshotOut, SnapshotResponse
from gitsnap.services.snapshot_repository import SnapshotRepository, SqlSnapshotRepository
from gitsnap.services.snapshots import SnapshotService

router = APIRouter(tags=["git"])


def get_snapshot_repository(db: Session = Depends(get_db)) -> SnapshotRepository:
    return SqlSnapshotRepository(db)


def get_snapshot_service(
    repository: SnapshotRepository = Depends(get_snapshot_repository),
) -> SnapshotService:
    return SnapshotService(repository)


def _snap_to_out(snap: GitSnapshot) -> SnapshotOut:
    return SnapshotOut.model_validate(snap)


# ---------------------------------------------------------------------------
# GET /snapshots
# ---------------------------------------------------------------------------

@router.get(
    "/snapshots",
    response_model=SnapshotListResponse,
    summary="List git snapshots for a workspace (newest first)",
    responses={
        200: {"description": "Snapshots ordered by created_at descending; may be empty."},
        400: {"model": ErrorResponse, "description": "`path` query parameter missing."},
    },
)
def list_snapshots(
    path: Optional[str] = Query(
        default=None,
        description="Workspace path the snapshots were taken in. Required.",
        examples=["/home/dev/project"],
    ),
    limit: Optional[int] = Query(
        default=None, ge=1, le=200,
        description="Maximum rows to return. Defaults to SNAPSHOT_LIST_LIMIT.",
    ),
    service: SnapshotService = Depends(get_snapshot_service),
):
    """
    Return the snapshots recorded for `path`, most recent first.

    An empty list is a successful result. A missing `path` is a **400**
    and never reaches the database.
    """
    rows = service.list_snapshots(path=path, limit=limit)
    return SnapshotListResponse(data=[_snap_to_out(s) for s in rows])


# ---------------------------------------------------------------------------
# GET /snapshot/by-message/{message_id}
# ---------------------------------------------------------------------------

@router.get(
    "/snapshot/by-message/{message_id}",
    response_model=SnapshotResponse,
    summary="Latest snapshot taken before a given chat message",
    responses={
        200: {"description": "Snapshot found."},
        404: {"model": ErrorResponse, "description": "No snapshot for this message."},
    },
)
def snapshot_by_message(
    message_id: str,
    service: SnapshotService = Depends(get_snapshot_service),
):
    """Look up the most recent snapshot linked to `message_id`."""
    return SnapshotResponse(data=_snap_to_out(service.snapshot_for_message(message_id)))
