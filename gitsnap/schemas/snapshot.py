"""
Git snapshot response schemas.

GET /snapshots                       → SnapshotListResponse
GET /snapshot/by-message/{message_id} → SnapshotResponse
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class SnapshotOut(BaseModel):
    """A single git snapshot record."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    workspace_path: str
    conversation_id: Optional[str] = None
    head_sha: str = Field(description="HEAD commit at capture time.")
    stash_sha: Optional[str] = Field(
        default=None,
        description="Stash commit holding uncommitted work, if any.",
    )
    reason: str = Field(description='Trigger label, e.g. "pre-agent".', examples=["pre-agent"])
    has_changes: bool = Field(description="True if the working tree was dirty.")
    message_id: Optional[str] = None
    created_at: int = Field(description="Epoch milliseconds.", examples=[1760000000000])


class SnapshotListResponse(BaseModel):
    ok: bool = True
    data: list[SnapshotOut] = Field(description="Newest first.")


class SnapshotResponse(BaseModel):
    ok: bool = True
    data: SnapshotOut
