"""
Shared pytest fixtures.

Uses a throwaway SQLite database so no Postgres is required for tests.
The git_snapshots table is emptied before every test.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from gitsnap.db.base import Base, get_db
from gitsnap.main import app
from gitsnap.models.git_snapshot import GitSnapshot

SQLITE_URL = "sqlite:///./test_gitsnap.db"

engine = create_engine(SQLITE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="session", autouse=True)
def create_tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def clear_snapshots():
    db = TestingSessionLocal()
    try:
        db.query(GitSnapshot).delete()
        db.commit()
    finally:
        db.close()


@pytest.fixture()
def db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client(db):
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def insert_snapshot(db):
    """Insert a git_snapshots row directly, the way the snapshot-taking process does."""
    def _insert(
        id: str,
        created_at: int,
        workspace_path: str = "/test",
        head_sha: str = "abc123",
        reason: str = "pre-agent",
        has_changes: bool = False,
        **extra,
    ) -> GitSnapshot:
        snap = GitSnapshot(
            id=id,
            workspace_path=workspace_path,
            head_sha=head_sha,
            reason=reason,
            has_changes=has_changes,
            created_at=created_at,
            **extra,
        )
        db.add(snap)
        db.commit()
        return snap

    return _insert
