"""
Tests for error handling: structured error responses, HTTP status codes,
and the custom exception classes.
"""
import pytest
from fastapi.testclient import TestClient

from gitsnap.core.errors import (
    MissingParameterError,
    SnapshotNotFoundError,
    StorageError,
)
from gitsnap.db.base import get_db
from gitsnap.main import app
from gitsnap.routers.git import get_snapshot_repository


# ---------------------------------------------------------------------------
# Unit tests on exception classes
# ---------------------------------------------------------------------------

class TestExceptionClasses:
    def test_missing_parameter_error(self):
        err = MissingParameterError("path")
        assert err.http_status == 400
        assert err.code == "MISSING_PARAMETER"
        assert "path" in err.message
        d = err.to_dict()
        assert d["ok"] is False
        assert d["details"]["parameter"] == "path"

    def test_snapshot_not_found_error(self):
        err = SnapshotNotFoundError(message_id="msg-9")
        assert err.http_status == 404
        assert err.code == "SNAPSHOT_NOT_FOUND"
        assert "msg-9" in err.message

    def test_storage_error(self):
        err = StorageError()
        assert err.http_status == 500
        assert err.code == "STORAGE_ERROR"

    def test_to_dict_without_details(self):
        d = StorageError().to_dict()
        assert d["ok"] is False
        assert "code" in d
        assert "message" in d
        # details should not be in dict when empty
        assert "details" not in d


# ---------------------------------------------------------------------------
# Integration tests on HTTP error responses
# ---------------------------------------------------------------------------

class _FailingRepository:
    def list_for_workspace(self, workspace_path, limit):
        raise StorageError("Snapshot storage failed during list_for_workspace.")

    def latest_for_message(self, message_id):
        raise RuntimeError("boom")


class TestStorageFailures:
    def test_storage_error_returns_500_envelope(self, client):
        app.dependency_overrides[get_snapshot_repository] = lambda: _FailingRepository()
        r = client.get("/snapshots?path=/test")
        assert r.status_code == 500
        body = r.json()
        assert body["ok"] is False
        assert body["code"] == "STORAGE_ERROR"

    def test_unexpected_error_returns_internal_error(self):
        app.dependency_overrides[get_snapshot_repository] = lambda: _FailingRepository()
        try:
            with TestClient(app, raise_server_exceptions=False) as c:
                r = c.get("/snapshot/by-message/msg-1")
        finally:
            app.dependency_overrides.clear()
        assert r.status_code == 500
        body = r.json()
        assert body["ok"] is False
        assert body["code"] == "INTERNAL_ERROR"


class TestValidationErrors:
    def test_bad_limit_lists_field_errors(self, client):
        r = client.get("/snapshots?path=/test&limit=0")
        assert r.status_code == 422
        body = r.json()
        assert body["ok"] is False
        assert body["code"] == "VALIDATION_ERROR"
        errors = body["details"]["errors"]
        assert isinstance(errors, list)
        assert errors[0]["field"] == "limit"
