"""Shared fixtures for the upload app tests."""

from __future__ import annotations

import io

import pytest

from app import create_app
from observability import metrics


@pytest.fixture(autouse=True)
def _reset_metrics():
    metrics.reset()
    yield
    metrics.reset()


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def app(upload_dir, tmp_path):
    """Application wired to a throwaway upload and debug-log directory."""

    return create_app({"UPLOAD_DIR": str(upload_dir), "DEBUG_LOG_DIR": str(tmp_path / "logs")})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def post_file(client):
    def _post(name, content: bytes):
        return client.post(
            "/api/upload",
            data={"file": (io.BytesIO(content), name)},
            content_type="multipart/form-data",
        )

    return _post
