from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

import pytest
from fastapi.testclient import TestClient

from newsdesk.api import dependencies
from newsdesk.config import Settings
from newsdesk.errors import UploadFailed
from newsdesk.main import create_app
from newsdesk.media import MediaUploader, StagedFile, UploadGateway
from newsdesk.services.activity import ActivityLog
from newsdesk.store import JsonDocumentStore


class FakeGateway(UploadGateway):
    """Stands in for the media host; remembers what it was sent."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, str]] = []
        self.fail = False

    async def send(self, staged: StagedFile, folder: str) -> str:
        self.calls.append((staged.original_name, folder))
        if self.fail:
            raise UploadFailed("Failed to upload to media host", details="connection reset")
        return f"https://media.example.com/{folder}/{staged.original_name}"


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        _env_file=None,
        DATA_FILE=str(tmp_path / "data.json"),
        UPLOAD_DIR=str(tmp_path / "uploads"),
        CORS_ORIGINS=["http://testserver"],
    )


@pytest.fixture()
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture()
def store(tmp_path: Path) -> JsonDocumentStore:
    return JsonDocumentStore(tmp_path / "data.json")


@pytest.fixture()
def activity(store: JsonDocumentStore) -> ActivityLog:
    return ActivityLog(store)


@pytest.fixture()
def uploader(gateway: FakeGateway, tmp_path: Path) -> MediaUploader:
    return MediaUploader(gateway, tmp_path / "uploads")


@pytest.fixture()
def client(settings: Settings, gateway: FakeGateway):
    app = create_app(settings)
    app.dependency_overrides[dependencies.get_settings] = lambda: settings
    app.dependency_overrides[dependencies.get_gateway] = lambda: gateway
    with TestClient(app) as test_client:
        yield test_client
