from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends

from .. import config
from ..media import CloudinaryGateway, MediaUploader, UploadGateway
from ..services.activity import ActivityLog
from ..store import JsonDocumentStore


def get_settings() -> config.Settings:
    return config.get_settings()


Settings = Annotated[config.Settings, Depends(get_settings)]


@lru_cache()
def _store_for(path: str) -> JsonDocumentStore:
    # One store (and so one write lock) per backing file for the whole process.
    return JsonDocumentStore(path)


def get_store(settings: Settings) -> JsonDocumentStore:
    return _store_for(str(Path(settings.DATA_FILE).resolve()))


Store = Annotated[JsonDocumentStore, Depends(get_store)]


def get_activity_log(store: Store, settings: Settings) -> ActivityLog:
    return ActivityLog(store, limit=settings.ACTIVITY_LOG_LIMIT, actor=settings.ACTIVITY_ACTOR)


ActivityFeed = Annotated[ActivityLog, Depends(get_activity_log)]


def get_gateway(settings: Settings) -> UploadGateway:
    return CloudinaryGateway(
        settings.CLOUDINARY_CLOUD_NAME,
        settings.CLOUDINARY_API_KEY,
        settings.CLOUDINARY_API_SECRET,
        api_url=settings.CLOUDINARY_API_URL,
        timeout=settings.UPLOAD_TIMEOUT_SECONDS,
    )


def get_uploader(gateway: Annotated[UploadGateway, Depends(get_gateway)], settings: Settings) -> MediaUploader:
    return MediaUploader(gateway, Path(settings.UPLOAD_DIR))


Uploader = Annotated[MediaUploader, Depends(get_uploader)]
