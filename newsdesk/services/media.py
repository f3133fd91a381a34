from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import UploadFile

from ..errors import ValidationError
from ..identifiers import next_id, utc_timestamp
from ..media import IMAGE_ONLY, Attachment, MediaUploader
from ..schemas import Media, MediaInput
from ..store import JsonDocumentStore
from . import records
from .activity import ActivityLog, deleted, published, updated

logger = logging.getLogger(__name__)

LABEL = "Media"
KIND = "media"
FOLDER = "media"


def list_media(store: JsonDocumentStore) -> List[Media]:
    return store.load().media


async def create_media(
    store: JsonDocumentStore,
    activity: ActivityLog,
    uploader: MediaUploader,
    payload: MediaInput,
    file: Optional[UploadFile],
) -> Media:
    attachment = Attachment("file", file, IMAGE_ONLY, FOLDER)
    if not attachment.present:
        raise ValidationError("No file uploaded")
    urls = await uploader.upload(attachment)

    item = Media(
        id=next_id(),
        **payload.provided(),
        url=urls["file"],
        type=file.content_type,
        timestamp=utc_timestamp(),
    )
    with store.transaction() as document:
        document.media.append(item)
        activity.append(document, KIND, published("media item", item.title), status="published")

    logger.info("Created media item %s", item.id)
    return item


async def update_media(
    store: JsonDocumentStore,
    activity: ActivityLog,
    uploader: MediaUploader,
    item_id: int,
    payload: MediaInput,
    file: Optional[UploadFile] = None,
) -> Media:
    records.find_index(store.load().media, item_id, LABEL)
    urls = await uploader.upload(Attachment("file", file, IMAGE_ONLY, FOLDER))

    changes = payload.provided()
    if "file" in urls:
        changes["url"] = urls["file"]
        changes["type"] = file.content_type

    with store.transaction() as document:
        item = records.replace(document.media, item_id, LABEL, changes)
        activity.append(document, KIND, updated("media item", item.title), status="updated")
    return item


def delete_media(store: JsonDocumentStore, activity: ActivityLog, item_id: int) -> Media:
    with store.transaction() as document:
        item = records.remove(document.media, item_id, LABEL)
        activity.append(document, KIND, deleted("media item", item.title), status="deleted")
    return item
