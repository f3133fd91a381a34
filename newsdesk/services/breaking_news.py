from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import UploadFile

from ..identifiers import next_id, utc_timestamp
from ..media import BREAKING_NEWS_MEDIA, Attachment, MediaUploader
from ..schemas import BreakingNews, BreakingNewsInput
from ..store import JsonDocumentStore
from . import records
from .activity import ActivityLog, deleted, published, updated

logger = logging.getLogger(__name__)

LABEL = "Breaking news"
KIND = "breaking-news"


def _attachments(video: Optional[UploadFile], thumbnail: Optional[UploadFile]) -> List[Attachment]:
    return [
        Attachment("video", video, BREAKING_NEWS_MEDIA, "breaking-news"),
        Attachment("thumbnail", thumbnail, BREAKING_NEWS_MEDIA, "breaking-news-thumbnails"),
    ]


def list_breaking_news(store: JsonDocumentStore) -> List[BreakingNews]:
    return store.load().breaking_news


def list_by_category(store: JsonDocumentStore, category: str) -> List[BreakingNews]:
    return records.by_category(store.load().breaking_news, category)


async def create_breaking_news(
    store: JsonDocumentStore,
    activity: ActivityLog,
    uploader: MediaUploader,
    payload: BreakingNewsInput,
    video: Optional[UploadFile] = None,
    thumbnail: Optional[UploadFile] = None,
) -> BreakingNews:
    urls = await uploader.upload(*_attachments(video, thumbnail))
    item = BreakingNews(
        id=next_id(),
        **payload.provided(),
        video_url=urls.get("video", ""),
        thumbnail=urls.get("thumbnail", ""),
        timestamp=utc_timestamp(),
    )

    with store.transaction() as document:
        # Newest first.
        document.breaking_news.insert(0, item)
        activity.append(document, KIND, published("breaking news", item.headline), status="published")

    logger.info("Created breaking news %s", item.id)
    return item


async def update_breaking_news(
    store: JsonDocumentStore,
    activity: ActivityLog,
    uploader: MediaUploader,
    item_id: int,
    payload: BreakingNewsInput,
    video: Optional[UploadFile] = None,
    thumbnail: Optional[UploadFile] = None,
) -> BreakingNews:
    records.find_index(store.load().breaking_news, item_id, LABEL)
    urls = await uploader.upload(*_attachments(video, thumbnail))

    changes = payload.provided()
    if "video" in urls:
        changes["video_url"] = urls["video"]
    if "thumbnail" in urls:
        changes["thumbnail"] = urls["thumbnail"]

    with store.transaction() as document:
        item = records.replace(document.breaking_news, item_id, LABEL, changes)
        activity.append(document, KIND, updated("breaking news", item.headline), status="updated")

    logger.info("Updated breaking news %s", item_id)
    return item


def delete_breaking_news(store: JsonDocumentStore, activity: ActivityLog, item_id: int) -> BreakingNews:
    with store.transaction() as document:
        item = records.remove(document.breaking_news, item_id, LABEL)
        activity.append(document, KIND, deleted("breaking news", item.headline), status="deleted")

    logger.info("Deleted breaking news %s", item_id)
    return item
