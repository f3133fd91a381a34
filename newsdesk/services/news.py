from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import UploadFile

from ..identifiers import next_id, utc_timestamp
from ..media import IMAGE_ONLY, Attachment, MediaUploader
from ..schemas import NewsArticle, NewsInput
from ..store import JsonDocumentStore
from . import records
from .activity import ActivityLog, deleted, published, updated

logger = logging.getLogger(__name__)

LABEL = "News"
KIND = "news"
FOLDER = "news"


def list_news(store: JsonDocumentStore) -> List[NewsArticle]:
    return store.load().news


def list_by_category(store: JsonDocumentStore, category: str) -> List[NewsArticle]:
    return records.by_category(store.load().news, category)


async def create_news(
    store: JsonDocumentStore,
    activity: ActivityLog,
    uploader: MediaUploader,
    payload: NewsInput,
    image: Optional[UploadFile] = None,
) -> NewsArticle:
    # An image URL chosen in the admin form wins over an attached file.
    image_url = payload.image_url or ""
    if not image_url:
        urls = await uploader.upload(Attachment("image", image, IMAGE_ONLY, FOLDER))
        image_url = urls.get("image", "")

    article = NewsArticle(
        id=next_id(),
        title=payload.title,
        content=payload.content,
        category=payload.category,
        image_url=image_url,
        timestamp=utc_timestamp(),
    )

    with store.transaction() as document:
        document.news.append(article)
        activity.append(document, KIND, published("article", article.title), status="published")

    logger.info("Created news article %s", article.id)
    return article


async def update_news(
    store: JsonDocumentStore,
    activity: ActivityLog,
    uploader: MediaUploader,
    article_id: int,
    payload: NewsInput,
    image: Optional[UploadFile] = None,
) -> NewsArticle:
    records.find_index(store.load().news, article_id, LABEL)
    urls = await uploader.upload(Attachment("image", image, IMAGE_ONLY, FOLDER))

    changes = payload.provided()
    if "image" in urls:
        changes["image_url"] = urls["image"]

    with store.transaction() as document:
        article = records.replace(document.news, article_id, LABEL, changes)
        activity.append(document, KIND, updated("article", article.title), status="updated")

    logger.info("Updated news article %s", article_id)
    return article


def delete_news(store: JsonDocumentStore, activity: ActivityLog, article_id: int) -> NewsArticle:
    with store.transaction() as document:
        article = records.remove(document.news, article_id, LABEL)
        activity.append(document, KIND, deleted("article", article.title), status="deleted")

    logger.info("Deleted news article %s", article_id)
    return article
