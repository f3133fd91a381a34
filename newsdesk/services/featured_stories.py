from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import UploadFile

from ..errors import ValidationError
from ..identifiers import next_id, utc_timestamp
from ..media import IMAGE_ONLY, Attachment, MediaUploader
from ..schemas import FeaturedStory, FeaturedStoryInput
from ..store import JsonDocumentStore
from . import records
from .activity import ActivityLog, deleted, published, updated

logger = logging.getLogger(__name__)

LABEL = "Featured story"
KIND = "featured-story"
FOLDER = "featured-stories"


def parse_priority(raw: Optional[str]) -> Optional[int]:
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValidationError("priority must be an integer", details=raw) from exc


def list_featured_stories(store: JsonDocumentStore) -> List[FeaturedStory]:
    return store.load().featured_stories


def list_by_category(store: JsonDocumentStore, category: str) -> List[FeaturedStory]:
    return records.by_category(store.load().featured_stories, category)


async def create_featured_story(
    store: JsonDocumentStore,
    activity: ActivityLog,
    uploader: MediaUploader,
    payload: FeaturedStoryInput,
    image: Optional[UploadFile] = None,
) -> FeaturedStory:
    priority = parse_priority(payload.priority)
    urls = await uploader.upload(Attachment("image", image, IMAGE_ONLY, FOLDER))

    story = FeaturedStory(
        id=next_id(),
        title=payload.title,
        description=payload.description,
        content=payload.content or payload.description,
        category=payload.category,
        state=payload.state,
        excerpt=payload.excerpt or payload.description,
        image_url=urls.get("image", ""),
        priority=priority if priority is not None else 1,
        views="0",
        timestamp=utc_timestamp(),
    )

    with store.transaction() as document:
        document.featured_stories.append(story)
        activity.append(document, KIND, published("featured story", story.title), status="published")

    logger.info("Created featured story %s", story.id)
    return story


async def update_featured_story(
    store: JsonDocumentStore,
    activity: ActivityLog,
    uploader: MediaUploader,
    story_id: int,
    payload: FeaturedStoryInput,
    image: Optional[UploadFile] = None,
) -> FeaturedStory:
    records.find_index(store.load().featured_stories, story_id, LABEL)
    priority = parse_priority(payload.priority)
    urls = await uploader.upload(Attachment("image", image, IMAGE_ONLY, FOLDER))

    changes = payload.model_dump(exclude_none=True, exclude={"priority"})
    if priority is not None:
        changes["priority"] = priority
    if "image" in urls:
        changes["image_url"] = urls["image"]

    with store.transaction() as document:
        story = records.replace(document.featured_stories, story_id, LABEL, changes)
        activity.append(document, KIND, updated("featured story", story.title), status="updated")

    logger.info("Updated featured story %s", story_id)
    return story


def delete_featured_story(store: JsonDocumentStore, activity: ActivityLog, story_id: int) -> FeaturedStory:
    with store.transaction() as document:
        story = records.remove(document.featured_stories, story_id, LABEL)
        activity.append(document, KIND, deleted("featured story", story.title), status="deleted")

    logger.info("Deleted featured story %s", story_id)
    return story
