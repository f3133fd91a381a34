from __future__ import annotations

import logging
from typing import List

from ..identifiers import next_id, utc_timestamp
from ..schemas import Category, CategoryContent, CategoryInput
from ..store import JsonDocumentStore
from . import records
from .activity import ActivityLog, deleted, published, updated

logger = logging.getLogger(__name__)

LABEL = "Category"
KIND = "category"


def list_categories(store: JsonDocumentStore) -> List[Category]:
    return store.load().categories


def create_category(store: JsonDocumentStore, activity: ActivityLog, payload: CategoryInput) -> Category:
    category = Category(id=next_id(), **payload.provided(), timestamp=utc_timestamp())
    with store.transaction() as document:
        document.categories.append(category)
        activity.append(document, KIND, published("category", category.name), status="published")
    logger.info("Created category %s", category.id)
    return category


def update_category(
    store: JsonDocumentStore, activity: ActivityLog, category_id: int, payload: CategoryInput
) -> Category:
    with store.transaction() as document:
        category = records.replace(document.categories, category_id, LABEL, payload.provided())
        activity.append(document, KIND, updated("category", category.name), status="updated")
    return category


def delete_category(store: JsonDocumentStore, activity: ActivityLog, category_id: int) -> Category:
    with store.transaction() as document:
        category = records.remove(document.categories, category_id, LABEL)
        activity.append(document, KIND, deleted("category", category.name), status="deleted")
    return category


def content_for_category(store: JsonDocumentStore, category: str) -> CategoryContent:
    """Everything filed under ``category`` (case-insensitive) across the three story kinds."""
    document = store.load()
    return CategoryContent(
        breaking_news=records.by_category(document.breaking_news, category),
        featured_stories=records.by_category(document.featured_stories, category),
        news=records.by_category(document.news, category),
        category=category,
    )
