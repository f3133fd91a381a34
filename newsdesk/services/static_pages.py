from __future__ import annotations

from typing import List

from ..identifiers import next_id, utc_timestamp
from ..schemas import StaticPage, StaticPageInput
from ..store import JsonDocumentStore
from . import records
from .activity import ActivityLog, deleted, published, updated

LABEL = "Static page"
KIND = "static-page"


def list_static_pages(store: JsonDocumentStore) -> List[StaticPage]:
    return store.load().static_pages


def create_static_page(store: JsonDocumentStore, activity: ActivityLog, payload: StaticPageInput) -> StaticPage:
    page = StaticPage(id=next_id(), **payload.provided(), timestamp=utc_timestamp())
    with store.transaction() as document:
        document.static_pages.append(page)
        activity.append(document, KIND, published("page", page.title), status="published")
    return page


def update_static_page(
    store: JsonDocumentStore, activity: ActivityLog, page_id: int, payload: StaticPageInput
) -> StaticPage:
    with store.transaction() as document:
        page = records.replace(document.static_pages, page_id, LABEL, payload.provided())
        activity.append(document, KIND, updated("page", page.title), status="updated")
    return page


def delete_static_page(store: JsonDocumentStore, activity: ActivityLog, page_id: int) -> StaticPage:
    with store.transaction() as document:
        page = records.remove(document.static_pages, page_id, LABEL)
        activity.append(document, KIND, deleted("page", page.title), status="deleted")
    return page
