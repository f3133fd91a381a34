from __future__ import annotations

import logging
from typing import List, Optional

from ..identifiers import next_id, utc_timestamp
from ..schemas import Activity, Document
from ..store import JsonDocumentStore
from .records import short_title

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 50
DEFAULT_ACTOR = "Admin User"


class ActivityLog:
    """Bounded newest-first feed of editorial actions, kept inside the document."""

    def __init__(self, store: JsonDocumentStore, limit: int = DEFAULT_LIMIT, actor: str = DEFAULT_ACTOR) -> None:
        self.store = store
        self.limit = limit
        self.actor = actor

    def append(
        self,
        document: Document,
        kind: str,
        title: str,
        actor: Optional[str] = None,
        status: str = "completed",
    ) -> Activity:
        activity = Activity(
            id=next_id(),
            type=kind,
            title=title,
            user=actor or self.actor,
            status=status,
            timestamp=utc_timestamp(),
        )
        document.activities.insert(0, activity)
        del document.activities[self.limit :]
        return activity

    def record(
        self,
        kind: str,
        title: str,
        actor: Optional[str] = None,
        status: str = "completed",
    ) -> Activity:
        with self.store.transaction() as document:
            return self.append(document, kind, title, actor=actor, status=status)

    def list(self) -> List[Activity]:
        return self.store.load().activities


def published(label: str, title: Optional[str]) -> str:
    return f'New {label} published: "{short_title(title)}"'


def updated(label: str, title: Optional[str]) -> str:
    return f'{label[0].upper()}{label[1:]} updated: "{short_title(title)}"'


def deleted(label: str, title: Optional[str]) -> str:
    return f'{label[0].upper()}{label[1:]} deleted: "{short_title(title)}"'
