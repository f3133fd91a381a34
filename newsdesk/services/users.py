from __future__ import annotations

import logging
from typing import List

from ..errors import ValidationError
from ..identifiers import next_id, utc_timestamp
from ..schemas import PublicUser, User, UserInput
from ..store import JsonDocumentStore
from . import records
from .activity import ActivityLog, deleted, published, updated

logger = logging.getLogger(__name__)

LABEL = "User"
KIND = "user"


def public(user: User) -> PublicUser:
    """Outbound view of a user; the password never leaves the store."""
    return PublicUser.model_validate(user.model_dump(exclude={"password"}))


def list_users(store: JsonDocumentStore) -> List[PublicUser]:
    return [public(u) for u in store.load().users]


def create_user(store: JsonDocumentStore, activity: ActivityLog, payload: UserInput) -> PublicUser:
    if not payload.username:
        raise ValidationError("username is required")

    with store.transaction() as document:
        if any(u.username == payload.username for u in document.users):
            raise ValidationError("Username already exists")
        user = User(id=next_id(), **payload.provided(), timestamp=utc_timestamp())
        document.users.append(user)
        activity.append(document, KIND, published("user", user.username), status="published")

    logger.info("Created user %s", user.id)
    return public(user)


def update_user(store: JsonDocumentStore, activity: ActivityLog, user_id: int, payload: UserInput) -> PublicUser:
    changes = payload.provided()
    with store.transaction() as document:
        records.find_index(document.users, user_id, LABEL)
        if "username" in changes and any(
            u.username == changes["username"] and u.id != user_id for u in document.users
        ):
            raise ValidationError("Username already exists")
        user = records.replace(document.users, user_id, LABEL, changes)
        activity.append(document, KIND, updated("user", user.username), status="updated")
    return public(user)


def delete_user(store: JsonDocumentStore, activity: ActivityLog, user_id: int) -> PublicUser:
    with store.transaction() as document:
        user = records.remove(document.users, user_id, LABEL)
        activity.append(document, KIND, deleted("user", user.username), status="deleted")
    return public(user)
