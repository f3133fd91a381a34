from __future__ import annotations

from typing import List

from fastapi import APIRouter

from .. import schemas
from ..services import users as user_service
from .dependencies import ActivityFeed, Store

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("", response_model=List[schemas.PublicUser])
def list_users(store: Store):
    return user_service.list_users(store)


@router.post("", response_model=schemas.PublicUser)
def create_user(payload: schemas.UserInput, store: Store, activity: ActivityFeed):
    return user_service.create_user(store, activity, payload)


@router.put("/{user_id}", response_model=schemas.PublicUser)
def update_user(user_id: int, payload: schemas.UserInput, store: Store, activity: ActivityFeed):
    return user_service.update_user(store, activity, user_id, payload)


@router.delete("/{user_id}", response_model=schemas.Acknowledgement)
def delete_user(user_id: int, store: Store, activity: ActivityFeed):
    user_service.delete_user(store, activity, user_id)
    return schemas.Acknowledgement()
