from __future__ import annotations

from typing import List

from fastapi import APIRouter

from .. import schemas
from ..services import categories as category_service
from .dependencies import ActivityFeed, Store

router = APIRouter(prefix="/api/categories", tags=["Categories"])
content_router = APIRouter(prefix="/api/category", tags=["Categories"])


@router.get("", response_model=List[schemas.Category])
def list_categories(store: Store):
    return category_service.list_categories(store)


@router.post("", response_model=schemas.Category)
def create_category(payload: schemas.CategoryInput, store: Store, activity: ActivityFeed):
    return category_service.create_category(store, activity, payload)


@router.put("/{category_id}", response_model=schemas.Category)
def update_category(category_id: int, payload: schemas.CategoryInput, store: Store, activity: ActivityFeed):
    return category_service.update_category(store, activity, category_id, payload)


@router.delete("/{category_id}", response_model=schemas.Acknowledgement)
def delete_category(category_id: int, store: Store, activity: ActivityFeed):
    category_service.delete_category(store, activity, category_id)
    return schemas.Acknowledgement()


@content_router.get("/{category}", response_model=schemas.CategoryContent)
def content_for_category(category: str, store: Store):
    return category_service.content_for_category(store, category)
