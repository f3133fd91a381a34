from __future__ import annotations

from typing import List

from fastapi import APIRouter

from .. import schemas
from ..services import static_pages as page_service
from .dependencies import ActivityFeed, Store

router = APIRouter(prefix="/api/static-pages", tags=["Static pages"])


@router.get("", response_model=List[schemas.StaticPage])
def list_static_pages(store: Store):
    return page_service.list_static_pages(store)


@router.post("", response_model=schemas.StaticPage)
def create_static_page(payload: schemas.StaticPageInput, store: Store, activity: ActivityFeed):
    return page_service.create_static_page(store, activity, payload)


@router.put("/{page_id}", response_model=schemas.StaticPage)
def update_static_page(page_id: int, payload: schemas.StaticPageInput, store: Store, activity: ActivityFeed):
    return page_service.update_static_page(store, activity, page_id, payload)


@router.delete("/{page_id}", response_model=schemas.Acknowledgement)
def delete_static_page(page_id: int, store: Store, activity: ActivityFeed):
    page_service.delete_static_page(store, activity, page_id)
    return schemas.Acknowledgement()
