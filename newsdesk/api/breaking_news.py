from __future__ import annotations

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from .. import schemas
from ..services import breaking_news as breaking_news_service
from .dependencies import ActivityFeed, Store, Uploader

router = APIRouter(prefix="/api/breaking-news", tags=["Breaking news"])


def breaking_news_form(
    headline: Optional[str] = Form(None),
    short_description: Optional[str] = Form(None, alias="shortDescription"),
    full_description: Optional[str] = Form(None, alias="fullDescription"),
    category: Optional[str] = Form(None),
    state: Optional[str] = Form(None),
    youtube_url: Optional[str] = Form(None, alias="youtubeUrl"),
) -> schemas.BreakingNewsInput:
    return schemas.BreakingNewsInput(
        headline=headline,
        short_description=short_description,
        full_description=full_description,
        category=category,
        state=state,
        youtube_url=youtube_url,
    )


BreakingNewsForm = Annotated[schemas.BreakingNewsInput, Depends(breaking_news_form)]


@router.get("", response_model=List[schemas.BreakingNews])
def list_breaking_news(store: Store):
    return breaking_news_service.list_breaking_news(store)


@router.get("/category/{category}", response_model=List[schemas.BreakingNews])
def list_breaking_news_by_category(category: str, store: Store):
    return breaking_news_service.list_by_category(store, category)


@router.post("", response_model=schemas.BreakingNews)
async def create_breaking_news(
    payload: BreakingNewsForm,
    store: Store,
    activity: ActivityFeed,
    uploader: Uploader,
    video: Optional[UploadFile] = File(None),
    thumbnail: Optional[UploadFile] = File(None),
):
    return await breaking_news_service.create_breaking_news(
        store, activity, uploader, payload, video=video, thumbnail=thumbnail
    )


@router.put("/{item_id}", response_model=schemas.BreakingNews)
async def update_breaking_news(
    item_id: int,
    payload: BreakingNewsForm,
    store: Store,
    activity: ActivityFeed,
    uploader: Uploader,
    video: Optional[UploadFile] = File(None),
    thumbnail: Optional[UploadFile] = File(None),
):
    return await breaking_news_service.update_breaking_news(
        store, activity, uploader, item_id, payload, video=video, thumbnail=thumbnail
    )


@router.delete("/{item_id}", response_model=schemas.Acknowledgement)
def delete_breaking_news(item_id: int, store: Store, activity: ActivityFeed):
    breaking_news_service.delete_breaking_news(store, activity, item_id)
    return schemas.Acknowledgement()
