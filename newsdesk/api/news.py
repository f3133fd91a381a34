from __future__ import annotations

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from .. import schemas
from ..services import news as news_service
from .dependencies import ActivityFeed, Store, Uploader

router = APIRouter(prefix="/api/news", tags=["News"])


def news_form(
    title: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    image_url: Optional[str] = Form(None, alias="imageUrl"),
) -> schemas.NewsInput:
    return schemas.NewsInput(title=title, content=content, category=category, image_url=image_url)


NewsForm = Annotated[schemas.NewsInput, Depends(news_form)]


@router.get("", response_model=List[schemas.NewsArticle])
def list_news(store: Store):
    return news_service.list_news(store)


@router.get("/category/{category}", response_model=List[schemas.NewsArticle])
def list_news_by_category(category: str, store: Store):
    return news_service.list_by_category(store, category)


@router.post("", response_model=schemas.NewsArticle)
async def create_news(
    payload: NewsForm,
    store: Store,
    activity: ActivityFeed,
    uploader: Uploader,
    image: Optional[UploadFile] = File(None),
):
    return await news_service.create_news(store, activity, uploader, payload, image=image)


@router.put("/{article_id}", response_model=schemas.NewsArticle)
async def update_news(
    article_id: int,
    payload: NewsForm,
    store: Store,
    activity: ActivityFeed,
    uploader: Uploader,
    image: Optional[UploadFile] = File(None),
):
    return await news_service.update_news(store, activity, uploader, article_id, payload, image=image)


@router.delete("/{article_id}", response_model=schemas.Acknowledgement)
def delete_news(article_id: int, store: Store, activity: ActivityFeed):
    news_service.delete_news(store, activity, article_id)
    return schemas.Acknowledgement()
