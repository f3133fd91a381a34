from __future__ import annotations

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from .. import schemas
from ..services import featured_stories as story_service
from .dependencies import ActivityFeed, Store, Uploader

router = APIRouter(prefix="/api/featured-stories", tags=["Featured stories"])


def featured_story_form(
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    state: Optional[str] = Form(None),
    excerpt: Optional[str] = Form(None),
    priority: Optional[str] = Form(None),
) -> schemas.FeaturedStoryInput:
    return schemas.FeaturedStoryInput(
        title=title,
        description=description,
        content=content,
        category=category,
        state=state,
        excerpt=excerpt,
        priority=priority,
    )


FeaturedStoryForm = Annotated[schemas.FeaturedStoryInput, Depends(featured_story_form)]


@router.get("", response_model=List[schemas.FeaturedStory])
def list_featured_stories(store: Store):
    return story_service.list_featured_stories(store)


@router.get("/category/{category}", response_model=List[schemas.FeaturedStory])
def list_featured_stories_by_category(category: str, store: Store):
    return story_service.list_by_category(store, category)


@router.post("", response_model=schemas.FeaturedStory, status_code=status.HTTP_201_CREATED)
async def create_featured_story(
    payload: FeaturedStoryForm,
    store: Store,
    activity: ActivityFeed,
    uploader: Uploader,
    image: Optional[UploadFile] = File(None),
):
    return await story_service.create_featured_story(store, activity, uploader, payload, image=image)


@router.put("/{story_id}", response_model=schemas.FeaturedStory)
async def update_featured_story(
    story_id: int,
    payload: FeaturedStoryForm,
    store: Store,
    activity: ActivityFeed,
    uploader: Uploader,
    image: Optional[UploadFile] = File(None),
):
    return await story_service.update_featured_story(store, activity, uploader, story_id, payload, image=image)


@router.delete("/{story_id}", response_model=schemas.Acknowledgement)
def delete_featured_story(story_id: int, store: Store, activity: ActivityFeed):
    story_service.delete_featured_story(store, activity, story_id)
    return schemas.Acknowledgement()
