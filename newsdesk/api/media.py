from __future__ import annotations

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from .. import schemas
from ..services import media as media_service
from .dependencies import ActivityFeed, Store, Uploader

router = APIRouter(prefix="/api/media", tags=["Media"])


def media_form(
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
) -> schemas.MediaInput:
    return schemas.MediaInput(title=title, description=description)


MediaForm = Annotated[schemas.MediaInput, Depends(media_form)]


@router.get("", response_model=List[schemas.Media])
def list_media(store: Store):
    return media_service.list_media(store)


@router.post("", response_model=schemas.Media)
async def create_media(
    payload: MediaForm,
    store: Store,
    activity: ActivityFeed,
    uploader: Uploader,
    file: Optional[UploadFile] = File(None),
):
    return await media_service.create_media(store, activity, uploader, payload, file)


@router.put("/{item_id}", response_model=schemas.Media)
async def update_media(
    item_id: int,
    payload: MediaForm,
    store: Store,
    activity: ActivityFeed,
    uploader: Uploader,
    file: Optional[UploadFile] = File(None),
):
    return await media_service.update_media(store, activity, uploader, item_id, payload, file=file)


@router.delete("/{item_id}", response_model=schemas.Acknowledgement)
def delete_media(item_id: int, store: Store, activity: ActivityFeed):
    media_service.delete_media(store, activity, item_id)
    return schemas.Acknowledgement()
