from __future__ import annotations

from typing import Dict, List, Optional

from fastapi import APIRouter, File, Form, UploadFile

from .. import schemas
from ..services import posters as poster_service
from .dependencies import ActivityFeed, Store, Uploader

router = APIRouter(prefix="/api/posters", tags=["Posters"])


@router.get("", response_model=List[schemas.Poster])
def list_posters(store: Store):
    return poster_service.list_posters(store)


@router.post("", response_model=List[schemas.Poster])
async def save_posters(
    store: Store,
    activity: ActivityFeed,
    uploader: Uploader,
    poster1_title: Optional[str] = Form(None, alias="poster1Title"),
    poster1_link: Optional[str] = Form(None, alias="poster1Link"),
    poster1_image_url: Optional[str] = Form(None, alias="poster1ImageUrl"),
    poster2_title: Optional[str] = Form(None, alias="poster2Title"),
    poster2_link: Optional[str] = Form(None, alias="poster2Link"),
    poster2_image_url: Optional[str] = Form(None, alias="poster2ImageUrl"),
    poster3_title: Optional[str] = Form(None, alias="poster3Title"),
    poster3_link: Optional[str] = Form(None, alias="poster3Link"),
    poster3_image_url: Optional[str] = Form(None, alias="poster3ImageUrl"),
    poster_image1: Optional[UploadFile] = File(None, alias="posterImage1"),
    poster_image2: Optional[UploadFile] = File(None, alias="posterImage2"),
    poster_image3: Optional[UploadFile] = File(None, alias="posterImage3"),
):
    slots: Dict[int, schemas.PosterSlotInput] = {
        1: schemas.PosterSlotInput(title=poster1_title, link=poster1_link, image_url=poster1_image_url),
        2: schemas.PosterSlotInput(title=poster2_title, link=poster2_link, image_url=poster2_image_url),
        3: schemas.PosterSlotInput(title=poster3_title, link=poster3_link, image_url=poster3_image_url),
    }
    images = {1: poster_image1, 2: poster_image2, 3: poster_image3}
    return await poster_service.save_posters(store, activity, uploader, slots, images)
