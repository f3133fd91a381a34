from __future__ import annotations

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from .. import schemas
from ..services import ads as ad_service
from .dependencies import ActivityFeed, Store, Uploader

router = APIRouter(prefix="/api/ads", tags=["Ads"])


def ad_form(
    title: Optional[str] = Form(None),
    placement: Optional[str] = Form(None),
    url: Optional[str] = Form(None),
    start_date: Optional[str] = Form(None, alias="startDate"),
    end_date: Optional[str] = Form(None, alias="endDate"),
    active: Optional[bool] = Form(None),
) -> schemas.AdInput:
    return schemas.AdInput(
        title=title,
        placement=placement,
        url=url,
        start_date=start_date,
        end_date=end_date,
        active=active,
    )


AdForm = Annotated[schemas.AdInput, Depends(ad_form)]


@router.get("", response_model=List[schemas.Ad])
def list_ads(store: Store):
    return ad_service.list_ads(store)


@router.post("", response_model=schemas.Ad)
async def create_ad(
    payload: AdForm,
    store: Store,
    activity: ActivityFeed,
    uploader: Uploader,
    image: Optional[UploadFile] = File(None),
):
    return await ad_service.create_ad(store, activity, uploader, payload, image=image)


@router.put("/{ad_id}", response_model=schemas.Ad)
async def update_ad(
    ad_id: int,
    payload: AdForm,
    store: Store,
    activity: ActivityFeed,
    uploader: Uploader,
    image: Optional[UploadFile] = File(None),
):
    return await ad_service.update_ad(store, activity, uploader, ad_id, payload, image=image)


@router.delete("/{ad_id}", response_model=schemas.Acknowledgement)
def delete_ad(ad_id: int, store: Store, activity: ActivityFeed):
    ad_service.delete_ad(store, activity, ad_id)
    return schemas.Acknowledgement()
