from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import UploadFile

from ..identifiers import next_id, utc_timestamp
from ..media import IMAGE_ONLY, Attachment, MediaUploader
from ..schemas import Ad, AdInput
from ..store import JsonDocumentStore
from . import records
from .activity import ActivityLog, deleted, published, updated

logger = logging.getLogger(__name__)

LABEL = "Advertisement"
KIND = "ad"
FOLDER = "ads"


def list_ads(store: JsonDocumentStore) -> List[Ad]:
    return store.load().ads


async def create_ad(
    store: JsonDocumentStore,
    activity: ActivityLog,
    uploader: MediaUploader,
    payload: AdInput,
    image: Optional[UploadFile] = None,
) -> Ad:
    urls = await uploader.upload(Attachment("image", image, IMAGE_ONLY, FOLDER))
    fields = payload.provided()
    fields.setdefault("active", True)
    ad = Ad(id=next_id(), **fields, image_url=urls.get("image", ""), timestamp=utc_timestamp())

    with store.transaction() as document:
        document.ads.append(ad)
        activity.append(document, KIND, published("advertisement", ad.title), status="published")

    logger.info("Created advertisement %s", ad.id)
    return ad


async def update_ad(
    store: JsonDocumentStore,
    activity: ActivityLog,
    uploader: MediaUploader,
    ad_id: int,
    payload: AdInput,
    image: Optional[UploadFile] = None,
) -> Ad:
    records.find_index(store.load().ads, ad_id, LABEL)
    urls = await uploader.upload(Attachment("image", image, IMAGE_ONLY, FOLDER))

    changes = payload.provided()
    if "image" in urls:
        changes["image_url"] = urls["image"]

    with store.transaction() as document:
        ad = records.replace(document.ads, ad_id, LABEL, changes)
        activity.append(document, KIND, updated("advertisement", ad.title), status="updated")
    return ad


def delete_ad(store: JsonDocumentStore, activity: ActivityLog, ad_id: int) -> Ad:
    with store.transaction() as document:
        ad = records.remove(document.ads, ad_id, LABEL)
        activity.append(document, KIND, deleted("advertisement", ad.title), status="deleted")
    return ad
