from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional

from fastapi import UploadFile

from ..media import IMAGE_ONLY, Attachment, MediaUploader
from ..schemas import Poster, PosterSlotInput
from ..store import JsonDocumentStore
from .activity import ActivityLog

logger = logging.getLogger(__name__)

SLOTS = 3


def list_posters(store: JsonDocumentStore) -> List[Poster]:
    """Exactly one poster per slot id 1..3; stored extras are ignored, gaps are blank."""
    by_id: Dict[int, Poster] = {p.id: p for p in store.load().posters}
    return [by_id.get(i) or Poster(id=i) for i in range(1, SLOTS + 1)]


async def save_posters(
    store: JsonDocumentStore,
    activity: ActivityLog,
    uploader: MediaUploader,
    slots: Mapping[int, PosterSlotInput],
    images: Mapping[int, Optional[UploadFile]],
) -> List[Poster]:
    """Rewrite the three poster slots. Image precedence: new upload, explicit URL, previous image."""
    urls = await uploader.upload(
        *(Attachment(f"posterImage{i}", images.get(i), IMAGE_ONLY, "posters") for i in range(1, SLOTS + 1))
    )

    with store.transaction() as document:
        previous: Dict[int, Poster] = {p.id: p for p in document.posters}
        posters = []
        for i in range(1, SLOTS + 1):
            slot = slots.get(i) or PosterSlotInput()
            prior = previous.get(i) or Poster(id=i)
            image = urls.get(f"posterImage{i}")
            if image is None:
                image = slot.image_url if slot.image_url is not None else prior.image
            posters.append(
                Poster(
                    id=i,
                    title=slot.title if slot.title is not None else prior.title,
                    image=image,
                    link=slot.link if slot.link is not None else prior.link,
                )
            )
        document.posters = posters
        activity.append(document, "poster", "Homepage posters updated", status="updated")

    logger.info("Posters updated (%d new images)", len(urls))
    return posters
