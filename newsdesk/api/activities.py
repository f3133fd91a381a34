from __future__ import annotations

from typing import List

from fastapi import APIRouter

from .. import schemas
from .dependencies import ActivityFeed

router = APIRouter(prefix="/api/activities", tags=["Activity"])


@router.get("", response_model=List[schemas.Activity])
def list_activities(activity: ActivityFeed):
    return activity.list()
