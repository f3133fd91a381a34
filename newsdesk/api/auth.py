from __future__ import annotations

from typing import Optional

from fastapi import APIRouter

from .. import schemas
from ..services import auth as auth_service
from .dependencies import Store

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/login", response_model=schemas.LoginResponse)
def login(store: Store, payload: Optional[schemas.LoginRequest] = None):
    payload = payload or schemas.LoginRequest()
    user = auth_service.login(store, payload.username, payload.password)
    return schemas.LoginResponse(user=user)
