from __future__ import annotations

import logging
from typing import Optional

from ..errors import Unauthorized
from ..schemas import PublicUser
from ..store import JsonDocumentStore
from .users import public

logger = logging.getLogger(__name__)


def login(store: JsonDocumentStore, username: Optional[str], password: Optional[str]) -> PublicUser:
    """Plaintext credential match. Unknown user and wrong password fail identically."""
    if username and password:
        for user in store.load().users:
            if user.username == username and user.password == password:
                return public(user)
    logger.info("Rejected login for %r", username)
    raise Unauthorized("Invalid credentials")
