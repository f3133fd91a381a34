from __future__ import annotations

import hashlib
import logging
import time
from abc import ABC, abstractmethod
from typing import Optional

import httpx
from starlette.concurrency import run_in_threadpool

from ..errors import UploadFailed
from .staging import StagedFile

logger = logging.getLogger(__name__)


class UploadGateway(ABC):
    """
    Relays a staged file to the remote media host and returns its durable URL.
    The staged copy is removed after a successful upload and kept on failure.
    """

    async def upload(self, staged: StagedFile, folder: str) -> str:
        if not staged or not str(staged.path) or not staged.path.is_file():
            raise UploadFailed("Invalid file provided for upload")

        logger.info("Uploading %s to folder %s", staged.original_name, folder)
        url = await self.send(staged, folder)
        logger.info("Uploaded %s -> %s", staged.original_name, url)

        try:
            staged.path.unlink()
        except OSError as exc:
            logger.warning("Could not remove staged file %s: %s", staged.path, exc)
        return url

    @abstractmethod
    async def send(self, staged: StagedFile, folder: str) -> str:
        raise NotImplementedError


class CloudinaryGateway(UploadGateway):
    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        *,
        api_url: str = "https://api.cloudinary.com/v1_1",
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.api_url}/{self.cloud_name}/auto/upload"

    def sign(self, params: dict) -> str:
        to_sign = "&".join(f"{key}={params[key]}" for key in sorted(params))
        return hashlib.sha1(f"{to_sign}{self.api_secret}".encode()).hexdigest()

    async def send(self, staged: StagedFile, folder: str) -> str:
        params = {"folder": folder, "timestamp": str(int(time.time()))}
        data = {**params, "api_key": self.api_key, "signature": self.sign(params)}
        content = await run_in_threadpool(staged.path.read_bytes)
        files = {"file": (staged.original_name, content, staged.content_type or "application/octet-stream")}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.post(self.endpoint, data=data, files=files)
                resp.raise_for_status()
                body = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Media host upload failed for %s: %s", staged.original_name, exc)
            raise UploadFailed("Failed to upload to media host", details=str(exc)) from exc

        url = body.get("secure_url") if isinstance(body, dict) else None
        if not url:
            raise UploadFailed("Failed to upload to media host", details="response carried no secure_url")
        return url
