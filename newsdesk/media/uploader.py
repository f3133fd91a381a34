from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from fastapi import UploadFile

from ..errors import UploadFailed
from .admission import AdmissionPolicy
from .gateway import UploadGateway
from .staging import stage_upload

logger = logging.getLogger(__name__)


@dataclass
class Attachment:
    field: str
    file: Optional[UploadFile]
    policy: AdmissionPolicy
    folder: str

    @property
    def present(self) -> bool:
        return self.file is not None and bool(self.file.filename)


class MediaUploader:
    """
    Upload-then-reference pipeline for one request: admit every attachment,
    then stage and upload them in order. The first failure stops the pipeline.
    """

    def __init__(self, gateway: UploadGateway, staging_dir: Path) -> None:
        self.gateway = gateway
        self.staging_dir = staging_dir

    def admit(self, attachments: Iterable[Attachment]) -> List[Attachment]:
        present = [a for a in attachments if a.present]
        for attachment in present:
            attachment.policy.admit(attachment.file.filename, attachment.file.content_type)
        return present

    async def upload(self, *attachments: Attachment) -> Dict[str, str]:
        urls: Dict[str, str] = {}
        for attachment in self.admit(attachments):
            staged = await stage_upload(attachment.file, self.staging_dir)
            try:
                urls[attachment.field] = await self.gateway.upload(staged, attachment.folder)
            except UploadFailed as exc:
                logger.error("Upload of %s failed: %s", attachment.field, exc.details or exc.message)
                raise UploadFailed(f"Failed to upload {attachment.field}", details=exc.details or exc.message) from exc
        return urls
