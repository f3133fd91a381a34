from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from ..identifiers import next_id

CHUNK_SIZE = 1024 * 1024


@dataclass
class StagedFile:
    path: Path
    original_name: str
    content_type: Optional[str] = None


def sanitize_filename(name: str) -> str:
    return re.sub(r"[^a-zA-Z0-9.]", "_", name)


async def stage_upload(upload: UploadFile, directory: Path) -> StagedFile:
    """Copy an incoming upload to ``directory`` under a timestamp-prefixed, sanitized name."""
    directory.mkdir(parents=True, exist_ok=True)
    original = upload.filename or "upload"
    target = directory / f"{next_id()}_{sanitize_filename(original)}"
    await upload.seek(0)
    with target.open("wb") as out:
        while True:
            chunk = await upload.read(CHUNK_SIZE)
            if not chunk:
                break
            await run_in_threadpool(out.write, chunk)
    return StagedFile(path=target, original_name=original, content_type=upload.content_type)
