"""File-type admission: a file is accepted only when its extension and declared MIME type agree."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from ..errors import UnsupportedMediaType


@dataclass(frozen=True)
class FileFamily:
    extensions: frozenset
    mime_types: frozenset

    def matches(self, extension: str, mime_type: str) -> bool:
        return extension in self.extensions and mime_type in self.mime_types


@dataclass(frozen=True)
class AdmissionPolicy:
    description: str
    families: Tuple[FileFamily, ...]

    def admit(self, filename: Optional[str], content_type: Optional[str]) -> None:
        extension = os.path.splitext(filename or "")[1].lower()
        mime_type = (content_type or "").split(";", 1)[0].strip().lower()
        if any(family.matches(extension.lstrip("."), mime_type) for family in self.families):
            return
        raise UnsupportedMediaType(mime_type or "unknown", extension or "none", self.description)


IMAGE = FileFamily(
    extensions=frozenset({"jpeg", "jpg", "png", "gif", "webp", "avif"}),
    mime_types=frozenset(
        {"image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp", "image/avif"}
    ),
)

# Breaking news takes short clips or stills; its stills exclude AVIF.
BREAKING_NEWS_VIDEO = FileFamily(
    extensions=frozenset({"mp4", "mov", "avi", "wmv"}),
    mime_types=frozenset({"video/mp4", "video/quicktime", "video/avi", "video/x-msvideo"}),
)

BREAKING_NEWS_IMAGE = FileFamily(
    extensions=frozenset({"jpeg", "jpg", "png", "gif", "webp"}),
    mime_types=frozenset({"image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"}),
)


IMAGE_ONLY = AdmissionPolicy("JPEG, JPG, PNG, GIF, WebP and AVIF", (IMAGE,))
BREAKING_NEWS_MEDIA = AdmissionPolicy(
    "video (MP4, MOV, AVI, WMV) and image (JPEG, JPG, PNG, GIF, WebP)",
    (BREAKING_NEWS_VIDEO, BREAKING_NEWS_IMAGE),
)
