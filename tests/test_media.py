from __future__ import annotations

import asyncio
import hashlib
import io
import logging
from pathlib import Path

import httpx
import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from newsdesk.errors import UnsupportedMediaType, UploadFailed
from newsdesk.media import (
    BREAKING_NEWS_MEDIA,
    IMAGE_ONLY,
    Attachment,
    CloudinaryGateway,
    MediaUploader,
    StagedFile,
    sanitize_filename,
    stage_upload,
)
from newsdesk.media.staging import CHUNK_SIZE


def _upload_file(filename: str, content_type: str, content: bytes = b"data") -> UploadFile:
    return UploadFile(file=io.BytesIO(content), filename=filename, headers=Headers({"content-type": content_type}))


def _staged(tmp_path: Path, name: str = "photo.png") -> StagedFile:
    path = tmp_path / name
    path.write_bytes(b"png-bytes")
    return StagedFile(path=path, original_name=name, content_type="image/png")


# ---- Admission ----


@pytest.mark.parametrize("policy", [IMAGE_ONLY, BREAKING_NEWS_MEDIA])
def test_executables_are_rejected_everywhere(policy) -> None:
    with pytest.raises(UnsupportedMediaType) as exc_info:
        policy.admit("setup.exe", "application/octet-stream")
    assert "application/octet-stream" in exc_info.value.message
    assert ".exe" in exc_info.value.message


def test_image_policy_accepts_modern_formats() -> None:
    IMAGE_ONLY.admit("cover.avif", "image/avif")
    IMAGE_ONLY.admit("Cover.PNG", "image/png")
    IMAGE_ONLY.admit("photo.jpg", "image/jpeg; charset=binary")


def test_extension_and_mime_must_agree() -> None:
    with pytest.raises(UnsupportedMediaType):
        IMAGE_ONLY.admit("photo.png", "video/mp4")
    with pytest.raises(UnsupportedMediaType):
        BREAKING_NEWS_MEDIA.admit("clip.mp4", "image/png")


def test_breaking_news_policy_is_narrower() -> None:
    BREAKING_NEWS_MEDIA.admit("clip.mov", "video/quicktime")
    BREAKING_NEWS_MEDIA.admit("still.webp", "image/webp")
    with pytest.raises(UnsupportedMediaType):
        BREAKING_NEWS_MEDIA.admit("clip.wmv", "video/x-ms-wmv")
    with pytest.raises(UnsupportedMediaType):
        BREAKING_NEWS_MEDIA.admit("still.avif", "image/avif")


# ---- Staging ----


def test_sanitize_filename() -> None:
    assert sanitize_filename("my photo (1).png") == "my_photo__1_.png"
    assert sanitize_filename("résumé.pdf") == "r_sum_.pdf"


def test_stage_upload_writes_prefixed_copy(tmp_path: Path) -> None:
    staged = asyncio.run(stage_upload(_upload_file("my photo.png", "image/png", b"abc"), tmp_path / "uploads"))
    prefix, _, rest = staged.path.name.partition("_")
    assert prefix.isdigit()
    assert rest == "my_photo.png"
    assert staged.path.read_bytes() == b"abc"
    assert staged.content_type == "image/png"


def test_stage_upload_copies_in_chunks(tmp_path: Path) -> None:
    content = b"v" * (CHUNK_SIZE * 2 + 17)
    upload = _upload_file("clip.mp4", "video/mp4", content)
    upload.file.read(10)

    staged = asyncio.run(stage_upload(upload, tmp_path / "uploads"))
    assert staged.path.read_bytes() == content


# ---- Cloudinary gateway ----


def test_cloudinary_upload_returns_secure_url_and_removes_staged_file(tmp_path: Path) -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = request.content
        return httpx.Response(200, json={"secure_url": "https://res.cloudinary.com/demo/news/photo.png"})

    gateway = CloudinaryGateway("demo", "key", "secret", transport=httpx.MockTransport(handler))
    staged = _staged(tmp_path)

    url = asyncio.run(gateway.upload(staged, "news"))

    assert url == "https://res.cloudinary.com/demo/news/photo.png"
    assert seen["url"] == "https://api.cloudinary.com/v1_1/demo/auto/upload"
    assert b'name="folder"' in seen["body"]
    assert b'name="signature"' in seen["body"]
    assert b"png-bytes" in seen["body"]
    assert not staged.path.exists()


def test_cloudinary_signature() -> None:
    gateway = CloudinaryGateway("demo", "key", "secret")
    expected = hashlib.sha1(b"folder=news&timestamp=1700000000secret").hexdigest()
    assert gateway.sign({"timestamp": "1700000000", "folder": "news"}) == expected


def test_remote_error_keeps_staged_file(tmp_path: Path) -> None:
    gateway = CloudinaryGateway(
        "demo", "key", "secret", transport=httpx.MockTransport(lambda request: httpx.Response(502))
    )
    staged = _staged(tmp_path)

    with pytest.raises(UploadFailed):
        asyncio.run(gateway.upload(staged, "news"))
    assert staged.path.exists()


def test_timeout_surfaces_as_upload_failed(tmp_path: Path) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    gateway = CloudinaryGateway("demo", "key", "secret", timeout=0.1, transport=httpx.MockTransport(handler))

    with pytest.raises(UploadFailed) as exc_info:
        asyncio.run(gateway.upload(_staged(tmp_path), "news"))
    assert "timed out" in exc_info.value.details


def test_missing_staged_file_is_rejected_without_network(tmp_path: Path) -> None:
    calls = []
    gateway = CloudinaryGateway(
        "demo", "key", "secret", transport=httpx.MockTransport(lambda request: calls.append(request))
    )
    staged = StagedFile(path=tmp_path / "gone.png", original_name="gone.png")

    with pytest.raises(UploadFailed):
        asyncio.run(gateway.upload(staged, "news"))
    assert calls == []


def test_cleanup_failure_is_logged_not_raised(tmp_path: Path, monkeypatch, caplog) -> None:
    def refuse_unlink(self, missing_ok=False):
        raise PermissionError("read-only")

    gateway = CloudinaryGateway(
        "demo",
        "key",
        "secret",
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"secure_url": "https://cdn/x.png"})),
    )
    staged = _staged(tmp_path)
    monkeypatch.setattr(Path, "unlink", refuse_unlink)

    with caplog.at_level(logging.WARNING):
        url = asyncio.run(gateway.upload(staged, "news"))

    assert url == "https://cdn/x.png"
    assert "Could not remove staged file" in caplog.text


# ---- Uploader ----


def test_uploader_rejects_before_any_network_call(uploader: MediaUploader, gateway, tmp_path: Path) -> None:
    good = Attachment("video", _upload_file("clip.mp4", "video/mp4"), BREAKING_NEWS_MEDIA, "breaking-news")
    bad = Attachment("thumbnail", _upload_file("setup.exe", "application/octet-stream"), IMAGE_ONLY, "thumbs")

    with pytest.raises(UnsupportedMediaType):
        asyncio.run(uploader.upload(good, bad))

    assert gateway.calls == []
    assert not (tmp_path / "uploads").exists()


def test_uploader_skips_absent_files_and_maps_urls(uploader: MediaUploader, gateway) -> None:
    urls = asyncio.run(
        uploader.upload(
            Attachment("image", _upload_file("cover.png", "image/png"), IMAGE_ONLY, "news"),
            Attachment("thumbnail", None, IMAGE_ONLY, "thumbs"),
        )
    )
    assert urls == {"image": "https://media.example.com/news/cover.png"}
    assert gateway.calls == [("cover.png", "news")]


def test_uploader_names_the_failing_field(uploader: MediaUploader, gateway) -> None:
    gateway.fail = True
    with pytest.raises(UploadFailed) as exc_info:
        asyncio.run(uploader.upload(Attachment("video", _upload_file("clip.mp4", "video/mp4"), BREAKING_NEWS_MEDIA, "bn")))
    assert exc_info.value.message == "Failed to upload video"
    assert exc_info.value.details == "connection reset"
