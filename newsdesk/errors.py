"""Error kinds raised by the services and rendered by the API layer."""

from __future__ import annotations

from typing import Any, Optional

from fastapi import status


class NewsdeskError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_body(self) -> dict:
        body: dict = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(NewsdeskError):
    status_code = status.HTTP_400_BAD_REQUEST


class UnsupportedMediaType(NewsdeskError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, mime_type: str, extension: str, allowed: str) -> None:
        super().__init__(
            f"Invalid file type. Only {allowed} files are allowed. "
            f"Got: {mime_type} with extension: {extension}"
        )
        self.mime_type = mime_type
        self.extension = extension


class Unauthorized(NewsdeskError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def to_body(self) -> dict:
        # The admin front end reads login failures as {success, message}.
        return {"success": False, "message": self.message}


class NotFound(NewsdeskError):
    status_code = status.HTTP_404_NOT_FOUND


class UploadFailed(NewsdeskError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class PersistenceError(NewsdeskError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
