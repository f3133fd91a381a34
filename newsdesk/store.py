"""
JSON-file persistence for the whole CMS document.

Every request re-reads the file; mutations go through ``transaction()`` so that
load, modify and save happen under a single process-wide lock.
"""

from __future__ import annotations

import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

import pydantic

from .errors import PersistenceError
from .schemas import Document

logger = logging.getLogger(__name__)


class JsonDocumentStore:
    def __init__(self, path: str | Path = "data.json") -> None:
        self.path = Path(path)
        self._lock = threading.RLock()

    def load(self) -> Document:
        if not self.path.exists():
            return Document()
        try:
            return Document.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (OSError, pydantic.ValidationError) as exc:
            logger.error("Failed to read %s: %s", self.path, exc)
            raise PersistenceError("Failed to read data", details=str(exc)) from exc

    def save(self, document: Document) -> None:
        payload = document.model_dump_json(by_alias=True, indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            logger.error("Failed to write %s: %s", self.path, exc)
            raise PersistenceError("Failed to save data", details=str(exc)) from exc

    @contextmanager
    def transaction(self) -> Iterator[Document]:
        """Yield a freshly loaded document and persist it when the block exits cleanly."""
        with self._lock:
            document = self.load()
            yield document
            self.save(document)
