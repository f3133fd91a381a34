from __future__ import annotations

import threading
import time
from datetime import datetime, timezone


class IdGenerator:
    """Millisecond-clock ids, bumped past the last issued value so they never repeat."""

    def __init__(self) -> None:
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            candidate = int(time.time() * 1000)
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return candidate


next_id = IdGenerator()


def utc_timestamp() -> str:
    """ISO-8601 UTC with millisecond precision, e.g. ``2024-05-01T09:30:00.000Z``."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
