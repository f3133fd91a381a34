from __future__ import annotations

from typing import Optional, Sequence, TypeVar

from ..errors import NotFound
from ..identifiers import utc_timestamp
from ..schemas import Record

R = TypeVar("R", bound=Record)


def find_index(records: Sequence[Record], record_id: int, label: str) -> int:
    for idx, record in enumerate(records):
        if record.id == record_id:
            return idx
    raise NotFound(f"{label} not found")


def by_category(records: Sequence[R], category: str) -> list[R]:
    wanted = category.lower()
    return [r for r in records if getattr(r, "category", None) and r.category.lower() == wanted]


def short_title(title: Optional[str], limit: int = 50) -> str:
    title = title or ""
    return title[:limit] + ("..." if len(title) > limit else "")


def replace(records: list[R], record_id: int, label: str, changes: dict) -> R:
    """Overwrite the provided fields of one record, keep the rest, and refresh its timestamp."""
    idx = find_index(records, record_id, label)
    records[idx] = records[idx].model_copy(update={**changes, "timestamp": utc_timestamp()})
    return records[idx]


def remove(records: list[R], record_id: int, label: str) -> R:
    return records.pop(find_index(records, record_id, label))
