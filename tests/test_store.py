from __future__ import annotations

import json
from pathlib import Path

import pytest

from newsdesk.errors import PersistenceError
from newsdesk.identifiers import IdGenerator, utc_timestamp
from newsdesk.schemas import BreakingNews, NewsArticle
from newsdesk.store import JsonDocumentStore

COLLECTIONS = {
    "posters",
    "breakingNews",
    "featuredStories",
    "categories",
    "users",
    "media",
    "news",
    "staticPages",
    "tickers",
    "ads",
    "activities",
}


def test_missing_file_loads_empty_collections(store: JsonDocumentStore) -> None:
    document = store.load()
    dumped = document.model_dump(by_alias=True)
    assert set(dumped) == COLLECTIONS
    assert all(value == [] for value in dumped.values())


def test_save_writes_camel_case_pretty_json(store: JsonDocumentStore) -> None:
    document = store.load()
    document.news.append(NewsArticle(id=1, title="A", image_url="", timestamp=utc_timestamp()))
    store.save(document)

    raw = store.path.read_text(encoding="utf-8")
    assert raw.startswith("{\n  ")
    on_disk = json.loads(raw)
    assert on_disk["news"][0]["imageUrl"] == ""
    assert "staticPages" in on_disk
    assert store.load().news[0].title == "A"


def test_unknown_keys_survive_round_trip(store: JsonDocumentStore) -> None:
    store.path.write_text(
        json.dumps({"tools": [{"name": "poll"}], "news": [{"id": 7, "title": "x", "legacyFlag": True}]}),
        encoding="utf-8",
    )
    store.save(store.load())

    on_disk = json.loads(store.path.read_text(encoding="utf-8"))
    assert on_disk["tools"] == [{"name": "poll"}]
    assert on_disk["news"][0]["legacyFlag"] is True
    assert on_disk["activities"] == []


def test_transaction_persists_on_success(store: JsonDocumentStore) -> None:
    with store.transaction() as document:
        document.breaking_news.insert(0, BreakingNews(id=1, headline="Flood"))

    assert [item.headline for item in store.load().breaking_news] == ["Flood"]


def test_transaction_discards_changes_on_error(store: JsonDocumentStore) -> None:
    with store.transaction() as document:
        document.news.append(NewsArticle(id=1, title="kept"))

    with pytest.raises(RuntimeError):
        with store.transaction() as document:
            document.news.append(NewsArticle(id=2, title="dropped"))
            raise RuntimeError("boom")

    assert [n.title for n in store.load().news] == ["kept"]


def test_corrupt_file_raises_persistence_error(store: JsonDocumentStore) -> None:
    store.path.write_text("{not json", encoding="utf-8")
    with pytest.raises(PersistenceError):
        store.load()


def test_save_leaves_no_temp_files(tmp_path: Path) -> None:
    store = JsonDocumentStore(tmp_path / "nested" / "data.json")
    store.save(store.load())
    assert [p.name for p in (tmp_path / "nested").iterdir()] == ["data.json"]


def test_ids_strictly_increase() -> None:
    generate = IdGenerator()
    ids = [generate() for _ in range(500)]
    assert ids == sorted(ids)
    assert len(set(ids)) == len(ids)


def test_timestamp_is_iso_utc_with_millis() -> None:
    stamp = utc_timestamp()
    assert stamp.endswith("Z")
    assert len(stamp) == len("2024-01-01T00:00:00.000Z")
