from __future__ import annotations

from typing import List

from ..identifiers import next_id, utc_timestamp
from ..schemas import Ticker, TickerInput
from ..store import JsonDocumentStore
from . import records
from .activity import ActivityLog, deleted, published, updated

LABEL = "Ticker"
KIND = "ticker"


def list_tickers(store: JsonDocumentStore) -> List[Ticker]:
    return store.load().tickers


def create_ticker(store: JsonDocumentStore, activity: ActivityLog, payload: TickerInput) -> Ticker:
    ticker = Ticker(
        id=next_id(),
        text=payload.text,
        type=payload.type,
        active=payload.active if payload.active is not None else True,
        timestamp=utc_timestamp(),
    )
    with store.transaction() as document:
        document.tickers.append(ticker)
        activity.append(document, KIND, published("ticker", ticker.text), status="published")
    return ticker


def update_ticker(store: JsonDocumentStore, activity: ActivityLog, ticker_id: int, payload: TickerInput) -> Ticker:
    with store.transaction() as document:
        ticker = records.replace(document.tickers, ticker_id, LABEL, payload.provided())
        activity.append(document, KIND, updated("ticker", ticker.text), status="updated")
    return ticker


def delete_ticker(store: JsonDocumentStore, activity: ActivityLog, ticker_id: int) -> Ticker:
    with store.transaction() as document:
        ticker = records.remove(document.tickers, ticker_id, LABEL)
        activity.append(document, KIND, deleted("ticker", ticker.text), status="deleted")
    return ticker
