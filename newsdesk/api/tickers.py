from __future__ import annotations

from typing import List

from fastapi import APIRouter

from .. import schemas
from ..services import tickers as ticker_service
from .dependencies import ActivityFeed, Store

router = APIRouter(prefix="/api/tickers", tags=["Tickers"])


@router.get("", response_model=List[schemas.Ticker])
def list_tickers(store: Store):
    return ticker_service.list_tickers(store)


@router.post("", response_model=schemas.Ticker)
def create_ticker(payload: schemas.TickerInput, store: Store, activity: ActivityFeed):
    return ticker_service.create_ticker(store, activity, payload)


@router.put("/{ticker_id}", response_model=schemas.Ticker)
def update_ticker(ticker_id: int, payload: schemas.TickerInput, store: Store, activity: ActivityFeed):
    return ticker_service.update_ticker(store, activity, ticker_id, payload)


@router.delete("/{ticker_id}", response_model=schemas.Acknowledgement)
def delete_ticker(ticker_id: int, store: Store, activity: ActivityFeed):
    ticker_service.delete_ticker(store, activity, ticker_id)
    return schemas.Acknowledgement()
