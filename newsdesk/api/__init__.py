from __future__ import annotations

from fastapi import FastAPI

from . import (
    activities,
    ads,
    auth,
    breaking_news,
    categories,
    featured_stories,
    media,
    news,
    posters,
    static_pages,
    tickers,
    users,
)


def register_routers(app: FastAPI) -> None:
    app.include_router(auth.router)
    app.include_router(posters.router)
    app.include_router(breaking_news.router)
    app.include_router(featured_stories.router)
    app.include_router(categories.router)
    app.include_router(categories.content_router)
    app.include_router(media.router)
    app.include_router(news.router)
    app.include_router(static_pages.router)
    app.include_router(tickers.router)
    app.include_router(ads.router)
    app.include_router(users.router)
    app.include_router(activities.router)
