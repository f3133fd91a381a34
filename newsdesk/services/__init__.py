"""Collection handlers: one module per entity kind, plus the activity feed."""

from . import (
    activity,
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

__all__ = [
    "activity",
    "ads",
    "auth",
    "breaking_news",
    "categories",
    "featured_stories",
    "media",
    "news",
    "posters",
    "static_pages",
    "tickers",
    "users",
]
