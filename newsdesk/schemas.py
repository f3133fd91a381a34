from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class Record(BaseModel):
    """Base for every stored record; keys are camelCase on the wire and on disk."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    id: int

    @model_validator(mode="before")
    @classmethod
    def _null_means_default(cls, data):
        # Older files carry null for fields that were never set.
        if isinstance(data, dict):
            known = set(cls.model_fields) | {f.alias for f in cls.model_fields.values() if f.alias}
            return {k: v for k, v in data.items() if v is not None or k not in known}
        return data


class Poster(Record):
    title: str = ""
    image: str = ""
    link: str = ""


class BreakingNews(Record):
    headline: Optional[str] = None
    short_description: Optional[str] = None
    full_description: Optional[str] = None
    category: Optional[str] = None
    state: Optional[str] = None
    video_url: str = ""
    thumbnail: str = ""
    youtube_url: str = ""
    timestamp: Optional[str] = None


class FeaturedStory(Record):
    title: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None
    state: Optional[str] = None
    excerpt: Optional[str] = None
    image_url: str = ""
    priority: int = 1
    views: str = "0"
    timestamp: Optional[str] = None

    @field_validator("priority", mode="before")
    @classmethod
    def _lenient_priority(cls, value):
        if isinstance(value, bool):
            return 1
        try:
            return int(value)
        except (TypeError, ValueError):
            return 1


class Category(Record):
    name: Optional[str] = None
    description: Optional[str] = None
    timestamp: Optional[str] = None


class Media(Record):
    title: Optional[str] = None
    description: Optional[str] = None
    url: str = ""
    type: Optional[str] = None
    timestamp: Optional[str] = None


class NewsArticle(Record):
    title: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None
    image_url: str = ""
    timestamp: Optional[str] = None


class StaticPage(Record):
    title: Optional[str] = None
    content: Optional[str] = None
    slug: Optional[str] = None
    timestamp: Optional[str] = None


class Ticker(Record):
    text: Optional[str] = None
    type: Optional[str] = None
    active: bool = True
    timestamp: Optional[str] = None


class Ad(Record):
    title: Optional[str] = None
    placement: Optional[str] = None
    image_url: str = ""
    url: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    active: bool = True
    timestamp: Optional[str] = None


class User(Record):
    username: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None
    email: Optional[str] = None
    timestamp: Optional[str] = None


class PublicUser(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    username: Optional[str] = None
    role: Optional[str] = None
    email: Optional[str] = None
    timestamp: Optional[str] = None


class Activity(Record):
    type: str
    title: str
    user: str
    status: str
    timestamp: str


class Document(BaseModel):
    """The whole persisted state: one ordered list per entity kind."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    posters: List[Poster] = Field(default_factory=list)
    breaking_news: List[BreakingNews] = Field(default_factory=list)
    featured_stories: List[FeaturedStory] = Field(default_factory=list)
    categories: List[Category] = Field(default_factory=list)
    users: List[User] = Field(default_factory=list)
    media: List[Media] = Field(default_factory=list)
    news: List[NewsArticle] = Field(default_factory=list)
    static_pages: List[StaticPage] = Field(default_factory=list)
    tickers: List[Ticker] = Field(default_factory=list)
    ads: List[Ad] = Field(default_factory=list)
    activities: List[Activity] = Field(default_factory=list)


# ---- Request payloads ----
# Every field is optional: None means "not provided", which keeps the stored value on update.


class Payload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def provided(self) -> dict:
        return self.model_dump(exclude_none=True)


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class PosterSlotInput(Payload):
    title: Optional[str] = None
    link: Optional[str] = None
    image_url: Optional[str] = None


class BreakingNewsInput(Payload):
    headline: Optional[str] = None
    short_description: Optional[str] = None
    full_description: Optional[str] = None
    category: Optional[str] = None
    state: Optional[str] = None
    youtube_url: Optional[str] = None


class FeaturedStoryInput(Payload):
    title: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None
    state: Optional[str] = None
    excerpt: Optional[str] = None
    priority: Optional[str] = None


class NewsInput(Payload):
    title: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None
    image_url: Optional[str] = None


class CategoryInput(Payload):
    name: Optional[str] = None
    description: Optional[str] = None


class MediaInput(Payload):
    title: Optional[str] = None
    description: Optional[str] = None


class StaticPageInput(Payload):
    title: Optional[str] = None
    content: Optional[str] = None
    slug: Optional[str] = None


class TickerInput(Payload):
    text: Optional[str] = None
    type: Optional[str] = None
    active: Optional[bool] = None


class AdInput(Payload):
    title: Optional[str] = None
    placement: Optional[str] = None
    url: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    active: Optional[bool] = None


class UserInput(Payload):
    username: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None
    email: Optional[str] = None


# ---- Responses ----


class Acknowledgement(BaseModel):
    success: bool = True


class LoginResponse(BaseModel):
    success: bool = True
    user: PublicUser


class CategoryContent(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    breaking_news: List[BreakingNews]
    featured_stories: List[FeaturedStory]
    news: List[NewsArticle]
    category: str
