from typing import Any
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _text_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


class RequestDescriptor(BaseModel):
    """Everything needed to issue one top-headlines request."""

    model_config = ConfigDict(frozen=True)

    endpoint: str
    params: dict[str, str]
    credential: str

    def query(self) -> dict[str, str]:
        return {**self.params, "apiKey": self.credential}

    @property
    def redacted_url(self) -> str:
        query = urlencode({**self.params, "apiKey": "***"})
        return f"{self.endpoint}?{query}"


class RawSource(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> str | None:
        return _text_or_none(value)


class RawArticle(BaseModel):
    """A provider record as received. Nothing in it is trusted."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: str | None = None
    description: str | None = None
    source: RawSource | None = None
    published_at: str | None = Field(default=None, alias="publishedAt")
    url: str | None = None
    url_to_image: str | None = Field(default=None, alias="urlToImage")

    @field_validator(
        "title", "description", "published_at", "url", "url_to_image", mode="before"
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        return _text_or_none(value)

    @field_validator("source", mode="before")
    @classmethod
    def _coerce_source(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else None


class HeadlinesResponse(BaseModel):
    """Top-level body of ``/top-headlines``. ``articles`` is mandatory."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    status: str | None = None
    total_results: int | None = Field(default=None, alias="totalResults")
    articles: list[RawArticle]

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value: Any) -> str | None:
        return _text_or_none(value)

    @field_validator("total_results", mode="before")
    @classmethod
    def _coerce_total(cls, value: Any) -> int | None:
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return value

    @field_validator("articles", mode="before")
    @classmethod
    def _objects_only(cls, value: Any) -> Any:
        # Non-object entries keep their slot so ordinals stay positional
        if isinstance(value, list):
            return [item if isinstance(item, dict) else {} for item in value]
        return value


class DisplayArticle(BaseModel):
    """Display-ready card data with every default already substituted."""

    model_config = ConfigDict(frozen=True)

    ordinal: int = Field(..., ge=1)
    title: str
    description: str
    source_name: str
    published_date: str
    article_url: str | None = None
    image_url: str | None = None
