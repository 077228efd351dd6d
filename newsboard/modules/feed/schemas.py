from typing import Literal

from pydantic import BaseModel

from newsboard.modules.headlines.schemas import DisplayArticle


class FeedSnapshot(BaseModel):
    """Everything the page needs to paint the current state."""

    state: Literal["idle", "loading", "success", "failed"]
    loading: bool
    refresh_enabled: bool
    refresh_label: str
    error_visible: bool
    error_kind: str | None = None
    status: str | None = None
    connected: bool = True
    articles: list[DisplayArticle] = []
    cards_html: str = ""


class RefreshResponse(BaseModel):
    started: bool


class TriggerResponse(BaseModel):
    event: str
    state: str
