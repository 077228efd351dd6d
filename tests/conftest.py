"""Shared fixtures: settings with a usable key and a mock-network controller."""

from collections.abc import AsyncIterator, Callable

import httpx
import pytest
import pytest_asyncio

from newsboard.config.settings import Settings
from newsboard.modules.feed.controller import FeedController
from newsboard.modules.feed.render import CardRenderer
from newsboard.modules.feed.status import StatusReporter
from newsboard.modules.headlines.request_builder import RequestBuilder
from newsboard.modules.headlines.service import HeadlinesClient

ARTICLES = [
    {
        "source": {"id": "the-verge", "name": "The Verge"},
        "author": "Jane Doe",
        "title": "New chip announced",
        "description": "A faster chip.",
        "url": "https://example.com/chip",
        "urlToImage": "https://example.com/chip.jpg",
        "publishedAt": "2024-03-05T14:30:00Z",
    },
    {
        "source": {"id": None, "name": "Wired"},
        "title": "Robots everywhere",
        "description": None,
        "url": "https://example.com/robots",
        "urlToImage": None,
        "publishedAt": "2024-12-24T08:00:00Z",
    },
    {"title": None},
]


@pytest.fixture
def raw_articles() -> list[dict]:
    return [dict(article) for article in ARTICLES]


@pytest.fixture
def settings() -> Settings:
    return Settings(news_api_key="test-key")


@pytest_asyncio.fixture
async def make_http() -> AsyncIterator[Callable[..., httpx.AsyncClient]]:
    clients: list[httpx.AsyncClient] = []

    def _make(handler) -> httpx.AsyncClient:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _make
    for client in clients:
        await client.aclose()


@pytest.fixture
def make_controller(settings: Settings, make_http) -> Callable[..., FeedController]:
    def _make(handler, config: Settings | None = None) -> FeedController:
        http = make_http(handler)
        return FeedController(
            builder=RequestBuilder(config or settings),
            client=HeadlinesClient(http),
            renderer=CardRenderer(),
            status=StatusReporter(),
        )

    return _make
