import asyncio
import logging
from collections.abc import Callable
from datetime import datetime

from newsboard.modules.feed.render import CardRenderer
from newsboard.modules.feed.schemas import FeedSnapshot
from newsboard.modules.feed.state import CycleState, Failed, Idle, Loading, Success
from newsboard.modules.feed.status import StatusReporter
from newsboard.modules.headlines.errors import ConfigurationError, HeadlinesError
from newsboard.modules.headlines.normalizer import normalize
from newsboard.modules.headlines.request_builder import RequestBuilder
from newsboard.modules.headlines.service import HeadlinesClient

logger = logging.getLogger(__name__)

API_KEY_MISSING = "API key not configured"
LOAD_FAILED = "Failed to load data"
REFRESH_LABEL = "Refresh News"
LOADING_LABEL = "Loading News..."


class FeedController:
    """Runs fetch/render cycles, at most one at a time.

    ``refresh()`` is fire-and-forget. A call made while a cycle is in flight
    is dropped rather than queued. Completion is observed through ``state``
    and the status reporter; the returned task exists for callers that want
    to await it.
    """

    def __init__(
        self,
        builder: RequestBuilder,
        client: HeadlinesClient,
        renderer: CardRenderer,
        status: StatusReporter,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._builder = builder
        self._client = client
        self._renderer = renderer
        self._status = status
        self._clock = clock
        self._state: CycleState = Idle()
        self._busy = False
        self._task: asyncio.Task[None] | None = None
        self.error_visible = False

    @property
    def state(self) -> CycleState:
        return self._state

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def in_flight(self) -> asyncio.Task[None] | None:
        return self._task if self._busy else None

    def refresh(
        self, country: str | None = None, category: str | None = None
    ) -> asyncio.Task[None] | None:
        if self._busy:
            logger.info("Refresh ignored: a cycle is already in flight")
            return None
        self._task = asyncio.create_task(self._run_cycle(country, category))
        self._begin()
        return self._task

    def _begin(self) -> None:
        self._busy = True
        self._state = Loading()
        self.error_visible = False

    def _finish(self) -> None:
        self._busy = False
        if isinstance(self._state, Loading):
            self._state = Idle()

    def _fail(self, message: str, kind: str) -> None:
        self._renderer.clear()
        self.error_visible = True
        self._state = Failed(message=message, kind=kind)

    async def _run_cycle(self, country: str | None, category: str | None) -> None:
        message: str | None = None
        try:
            logger.info("Fetching news data from API...")
            descriptor = self._builder.build(country, category)
            headlines = await self._client.fetch(descriptor)
            articles = [
                normalize(raw, ordinal)
                for ordinal, raw in enumerate(headlines.articles, start=1)
            ]
            self._renderer.render(articles)
            self._state = Success(articles=tuple(articles))
            message = f"Last updated: {self._clock().strftime('%H:%M:%S')}"
        except HeadlinesError as exc:
            logger.error("Error fetching news data: %s", exc)
            message = API_KEY_MISSING if isinstance(exc, ConfigurationError) else LOAD_FAILED
            self._fail(message, exc.kind)
        except Exception:
            logger.exception("Unexpected error during refresh cycle")
            message = LOAD_FAILED
            self._fail(message, "unexpected")
        finally:
            self._finish()
            if message is not None:
                self._status.report(message)

    async def aclose(self) -> None:
        task = self.in_flight
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            logger.info("In-flight refresh cancelled on shutdown")
        # A task cancelled before its first step never reaches its finally
        if self._busy:
            self._finish()

    def snapshot(self) -> FeedSnapshot:
        state = self._state
        return FeedSnapshot(
            state=state.tag,
            loading=self._busy,
            refresh_enabled=not self._busy,
            refresh_label=LOADING_LABEL if self._busy else REFRESH_LABEL,
            error_visible=self.error_visible,
            error_kind=state.kind if isinstance(state, Failed) else None,
            status=self._status.message,
            connected=self._status.connected,
            articles=list(self._renderer.cards),
            cards_html=self._renderer.to_html(),
        )
