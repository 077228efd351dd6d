import logging
from contextlib import asynccontextmanager
from pathlib import Path

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from newsboard.config.settings import Settings, settings
from newsboard.modules.feed.bindings import TriggerBindings, bind_feed_triggers
from newsboard.modules.feed.controller import FeedController
from newsboard.modules.feed.render import CardRenderer
from newsboard.modules.feed.router import router as feed_router
from newsboard.modules.feed.status import StatusReporter
from newsboard.modules.headlines.request_builder import RequestBuilder
from newsboard.modules.headlines.service import HeadlinesClient

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def build_controller(
    config: Settings, http: httpx.AsyncClient
) -> tuple[FeedController, TriggerBindings]:
    status = StatusReporter()
    controller = FeedController(
        builder=RequestBuilder(config),
        client=HeadlinesClient(http),
        renderer=CardRenderer(),
        status=status,
    )
    bindings = bind_feed_triggers(TriggerBindings(), controller, status)
    return controller, bindings


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with httpx.AsyncClient(timeout=settings.request_timeout) as http:
        controller, bindings = build_controller(settings, http)
        app.state.controller = controller
        app.state.bindings = bindings
        logger.info("Feed ready (triggers: %s)", ", ".join(bindings.events()))
        yield
        await controller.aclose()


app = FastAPI(title="Newsboard", lifespan=lifespan)

# API routes
app.include_router(feed_router, prefix="/api/feed", tags=["feed"])

# Static files
static_dir = Path(__file__).parent / "static"
app.mount("/static", StaticFiles(directory=static_dir), name="static")


@app.get("/")
async def root():
    return FileResponse(static_dir / "index.html")


@app.get("/health")
async def health():
    return {"status": "ok"}


def run() -> None:
    uvicorn.run(app, host=settings.app_host, port=settings.app_port)


if __name__ == "__main__":
    run()
