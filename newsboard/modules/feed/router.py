from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse

from newsboard.modules.feed.bindings import TriggerBindings, UnknownTriggerError
from newsboard.modules.feed.controller import FeedController
from newsboard.modules.feed.schemas import FeedSnapshot, RefreshResponse, TriggerResponse

router = APIRouter()


def get_controller(request: Request) -> FeedController:
    return request.app.state.controller


def get_bindings(request: Request) -> TriggerBindings:
    return request.app.state.bindings


@router.get("", response_model=FeedSnapshot)
async def get_feed(controller: FeedController = Depends(get_controller)):
    return controller.snapshot()


@router.get("/cards", response_class=HTMLResponse)
async def get_cards(controller: FeedController = Depends(get_controller)) -> str:
    return controller.snapshot().cards_html


@router.post("/refresh", response_model=RefreshResponse, status_code=202)
async def refresh(controller: FeedController = Depends(get_controller)):
    return RefreshResponse(started=controller.refresh() is not None)


@router.post("/events/{event}", response_model=TriggerResponse, status_code=202)
async def trigger(
    event: str,
    bindings: TriggerBindings = Depends(get_bindings),
    controller: FeedController = Depends(get_controller),
):
    try:
        bindings.dispatch(event)
    except UnknownTriggerError:
        raise HTTPException(status_code=404, detail=f"Unknown trigger '{event}'")
    return TriggerResponse(event=event, state=controller.state.tag)
