import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from newsboard.modules.feed.controller import FeedController
    from newsboard.modules.feed.status import StatusReporter

logger = logging.getLogger(__name__)

TriggerAction = Callable[[], Any]

PAGE_LOAD = "page-load"
REFRESH_CLICK = "refresh-click"
REFRESH_SHORTCUT = "refresh-shortcut"
ONLINE = "online"
OFFLINE = "offline"


class UnknownTriggerError(KeyError):
    pass


class TriggerBindings:
    """Maps named UI/platform events to the action each one runs."""

    def __init__(self) -> None:
        self._actions: dict[str, TriggerAction] = {}

    def bind(self, event: str, action: TriggerAction) -> None:
        if event in self._actions:
            raise ValueError(f"Trigger '{event}' is already bound")
        self._actions[event] = action

    def dispatch(self, event: str) -> Any:
        action = self._actions.get(event)
        if action is None:
            raise UnknownTriggerError(event)
        logger.info("Trigger: %s", event)
        return action()

    def events(self) -> list[str]:
        return list(self._actions)


def bind_feed_triggers(
    bindings: TriggerBindings, controller: "FeedController", status: "StatusReporter"
) -> TriggerBindings:
    bindings.bind(PAGE_LOAD, controller.refresh)
    bindings.bind(REFRESH_CLICK, controller.refresh)
    bindings.bind(REFRESH_SHORTCUT, controller.refresh)
    bindings.bind(ONLINE, status.connection_restored)
    bindings.bind(OFFLINE, status.connection_lost)
    return bindings
