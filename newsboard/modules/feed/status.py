import logging

logger = logging.getLogger(__name__)

CONNECTION_RESTORED = "Connection restored - Click refresh to reload"
CONNECTION_LOST = "No internet connection"


class StatusReporter:
    def __init__(self) -> None:
        self.message: str | None = None
        self.connected = True

    def report(self, message: str) -> None:
        self.message = message
        logger.info("Status: %s", message)

    def connection_restored(self) -> None:
        logger.info("Internet connection restored")
        self.connected = True
        self.report(CONNECTION_RESTORED)

    def connection_lost(self) -> None:
        logger.info("Internet connection lost")
        self.connected = False
        self.report(CONNECTION_LOST)
