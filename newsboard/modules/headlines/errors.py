class HeadlinesError(Exception):
    """Base class for every way a headline fetch can fail."""

    kind = "unknown"


class ConfigurationError(HeadlinesError):
    """The API credential is missing or still the placeholder."""

    kind = "configuration"


class NetworkError(HeadlinesError):
    """The request never produced a response (connect, DNS, timeout)."""

    kind = "network"


class HttpStatusError(HeadlinesError):
    """The provider answered with a non-2xx status."""

    kind = "http_status"

    def __init__(self, status_code: int, detail: str | None = None) -> None:
        self.status_code = status_code
        self.detail = detail
        message = f"HTTP error! status: {status_code}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class ParseError(HeadlinesError):
    """The body was not JSON or did not have an ``articles`` list."""

    kind = "parse"
