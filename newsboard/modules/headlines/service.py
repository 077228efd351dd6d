import logging

import httpx
from pydantic import ValidationError

from newsboard.modules.headlines.errors import HttpStatusError, NetworkError, ParseError
from newsboard.modules.headlines.schemas import HeadlinesResponse, RequestDescriptor

logger = logging.getLogger(__name__)

# httpx logs every request URL at INFO, apiKey included
for _name in ("httpx", "httpcore"):
    logging.getLogger(_name).setLevel(logging.WARNING)

_HEADERS = {
    "User-Agent": "newsboard/0.1",
    "Accept": "application/json",
}


def _provider_message(response: httpx.Response) -> str | None:
    # NewsAPI error bodies look like {"status": "error", "code": ..., "message": ...}
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return None


class HeadlinesClient:
    """Issues one top-headlines GET and classifies how it went wrong."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch(self, descriptor: RequestDescriptor) -> HeadlinesResponse:
        logger.info("GET %s", descriptor.redacted_url)
        try:
            response = await self._client.get(
                descriptor.endpoint,
                params=descriptor.query(),
                headers=_HEADERS,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            raise HttpStatusError(status_code, _provider_message(exc.response)) from exc
        except httpx.RequestError as exc:
            raise NetworkError(f"{type(exc).__name__}: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise ParseError(f"Response body is not JSON: {exc}") from exc

        try:
            headlines = HeadlinesResponse.model_validate(payload)
        except ValidationError as exc:
            raise ParseError(f"Unexpected response shape: {exc}") from exc

        logger.info("Successfully fetched %d news articles", len(headlines.articles))
        return headlines
