import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from newsboard.modules.headlines.schemas import DisplayArticle, RawArticle

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "No title available"
DEFAULT_DESCRIPTION = "No description available"
DEFAULT_SOURCE = "Unknown source"
INVALID_DATE = "Invalid Date"


def format_published_date(value: str | None) -> str:
    """Format an ISO-8601 timestamp as ``M/D/YYYY``.

    The calendar date is taken as published, without conversion to the local
    timezone. Anything missing or unparseable yields ``INVALID_DATE``.
    """
    if not value:
        return INVALID_DATE
    try:
        published = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return INVALID_DATE
    return f"{published.month}/{published.day}/{published.year}"


def _as_raw(raw: RawArticle | Mapping[str, Any] | None) -> RawArticle:
    if isinstance(raw, RawArticle):
        return raw
    if isinstance(raw, Mapping):
        try:
            return RawArticle.model_validate(dict(raw))
        except ValidationError:
            logger.warning("Unreadable article record, using defaults")
    return RawArticle()


def normalize(raw: RawArticle | Mapping[str, Any] | None, ordinal: int) -> DisplayArticle:
    article = _as_raw(raw)
    source_name = article.source.name if article.source else None
    return DisplayArticle(
        ordinal=ordinal,
        title=article.title or DEFAULT_TITLE,
        description=article.description or DEFAULT_DESCRIPTION,
        source_name=source_name or DEFAULT_SOURCE,
        published_date=format_published_date(article.published_at),
        article_url=article.url or None,
        image_url=article.url_to_image or None,
    )
