from newsboard.config.settings import PLACEHOLDER_API_KEY, Settings
from newsboard.modules.headlines.errors import ConfigurationError
from newsboard.modules.headlines.schemas import RequestDescriptor

TOP_HEADLINES_PATH = "/top-headlines"


class RequestBuilder:
    """Composes the top-headlines query from static settings."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def build(
        self, country: str | None = None, category: str | None = None
    ) -> RequestDescriptor:
        credential = self._settings.news_api_key
        if not credential or credential == PLACEHOLDER_API_KEY:
            raise ConfigurationError("News API key is not configured")

        return RequestDescriptor(
            endpoint=self._settings.news_api_base_url.rstrip("/") + TOP_HEADLINES_PATH,
            params={
                "country": self._settings.default_country if country is None else country,
                "category": self._settings.default_category if category is None else category,
            },
            credential=credential,
        )
