from pydantic_settings import BaseSettings, SettingsConfigDict

PLACEHOLDER_API_KEY = "YOUR_API_KEY_HERE"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Get a free key from https://newsapi.org/register
    news_api_key: str = PLACEHOLDER_API_KEY
    news_api_base_url: str = "https://newsapi.org/v2"
    default_country: str = "us"
    default_category: str = "technology"
    request_timeout: float = 10.0

    log_level: str = "INFO"
    app_host: str = "0.0.0.0"
    app_port: int = 8000


settings = Settings()
