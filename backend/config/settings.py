from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Loads runtime configuration from the environment (and an optional .env file)."""
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    LOG_LEVEL: str = "INFO"

    CACHE_TTL_SECONDS: int = 24 * 60 * 60
    CACHE_SWEEP_INTERVAL_SECONDS: int = 60 * 60

    CORS_ORIGINS: List[str] = [
        "chrome-extension://*",
        "https://*.netlify.app",
        "http://localhost:3000",
    ]

    WIKIPEDIA_LANGUAGES: List[str] = ["fr", "en"]
    MIN_TEXT_LENGTH: int = 10
    HTTP_USER_AGENT: str = "Fact-Checker-Bot/1.0"


settings = Settings()
