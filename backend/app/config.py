from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App settings
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    PROJECT_NAME: str = "ZenVibe"
    VERSION: str = "0.1.0"
    API_PREFIX: str = "/api"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"  # relative to backend/

    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    # Allow any localhost/127.0.0.1 port (useful for dev tools/proxies)
    CORS_ORIGIN_REGEX: str = r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$"

    # Gemini. An empty key is a supported state: AI features fall back to canned text.
    API_KEY: str = ""
    MODEL_NAME: str = "gemini-2.5-flash"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
