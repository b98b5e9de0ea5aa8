from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """
    application settings will be in here
    """

    #Application settings
    APP_NAME: str = "URL Shortener"
    APP_VERSION: str = "1.0.0"

    #Server
    HOST: str = "127.0.0.1"
    PORT: int = 3000

    #DATABASE CONFIG
    DATABASE_URL: str
    DB_ECHO: bool = False

    # URL Shortener Config
    BASE_URL: Optional[str] = None  # falls back to http://HOST:PORT
    ID_LENGTH: int = 10
    ID_MAX_RETRIES: int = 5
    DEDUPE_URLS: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None


    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

@lru_cache()
def get_settings() -> Settings:
    """
    Create and cache settings instance
    """
    return Settings()

settings = get_settings()
