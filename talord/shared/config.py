# talord/shared/config.py
from enum import Enum
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.

    Every key can be overridden from the environment (or a .env file) using
    the TALORD_ prefix, e.g. TALORD_LOG_LEVEL=DEBUG.
    """

    # --- Application Meta ---
    APP_NAME: str = "Talord"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = True

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE

    # --- Lexicon ---
    # Path to a JSON lexicon card. None means the bundled data/da.json card.
    LEXICON_PATH: Optional[str] = None

    # --- HTTP API ---
    API_PREFIX: str = "/api/v1"
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    MAX_BATCH_SIZE: int = 100

    model_config = SettingsConfigDict(
        env_prefix="TALORD_", env_file=".env", extra="ignore"
    )


settings = Settings()
