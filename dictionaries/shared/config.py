# dictionaries/shared/config.py
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class AssetSourceKind(str, Enum):
    PACKAGE = "package"
    DIRECTORY = "directory"


LOG_FORMATS = ("console", "json")


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Every field can be overridden with a DICTIONARIES_-prefixed environment
    variable or a .env file, e.g. DICTIONARIES_ASSET_DIR=/srv/dictionaries.
    """

    # --- Application Meta ---
    APP_NAME: str = "strength-dictionaries"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT

    # --- Logging ---
    LOG_LEVEL: str = Field("INFO", description="stdlib level name, case-insensitive")
    LOG_FORMAT: str = Field("console", description="console | json")

    # --- Asset Resolution ---
    ASSET_SOURCE: AssetSourceKind = AssetSourceKind.PACKAGE
    ASSET_PACKAGE: str = "dictionaries.data"
    # Only read when ASSET_SOURCE is "directory"
    ASSET_DIR: Optional[str] = None

    # --- Validation ---
    # Error-level schema issues abort loading instead of being logged.
    STRICT_SCHEMA: bool = False

    model_config = SettingsConfigDict(
        env_prefix="DICTIONARIES_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def _check_format(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in LOG_FORMATS:
            raise ValueError(f"must be one of {', '.join(LOG_FORMATS)}")
        return v


settings = Settings()
