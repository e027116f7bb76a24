"""Runtime configuration for the n-min-finder service."""

import os
from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Settings(BaseSettings):
    """
    Service settings, overridable through ``NMIN_``-prefixed environment variables
    (for example ``NMIN_PORT=9000``) or a local ``.env`` file.
    """

    model_config = SettingsConfigDict(env_prefix="NMIN_", env_file=".env", extra="ignore")

    # Application metadata shown in the OpenAPI docs
    app_title: str = Field(default="N-Min Finder API")
    app_description: str = Field(default="API for finding the N-th minimum number in an Excel file")
    app_version: str = Field(default="1.0.0")

    # Logging
    log_dir: str = Field(default=os.path.join(BASE_DIR, "logs"))
    log_level: str = Field(default="INFO")

    # HTTP server
    cors_origins: List[str] = Field(default=["*"])
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    reload: bool = Field(default=False)


@lru_cache
def get_settings() -> Settings:
    return Settings()
