from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=None, case_sensitive=False)

    app_env: Literal["development", "test", "production"] = "development"
    database_url: str | None = None
    database_echo: bool = Field(default=False)
    database_ssl: bool = Field(default=False)
    auto_create_schema: bool = Field(default=True)

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)

    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)

    export_dir: Path | None = Field(default=None)


@lru_cache
def get_settings() -> Settings:
    return Settings()
