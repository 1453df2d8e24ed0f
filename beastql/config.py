"""
Configuration settings for BeastQL.

Uses Pydantic Settings to load environment variables for the seed document,
identifier counter, logging, and the HTTP/GraphQL endpoint.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Store
    beast_seed_path: Path = Field(Path("./beastData.json"), alias="BEAST_SEED_PATH")
    beast_id_start: int = Field(5, alias="BEAST_ID_START")

    # HTTP / GraphQL
    host: str = Field("127.0.0.1", alias="HOST")
    port: int = Field(8080, alias="PORT")
    graphql_path: str = Field("/graphql", alias="GRAPHQL_PATH")
    graphiql_enabled: bool = Field(True, alias="GRAPHIQL_ENABLED")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
