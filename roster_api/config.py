"""
Configuration and settings for the roster admin API.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings for the FastAPI service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Shared secret checked by the login endpoint. Startup fails without it.
    admin_password: str = Field(default="")

    api_prefix: str = Field(default="/api")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    log_level: str = Field(default="INFO")

    # AWS (DynamoDB players table + S3 image bucket)
    aws_region: str = Field(default="us-east-1")
    aws_access_key_id: Optional[str] = Field(default=None)
    aws_secret_access_key: Optional[str] = Field(default=None)
    dynamodb_endpoint_url: Optional[str] = Field(default=None)
    s3_endpoint_url: Optional[str] = Field(default=None)
    players_table: str = Field(default="drefotball_players")
    images_bucket: str = Field(default="drefotball-player-images")
    images_public_base_url: Optional[str] = Field(default=None)

    # Settings document (any SQLAlchemy URL)
    database_url: Optional[str] = Field(default=None)

    # Development toggles
    use_in_memory_backends: bool = Field(
        default=False, validation_alias="ROSTER_USE_IN_MEMORY_BACKENDS"
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
