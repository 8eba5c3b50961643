from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from agrimarket.domain.enums import RetentionPolicy


class DatabaseSettings(BaseSettings):
    """
    Database connection settings.
    Loaded automatically from .env with prefix DB_*
    """

    database_url: str = "sqlite+aiosqlite:///./agrimarket.db"
    echo_sql: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DB_",
        extra="ignore",
    )


class OrderSettings(BaseSettings):
    """
    Order lifecycle settings.
    Loaded automatically from .env with prefix ORDERS_*
    """

    # Applied by the lifecycle engine to every delivered order, for every view
    delivered_retention: RetentionPolicy = RetentionPolicy.RETAIN
    lookup_timeout_seconds: float = Field(default=5.0, gt=0)
    summary_limit: int = Field(default=5, ge=1)
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ORDERS_",
        extra="ignore",
    )


class AppSettings(BaseModel):
    """Application settings aggregator."""

    model_config = ConfigDict(extra="ignore")

    database: DatabaseSettings
    orders: OrderSettings


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return AppSettings(
        database=DatabaseSettings(),
        orders=OrderSettings(),
    )
