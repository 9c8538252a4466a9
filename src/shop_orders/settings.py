"""
shop_orders.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for persistence and logging.
- Offer a cached settings instance for callers that do not build their own.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration (`SHOP_*` variables); defaults are safe for local dev.
    """

    model_config = SettingsConfigDict(env_prefix="SHOP_", case_sensitive=False)

    # Environment controls whether `init_db` may create tables implicitly.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "shop-orders"
    log_level: str = "INFO"

    # Persistence. Server URLs may carry credentials, so keep them out of reprs.
    database_url: str = Field(default="sqlite+aiosqlite:///./shop.db", repr=False)
    sql_echo: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests build `Settings(...)` directly; `get_settings` is for entrypoints only.
