from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PriceFeedSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RELAYSTATUS_",
        env_file=("../.env", ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )
    coingecko_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("COINGECKO_API_KEY", "RELAYSTATUS_COINGECKO_API_KEY"),
    )
    coingecko_base_url: str = "https://api.coingecko.com/api/v3"
    # Pro plans authenticate with x-cg-pro-api-key against pro-api.coingecko.com.
    coingecko_api_key_header: str = "x-cg-demo-api-key"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RELAYSTATUS_",
        env_file=("../.env", ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    relayer_url_template: str = "https://{name}-relayer.sequence.app/status"
    fanout_concurrency: int = Field(default=12, ge=1)
    request_timeout_seconds: float | None = Field(default=None, gt=0)
    log_level: str = "INFO"

    price_feed: PriceFeedSettings = Field(default_factory=PriceFeedSettings)


settings = Settings()
