"""Configuration management for the payment-gateways demo."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Settings loaded from PAYMENT_GATEWAYS_* environment variables."""

    log_level: LogLevel = Field(default="WARNING", description="Operational log level")
    log_json: bool = Field(default=False, description="Render operational logs as JSON")
    demo_gateways: list[str] = Field(
        default_factory=lambda: ["pagseguro", "mercadopago", "stripe"],
        description="Gateways the demo runs, in order",
    )

    model_config = SettingsConfigDict(
        env_prefix="PAYMENT_GATEWAYS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _uppercase_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Settings singleton, read from the environment on first use."""
    return Settings()
