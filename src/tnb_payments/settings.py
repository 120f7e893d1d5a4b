"""
tnb_payments.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the client, its node proxies and the sandbox.
- Offer a cached settings instance for callers that do not build their own.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TNB_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "tnb-payments"
    log_level: str = "INFO"

    # Bank used by PaymentHandler when no explicit URL is passed.
    bank_url: str = "http://localhost:8000"

    # Applied by the transport to every node request; the handler itself never cancels.
    request_timeout_seconds: float = Field(default=10.0, gt=0)

    default_pagination_limit: int = Field(default=20, ge=1)
    default_pagination_offset: int = Field(default=0, ge=0)

    # Sandbox nodes (python -m tnb_payments.sandbox)
    sandbox_host: str = "127.0.0.1"
    sandbox_bank_port: int = 8000
    sandbox_validator_port: int = 8001
    sandbox_treasury_account: str = "0" * 64
    sandbox_treasury_balance: int = Field(default=1_000_000, ge=0)
    sandbox_bank_fee: int = Field(default=1, ge=1)
    sandbox_validator_fee: int = Field(default=1, ge=1)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Settings are read once per process; tests pass explicit `Settings(...)` instances instead.
