"""
tnb_payments.models.nodes

Typed snapshots of bank and validator responses.

Responsibilities:
- Validate the subset of node payloads the client depends on.
- Keep snapshots immutable; unknown fields are retained for inspection.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PositiveInt


class _Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")


class PrimaryValidatorLocator(_Snapshot):
    ip_address: str
    port: int | None = None
    protocol: str = "http"

    @property
    def url(self) -> str:
        # A null port is omitted entirely rather than rendered.
        url = f"{self.protocol}://{self.ip_address}"
        if self.port is not None:
            url += f":{self.port}"
        return url


class NodeConfig(_Snapshot):
    node_type: str
    account_number: str
    default_transaction_fee: PositiveInt
    node_identifier: str | None = None
    ip_address: str | None = None
    port: int | None = None
    protocol: str | None = None
    version: str | None = None


class BankConfig(NodeConfig):
    primary_validator: PrimaryValidatorLocator | None = None


class ValidatorConfig(NodeConfig):
    root_account_file: str | None = None
    seed_block_identifier: str | None = None
    daily_confirmation_rate: int | None = None


class BalanceLock(_Snapshot):
    balance_lock: str | None = None


class AccountBalance(_Snapshot):
    balance: int | None = None


class Page(_Snapshot):
    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[Any] = Field(default_factory=list)
