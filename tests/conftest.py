"""
tests.conftest

Shared fixtures: a fake bank/validator network behind `httpx.MockTransport`.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

import httpx
import pytest
import pytest_asyncio

from tnb_payments.models.account import Account
from tnb_payments.payments.handler import PaymentHandler
from tnb_payments.settings import Settings

BANK_URL = "http://bank.test"
VALIDATOR_HOST = "validator.test"
SENDER = Account("ab" * 32)


def bank_config(*, port: int | None = 8001, **overrides: Any) -> dict[str, Any]:
    return {
        "node_type": "BANK",
        "account_number": "B",
        "default_transaction_fee": 1,
        "primary_validator": {"ip_address": VALIDATOR_HOST, "port": port, "protocol": "http"},
        **overrides,
    }


def validator_config(**overrides: Any) -> dict[str, Any]:
    return {
        "node_type": "VALIDATOR",
        "account_number": "V",
        "default_transaction_fee": 2,
        **overrides,
    }


class FakeNetwork:
    """
    Routes requests by (method, host, path). A route may answer with JSON or raise.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str, str], Any] = {}
        self.requests: list[httpx.Request] = []

    def on(
        self,
        method: str,
        host: str,
        path: str,
        *,
        json: Any = None,
        status: int = 200,
        error: type[httpx.HTTPError] | None = None,
    ) -> None:
        self.routes[(method, host, path)] = (json, status, error)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.host, request.url.path)
        if key not in self.routes:
            return httpx.Response(404, json={"detail": "Not found"})
        json, status, error = self.routes[key]
        if error is not None:
            raise error("fake network failure", request=request)
        return httpx.Response(status, json=json)

    def paths(self, host: str | None = None) -> list[tuple[str, str]]:
        return [
            (r.method, r.url.path) for r in self.requests if host is None or r.url.host == host
        ]

    def serve_ready_network(self, *, port: int | None = 8001, lock: str | None = "L") -> None:
        self.on("GET", "bank.test", "/config", json=bank_config(port=port))
        self.on("GET", VALIDATOR_HOST, "/config", json=validator_config())
        self.on(
            "GET",
            VALIDATOR_HOST,
            f"/accounts/{SENDER.account_number}/balance_lock",
            json={"balance_lock": lock},
        )
        self.on("POST", "bank.test", "/blocks", json={"id": "block-1"}, status=201)


@pytest.fixture
def network() -> FakeNetwork:
    return FakeNetwork()


@pytest_asyncio.fixture
async def http(network: FakeNetwork) -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(transport=httpx.MockTransport(network.handler)) as client:
        yield client


@pytest.fixture
def handler(http: httpx.AsyncClient) -> PaymentHandler:
    return PaymentHandler(BANK_URL, http=http, settings=Settings(env="test"))


# --- Module Notes -----------------------------------------------------------
# Unknown routes answer 404 so a misrouted request surfaces as NodeRequestError.
