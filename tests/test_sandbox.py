"""
tests.test_sandbox

End-to-end runs of `PaymentHandler` against the sandbox bank and primary validator.

Responsibilities:
- Serve both FastAPI apps in-process through `httpx.ASGITransport`.
- Check balances, lock rotation and rejection paths on a real ledger.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio

from tnb_payments.errors import BroadcastError
from tnb_payments.models.account import Account
from tnb_payments.models.transaction import Transaction
from tnb_payments.nodes import Bank, PrimaryValidator
from tnb_payments.payments.handler import PaymentHandler
from tnb_payments.sandbox.__main__ import build_apps
from tnb_payments.sandbox.app import SandboxNode, create_bank_app, create_validator_app
from tnb_payments.sandbox.ledger import Ledger
from tnb_payments.settings import Settings

BANK = SandboxNode(
    node_type="BANK", account_number="b" * 64, default_transaction_fee=1, ip_address="bank.test"
)
VALIDATOR = SandboxNode(
    node_type="PRIMARY_VALIDATOR",
    account_number="a" * 64,
    default_transaction_fee=2,
    ip_address="validator.test",
    port=8001,
)
SENDER = Account("c" * 64)
RECIPIENT = Account("d" * 64)


@pytest.fixture
def ledger() -> Ledger:
    ledger = Ledger()
    ledger.credit(SENDER.account_number, 1000)
    return ledger


@pytest_asyncio.fixture
async def http(ledger: Ledger) -> AsyncIterator[httpx.AsyncClient]:
    bank_app = create_bank_app(ledger=ledger, node=BANK, primary_validator=VALIDATOR.locator)
    validator_app = create_validator_app(ledger=ledger, node=VALIDATOR)
    mounts = {
        "http://bank.test": httpx.ASGITransport(app=bank_app),
        "http://validator.test:8001": httpx.ASGITransport(app=validator_app),
    }
    async with httpx.AsyncClient(mounts=mounts) as client:
        yield client


@pytest_asyncio.fixture
async def handler(http: httpx.AsyncClient) -> PaymentHandler:
    handler = PaymentHandler("http://bank.test", http=http, settings=Settings(env="test"))
    await handler.init()
    return handler


@pytest.mark.asyncio
async def test_send_coins_moves_amount_and_fees(handler: PaymentHandler, ledger: Ledger) -> None:
    bundle = await handler.send_coins(SENDER, RECIPIENT, 100)

    assert bundle.balance_lock == SENDER.account_number
    assert ledger.balance(SENDER.account_number) == 1000 - 100 - 1 - 2
    assert ledger.balance(RECIPIENT.account_number) == 100
    assert ledger.balance(BANK.account_number) == 1
    assert ledger.balance(VALIDATOR.account_number) == 2
    assert ledger.balance_lock(SENDER.account_number) != SENDER.account_number


@pytest.mark.asyncio
async def test_consecutive_sends_use_rotated_lock(handler: PaymentHandler, ledger: Ledger) -> None:
    first = await handler.send_coins(SENDER, RECIPIENT, 10)
    second = await handler.send_bulk_transactions(
        SENDER,
        [
            Transaction(recipient=RECIPIENT.account_number, amount=5),
            Transaction(recipient="e" * 64, amount=5),
        ],
    )

    assert first.balance_lock != second.balance_lock
    assert ledger.balance(RECIPIENT.account_number) == 15
    assert len(ledger.blocks) == 2
    assert len(ledger.bank_transactions) == 3 + 4


@pytest.mark.asyncio
async def test_stale_bundle_is_rejected(handler: PaymentHandler, ledger: Ledger) -> None:
    stale = await handler.create_transaction(SENDER, [Transaction(recipient="e" * 64, amount=1)])
    await handler.send_coins(SENDER, RECIPIENT, 1)

    with pytest.raises(BroadcastError):
        await handler.broadcast_transaction(stale)

    assert len(ledger.blocks) == 1


@pytest.mark.asyncio
async def test_insufficient_funds_is_rejected(handler: PaymentHandler, ledger: Ledger) -> None:
    with pytest.raises(BroadcastError):
        await handler.send_coins(SENDER, RECIPIENT, 1000)

    assert ledger.balance(SENDER.account_number) == 1000
    assert ledger.blocks == []


@pytest.mark.asyncio
async def test_listings_page_through_ledger(
    handler: PaymentHandler, http: httpx.AsyncClient
) -> None:
    await handler.send_coins(SENDER, RECIPIENT, 10)
    bank = Bank("http://bank.test", http=http)

    first = await bank.get_transactions({"limit": 2})
    rest = await bank.get_transactions({"limit": 2, "offset": 2})
    blocks = await bank.get_blocks()

    assert first.count == 3 and len(first.results) == 2
    assert first.next is not None and first.previous is None
    assert len(rest.results) == 1 and rest.previous is not None
    assert blocks.count == 1


@pytest.mark.asyncio
async def test_validator_reports_balances(handler: PaymentHandler, http: httpx.AsyncClient) -> None:
    await handler.send_coins(SENDER, RECIPIENT, 10)
    validator = PrimaryValidator("http://validator.test:8001", http=http)

    balance = await validator.get_account_balance(RECIPIENT.account_number)
    accounts = await validator.get_accounts()

    assert balance.balance == 10
    assert accounts.count == 4


@pytest.mark.asyncio
async def test_build_apps_seeds_treasury() -> None:
    settings = Settings(
        env="test",
        sandbox_host="localhost",
        sandbox_treasury_account="f" * 64,
        sandbox_treasury_balance=500,
    )
    bank_app, validator_app = build_apps(settings)

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=validator_app), base_url="http://localhost:8001"
    ) as client:
        r = await client.get(f"/accounts/{'f' * 64}/balance")
        assert r.json() == {"balance": 500}

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=bank_app), base_url="http://localhost:8000"
    ) as client:
        r = await client.get("/config")
        assert r.json()["primary_validator"] == {
            "ip_address": "localhost",
            "port": 8001,
            "protocol": "http",
        }
