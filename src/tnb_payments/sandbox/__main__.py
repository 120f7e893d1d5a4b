"""
tnb_payments.sandbox.__main__

Entrypoint for running both sandbox nodes via `python -m tnb_payments.sandbox`.
"""

from __future__ import annotations

import asyncio

import uvicorn

from tnb_payments.observability.logging import configure_from_settings, get_logger
from tnb_payments.sandbox.app import SandboxNode, create_bank_app, create_validator_app
from tnb_payments.sandbox.ledger import Ledger
from tnb_payments.settings import Settings, get_settings

log = get_logger(__name__)


def build_apps(settings: Settings):
    ledger = Ledger()
    ledger.credit(settings.sandbox_treasury_account, settings.sandbox_treasury_balance)

    validator = SandboxNode(
        node_type="PRIMARY_VALIDATOR",
        account_number="a" * 64,
        default_transaction_fee=settings.sandbox_validator_fee,
        ip_address=settings.sandbox_host,
        port=settings.sandbox_validator_port,
    )
    bank = SandboxNode(
        node_type="BANK",
        account_number="b" * 64,
        default_transaction_fee=settings.sandbox_bank_fee,
        ip_address=settings.sandbox_host,
        port=settings.sandbox_bank_port,
    )
    bank_app = create_bank_app(ledger=ledger, node=bank, primary_validator=validator.locator)
    validator_app = create_validator_app(ledger=ledger, node=validator)
    return bank_app, validator_app


async def serve(settings: Settings) -> None:
    bank_app, validator_app = build_apps(settings)
    servers = [
        uvicorn.Server(
            uvicorn.Config(app, host=settings.sandbox_host, port=port, log_config=None)
        )
        for app, port in (
            (bank_app, settings.sandbox_bank_port),
            (validator_app, settings.sandbox_validator_port),
        )
    ]
    log.info(
        "sandbox_started",
        bank_port=settings.sandbox_bank_port,
        validator_port=settings.sandbox_validator_port,
    )
    await asyncio.gather(*(server.serve() for server in servers))


def main() -> None:
    settings = get_settings()
    configure_from_settings(settings)
    asyncio.run(serve(settings))


if __name__ == "__main__":
    main()
