"""
tnb_payments.sandbox.app

FastAPI app factories for the sandbox bank and primary validator.

Responsibilities:
- Serve node configs and paginated listings from a shared `Ledger`.
- Accept blocks on the bank and answer balance/lock lookups on the validator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fastapi import APIRouter, FastAPI, HTTPException, Request
from pydantic import BaseModel, Field
from starlette.status import HTTP_201_CREATED, HTTP_400_BAD_REQUEST

from tnb_payments.models.nodes import PrimaryValidatorLocator
from tnb_payments.models.transaction import Transaction
from tnb_payments.observability.logging import get_logger
from tnb_payments.sandbox.ledger import Ledger, LedgerError

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class SandboxNode:
    node_type: str
    account_number: str
    default_transaction_fee: int
    ip_address: str = "127.0.0.1"
    port: int | None = None
    protocol: str = "http"

    @property
    def locator(self) -> PrimaryValidatorLocator:
        return PrimaryValidatorLocator(
            ip_address=self.ip_address, port=self.port, protocol=self.protocol
        )

    def config(self) -> dict[str, Any]:
        return {
            "node_type": self.node_type,
            "account_number": self.account_number,
            "default_transaction_fee": self.default_transaction_fee,
            "node_identifier": self.account_number,
            "ip_address": self.ip_address,
            "port": self.port,
            "protocol": self.protocol,
            "version": "v1.0",
        }


class BlockMessage(BaseModel):
    balance_key: str | None = None
    txs: list[Transaction] = Field(default_factory=list)


class BlockRequest(BaseModel):
    account_number: str
    message: BlockMessage
    signature: str | None = None


def paginate(request: Request, items: list[Any], *, limit: int, offset: int) -> dict[str, Any]:
    page = items[offset : offset + limit]
    next_url = previous_url = None
    if offset + limit < len(items):
        next_url = str(request.url.include_query_params(limit=limit, offset=offset + limit))
    if offset > 0:
        previous_url = str(
            request.url.include_query_params(limit=limit, offset=max(offset - limit, 0))
        )
    return {"count": len(items), "next": next_url, "previous": previous_url, "results": page}


def _accounts_router(ledger: Ledger) -> APIRouter:
    router = APIRouter()

    @router.get("/accounts")
    async def list_accounts(request: Request, limit: int = 20, offset: int = 0) -> dict[str, Any]:
        items = [
            {
                "account_number": number,
                "balance": record.balance,
                "balance_lock": record.balance_lock,
            }
            for number, record in ledger.accounts.items()
        ]
        return paginate(request, items, limit=limit, offset=offset)

    return router


def create_bank_app(
    *, ledger: Ledger, node: SandboxNode, primary_validator: PrimaryValidatorLocator
) -> FastAPI:
    app = FastAPI(title="Sandbox bank", version="0.1.0")
    router = _accounts_router(ledger)

    @router.get("/config")
    async def config() -> dict[str, Any]:
        return {**node.config(), "primary_validator": primary_validator.model_dump()}

    @router.get("/bank_transactions")
    async def bank_transactions(
        request: Request, limit: int = 20, offset: int = 0
    ) -> dict[str, Any]:
        return paginate(request, ledger.bank_transactions, limit=limit, offset=offset)

    @router.get("/blocks")
    async def list_blocks(request: Request, limit: int = 20, offset: int = 0) -> dict[str, Any]:
        return paginate(request, ledger.blocks, limit=limit, offset=offset)

    @router.post("/blocks", status_code=HTTP_201_CREATED)
    async def add_block(body: BlockRequest) -> dict[str, Any]:
        try:
            block = ledger.apply_block(
                account_number=body.account_number,
                balance_key=body.message.balance_key,
                txs=body.message.txs,
            )
        except LedgerError as e:
            log.info("block_rejected", sender=body.account_number, reason=str(e))
            raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=str(e)) from e
        log.info("block_accepted", sender=body.account_number, txs=len(body.message.txs))
        return block

    app.include_router(router)
    return app


def create_validator_app(*, ledger: Ledger, node: SandboxNode) -> FastAPI:
    app = FastAPI(title="Sandbox primary validator", version="0.1.0")
    router = _accounts_router(ledger)

    @router.get("/config")
    async def config() -> dict[str, Any]:
        return node.config()

    @router.get("/accounts/{account_number}/balance")
    async def balance(account_number: str) -> dict[str, Any]:
        return {"balance": ledger.balance(account_number)}

    @router.get("/accounts/{account_number}/balance_lock")
    async def balance_lock(account_number: str) -> dict[str, Any]:
        return {"balance_lock": ledger.balance_lock(account_number)}

    app.include_router(router)
    return app


# --- Module Notes -----------------------------------------------------------
# Both apps share one Ledger instance so a block accepted by the bank is immediately
# visible to the validator's balance-lock endpoint.
