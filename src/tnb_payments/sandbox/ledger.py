"""
tnb_payments.sandbox.ledger

Toy ledger shared by the sandbox bank and primary validator.
"""

from __future__ import annotations

import hashlib
import json
import uuid
from dataclasses import dataclass, field
from typing import Any

from tnb_payments.models.transaction import Transaction


class LedgerError(Exception):
    pass


@dataclass(slots=True)
class AccountRecord:
    balance: int = 0
    balance_lock: str | None = None


@dataclass(slots=True)
class Ledger:
    accounts: dict[str, AccountRecord] = field(default_factory=dict)
    blocks: list[dict[str, Any]] = field(default_factory=list)
    bank_transactions: list[dict[str, Any]] = field(default_factory=list)

    def credit(self, account_number: str, amount: int) -> None:
        self.accounts.setdefault(account_number, AccountRecord()).balance += amount

    def balance(self, account_number: str) -> int:
        record = self.accounts.get(account_number)
        return record.balance if record else 0

    def balance_lock(self, account_number: str) -> str:
        # An account that never sent anything is locked on its own account number.
        record = self.accounts.get(account_number)
        if record is None or record.balance_lock is None:
            return account_number
        return record.balance_lock

    def apply_block(
        self, *, account_number: str, balance_key: str | None, txs: list[Transaction]
    ) -> dict[str, Any]:
        if not txs:
            raise LedgerError("Block contains no transactions")
        if balance_key != self.balance_lock(account_number):
            raise LedgerError("Invalid balance key")
        total = sum(tx.amount for tx in txs)
        if total > self.balance(account_number):
            raise LedgerError("Insufficient funds")

        message = {"balance_key": balance_key, "txs": [tx.to_wire() for tx in txs]}
        sender = self.accounts[account_number]
        sender.balance -= total
        sender.balance_lock = hashlib.sha256(
            json.dumps(message, sort_keys=True).encode()
        ).hexdigest()
        for tx in txs:
            self.credit(tx.recipient, tx.amount)

        block = {
            "id": str(uuid.uuid4()),
            "balance_key": balance_key,
            "sender": account_number,
            "signature": "",
        }
        self.blocks.append(block)
        for tx in txs:
            self.bank_transactions.append(
                {"id": str(uuid.uuid4()), "block": block, **tx.to_wire()}
            )
        return block
