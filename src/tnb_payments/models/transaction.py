"""
tnb_payments.models.transaction

Transactions and the bundle submitted to a bank in one broadcast.

Responsibilities:
- Model a single transfer request (`Transaction`).
- Model the ordered, lock-anchored set submitted as one block (`TransactionBundle`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, PositiveInt

from tnb_payments.models.account import Account


class Transaction(BaseModel):
    """
    A transfer of `amount` units to `recipient`.

    `fee` is a classification label (the node type that charges it), never an
    amount; fee transactions carry their cost in `amount` like any other transfer.
    """

    model_config = ConfigDict(frozen=True)

    recipient: str
    amount: PositiveInt
    fee: str | None = None

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


@dataclass(frozen=True, slots=True)
class TransactionBundle:
    # `balance_lock` is passed through exactly as the primary validator returned it.
    balance_lock: str | None
    transactions: tuple[Transaction, ...]
    sender: Account

    @property
    def total_amount(self) -> int:
        return sum(tx.amount for tx in self.transactions)


# --- Module Notes -----------------------------------------------------------
# Bundles are immutable; ordering of `transactions` is preserved verbatim up to
# `Bank.add_blocks`, which serializes them in the same order.
