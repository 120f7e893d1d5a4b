"""
tnb_payments.nodes.bank

Bank proxy: listings, config discovery and block submission.
"""

from __future__ import annotations

from collections.abc import Sequence

from tnb_payments.errors import BROADCAST_FAILED, BroadcastError, NodeRequestError
from tnb_payments.models.account import Account
from tnb_payments.models.nodes import BankConfig, Page
from tnb_payments.models.pagination import PaginationOptions
from tnb_payments.models.transaction import Transaction
from tnb_payments.nodes.server_node import ServerNode


class Bank(ServerNode):
    async def get_accounts(self, options: PaginationOptions | None = None) -> Page:
        return await self.get_paginated_data("/accounts", options)

    async def get_transactions(self, options: PaginationOptions | None = None) -> Page:
        return await self.get_paginated_data("/bank_transactions", options)

    async def get_banks(self, options: PaginationOptions | None = None) -> Page:
        return await self.get_paginated_data("/banks", options)

    async def get_blocks(self, options: PaginationOptions | None = None) -> Page:
        return await self.get_paginated_data("/blocks", options)

    async def get_confirmation_blocks(self, options: PaginationOptions | None = None) -> Page:
        return await self.get_paginated_data("/confirmation_blocks", options)

    async def get_invalid_blocks(self, options: PaginationOptions | None = None) -> Page:
        return await self.get_paginated_data("/invalid_blocks", options)

    async def get_validator_confirmation_services(
        self, options: PaginationOptions | None = None
    ) -> Page:
        return await self.get_paginated_data("/validator_confirmation_services", options)

    async def get_validators(self, options: PaginationOptions | None = None) -> Page:
        return await self.get_paginated_data("/validators", options)

    async def get_config(self) -> BankConfig:
        data = await self.get_data("/config")
        return self._parse(BankConfig, data, "/config")

    async def add_blocks(
        self,
        balance_lock: str | None,
        transactions: Sequence[Transaction],
        sender: Account,
    ) -> dict:
        """
        Submit `transactions` from `sender` as a single block anchored on `balance_lock`.

        Transactions are serialized in the order given. Any failure is raised as
        `BroadcastError`; nothing is retried or split.
        """

        body = {
            "account_number": sender.account_number,
            "message": {
                "balance_key": balance_lock,
                "txs": [tx.to_wire() for tx in transactions],
            },
        }
        try:
            return await self.post_data("/blocks", body)
        except NodeRequestError as e:
            raise BroadcastError(BROADCAST_FAILED, e) from e
