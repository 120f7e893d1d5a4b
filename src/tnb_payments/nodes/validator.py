"""
tnb_payments.nodes.validator

Validator proxies.

Responsibilities:
- Common validator listings and config discovery (`Validator`).
- Balance-lock lookup used before every new transaction set (`PrimaryValidator`).
- Bank confirmation services (`ConfirmationValidator`).
"""

from __future__ import annotations

from typing import Any

from tnb_payments.models.nodes import AccountBalance, BalanceLock, Page, ValidatorConfig
from tnb_payments.models.pagination import PaginationOptions
from tnb_payments.nodes.server_node import ServerNode


class Validator(ServerNode):
    async def get_accounts(self, options: PaginationOptions | None = None) -> Page:
        return await self.get_paginated_data("/accounts", options)

    async def get_account_balance(self, account_number: str) -> AccountBalance:
        path = f"/accounts/{account_number}/balance"
        return self._parse(AccountBalance, await self.get_data(path), path)

    async def get_account_balance_lock(self, account_number: str) -> BalanceLock:
        path = f"/accounts/{account_number}/balance_lock"
        return self._parse(BalanceLock, await self.get_data(path), path)

    async def get_banks(self, options: PaginationOptions | None = None) -> Page:
        return await self.get_paginated_data("/banks", options)

    async def get_validators(self, options: PaginationOptions | None = None) -> Page:
        return await self.get_paginated_data("/validators", options)

    async def get_config(self) -> ValidatorConfig:
        data = await self.get_data("/config")
        return self._parse(ValidatorConfig, data, "/config")


class PrimaryValidator(Validator):
    pass


class ConfirmationValidator(Validator):
    async def get_bank_confirmation_services(self) -> Any:
        return await self.get_data("/bank_confirmation_services")
