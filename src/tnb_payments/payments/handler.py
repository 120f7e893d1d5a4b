"""
tnb_payments.payments.handler

End-to-end payment lifecycle against one bank and its primary validator.

Responsibilities:
- Discover the bank config, then the primary validator it points at (`init`).
- Fetch a fresh balance lock and append the node fee transactions (`create_transaction`).
- Submit the resulting bundle to the bank in one call (`broadcast_transaction`).
"""

from __future__ import annotations

from collections.abc import Sequence

import httpx

from tnb_payments.errors import (
    BALANCE_LOCK_FAILED,
    BANK_CONFIG_FAILED,
    PRIMARY_VALIDATOR_CONFIG_FAILED,
    BalanceLockError,
    ConfigLoadError,
    HandlerNotReadyError,
    NodeRequestError,
)
from tnb_payments.models.account import Account, account_number_of
from tnb_payments.models.nodes import BankConfig, NodeConfig, ValidatorConfig
from tnb_payments.models.transaction import Transaction, TransactionBundle
from tnb_payments.nodes.bank import Bank
from tnb_payments.nodes.validator import PrimaryValidator
from tnb_payments.observability.logging import get_logger, operation_context
from tnb_payments.payments.state import (
    BankLoaded,
    HandlerState,
    Ready,
    Uninitialized,
    primary_validator_of,
    with_bank_config,
)
from tnb_payments.settings import Settings, get_settings

log = get_logger(__name__)


class PaymentHandler:
    """
    Client-side orchestrator for value transfers.

    Call `init()` once before creating transactions. Operations are strictly
    sequential and the instance is not meant to be shared by concurrent callers:
    when two refreshes race, the last one to complete wins.
    """

    def __init__(
        self,
        bank_url: str | None = None,
        *,
        http: httpx.AsyncClient | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._http = http
        self.bank = Bank(
            bank_url or self._settings.bank_url,
            options=self._node_options(),
            http=http,
            timeout=self._settings.request_timeout_seconds,
        )
        self._state: HandlerState = Uninitialized()

    @property
    def state(self) -> HandlerState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return isinstance(self._state, Ready)

    @property
    def bank_config(self) -> BankConfig | None:
        if isinstance(self._state, (BankLoaded, Ready)):
            return self._state.bank_config
        return None

    @property
    def primary_validator(self) -> PrimaryValidator | None:
        return primary_validator_of(self._state)

    @property
    def primary_validator_config(self) -> ValidatorConfig | None:
        if isinstance(self._state, Ready):
            return self._state.validator_config
        return None

    async def init(self) -> None:
        # No rollback: a failure in the second step keeps the bank snapshot from the first.
        with operation_context(bank=self.bank.url):
            await self.update_bank()
            await self.update_primary_validator()

    async def update_bank(self) -> None:
        try:
            config = await self.bank.get_config()
        except NodeRequestError as e:
            raise ConfigLoadError(BANK_CONFIG_FAILED, e) from e
        self._state = with_bank_config(self._state, config)
        log.info("bank_config_loaded", bank=self.bank.url, node_identifier=config.node_identifier)

    async def update_primary_validator(self) -> None:
        state = self._state
        if isinstance(state, Uninitialized):
            log.debug("primary_validator_update_skipped", reason="no_bank_config")
            return
        locator = state.bank_config.primary_validator
        if locator is None:
            # A bank without a primary validator cannot issue balance locks.
            raise ConfigLoadError(PRIMARY_VALIDATOR_CONFIG_FAILED)

        validator = PrimaryValidator(
            locator.url,
            options=self._node_options(),
            http=self._http,
            timeout=self._settings.request_timeout_seconds,
        )
        try:
            config = await validator.get_config()
        except NodeRequestError as e:
            # A Ready pair is never split; before that, keep the proxy for balance-lock lookups.
            if isinstance(self._state, BankLoaded):
                self._state = BankLoaded(
                    bank_config=self._state.bank_config, primary_validator=validator
                )
            raise ConfigLoadError(PRIMARY_VALIDATOR_CONFIG_FAILED, e) from e

        # Re-read: a concurrent update_bank may have swapped the bank snapshot meanwhile.
        bank_config = self.bank_config or state.bank_config
        self._state = Ready(
            bank_config=bank_config, primary_validator=validator, validator_config=config
        )
        log.info("primary_validator_config_loaded", validator=validator.url)

    async def create_transaction(
        self, sender: Account, txs: Sequence[Transaction]
    ) -> TransactionBundle:
        """
        Build an unsubmitted bundle: `txs` followed by the bank fee, then the validator fee.

        The balance lock is always fetched fresh. Raises `BalanceLockError` when it
        cannot be obtained and `HandlerNotReadyError` when `init()` has not completed.
        """

        validator = primary_validator_of(self._state)
        if validator is None:
            raise HandlerNotReadyError("PaymentHandler.init() must complete before sending.")

        try:
            lock = await validator.get_account_balance_lock(sender.account_number)
        except NodeRequestError as e:
            raise BalanceLockError(BALANCE_LOCK_FAILED, e) from e
        log.debug("balance_lock_fetched", sender=sender.account_number)

        state = self._state
        if not isinstance(state, Ready):
            raise HandlerNotReadyError("PaymentHandler.init() must complete before sending.")

        transactions = (
            *txs,
            _fee_transaction(state.bank_config),
            _fee_transaction(state.validator_config),
        )
        bundle = TransactionBundle(
            balance_lock=lock.balance_lock, transactions=transactions, sender=sender
        )
        log.info(
            "bundle_assembled",
            sender=sender.account_number,
            transactions=len(transactions),
            total_amount=bundle.total_amount,
        )
        return bundle

    async def broadcast_transaction(self, bundle: TransactionBundle) -> None:
        # Bank.add_blocks raises BroadcastError itself; it is not wrapped again here.
        await self.bank.add_blocks(bundle.balance_lock, bundle.transactions, bundle.sender)
        log.info(
            "bundle_broadcast",
            sender=bundle.sender.account_number,
            transactions=len(bundle.transactions),
        )

    async def send_coins(
        self, sender: Account, recipient: str | Account, amount: int
    ) -> TransactionBundle:
        tx = Transaction(recipient=account_number_of(recipient), amount=amount)
        return await self.send_bulk_transactions(sender, [tx])

    async def send_bulk_transactions(
        self, sender: Account, txs: Sequence[Transaction]
    ) -> TransactionBundle:
        # Not atomic: if broadcast fails, retry from create_transaction to get a fresh lock.
        with operation_context(bank=self.bank.url, sender=sender.account_number):
            bundle = await self.create_transaction(sender, txs)
            await self.broadcast_transaction(bundle)
        return bundle

    def _node_options(self) -> dict:
        return {
            "default_pagination": {
                "limit": self._settings.default_pagination_limit,
                "offset": self._settings.default_pagination_offset,
            }
        }


def _fee_transaction(config: NodeConfig) -> Transaction:
    # The node type doubles as the fee label on the wire.
    return Transaction(
        recipient=config.account_number,
        amount=config.default_transaction_fee,
        fee=config.node_type,
    )


# --- Module Notes -----------------------------------------------------------
# Config snapshots are never merged: each refresh swaps in a whole new state value.
