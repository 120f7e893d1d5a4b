"""
tnb_payments.models

Value objects exchanged between the payment handler and the node proxies.

Responsibilities:
- Accounts, transactions and bundles (client-side domain).
- Typed snapshots of node responses (configs, balance locks, pages).
"""

from tnb_payments.models.account import Account
from tnb_payments.models.nodes import (
    AccountBalance,
    BalanceLock,
    BankConfig,
    NodeConfig,
    Page,
    PrimaryValidatorLocator,
    ValidatorConfig,
)
from tnb_payments.models.pagination import PaginationOptions, ServerNodeOptions
from tnb_payments.models.transaction import Transaction, TransactionBundle

__all__ = [
    "Account",
    "AccountBalance",
    "BalanceLock",
    "BankConfig",
    "NodeConfig",
    "Page",
    "PaginationOptions",
    "PrimaryValidatorLocator",
    "ServerNodeOptions",
    "Transaction",
    "TransactionBundle",
    "ValidatorConfig",
]
