"""
tnb_payments

Top-level package for the async bank/primary-validator payment client.

Responsibilities:
- Expose package version metadata.
- Re-export the public entry points (`PaymentHandler`, `Account`, `Transaction`).
"""

from tnb_payments.models.account import Account
from tnb_payments.models.transaction import Transaction, TransactionBundle
from tnb_payments.payments.handler import PaymentHandler

__all__ = ["Account", "PaymentHandler", "Transaction", "TransactionBundle", "__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Node proxies live in `tnb_payments.nodes`; import them from there directly.
