"""
tnb_payments.nodes

Async HTTP proxies for the remote node network.

Responsibilities:
- `ServerNode`: shared request/pagination client.
- `Bank`, `Validator`, `PrimaryValidator`, `ConfirmationValidator`: node-specific operations.
"""

from tnb_payments.nodes.bank import Bank
from tnb_payments.nodes.server_node import ServerNode
from tnb_payments.nodes.validator import ConfirmationValidator, PrimaryValidator, Validator

__all__ = ["Bank", "ConfirmationValidator", "PrimaryValidator", "ServerNode", "Validator"]


# --- Module Notes -----------------------------------------------------------
# The payment handler depends on this boundary, never on raw HTTP.
