"""
tnb_payments.errors

Exception taxonomy for node requests and payment operations.

Responsibilities:
- Wrap every remote failure once, at its origin, with a fixed context message.
- Keep the underlying cause available for inspection (`.cause` and `__cause__`).
"""

from __future__ import annotations


class TNBError(Exception):
    """
    Base class for all errors raised by this package.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message} ({self.cause})"


class NodeRequestError(TNBError):
    """
    A request to a bank or validator failed (transport, HTTP status or payload parsing).
    """

    def __init__(self, path: str, cause: BaseException | None = None) -> None:
        super().__init__(f"Request to {path} failed.", cause)
        self.path = path


class ConfigLoadError(TNBError):
    pass


class BalanceLockError(TNBError):
    pass


class BroadcastError(TNBError):
    pass


class HandlerNotReadyError(TNBError, RuntimeError):
    """
    Raised when the payment handler is used before `init()` has populated its state.
    """


BANK_CONFIG_FAILED = "Failed to load the bank's config."
PRIMARY_VALIDATOR_CONFIG_FAILED = "Failed to load the primary validator's config."
BALANCE_LOCK_FAILED = (
    "Failed to load the balance lock from the primary validator to send the transaction."
)
BROADCAST_FAILED = "Failed to broadcast the transaction block to the bank."


# --- Module Notes -----------------------------------------------------------
# Nothing here retries; retry policy belongs to callers.
