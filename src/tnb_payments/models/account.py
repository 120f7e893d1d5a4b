"""
tnb_payments.models.account

Account identity used as a transaction sender or recipient.
"""

from __future__ import annotations

import string
from dataclasses import dataclass

_HEX_DIGITS = frozenset(string.hexdigits)


def normalize_account_number(value: str) -> str | None:
    """
    Return the canonical (stripped, lowercase) form of a hex account number, or None
    when `value` is not hex.
    """

    value = value.strip().lower()
    if not value or len(value) % 2 or not _HEX_DIGITS.issuperset(value):
        return None
    return value


@dataclass(frozen=True, slots=True)
class Account:
    """
    A transaction participant, identified by its hex-encoded account number.

    The account number is normalized to lowercase so equal identifiers compare
    (and hash) equal regardless of how they were typed.
    """

    account_number: str

    def __post_init__(self) -> None:
        value = normalize_account_number(self.account_number)
        if value is None:
            raise ValueError(f"account number must be a hex string, got {self.account_number!r}")
        object.__setattr__(self, "account_number", value)

    @classmethod
    def from_bytes(cls, raw: bytes) -> Account:
        return cls(raw.hex())

    @property
    def account_number_bytes(self) -> bytes:
        return bytes.fromhex(self.account_number)

    def __str__(self) -> str:
        return self.account_number


def account_number_of(value: str | Account) -> str:
    if isinstance(value, Account):
        return value.account_number
    # Hex identifiers get the same canonical form as Account; anything else is left for
    # the network to validate.
    return normalize_account_number(value) or value
