"""
tnb_payments.payments.state

Lifecycle state of a `PaymentHandler`, as a tagged union.

Uninitialized -> BankLoaded -> Ready. Each variant is immutable; the handler
replaces its single state slot wholesale on every successful refresh.
"""

from __future__ import annotations

from dataclasses import dataclass

from tnb_payments.models.nodes import BankConfig, ValidatorConfig
from tnb_payments.nodes.validator import PrimaryValidator


@dataclass(frozen=True, slots=True)
class Uninitialized:
    pass


@dataclass(frozen=True, slots=True)
class BankLoaded:
    bank_config: BankConfig
    # Set when a validator proxy was built but its config fetch has not succeeded.
    primary_validator: PrimaryValidator | None = None


@dataclass(frozen=True, slots=True)
class Ready:
    bank_config: BankConfig
    primary_validator: PrimaryValidator
    validator_config: ValidatorConfig


HandlerState = Uninitialized | BankLoaded | Ready


def with_bank_config(state: HandlerState, bank_config: BankConfig) -> HandlerState:
    """
    Replace the bank snapshot, keeping whatever validator slots are already held.
    """

    match state:
        case Ready(primary_validator=pv, validator_config=vc):
            return Ready(bank_config=bank_config, primary_validator=pv, validator_config=vc)
        case BankLoaded(primary_validator=pv):
            return BankLoaded(bank_config=bank_config, primary_validator=pv)
        case _:
            return BankLoaded(bank_config=bank_config)


def primary_validator_of(state: HandlerState) -> PrimaryValidator | None:
    if isinstance(state, (BankLoaded, Ready)):
        return state.primary_validator
    return None


# --- Module Notes -----------------------------------------------------------
# There is no transition back to Uninitialized; a failed refresh leaves the state untouched.
