"""
tnb_payments.payments

Payment orchestration package.

Responsibilities:
- Explicit handler lifecycle state (`state`).
- Network discovery, fee-enriched assembly and broadcast (`handler`).
"""

# Package marker.
