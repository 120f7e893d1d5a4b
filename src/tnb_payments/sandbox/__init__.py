"""
tnb_payments.sandbox

In-memory bank and primary validator served over HTTP.

Responsibilities:
- Hold a toy ledger with balances and balance locks (`ledger`).
- Expose it through the endpoints the node proxies call (`app`).
- Run both nodes locally with uvicorn (`python -m tnb_payments.sandbox`).
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The sandbox never checks signatures; it exists to exercise the client end to end.
