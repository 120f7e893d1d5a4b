"""
tnb_payments.observability

Observability package.

Responsibilities:
- Structured logging configuration shared by the client and the sandbox nodes.
"""

# Package marker.
