"""
tnb_payments.models.pagination

Pagination options accepted by every paginated listing call.
"""

from __future__ import annotations

from typing import Any, TypedDict


class PaginationOptions(TypedDict, total=False):
    limit: int
    offset: int


class ServerNodeOptions(TypedDict, total=False):
    default_pagination: PaginationOptions


DEFAULT_PAGINATION: PaginationOptions = {"limit": 20, "offset": 0}


def format_default_options(options: dict[str, Any] | None = None) -> ServerNodeOptions:
    """
    Return a copy of `options` whose `default_pagination` always has `limit` and `offset`.

    Explicitly supplied pagination fields override the defaults; any other keys
    are carried over unchanged.
    """

    options = dict(options or {})
    supplied = options.get("default_pagination") or {}
    options["default_pagination"] = {**DEFAULT_PAGINATION, **supplied}
    return options  # type: ignore[return-value]
