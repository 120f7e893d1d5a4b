"""
tnb_payments.nodes.server_node

Generic request and pagination client shared by every node type.

Responsibilities:
- Build absolute URLs from the node's base URL and a resource path.
- Merge pagination defaults with per-call options.
- Translate transport, status and parsing failures into `NodeRequestError`.
"""

from __future__ import annotations

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from tnb_payments.errors import NodeRequestError
from tnb_payments.models.nodes import Page
from tnb_payments.models.pagination import (
    PaginationOptions,
    ServerNodeOptions,
    format_default_options,
)
from tnb_payments.observability.logging import get_logger
from tnb_payments.settings import get_settings

log = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ServerNode:
    """
    Base proxy for a bank or validator reachable at `url`.

    When `http` is given it is shared for every request (the caller owns its
    lifetime). Otherwise each request opens and closes its own client.
    """

    def __init__(
        self,
        url: str,
        *,
        options: ServerNodeOptions | dict[str, Any] | None = None,
        http: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ) -> None:
        self.url = url.rstrip("/")
        self.options: ServerNodeOptions = format_default_options(options)
        self._http = http
        self._timeout = timeout if timeout is not None else get_settings().request_timeout_seconds

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.url!r})"

    async def get_data(self, path: str) -> Any:
        return await self._request("GET", path)

    async def get_paginated_data(
        self, path: str, options: PaginationOptions | None = None
    ) -> Page:
        params = {**self.options["default_pagination"], **(options or {})}
        data = await self._request("GET", path, params=params)
        return self._parse(Page, data, path)

    async def post_data(self, path: str, body: dict[str, Any]) -> Any:
        return await self._request("POST", path, json=body)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        url = f"{self.url}{path}"
        try:
            if self._http is not None:
                return await self._send(self._http, method, url, params=params, json=json)
            async with httpx.AsyncClient(timeout=self._timeout) as http:
                return await self._send(http, method, url, params=params, json=json)
        except (httpx.HTTPError, ValueError) as e:
            # ValueError covers undecodable JSON bodies.
            log.warning(
                "node_request_failed", node=self.url, method=method, path=path, error=str(e)
            )
            raise NodeRequestError(path, e) from e

    async def _send(
        self,
        http: httpx.AsyncClient,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None,
        json: dict[str, Any] | None,
    ) -> Any:
        r = await http.request(method, url, params=params, json=json, timeout=self._timeout)
        r.raise_for_status()
        return r.json()

    def _parse(self, model: type[ModelT], data: Any, path: str) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            log.warning("node_response_invalid", node=self.url, path=path, error=str(e))
            raise NodeRequestError(path, e) from e


# --- Module Notes -----------------------------------------------------------
# No retries or backoff here; a timeout is the only transport-level policy applied.
