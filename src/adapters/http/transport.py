"""
httpx transport adapter - Implements the Transport protocol.

This module provides the HTTP implementation of the domain's transport
port on top of a shared ``httpx.AsyncClient``.

Every non-2xx response and every network-level failure (connect error,
timeout, protocol error) is raised as the domain's TransportError, so
callers handle a single exception type. The bearer token is read from
the AuthSession given at construction on each request, so signing in or
out takes effect immediately.
"""

import logging
from typing import Any

import httpx

from src.domain.exceptions import TransportError
from src.domain.ports import AuthSession

logger = logging.getLogger(__name__)


def _decode(response: httpx.Response) -> Any:
    """Decode a JSON body, falling back to raw text."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class HttpTransport:
    """
    Implements Transport protocol via httpx.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, client: httpx.AsyncClient, session: AuthSession) -> None:
        """
        Initialize transport.

        Args:
            client: Shared AsyncClient, configured with base_url and timeout
            session: Auth session whose token is attached to every request
        """
        self._client = client
        self._session = session

    async def get(self, path: str, params: dict[str, str] | None = None) -> Any:
        return await self._request("GET", path, params=params)

    async def post(self, path: str, body: dict[str, Any]) -> Any:
        return await self._request("POST", path, json=body)

    def _headers(self) -> dict[str, str]:
        if self._session.token:
            return {"Authorization": f"Bearer {self._session.token}"}
        return {}

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = await self._client.request(method, path, headers=self._headers(), **kwargs)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise TransportError(f"{method} {path} failed: {e}") from e

        if response.is_success:
            return _decode(response)

        logger.info("%s %s returned %s", method, path, response.status_code)
        raise TransportError(
            f"{method} {path} returned {response.status_code}",
            status_code=response.status_code,
            payload=_decode(response),
        )
