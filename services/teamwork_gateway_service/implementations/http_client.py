"""HTTP client implementation for the Teamwork Gateway Service.

Conforms to HttpClientProtocol while using httpx for the actual HTTP operations.
"""

from __future__ import annotations

import httpx

from services.teamwork_gateway_service.protocols import HttpClientProtocol


class TeamworkHttpClient(HttpClientProtocol):
    """Thin wrapper over a shared httpx.AsyncClient.

    Returns raw httpx.Response objects; status handling is left to the caller.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        """Initialize the HTTP client.

        Args:
            client: The underlying httpx AsyncClient (owns the connection pool)
        """
        self._client = client

    async def get(
        self,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        timeout: float | httpx.Timeout | None = None,
    ) -> httpx.Response:
        """Send GET request.

        Args:
            url: Absolute target URL, query string included
            headers: Additional HTTP headers (optional)
            timeout: Request timeout (optional, client default when omitted)

        Returns:
            Raw httpx Response object
        """
        if timeout is None:
            return await self._client.get(url, headers=headers)
        return await self._client.get(url, headers=headers, timeout=timeout)
