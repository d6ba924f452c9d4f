"""
Keyword API Client Module

Asynchronous HTTP client for the /api/keywords resource.
"""

from datetime import datetime
from typing import Any, Optional

import httpx

from keyword_board.config import get_settings
from keyword_board.domain.keyword import KeywordModel, KeywordPage

KEYWORDS_PATH = "/api/keywords"


class KeywordApiError(Exception):
    """Non-2xx response from the keyword API"""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"HTTP Error: {status_code} {message}")
        self.status_code = status_code
        self.message = message


class KeywordApiClient:
    """
    Keyword API Client

    Wraps httpx.AsyncClient. The underlying client is created lazily and reused
    until `close()`.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Keyword API Client

        Args:
            base_url: Server base URL, defaults to configuration
            timeout: Request timeout (seconds), defaults to configuration
            transport: Custom httpx transport (e.g. ASGITransport in tests)
        """
        settings = get_settings()
        self.base_url = base_url or settings.API_BASE_URL
        self.timeout = timeout or settings.HTTP_TIMEOUT
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP Client"""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "KeywordApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _request(self, method: str, **kwargs: Any) -> dict[str, Any]:
        client = await self._get_client()
        response = await client.request(method, KEYWORDS_PATH, **kwargs)
        if response.is_success:
            return response.json()

        try:
            message = response.json().get("message") or response.reason_phrase
        except ValueError:
            message = response.text or response.reason_phrase
        raise KeywordApiError(response.status_code, message)

    async def list_keywords(self, page: int = 1, limit: int = 15) -> KeywordPage:
        """
        Fetch one page of keywords

        Raises:
            KeywordApiError: Non-2xx response
            httpx.HTTPError: Network failure
        """
        payload = await self._request("GET", params={"page": page, "limit": limit})
        return KeywordPage.model_validate(payload)

    async def create_keyword(
        self,
        username: str,
        channels: list[str],
        available: bool = False,
        unavailable: bool = False,
        created: bool = False,
        created_by: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> list[KeywordModel]:
        """
        Create keywords, one per channel

        Returns:
            list[KeywordModel]: Records stored by the server
        """
        body = {
            "username": username,
            "channels": channels,
            "available": available,
            "unavailable": unavailable,
            "created": created,
            "createdBy": created_by,
            "createdAt": created_at.isoformat() if created_at else None,
        }
        payload = await self._request("POST", json=body)
        return [KeywordModel.model_validate(r) for r in payload.get("createdRecords", [])]

    async def delete_keyword(self, id: str) -> str:
        """
        Delete a keyword by id

        Returns:
            str: Server confirmation message
        """
        payload = await self._request("DELETE", params={"id": id})
        return payload.get("message", "")
