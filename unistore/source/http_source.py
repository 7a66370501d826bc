"""
HTTP content source backed by httpx.

Endpoints (relative to the configured base URL):
    GET /text -> {"text": "..."}
    GET /tabs -> {"<key>": {"editable": bool, "body": ...}, ...}
"""

import logging
from typing import Any, Optional

import httpx

from ..config import Settings
from ..core.errors import ContentSourceError
from .base import ContentSource

logger = logging.getLogger(__name__)


class HttpContentSource(ContentSource):
    """
    Fetch content payloads over HTTP.

    Args:
        base_url: API base URL (e.g. http://localhost:8000/api)
        timeout: Request timeout in seconds
        transport: Optional httpx transport (tests pass httpx.MockTransport)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "HttpContentSource":
        return cls(settings.api_base_url, timeout=settings.http_timeout)

    async def _get_json(self, path: str) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug(f"GET {url}")
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url, headers={"Accept": "application/json"})
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            raise ContentSourceError(
                f"GET {url} failed with status {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise ContentSourceError(f"GET {url} failed: {e}") from e
        except ValueError as e:
            raise ContentSourceError(f"GET {url} returned invalid JSON: {e}") from e

    async def _get_text_raw(self) -> Any:
        return await self._get_json("/text")

    async def _get_tabs_raw(self) -> Any:
        return await self._get_json("/tabs")
