"""
ContentSource abstract interface.

A content source is the network collaborator of the tab view: it supplies a
single text document and a mapping of tab key -> content payload.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping

from pydantic import ValidationError

from ..content import ContentPayload, validate_payload
from ..core.errors import ContentSourceError
from .models import TabsResponse, TextResponse


class ContentSource(ABC):
    """
    Abstract source of content payloads.

    Implementations supply raw decoded JSON via _get_text_raw/_get_tabs_raw;
    envelope and payload validation is shared here.
    """

    @abstractmethod
    async def _get_text_raw(self) -> Any:
        ...

    @abstractmethod
    async def _get_tabs_raw(self) -> Any:
        ...

    async def fetch_text(self) -> str:
        """
        Fetch the text document.

        Raises:
            ContentSourceError: On transport failure or malformed response
        """
        raw = await self._get_text_raw()
        try:
            return TextResponse.model_validate(raw).text
        except ValidationError as e:
            raise ContentSourceError(f"Malformed text response: {e.errors()[0]['msg']}") from e

    async def fetch_tabs(self) -> Dict[str, ContentPayload]:
        """
        Fetch and validate the tab mapping, preserving key order.

        Raises:
            ContentSourceError: On transport failure or non-object response
            ContractViolationError: If a tab payload breaks the payload contract
        """
        raw = await self._get_tabs_raw()
        try:
            tabs: Mapping[str, Any] = TabsResponse.model_validate(raw).root
        except ValidationError as e:
            raise ContentSourceError(f"Malformed tabs response: {e.errors()[0]['msg']}") from e
        return {key: validate_payload(payload) for key, payload in tabs.items()}
