"""
In-memory content source.

Serves fixed documents; used by the CLI when no URL is given and by tests.
"""

import asyncio
import copy
from typing import Any, Mapping, Optional

from ..core.errors import ContentSourceError
from .base import ContentSource


class StaticContentSource(ContentSource):
    """
    Args:
        text: Document returned by the text endpoint ({"text": ...})
        tabs: Document returned by the tabs endpoint
        delay: Seconds to wait before answering (simulates latency)
        error: If set, every fetch raises ContentSourceError with this message
    """

    def __init__(
        self,
        text: Optional[Mapping[str, Any]] = None,
        tabs: Optional[Mapping[str, Any]] = None,
        delay: float = 0.0,
        error: Optional[str] = None,
    ) -> None:
        self._text = text
        self._tabs = tabs
        self.delay = delay
        self.error = error
        self.requests = 0

    async def _answer(self, document: Any, name: str) -> Any:
        self.requests += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise ContentSourceError(self.error)
        if document is None:
            raise ContentSourceError(f"No {name} document configured")
        # Callers get their own copy, like a fresh JSON decode
        return copy.deepcopy(dict(document))

    async def _get_text_raw(self) -> Any:
        return await self._answer(self._text, "text")

    async def _get_tabs_raw(self) -> Any:
        return await self._answer(self._tabs, "tabs")
