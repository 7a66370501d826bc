"""
Deferred commands for fetching content.

Each effect dispatches REQUEST_*, awaits the source, then dispatches either
RECEIVE_* or *_FAILED. Source failures become state; the coroutine returns
None instead of raising.

There is no cancellation: an effect that resolves after its view was closed
still dispatches its follow-up actions.
"""

from typing import Dict, Optional

from ..content import ContentPayload
from ..core.actions import Effect
from ..core.errors import UnistoreError
from ..logging_config import get_logger
from ..source import ContentSource
from .actions import receive_tabs, receive_text, request_tabs, request_text, tabs_failed, text_failed


def fetch_text(source: ContentSource) -> Effect:
    """Effect loading the text document into the text slice."""
    log = get_logger(__name__, trace_id="fetch_text")

    async def run(dispatch, get_state) -> Optional[str]:
        dispatch(request_text())
        try:
            text = await source.fetch_text()
        except UnistoreError as e:
            log.warning(f"Text fetch failed: {e}")
            dispatch(text_failed(str(e)))
            return None
        dispatch(receive_text(text))
        return text

    return Effect(run=run, name="fetch_text")


def fetch_tabs(source: ContentSource) -> Effect:
    """Effect loading the tab mapping into the tabs slice."""
    log = get_logger(__name__, trace_id="fetch_tabs")

    async def run(dispatch, get_state) -> Optional[Dict[str, ContentPayload]]:
        dispatch(request_tabs())
        try:
            tabs = await source.fetch_tabs()
        except UnistoreError as e:
            log.warning(f"Tabs fetch failed: {e}")
            dispatch(tabs_failed(str(e)))
            return None
        log.info(f"Fetched {len(tabs)} tab(s)")
        dispatch(receive_tabs(tabs))
        return tabs

    return Effect(run=run, name="fetch_tabs")
