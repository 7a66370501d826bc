"""
Application state slices.

Both slices are frozen dataclasses; handlers build new instances with
dataclasses.replace and never touch the old ones.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..content import ContentPayload
from ..core.immutable import FrozenDict


class Status(Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class TextState:
    status: Status = Status.IDLE
    text: str = ""
    error: Optional[str] = None


@dataclass(frozen=True)
class TabsState:
    """
    Fields:
        status: Fetch status of the tab mapping
        tabs: FrozenDict of tab key -> validated ContentPayload (server order)
        selected: Key of the active tab (first key after a fetch)
        error: Message of the last failed fetch
    """
    status: Status = Status.IDLE
    tabs: FrozenDict = field(default_factory=FrozenDict)
    selected: Optional[str] = None
    error: Optional[str] = None

    def active(self) -> Optional[ContentPayload]:
        if self.selected is None:
            return None
        return self.tabs.get(self.selected)


INITIAL_TEXT = TextState()
INITIAL_TABS = TabsState()
