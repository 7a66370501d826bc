"""
TabView: reference subscriber for the presentation layer.

On each notification it reads the tabs slice, and when the slice changed by
reference it resolves the active tab and hands the result to a render
callback. The store is passed in explicitly.
"""

import logging
from typing import Callable, Optional

from ..content import ResolvedContent, resolve
from ..store import Store
from .actions import select_tab
from .state import TabsState

logger = logging.getLogger(__name__)

RenderFn = Callable[[str, ResolvedContent], None]


class TabView:
    def __init__(self, store: Store, render: RenderFn, slice_name: str = "tabs") -> None:
        self._store = store
        self._render = render
        self._slice_name = slice_name
        self._last: Optional[TabsState] = None
        self._unsubscribe: Optional[Callable[[], None]] = store.subscribe(self._on_change)

    @property
    def closed(self) -> bool:
        return self._unsubscribe is None

    def select(self, key: str) -> None:
        self._store.dispatch(select_tab(key))

    def refresh(self) -> Optional[ResolvedContent]:
        """Resolve the active tab from current state without waiting for a change."""
        tabs_state = self._store.get_state()[self._slice_name]
        self._last = tabs_state
        payload = tabs_state.active()
        if payload is None:
            return None
        resolved = resolve(payload)
        self._render(tabs_state.selected, resolved)
        return resolved

    def close(self) -> None:
        """Stop receiving notifications. In-flight effects still update the store."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_change(self) -> None:
        tabs_state = self._store.get_state()[self._slice_name]
        if tabs_state is self._last:
            return
        logger.debug(f"Tabs slice changed (selected={tabs_state.selected})")
        self.refresh()
