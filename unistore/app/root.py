"""
Composition root for the tab view application.
"""

from typing import Any, Optional

from ..middleware import logging_middleware, thunk
from ..store import Store, create_store
from .reducers import root_reducer


def build_app_store(preloaded_state: Optional[Any] = None) -> Store:
    """
    Create the application store.

    Middleware order: logging (outermost), then thunk. Effects re-enter at
    the top, so the actions they dispatch are logged too.
    """
    return create_store(
        root_reducer(),
        preloaded_state=preloaded_state,
        middleware=[logging_middleware, thunk],
    )
