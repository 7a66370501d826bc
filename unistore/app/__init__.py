"""
Tab view application built on the store and content dispatcher.

This module provides:
- text/tabs slice state and reducers
- fetch_text / fetch_tabs effects
- TabView subscriber
- build_app_store composition root
"""

from .actions import (
    RECEIVE_TABS,
    RECEIVE_TEXT,
    REQUEST_TABS,
    REQUEST_TEXT,
    SELECT_TAB,
    TABS_FAILED,
    TEXT_FAILED,
    receive_tabs,
    receive_text,
    request_tabs,
    request_text,
    select_tab,
    tabs_failed,
    text_failed,
)
from .state import Status, TabsState, TextState
from .reducers import root_reducer, tabs_reducer, text_reducer
from .effects import fetch_tabs, fetch_text
from .fixtures import SIX_TAB_FIXTURE, TEXT_FIXTURE
from .view import TabView
from .root import build_app_store

__all__ = [
    "RECEIVE_TABS",
    "RECEIVE_TEXT",
    "REQUEST_TABS",
    "REQUEST_TEXT",
    "SELECT_TAB",
    "TABS_FAILED",
    "TEXT_FAILED",
    "receive_tabs",
    "receive_text",
    "request_tabs",
    "request_text",
    "select_tab",
    "tabs_failed",
    "text_failed",
    "Status",
    "TabsState",
    "TextState",
    "root_reducer",
    "tabs_reducer",
    "text_reducer",
    "fetch_tabs",
    "fetch_text",
    "SIX_TAB_FIXTURE",
    "TEXT_FIXTURE",
    "TabView",
    "build_app_store",
]
