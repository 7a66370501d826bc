"""
Action vocabulary of the tab view.

The kind strings are the wire contract with the presentation layer.
"""

from typing import Mapping

from ..content import ContentPayload
from ..core.actions import Action, action
from ..core.immutable import freeze

REQUEST_TEXT = "REQUEST_TEXT"
RECEIVE_TEXT = "RECEIVE_TEXT"
TEXT_FAILED = "TEXT_FAILED"
REQUEST_TABS = "REQUEST_TABS"
RECEIVE_TABS = "RECEIVE_TABS"
TABS_FAILED = "TABS_FAILED"
SELECT_TAB = "SELECT_TAB"


def request_text() -> Action:
    return action(REQUEST_TEXT)


def receive_text(text: str) -> Action:
    return action(RECEIVE_TEXT, text=text)


def text_failed(error: str) -> Action:
    return action(TEXT_FAILED, error=error)


def request_tabs() -> Action:
    return action(REQUEST_TABS)


def receive_tabs(tabs: Mapping[str, ContentPayload]) -> Action:
    return action(RECEIVE_TABS, tabs=freeze(tabs))


def tabs_failed(error: str) -> Action:
    return action(TABS_FAILED, error=error)


def select_tab(key: str) -> Action:
    return action(SELECT_TAB, key=key)
