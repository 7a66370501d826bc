"""
Wire models for content API responses.

Only the envelope is checked here. Tab payloads are validated by the
content dispatcher so that every caller sees the same contract errors.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, RootModel, StrictStr


class TextResponse(BaseModel):
    """Response of the text endpoint: {"text": "..."}."""
    model_config = ConfigDict(frozen=True)

    text: StrictStr


class TabsResponse(RootModel[Dict[str, Any]]):
    """Response of the tabs endpoint: {tab_key: payload, ...}."""
    pass
