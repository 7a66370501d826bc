"""
Content sources (network collaborators).

This module provides:
- ContentSource: Abstract interface with shared response validation
- HttpContentSource: httpx-based implementation
- StaticContentSource: in-memory implementation
"""

from .base import ContentSource
from .http_source import HttpContentSource
from .static_source import StaticContentSource
from .models import TabsResponse, TextResponse

__all__ = [
    "ContentSource",
    "HttpContentSource",
    "StaticContentSource",
    "TabsResponse",
    "TextResponse",
]
