"""
Shape-based content dispatcher.

Validates runtime-polymorphic payloads ({editable, body}) and resolves the
body into one of three variants (string, list, object) sharing one render
contract.
"""

from .model import (
    Body,
    ContentPayload,
    ListBody,
    ObjectBody,
    RenderInstruction,
    RenderMode,
    StringBody,
    variant_name,
)
from .validate import validate_body, validate_payload
from .dispatcher import LIST_SEPARATOR, ResolvedContent, extract_text, present, resolve, resolve_all

__all__ = [
    "Body",
    "ContentPayload",
    "ListBody",
    "ObjectBody",
    "RenderInstruction",
    "RenderMode",
    "StringBody",
    "variant_name",
    "validate_body",
    "validate_payload",
    "LIST_SEPARATOR",
    "ResolvedContent",
    "extract_text",
    "present",
    "resolve",
    "resolve_all",
]
