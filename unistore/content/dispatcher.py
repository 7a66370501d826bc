"""
Content dispatcher: payload -> variant -> render instruction.

Only extract_text() differs per variant; present() is shared by all three.
List bodies collapse to one text by joining their items with a single space.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from ..core.errors import ContractViolationError
from ..core.immutable import FrozenDict
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
from .validate import validate_payload

logger = logging.getLogger(__name__)

LIST_SEPARATOR = " "


@dataclass(frozen=True)
class ResolvedContent:
    """Outcome of resolving one payload."""
    payload: ContentPayload
    text: str
    instruction: RenderInstruction

    @property
    def body(self) -> Body:
        return self.payload.body

    @property
    def editable(self) -> bool:
        return self.payload.editable

    def to_dict(self) -> dict:
        return {
            "variant": variant_name(self.payload.body),
            "editable": self.payload.editable,
            "mode": self.instruction.mode.value,
            "text": self.text,
        }


def extract_text(body: Body) -> str:
    """Canonical text of a body variant."""
    if isinstance(body, StringBody):
        return body.text
    if isinstance(body, ListBody):
        return LIST_SEPARATOR.join(body.items)
    if isinstance(body, ObjectBody):
        return body.text
    raise TypeError(f"Unhandled body variant: {type(body).__name__}")


def present(editable: bool, text: str) -> RenderInstruction:
    if editable:
        return RenderInstruction(mode=RenderMode.EDITABLE, initial_value=text)
    return RenderInstruction(mode=RenderMode.READ_ONLY, display_value=text)


def resolve(payload: Any) -> ResolvedContent:
    """
    Validate a payload and resolve its variant.

    Raises:
        ContractViolationError: If the payload fails validation
    """
    validated = validate_payload(payload)
    text = extract_text(validated.body)
    return ResolvedContent(
        payload=validated,
        text=text,
        instruction=present(validated.editable, text),
    )


def resolve_all(payloads: Mapping[str, Any]) -> FrozenDict:
    """
    Resolve a mapping of tab key -> payload, preserving key order.

    Fails on the first invalid payload; the error message names the tab.
    """
    resolved = {}
    for key, payload in payloads.items():
        try:
            resolved[key] = resolve(payload)
        except ContractViolationError as e:
            logger.debug(f"Payload for tab '{key}' failed validation: {e}")
            raise ContractViolationError(f"tabs.{key}.{e.clause}", e.detail) from e
    return FrozenDict(resolved)
