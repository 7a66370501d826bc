"""
Content payload model.

A payload body is exactly one of three variants. Each variant is a frozen
dataclass; there is no shared base class, and the variants are matched
explicitly wherever behavior differs.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class StringBody:
    text: str


@dataclass(frozen=True)
class ListBody:
    items: Tuple[str, ...]


@dataclass(frozen=True)
class ObjectBody:
    text: str


Body = Union[StringBody, ListBody, ObjectBody]


@dataclass(frozen=True)
class ContentPayload:
    """
    Validated payload.

    Fields:
        editable: Whether the presentation layer should offer an editable surface
        body: One of StringBody, ListBody, ObjectBody
    """
    editable: bool
    body: Body


class RenderMode(Enum):
    EDITABLE = "editable"
    READ_ONLY = "read-only"


@dataclass(frozen=True)
class RenderInstruction:
    """
    What the presentation layer should draw.

    EDITABLE instructions carry initial_value; READ_ONLY carry display_value.
    """
    mode: RenderMode
    initial_value: Optional[str] = None
    display_value: Optional[str] = None

    @property
    def text(self) -> str:
        if self.mode is RenderMode.EDITABLE:
            return self.initial_value or ""
        return self.display_value or ""


def variant_name(body: Body) -> str:
    """Stable label of a body variant ("string", "list", "object")."""
    if isinstance(body, StringBody):
        return "string"
    if isinstance(body, ListBody):
        return "list"
    if isinstance(body, ObjectBody):
        return "object"
    raise TypeError(f"Unknown body variant: {type(body).__name__}")
