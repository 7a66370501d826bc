"""
Payload validation.

Raw payloads (decoded JSON, or any mapping) are checked clause by clause and
converted to a ContentPayload. The first failing clause raises
ContractViolationError; nothing is resolved from a partially valid payload.
Prebuilt ContentPayload and body instances are checked against the same
clauses, since dataclass construction does not enforce field types.

Body shape precedence:
1. str                           -> StringBody
2. list/tuple of str             -> ListBody
3. mapping or object with str .text -> ObjectBody
"""

from typing import Any, Mapping

from ..core.errors import ContractViolationError
from .model import Body, ContentPayload, ListBody, ObjectBody, StringBody

_MISSING = object()


def validate_payload(raw: Any) -> ContentPayload:
    """
    Validate a raw payload and build a ContentPayload.

    Args:
        raw: Mapping with "editable" and "body" keys (or a ContentPayload)

    Returns:
        Validated ContentPayload (raw itself when it is already a valid ContentPayload)

    Raises:
        ContractViolationError: Naming the first clause that failed
    """
    if isinstance(raw, ContentPayload):
        _check_editable(raw.editable)
        body = validate_body(raw.body)
        if body is raw.body:
            return raw
        return ContentPayload(editable=raw.editable, body=body)
    if raw is None:
        raise ContractViolationError("payload.present", "payload is missing (got None)")
    if not isinstance(raw, Mapping):
        raise ContractViolationError(
            "payload.type", f"payload must be an object, got {type(raw).__name__}"
        )

    editable = raw.get("editable", _MISSING)
    if editable is _MISSING:
        raise ContractViolationError("editable.present", "payload has no 'editable' field")
    _check_editable(editable)

    body = raw.get("body", _MISSING)
    if body is _MISSING:
        raise ContractViolationError("body.present", "payload has no 'body' field")

    return ContentPayload(editable=editable, body=validate_body(body))


def validate_body(body: Any) -> Body:
    """Match the runtime shape of a raw body to one of the three variants."""
    if isinstance(body, StringBody):
        if not isinstance(body.text, str):
            raise ContractViolationError(
                "body.shape", f"string body must hold a string, got {type(body.text).__name__}"
            )
        return body

    if isinstance(body, ListBody):
        if not isinstance(body.items, (list, tuple)):
            raise ContractViolationError(
                "body.shape", f"list body items must be a sequence, got {type(body.items).__name__}"
            )
        _check_list_items(body.items)
        return body if isinstance(body.items, tuple) else ListBody(items=tuple(body.items))

    if isinstance(body, ObjectBody):
        _check_object_text(body.text)
        return body

    if isinstance(body, str):
        return StringBody(text=body)

    if isinstance(body, (list, tuple)):
        _check_list_items(body)
        return ListBody(items=tuple(body))

    if body is None:
        raise ContractViolationError("body.shape", "'body' is null")

    if isinstance(body, Mapping):
        if "text" not in body:
            raise ContractViolationError("body.object.text", "object body has no 'text' field")
        text = body["text"]
    elif hasattr(body, "text"):
        text = body.text
    else:
        raise ContractViolationError(
            "body.shape",
            f"'body' must be a string, a list of strings or an object with 'text', "
            f"got {type(body).__name__}",
        )

    _check_object_text(text)
    return ObjectBody(text=text)


def _check_editable(editable: Any) -> None:
    # bool only; 0/1 and "no" are rejected
    if not isinstance(editable, bool):
        raise ContractViolationError(
            "editable.type", f"'editable' must be a boolean, got {type(editable).__name__} {editable!r}"
        )


def _check_list_items(items: Any) -> None:
    for index, item in enumerate(items):
        if not isinstance(item, str):
            raise ContractViolationError(
                "body.list.item",
                f"list body item {index} must be a string, got {type(item).__name__}",
            )


def _check_object_text(text: Any) -> None:
    if not isinstance(text, str):
        raise ContractViolationError(
            "body.object.text", f"object body 'text' must be a string, got {type(text).__name__}"
        )
