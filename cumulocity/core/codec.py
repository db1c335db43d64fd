"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

JSON encoding of request models and decoding of response bodies.
"""

from __future__ import annotations

import json
import typing
from typing import Any, Dict, Iterable, Optional

from cumulocity.exceptions import DecodeError, EncodeError
from cumulocity.logging_config import get_logger
from cumulocity.models.base import C8yModel
from cumulocity.models.common import C8yError

logger = get_logger(__name__)


def clear_fields(data: Dict[str, Any], paths: Iterable[str]) -> Dict[str, Any]:
    """Remove server-managed members from a rendered request body.

    Each path is a dot-separated chain of JSON member names, so
    ``"source.self"`` drops ``self`` from the nested ``source`` object.
    Missing members are ignored. ``data`` is modified in place.
    """
    for path in paths:
        *parents, leaf = path.split(".")
        node: Any = data
        for key in parents:
            node = node.get(key) if isinstance(node, dict) else None
            if node is None:
                break
        if isinstance(node, dict):
            node.pop(leaf, None)
    return data


def to_json_value(model: Any) -> Any:
    """Render a model, a list of models or plain JSON data to JSON-ready data."""
    if isinstance(model, C8yModel):
        return model.to_dict()
    if isinstance(model, (list, tuple)):
        return [to_json_value(item) for item in model]
    if isinstance(model, dict):
        return {key: to_json_value(value) for key, value in model.items()}
    return model


def encode(model: Any, clear: Iterable[str] = ()) -> bytes:
    """Serialize a request body to UTF-8 JSON.

    Args:
        model: A model instance, or plain JSON-compatible data.
        clear: Server-managed member paths to drop before serializing.

    Raises:
        EncodeError: If the body contains values JSON cannot represent.
    """
    data = to_json_value(model)
    if isinstance(data, dict):
        clear_fields(data, clear)
    try:
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodeError(f"Cannot encode {type(model).__name__}: {exc}") from exc


def _load_json(body: bytes, what: str) -> Any:
    try:
        return json.loads(body)
    except (UnicodeDecodeError, ValueError) as exc:
        raise DecodeError(f"Response body is not valid JSON for {what}: {exc}") from exc


def decode(body: bytes, result_type: Any) -> Any:
    """Decode a successful response body into ``result_type``.

    Supported result types: ``None`` (body ignored), ``bytes`` (raw body),
    ``str``, ``int`` (plain-text counters), ``dict``, model classes and
    ``List[Model]``.

    Raises:
        DecodeError: If the body does not match the expected type.
    """
    if result_type is None:
        return None

    if result_type is bytes:
        return body

    if result_type is str:
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(f"Response body is not UTF-8 text: {exc}") from exc
        stripped = text.strip()
        if stripped.startswith('"'):
            value = _load_json(body, "str")
            if not isinstance(value, str):
                raise DecodeError(f"Expected a JSON string, got {type(value).__name__}")
            return value
        return stripped

    if result_type is int:
        try:
            text = body.decode("utf-8").strip()
            return int(text)
        except (UnicodeDecodeError, ValueError) as exc:
            raise DecodeError(f"Expected an integer body, got {body[:32]!r}") from exc

    if result_type is dict:
        value = _load_json(body, "dict")
        if not isinstance(value, dict):
            raise DecodeError(f"Expected a JSON object, got {type(value).__name__}")
        return value

    origin = typing.get_origin(result_type)
    if origin is list:
        (item_type,) = typing.get_args(result_type)
        value = _load_json(body, str(result_type))
        if not isinstance(value, list):
            raise DecodeError(f"Expected a JSON array, got {type(value).__name__}")
        return [
            item_type.from_dict(item, _where=f"{item_type.__name__}[{i}]")
            for i, item in enumerate(value)
        ]

    if isinstance(result_type, type) and issubclass(result_type, C8yModel):
        return result_type.from_dict(_load_json(body, result_type.__name__))

    raise DecodeError(f"Unsupported result type {result_type!r}")


def decode_error(body: bytes) -> Optional[C8yError]:
    """Decode an error body, or return ``None`` when it is not error-shaped.

    Error-shaped means a JSON object where at least one of ``error``,
    ``message`` or ``info`` is a string. Other members are ignored.
    """
    if not body:
        return None
    try:
        data = json.loads(body)
    except (UnicodeDecodeError, ValueError):
        logger.debug("error_body_not_json", length=len(body))
        return None
    if not isinstance(data, dict):
        return None

    values = {key: data.get(key) for key in ("error", "message", "info")}
    if not any(isinstance(value, str) for value in values.values()):
        return None
    return C8yError(**{key: value for key, value in values.items() if isinstance(value, str)})
