"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Base class for platform data models.

Models are plain dataclasses. Python attribute names are snake_case and map
to the platform's camelCase JSON members automatically; members whose JSON
name cannot be derived that way (``self``, ``c8y_IsDevice`` and friends)
declare it with :func:`json_field`.

Models that carry a ``custom_fragments`` field keep every JSON member they
do not declare, and write those members back when encoded. All other
models ignore unknown members.
"""

import dataclasses
import enum
import typing
from typing import Any, ClassVar, Dict, List, Optional, Tuple, Type, TypeVar

from cumulocity.exceptions import DecodeError

JSON_NAME = "json"
FRAGMENTS_FIELD = "custom_fragments"

M = TypeVar("M", bound="C8yModel")

_NONE_TYPE = type(None)


def json_field(name: str, default: Any = None) -> Any:
    """Declare a dataclass field whose JSON member name is ``name``."""
    return dataclasses.field(default=default, metadata={JSON_NAME: name})


def fragments_field() -> Any:
    """Declare the catch-all field of a fragment-bearing model."""
    return dataclasses.field(default_factory=dict)


def camel_case(attr: str) -> str:
    """``creation_time`` -> ``creationTime``; a trailing underscore is dropped."""
    head, *rest = attr.rstrip("_").split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


class C8yModel:
    """Mixin giving dataclass models their JSON mapping."""

    _specs_cache: ClassVar[Dict[type, Tuple[Tuple[str, str, Any], ...]]] = {}

    @classmethod
    def _field_specs(cls) -> Tuple[Tuple[str, str, Any], ...]:
        specs = C8yModel._specs_cache.get(cls)
        if specs is None:
            hints = typing.get_type_hints(cls)
            specs = tuple(
                (f.name, f.metadata.get(JSON_NAME) or camel_case(f.name), hints[f.name])
                for f in dataclasses.fields(cls)
                if f.name != FRAGMENTS_FIELD
            )
            C8yModel._specs_cache[cls] = specs
        return specs

    @classmethod
    def json_names(cls) -> List[str]:
        """JSON member names declared by this model, in field order."""
        return [key for _, key, _ in cls._field_specs()]

    def to_dict(self) -> Dict[str, Any]:
        """Render the model as a JSON-ready dict, omitting unset members."""
        data: Dict[str, Any] = {}
        for attr, key, _ in self._field_specs():
            value = getattr(self, attr)
            if value is not None:
                data[key] = _to_json(value)
        fragments = getattr(self, FRAGMENTS_FIELD, None)
        if fragments:
            for key, value in fragments.items():
                if key not in data and value is not None:
                    data[key] = _to_json(value)
        return data

    @classmethod
    def from_dict(cls: Type[M], data: Any, _where: Optional[str] = None) -> M:
        """Build a model from decoded JSON.

        Raises:
            DecodeError: If ``data`` is not an object or a declared member
                has the wrong type.
        """
        where = _where or cls.__name__
        if not isinstance(data, dict):
            raise DecodeError(f"{where}: expected object, got {type(data).__name__}")

        kwargs: Dict[str, Any] = {}
        known = set()
        for attr, key, hint in cls._field_specs():
            known.add(key)
            value = data.get(key)
            if value is not None:
                kwargs[attr] = _from_json(value, hint, f"{where}.{key}")

        if any(f.name == FRAGMENTS_FIELD for f in dataclasses.fields(cls)):
            kwargs[FRAGMENTS_FIELD] = {k: v for k, v in data.items() if k not in known}

        return cls(**kwargs)


def _to_json(value: Any) -> Any:
    if isinstance(value, C8yModel):
        return value.to_dict()
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_to_json(item) for item in value]
    if isinstance(value, dict):
        return {key: _to_json(item) for key, item in value.items()}
    return value


def _describe(hint: Any) -> str:
    return getattr(hint, "__name__", None) or str(hint)


def _from_json(value: Any, hint: Any, where: str) -> Any:
    """Convert one decoded JSON value to the declared field type."""
    if hint is Any:
        return value

    origin = typing.get_origin(hint)
    args = typing.get_args(hint)

    if origin is typing.Union:
        options = [arg for arg in args if arg is not _NONE_TYPE]
        if value is None:
            return None
        if len(options) == 1:
            return _from_json(value, options[0], where)
        for option in options:
            try:
                return _from_json(value, option, where)
            except DecodeError:
                continue
        raise DecodeError(f"{where}: {type(value).__name__} matches none of {hint}")

    if origin is list or hint is list:
        if not isinstance(value, list):
            raise DecodeError(f"{where}: expected array, got {type(value).__name__}")
        item_hint = args[0] if args else Any
        return [_from_json(item, item_hint, f"{where}[{i}]") for i, item in enumerate(value)]

    if origin is dict or hint is dict:
        if not isinstance(value, dict):
            raise DecodeError(f"{where}: expected object, got {type(value).__name__}")
        item_hint = args[1] if len(args) == 2 else Any
        return {key: _from_json(item, item_hint, f"{where}.{key}") for key, item in value.items()}

    if isinstance(hint, type) and issubclass(hint, C8yModel):
        return hint.from_dict(value, _where=where)

    if isinstance(hint, type) and issubclass(hint, enum.Enum):
        try:
            return hint(value)
        except ValueError:
            raise DecodeError(f"{where}: {value!r} is not a valid {hint.__name__}") from None

    if hint is bool:
        if isinstance(value, bool):
            return value
    elif hint is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    elif hint is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    elif hint is str:
        if isinstance(value, str):
            return value
    else:
        raise DecodeError(f"{where}: unsupported field type {_describe(hint)}")

    raise DecodeError(f"{where}: expected {_describe(hint)}, got {type(value).__name__}")
