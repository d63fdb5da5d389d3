"""Conversion between record dataclasses and their persisted JSON form.

Records are frozen dataclasses with snake_case fields; the persisted form
uses camelCase keys. Unset optional fields are omitted on encode, unknown
keys are ignored on decode.
"""

from __future__ import annotations

import dataclasses
import re
from enum import Enum
from functools import lru_cache
from typing import Any, Dict, List, Mapping, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from ..core.exceptions import ValidationError

T = TypeVar("T")

IDENTITY_FIELD = "id"


class RecordDecodeError(ValueError):
    """Raised when a JSON document does not decode into the record type."""


def camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def snake(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


@lru_cache(maxsize=None)
def _hints(cls: type) -> Dict[str, Any]:
    return get_type_hints(cls)


def _fields(cls: type):
    return dataclasses.fields(cls)


def to_json_dict(record: Any) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    fields = sorted(_fields(type(record)), key=lambda f: f.name != IDENTITY_FIELD)
    for f in fields:
        value = getattr(record, f.name)
        if value is None:
            continue
        out[camel(f.name)] = _encode(value)
    return out


def _encode(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return to_json_dict(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_encode(v) for v in value]
    if isinstance(value, dict):
        return {k: _encode(v) for k, v in value.items()}
    return value


def from_json_dict(cls: Type[T], data: Any) -> T:
    if isinstance(data, cls):
        return data
    if not isinstance(data, Mapping):
        raise RecordDecodeError(f"{cls.__name__}: expected an object, got {type(data).__name__}")

    hints = _hints(cls)
    kwargs: Dict[str, Any] = {}
    for f in _fields(cls):
        key = camel(f.name)
        if key in data:
            raw = data[key]
        elif f.name in data:
            raw = data[f.name]
        else:
            if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
                raise RecordDecodeError(f"{cls.__name__}: missing field {key!r}")
            continue
        kwargs[f.name] = _decode(hints[f.name], raw, f"{cls.__name__}.{key}")
    return cls(**kwargs)


def _decode(tp: Any, value: Any, where: str) -> Any:
    origin = get_origin(tp)

    if tp is Any:
        return value

    if origin is Union:
        args = [a for a in get_args(tp) if a is not type(None)]
        if value is None:
            return None
        return _decode(args[0], value, where)

    if origin in (list, List):
        if not isinstance(value, (list, tuple)):
            raise RecordDecodeError(f"{where}: expected a list")
        (item_tp,) = get_args(tp) or (Any,)
        return [_decode(item_tp, v, where) for v in value]

    if origin in (dict, Dict) or tp is dict:
        if not isinstance(value, Mapping):
            raise RecordDecodeError(f"{where}: expected an object")
        return dict(value)

    if dataclasses.is_dataclass(tp):
        return from_json_dict(tp, value)

    if isinstance(tp, type) and issubclass(tp, Enum):
        try:
            return tp(value)
        except ValueError:
            raise RecordDecodeError(f"{where}: {value!r} is not a valid {tp.__name__}")

    if tp is bool:
        if not isinstance(value, bool):
            raise RecordDecodeError(f"{where}: expected a boolean")
        return value

    if tp is int:
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, bool) or not isinstance(value, int):
            raise RecordDecodeError(f"{where}: expected an integer")
        return value

    if tp is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise RecordDecodeError(f"{where}: expected a number")
        return float(value)

    if tp is str:
        if not isinstance(value, str):
            raise RecordDecodeError(f"{where}: expected a string")
        return value

    return value


def decode_list(cls: Type[T], items: Any) -> List[T]:
    if not isinstance(items, list):
        raise RecordDecodeError(f"{cls.__name__}: expected a JSON array")
    return [from_json_dict(cls, item) for item in items]


def encode_list(records) -> List[Dict[str, Any]]:
    return [to_json_dict(r) for r in records]


def apply_changes(record: T, changes: Mapping[str, Any]) -> T:
    """Shallow-merge `changes` into `record` field by field.

    Keys may be snake_case field names or their camelCase JSON names. Absent
    fields keep their value; the identity field is never replaced.
    """
    cls = type(record)
    hints = _hints(cls)
    names = {f.name for f in _fields(cls)}

    updates: Dict[str, Any] = {}
    for key, value in changes.items():
        name = key if key in names else snake(key)
        if name not in names:
            raise ValidationError(f"{cls.__name__} has no field {key!r}")
        if name == IDENTITY_FIELD:
            continue
        try:
            updates[name] = _decode(hints[name], value, f"{cls.__name__}.{key}")
        except RecordDecodeError as e:
            raise ValidationError(str(e))

    if not updates:
        return record
    return dataclasses.replace(record, **updates)


def record_id(record: Any) -> str:
    return str(getattr(record, IDENTITY_FIELD))
