"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

Wire model base for request and response dataclasses.

Fields declare their JSON name through ``wire()`` metadata; ``WireModel``
converts between dataclass instances and decoded JSON using the field type
hints. Fields without wire metadata never reach the wire.
"""

from __future__ import annotations

import functools
import io
import typing
from dataclasses import field, fields
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, BinaryIO, Callable, Dict, Mapping, Optional, Union

from edgeworkers.sdk.validation import is_blank


def wire(
    name: str,
    default: Any = None,
    *,
    omitempty: bool = False,
    default_factory: Optional[Callable[[], Any]] = None,
) -> Any:
    """Declare a dataclass field that maps to the JSON key ``name``.

    Args:
        name: JSON key on the wire.
        default: Default value when ``default_factory`` is not given.
        omitempty: Drop the key from encoded output when the value is blank.
            ``Optional`` fields are dropped only when ``None``.
        default_factory: Factory for mutable defaults.
    """
    metadata = {"wire": name, "omitempty": omitempty}
    if default_factory is not None:
        return field(default_factory=default_factory, metadata=metadata)
    return field(default=default, metadata=metadata)


def parse_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise TypeError(f"expected an RFC 3339 timestamp, got {type(value).__name__}")
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def format_datetime(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


@functools.lru_cache(maxsize=None)
def _type_hints(cls: type) -> Dict[str, Any]:
    return typing.get_type_hints(cls)


def _is_optional(tp: Any) -> bool:
    return typing.get_origin(tp) is Union and type(None) in typing.get_args(tp)


def _is_omitted(tp: Any, value: Any) -> bool:
    """Optional fields are omitted only when unset; a zero value is still sent."""
    if _is_optional(tp):
        return value is None
    return is_blank(value)


def decode_value(tp: Any, value: Any) -> Any:
    """Convert decoded JSON ``value`` into an instance of type ``tp``."""
    if value is None or tp is Any:
        return value

    origin = typing.get_origin(tp)
    if origin is Union:
        args = [a for a in typing.get_args(tp) if a is not type(None)]
        return decode_value(args[0], value) if len(args) == 1 else value
    if origin is list:
        if not isinstance(value, list):
            raise TypeError(f"expected a list, got {type(value).__name__}")
        (item_type,) = typing.get_args(tp) or (Any,)
        return [decode_value(item_type, v) for v in value]
    if origin is dict:
        if not isinstance(value, dict):
            raise TypeError(f"expected an object, got {type(value).__name__}")
        _, item_type = typing.get_args(tp) or (Any, Any)
        return {k: decode_value(item_type, v) for k, v in value.items()}

    if isinstance(tp, type):
        if issubclass(tp, WireModel):
            return tp.from_dict(value)
        if issubclass(tp, Enum):
            try:
                return tp(value)
            except ValueError:
                # Newer API values the enum does not know yet stay plain strings
                return value
        if issubclass(tp, datetime):
            return parse_datetime(value)
        if tp is float and isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        if tp in (int, str, bool) and not isinstance(value, tp):
            raise TypeError(f"expected {tp.__name__}, got {type(value).__name__}")
    return value


def encode_value(value: Any) -> Any:
    """Convert ``value`` into JSON-serializable data."""
    if isinstance(value, WireModel):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, (list, tuple)):
        return [encode_value(v) for v in value]
    if isinstance(value, dict):
        return {encode_value(k): encode_value(v) for k, v in value.items()}
    return value


class WireModel:
    """Mixin for dataclasses that travel as JSON objects."""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):
        if not isinstance(data, Mapping):
            raise TypeError(f"expected an object for {cls.__name__}, got {type(data).__name__}")
        hints = _type_hints(cls)
        kwargs = {}
        for f in fields(cls):  # type: ignore[arg-type]
            key = f.metadata.get("wire")
            if key is None or key not in data:
                continue
            kwargs[f.name] = decode_value(hints[f.name], data[key])
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        hints = _type_hints(type(self))
        out: Dict[str, Any] = {}
        for f in fields(self):  # type: ignore[arg-type]
            key = f.metadata.get("wire")
            if key is None:
                continue
            value = getattr(self, f.name)
            if f.metadata.get("omitempty") and _is_omitted(hints[f.name], value):
                continue
            out[key] = encode_value(value)
        return out


class Bundle:
    """Opaque gzip-compressed EdgeWorker code bundle.

    Wraps either raw bytes or a readable binary stream; the content is handed
    to the wire unmodified.
    """

    def __init__(self, data: Union[bytes, bytearray, BinaryIO]) -> None:
        if isinstance(data, (bytes, bytearray)):
            data = io.BytesIO(bytes(data))
        self.reader: BinaryIO = data

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "Bundle":
        return cls(Path(path).read_bytes())

    def read(self, size: int = -1) -> bytes:
        return self.reader.read(size)

    def __repr__(self) -> str:
        return f"Bundle({self.reader!r})"
