"""Messages accepted and returned by the counter contract, and their JSON wire form."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields, is_dataclass
from typing import Any, Union

from .errors import StdError

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1


@dataclass(frozen=True)
class InstantiateMsg:
    """Sets the initial count."""

    count: int


@dataclass(frozen=True)
class Increment:
    """Adds one to the count."""


@dataclass(frozen=True)
class Reset:
    """Sets the count; only the owner may do this."""

    count: int


@dataclass(frozen=True)
class GetCount:
    """Asks for the current count."""


@dataclass(frozen=True)
class CountResponse:
    """The answer to a GetCount query."""

    count: int


ExecuteMsg = Union[Increment, Reset]
QueryMsg = GetCount

EXECUTE_VARIANTS: dict[str, type] = {"increment": Increment, "reset": Reset}
QUERY_VARIANTS: dict[str, type] = {"get_count": GetCount}

_TAGS: dict[type, str] = {
    cls: tag for tag, cls in {**EXECUTE_VARIANTS, **QUERY_VARIANTS}.items()
}


def to_binary(value: Any) -> bytes:
    """Serialise a message or plain JSON value to compact JSON bytes."""
    if is_dataclass(value) and not isinstance(value, type):
        payload: Any = asdict(value)
        tag = _TAGS.get(type(value))
        if tag is not None:
            payload = {tag: payload}
    else:
        payload = value
    try:
        return json.dumps(payload, separators=(",", ":")).encode()
    except (TypeError, ValueError) as exc:
        raise StdError(f"Error serializing type {type(value).__name__}: {exc}") from exc


def _parse_error(type_name: str, detail: str) -> StdError:
    return StdError(f"Error parsing into type {type_name}: {detail}")


def _decode(data: bytes | str, type_name: str) -> Any:
    if isinstance(data, (bytearray, memoryview)):
        data = bytes(data)
    try:
        return json.loads(data)
    except (ValueError, TypeError) as exc:
        raise _parse_error(type_name, str(exc)) from exc


def _as_i32(value: Any, name: str, type_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise _parse_error(type_name, f"field `{name}` must be an integer")
    if not I32_MIN <= value <= I32_MAX:
        raise _parse_error(type_name, f"field `{name}` out of range for i32")
    return value


def _build(cls: type, body: Any, type_name: str) -> Any:
    if not isinstance(body, dict):
        raise _parse_error(type_name, f"expected an object, got {type(body).__name__}")
    values = {}
    for field in fields(cls):
        if field.name not in body:
            raise _parse_error(type_name, f"missing field `{field.name}`")
        values[field.name] = _as_i32(body[field.name], field.name, type_name)
    return cls(**values)


def _parse_enum(data: bytes | str, variants: dict[str, type], type_name: str) -> Any:
    obj = _decode(data, type_name)
    if not isinstance(obj, dict) or len(obj) != 1:
        raise _parse_error(type_name, "expected an object with exactly one variant key")
    ((tag, body),) = obj.items()
    cls = variants.get(tag)
    if cls is None:
        expected = ", ".join(f"`{name}`" for name in variants)
        raise _parse_error(type_name, f"unknown variant `{tag}`, expected one of {expected}")
    return _build(cls, body, type_name)


def parse_instantiate_msg(data: bytes | str) -> InstantiateMsg:
    """Decode an InstantiateMsg from JSON."""
    return _build(InstantiateMsg, _decode(data, "InstantiateMsg"), "InstantiateMsg")


def parse_execute_msg(data: bytes | str) -> Increment | Reset:
    """Decode an execute message from JSON."""
    return _parse_enum(data, EXECUTE_VARIANTS, "ExecuteMsg")


def parse_query_msg(data: bytes | str) -> GetCount:
    """Decode a query message from JSON."""
    return _parse_enum(data, QUERY_VARIANTS, "QueryMsg")


def parse_count_response(data: bytes | str) -> CountResponse:
    """Decode a CountResponse from JSON."""
    return _build(CountResponse, _decode(data, "CountResponse"), "CountResponse")