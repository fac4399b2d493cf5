"""Contract state and the key-value storage helpers that hold it."""

from __future__ import annotations

import json
from collections.abc import Callable, MutableMapping
from dataclasses import dataclass, fields
from typing import Generic, TypeVar

from .errors import StdError
from .msg import to_binary

Storage = MutableMapping[bytes, bytes]

T = TypeVar("T")


@dataclass
class State:
    """The stored counter and the address that owns it."""

    count: int
    owner: str


class Item(Generic[T]):
    """A single JSON-encoded dataclass value kept under one storage key."""

    def __init__(self, namespace: str, kind: type[T], type_name: str | None = None) -> None:
        self.namespace = namespace
        self.kind = kind
        self.type_name = type_name or kind.__name__
        self._key = namespace.encode()

    def load(self, storage: Storage) -> T:
        """Return the stored value, raising StdError if there is none."""
        value = self.may_load(storage)
        if value is None:
            raise StdError(f"{self.type_name} not found")
        return value

    def may_load(self, storage: Storage) -> T | None:
        """Return the stored value, or None if there is none."""
        raw = storage.get(self._key)
        if raw is None:
            return None
        return self._decode(raw)

    def save(self, storage: Storage, value: T) -> None:
        """Store the value."""
        storage[self._key] = to_binary(value)

    def update(self, storage: Storage, action: Callable[[T], T]) -> T:
        """Load, transform with action, save and return the new value."""
        new_value = action(self.load(storage))
        self.save(storage, new_value)
        return new_value

    def _decode(self, raw: bytes) -> T:
        try:
            obj = json.loads(raw)
        except (ValueError, TypeError) as exc:
            raise StdError(f"Error parsing into type {self.type_name}: {exc}") from exc
        if not isinstance(obj, dict):
            raise StdError(f"Error parsing into type {self.type_name}: expected an object")
        try:
            return self.kind(**{f.name: obj[f.name] for f in fields(self.kind)})
        except KeyError as exc:
            raise StdError(
                f"Error parsing into type {self.type_name}: missing field `{exc.args[0]}`"
            ) from None


STATE: Item[State] = Item("state", State)


@dataclass
class _ContractVersion:
    contract: str
    version: str


_CONTRACT_INFO: Item[_ContractVersion] = Item(
    "contract_info", _ContractVersion, type_name="ContractVersion"
)


def set_contract_version(storage: Storage, name: str, version: str) -> None:
    """Record the contract's name and version in storage."""
    _CONTRACT_INFO.save(storage, _ContractVersion(contract=name, version=version))


def get_contract_version(storage: Storage) -> tuple[str, str]:
    """Return the stored (name, version) pair."""
    info = _CONTRACT_INFO.load(storage)
    return info.contract, info.version