"""The counter contract's entry points."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .errors import Unauthorized
from .msg import I32_MAX, CountResponse, GetCount, Increment, InstantiateMsg, Reset, to_binary
from .state import STATE, State, Storage, set_contract_version

CONTRACT_NAME = "crates.io:osmo"
CONTRACT_VERSION = "0.1.0"


@dataclass(frozen=True)
class Coin:
    """An amount of one denomination."""

    amount: int
    denom: str


@dataclass(frozen=True)
class MessageInfo:
    """Who sent a message and the funds attached to it."""

    sender: str
    funds: tuple[Coin, ...] = ()


@dataclass
class Response:
    """The outcome of an instantiate or execute call."""

    attributes: list[tuple[str, str]] = field(default_factory=list)
    messages: list[Any] = field(default_factory=list)

    def add_attribute(self, key: str, value: Any) -> Response:
        """Append a key/value attribute and return the response."""
        self.attributes.append((key, str(value)))
        return self


def instantiate(storage: Storage, info: MessageInfo, msg: InstantiateMsg) -> Response:
    """Create the counter with its initial count, owned by the sender."""
    state = State(count=msg.count, owner=info.sender)
    set_contract_version(storage, CONTRACT_NAME, CONTRACT_VERSION)
    STATE.save(storage, state)
    return (
        Response()
        .add_attribute("method", "instantiate")
        .add_attribute("owner", info.sender)
        .add_attribute("count", msg.count)
    )


def execute(storage: Storage, info: MessageInfo, msg: Increment | Reset) -> Response:
    """Dispatch an execute message."""
    match msg:
        case Increment():
            return try_increment(storage)
        case Reset(count=count):
            return try_reset(storage, info, count)
        case _:
            raise TypeError(f"unsupported execute message: {msg!r}")


def try_increment(storage: Storage) -> Response:
    """Add one to the stored count."""

    def increment(state: State) -> State:
        if state.count >= I32_MAX:
            raise OverflowError("attempt to add with overflow")
        state.count += 1
        return state

    STATE.update(storage, increment)
    return Response().add_attribute("method", "try_increment")


def try_reset(storage: Storage, info: MessageInfo, count: int) -> Response:
    """Set the count; raises Unauthorized unless the sender owns the counter."""

    def reset(state: State) -> State:
        if info.sender != state.owner:
            raise Unauthorized()
        state.count = count
        return state

    STATE.update(storage, reset)
    return Response().add_attribute("method", "reset")


def query(storage: Storage, msg: GetCount) -> bytes:
    """Answer a query with JSON bytes."""
    match msg:
        case GetCount():
            return to_binary(_query_count(storage))
        case _:
            raise TypeError(f"unsupported query message: {msg!r}")


def _query_count(storage: Storage) -> CountResponse:
    return CountResponse(count=STATE.load(storage).count)