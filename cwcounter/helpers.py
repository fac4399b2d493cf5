"""Helpers for talking to a deployed counter contract by address."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .contract import Coin
from .msg import CountResponse, GetCount, Increment, Reset, parse_count_response, to_binary

Querier = Callable[[str, bytes], bytes]


@dataclass(frozen=True)
class WasmExecuteMsg:
    """A request to execute a message on a contract."""

    contract_addr: str
    msg: bytes
    funds: tuple[Coin, ...] = ()


@dataclass(frozen=True)
class CwTemplateContract:
    """A counter contract identified by its address."""

    addr: str

    def call(self, msg: Increment | Reset) -> WasmExecuteMsg:
        """Wrap an execute message for this contract."""
        if not isinstance(msg, (Increment, Reset)):
            raise TypeError(f"not an execute message: {msg!r}")
        return WasmExecuteMsg(contract_addr=self.addr, msg=to_binary(msg))

    def count(self, querier: Querier) -> CountResponse:
        """Ask the contract for its count through querier(contract_addr, msg)."""
        return parse_count_response(querier(self.addr, to_binary(GetCount())))