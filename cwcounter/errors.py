"""Errors raised by the counter contract."""

from __future__ import annotations

import json


class ContractError(Exception):
    """Base class of every error the contract reports."""


class StdError(ContractError):
    """A storage, parsing or serialisation failure."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class Unauthorized(ContractError):
    """The sender is not allowed to perform the operation."""

    def __init__(self) -> None:
        super().__init__("Unauthorized")


class CustomError(ContractError):
    """A free-form error carrying a string value."""

    def __init__(self, val: str) -> None:
        self.val = val
        super().__init__(f"Custom Error val: {json.dumps(val, ensure_ascii=False)}")