from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    NEGATIVE_AMOUNT = "negative_amount"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    ACCOUNT_NOT_FOUND = "account_not_found"


class LedgerError(Exception):
    """Base class for rejected ledger operations."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NegativeAmountError(LedgerError):
    """Raised when a deposit, withdrawal or transfer amount is below zero."""

    kind = ErrorKind.NEGATIVE_AMOUNT


class InsufficientFundsError(LedgerError):
    """Raised when a withdrawal/transfer would drop balance below zero."""

    kind = ErrorKind.INSUFFICIENT_FUNDS


class AccountNotFoundError(LedgerError):
    """Raised when an account id is missing from the registry."""

    kind = ErrorKind.ACCOUNT_NOT_FOUND
