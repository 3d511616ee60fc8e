"""In-memory bank ledger with a FastAPI front end."""

from .core.errors import (
    AccountNotFoundError,
    ErrorKind,
    InsufficientFundsError,
    LedgerError,
    NegativeAmountError,
)
from .core.result import Err, Ok, Result
from .services import BankAccount, LedgerService

__all__ = [
    "AccountNotFoundError",
    "BankAccount",
    "Err",
    "ErrorKind",
    "InsufficientFundsError",
    "LedgerError",
    "LedgerService",
    "NegativeAmountError",
    "Ok",
    "Result",
]
