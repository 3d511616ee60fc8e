from .account import BankAccount
from .ledger import LedgerService

__all__ = ["BankAccount", "LedgerService"]
