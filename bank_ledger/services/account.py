from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal

from ..core.errors import InsufficientFundsError, NegativeAmountError
from ..core.money import ZERO, Amount, parse_amount, quantize_money
from ..core.result import Err, Ok, Result


@dataclass
class BankAccount:
    """A named balance holder. Only ``deposit`` and ``withdraw`` move money."""

    id: int
    name: str
    balance: Decimal = ZERO
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        opening = parse_amount(self.balance)
        if opening < 0:
            raise ValueError("Account balance cannot start negative")
        self.balance = quantize_money(opening)

    def deposit(self, amount: Amount) -> Result[Decimal]:
        value = parse_amount(amount)
        if value < 0:
            return Err(NegativeAmountError("Deposit amount cannot be negative."))
        self.balance = quantize_money(self.balance + quantize_money(value))
        return Ok(self.balance)

    def withdraw(self, amount: Amount) -> Result[Decimal]:
        # Checks run on the unrounded amount. The balance sits on the cent
        # grid, so rounding an accepted amount never overdraws it.
        value = parse_amount(amount)
        if value < 0:
            return Err(NegativeAmountError("Withdrawal amount cannot be negative."))
        if value > self.balance:
            return Err(InsufficientFundsError("Insufficient funds for withdrawal."))
        self.balance = quantize_money(self.balance - quantize_money(value))
        return Ok(self.balance)

    def summary(self) -> str:
        return (
            f"Account Number: {self.id}\n"
            f"Account Name: {self.name}\n"
            f"Balance: ${self.balance}"
        )
