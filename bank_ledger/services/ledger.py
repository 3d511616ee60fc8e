from __future__ import annotations

import itertools
import logging
import threading
from contextlib import ExitStack
from decimal import Decimal
from typing import Dict, List

from ..core.errors import AccountNotFoundError, NegativeAmountError
from ..core.money import Amount, parse_amount, quantize_money
from ..core.result import Err, Ok, Result
from ..models import AccountResponse
from .account import BankAccount


logger = logging.getLogger(__name__)


class LedgerService:
    """
    In-memory registry of accounts.

    Every public operation returns ``Ok`` or ``Err`` and either applies in
    full or leaves all balances untouched.
    """

    def __init__(self) -> None:
        self._accounts: Dict[int, BankAccount] = {}
        # Ids come from this counter, never from len(self._accounts).
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Helper utilities
    # ------------------------------------------------------------------
    def _account_to_response(self, account: BankAccount) -> AccountResponse:
        return AccountResponse(
            id=account.id,
            name=account.name,
            created_at=account.created_at,
            balance=account.balance,
        )

    def _rejected(self, operation: str, result: Err, **fields: object) -> Err:
        logger.info(
            f"{operation}.rejected",
            extra={"kind": result.kind.value, "reason": result.message, **fields},
        )
        return result

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def create_account(self, name: str, initial_deposit: Amount = 0) -> Result[int]:
        opening = parse_amount(initial_deposit)
        if opening < 0:
            return self._rejected(
                "account.create",
                Err(NegativeAmountError("Initial deposit cannot be negative.")),
                account_name=name,
            )

        with self._lock:
            account_id = next(self._ids)
            account = BankAccount(id=account_id, name=name, balance=opening)
            self._accounts[account_id] = account

        logger.info(
            "account.created",
            extra={"account_id": account_id, "account_name": name, "balance": str(account.balance)},
        )
        return Ok(account_id)

    def find_account(self, account_id: int) -> Result[BankAccount]:
        with self._lock:
            account = self._accounts.get(account_id)
        if account is None:
            return Err(
                AccountNotFoundError(f"Account not found with account number: {account_id}")
            )
        return Ok(account)

    def deposit(self, account_id: int, amount: Amount) -> Result[Decimal]:
        value = parse_amount(amount)
        found = self.find_account(account_id)
        if isinstance(found, Err):
            return self._rejected("account.deposit", found, account_id=account_id)

        account = found.value
        with account.lock:
            result = account.deposit(value)
        if isinstance(result, Err):
            return self._rejected("account.deposit", result, account_id=account_id)

        logger.info(
            "account.deposit",
            extra={
                "account_id": account_id,
                "amount": str(quantize_money(value)),
                "balance": str(result.value),
            },
        )
        return result

    def withdraw(self, account_id: int, amount: Amount) -> Result[Decimal]:
        value = parse_amount(amount)
        found = self.find_account(account_id)
        if isinstance(found, Err):
            return self._rejected("account.withdraw", found, account_id=account_id)

        account = found.value
        with account.lock:
            result = account.withdraw(value)
        if isinstance(result, Err):
            return self._rejected("account.withdraw", result, account_id=account_id)

        logger.info(
            "account.withdraw",
            extra={
                "account_id": account_id,
                "amount": str(quantize_money(value)),
                "balance": str(result.value),
            },
        )
        return result

    def transfer(self, from_id: int, to_id: int, amount: Amount) -> Result[None]:
        fields = {"source_account_id": from_id, "dest_account_id": to_id}
        value = parse_amount(amount)
        if value < 0:
            return self._rejected(
                "account.transfer",
                Err(NegativeAmountError("Transfer amount cannot be negative.")),
                **fields,
            )

        source = self.find_account(from_id)
        if isinstance(source, Err):
            return self._rejected("account.transfer", source, **fields)
        dest = self.find_account(to_id)
        if isinstance(dest, Err):
            return self._rejected("account.transfer", dest, **fields)

        # Lock in ascending id order; a self-transfer takes a single lock.
        involved = {from_id: source.value, to_id: dest.value}
        with ExitStack() as stack:
            for account_id in sorted(involved):
                stack.enter_context(involved[account_id].lock)

            withdrawn = source.value.withdraw(value)
            if isinstance(withdrawn, Err):
                return self._rejected("account.transfer", withdrawn, **fields)
            dest.value.deposit(value)

        logger.info("account.transfer", extra={**fields, "amount": str(quantize_money(value))})
        return Ok(None)

    def get_summary(self, account_id: int) -> Result[str]:
        found = self.find_account(account_id)
        if isinstance(found, Err):
            return found
        with found.value.lock:
            return Ok(found.value.summary())

    def get_account(self, account_id: int) -> Result[AccountResponse]:
        found = self.find_account(account_id)
        if isinstance(found, Err):
            return found
        with found.value.lock:
            return Ok(self._account_to_response(found.value))

    def list_accounts(self) -> List[AccountResponse]:
        with self._lock:
            accounts = list(self._accounts.values())
        return [self._account_to_response(account) for account in accounts]
