"""Replay the classic bank walkthrough against a fresh ledger and print it."""

from __future__ import annotations

import logging

from .core.config import get_settings
from .core.result import Err, Result
from .services import LedgerService


def _report(result: Result) -> None:
    if isinstance(result, Err):
        print(f"Error: {result.message}")


def run(service: LedgerService) -> list[str]:
    # transfer(1, 3) runs before account 3 exists; transfer(2, 3) draws on
    # Charlie's empty account.
    _report(service.create_account("John Doe", -500))
    _report(service.transfer(1, 2, 100))

    service.create_account("Alice Wonderland", 1000).unwrap()
    service.create_account("Charlie Chaplin", 0).unwrap()
    _report(service.transfer(1, 3, 1500))

    service.create_account("Bob Builder", 500).unwrap()
    _report(service.transfer(2, 3, 200))

    summaries = [service.get_summary(account_id).unwrap() for account_id in (1, 2, 3)]
    for index, summary in enumerate(summaries, start=1):
        prefix = "" if index == 1 else "\n"
        print(f"{prefix}Account {index}: \n{summary}")
    return summaries


def main() -> None:
    logging.basicConfig(level=get_settings().log_level)
    run(LedgerService())


if __name__ == "__main__":
    main()
