from .schemas import (
    AccountCreate,
    AccountResponse,
    MoneyMovementRequest,
    SummaryResponse,
    TransferRequest,
    TransferResponse,
)

__all__ = [
    "AccountCreate",
    "AccountResponse",
    "MoneyMovementRequest",
    "SummaryResponse",
    "TransferRequest",
    "TransferResponse",
]
