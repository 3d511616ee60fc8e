from fastapi import APIRouter, Depends, status

from ..core.dependencies import get_ledger_service
from ..models import (
    AccountCreate,
    AccountResponse,
    MoneyMovementRequest,
    SummaryResponse,
    TransferRequest,
    TransferResponse,
)
from ..services import LedgerService


router = APIRouter(prefix="/accounts", tags=["accounts"])

# Err.unwrap() raises the carried LedgerError; the handlers in
# api.exceptions turn it into the matching status code.

@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def create_account(
    payload: AccountCreate,
    service: LedgerService = Depends(get_ledger_service),
) -> AccountResponse:
    account_id = service.create_account(payload.name, payload.initial_deposit).unwrap()
    return service.get_account(account_id).unwrap()

@router.get("", response_model=list[AccountResponse])
def list_accounts(
    service: LedgerService = Depends(get_ledger_service),
) -> list[AccountResponse]:
    return service.list_accounts()

@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: int,
    service: LedgerService = Depends(get_ledger_service),
) -> AccountResponse:
    return service.get_account(account_id).unwrap()

@router.get("/{account_id}/summary", response_model=SummaryResponse)
def get_summary(
    account_id: int,
    service: LedgerService = Depends(get_ledger_service),
) -> SummaryResponse:
    return SummaryResponse(summary=service.get_summary(account_id).unwrap())

@router.post("/{account_id}/deposit", response_model=AccountResponse)
def deposit(
    account_id: int,
    payload: MoneyMovementRequest,
    service: LedgerService = Depends(get_ledger_service),
) -> AccountResponse:
    service.deposit(account_id, payload.amount).unwrap()
    return service.get_account(account_id).unwrap()

@router.post("/{account_id}/withdraw", response_model=AccountResponse)
def withdraw(
    account_id: int,
    payload: MoneyMovementRequest,
    service: LedgerService = Depends(get_ledger_service),
) -> AccountResponse:
    service.withdraw(account_id, payload.amount).unwrap()
    return service.get_account(account_id).unwrap()

transfer_router = APIRouter(prefix="/transfers", tags=["transfers"])

@transfer_router.post("", response_model=TransferResponse)
def create_transfer(
    payload: TransferRequest,
    service: LedgerService = Depends(get_ledger_service),
) -> TransferResponse:
    service.transfer(payload.from_account_id, payload.to_account_id, payload.amount).unwrap()
    return TransferResponse(
        source=service.get_account(payload.from_account_id).unwrap(),
        dest=service.get_account(payload.to_account_id).unwrap(),
    )

__all__ = ["router", "transfer_router"]
