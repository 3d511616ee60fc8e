from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

class AccountCreate(BaseModel):
    name: str = Field(..., min_length=1, description="Name of the account holder")
    initial_deposit: Decimal = Field(default=Decimal("0"), description="Opening balance")

class AccountResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    created_at: datetime
    balance: Decimal = Field(..., ge=0, description="Balance rounded to cents")

class MoneyMovementRequest(BaseModel):
    # Sign is checked by the ledger so negative amounts report NEGATIVE_AMOUNT.
    amount: Decimal

class TransferRequest(BaseModel):
    from_account_id: int
    to_account_id: int
    amount: Decimal

class TransferResponse(BaseModel):
    source: AccountResponse
    dest: AccountResponse

class SummaryResponse(BaseModel):
    summary: str
