# app/schemas/transaction.py
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional
from pydantic import AfterValidator, Field, PlainSerializer

from app.models.transaction import TransactionType
from app.schemas.base import MAX_ID, CamelModel, EntityRequest, PagedRequest, Request

# Amounts travel as JSON numbers, not strings
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


def _to_naive_local(value: datetime) -> datetime:
    # Columns are naive local timestamps
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value

LocalDatetime = Annotated[datetime, AfterValidator(_to_naive_local)]

class TransactionBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=80, description="E.g. Grocery at Costco")
    type: TransactionType = TransactionType.withdraw
    amount: Decimal = Field(..., max_digits=18, decimal_places=2)
    category_id: int = Field(..., ge=1, le=MAX_ID)
    paid_or_received_at: LocalDatetime = Field(..., description="ISO 8601 date/time the money moved")

class CreateTransactionRequest(TransactionBase, Request):
    pass

class UpdateTransactionRequest(TransactionBase, EntityRequest):
    pass

class GetAllTransactionsRequest(PagedRequest):
    pass

class GetTransactionsByPeriodRequest(PagedRequest):
    # Both default to the bounds of the current month
    start_date: Optional[LocalDatetime] = None
    end_date: Optional[LocalDatetime] = None

class TransactionRead(CamelModel):
    id: int
    user_id: str
    category_id: int
    created_at: datetime
    amount: Money
    paid_or_received_at: datetime
    title: str
    type: TransactionType
