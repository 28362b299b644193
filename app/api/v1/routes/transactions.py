# app/api/v1/routes/transactions.py
from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, Path, Query, status

from app.api.deps import envelope_response, get_transaction_handler, get_user_id
from app.core.config import settings
from app.handlers.transaction import TransactionHandler
from app.schemas.base import (
    DEFAULT_PAGE_NUMBER,
    DEFAULT_PAGE_SIZE,
    MAX_ID,
    MAX_PAGE_NUMBER,
    MAX_PAGE_SIZE,
    EntityRequest,
    PagedResponse,
    Response,
)
from app.schemas.transaction import (
    CreateTransactionRequest,
    GetAllTransactionsRequest,
    GetTransactionsByPeriodRequest,
    TransactionBase,
    TransactionRead,
    UpdateTransactionRequest,
)

router = APIRouter(prefix="/transactions", tags=["transactions"])

@router.post("", response_model=Response[TransactionRead], status_code=status.HTTP_201_CREATED)
async def create_transaction(
    tx_in: CreateTransactionRequest,
    handler: TransactionHandler = Depends(get_transaction_handler),
    user_id: str = Depends(get_user_id),
):
    tx_in.user_id = user_id
    result = await handler.create(tx_in)
    headers = None
    if result.is_success:
        headers = {"Location": f"{settings.API_V1_PREFIX}/transactions/{result.data.id}"}
    return envelope_response(result, headers=headers)

# Declared before "/{transaction_id}" so "all" is never parsed as an id
@router.get("/all", response_model=PagedResponse[TransactionRead])
async def read_all_transactions(
    page_number: int = Query(DEFAULT_PAGE_NUMBER, ge=1, le=MAX_PAGE_NUMBER, alias="pageNumber"),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, alias="pageSize"),
    handler: TransactionHandler = Depends(get_transaction_handler),
    user_id: str = Depends(get_user_id),
):
    request = GetAllTransactionsRequest(user_id=user_id, page_number=page_number, page_size=page_size)
    return envelope_response(await handler.get_all(request))

@router.get("", response_model=PagedResponse[TransactionRead])
async def read_transactions_by_period(
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    page_number: int = Query(DEFAULT_PAGE_NUMBER, ge=1, le=MAX_PAGE_NUMBER, alias="pageNumber"),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, alias="pageSize"),
    handler: TransactionHandler = Depends(get_transaction_handler),
    user_id: str = Depends(get_user_id),
):
    """Transactions paid or received in a period, the current month by default."""
    request = GetTransactionsByPeriodRequest(
        user_id=user_id,
        start_date=start_date,
        end_date=end_date,
        page_number=page_number,
        page_size=page_size,
    )
    return envelope_response(await handler.get_by_period(request))

@router.put("/{transaction_id}", response_model=Response[TransactionRead])
async def update_transaction(
    tx_in: TransactionBase,
    transaction_id: int = Path(..., ge=1, le=MAX_ID),
    handler: TransactionHandler = Depends(get_transaction_handler),
    user_id: str = Depends(get_user_id),
):
    request = UpdateTransactionRequest(id=transaction_id, user_id=user_id, **tx_in.model_dump())
    return envelope_response(await handler.update(request))

@router.delete("/{transaction_id}", response_model=Response[TransactionRead])
async def delete_transaction(
    transaction_id: int = Path(..., ge=1, le=MAX_ID),
    handler: TransactionHandler = Depends(get_transaction_handler),
    user_id: str = Depends(get_user_id),
):
    request = EntityRequest(id=transaction_id, user_id=user_id)
    return envelope_response(await handler.delete(request))

@router.get("/{transaction_id}", response_model=Response[TransactionRead])
async def read_transaction(
    transaction_id: int = Path(..., ge=1, le=MAX_ID),
    handler: TransactionHandler = Depends(get_transaction_handler),
    user_id: str = Depends(get_user_id),
):
    request = EntityRequest(id=transaction_id, user_id=user_id)
    return envelope_response(await handler.get_by_id(request))
