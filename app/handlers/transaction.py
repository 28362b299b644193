# app/handlers/transaction.py
import logging
from datetime import datetime
from decimal import Decimal

from fastapi import status
from sqlalchemy import select

from app.handlers.base import BaseHandler
from app.models.transaction import Transaction, TransactionType
from app.schemas.base import PagedResponse, Response
from app.schemas.transaction import (
    CreateTransactionRequest,
    GetAllTransactionsRequest,
    GetTransactionsByPeriodRequest,
    TransactionRead,
    UpdateTransactionRequest,
)
from app.utils.dates import resolve_period

logger = logging.getLogger(__name__)


def normalize_amount(amount: Decimal, tx_type: TransactionType) -> Decimal:
    """Withdrawals are stored as negative amounts."""
    if tx_type == TransactionType.withdraw and amount >= 0:
        return -amount
    return amount


class TransactionHandler(BaseHandler[Transaction, TransactionRead]):
    model = Transaction
    read_schema = TransactionRead
    entity_name = "Transaction"

    async def create(self, request: CreateTransactionRequest) -> Response:
        tx = Transaction(
            user_id=request.user_id,
            category_id=request.category_id,
            created_at=datetime.now(),
            amount=normalize_amount(request.amount, request.type),
            paid_or_received_at=request.paid_or_received_at,
            title=request.title,
            type=request.type,
        )
        try:
            self.db.add(tx)
            await self.db.commit()
            await self.db.refresh(tx)
            return self.ok(tx, status.HTTP_201_CREATED, "Transaction created")
        except Exception:
            return self.error("create")

    async def update(self, request: UpdateTransactionRequest) -> Response:
        try:
            tx = await self.get_owned(request.id, request.user_id)
            if tx is None:
                return self.not_found()

            tx.category_id = request.category_id
            tx.amount = normalize_amount(request.amount, request.type)
            tx.title = request.title
            tx.type = request.type
            tx.paid_or_received_at = request.paid_or_received_at

            await self.db.commit()
            await self.db.refresh(tx)
            return self.ok(tx, message="Transaction updated")
        except Exception:
            return self.error("update")

    async def get_all(self, request: GetAllTransactionsRequest) -> PagedResponse:
        query = (
            select(Transaction)
            .where(Transaction.user_id == request.user_id)
            .order_by(Transaction.paid_or_received_at)
        )
        try:
            return await self.paginate(query, request.page_number, request.page_size)
        except Exception:
            return self.paged_error("retrieve the transactions", request.page_number, request.page_size)

    async def get_by_period(self, request: GetTransactionsByPeriodRequest) -> PagedResponse:
        try:
            start, end = resolve_period(request.start_date, request.end_date)
        except Exception:
            return self.paged_error("determine the period", request.page_number, request.page_size)

        logger.debug(f"Listing transactions for {request.user_id} between {start} and {end}")
        query = (
            select(Transaction)
            .where(
                Transaction.user_id == request.user_id,
                Transaction.paid_or_received_at >= start,
                Transaction.paid_or_received_at <= end,
            )
            .order_by(Transaction.paid_or_received_at)
        )
        try:
            return await self.paginate(query, request.page_number, request.page_size)
        except Exception:
            return self.paged_error("retrieve the transactions", request.page_number, request.page_size)
