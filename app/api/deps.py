# app/api/deps.py
from typing import Any, Dict, Optional
from fastapi import Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.database import get_async_session
from app.handlers.category import CategoryHandler
from app.handlers.transaction import TransactionHandler
from app.schemas.base import Response


async def get_user_id() -> str:
    """
    Owner of every request.

    There is no authentication, so this is the configured placeholder user.
    Swap this dependency once real users exist.
    """
    return settings.DEFAULT_USER_ID


async def get_category_handler(db: AsyncSession = Depends(get_async_session)) -> CategoryHandler:
    return CategoryHandler(db)


async def get_transaction_handler(db: AsyncSession = Depends(get_async_session)) -> TransactionHandler:
    return TransactionHandler(db)


def envelope_response(result: Response, headers: Optional[Dict[str, Any]] = None) -> JSONResponse:
    """Serialize a handler envelope, using its code as the HTTP status."""
    return JSONResponse(
        status_code=result.code,
        content=result.model_dump(mode="json", by_alias=True),
        headers=headers,
    )
