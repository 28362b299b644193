# app/handlers/base.py
import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from fastapi import status
from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from app.schemas.base import EntityRequest, PagedResponse, Response

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")
ReadT = TypeVar("ReadT", bound=BaseModel)


class BaseHandler(Generic[ModelT, ReadT]):
    """
    Create/read/update/delete plumbing shared by every user-owned entity.

    Subclasses set ``model``, ``read_schema`` and ``entity_name``. Public
    operations never raise: they return an envelope whose ``code`` is 404
    when the row is missing (or belongs to another user) and 500 when
    anything unexpected happens on the way to the database.
    """

    model: Type[ModelT]
    read_schema: Type[ReadT]
    entity_name: str = "Entity"

    def __init__(self, db: AsyncSession):
        self.db = db

    # ------------------------------------------------------------
    # ENVELOPES
    # ------------------------------------------------------------
    def ok(self, entity: ModelT, code: int = status.HTTP_200_OK, message: Optional[str] = None) -> Response:
        return Response[self.read_schema](
            data=self.read_schema.model_validate(entity),
            code=code,
            message=message,
        )

    def fail(self, code: int, message: str) -> Response:
        return Response[self.read_schema](data=None, code=code, message=message)

    def not_found(self) -> Response:
        return self.fail(status.HTTP_404_NOT_FOUND, f"{self.entity_name} not found")

    def error(self, action: str) -> Response:
        logger.exception(f"Unable to {action} {self.entity_name.lower()}")
        return self.fail(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            f"Unable to {action} the {self.entity_name.lower()}",
        )

    # ------------------------------------------------------------
    # QUERIES
    # ------------------------------------------------------------
    async def get_owned(self, entity_id: int, user_id: str) -> Optional[ModelT]:
        result = await self.db.execute(
            select(self.model).where(self.model.id == entity_id, self.model.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def paginate(self, query: Select, page_number: int, page_size: int) -> PagedResponse:
        """Run one page of ``query`` and count every row the query matches."""
        result = await self.db.execute(
            query.offset((page_number - 1) * page_size).limit(page_size)
        )
        items: List[Any] = [self.read_schema.model_validate(row) for row in result.scalars().all()]

        total = await self.db.scalar(
            select(func.count()).select_from(query.order_by(None).subquery())
        )

        return PagedResponse[self.read_schema](
            data=items,
            total_count=total or 0,
            page_number=page_number,
            page_size=page_size,
        )

    def paged_error(self, action: str, page_number: int, page_size: int) -> PagedResponse:
        logger.exception(f"Unable to {action}")
        return PagedResponse[self.read_schema](
            data=None,
            page_number=page_number,
            page_size=page_size,
            code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=f"Unable to {action}",
        )

    # ------------------------------------------------------------
    # OPERATIONS
    # ------------------------------------------------------------
    async def get_by_id(self, request: EntityRequest) -> Response:
        try:
            entity = await self.get_owned(request.id, request.user_id)
            if entity is None:
                return self.not_found()
            return self.ok(entity)
        except Exception:
            return self.error("retrieve")

    async def delete(self, request: EntityRequest) -> Response:
        try:
            entity = await self.get_owned(request.id, request.user_id)
            if entity is None:
                return self.not_found()

            await self.db.delete(entity)
            await self.db.commit()

            logger.info(f"{self.entity_name} {request.id} deleted")
            return self.ok(entity, message=f"{self.entity_name} deleted")
        except Exception:
            return self.error("delete")
