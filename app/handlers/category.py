# app/handlers/category.py
from fastapi import status
from sqlalchemy import select

from app.handlers.base import BaseHandler
from app.models.category import Category
from app.schemas.base import PagedResponse, Response
from app.schemas.category import (
    CategoryRead,
    CreateCategoryRequest,
    GetAllCategoriesRequest,
    UpdateCategoryRequest,
)


class CategoryHandler(BaseHandler[Category, CategoryRead]):
    model = Category
    read_schema = CategoryRead
    entity_name = "Category"

    async def create(self, request: CreateCategoryRequest) -> Response:
        category = Category(
            user_id=request.user_id,
            title=request.title,
            description=request.description,
        )
        try:
            self.db.add(category)
            await self.db.commit()
            await self.db.refresh(category)
            return self.ok(category, status.HTTP_201_CREATED, "Category created")
        except Exception:
            return self.error("create")

    async def update(self, request: UpdateCategoryRequest) -> Response:
        try:
            category = await self.get_owned(request.id, request.user_id)
            if category is None:
                return self.not_found()

            # Ownership and identity never change here
            category.title = request.title
            category.description = request.description

            await self.db.commit()
            await self.db.refresh(category)
            return self.ok(category, message="Category updated")
        except Exception:
            return self.error("update")

    async def get_all(self, request: GetAllCategoriesRequest) -> PagedResponse:
        query = (
            select(Category)
            .where(Category.user_id == request.user_id)
            .order_by(Category.title)
        )
        try:
            return await self.paginate(query, request.page_number, request.page_size)
        except Exception:
            return self.paged_error("retrieve the categories", request.page_number, request.page_size)
