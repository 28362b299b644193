# app/schemas/category.py
from typing import Optional
from pydantic import Field

from app.schemas.base import CamelModel, EntityRequest, PagedRequest, Request

class CategoryBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=80, description="E.g. Groceries")
    description: str = Field(..., description="What goes into this category")

class CreateCategoryRequest(CategoryBase, Request):
    pass

class UpdateCategoryRequest(CategoryBase, EntityRequest):
    pass

class GetAllCategoriesRequest(PagedRequest):
    pass

class CategoryRead(CamelModel):
    id: int
    user_id: str
    title: str
    description: Optional[str] = None
