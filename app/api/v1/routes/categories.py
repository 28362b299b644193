# app/api/v1/routes/categories.py
from fastapi import APIRouter, Depends, Path, Query, status

from app.api.deps import envelope_response, get_category_handler, get_user_id
from app.core.config import settings
from app.handlers.category import CategoryHandler
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
from app.schemas.category import (
    CategoryBase,
    CategoryRead,
    CreateCategoryRequest,
    GetAllCategoriesRequest,
    UpdateCategoryRequest,
)

router = APIRouter(prefix="/categories", tags=["categories"])

@router.post("", response_model=Response[CategoryRead], status_code=status.HTTP_201_CREATED)
async def create_category(
    cat_in: CreateCategoryRequest,
    handler: CategoryHandler = Depends(get_category_handler),
    user_id: str = Depends(get_user_id),
):
    cat_in.user_id = user_id
    result = await handler.create(cat_in)
    headers = None
    if result.is_success:
        headers = {"Location": f"{settings.API_V1_PREFIX}/categories/{result.data.id}"}
    return envelope_response(result, headers=headers)

@router.put("/{category_id}", response_model=Response[CategoryRead])
async def update_category(
    cat_in: CategoryBase,
    category_id: int = Path(..., ge=1, le=MAX_ID),
    handler: CategoryHandler = Depends(get_category_handler),
    user_id: str = Depends(get_user_id),
):
    request = UpdateCategoryRequest(id=category_id, user_id=user_id, **cat_in.model_dump())
    return envelope_response(await handler.update(request))

@router.delete("/{category_id}", response_model=Response[CategoryRead])
async def delete_category(
    category_id: int = Path(..., ge=1, le=MAX_ID),
    handler: CategoryHandler = Depends(get_category_handler),
    user_id: str = Depends(get_user_id),
):
    request = EntityRequest(id=category_id, user_id=user_id)
    return envelope_response(await handler.delete(request))

@router.get("/{category_id}", response_model=Response[CategoryRead])
async def read_category(
    category_id: int = Path(..., ge=1, le=MAX_ID),
    handler: CategoryHandler = Depends(get_category_handler),
    user_id: str = Depends(get_user_id),
):
    request = EntityRequest(id=category_id, user_id=user_id)
    return envelope_response(await handler.get_by_id(request))

@router.get("", response_model=PagedResponse[CategoryRead])
async def read_categories(
    page_number: int = Query(DEFAULT_PAGE_NUMBER, ge=1, le=MAX_PAGE_NUMBER, alias="pageNumber"),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, alias="pageSize"),
    handler: CategoryHandler = Depends(get_category_handler),
    user_id: str = Depends(get_user_id),
):
    request = GetAllCategoriesRequest(user_id=user_id, page_number=page_number, page_size=page_size)
    return envelope_response(await handler.get_all(request))
