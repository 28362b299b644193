# app/web/pages.py
import logging
from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.api.deps import get_category_handler, get_user_id
from app.core.config import settings
from app.handlers.category import CategoryHandler
from app.schemas.base import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE, MAX_PAGE_NUMBER, MAX_PAGE_SIZE
from app.schemas.category import CategoryRead, GetAllCategoriesRequest

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))

router = APIRouter(tags=["Pages"], include_in_schema=False)

@router.get("/categories", response_class=HTMLResponse)
async def categories_page(
    request: Request,
    page_number: int = Query(DEFAULT_PAGE_NUMBER, ge=1, le=MAX_PAGE_NUMBER, alias="pageNumber"),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, alias="pageSize"),
    handler: CategoryHandler = Depends(get_category_handler),
    user_id: str = Depends(get_user_id),
):
    """Server-rendered category listing, calling the handler in-process."""
    categories: List[CategoryRead] = []
    error: Optional[str] = None
    result = None

    try:
        result = await handler.get_all(
            GetAllCategoriesRequest(user_id=user_id, page_number=page_number, page_size=page_size)
        )
        if result.is_success:
            categories = result.data or []
        else:
            error = result.message
    except Exception:
        logger.exception("Categories page failed")
        error = "Unable to load the categories"

    return templates.TemplateResponse(
        request,
        "categories/list.html",
        {
            "app_name": settings.APP_NAME,
            "categories": categories,
            "paging": result if result is not None and result.is_success else None,
            "error": error,
        },
    )
