from fastapi import APIRouter

from app.api.v1.routes import categories, transactions

api_router = APIRouter()

# Each routes module carries its own prefix and tags
api_router.include_router(categories.router)
api_router.include_router(transactions.router)
