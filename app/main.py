# app/main.py
import uvicorn
import os
import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.core.config import settings
from app.core.database import engine, Base
from app.api.v1.api import api_router
from app.models import category, transaction  # noqa: F401  (register tables on Base.metadata)
from app.web import pages

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Create all tables on startup (migrations live in alembic/ for real deployments)
async def create_db_and_tables():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

# API documentation is only served in development
is_development = settings.ENVIRONMENT == "development"

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.VERSION,
    openapi_url="/openapi.json" if is_development else None,
    docs_url="/docs" if is_development else None,
    redoc_url="/redoc" if is_development else None,
    openapi_tags=[
        {"name": "categories", "description": "Spending and income categories"},
        {"name": "transactions", "description": "Deposits and withdrawals"},
    ],
)

# CORS Configuration: only the frontend and the API itself, with credentials
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

def error_envelope(code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=code,
        content={"data": None, "code": code, "message": message},
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Request validation failures are reported as 400 with the usual envelope"""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return error_envelope(status.HTTP_400_BAD_REQUEST, "; ".join(problems) or "Invalid request")

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_envelope(exc.status_code, str(exc.detail))

# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for better error responses"""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}")
    return error_envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

# ------------------------------------------------------------
# ROOT ENDPOINT
# ------------------------------------------------------------
@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information"""
    return {
        "message": f"{settings.APP_NAME} is running!",
        "version": settings.VERSION,
    }

# ------------------------------------------------------------
# HEALTH CHECK ENDPOINT
# ------------------------------------------------------------
@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
    }

# ------------------------------------------------------------
# BUSINESS LOGIC ROUTES
# ------------------------------------------------------------
app.include_router(api_router, prefix=settings.API_V1_PREFIX)
app.include_router(pages.router)

# ------------------------------------------------------------
# STARTUP EVENT
# ------------------------------------------------------------
@app.on_event("startup")
async def on_startup():
    """Startup event to create database tables"""
    try:
        await create_db_and_tables()
        logger.info("Database tables created successfully")
        logger.info(f"Frontend URL: {settings.FRONTEND_URL}")
        logger.info(f"Backend URL: {settings.BACKEND_URL}")
    except Exception as e:
        logger.error(f"Startup error: {str(e)}")
        raise

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8000))
    uvicorn.run("app.main:app", host="0.0.0.0", port=port, reload=False)
