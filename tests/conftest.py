"""Shared pytest fixtures for all tests."""

import os

# Settings are read at import time, so the environment must be ready first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")

from datetime import datetime
from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_async_session
from app.handlers.category import CategoryHandler
from app.handlers.transaction import TransactionHandler
from app.main import app
from app.models.transaction import TransactionType
from app.schemas.category import CreateCategoryRequest
from app.schemas.transaction import CreateTransactionRequest

from tests.helpers import USER_ID


@pytest.fixture
async def session_factory():
    """Session factory bound to a fresh in-memory SQLite database.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)

    await engine.dispose()


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def category_handler(db):
    return CategoryHandler(db)


@pytest.fixture
def transaction_handler(db):
    return TransactionHandler(db)


@pytest.fixture
async def client(session_factory):
    """HTTP client talking to the app with the test database swapped in."""

    async def override_get_async_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_get_async_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def make_category(category_handler):
    """Create a category through the handler and return its read model."""

    async def _make(title="Groceries", description="Food and groceries", user_id=USER_ID):
        result = await category_handler.create(
            CreateCategoryRequest(user_id=user_id, title=title, description=description)
        )
        assert result.code == 201
        return result.data

    return _make


@pytest.fixture
def make_transaction(transaction_handler):
    """Create a transaction through the handler and return its read model."""

    async def _make(
        title="Coffee",
        amount=Decimal("4.50"),
        tx_type=TransactionType.withdraw,
        paid_or_received_at=None,
        category_id=1,
        user_id=USER_ID,
    ):
        result = await transaction_handler.create(
            CreateTransactionRequest(
                user_id=user_id,
                title=title,
                amount=amount,
                type=tx_type,
                category_id=category_id,
                paid_or_received_at=paid_or_received_at or datetime.now(),
            )
        )
        assert result.code == 201
        return result.data

    return _make
