"""Shared test fixtures for backend tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from newsdesk.core.database import get_db
from newsdesk.domains.news import NewsFacade
from newsdesk.main import app as fastapi_app
from newsdesk.models import Base
from tests.utils.in_memory_store import InMemoryNewsStore


SQLITE_TEST_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def async_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Provide a fresh in-memory SQLite engine per test."""
    engine = create_async_engine(
        SQLITE_TEST_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def async_session(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Yield an AsyncSession bound to the test engine."""
    factory = async_sessionmaker(
        async_engine,
        expire_on_commit=False,
        class_=AsyncSession,
    )
    async with factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest_asyncio.fixture
async def news_facade(async_session: AsyncSession) -> AsyncGenerator[NewsFacade, None]:
    """Shortcut fixture to interact with the news domain facade."""
    yield NewsFacade(async_session, page_size=3)


@pytest.fixture
def memory_store() -> InMemoryNewsStore:
    """Storage double for service-level tests."""
    return InMemoryNewsStore()


@pytest_asyncio.fixture
async def test_app(async_session: AsyncSession) -> AsyncGenerator[FastAPI, None]:
    """Provide FastAPI app with dependency overrides bound to test session."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield async_session

    fastapi_app.dependency_overrides[get_db] = override_get_db

    yield fastapi_app

    fastapi_app.dependency_overrides.pop(get_db, None)


@pytest_asyncio.fixture
async def async_client(test_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """HTTPX async client bound to the FastAPI app."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest_asyncio.fixture
async def mobile_client(test_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """HTTPX client whose requests arrive on the mobile subdomain."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://mobile.example.com") as client:
        yield client
