# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Sets test environment variables before the application is imported and
# provides a per-test SQLite database, seeded users and an HTTP client whose
# database session dependency points at that database.
# =============================================================================

import os
from contextlib import asynccontextmanager

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SECURITY__SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE__URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("WALLET__CURRENCY", "EUR")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from wallet_service.core.config import get_settings
from wallet_service.core.security import create_access_token
from wallet_service.db import models  # noqa: F401
from wallet_service.infrastructure.database.base import Base
from wallet_service.interfaces.http.deps import get_db_session
from wallet_service.modules.accounts import Account, AccountCreateInput, AccountService
from wallet_service.modules.wallets import WalletService


# =============================================================================
# Database fixtures
# =============================================================================

@pytest.fixture
async def engine(tmp_path):
    """File-backed SQLite so that independent sessions see each other's commits."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'wallet.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


async def _create_user(session_factory, email: str, **kwargs) -> Account:
    async with session_factory() as session:
        account = await AccountService.with_session(session).create_account(
            AccountCreateInput(email=email, **kwargs)
        )
        await session.commit()
        return account


@pytest.fixture
async def user(session_factory) -> Account:
    return await _create_user(session_factory, "fan@example.com", name="Fan")


@pytest.fixture
async def creator(session_factory) -> Account:
    return await _create_user(session_factory, "creator@example.com", name="Creator")


@pytest.fixture
async def inactive_user(session_factory) -> Account:
    return await _create_user(session_factory, "gone@example.com", is_active=False)


@pytest.fixture
def wallet_service(session) -> WalletService:
    return WalletService.with_session(session, get_settings().wallet)


# =============================================================================
# HTTP fixtures
# =============================================================================

@asynccontextmanager
async def _http_client(session_factory, **transport_options):
    from wallet_service.main import app

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app, **transport_options)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as http_client:
            yield http_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
async def client(session_factory):
    async with _http_client(session_factory) as http_client:
        yield http_client


@pytest.fixture
async def lenient_client(session_factory):
    """Client that receives 500 responses instead of re-raised server errors."""
    async with _http_client(session_factory, raise_app_exceptions=False) as http_client:
        yield http_client


def _bearer(user_id: str, email: str | None = None) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user_id, email)}"}


@pytest.fixture
def headers_for():
    """Build Authorization headers for an arbitrary user id."""
    return _bearer


@pytest.fixture
def auth_headers(user) -> dict[str, str]:
    return _bearer(user.id, user.email)
