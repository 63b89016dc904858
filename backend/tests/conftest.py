"""
Customer API — Test Configuration (conftest.py)
================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock AsyncSession (service unit tests, no real DB)
    ├── sample_customer_data: Field values for a Customer row
    ├── auth_headers: Factory building an Authorization header from roles/claims
    └── test_client: HTTPX AsyncClient against the app, backed by a fresh
                     SQLite schema that is dropped after the test
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

# Override settings for testing BEFORE any customer_api imports
# Why: Module-level settings and engine read the environment at import time
_TEST_DB_DIR = tempfile.mkdtemp(prefix="customer_api_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR}/test.db"
os.environ["JWT_SECRET_KEY"] = "test-secret-not-real"
os.environ["JWT_ALGORITHM"] = "HS256"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from customer_api.auth import create_access_token  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures (created fresh for each test)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = row
            await service.get_customer(mock_db_session, "c1")
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.delete = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_customer_data():
    """Field values matching the Customer model."""
    return {
        "id": "c1",
        "name": "Acme",
        "email": "ops@acme.test",
        "phone": "+1-555-0100",
    }


@pytest.fixture
def auth_headers():
    """
    Factory for Authorization headers carrying a freshly minted token.

    Usage:
        headers = auth_headers(roles=["Admin"])
        headers = auth_headers(claims={"can_delete_user": "true"})
    """
    def _make(subject="test-user", roles=(), claims=None, expires_in=None):
        token = create_access_token(
            subject=subject, roles=roles, claims=claims, expires_in=expires_in
        )
        return {"Authorization": f"Bearer {token}"}

    return _make


@pytest_asyncio.fixture
async def test_client():
    """
    HTTPX AsyncClient wired to the FastAPI app through ASGITransport.

    ASGITransport does not run the lifespan hook, so the fixture creates the
    schema itself (with the same create_schema the app uses) and drops it
    afterwards, leaving each test an empty customers table.
    """
    from customer_api.database import Base, create_schema, dispose_engine, engine
    from customer_api.main import app

    await create_schema()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await dispose_engine()
