"""
Pytest fixtures for testing.
"""
import pytest
import pytest_asyncio
from datetime import datetime
from typing import AsyncGenerator

from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

# Import database module BEFORE app to allow override
import jobtracker.database
from jobtracker.config import settings
from jobtracker.database import Base
# Import ALL models so Base.metadata knows about all tables
from jobtracker.models.application import Application, ApplicationStatus

# Now import app (after we can override database)
from jobtracker.main import app as fastapi_app


# Test database URL (use in-memory SQLite for fast tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(autouse=True)
def dev_mode_session(monkeypatch):
    """Run every test in dev mode unless it sets an access token itself."""
    monkeypatch.setattr(settings, "access_token", None)


@pytest_asyncio.fixture
async def db() -> AsyncGenerator[AsyncSession, None]:
    """
    Create a fresh database for each test.
    Ensures cleanup happens even if test fails.
    """
    # StaticPool keeps a single connection so every session sees
    # the same in-memory database
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables FIRST
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # THEN replace the app's engine and sessionmaker
    original_engine = jobtracker.database.engine
    original_sessionmaker = jobtracker.database.AsyncSessionLocal

    jobtracker.database.engine = test_engine
    jobtracker.database.AsyncSessionLocal = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )

    # Create session for direct test use
    async_session = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )

    session = async_session()

    try:
        yield session
    finally:
        try:
            await session.close()
        except Exception as e:
            print(f"Warning: Failed to close session: {e}")

        try:
            async with test_engine.begin() as conn:
                await conn.run_sync(Base.metadata.drop_all)
        except Exception as e:
            print(f"Warning: Failed to drop tables: {e}")

        try:
            await test_engine.dispose()
        except Exception as e:
            print(f"Warning: Failed to dispose engine: {e}")

        jobtracker.database.engine = original_engine
        jobtracker.database.AsyncSessionLocal = original_sessionmaker


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Async HTTP client for testing endpoints.

    The db fixture already replaced the app's engine with the test engine,
    so all endpoints automatically use the test database.
    """
    transport = ASGITransport(app=fastapi_app)

    async with AsyncClient(
        transport=transport,
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
def make_application(db: AsyncSession):
    """Insert application rows directly, bypassing the store."""
    async def _make(
        company: str = "Test Corp",
        position: str = "Software Engineer",
        status: ApplicationStatus = ApplicationStatus.APPLIED,
        date_applied: datetime = None,
        **fields
    ) -> Application:
        application = Application(
            company=company,
            position=position,
            status=status.value,
            date_applied=date_applied or datetime.utcnow(),
            **fields
        )
        db.add(application)
        await db.commit()
        await db.refresh(application)
        return application

    return _make
