"""
Pytest configuration and fixtures.
"""

import os

# Settings are read at import time
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from typing import AsyncGenerator
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from marketplace.application.interfaces.repositories import (
    JobApplicationRepositoryInterface,
    JobRepositoryInterface,
    JobReviewRepositoryInterface,
    QuoteRepositoryInterface,
    TradespersonRepositoryInterface,
)
from marketplace.config.database import get_db_session
from marketplace.domain.entities.job import Job
from marketplace.domain.entities.job_application import JobApplication
from marketplace.domain.entities.tradesperson import Tradesperson
from marketplace.domain.value_objects.actor_type import ActorType
from marketplace.domain.value_objects.job_stage import JobStage
from marketplace.infrastructure.database.models import Base
from marketplace.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the app, one database session per request."""
    from marketplace.api.app import create_app

    app = create_app()

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client


@pytest.fixture
def mock_transaction_service():
    """Transaction service that simply runs the operation."""
    mock_service = AsyncMock(spec=TransactionService)

    async def run(operation):
        return await operation()

    mock_service.execute_in_transaction = AsyncMock(side_effect=run)
    return mock_service


@pytest.fixture
def mock_job_repository():
    """Mock job repository."""
    mock_repo = AsyncMock(spec=JobRepositoryInterface)

    # Mock methods
    mock_repo.get_by_id = AsyncMock()
    mock_repo.create = AsyncMock(side_effect=lambda job: job)
    mock_repo.update = AsyncMock(side_effect=lambda job: job)
    mock_repo.list_jobs = AsyncMock(return_value=[])
    mock_repo.find_open_by_trade = AsyncMock(return_value=[])

    return mock_repo


@pytest.fixture
def mock_application_repository():
    """Mock job application repository."""
    mock_repo = AsyncMock(spec=JobApplicationRepositoryInterface)

    # Mock methods
    mock_repo.get_by_id = AsyncMock()
    mock_repo.get_by_job_and_tradesperson = AsyncMock(return_value=None)
    mock_repo.create = AsyncMock(side_effect=lambda application: application)
    mock_repo.update = AsyncMock(side_effect=lambda application: application)
    mock_repo.reject_others = AsyncMock(return_value=[])

    return mock_repo


@pytest.fixture
def mock_review_repository():
    """Mock job review repository."""
    mock_repo = AsyncMock(spec=JobReviewRepositoryInterface)

    # Mock methods
    mock_repo.create = AsyncMock(side_effect=lambda review: review)
    mock_repo.exists = AsyncMock(return_value=False)

    return mock_repo


@pytest.fixture
def mock_tradesperson_repository():
    """Mock tradesperson repository."""
    mock_repo = AsyncMock(spec=TradespersonRepositoryInterface)
    mock_repo.get_by_id = AsyncMock()
    return mock_repo


@pytest.fixture
def mock_quote_repository():
    """Mock quote repository."""
    mock_repo = AsyncMock(spec=QuoteRepositoryInterface)

    # Mock methods
    mock_repo.get_request = AsyncMock()
    mock_repo.get_quote = AsyncMock()
    mock_repo.create_request = AsyncMock(side_effect=lambda request: request)
    mock_repo.update_request = AsyncMock(side_effect=lambda request: request)
    mock_repo.create_quote = AsyncMock(side_effect=lambda quote: quote)
    mock_repo.update_quote = AsyncMock(side_effect=lambda quote: quote)
    mock_repo.list_requests_for_tradesperson = AsyncMock(return_value=[])
    mock_repo.list_requests_for_customer = AsyncMock(return_value=[])
    mock_repo.latest_quote = AsyncMock(return_value=None)

    return mock_repo


@pytest.fixture
def sample_tradesperson():
    """Approved plumber working in SW1A."""
    return Tradesperson(
        email="dave@plumbing.example.com",
        first_name="Dave",
        last_name="Pipe",
        trade="Plumber",
        postcode="SW1A 2BB",
        is_verified=True,
        is_approved=True,
    )


@pytest.fixture
def open_job():
    """Approved job waiting for applications."""
    return Job(
        client_id=uuid4(),
        trade="Plumber",
        description="Fix leaking kitchen tap",
        postcode="SW1A 1AA",
        budget=200,
        status=JobStage.OPEN,
        is_approved=True,
    )


@pytest.fixture
def in_progress_job(open_job, sample_tradesperson):
    """Job a client has assigned to the sample tradesperson."""
    open_job.assign(
        tradesperson_id=sample_tradesperson.id,
        quotation_amount=180,
        quotation_notes="Parts included",
        assigned_by=ActorType.CLIENT,
    )
    return open_job


@pytest.fixture
def pending_application(open_job, sample_tradesperson):
    return JobApplication(
        job_id=open_job.id,
        tradesperson_id=sample_tradesperson.id,
        quotation_amount=180,
        quotation_notes="Parts included",
    )
