"""
Pytest fixtures for CivicLink backend tests.

Tests run against an in-memory SQLite database shared through a static
connection pool, so data committed by fixtures is visible to API requests.
"""

import os
from collections.abc import AsyncGenerator, Awaitable, Callable
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Optional
from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Set test environment variables before importing app
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DEBUG", "false")

BASE_TIME = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Use asyncio backend for async tests."""
    return "asyncio"


# =============================================================================
# Database
# =============================================================================


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database with every table created."""
    from db.base import Base
    import models  # noqa: F401

    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield test_engine

    await test_engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db_session(session_maker: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    """Session for arranging data and calling services directly."""
    async with session_maker() as session:
        yield session


# =============================================================================
# Application
# =============================================================================


@pytest.fixture
async def app(session_maker: async_sessionmaker[AsyncSession]) -> AsyncGenerator[Any, None]:
    """FastAPI application bound to the test database."""
    from db.session import get_db
    from main import app as fastapi_app

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        session = session_maker()
        try:
            yield session
            if session.in_transaction():
                await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    fastapi_app.dependency_overrides[get_db] = override_get_db
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
async def client(app: Any) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def auth_headers() -> Callable[[Any], dict[str, str]]:
    """Build bearer headers for a user."""
    from core.security import create_access_token

    def _headers(user: Any) -> dict[str, str]:
        token = create_access_token({"sub": str(user.id)})
        return {"Authorization": f"Bearer {token}"}

    return _headers


# =============================================================================
# Factories
# =============================================================================


@pytest.fixture
def make_user(db_session: AsyncSession) -> Callable[..., Awaitable[Any]]:
    from models.user import User, UserRole

    async def _make(
        name: str = "Test Citizen",
        role: UserRole = UserRole.CITIZEN,
        email: Optional[str] = None,
        constituency_id: Optional[str] = None,
    ) -> User:
        user = User(
            id=str(uuid4()),
            name=name,
            email=email or f"{uuid4().hex[:12]}@example.com",
            role=role.value,
            image=None,
            constituency_id=constituency_id,
        )
        db_session.add(user)
        await db_session.commit()
        return user

    return _make


@pytest.fixture
def make_constituency(db_session: AsyncSession) -> Callable[..., Awaitable[Any]]:
    from models.constituency import Constituency

    async def _make(name: str = "Kingston Central", parish: str = "Kingston", **kwargs: Any) -> Constituency:
        constituency = Constituency(
            id=str(uuid4()),
            name=name,
            parish=parish,
            boundaries='{"type": "Polygon", "coordinates": []}',
            population=kwargs.pop("population", 45000),
            registered_voters=kwargs.pop("registered_voters", 32500),
            demographics=kwargs.pop("demographics", {"gender": {"male": 0.48, "female": 0.52}}),
            **kwargs,
        )
        db_session.add(constituency)
        await db_session.commit()
        return constituency

    return _make


@pytest.fixture
def make_representative(
    db_session: AsyncSession,
    make_user: Callable[..., Awaitable[Any]],
) -> Callable[..., Awaitable[Any]]:
    from models.representative import Representative, SocialMedia
    from models.user import UserRole

    async def _make(constituency: Any, name: str = "Donovan Williams", party: str = "JLP") -> Representative:
        user = await make_user(name=name, role=UserRole.REPRESENTATIVE, constituency_id=constituency.id)
        rep_id = str(uuid4())
        rep = Representative(
            id=rep_id,
            user_id=user.id,
            constituency_id=constituency.id,
            title="Hon.",
            party=party,
            biography=f"{name} serves {constituency.name}.",
            phone_number="876-555-0101",
        )
        db_session.add(rep)
        db_session.add(SocialMedia(id=str(uuid4()), representative_id=rep_id, twitter="@rep"))
        await db_session.commit()
        return rep

    return _make


@pytest.fixture
def make_project(db_session: AsyncSession) -> Callable[..., Awaitable[Any]]:
    from models.constituency import Project, ProjectStatus

    async def _make(
        constituency: Any,
        title: str = "Road Works",
        status: ProjectStatus = ProjectStatus.PROPOSED,
        start_date: datetime = BASE_TIME,
        budget: Decimal = Decimal("1000000"),
    ) -> Project:
        project = Project(
            id=str(uuid4()),
            constituency_id=constituency.id,
            title=title,
            description=f"{title} description",
            status=status.value,
            budget=budget,
            start_date=start_date,
        )
        db_session.add(project)
        await db_session.commit()
        return project

    return _make


@pytest.fixture
def make_message(db_session: AsyncSession) -> Callable[..., Awaitable[Any]]:
    from models.message import Message

    async def _make(
        sender: Any,
        recipient: Any,
        subject: str = "Street lights",
        content: str = "The street lights on my road are out.",
        read: bool = False,
        created_at: Optional[datetime] = None,
    ) -> Message:
        created = created_at or BASE_TIME
        message = Message(
            id=str(uuid4()),
            sender_id=sender.id,
            recipient_id=recipient.id,
            subject=subject,
            content=content,
            read=read,
            created_at=created,
            updated_at=created,
        )
        db_session.add(message)
        await db_session.commit()
        return message

    return _make


@pytest.fixture
def make_petition(db_session: AsyncSession) -> Callable[..., Awaitable[Any]]:
    from models.petition import Petition, PetitionStatus

    async def _make(
        title: str = "Fix the roads",
        target_count: int = 2,
        status: PetitionStatus = PetitionStatus.ACTIVE,
        created_at: Optional[datetime] = None,
        expires_in: timedelta = timedelta(days=30),
    ) -> Petition:
        now = datetime.now(timezone.utc)
        petition = Petition(
            id=str(uuid4()),
            title=title,
            description=f"{title} now",
            target_count=target_count,
            status=status.value,
            created_at=created_at or now,
            expires_at=now + expires_in,
        )
        db_session.add(petition)
        await db_session.commit()
        return petition

    return _make
