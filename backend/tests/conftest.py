"""
Pytest configuration and fixtures for backend tests.
"""
import pytest
import pytest_asyncio
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from evoting.main import app
from evoting.core.database import Base, get_db, enable_sqlite_foreign_keys
from evoting.core.security import create_access_token, hash_password
from evoting.models.admin import Admin
from evoting.models.election import Election, Party, Candidate, ElectionStatus
from evoting.models.voter import Voter


# Test database URL (SQLite for testing)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

ADMIN_ID = "admin"
ADMIN_PASSWORD = "admin123"
VOTER_CNIC = "12345-1234567-1"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create a fresh in-memory database."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def test_db(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(test_db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with the test database."""
    async def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_admin(test_db: AsyncSession) -> str:
    """Create the admin account and return its id."""
    admin = Admin(
        admin_id=ADMIN_ID,
        password_hash=hash_password(ADMIN_PASSWORD),
    )
    test_db.add(admin)
    await test_db.commit()
    return ADMIN_ID


@pytest.fixture
def admin_auth_headers(test_admin: str) -> dict:
    """Create authentication headers for the admin."""
    token = create_access_token({"sub": test_admin, "role": "admin"})
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def test_voter(test_db: AsyncSession) -> str:
    """Register a voter and return the stored CNIC."""
    voter = Voter(
        cnic=VOTER_CNIC,
        name="Test Voter",
        father_name="Test Father",
        address="1 Test Street",
    )
    test_db.add(voter)
    await test_db.commit()
    return VOTER_CNIC


async def _create_election(db: AsyncSession, status: ElectionStatus) -> dict:
    election = Election(name="General 2025", status=status)
    db.add(election)
    await db.flush()

    db.add_all([
        Party(election_id=election.id, party_code="P1", name="Alpha"),
        Party(election_id=election.id, party_code="P2", name="Beta"),
    ])
    ann = Candidate(election_id=election.id, party_code="P1", name="Ann")
    bob = Candidate(election_id=election.id, party_code="P2", name="Bob")
    db.add_all([ann, bob])

    await db.commit()

    # Plain values so tests never touch expired ORM state after a rollback
    return {
        "id": election.id,
        "candidates": {"Ann": ann.id, "Bob": bob.id},
    }


@pytest_asyncio.fixture
async def test_election(test_db: AsyncSession) -> dict:
    """Create a CREATED election with two parties and two candidates."""
    return await _create_election(test_db, ElectionStatus.CREATED)


@pytest_asyncio.fixture
async def running_election(test_db: AsyncSession) -> dict:
    """Create a RUNNING election with two parties and two candidates."""
    return await _create_election(test_db, ElectionStatus.RUNNING)
