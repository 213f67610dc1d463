"""
Test configuration

Fixtures: in-memory database, HTTP client, data factory
"""
from datetime import date, datetime, timedelta, timezone
from typing import AsyncGenerator, List, Optional
from dataclasses import dataclass

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from admissions import models  # noqa: F401  registers every table
from admissions.core.config import settings
from admissions.core.database import get_db
from admissions.crud import application_crud
from admissions.main import create_app
from admissions.models import (
    AdmissionPeriod,
    Application,
    Committee,
    CommitteeMembership,
    Status,
    StatusValue,
    User,
)


ELECTION_COMMITTEE = settings.election_committee_id
MAIN_BOARD = settings.main_board_id

# In-memory SQLite shared by every connection of one engine
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def as_member(user_id: int) -> dict:
    """Headers identifying the caller"""
    return {"X-Member-Number": str(user_id)}


# ========== Data factory ==========

@dataclass
class DataFactory:
    """
    Test data factory

    Writes straight to the session and commits, so the API sees the rows.
    Returns ids rather than ORM objects: a failed request rolls the session
    back and expires every loaded object.
    """
    session: AsyncSession

    async def create_committee(
        self,
        id: int,
        name: Optional[str] = None,
        accepts_admissions: bool = True,
    ) -> int:
        name = name or f"Committee {id}"
        self.session.add(Committee(
            id=id,
            name=name,
            slug=name.lower().replace(" ", "-"),
            accepts_admissions=accepts_admissions,
        ))
        await self.session.commit()
        return id

    async def create_user(self, id: int, committee_ids: List[int] = ()) -> int:
        self.session.add(User(id=id, first_name="Test", last_name=f"User{id}"))
        self.session.add_all(
            CommitteeMembership(user_id=id, committee_id=committee_id)
            for committee_id in committee_ids
        )
        await self.session.commit()
        return id

    async def open_admission_period(self) -> None:
        today = date.today()
        self.session.add(AdmissionPeriod(
            start_date=today - timedelta(days=7),
            end_date=today + timedelta(days=7),
        ))
        await self.session.commit()

    async def create_application(
        self,
        name: str,
        committee_ids: List[int],
        status_values: Optional[List[StatusValue]] = None,
        submitted_date: Optional[datetime] = None,
    ) -> str:
        """Insert an application directly, bypassing the admission checks"""
        status_values = status_values or [StatusValue.PENDING] * len(committee_ids)
        statuses = [
            Status(committee_id=committee_id, value=value.value)
            for committee_id, value in zip(committee_ids, status_values)
        ]
        self.session.add_all(statuses)
        await self.session.flush()

        application = Application(
            name=name,
            email=f"{name.lower().replace(' ', '.')}@example.com",
            phone_number="12345678",
            text="Motivation",
            submitted_date=submitted_date or datetime.now(timezone.utc),
        )
        application = await application_crud.create_with_statuses(
            self.session,
            application=application,
            committee_ids=committee_ids,
            statuses=statuses,
        )
        application_id = application.id
        await self.session.commit()
        return application_id


# ========== Database and client ==========

@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    One fresh database per test function
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def factory(db_session: AsyncSession) -> DataFactory:
    """Data factory bound to the test session"""
    return DataFactory(session=db_session)


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTP client for the app

    get_db is overridden to hand out the test session
    """
    app = create_app()

    async def override_get_db():
        try:
            yield db_session
            await db_session.commit()
        except Exception:
            await db_session.rollback()
            raise

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def committees(factory: DataFactory) -> dict:
    """
    Standard committees

    Main Board, Election Committee, two open sport committees and a closed one
    """
    return {
        "main_board": await factory.create_committee(MAIN_BOARD, "Main Board"),
        "election": await factory.create_committee(ELECTION_COMMITTEE, "Election Committee"),
        "football": await factory.create_committee(7, "Football"),
        "handball": await factory.create_committee(9, "Handball"),
        "volleyball": await factory.create_committee(11, "Volleyball", accepts_admissions=False),
    }


@pytest_asyncio.fixture(scope="function")
async def members(factory: DataFactory, committees: dict) -> dict:
    """One user per role"""
    return {
        "election": await factory.create_user(100, [ELECTION_COMMITTEE]),
        "main_board": await factory.create_user(200, [MAIN_BOARD]),
        "football": await factory.create_user(300, [7]),
        "handball": await factory.create_user(400, [9]),
        "nobody": await factory.create_user(500, []),
        "board_and_football": await factory.create_user(600, [MAIN_BOARD, 7]),
    }
