"""
Shared test fixtures.

Sets up an isolated test database so tests never touch
the real database. Each test gets fresh tables and a session
that rolls back after the test.
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from debt_ledger.main import app
from debt_ledger.models import Base
from debt_ledger.models.base import configure_sqlite, get_db
from debt_ledger.schemas.account import AccountCreate
from debt_ledger.schemas.debt import DebtCreate
from debt_ledger.services.account_service import AccountService
from debt_ledger.services.debt_service import DebtService


# SQLite with foreign keys and working SAVEPOINTs, so the
# atomicity and uniqueness guarantees are exercised for real.
TEST_DATABASE_URL = "sqlite:///./test.db"

ACTOR = "user-1"
OTHER_ACTOR = "user-2"

engine = configure_sqlite(create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
))

TestSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop them after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    """Provide a database session for direct service testing."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def client(db_session):
    """
    Provide a test client with the test database.

    We override the get_db dependency so the FastAPI app
    uses our test session instead of the real database.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def actor():
    return ACTOR


@pytest.fixture
def account(db_session):
    """A committed account owned by ACTOR."""
    account = AccountService(db_session).create_account(
        AccountCreate(name="BCA", type="bank"), ACTOR
    )
    db_session.commit()
    return account


@pytest.fixture
def second_account(db_session):
    account = AccountService(db_session).create_account(
        AccountCreate(name="Cash", type="cash"), ACTOR
    )
    db_session.commit()
    return account


@pytest.fixture
def debt(db_session):
    """A committed debt titled "Kartu Kredit" owned by ACTOR."""
    debt = DebtService(db_session).create_debt(
        DebtCreate(
            party_name="Bank Mandiri",
            title="Kartu Kredit",
            amount=Decimal("2000000"),
        ),
        ACTOR,
    )
    db_session.commit()
    return debt
