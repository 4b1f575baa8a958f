"""
Database engine, session management, and base model.

This module is the foundation for all database operations.
Every model inherits from Base. Every request gets a session
from get_db().
"""

from datetime import datetime, timezone

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from debt_ledger.config import get_settings

settings = get_settings()


def configure_sqlite(engine: Engine) -> Engine:
    """
    Make SQLite behave like the production database.

    pysqlite manages BEGIN on its own, which breaks SAVEPOINT
    handling. We take over transaction control so nested
    transactions roll back correctly, and we turn on foreign
    key enforcement, which SQLite leaves off by default.
    """
    if engine.dialect.name != "sqlite":
        return engine

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")

    return engine


# --- Engine ---
# pool_pre_ping=True tests connections before using them,
# which handles cases where the database restarted or a
# connection went stale.
engine = configure_sqlite(create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
))

# --- Session Factory ---
# autocommit=False means we explicitly control when changes
# are saved. A payment and its ledger entry must be written
# together or not at all.
# autoflush=False means SQLAlchemy won't send SQL to the
# database until we explicitly flush or commit.
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


def utcnow() -> datetime:
    """Current UTC time, naive, as stored in DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


# --- Base Model Class ---
class Base(DeclarativeBase):
    pass


# --- Dependency for FastAPI ---
def get_db():
    """
    Provide a database session for a single request.

    The try/finally pattern ensures the session is always
    closed, preventing connection leaks. Anything the endpoint
    did not commit is rolled back on close.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
