"""Database connection and session management."""

from typing import Optional

from sqlalchemy import create_engine, event, Engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import Pool

from bankledger.config.settings import get_settings

Base = declarative_base()

# Connection execution option asking SQLite to open the transaction with
# BEGIN IMMEDIATE (takes the write lock up front)
BEGIN_IMMEDIATE = "bankledger_begin_immediate"

# Process-wide engine, created on first use
_engine: Optional[Engine] = None


def _configure_sqlite(engine: Engine) -> None:
    """
    Install transaction control hooks for SQLite.

    SQLite has no row locks. The driver is put in autocommit mode so plain
    reads never hold a shared lock, and units of work start with
    BEGIN IMMEDIATE so two writers serialize on the database lock instead of
    failing at commit time.
    """

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        if conn.get_execution_options().get(BEGIN_IMMEDIATE):
            conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_db_engine(
    database_url: str,
    lock_timeout_ms: int = 5000,
    pool_size: int = 5,
    poolclass: Optional[type[Pool]] = None,
) -> Engine:
    """Create an engine with the locking behaviour transfers rely on."""
    if database_url.startswith("sqlite"):
        kwargs = {
            # busy timeout bounds the wait for the write lock
            "connect_args": {
                "check_same_thread": False,
                "timeout": lock_timeout_ms / 1000,
            },
            "echo": False,
        }
        if poolclass is not None:
            kwargs["poolclass"] = poolclass
        engine = create_engine(database_url, **kwargs)
        _configure_sqlite(engine)
        return engine

    kwargs = {"pool_pre_ping": True, "echo": False}
    if poolclass is not None:
        kwargs["poolclass"] = poolclass
    else:
        kwargs["pool_size"] = pool_size
    return create_engine(database_url, **kwargs)


def get_engine() -> Engine:
    """Get or create the database engine."""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_db_engine(
            settings.get_database_url(),
            lock_timeout_ms=settings.lock_timeout_ms,
            pool_size=settings.pool_size,
        )
    return _engine
