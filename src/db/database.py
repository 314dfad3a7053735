"""Generate database session"""

from typing import Generator

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings, settings
from src.db.schema import Base


def enforce_sqlite_foreign_keys(bind: Engine) -> None:
    """SQLite ignores foreign keys unless every connection switches them on."""

    @event.listens_for(bind, "connect")
    def _set_pragma(dbapi_connection, _connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(config: Settings = settings) -> Engine:
    connect_args = {}
    if config.DB_SOURCE.startswith("sqlite"):
        # the API serves requests from a threadpool
        connect_args["check_same_thread"] = False
    bind = create_engine(
        config.DB_SOURCE, echo=config.SQL_ECHO, connect_args=connect_args
    )
    if bind.dialect.name == "sqlite":
        enforce_sqlite_foreign_keys(bind)
    return bind


engine = build_engine()
SessionLocal = sessionmaker(bind=engine, autoflush=False)


def create_tables(bind: Engine = engine) -> None:
    """Ensure all tables are created"""
    Base.metadata.create_all(bind=bind)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
