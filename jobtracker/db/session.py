from pathlib import Path
from typing import Optional, Union

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

MEMORY_PATH = ":memory:"


def unicode_lower(value: Optional[str]) -> Optional[str]:
    """SQL lower() replacement; SQLite's built-in only folds ASCII."""
    if value is None:
        return None
    return str(value).lower()


def create_db_engine(path: Union[str, Path]) -> Engine:
    """
    Build a SQLite engine for the database file at `path`.

    ":memory:" gives a single shared in-memory connection.
    """
    if str(path) == MEMORY_PATH:
        engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        # Requests are served from a threadpool
        engine = create_engine(
            f"sqlite:///{Path(path)}",
            connect_args={"check_same_thread": False},
        )

    @event.listens_for(engine, "connect")
    def _register_functions(dbapi_connection, connection_record):
        # icontains() compiles to lower(...) LIKE lower(...)
        dbapi_connection.create_function("lower", 1, unicode_lower, deterministic=True)

    return engine


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
