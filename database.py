import threading
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine, SQLModel, Session

MEMORY_DATABASE_URL = "sqlite://"


def create_memory_engine(echo: bool = False) -> Engine:
    """
    Create a process-local in-memory engine

    StaticPool hands every session the same connection, otherwise each
    connection would see its own empty database.
    """
    return create_engine(
        MEMORY_DATABASE_URL,
        echo=echo,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


def create_engine_lock() -> threading.Lock:
    """
    Lock shared by every store on one engine

    All sessions share a single sqlite3 connection, so only one session may
    be open at a time, reads included.
    """
    return threading.Lock()


def create_db_and_tables(engine: Engine):
    """Create all tables in the database"""
    SQLModel.metadata.create_all(engine)


@contextmanager
def open_session(engine: Engine, lock: threading.Lock) -> Iterator[Session]:
    """
    Session held under the engine lock

    Loaded objects stay readable after commit and close.
    """
    with lock:
        with Session(engine, expire_on_commit=False) as session:
            yield session
