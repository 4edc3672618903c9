"""SQLite engine and session wiring."""
from pathlib import Path
from typing import Optional, Union

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine, Session

from core.settings import DB_PATH, STORAGE

# Ensure SQLModel metadata is populated
import models.stored_record  # noqa: F401


_engine: Optional[Engine] = None


def make_engine(path: Union[str, Path, None] = None) -> Engine:
    """Engine for ``path``; ``":memory:"`` gives a throwaway database."""

    if path is None:
        path = DB_PATH
    if str(path) == ":memory:":
        return create_engine("sqlite://", echo=STORAGE.echo_sql)
    return create_engine(f"sqlite:///{Path(path).as_posix()}", echo=STORAGE.echo_sql)


def init_db(engine: Optional[Engine] = None) -> Engine:
    global _engine
    if engine is None:
        DB_PATH.parent.mkdir(parents=True, exist_ok=True)
        engine = get_engine()
    else:
        _engine = engine
    SQLModel.metadata.create_all(engine)
    return engine


def get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = make_engine()
    return _engine


def get_session() -> Session:
    return Session(get_engine())


__all__ = ["get_engine", "get_session", "init_db", "make_engine"]
