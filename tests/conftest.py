from datetime import datetime
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
from sqlmodel import Session, SQLModel

from models import Task
from storage.db import make_engine
from storage.store import StorageManager


@pytest.fixture()
def engine():
    engine = make_engine(":memory:")
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture()
def session_factory(engine):
    def factory():
        return Session(engine)

    return factory


@pytest.fixture()
def store(session_factory):
    return StorageManager(session_factory=session_factory)


@pytest.fixture()
def essay_and_quiz():
    essay = Task(
        title="Essay",
        due_date=datetime(2024, 3, 1),
        completed=False,
        priority="high",
    )
    quiz = Task(
        title="Quiz",
        due_date=datetime(2024, 2, 20),
        completed=True,
        priority="low",
    )
    return [essay, quiz]
