"""Durable storage for the planner's courses, tasks and settings."""
from __future__ import annotations

import json
from typing import Any, Callable, Dict, Iterable, List, Optional, Type, TypeVar

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel

from core.logs import get_logger
from core.settings import STORAGE, StorageSettings
from models.course import Course
from models.settings import AppSettings
from models.stored_record import StoredRecord
from models.task import Task
from storage.db import get_session
from utils.datetime_utils import utc_now


logger = get_logger("storage")

ModelT = TypeVar("ModelT", bound=SQLModel)


class StorageWriteWarning(UserWarning):
    """A write did not reach the database; the session keeps the in-memory value."""


def _serialise(payload: Any) -> str:
    return json.dumps(payload, ensure_ascii=False)


def _deserialise(raw: Optional[str]) -> Any:
    if not raw:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return None


class StorageManager:
    """Whole-record reads and replace-on-write for the three planner records.

    Each record is one JSON document in ``stored_record``. Reads never raise:
    a missing row, a broken payload or an unavailable database yields an empty
    collection or default settings. Writes return ``False`` on failure and keep
    the value in an in-memory overlay so the current session still reads it.
    """

    def __init__(
        self,
        session_factory: Callable[[], Session] = get_session,
        config: StorageSettings = STORAGE,
    ):
        self._session_factory = session_factory
        self._config = config
        self._unsaved: Dict[str, Any] = {}

    @property
    def has_unsaved_changes(self) -> bool:
        return bool(self._unsaved)

    # ----- collections -----
    def get_tasks(self) -> List[Task]:
        return self._load_list(self._config.tasks_key, Task)

    def save_tasks(self, tasks: Iterable[Task]) -> bool:
        return self._write(self._config.tasks_key, [t.model_dump(mode="json") for t in tasks])

    def get_courses(self) -> List[Course]:
        return self._load_list(self._config.courses_key, Course)

    def save_courses(self, courses: Iterable[Course]) -> bool:
        return self._write(self._config.courses_key, [c.model_dump(mode="json") for c in courses])

    # ----- settings -----
    def get_settings(self) -> AppSettings:
        data = self._read(self._config.settings_key)
        if not isinstance(data, dict):
            return AppSettings()
        try:
            return AppSettings.model_validate(data)
        except ValidationError as exc:
            logger.warning("Stored settings are invalid, using defaults: %s", exc)
            return AppSettings()

    def save_settings(self, settings: AppSettings) -> bool:
        return self._write(self._config.settings_key, settings.model_dump(mode="json"))

    # ------------------------------------------------------------------
    def _load_list(self, key: str, model: Type[ModelT]) -> List[ModelT]:
        data = self._read(key)
        if data is None:
            return []
        if not isinstance(data, list):
            logger.warning("Record %s is not a list, treating as empty", key)
            return []
        items: List[ModelT] = []
        for entry in data:
            try:
                items.append(model.model_validate(entry))
            except ValidationError as exc:
                logger.warning("Skipping invalid %s entry: %s", key, exc)
        return items

    def _read(self, key: str) -> Any:
        if key in self._unsaved:
            return _deserialise(self._unsaved[key])
        try:
            with self._session_factory() as session:
                row = session.get(StoredRecord, key)
                raw = row.payload if row else None
        except SQLAlchemyError as exc:
            logger.warning("Reading %s failed, using defaults: %s", key, exc)
            return None
        data = _deserialise(raw)
        if raw and data is None:
            logger.warning("Record %s holds unparseable JSON, using defaults", key)
        return data

    def _write(self, key: str, payload: Any) -> bool:
        text = _serialise(payload)
        try:
            with self._session_factory() as session:
                row = session.get(StoredRecord, key)
                if row is None:
                    row = StoredRecord(key=key, payload=text)
                else:
                    row.payload = text
                    row.updated_at = utc_now()
                session.add(row)
                session.commit()
        except SQLAlchemyError as exc:
            logger.warning("Writing %s failed, keeping it in memory: %s", key, exc)
            self._unsaved[key] = text
            return False
        self._unsaved.pop(key, None)
        logger.debug("Saved %s (%d bytes)", key, len(text))
        return True


__all__ = ["StorageManager", "StorageWriteWarning"]
