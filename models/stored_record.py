"""Key-value table backing the planner collections."""
from __future__ import annotations

from datetime import datetime

from sqlmodel import Field, SQLModel

from utils.datetime_utils import utc_now


class StoredRecord(SQLModel, table=True):
    """One JSON document per collection (``courses``, ``tasks``) or record (``settings``)."""

    __tablename__ = "stored_record"

    key: str = Field(primary_key=True)
    payload: str
    updated_at: datetime = Field(default_factory=utc_now)


__all__ = ["StoredRecord"]
