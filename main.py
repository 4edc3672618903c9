# planner/main.py
import os, sys
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from core.logs import setup_logging
from core.settings import APP_NAME, DB_PATH
from services.planner import PlannerService
from storage.db import init_db
from storage.store import StorageManager


def create_app() -> PlannerService:
    """Wire logging, the database and the controller; the UI calls into the result."""
    logger = setup_logging()
    init_db()
    logger.info("%s started, db=%s", APP_NAME, DB_PATH)
    return PlannerService(StorageManager())


if __name__ == "__main__":
    app = create_app()
    stats = app.statistics()
    print(
        f"{APP_NAME}: {stats.total} tasks, {stats.pending} pending, "
        f"{stats.completed} completed, {stats.overdue} overdue"
    )
