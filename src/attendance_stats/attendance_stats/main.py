from __future__ import annotations

import logging
from typing import Optional

from .common.logging_config import configure_logging
from .container import build_container
from .query.service import AttendanceStatisticsService
from .settings import load_settings

logger = logging.getLogger(__name__)


def create_service(settings_module: Optional[str] = None) -> AttendanceStatisticsService:
    """Build the query facade the HTTP layer calls into."""

    settings = load_settings(settings_module)
    configure_logging(settings.log_level)

    db = settings.db_config
    logger.info(
        "attendance-stats ready db=%s@%s:%s/%s grace=%smin workers=%s",
        db.get("user"),
        db.get("host"),
        db.get("port", 3306),
        db.get("database"),
        settings.late_grace_minutes,
        settings.max_workers,
    )
    return build_container(settings).stats_service
