from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv

from config import get_settings_module

from .core.constants import (
    DEFAULT_ACTIVE_MANAGER_RULE,
    DEFAULT_DUPLICATE_ARRIVAL_POLICY,
    DEFAULT_LATE_GRACE_MINUTES,
    DEFAULT_MAX_WORKERS,
    DEFAULT_OPEN_SESSION_POLICY,
)


@dataclass(frozen=True)
class StatsSettings:
    db_config: dict = field(default_factory=dict)
    log_level: str = "INFO"
    late_grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES
    max_workers: int = DEFAULT_MAX_WORKERS
    duplicate_arrival_policy: str = DEFAULT_DUPLICATE_ARRIVAL_POLICY
    open_session_policy: str = DEFAULT_OPEN_SESSION_POLICY
    active_manager_rule: str = DEFAULT_ACTIVE_MANAGER_RULE
    validate_hierarchy: bool = False

    @classmethod
    def from_module(cls, settings: ModuleType) -> "StatsSettings":
        return cls(
            db_config=dict(getattr(settings, "DB_CONFIG", {})),
            log_level=str(getattr(settings, "LOG_LEVEL", "INFO")),
            late_grace_minutes=int(getattr(settings, "LATE_GRACE_MINUTES", DEFAULT_LATE_GRACE_MINUTES)),
            max_workers=int(getattr(settings, "MAX_WORKERS", DEFAULT_MAX_WORKERS)),
            duplicate_arrival_policy=str(getattr(settings, "DUPLICATE_ARRIVAL_POLICY", DEFAULT_DUPLICATE_ARRIVAL_POLICY)),
            open_session_policy=str(getattr(settings, "OPEN_SESSION_POLICY", DEFAULT_OPEN_SESSION_POLICY)),
            active_manager_rule=str(getattr(settings, "ACTIVE_MANAGER_RULE", DEFAULT_ACTIVE_MANAGER_RULE)),
            validate_hierarchy=bool(getattr(settings, "VALIDATE_HIERARCHY", False)),
        )


def load_settings(module_name: Optional[str] = None) -> StatsSettings:
    # .env must be loaded before the settings module reads os.environ.
    load_dotenv(override=False)
    settings = importlib.import_module(module_name or get_settings_module())
    return StatsSettings.from_module(settings)
