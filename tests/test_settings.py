from datetime import datetime, timezone

import pytest

from config import get_settings_module
from src.attendance_stats.attendance_stats.container import build_reconstructor
from src.attendance_stats.attendance_stats.core.enums import PunchKind
from src.attendance_stats.attendance_stats.core.exceptions import ValidationError
from src.attendance_stats.attendance_stats.punches.model import PunchEvent
from src.attendance_stats.attendance_stats.settings import StatsSettings, load_settings


@pytest.mark.parametrize(
    "app_env, expected",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("test", "config.testing"),
        ("anything-else", "config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, app_env, expected):
    monkeypatch.setenv("APP_ENV", app_env)

    assert get_settings_module() == expected


def test_load_testing_settings():
    settings = load_settings("config.testing")

    assert settings.max_workers == 2
    assert settings.validate_hierarchy is True
    assert settings.late_grace_minutes == 5
    assert settings.duplicate_arrival_policy == "latest"
    assert settings.db_config["connection_timeout"] == 2


def test_reconstructor_follows_configured_policy():
    events = [
        PunchEvent(event_id=1, timestamp=datetime(2026, 1, 6, 8, tzinfo=timezone.utc), kind=PunchKind.ARRIVAL, user_id=1),
        PunchEvent(event_id=2, timestamp=datetime(2026, 1, 6, 9, tzinfo=timezone.utc), kind=PunchKind.ARRIVAL, user_id=1),
        PunchEvent(event_id=3, timestamp=datetime(2026, 1, 6, 17, tzinfo=timezone.utc), kind=PunchKind.DEPARTURE, user_id=1),
    ]

    latest = build_reconstructor(StatsSettings()).reconstruct(events)
    earliest = build_reconstructor(StatsSettings(duplicate_arrival_policy="earliest")).reconstruct(events)

    assert latest.total_hours == 8.0
    assert earliest.total_hours == 9.0


def test_unknown_policy_is_rejected():
    with pytest.raises(ValidationError):
        build_reconstructor(StatsSettings(open_session_policy="guess"))
