from __future__ import annotations

from ...core.constants import DEFAULT_ACTIVE_MANAGER_RULE
from ...core.exceptions import ValidationError
from .base import ActiveManagerRule
from .manages_team_rule import ManagesTeamRule
from .open_session_rule import OpenSessionReportRule


def active_manager_rule(name: str = DEFAULT_ACTIVE_MANAGER_RULE) -> ActiveManagerRule:
    rule = (name or DEFAULT_ACTIVE_MANAGER_RULE).strip().lower()
    if rule == "open_session_report":
        return OpenSessionReportRule()
    if rule == "manages_team":
        return ManagesTeamRule()
    raise ValidationError(f"Unknown active manager rule: {name!r}")
