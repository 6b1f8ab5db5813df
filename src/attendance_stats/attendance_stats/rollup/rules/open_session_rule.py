from __future__ import annotations

from ...users.model import User
from .base import ActiveManagerRule, OrganizationView


class OpenSessionReportRule(ActiveManagerRule):
    """Active when at least one direct report is clocked in right now."""

    def is_active(self, manager: User, org: OrganizationView) -> bool:
        return not org.direct_reports(manager.user_id).isdisjoint(org.present_user_ids)
