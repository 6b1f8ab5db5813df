from __future__ import annotations

from ...users.model import User
from .base import ActiveManagerRule, OrganizationView


class ManagesTeamRule(ActiveManagerRule):
    """Active when the manager runs at least one team."""

    def is_active(self, manager: User, org: OrganizationView) -> bool:
        return any(team.manager_id == manager.user_id for team in org.teams)
