from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from ...teams.model import Team
from ...users.model import User


@dataclass(frozen=True)
class OrganizationView:
    """What an active-manager rule may look at."""

    users: Sequence[User]
    teams: Sequence[Team]
    present_user_ids: frozenset[int]

    def direct_reports(self, manager_id: int) -> frozenset[int]:
        """Users naming the manager directly, plus members of the manager's teams."""

        reports = {u.user_id for u in self.users if u.manager_id == manager_id}
        for team in self.teams:
            if team.manager_id == manager_id:
                reports.update(team.member_ids)
        reports.discard(manager_id)
        return frozenset(reports)


class ActiveManagerRule(ABC):
    """Strategy Pattern: decide whether a manager counts as active."""

    @abstractmethod
    def is_active(self, manager: User, org: OrganizationView) -> bool:
        raise NotImplementedError
