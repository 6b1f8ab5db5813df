from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Team


class TeamRepository(Protocol):
    def get_by_id(self, team_id: int) -> Optional[Team]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Team]:
        raise NotImplementedError

    def list_for_user(self, user_id: int) -> Sequence[Team]:
        """Teams the user is a member of (a user may belong to several)."""

        raise NotImplementedError
