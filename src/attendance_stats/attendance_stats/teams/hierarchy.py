from __future__ import annotations

from typing import Collection, Optional, Sequence

from ..core.exceptions import HierarchyError
from ..users.model import User
from .model import Team


def ensure_valid_hierarchy(
    users: Sequence[User],
    teams: Sequence[Team],
    *,
    only_user_ids: Optional[Collection[int]] = None,
) -> None:
    """Check manager references on plain entities before any aggregation.

    Only users with the ``manager`` role may be referenced as a manager, by a
    user or by a team, and every team member must exist. ``only_user_ids``
    limits the per-user check to a scope (e.g. one team's members) while still
    resolving managers against the full user list.
    """

    by_id = {u.user_id: u for u in users}
    problems: list[str] = []

    for user in users:
        if user.manager_id is None:
            continue
        if only_user_ids is not None and user.user_id not in only_user_ids:
            continue
        manager = by_id.get(user.manager_id)
        if manager is None or not manager.is_manager:
            problems.append(f"user {user.user_id} -> manager {user.manager_id}")

    for team in teams:
        manager = by_id.get(team.manager_id)
        if manager is None or not manager.is_manager:
            problems.append(f"team {team.team_id} -> manager {team.manager_id}")
        missing = sorted(set(team.member_ids) - by_id.keys())
        if missing:
            problems.append(f"team {team.team_id} -> unknown members {missing}")

    if problems:
        raise HierarchyError("Invalid team hierarchy: " + "; ".join(problems))
