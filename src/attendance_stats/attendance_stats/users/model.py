from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Plain data object (no DB access). ``manager_id`` is the direct manager, if any.
    """

    user_id: int
    name: str
    surname: str
    email: str
    role: Role
    manager_id: Optional[int] = None

    @property
    def is_manager(self) -> bool:
        return self.role == Role.MANAGER

    def to_ref(self) -> dict:
        return {"id": self.user_id, "name": self.name, "surname": self.surname, "email": self.email}
