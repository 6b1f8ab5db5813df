from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_DUPLICATE_ARRIVAL_POLICY, DEFAULT_OPEN_SESSION_POLICY
from ..core.exceptions import ValidationError
from .strategies.base import DuplicateArrivalStrategy, OpenSessionStrategy
from .strategies.earliest_strategy import KeepEarliestArrivalStrategy
from .strategies.latest_strategy import KeepLatestArrivalStrategy
from .strategies.open_session_strategy import CloseAtMidnightStrategy, ExcludeOpenSessionStrategy


@dataclass
class ReconstructionPolicyFactory:
    """Factory Pattern: map configured policy names to strategies."""

    def duplicate_arrival(self, name: str = DEFAULT_DUPLICATE_ARRIVAL_POLICY) -> DuplicateArrivalStrategy:
        policy = (name or DEFAULT_DUPLICATE_ARRIVAL_POLICY).strip().lower()
        if policy == "latest":
            return KeepLatestArrivalStrategy()
        if policy == "earliest":
            return KeepEarliestArrivalStrategy()
        raise ValidationError(f"Unknown duplicate arrival policy: {name!r}")

    def open_session(self, name: str = DEFAULT_OPEN_SESSION_POLICY) -> OpenSessionStrategy:
        policy = (name or DEFAULT_OPEN_SESSION_POLICY).strip().lower()
        if policy == "exclude":
            return ExcludeOpenSessionStrategy()
        if policy == "close_at_midnight":
            return CloseAtMidnightStrategy()
        raise ValidationError(f"Unknown open session policy: {name!r}")
