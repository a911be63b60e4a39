"""Search Session State Enum."""

from enum import Enum


class SessionState(str, Enum):
    """검색 세션 상태.

    Idle → Resolving → RankingApprox → RefiningPrecise → Committed
    Resolving / RefiningPrecise 에서 더 새로운 세션이 시작되면 Aborted.
    """

    IDLE = "idle"
    RESOLVING = "resolving"
    RANKING_APPROX = "ranking_approx"
    REFINING_PRECISE = "refining_precise"
    COMMITTED = "committed"
    ABORTED = "aborted"

    @property
    def is_terminal(self) -> bool:
        return self in (SessionState.COMMITTED, SessionState.ABORTED)
