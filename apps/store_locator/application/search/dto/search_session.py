"""Search Session DTO."""

from __future__ import annotations

from dataclasses import dataclass, field

from store_locator.domain.enums import SessionState
from store_locator.domain.value_objects import Location


@dataclass
class SearchSession:
    """위치 변경 이벤트 하나에 묶인 검색 주기.

    history에는 거쳐 간 상태가 순서대로 남습니다.
    """

    session_id: int
    radius: float
    reference_location: Location | None = None
    state: SessionState = SessionState.IDLE
    history: list[SessionState] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.history:
            self.history.append(self.state)

    def transition(self, state: SessionState) -> None:
        if self.state.is_terminal:
            raise RuntimeError(f"Session {self.session_id} already {self.state.value}")
        self.state = state
        self.history.append(state)
