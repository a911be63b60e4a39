"""Filter State DTO."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FilterDefinition:
    """설정된 필터 하나."""

    tag: str
    label: str = ""


@dataclass(frozen=True)
class FilterState:
    """활성 필터 태그 집합."""

    active_tags: frozenset[str] = field(default_factory=frozenset)

    def is_active(self, tag: str) -> bool:
        return tag in self.active_tags
