"""Store Entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from store_locator.domain.value_objects import Location


@dataclass(frozen=True)
class Store:
    """매장 엔티티.

    호출자가 제공한 매장 데이터를 감싼 불변 엔티티입니다.
    id는 수집 시점에 한 번 부여되며 이후 변경되지 않습니다.
    검색 결과 계산 값은 RankedStore 사본에만 기록합니다.
    """

    id: int
    name: str
    location: Location
    tags: frozenset[str] = field(default_factory=frozenset)
    address: str | None = None
    summary: str | None = None
    description: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    thumbnail: str | None = None
    marker_icon: dict[str, Any] | None = None

    def has_any_tag(self, tags: frozenset[str]) -> bool:
        return not self.tags.isdisjoint(tags)
