"""Unit System Enum."""

from __future__ import annotations

from enum import Enum


class UnitSystem(str, Enum):
    """거리 단위 체계."""

    METRIC = "METRIC"
    IMPERIAL = "IMPERIAL"

    @classmethod
    def parse(cls, value: str | UnitSystem) -> UnitSystem:
        """대소문자 구분 없이 파싱합니다. 알 수 없는 값은 METRIC."""
        if isinstance(value, UnitSystem):
            return value
        if str(value).strip().upper() == cls.IMPERIAL.value:
            return cls.IMPERIAL
        return cls.METRIC

    @property
    def label(self) -> str:
        return "Mi" if self is UnitSystem.IMPERIAL else "Km"
